"""
Migration inicial de Pagamentos.
"""

from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('culturas', '0001_initial'),
        ('fornecedores', '0001_initial'),
    ]

    operations = [
        migrations.CreateModel(
            name='FormaPagamentoModel',
            fields=[
                ('id', models.BigAutoField(
                    auto_created=True, primary_key=True, serialize=False, verbose_name='ID'
                )),
                ('descricao', models.CharField(max_length=45)),
                ('ativo', models.BooleanField(default=True, db_index=True)),
                ('criado_em', models.DateTimeField()),
                ('atualizado_em', models.DateTimeField(null=True, blank=True)),
            ],
            options={
                'db_table': 'formas_pagamento',
                'verbose_name': 'Forma de Pagamento',
                'verbose_name_plural': 'Formas de Pagamento',
                'ordering': ['descricao'],
            },
        ),
        migrations.CreateModel(
            name='CulturaFormaPagamentoModel',
            fields=[
                ('id', models.BigAutoField(
                    auto_created=True, primary_key=True, serialize=False, verbose_name='ID'
                )),
                ('ativo', models.BooleanField(default=True)),
                ('criado_em', models.DateTimeField()),
                ('atualizado_em', models.DateTimeField(null=True, blank=True)),
                ('fornecedor', models.ForeignKey(
                    on_delete=django.db.models.deletion.CASCADE,
                    related_name='culturas_formas_pagamento',
                    to='fornecedores.fornecedormodel',
                )),
                ('cultura', models.ForeignKey(
                    on_delete=django.db.models.deletion.PROTECT,
                    related_name='formas_pagamento',
                    to='culturas.culturamodel',
                )),
                ('forma_pagamento', models.ForeignKey(
                    on_delete=django.db.models.deletion.PROTECT,
                    related_name='associacoes',
                    to='pagamentos.formapagamentomodel',
                )),
            ],
            options={
                'db_table': 'culturas_formas_pagamento',
            },
        ),
        migrations.AddConstraint(
            model_name='culturaformapagamentomodel',
            constraint=models.UniqueConstraint(
                fields=('fornecedor', 'cultura', 'forma_pagamento'),
                name='uq_cultura_forma_pagamento',
            ),
        ),
    ]
