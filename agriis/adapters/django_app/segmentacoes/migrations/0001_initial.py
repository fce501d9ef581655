"""
Migration inicial de Segmentações.

Cria as tabelas:
- segmentacoes
- segmentacoes_grupos: faixas de área
- segmentacoes_grupos_descontos: desconto por categoria em cada faixa
"""

from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('fornecedores', '0001_initial'),
    ]

    operations = [
        migrations.CreateModel(
            name='SegmentacaoModel',
            fields=[
                ('id', models.BigAutoField(
                    auto_created=True, primary_key=True, serialize=False, verbose_name='ID'
                )),
                ('nome', models.CharField(max_length=200)),
                ('descricao', models.CharField(max_length=500, null=True, blank=True)),
                ('eh_padrao', models.BooleanField(default=False)),
                ('configuracao_territorial', models.JSONField(null=True, blank=True)),
                ('ativo', models.BooleanField(default=True, db_index=True)),
                ('criado_em', models.DateTimeField()),
                ('atualizado_em', models.DateTimeField(null=True, blank=True)),
                ('fornecedor', models.ForeignKey(
                    on_delete=django.db.models.deletion.CASCADE,
                    related_name='segmentacoes',
                    to='fornecedores.fornecedormodel',
                )),
            ],
            options={
                'db_table': 'segmentacoes',
                'ordering': ['id'],
            },
        ),
        migrations.CreateModel(
            name='GrupoModel',
            fields=[
                ('id', models.BigAutoField(
                    auto_created=True, primary_key=True, serialize=False, verbose_name='ID'
                )),
                ('nome', models.CharField(max_length=200)),
                ('descricao', models.CharField(max_length=500, null=True, blank=True)),
                ('area_minima', models.DecimalField(max_digits=18, decimal_places=4)),
                ('area_maxima', models.DecimalField(
                    max_digits=18, decimal_places=4, null=True, blank=True
                )),
                ('ativo', models.BooleanField(default=True)),
                ('criado_em', models.DateTimeField()),
                ('atualizado_em', models.DateTimeField(null=True, blank=True)),
                ('segmentacao', models.ForeignKey(
                    on_delete=django.db.models.deletion.CASCADE,
                    related_name='grupos',
                    to='segmentacoes.segmentacaomodel',
                )),
            ],
            options={
                'db_table': 'segmentacoes_grupos',
                'ordering': ['area_minima'],
            },
        ),
        migrations.CreateModel(
            name='GrupoSegmentacaoModel',
            fields=[
                ('id', models.BigAutoField(
                    auto_created=True, primary_key=True, serialize=False, verbose_name='ID'
                )),
                ('categoria_id', models.IntegerField()),
                ('percentual_desconto', models.DecimalField(max_digits=5, decimal_places=2)),
                ('observacoes', models.CharField(max_length=500, null=True, blank=True)),
                ('ativo', models.BooleanField(default=True)),
                ('criado_em', models.DateTimeField()),
                ('atualizado_em', models.DateTimeField(null=True, blank=True)),
                ('grupo', models.ForeignKey(
                    on_delete=django.db.models.deletion.CASCADE,
                    related_name='descontos',
                    to='segmentacoes.grupomodel',
                )),
            ],
            options={
                'db_table': 'segmentacoes_grupos_descontos',
            },
        ),
        migrations.AddConstraint(
            model_name='gruposegmentacaomodel',
            constraint=models.UniqueConstraint(
                fields=('grupo', 'categoria_id'), name='uq_grupo_categoria'
            ),
        ),
    ]
