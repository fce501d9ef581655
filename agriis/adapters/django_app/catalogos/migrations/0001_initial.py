"""
Migration inicial de Catálogos.
"""

from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('culturas', '0001_initial'),
        ('safras', '0001_initial'),
    ]

    operations = [
        migrations.CreateModel(
            name='CatalogoModel',
            fields=[
                ('id', models.BigAutoField(
                    auto_created=True, primary_key=True, serialize=False, verbose_name='ID'
                )),
                ('ponto_distribuicao_id', models.IntegerField(db_index=True)),
                ('categoria_id', models.IntegerField(db_index=True)),
                ('moeda', models.CharField(max_length=10, default='Real')),
                ('data_inicio', models.DateField()),
                ('data_fim', models.DateField(null=True, blank=True)),
                ('ativo', models.BooleanField(default=True, db_index=True)),
                ('criado_em', models.DateTimeField()),
                ('atualizado_em', models.DateTimeField(null=True, blank=True)),
                ('safra', models.ForeignKey(
                    on_delete=django.db.models.deletion.PROTECT,
                    related_name='catalogos',
                    to='safras.saframodel',
                )),
                ('cultura', models.ForeignKey(
                    on_delete=django.db.models.deletion.PROTECT,
                    related_name='catalogos',
                    to='culturas.culturamodel',
                )),
            ],
            options={
                'db_table': 'catalogos',
            },
        ),
        migrations.AddIndex(
            model_name='catalogomodel',
            index=models.Index(
                fields=['data_inicio', 'data_fim'], name='idx_catalogo_vigencia'
            ),
        ),
        migrations.AddConstraint(
            model_name='catalogomodel',
            constraint=models.UniqueConstraint(
                fields=('safra', 'ponto_distribuicao_id', 'cultura', 'categoria_id'),
                name='uq_catalogo_chave',
            ),
        ),
        migrations.CreateModel(
            name='CatalogoItemModel',
            fields=[
                ('id', models.BigAutoField(
                    auto_created=True, primary_key=True, serialize=False, verbose_name='ID'
                )),
                ('produto_id', models.IntegerField(db_index=True)),
                ('estrutura_precos', models.JSONField(default=dict)),
                ('preco_base', models.DecimalField(
                    max_digits=18, decimal_places=4, null=True, blank=True
                )),
                ('ativo', models.BooleanField(default=True)),
                ('criado_em', models.DateTimeField()),
                ('atualizado_em', models.DateTimeField(null=True, blank=True)),
                ('catalogo', models.ForeignKey(
                    on_delete=django.db.models.deletion.CASCADE,
                    related_name='itens',
                    to='catalogos.catalogomodel',
                )),
            ],
            options={
                'db_table': 'catalogos_itens',
            },
        ),
        migrations.AddConstraint(
            model_name='catalogoitemmodel',
            constraint=models.UniqueConstraint(
                fields=('catalogo', 'produto_id'), name='uq_catalogo_item_produto'
            ),
        ),
    ]
