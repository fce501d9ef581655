"""
Migration inicial de Propriedades.

Cria as tabelas:
- propriedades
- talhoes
- propriedades_culturas: área plantada por cultura e safra
"""

from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('culturas', '0001_initial'),
        ('safras', '0001_initial'),
        ('produtores', '0001_initial'),
    ]

    operations = [
        migrations.CreateModel(
            name='PropriedadeModel',
            fields=[
                ('id', models.BigAutoField(
                    auto_created=True, primary_key=True, serialize=False, verbose_name='ID'
                )),
                ('nome', models.CharField(max_length=200)),
                ('nirf', models.CharField(max_length=50, null=True, blank=True)),
                ('inscricao_estadual', models.CharField(max_length=30, null=True, blank=True)),
                ('area_total', models.DecimalField(max_digits=18, decimal_places=4)),
                ('endereco_id', models.IntegerField(null=True, blank=True)),
                ('dados_adicionais', models.JSONField(default=dict, blank=True)),
                ('criado_em', models.DateTimeField()),
                ('atualizado_em', models.DateTimeField(null=True, blank=True)),
                ('produtor', models.ForeignKey(
                    on_delete=django.db.models.deletion.CASCADE,
                    related_name='propriedades',
                    to='produtores.produtormodel',
                )),
            ],
            options={
                'db_table': 'propriedades',
                'ordering': ['nome'],
            },
        ),
        migrations.CreateModel(
            name='TalhaoModel',
            fields=[
                ('id', models.BigAutoField(
                    auto_created=True, primary_key=True, serialize=False, verbose_name='ID'
                )),
                ('nome', models.CharField(max_length=100)),
                ('area', models.DecimalField(max_digits=18, decimal_places=4)),
                ('descricao', models.CharField(max_length=500, null=True, blank=True)),
                ('criado_em', models.DateTimeField()),
                ('atualizado_em', models.DateTimeField(null=True, blank=True)),
                ('propriedade', models.ForeignKey(
                    on_delete=django.db.models.deletion.CASCADE,
                    related_name='talhoes',
                    to='propriedades.propriedademodel',
                )),
            ],
            options={
                'db_table': 'talhoes',
                'ordering': ['id'],
            },
        ),
        migrations.CreateModel(
            name='PropriedadeCulturaModel',
            fields=[
                ('id', models.BigAutoField(
                    auto_created=True, primary_key=True, serialize=False, verbose_name='ID'
                )),
                ('area', models.DecimalField(max_digits=18, decimal_places=4)),
                ('criado_em', models.DateTimeField()),
                ('atualizado_em', models.DateTimeField(null=True, blank=True)),
                ('propriedade', models.ForeignKey(
                    on_delete=django.db.models.deletion.CASCADE,
                    related_name='culturas',
                    to='propriedades.propriedademodel',
                )),
                ('cultura', models.ForeignKey(
                    on_delete=django.db.models.deletion.PROTECT,
                    related_name='+',
                    to='culturas.culturamodel',
                )),
                ('safra', models.ForeignKey(
                    on_delete=django.db.models.deletion.SET_NULL,
                    null=True,
                    blank=True,
                    related_name='+',
                    to='safras.saframodel',
                )),
            ],
            options={
                'db_table': 'propriedades_culturas',
                'ordering': ['id'],
            },
        ),
    ]
