"""
Migration inicial de Combos.

Cria as tabelas:
- combos
- combos_itens
- combos_locais_recebimento
- combos_categorias_desconto
"""

from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('fornecedores', '0001_initial'),
        ('safras', '0001_initial'),
    ]

    operations = [
        # =================================================================
        # Tabela: combos
        # =================================================================
        migrations.CreateModel(
            name='ComboModel',
            fields=[
                ('id', models.BigAutoField(
                    auto_created=True, primary_key=True, serialize=False, verbose_name='ID'
                )),
                ('nome', models.CharField(max_length=200)),
                ('descricao', models.TextField(null=True, blank=True)),
                ('hectare_minimo', models.DecimalField(max_digits=18, decimal_places=4)),
                ('hectare_maximo', models.DecimalField(max_digits=18, decimal_places=4)),
                ('data_inicio', models.DateTimeField()),
                ('data_fim', models.DateTimeField(db_index=True)),
                ('modalidade_pagamento', models.CharField(
                    max_length=20,
                    choices=[('Normal', 'Normal'), ('Barter', 'Barter')],
                )),
                ('status', models.CharField(
                    max_length=20,
                    choices=[
                        ('Ativo', 'Ativo'),
                        ('Inativo', 'Inativo'),
                        ('Expirado', 'Expirado'),
                        ('Suspenso', 'Suspenso'),
                    ],
                    default='Ativo',
                    db_index=True,
                )),
                ('restricoes_municipios', models.JSONField(
                    null=True,
                    blank=True,
                    help_text='Lista de IDs de municípios permitidos (vazio = sem restrição)',
                )),
                ('permite_alteracao_item', models.BooleanField(default=True)),
                ('permite_exclusao_item', models.BooleanField(default=True)),
                ('criado_em', models.DateTimeField()),
                ('atualizado_em', models.DateTimeField(null=True, blank=True)),
                ('fornecedor', models.ForeignKey(
                    on_delete=django.db.models.deletion.CASCADE,
                    related_name='combos',
                    to='fornecedores.fornecedormodel',
                )),
                ('safra', models.ForeignKey(
                    on_delete=django.db.models.deletion.PROTECT,
                    related_name='combos',
                    to='safras.saframodel',
                )),
            ],
            options={
                'db_table': 'combos',
                'ordering': ['-criado_em'],
            },
        ),
        migrations.AddIndex(
            model_name='combomodel',
            index=models.Index(
                fields=['fornecedor', 'safra'], name='idx_combo_fornecedor_safra'
            ),
        ),

        # =================================================================
        # Tabelas filhas
        # =================================================================
        migrations.CreateModel(
            name='ComboItemModel',
            fields=[
                ('id', models.BigAutoField(
                    auto_created=True, primary_key=True, serialize=False, verbose_name='ID'
                )),
                ('produto_id', models.IntegerField()),
                ('quantidade', models.DecimalField(max_digits=18, decimal_places=4)),
                ('preco_unitario', models.DecimalField(max_digits=18, decimal_places=4)),
                ('percentual_desconto', models.DecimalField(
                    max_digits=5, decimal_places=2, default=0
                )),
                ('produto_obrigatorio', models.BooleanField(default=False)),
                ('ordem', models.IntegerField(default=0)),
                ('criado_em', models.DateTimeField()),
                ('atualizado_em', models.DateTimeField(null=True, blank=True)),
                ('combo', models.ForeignKey(
                    on_delete=django.db.models.deletion.CASCADE,
                    related_name='itens',
                    to='combos.combomodel',
                )),
            ],
            options={
                'db_table': 'combos_itens',
                'ordering': ['ordem', 'id'],
            },
        ),
        migrations.CreateModel(
            name='ComboLocalRecebimentoModel',
            fields=[
                ('id', models.BigAutoField(
                    auto_created=True, primary_key=True, serialize=False, verbose_name='ID'
                )),
                ('ponto_distribuicao_id', models.IntegerField()),
                ('preco_adicional', models.DecimalField(
                    max_digits=18, decimal_places=4, default=0
                )),
                ('percentual_desconto', models.DecimalField(
                    max_digits=5, decimal_places=2, default=0
                )),
                ('local_padrao', models.BooleanField(default=False)),
                ('observacoes', models.CharField(max_length=500, null=True, blank=True)),
                ('criado_em', models.DateTimeField()),
                ('atualizado_em', models.DateTimeField(null=True, blank=True)),
                ('combo', models.ForeignKey(
                    on_delete=django.db.models.deletion.CASCADE,
                    related_name='locais_recebimento',
                    to='combos.combomodel',
                )),
            ],
            options={
                'db_table': 'combos_locais_recebimento',
            },
        ),
        migrations.CreateModel(
            name='ComboCategoriaDescontoModel',
            fields=[
                ('id', models.BigAutoField(
                    auto_created=True, primary_key=True, serialize=False, verbose_name='ID'
                )),
                ('categoria_id', models.IntegerField()),
                ('tipo_desconto', models.CharField(
                    max_length=20,
                    choices=[
                        ('Percentual', 'Percentual'),
                        ('ValorFixo', 'ValorFixo'),
                        ('PorHectare', 'PorHectare'),
                    ],
                )),
                ('percentual_desconto', models.DecimalField(
                    max_digits=5, decimal_places=2, default=0
                )),
                ('valor_desconto_fixo', models.DecimalField(
                    max_digits=18, decimal_places=4, default=0
                )),
                ('valor_desconto_por_hectare', models.DecimalField(
                    max_digits=18, decimal_places=4, default=0
                )),
                ('hectare_minimo', models.DecimalField(
                    max_digits=18, decimal_places=4, default=0
                )),
                ('hectare_maximo', models.DecimalField(
                    max_digits=18, decimal_places=4, null=True, blank=True
                )),
                ('ativo', models.BooleanField(default=True)),
                ('criado_em', models.DateTimeField()),
                ('atualizado_em', models.DateTimeField(null=True, blank=True)),
                ('combo', models.ForeignKey(
                    on_delete=django.db.models.deletion.CASCADE,
                    related_name='categorias_desconto',
                    to='combos.combomodel',
                )),
            ],
            options={
                'db_table': 'combos_categorias_desconto',
            },
        ),
    ]
