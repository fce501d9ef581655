"""
Migration inicial de Pedidos.

Cria as tabelas:
- pedidos
- pedidos_itens
- pedidos_itens_transportes
- pedidos_propostas: histórico da negociação
"""

from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('usuarios', '0001_initial'),
        ('fornecedores', '0001_initial'),
        ('produtores', '0001_initial'),
    ]

    operations = [
        # =================================================================
        # Tabela: pedidos
        # =================================================================
        migrations.CreateModel(
            name='PedidoModel',
            fields=[
                ('id', models.BigAutoField(
                    auto_created=True, primary_key=True, serialize=False, verbose_name='ID'
                )),
                ('status', models.CharField(
                    max_length=30,
                    choices=[
                        ('EmNegociacao', 'EmNegociacao'),
                        ('Fechado', 'Fechado'),
                        ('CanceladoPorTempoLimite', 'CanceladoPorTempoLimite'),
                        ('CanceladoPeloComprador', 'CanceladoPeloComprador'),
                    ],
                    default='EmNegociacao',
                    db_index=True,
                )),
                ('status_carrinho', models.CharField(
                    max_length=20,
                    choices=[('EmAberto', 'EmAberto'), ('Finalizado', 'Finalizado')],
                    default='EmAberto',
                )),
                ('quantidade_itens', models.IntegerField(default=0)),
                ('totais', models.JSONField(null=True, blank=True)),
                ('permite_contato', models.BooleanField(default=False)),
                ('negociar_pedido', models.BooleanField(default=False)),
                ('data_limite_interacao', models.DateTimeField(db_index=True)),
                ('criado_em', models.DateTimeField()),
                ('atualizado_em', models.DateTimeField(null=True, blank=True)),
                ('fornecedor', models.ForeignKey(
                    on_delete=django.db.models.deletion.PROTECT,
                    related_name='pedidos',
                    to='fornecedores.fornecedormodel',
                )),
                ('produtor', models.ForeignKey(
                    on_delete=django.db.models.deletion.PROTECT,
                    related_name='pedidos',
                    to='produtores.produtormodel',
                )),
            ],
            options={
                'db_table': 'pedidos',
                'ordering': ['-criado_em'],
            },
        ),
        migrations.AddIndex(
            model_name='pedidomodel',
            index=models.Index(
                fields=['status', 'data_limite_interacao'], name='idx_pedido_status_prazo'
            ),
        ),

        # =================================================================
        # Tabelas: pedidos_itens / pedidos_itens_transportes
        # =================================================================
        migrations.CreateModel(
            name='PedidoItemModel',
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
                ('valor_total', models.DecimalField(max_digits=18, decimal_places=4)),
                ('valor_desconto', models.DecimalField(max_digits=18, decimal_places=4)),
                ('valor_final', models.DecimalField(max_digits=18, decimal_places=4)),
                ('observacoes', models.TextField(null=True, blank=True)),
                ('dados_adicionais', models.JSONField(null=True, blank=True)),
                ('criado_em', models.DateTimeField()),
                ('atualizado_em', models.DateTimeField(null=True, blank=True)),
                ('pedido', models.ForeignKey(
                    on_delete=django.db.models.deletion.CASCADE,
                    related_name='itens',
                    to='pedidos.pedidomodel',
                )),
            ],
            options={
                'db_table': 'pedidos_itens',
                'ordering': ['id'],
            },
        ),
        migrations.CreateModel(
            name='PedidoItemTransporteModel',
            fields=[
                ('id', models.BigAutoField(
                    auto_created=True, primary_key=True, serialize=False, verbose_name='ID'
                )),
                ('quantidade', models.DecimalField(max_digits=18, decimal_places=4)),
                ('valor_frete', models.DecimalField(
                    max_digits=18, decimal_places=4, default=0
                )),
                ('peso_total', models.DecimalField(
                    max_digits=18, decimal_places=4, null=True, blank=True
                )),
                ('volume_total', models.DecimalField(
                    max_digits=18, decimal_places=4, null=True, blank=True
                )),
                ('endereco_origem', models.CharField(max_length=500, null=True, blank=True)),
                ('endereco_destino', models.CharField(max_length=500, null=True, blank=True)),
                ('data_agendamento', models.DateTimeField(null=True, blank=True)),
                ('informacoes_transporte', models.JSONField(null=True, blank=True)),
                ('observacoes', models.TextField(null=True, blank=True)),
                ('criado_em', models.DateTimeField()),
                ('atualizado_em', models.DateTimeField(null=True, blank=True)),
                ('pedido_item', models.ForeignKey(
                    on_delete=django.db.models.deletion.CASCADE,
                    related_name='transportes',
                    to='pedidos.pedidoitemmodel',
                )),
            ],
            options={
                'db_table': 'pedidos_itens_transportes',
                'ordering': ['id'],
            },
        ),

        # =================================================================
        # Tabela: pedidos_propostas
        # =================================================================
        migrations.CreateModel(
            name='PropostaModel',
            fields=[
                ('id', models.BigAutoField(
                    auto_created=True, primary_key=True, serialize=False, verbose_name='ID'
                )),
                ('acao_comprador', models.CharField(
                    max_length=20,
                    choices=[
                        ('Iniciou', 'Iniciou'),
                        ('Aceitou', 'Aceitou'),
                        ('AlterouCarrinho', 'AlterouCarrinho'),
                        ('Cancelou', 'Cancelou'),
                    ],
                    null=True,
                    blank=True,
                )),
                ('observacao', models.TextField(null=True, blank=True)),
                ('criado_em', models.DateTimeField(db_index=True)),
                ('atualizado_em', models.DateTimeField(null=True, blank=True)),
                ('pedido', models.ForeignKey(
                    on_delete=django.db.models.deletion.CASCADE,
                    related_name='propostas',
                    to='pedidos.pedidomodel',
                )),
                ('usuario_produtor', models.ForeignKey(
                    on_delete=django.db.models.deletion.SET_NULL,
                    null=True,
                    blank=True,
                    related_name='propostas_produtor',
                    to='usuarios.usuariomodel',
                )),
                ('usuario_fornecedor', models.ForeignKey(
                    on_delete=django.db.models.deletion.SET_NULL,
                    null=True,
                    blank=True,
                    related_name='propostas_fornecedor',
                    to='usuarios.usuariomodel',
                )),
            ],
            options={
                'db_table': 'pedidos_propostas',
                'ordering': ['-criado_em', '-id'],
            },
        ),
    ]
