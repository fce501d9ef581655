"""
Django Models para o domínio de Pedidos.

Pedido 1-N PedidoItem 1-N PedidoItemTransporte (cascade).
Pedido 1-N Proposta (cascade), persistida pelo repositório próprio.
"""

from django.db import models

from agriis.core.pedidos.entities import AcaoCompradorPedido, StatusCarrinho, StatusPedido


class PedidoModel(models.Model):

    STATUS_CHOICES = [(s.value, s.value) for s in StatusPedido]
    STATUS_CARRINHO_CHOICES = [(s.value, s.value) for s in StatusCarrinho]

    status = models.CharField(
        max_length=30,
        choices=STATUS_CHOICES,
        default=StatusPedido.EM_NEGOCIACAO.value,
        db_index=True,
    )
    status_carrinho = models.CharField(
        max_length=20,
        choices=STATUS_CARRINHO_CHOICES,
        default=StatusCarrinho.EM_ABERTO.value,
    )
    quantidade_itens = models.IntegerField(default=0)
    totais = models.JSONField(null=True, blank=True)
    permite_contato = models.BooleanField(default=False)
    negociar_pedido = models.BooleanField(default=False)
    data_limite_interacao = models.DateTimeField(db_index=True)
    fornecedor = models.ForeignKey(
        'fornecedores.FornecedorModel', on_delete=models.PROTECT, related_name='pedidos'
    )
    produtor = models.ForeignKey(
        'produtores.ProdutorModel', on_delete=models.PROTECT, related_name='pedidos'
    )

    criado_em = models.DateTimeField()
    atualizado_em = models.DateTimeField(null=True, blank=True)

    class Meta:
        db_table = 'pedidos'
        ordering = ['-criado_em']
        indexes = [
            models.Index(
                fields=['status', 'data_limite_interacao'], name='idx_pedido_status_prazo'
            ),
        ]

    def __str__(self):
        return f"Pedido {self.id} ({self.status})"


class PedidoItemModel(models.Model):

    pedido = models.ForeignKey(PedidoModel, on_delete=models.CASCADE, related_name='itens')
    produto_id = models.IntegerField()
    quantidade = models.DecimalField(max_digits=18, decimal_places=4)
    preco_unitario = models.DecimalField(max_digits=18, decimal_places=4)
    percentual_desconto = models.DecimalField(max_digits=5, decimal_places=2, default=0)
    valor_total = models.DecimalField(max_digits=18, decimal_places=4)
    valor_desconto = models.DecimalField(max_digits=18, decimal_places=4)
    valor_final = models.DecimalField(max_digits=18, decimal_places=4)
    observacoes = models.TextField(null=True, blank=True)
    dados_adicionais = models.JSONField(null=True, blank=True)

    criado_em = models.DateTimeField()
    atualizado_em = models.DateTimeField(null=True, blank=True)

    class Meta:
        db_table = 'pedidos_itens'
        ordering = ['id']


class PedidoItemTransporteModel(models.Model):

    pedido_item = models.ForeignKey(
        PedidoItemModel, on_delete=models.CASCADE, related_name='transportes'
    )
    quantidade = models.DecimalField(max_digits=18, decimal_places=4)
    valor_frete = models.DecimalField(max_digits=18, decimal_places=4, default=0)
    peso_total = models.DecimalField(max_digits=18, decimal_places=4, null=True, blank=True)
    volume_total = models.DecimalField(max_digits=18, decimal_places=4, null=True, blank=True)
    endereco_origem = models.CharField(max_length=500, null=True, blank=True)
    endereco_destino = models.CharField(max_length=500, null=True, blank=True)
    data_agendamento = models.DateTimeField(null=True, blank=True)
    informacoes_transporte = models.JSONField(null=True, blank=True)
    observacoes = models.TextField(null=True, blank=True)

    criado_em = models.DateTimeField()
    atualizado_em = models.DateTimeField(null=True, blank=True)

    class Meta:
        db_table = 'pedidos_itens_transportes'
        ordering = ['id']


class PropostaModel(models.Model):

    ACAO_CHOICES = [(a.value, a.value) for a in AcaoCompradorPedido]

    pedido = models.ForeignKey(PedidoModel, on_delete=models.CASCADE, related_name='propostas')
    acao_comprador = models.CharField(max_length=20, choices=ACAO_CHOICES, null=True, blank=True)
    observacao = models.TextField(null=True, blank=True)
    usuario_produtor = models.ForeignKey(
        'usuarios.UsuarioModel',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='propostas_produtor',
    )
    usuario_fornecedor = models.ForeignKey(
        'usuarios.UsuarioModel',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='propostas_fornecedor',
    )

    criado_em = models.DateTimeField(db_index=True)
    atualizado_em = models.DateTimeField(null=True, blank=True)

    class Meta:
        db_table = 'pedidos_propostas'
        ordering = ['-criado_em', '-id']
