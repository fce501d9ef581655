"""
Django Models para o domínio de Combos.

Combo 1-N ComboItem, ComboLocalRecebimento e ComboCategoriaDesconto
(cascade). Mapeados via ComboMapper.
"""

from django.db import models

from agriis.core.combos.entities import ModalidadePagamento, StatusCombo, TipoDesconto


class ComboModel(models.Model):

    STATUS_CHOICES = [(s.value, s.value) for s in StatusCombo]
    MODALIDADE_CHOICES = [(m.value, m.value) for m in ModalidadePagamento]

    nome = models.CharField(max_length=200)
    descricao = models.TextField(null=True, blank=True)
    hectare_minimo = models.DecimalField(max_digits=18, decimal_places=4)
    hectare_maximo = models.DecimalField(max_digits=18, decimal_places=4)
    data_inicio = models.DateTimeField()
    data_fim = models.DateTimeField(db_index=True)
    modalidade_pagamento = models.CharField(max_length=20, choices=MODALIDADE_CHOICES)
    status = models.CharField(
        max_length=20,
        choices=STATUS_CHOICES,
        default=StatusCombo.ATIVO.value,
        db_index=True,
    )
    restricoes_municipios = models.JSONField(
        null=True,
        blank=True,
        help_text="Lista de IDs de municípios permitidos (vazio = sem restrição)",
    )
    permite_alteracao_item = models.BooleanField(default=True)
    permite_exclusao_item = models.BooleanField(default=True)
    fornecedor = models.ForeignKey(
        'fornecedores.FornecedorModel', on_delete=models.CASCADE, related_name='combos'
    )
    safra = models.ForeignKey(
        'safras.SafraModel', on_delete=models.PROTECT, related_name='combos'
    )

    criado_em = models.DateTimeField()
    atualizado_em = models.DateTimeField(null=True, blank=True)

    class Meta:
        db_table = 'combos'
        ordering = ['-criado_em']
        indexes = [
            models.Index(fields=['fornecedor', 'safra'], name='idx_combo_fornecedor_safra'),
        ]

    def __str__(self):
        return self.nome


class ComboItemModel(models.Model):

    combo = models.ForeignKey(ComboModel, on_delete=models.CASCADE, related_name='itens')
    produto_id = models.IntegerField()
    quantidade = models.DecimalField(max_digits=18, decimal_places=4)
    preco_unitario = models.DecimalField(max_digits=18, decimal_places=4)
    percentual_desconto = models.DecimalField(max_digits=5, decimal_places=2, default=0)
    produto_obrigatorio = models.BooleanField(default=False)
    ordem = models.IntegerField(default=0)

    criado_em = models.DateTimeField()
    atualizado_em = models.DateTimeField(null=True, blank=True)

    class Meta:
        db_table = 'combos_itens'
        ordering = ['ordem', 'id']


class ComboLocalRecebimentoModel(models.Model):

    combo = models.ForeignKey(
        ComboModel, on_delete=models.CASCADE, related_name='locais_recebimento'
    )
    ponto_distribuicao_id = models.IntegerField()
    preco_adicional = models.DecimalField(max_digits=18, decimal_places=4, default=0)
    percentual_desconto = models.DecimalField(max_digits=5, decimal_places=2, default=0)
    local_padrao = models.BooleanField(default=False)
    observacoes = models.CharField(max_length=500, null=True, blank=True)

    criado_em = models.DateTimeField()
    atualizado_em = models.DateTimeField(null=True, blank=True)

    class Meta:
        db_table = 'combos_locais_recebimento'


class ComboCategoriaDescontoModel(models.Model):

    TIPO_CHOICES = [(t.value, t.value) for t in TipoDesconto]

    combo = models.ForeignKey(
        ComboModel, on_delete=models.CASCADE, related_name='categorias_desconto'
    )
    categoria_id = models.IntegerField()
    tipo_desconto = models.CharField(max_length=20, choices=TIPO_CHOICES)
    percentual_desconto = models.DecimalField(max_digits=5, decimal_places=2, default=0)
    valor_desconto_fixo = models.DecimalField(max_digits=18, decimal_places=4, default=0)
    valor_desconto_por_hectare = models.DecimalField(max_digits=18, decimal_places=4, default=0)
    hectare_minimo = models.DecimalField(max_digits=18, decimal_places=4, default=0)
    hectare_maximo = models.DecimalField(max_digits=18, decimal_places=4, null=True, blank=True)
    ativo = models.BooleanField(default=True)

    criado_em = models.DateTimeField()
    atualizado_em = models.DateTimeField(null=True, blank=True)

    class Meta:
        db_table = 'combos_categorias_desconto'
