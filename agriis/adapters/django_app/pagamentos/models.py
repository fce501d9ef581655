"""
Django Models para o domínio de Pagamentos.
"""

from django.db import models


class FormaPagamentoModel(models.Model):

    descricao = models.CharField(max_length=45)
    ativo = models.BooleanField(default=True, db_index=True)

    criado_em = models.DateTimeField()
    atualizado_em = models.DateTimeField(null=True, blank=True)

    class Meta:
        db_table = 'formas_pagamento'
        verbose_name = 'Forma de Pagamento'
        verbose_name_plural = 'Formas de Pagamento'
        ordering = ['descricao']

    def __str__(self):
        return self.descricao


class CulturaFormaPagamentoModel(models.Model):

    fornecedor = models.ForeignKey(
        'fornecedores.FornecedorModel',
        on_delete=models.CASCADE,
        related_name='culturas_formas_pagamento',
    )
    cultura = models.ForeignKey(
        'culturas.CulturaModel',
        on_delete=models.PROTECT,
        related_name='formas_pagamento',
    )
    forma_pagamento = models.ForeignKey(
        FormaPagamentoModel,
        on_delete=models.PROTECT,
        related_name='associacoes',
    )
    ativo = models.BooleanField(default=True)

    criado_em = models.DateTimeField()
    atualizado_em = models.DateTimeField(null=True, blank=True)

    class Meta:
        db_table = 'culturas_formas_pagamento'
        constraints = [
            models.UniqueConstraint(
                fields=['fornecedor', 'cultura', 'forma_pagamento'],
                name='uq_cultura_forma_pagamento',
            ),
        ]
