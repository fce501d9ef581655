"""
Django Models para o domínio de Catálogos.

ponto_distribuicao_id e categoria_id referenciam cadastros externos
ao sistema (sem FK).
"""

from django.db import models


class CatalogoModel(models.Model):

    safra = models.ForeignKey(
        'safras.SafraModel', on_delete=models.PROTECT, related_name='catalogos'
    )
    ponto_distribuicao_id = models.IntegerField(db_index=True)
    cultura = models.ForeignKey(
        'culturas.CulturaModel', on_delete=models.PROTECT, related_name='catalogos'
    )
    categoria_id = models.IntegerField(db_index=True)
    moeda = models.CharField(max_length=10, default='Real')
    data_inicio = models.DateField()
    data_fim = models.DateField(null=True, blank=True)
    ativo = models.BooleanField(default=True, db_index=True)

    criado_em = models.DateTimeField()
    atualizado_em = models.DateTimeField(null=True, blank=True)

    class Meta:
        db_table = 'catalogos'
        constraints = [
            models.UniqueConstraint(
                fields=['safra', 'ponto_distribuicao_id', 'cultura', 'categoria_id'],
                name='uq_catalogo_chave',
            ),
        ]
        indexes = [
            models.Index(fields=['data_inicio', 'data_fim'], name='idx_catalogo_vigencia'),
        ]

    def __str__(self):
        return f"Catalogo {self.id} (safra={self.safra_id}, cultura={self.cultura_id})"


class CatalogoItemModel(models.Model):

    catalogo = models.ForeignKey(
        CatalogoModel, on_delete=models.CASCADE, related_name='itens'
    )
    produto_id = models.IntegerField(db_index=True)
    estrutura_precos = models.JSONField(default=dict)
    preco_base = models.DecimalField(max_digits=18, decimal_places=4, null=True, blank=True)
    ativo = models.BooleanField(default=True)

    criado_em = models.DateTimeField()
    atualizado_em = models.DateTimeField(null=True, blank=True)

    class Meta:
        db_table = 'catalogos_itens'
        constraints = [
            models.UniqueConstraint(
                fields=['catalogo', 'produto_id'], name='uq_catalogo_item_produto'
            ),
        ]
