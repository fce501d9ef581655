"""
Django Models para o domínio de Propriedades.

Talhões e culturas são filhos do agregado (cascade).
"""

from django.db import models


class PropriedadeModel(models.Model):

    nome = models.CharField(max_length=200)
    nirf = models.CharField(max_length=50, null=True, blank=True)
    inscricao_estadual = models.CharField(max_length=30, null=True, blank=True)
    area_total = models.DecimalField(max_digits=18, decimal_places=4)
    produtor = models.ForeignKey(
        'produtores.ProdutorModel',
        on_delete=models.CASCADE,
        related_name='propriedades',
    )
    endereco_id = models.IntegerField(null=True, blank=True)
    dados_adicionais = models.JSONField(default=dict, blank=True)

    criado_em = models.DateTimeField()
    atualizado_em = models.DateTimeField(null=True, blank=True)

    class Meta:
        db_table = 'propriedades'
        ordering = ['nome']

    def __str__(self):
        return self.nome


class TalhaoModel(models.Model):

    propriedade = models.ForeignKey(
        PropriedadeModel, on_delete=models.CASCADE, related_name='talhoes'
    )
    nome = models.CharField(max_length=100)
    area = models.DecimalField(max_digits=18, decimal_places=4)
    descricao = models.CharField(max_length=500, null=True, blank=True)

    criado_em = models.DateTimeField()
    atualizado_em = models.DateTimeField(null=True, blank=True)

    class Meta:
        db_table = 'talhoes'
        ordering = ['id']


class PropriedadeCulturaModel(models.Model):

    propriedade = models.ForeignKey(
        PropriedadeModel, on_delete=models.CASCADE, related_name='culturas'
    )
    cultura = models.ForeignKey(
        'culturas.CulturaModel', on_delete=models.PROTECT, related_name='+'
    )
    area = models.DecimalField(max_digits=18, decimal_places=4)
    safra = models.ForeignKey(
        'safras.SafraModel',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='+',
    )

    criado_em = models.DateTimeField()
    atualizado_em = models.DateTimeField(null=True, blank=True)

    class Meta:
        db_table = 'propriedades_culturas'
        ordering = ['id']
