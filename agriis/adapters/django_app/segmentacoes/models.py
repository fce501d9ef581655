"""
Django Models para o domínio de Segmentações.

Segmentacao 1-N Grupo 1-N GrupoSegmentacao (cascade).
"""

from django.db import models


class SegmentacaoModel(models.Model):

    nome = models.CharField(max_length=200)
    fornecedor = models.ForeignKey(
        'fornecedores.FornecedorModel',
        on_delete=models.CASCADE,
        related_name='segmentacoes',
    )
    descricao = models.CharField(max_length=500, null=True, blank=True)
    eh_padrao = models.BooleanField(default=False)
    configuracao_territorial = models.JSONField(null=True, blank=True)
    ativo = models.BooleanField(default=True, db_index=True)

    criado_em = models.DateTimeField()
    atualizado_em = models.DateTimeField(null=True, blank=True)

    class Meta:
        db_table = 'segmentacoes'
        ordering = ['id']

    def __str__(self):
        return self.nome


class GrupoModel(models.Model):

    segmentacao = models.ForeignKey(
        SegmentacaoModel, on_delete=models.CASCADE, related_name='grupos'
    )
    nome = models.CharField(max_length=200)
    descricao = models.CharField(max_length=500, null=True, blank=True)
    area_minima = models.DecimalField(max_digits=18, decimal_places=4)
    area_maxima = models.DecimalField(max_digits=18, decimal_places=4, null=True, blank=True)
    ativo = models.BooleanField(default=True)

    criado_em = models.DateTimeField()
    atualizado_em = models.DateTimeField(null=True, blank=True)

    class Meta:
        db_table = 'segmentacoes_grupos'
        ordering = ['area_minima']


class GrupoSegmentacaoModel(models.Model):

    grupo = models.ForeignKey(GrupoModel, on_delete=models.CASCADE, related_name='descontos')
    categoria_id = models.IntegerField()
    percentual_desconto = models.DecimalField(max_digits=5, decimal_places=2)
    observacoes = models.CharField(max_length=500, null=True, blank=True)
    ativo = models.BooleanField(default=True)

    criado_em = models.DateTimeField()
    atualizado_em = models.DateTimeField(null=True, blank=True)

    class Meta:
        db_table = 'segmentacoes_grupos_descontos'
        constraints = [
            models.UniqueConstraint(fields=['grupo', 'categoria_id'], name='uq_grupo_categoria'),
        ]
