"""
Django Models para o domínio de Culturas.

Models NÃO contêm lógica de negócio; são mapeados para/de
agriis.core.culturas.entities via CulturaMapper.
"""

from django.db import models


class CulturaModel(models.Model):
    """Persistência de Cultura."""

    nome = models.CharField(
        max_length=256,
        unique=True,
        help_text="Nome da cultura (único)"
    )

    descricao = models.TextField(
        null=True,
        blank=True,
        help_text="Descrição da cultura"
    )

    ativo = models.BooleanField(
        default=True,
        db_index=True,
        help_text="Se a cultura está disponível"
    )

    criado_em = models.DateTimeField(help_text="Data de criação")
    atualizado_em = models.DateTimeField(null=True, blank=True, help_text="Última atualização")

    class Meta:
        db_table = 'culturas'
        verbose_name = 'Cultura'
        verbose_name_plural = 'Culturas'
        ordering = ['nome']

    def __str__(self):
        return self.nome
