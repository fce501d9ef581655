"""
Django Models para o domínio de Produtores.
"""

from django.db import models


class ProdutorModel(models.Model):

    STATUS_CHOICES = [
        ('PendenteValidacaoAutomatica', 'Pendente validação automática'),
        ('PendenteValidacaoManual', 'Pendente validação manual'),
        ('PendenteCnpj', 'Pendente CNPJ'),
        ('AutorizadoAutomaticamente', 'Autorizado automaticamente'),
        ('AutorizadoManualmente', 'Autorizado manualmente'),
        ('Negado', 'Negado'),
    ]

    nome = models.CharField(max_length=200)
    cpf = models.CharField(max_length=11, null=True, blank=True, unique=True)
    cnpj = models.CharField(max_length=14, null=True, blank=True, unique=True)
    inscricao_estadual = models.CharField(max_length=30, null=True, blank=True)
    tipo_atividade = models.CharField(max_length=20, null=True, blank=True)
    area_plantio = models.DecimalField(max_digits=18, decimal_places=4, default=0)
    status = models.CharField(
        max_length=40,
        choices=STATUS_CHOICES,
        default='PendenteValidacaoAutomatica',
        db_index=True,
    )
    data_autorizacao = models.DateTimeField(null=True, blank=True)
    usuario_autorizacao = models.ForeignKey(
        'usuarios.UsuarioModel',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='produtores_autorizados',
    )
    retornos_api_check = models.JSONField(null=True, blank=True)
    culturas = models.JSONField(default=list, help_text="IDs das culturas")

    criado_em = models.DateTimeField()
    atualizado_em = models.DateTimeField(null=True, blank=True)

    class Meta:
        db_table = 'produtores'
        verbose_name = 'Produtor'
        verbose_name_plural = 'Produtores'
        ordering = ['nome']

    def __str__(self):
        return self.nome
