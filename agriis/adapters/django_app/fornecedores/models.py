"""
Django Models para o domínio de Fornecedores.
"""

from django.db import models


class FornecedorModel(models.Model):

    MOEDA_CHOICES = [
        ('Real', 'Real'),
        ('Dolar', 'Dólar'),
    ]

    nome = models.CharField(max_length=200)
    cnpj = models.CharField(max_length=14, unique=True, help_text="Somente dígitos")
    inscricao_estadual = models.CharField(max_length=30, null=True, blank=True)
    endereco = models.CharField(max_length=300, null=True, blank=True)
    telefone = models.CharField(max_length=20, null=True, blank=True)
    email = models.CharField(max_length=254, null=True, blank=True)
    logo_url = models.CharField(max_length=500, null=True, blank=True)
    moeda_padrao = models.CharField(max_length=10, choices=MOEDA_CHOICES, default='Real')
    pedido_minimo = models.DecimalField(max_digits=18, decimal_places=2, null=True, blank=True)
    token_lincros = models.CharField(max_length=200, null=True, blank=True)
    ativo = models.BooleanField(default=True, db_index=True)
    dados_adicionais = models.JSONField(default=dict, blank=True)

    criado_em = models.DateTimeField()
    atualizado_em = models.DateTimeField(null=True, blank=True)

    class Meta:
        db_table = 'fornecedores'
        verbose_name = 'Fornecedor'
        verbose_name_plural = 'Fornecedores'
        ordering = ['nome']

    def __str__(self):
        return f"{self.nome} ({self.cnpj})"


class UsuarioFornecedorModel(models.Model):

    usuario = models.ForeignKey(
        'usuarios.UsuarioModel',
        on_delete=models.CASCADE,
        related_name='fornecedores',
    )
    fornecedor = models.ForeignKey(
        FornecedorModel,
        on_delete=models.CASCADE,
        related_name='usuarios',
    )
    role = models.CharField(max_length=50)
    ativo = models.BooleanField(default=True)

    criado_em = models.DateTimeField()
    atualizado_em = models.DateTimeField(null=True, blank=True)

    class Meta:
        db_table = 'usuarios_fornecedores'
        constraints = [
            models.UniqueConstraint(
                fields=['usuario', 'fornecedor'], name='uq_usuario_fornecedor'
            ),
        ]
