"""
Django Models para o domínio de Usuários.

Usuários do Agriis são independentes de django.contrib.auth.User;
apenas o algoritmo de hash de senha é reaproveitado do Django.
"""

from django.db import models


class UsuarioModel(models.Model):

    nome = models.CharField(max_length=200, help_text="Nome completo")
    email = models.EmailField(max_length=254, unique=True, help_text="Email (login)")
    celular = models.CharField(max_length=20, null=True, blank=True)
    cpf = models.CharField(max_length=11, null=True, blank=True, db_index=True)
    senha_hash = models.CharField(max_length=256, null=True, blank=True)
    ativo = models.BooleanField(default=True, db_index=True)
    ultimo_login = models.DateTimeField(null=True, blank=True)
    logo_url = models.CharField(max_length=500, null=True, blank=True)
    roles = models.JSONField(default=list, help_text="Lista de roles (valores de Roles)")

    criado_em = models.DateTimeField()
    atualizado_em = models.DateTimeField(null=True, blank=True)

    class Meta:
        db_table = 'usuarios'
        verbose_name = 'Usuário'
        verbose_name_plural = 'Usuários'
        ordering = ['nome']

    def __str__(self):
        return f"{self.nome} <{self.email}>"
