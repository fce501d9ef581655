"""
Django Models para o domínio de Autenticação.
"""

from django.db import models


class RefreshTokenModel(models.Model):

    token = models.CharField(max_length=200, unique=True)
    usuario = models.ForeignKey(
        'usuarios.UsuarioModel', on_delete=models.CASCADE, related_name='refresh_tokens'
    )
    data_expiracao = models.DateTimeField(db_index=True)
    revogado = models.BooleanField(default=False)
    data_revogacao = models.DateTimeField(null=True, blank=True)
    endereco_ip = models.CharField(max_length=45, null=True, blank=True)
    user_agent = models.CharField(max_length=500, null=True, blank=True)

    criado_em = models.DateTimeField()
    atualizado_em = models.DateTimeField(null=True, blank=True)

    class Meta:
        db_table = 'refresh_tokens'
        ordering = ['-criado_em']
        indexes = [
            models.Index(fields=['usuario', 'revogado'], name='idx_refresh_usuario_revogado'),
        ]

    def __str__(self):
        return f"RefreshToken {self.id} (usuario {self.usuario_id})"
