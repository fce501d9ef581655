"""
Configuração do Django App de Usuários.
"""

from django.apps import AppConfig


class UsuariosConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'agriis.adapters.django_app.usuarios'
    label = 'usuarios'
    verbose_name = 'Usuários'
