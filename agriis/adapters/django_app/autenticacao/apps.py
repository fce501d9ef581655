"""
Configuração do Django App de Autenticação.
"""

from django.apps import AppConfig


class AutenticacaoConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'agriis.adapters.django_app.autenticacao'
    label = 'autenticacao'
    verbose_name = 'Autenticação'
