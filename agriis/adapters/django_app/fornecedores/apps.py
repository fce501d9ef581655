"""
Configuração do Django App de Fornecedores.
"""

from django.apps import AppConfig


class FornecedoresConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'agriis.adapters.django_app.fornecedores'
    label = 'fornecedores'
    verbose_name = 'Fornecedores'
