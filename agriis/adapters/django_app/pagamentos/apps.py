"""
Configuração do Django App de Pagamentos.
"""

from django.apps import AppConfig


class PagamentosConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'agriis.adapters.django_app.pagamentos'
    label = 'pagamentos'
    verbose_name = 'Pagamentos'
