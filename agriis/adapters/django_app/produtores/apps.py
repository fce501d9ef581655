"""
Configuração do Django App de Produtores.
"""

from django.apps import AppConfig


class ProdutoresConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'agriis.adapters.django_app.produtores'
    label = 'produtores'
    verbose_name = 'Produtores'
