"""
Configuração do Django App de Catálogos.
"""

from django.apps import AppConfig


class CatalogosConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'agriis.adapters.django_app.catalogos'
    label = 'catalogos'
    verbose_name = 'Catálogos'
