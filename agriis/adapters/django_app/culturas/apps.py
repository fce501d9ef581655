"""
Configuração do Django App de Culturas.
"""

from django.apps import AppConfig


class CulturasConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'agriis.adapters.django_app.culturas'
    label = 'culturas'
    verbose_name = 'Culturas'
