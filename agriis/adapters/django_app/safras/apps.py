"""
Configuração do Django App de Safras.
"""

from django.apps import AppConfig


class SafrasConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'agriis.adapters.django_app.safras'
    label = 'safras'
    verbose_name = 'Safras'
