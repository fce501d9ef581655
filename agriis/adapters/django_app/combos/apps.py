"""
Configuração do Django App de Combos.
"""

from django.apps import AppConfig


class CombosConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'agriis.adapters.django_app.combos'
    label = 'combos'
    verbose_name = 'Combos'
