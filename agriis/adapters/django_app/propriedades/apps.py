"""
Configuração do Django App de Propriedades.
"""

from django.apps import AppConfig


class PropriedadesConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'agriis.adapters.django_app.propriedades'
    label = 'propriedades'
    verbose_name = 'Propriedades'
