"""
Configuração do Django App de Segmentações.
"""

from django.apps import AppConfig


class SegmentacoesConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'agriis.adapters.django_app.segmentacoes'
    label = 'segmentacoes'
    verbose_name = 'Segmentações'
