"""
Configuração do Django App de Pedidos.
"""

from django.apps import AppConfig


class PedidosConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'agriis.adapters.django_app.pedidos'
    label = 'pedidos'
    verbose_name = 'Pedidos'
