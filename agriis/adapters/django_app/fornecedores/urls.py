"""
URL patterns da API de Fornecedores.
"""

from django.urls import path

from . import api_views

app_name = 'fornecedores'

urlpatterns = [
    path('', api_views.FornecedorAPIListView.as_view(), name='api_list'),
    path('<int:pk>/', api_views.FornecedorAPIDetailView.as_view(), name='api_detail'),
    path('<int:pk>/ativar/', api_views.FornecedorAPIAtivarView.as_view(), name='api_ativar'),
    path('<int:pk>/desativar/', api_views.FornecedorAPIDesativarView.as_view(), name='api_desativar'),
    path(
        '<int:pk>/pedido-minimo/',
        api_views.FornecedorAPIPedidoMinimoView.as_view(),
        name='api_pedido_minimo',
    ),
    path('<int:pk>/usuarios/', api_views.FornecedorAPIUsuariosView.as_view(), name='api_usuarios'),
]
