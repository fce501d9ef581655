"""
URL patterns da API de Pagamentos.
"""

from django.urls import path

from . import api_views

app_name = 'pagamentos'

urlpatterns = [
    path('formas/', api_views.FormaPagamentoAPIListView.as_view(), name='api_formas'),
    path(
        'formas/<int:pk>/',
        api_views.FormaPagamentoAPIDetailView.as_view(),
        name='api_forma_detail',
    ),
    path(
        'associacoes/',
        api_views.CulturaFormaPagamentoAPIListView.as_view(),
        name='api_associacoes',
    ),
    path(
        'associacoes/<int:pk>/',
        api_views.CulturaFormaPagamentoAPIDetailView.as_view(),
        name='api_associacao_detail',
    ),
    path(
        'fornecedor/<int:fornecedor_id>/cultura/<int:cultura_id>/',
        api_views.FormasPorFornecedorCulturaAPIView.as_view(),
        name='api_formas_fornecedor_cultura',
    ),
]
