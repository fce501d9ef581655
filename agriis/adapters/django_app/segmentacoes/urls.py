"""
URL patterns da API de Segmentações.
"""

from django.urls import path

from . import api_views

app_name = 'segmentacoes'

urlpatterns = [
    path('', api_views.SegmentacaoAPIListView.as_view(), name='api_list'),
    path(
        'padrao/<int:fornecedor_id>/',
        api_views.SegmentacaoAPIPadraoView.as_view(),
        name='api_padrao_fornecedor',
    ),
    path(
        'calcular-desconto/',
        api_views.SegmentacaoAPICalcularDescontoView.as_view(),
        name='api_calcular_desconto',
    ),
    path('<int:pk>/', api_views.SegmentacaoAPIDetailView.as_view(), name='api_detail'),
    path(
        '<int:pk>/ativar/',
        api_views.SegmentacaoAPIAcaoView.as_view(acao='ativar'),
        name='api_ativar',
    ),
    path(
        '<int:pk>/desativar/',
        api_views.SegmentacaoAPIAcaoView.as_view(acao='desativar'),
        name='api_desativar',
    ),
    path(
        '<int:pk>/padrao/',
        api_views.SegmentacaoAPIAcaoView.as_view(acao='definir_como_padrao'),
        name='api_definir_padrao',
    ),
    path('<int:pk>/grupos/', api_views.SegmentacaoAPIGruposView.as_view(), name='api_grupos'),
    path(
        '<int:pk>/grupos/<int:grupo_id>/',
        api_views.SegmentacaoAPIGrupoDetailView.as_view(),
        name='api_grupo_detail',
    ),
    path(
        '<int:pk>/grupos/<int:grupo_id>/descontos/',
        api_views.SegmentacaoAPIDescontosView.as_view(),
        name='api_descontos',
    ),
    path(
        '<int:pk>/grupos/<int:grupo_id>/descontos/<int:categoria_id>/',
        api_views.SegmentacaoAPIDescontoDetailView.as_view(),
        name='api_desconto_detail',
    ),
]
