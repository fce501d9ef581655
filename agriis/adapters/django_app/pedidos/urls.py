"""
URL patterns da API de Pedidos.
"""

from django.urls import path

from . import api_views

app_name = 'pedidos'

urlpatterns = [
    path('', api_views.PedidoAPIListView.as_view(), name='api_list'),
    path(
        'proximos-prazo-limite/',
        api_views.PedidoAPIProximosPrazoView.as_view(),
        name='api_proximos_prazo',
    ),
    path(
        'prazo-ultrapassado/',
        api_views.PedidoAPIPrazoUltrapassadoView.as_view(),
        name='api_prazo_ultrapassado',
    ),
    path('<int:pk>/', api_views.PedidoAPIDetailView.as_view(), name='api_detail'),
    path(
        '<int:pk>/fechar/',
        api_views.PedidoAPIAcaoView.as_view(acao='fechar'),
        name='api_fechar',
    ),
    path(
        '<int:pk>/cancelar/',
        api_views.PedidoAPIAcaoView.as_view(acao='cancelar_por_comprador'),
        name='api_cancelar',
    ),
    path(
        '<int:pk>/totais/',
        api_views.PedidoAPIAcaoView.as_view(acao='recalcular_totais'),
        name='api_totais',
    ),
    path(
        '<int:pk>/prazo-limite/',
        api_views.PedidoAPIPrazoLimiteView.as_view(),
        name='api_prazo_limite',
    ),
    path('<int:pk>/itens/', api_views.PedidoAPIItensView.as_view(), name='api_itens'),
    path(
        '<int:pk>/itens/<int:item_id>/',
        api_views.PedidoAPIItemDetailView.as_view(),
        name='api_item_detail',
    ),
    path(
        '<int:pk>/itens/<int:item_id>/transportes/',
        api_views.PedidoAPITransportesView.as_view(),
        name='api_transportes',
    ),
    path(
        '<int:pk>/transportes/',
        api_views.PedidoAPITransportesListView.as_view(),
        name='api_transportes_pedido',
    ),
    path(
        '<int:pk>/transportes/resumo/',
        api_views.PedidoAPITransportesResumoView.as_view(),
        name='api_transportes_resumo',
    ),
    path(
        '<int:pk>/transportes/validar/',
        api_views.PedidoAPITransportesValidarView.as_view(),
        name='api_transportes_validar',
    ),
    path(
        '<int:pk>/transportes/<int:transporte_id>/reagendar/',
        api_views.PedidoAPIReagendarTransporteView.as_view(),
        name='api_transporte_reagendar',
    ),
    path(
        '<int:pk>/transportes/<int:transporte_id>/frete/',
        api_views.PedidoAPIValorFreteView.as_view(),
        name='api_transporte_frete',
    ),
    path('frete/calcular/', api_views.FreteAPICalcularView.as_view(), name='api_frete_calcular'),
    path(
        'frete/calcular-consolidado/',
        api_views.FreteAPICalcularConsolidadoView.as_view(),
        name='api_frete_calcular_consolidado',
    ),
    path('<int:pk>/propostas/',api_views.PropostaAPIListView.as_view(), name='api_propostas'),
    path(
        '<int:pk>/propostas/ultima/',
        api_views.PropostaAPIUltimaView.as_view(),
        name='api_proposta_ultima',
    ),
]
