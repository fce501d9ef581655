"""
URL patterns da API de Combos.
"""

from django.urls import path

from . import api_views

app_name = 'combos'

urlpatterns = [
    path('', api_views.ComboAPIListView.as_view(), name='api_list'),
    path('vigentes/', api_views.ComboAPIVigentesView.as_view(), name='api_vigentes'),
    path('validos/', api_views.ComboAPIValidosView.as_view(), name='api_validos'),
    path('<int:pk>/', api_views.ComboAPIDetailView.as_view(), name='api_detail'),
    path('<int:pk>/status/', api_views.ComboAPIStatusView.as_view(), name='api_status'),
    path('<int:pk>/validar/', api_views.ComboAPIValidarView.as_view(), name='api_validar'),
    path('<int:pk>/itens/', api_views.ComboAPIItensView.as_view(), name='api_itens'),
    path(
        '<int:pk>/itens/<int:item_id>/',
        api_views.ComboAPIItemDetailView.as_view(),
        name='api_item_detail',
    ),
    path(
        '<int:pk>/locais-recebimento/',
        api_views.ComboAPILocaisRecebimentoView.as_view(),
        name='api_locais_recebimento',
    ),
    path(
        '<int:pk>/categorias-desconto/',
        api_views.ComboAPICategoriasDescontoView.as_view(),
        name='api_categorias_desconto',
    ),
]
