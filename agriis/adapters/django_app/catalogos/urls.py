"""
URL patterns da API de Catálogos.
"""

from django.urls import path

from . import api_views

app_name = 'catalogos'

urlpatterns = [
    path('', api_views.CatalogoAPIListView.as_view(), name='api_list'),
    path('vigentes/', api_views.CatalogoAPIVigentesView.as_view(), name='api_vigentes'),
    path('<int:pk>/', api_views.CatalogoAPIDetailView.as_view(), name='api_detail'),
    path('<int:pk>/itens/', api_views.CatalogoAPIItensView.as_view(), name='api_itens'),
    path(
        '<int:pk>/itens/<int:item_id>/',
        api_views.CatalogoAPIItemDetailView.as_view(),
        name='api_item_detail',
    ),
    path(
        '<int:pk>/preco/<int:produto_id>/',
        api_views.CatalogoAPIPrecoView.as_view(),
        name='api_preco',
    ),
]
