"""
URL patterns da API de Produtores.
"""

from django.urls import path

from . import api_views

app_name = 'produtores'

urlpatterns = [
    path('', api_views.ProdutorAPIListView.as_view(), name='api_list'),
    path(
        'documento/<str:documento>/',
        api_views.ProdutorAPIDocumentoView.as_view(),
        name='api_documento',
    ),
    path('<int:pk>/', api_views.ProdutorAPIDetailView.as_view(), name='api_detail'),
    path('<int:pk>/autorizar/', api_views.ProdutorAPIAutorizarView.as_view(), name='api_autorizar'),
    path('<int:pk>/negar/', api_views.ProdutorAPINegarView.as_view(), name='api_negar'),
    path(
        '<int:pk>/culturas/<int:cultura_id>/',
        api_views.ProdutorAPICulturaView.as_view(),
        name='api_cultura',
    ),
]
