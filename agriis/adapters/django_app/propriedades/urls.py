"""
URL patterns da API de Propriedades.
"""

from django.urls import path

from . import api_views

app_name = 'propriedades'

urlpatterns = [
    path('', api_views.PropriedadeAPIListView.as_view(), name='api_list'),
    path('<int:pk>/', api_views.PropriedadeAPIDetailView.as_view(), name='api_detail'),
    path('<int:pk>/talhoes/', api_views.PropriedadeAPITalhoesView.as_view(), name='api_talhoes'),
    path('<int:pk>/culturas/', api_views.PropriedadeAPICulturasView.as_view(), name='api_culturas'),
    path(
        '<int:pk>/culturas/<int:cultura_id>/',
        api_views.PropriedadeAPICulturaDetailView.as_view(),
        name='api_cultura_detail',
    ),
]
