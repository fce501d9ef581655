"""
URL patterns da API de Culturas.
"""

from django.urls import path

from . import api_views

app_name = 'culturas'

urlpatterns = [
    path('', api_views.CulturaAPIListView.as_view(), name='api_list'),
    path('<int:pk>/', api_views.CulturaAPIDetailView.as_view(), name='api_detail'),
]
