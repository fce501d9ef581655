"""
URL patterns da API de Safras.
"""

from django.urls import path

from . import api_views

app_name = 'safras'

urlpatterns = [
    path('', api_views.SafraAPIListView.as_view(), name='api_list'),
    path('atual/', api_views.SafraAPIAtualView.as_view(), name='api_atual'),
    path('<int:pk>/', api_views.SafraAPIDetailView.as_view(), name='api_detail'),
]
