"""
URL patterns da API de Usuários.
"""

from django.urls import path

from . import api_views

app_name = 'usuarios'

urlpatterns = [
    path('', api_views.UsuarioAPIListView.as_view(), name='api_list'),
    path('<int:pk>/', api_views.UsuarioAPIDetailView.as_view(), name='api_detail'),
    path('<int:pk>/ativar/', api_views.UsuarioAPIAtivarView.as_view(), name='api_ativar'),
    path('<int:pk>/desativar/', api_views.UsuarioAPIDesativarView.as_view(), name='api_desativar'),
    path('<int:pk>/roles/', api_views.UsuarioAPIRolesView.as_view(), name='api_roles'),
]
