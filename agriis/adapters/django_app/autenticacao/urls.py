"""
URL patterns da API de Autenticação.
"""

from django.urls import path

from . import api_views

app_name = 'autenticacao'

urlpatterns = [
    path('login/', api_views.LoginAPIView.as_view(), name='api_login'),
    path('refresh/', api_views.RefreshTokenAPIView.as_view(), name='api_refresh'),
    path('logout/', api_views.LogoutAPIView.as_view(), name='api_logout'),
    path('alterar-senha/', api_views.AlterarSenhaAPIView.as_view(), name='api_alterar_senha'),
]
