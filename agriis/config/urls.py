"""
URL Configuration do Agriis.

Estrutura:
- /admin/ - Django Admin
- /api/<modulo>/ - APIs JSON dos módulos
- /health/ - Health check
"""

from django.contrib import admin
from django.http import JsonResponse
from django.urls import include, path

API_MODULES = [
    'autenticacao',
    'usuarios',
    'culturas',
    'safras',
    'fornecedores',
    'produtores',
    'propriedades',
    'catalogos',
    'segmentacoes',
    'pagamentos',
    'combos',
    'pedidos',
]

urlpatterns = [
    path('admin/', admin.site.urls),
    path('health/', lambda request: JsonResponse({'status': 'ok'}), name='health'),
]

urlpatterns += [
    path(f'api/{modulo}/', include(f'agriis.adapters.django_app.{modulo}.urls'))
    for modulo in API_MODULES
]
