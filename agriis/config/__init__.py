"""
Configuração do projeto Agriis.

Módulos:
- settings: Configurações Django
- urls: Rotas principais (/api/<modulo>/)
- wsgi: WSGI application
- celery: Configuração Celery (eventos e jobs agendados)
- container: Dependency Injection Container
"""

# App Celery carregado junto com o Django (shared_task usa este app)
from .celery import app as celery_app

__all__ = ('celery_app',)
