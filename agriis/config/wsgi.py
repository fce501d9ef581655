"""
WSGI config do Agriis.

Expõe o callable ``application`` usado por servidores WSGI (gunicorn, uwsgi).
"""

import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'agriis.config.settings')

application = get_wsgi_application()
