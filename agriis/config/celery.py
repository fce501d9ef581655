"""
Configuração do Celery para processamento assíncrono.

O Celery é usado para:
- Processar Domain Events (notificações de pedidos, propostas, combos)
- Jobs agendados (cancelamento de pedidos com prazo ultrapassado,
  expiração de combos, limpeza de tokens e eventos)

Uso:
    celery -A agriis.config.celery worker -l INFO
    celery -A agriis.config.celery beat -l INFO
"""

import os
from celery import Celery
from celery.schedules import crontab
from django.conf import settings
from kombu import Queue, Exchange

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'agriis.config.settings')

app = Celery('agriis')

# Configurações CELERY_* do settings.py
app.config_from_object('django.conf:settings', namespace='CELERY')

app.conf.update(
    task_serializer='json',
    accept_content=['json'],
    result_serializer='json',
    timezone='America/Sao_Paulo',
    task_acks_late=True,
    task_reject_on_worker_lost=True,
    worker_prefetch_multiplier=1,
    task_default_retry_delay=60,
    task_max_retries=3,
    result_expires=3600,
    worker_send_task_events=True,
    task_send_sent_event=True,
)

app.conf.task_default_queue = 'default'

app.conf.task_queues = (
    Queue('default', Exchange('default'), routing_key='default'),
    Queue('events', Exchange('events'), routing_key='events.#'),
    Queue('scheduled', Exchange('scheduled'), routing_key='scheduled.#'),
)

HANDLERS = 'agriis.adapters.django_app.events.handlers'

app.conf.task_routes = {
    f'{HANDLERS}.handle_*': {'queue': 'events'},
    f'{HANDLERS}.dispatch_domain_event': {'queue': 'events'},
    f'{HANDLERS}.notify_*': {'queue': 'events'},
    f'{HANDLERS}.cancelar_pedidos_prazo_ultrapassado': {'queue': 'scheduled'},
    f'{HANDLERS}.alertar_pedidos_proximos_prazo': {'queue': 'scheduled'},
    f'{HANDLERS}.marcar_combos_expirados': {'queue': 'scheduled'},
    f'{HANDLERS}.limpar_refresh_tokens_expirados': {'queue': 'scheduled'},
    f'{HANDLERS}.cleanup_old_events': {'queue': 'scheduled'},
}

app.autodiscover_tasks([
    'agriis.adapters.django_app.events',
], related_name='handlers')

app.conf.beat_schedule = {
    # Pedidos em negociação com prazo de interação vencido
    'cancelar-pedidos-prazo-ultrapassado': {
        'task': f'{HANDLERS}.cancelar_pedidos_prazo_ultrapassado',
        'schedule': settings.PEDIDO_VERIFICACAO_PRAZO_SEGUNDOS,
    },

    'alertar-pedidos-proximos-prazo': {
        'task': f'{HANDLERS}.alertar_pedidos_proximos_prazo',
        'schedule': crontab(hour=8, minute=0),
    },

    'marcar-combos-expirados': {
        'task': f'{HANDLERS}.marcar_combos_expirados',
        'schedule': crontab(hour=0, minute=5),
    },

    'limpar-refresh-tokens-expirados': {
        'task': f'{HANDLERS}.limpar_refresh_tokens_expirados',
        'schedule': crontab(hour=3, minute=0),
    },

    # Semanal
    'cleanup-old-events': {
        'task': f'{HANDLERS}.cleanup_old_events',
        'schedule': 604800.0,
    },
}
