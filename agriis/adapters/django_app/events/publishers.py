"""
Event Publishers - Publicadores de Eventos de Domínio.

Implementações:
- LoggingEventPublisher: Apenas loga (desenvolvimento)
- CeleryEventPublisher: Despacha para dispatch_domain_event (produção)
- InMemoryEventPublisher: Para testes
- CompositeEventPublisher: Fan-out para vários publishers

O modo é escolhido por settings.EVENT_PUBLISHER_MODE ("logging" ou "celery").
"""

from typing import Callable, Dict, List
import json
import logging

from agriis.core.shared.events import DomainEvent
from agriis.core.shared.interfaces import EventPublisher

logger = logging.getLogger(__name__)

EventHandler = Callable[[DomainEvent], None]


class _HandlerRegistryMixin:
    """Registro de handlers síncronos por tipo de evento."""

    def _init_handlers(self) -> None:
        self._handlers: Dict[str, List[EventHandler]] = {}

    def register_handler(self, event_type: str, handler: EventHandler) -> None:
        self._handlers.setdefault(event_type, []).append(handler)

    def _dispatch_to_handlers(self, event: DomainEvent) -> None:
        for handler in self._handlers.get(event.event_type, []):
            try:
                handler(event)
            except Exception as e:
                logger.error(f"Erro em handler para {event.event_type}: {e}", exc_info=True)


class LoggingEventPublisher(_HandlerRegistryMixin, EventPublisher):
    """
    Publisher que loga eventos.

    Usado em desenvolvimento para visualizar eventos
    sem necessidade de broker.
    """

    def __init__(self, log_level: int = logging.INFO, dispatch_to_celery: bool = False):
        self._log_level = log_level
        self._dispatch_to_celery = dispatch_to_celery
        self._init_handlers()

    def publish(self, event: DomainEvent) -> None:
        logger.log(
            self._log_level,
            f"[EVENT] {event.event_type} | "
            f"aggregate={event.aggregate_type}#{event.aggregate_id} | "
            f"data={json.dumps(event._get_event_data(), default=str)}"
        )

        if self._dispatch_to_celery:
            CeleryEventPublisher(also_log=False).publish(event)

        self._dispatch_to_handlers(event)

    def publish_batch(self, events: List[DomainEvent]) -> None:
        for event in events:
            self.publish(event)


class CeleryEventPublisher(EventPublisher):
    """
    Publisher que envia eventos para a fila "events" do Celery.
    """

    def __init__(self, also_log: bool = True):
        self._also_log = also_log

    def publish(self, event: DomainEvent) -> None:
        if self._also_log:
            logger.info(
                f"[EVENT->CELERY] {event.event_type} | "
                f"aggregate={event.aggregate_id}"
            )

        from agriis.adapters.django_app.events.handlers import dispatch_domain_event

        # Dados serializados via json para garantir payload compatível com o broker
        payload = json.loads(json.dumps(event.to_dict(), default=str))
        try:
            dispatch_domain_event.delay(event.event_type, payload)
        except Exception as e:
            # Transação já comitada; evento continua no Event Store
            logger.error(f"Falha ao publicar evento no Celery: {e}", exc_info=True)

    def publish_batch(self, events: List[DomainEvent]) -> None:
        for event in events:
            self.publish(event)


class InMemoryEventPublisher(_HandlerRegistryMixin, EventPublisher):
    """
    Publisher em memória para testes.
    """

    def __init__(self):
        self._published_events: List[DomainEvent] = []
        self._init_handlers()

    def publish(self, event: DomainEvent) -> None:
        self._published_events.append(event)
        self._dispatch_to_handlers(event)

    def publish_batch(self, events: List[DomainEvent]) -> None:
        for event in events:
            self.publish(event)

    @property
    def published_events(self) -> List[DomainEvent]:
        return self._published_events.copy()

    def clear(self) -> None:
        self._published_events.clear()

    def get_events_by_type(self, event_type: str) -> List[DomainEvent]:
        return [e for e in self._published_events if e.event_type == event_type]


class CompositeEventPublisher(EventPublisher):
    """
    Publisher que delega para múltiplos publishers.
    """

    def __init__(self, publishers: List[EventPublisher] = None):
        self._publishers = publishers or []

    def add_publisher(self, publisher: EventPublisher) -> None:
        self._publishers.append(publisher)

    def publish(self, event: DomainEvent) -> None:
        for publisher in self._publishers:
            try:
                publisher.publish(event)
            except Exception as e:
                logger.error(
                    f"Erro ao publicar em {publisher.__class__.__name__}: {e}"
                )

    def publish_batch(self, events: List[DomainEvent]) -> None:
        for publisher in self._publishers:
            try:
                publisher.publish_batch(events)
            except Exception as e:
                logger.error(
                    f"Erro ao publicar batch em {publisher.__class__.__name__}: {e}"
                )


def get_event_publisher(mode: str = "logging") -> EventPublisher:
    """
    Factory para obter publisher conforme EVENT_PUBLISHER_MODE.

    Args:
        mode: "celery" para processamento assíncrono, "logging" caso contrário
    """
    if mode == "celery":
        return CeleryEventPublisher()
    return LoggingEventPublisher(dispatch_to_celery=False)
