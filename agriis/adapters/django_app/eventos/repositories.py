"""
Event Store usando Django ORM.
"""

from typing import Any, Dict, List, Optional
from datetime import datetime
import logging

from django.db.models import Max

from agriis.core.shared.events import DomainEvent
from agriis.core.shared.interfaces import EventStore

from .models import DomainEventModel

logger = logging.getLogger(__name__)


class DjangoEventStore(EventStore):
    """
    Persiste Domain Events na tabela domain_events.

    Example:
        store = DjangoEventStore()
        store.append(PedidoFechadoEvent(aggregate_id=10), sequence=3)
        store.load_events("10")  # [PedidoFechadoEvent(...)]
    """

    def append(
        self,
        event: DomainEvent,
        sequence: int = 1,
        correlation_id: Optional[str] = None,
        user_id: Optional[str] = None,
    ) -> None:
        DomainEventModel.objects.create(
            event_id=event.event_id,
            event_type=event.event_type,
            aggregate_type=event.aggregate_type,
            aggregate_id=event.aggregate_id,
            event_data=event._get_event_data(),
            version=event.version,
            sequence=sequence,
            occurred_at=event.occurred_at,
            correlation_id=correlation_id,
            user_id=user_id,
        )

        logger.debug(f"Event stored: {event.event_type} for {event.aggregate_id}")

    def last_sequence(self, aggregate_id: str) -> int:
        result = DomainEventModel.objects.filter(
            aggregate_id=aggregate_id
        ).aggregate(ultimo=Max('sequence'))
        return result['ultimo'] or 0

    def get_events_for_aggregate(
        self,
        aggregate_id: str,
        since_sequence: int = 0,
    ) -> List[Dict[str, Any]]:
        events = (
            DomainEventModel.objects
            .filter(aggregate_id=aggregate_id, sequence__gte=since_sequence)
            .order_by('sequence')
        )

        return [
            {
                'event_id': e.event_id,
                'event_type': e.event_type,
                'aggregate_type': e.aggregate_type,
                'aggregate_id': e.aggregate_id,
                'event_data': e.event_data,
                'version': e.version,
                'sequence': e.sequence,
                'occurred_at': e.occurred_at,
            }
            for e in events
        ]

    def remove_older_than(self, cutoff: datetime) -> int:
        """Remove eventos ocorridos antes de cutoff. Retorna quantidade."""
        deleted, _ = DomainEventModel.objects.filter(occurred_at__lt=cutoff).delete()
        return deleted
