"""
Unit of Work - Implementação Django.

Gerencia transações atômicas entre múltiplos repositórios
(ex.: Pedido + Proposta na mesma negociação).

Responsabilidades:
- Iniciar/finalizar transações
- Commit/Rollback coordenado
- Persistir eventos no Event Store junto com a transação
- Publicar eventos somente após commit bem-sucedido
"""

from typing import Dict, List, Optional
import logging

from django.db import transaction

from agriis.core.shared.events import DomainEvent, EventMetadata
from agriis.core.shared.interfaces import EventPublisher, EventStore, UnitOfWork

logger = logging.getLogger(__name__)


class DjangoUnitOfWork(UnitOfWork):
    """
    Implementação Django do Unit of Work.

    Usa django.db.transaction com autocommit desligado durante o bloco.
    Quando já existe um bloco atomic aberto (ex.: testes com pytest-django),
    delega para transaction.atomic() em vez de mexer no autocommit.

    Example:
        with DjangoUnitOfWork(event_publisher=publisher) as uow:
            pedido_repo.save(pedido)
            uow.publish_event(PedidoFechadoEvent(aggregate_id=pedido.id))
        # Commit + eventos publicados
    """

    def __init__(
        self,
        event_publisher: Optional[EventPublisher] = None,
        event_store: Optional[EventStore] = None,
        metadata: Optional[EventMetadata] = None,
    ):
        super().__init__()
        self._event_publisher = event_publisher
        self._event_store = event_store
        self._metadata = metadata
        self._transaction_started = False
        self._atomic = None
        self._committed = False
        self._rolled_back = False
        self._sequence_counters: Dict[str, int] = {}

    def _begin_transaction(self) -> None:
        self._committed = False
        self._rolled_back = False

        if transaction.get_connection().in_atomic_block:
            self._atomic = transaction.atomic()
            self._atomic.__enter__()
        else:
            transaction.set_autocommit(False)
        self._transaction_started = True
        logger.debug("Transaction started")

    def commit(self) -> None:
        """
        Ordem de execução:
        1. Persistir eventos no Event Store
        2. Commit da transação
        3. Publicar eventos
        4. Restaurar autocommit
        """
        if self._committed or self._rolled_back:
            logger.warning("Transaction already finalized")
            return

        try:
            if self._event_store and self._events:
                self._persist_events()

            if self._transaction_started:
                if self._atomic is not None:
                    self._atomic.__exit__(None, None, None)
                    self._atomic = None
                else:
                    transaction.commit()
                logger.debug("Transaction committed")

            self._committed = True
        except Exception as e:
            logger.error(f"Commit failed: {e}")
            self.rollback()
            raise
        finally:
            self._finalize()

        if self._events:
            self._publish_events()

    def rollback(self) -> None:
        if self._committed or self._rolled_back:
            return

        try:
            if self._transaction_started:
                if self._atomic is not None:
                    self._atomic.__exit__(Exception, Exception("rollback"), None)
                    self._atomic = None
                else:
                    transaction.rollback()
                logger.debug("Transaction rolled back")
        except Exception as e:
            logger.error(f"Rollback failed: {e}")
        finally:
            self._rolled_back = True
            self.clear_events()
            self._finalize()

    def _finalize(self) -> None:
        if self._transaction_started:
            if not transaction.get_connection().in_atomic_block:
                transaction.set_autocommit(True)
            self._transaction_started = False

    def _persist_events(self) -> None:
        correlation_id = self._metadata.correlation_id if self._metadata else None
        user_id = self._metadata.user_id if self._metadata else None

        for event in self._events:
            self._event_store.append(
                event=event,
                sequence=self._get_next_sequence(event.aggregate_id),
                correlation_id=correlation_id,
                user_id=user_id,
            )

    def _publish_events(self) -> None:
        """
        Publica eventos após commit.

        Falha de publicação é logada e não desfaz a transação:
        o Event Store permite reprocessar.
        """
        events = list(self._events)
        self.clear_events()

        for event in events:
            logger.info(
                f"Publishing event: {event.event_type} "
                f"for aggregate {event.aggregate_id}"
            )

            if self._event_publisher:
                try:
                    self._event_publisher.publish(event)
                except Exception as e:
                    logger.error(f"Failed to publish event: {e}", exc_info=True)

    def _get_next_sequence(self, aggregate_id: str) -> int:
        if aggregate_id not in self._sequence_counters:
            self._sequence_counters[aggregate_id] = self._event_store.last_sequence(aggregate_id)

        self._sequence_counters[aggregate_id] += 1
        return self._sequence_counters[aggregate_id]

    @property
    def is_committed(self) -> bool:
        return self._committed

    @property
    def is_rolled_back(self) -> bool:
        return self._rolled_back


class InMemoryUnitOfWork(UnitOfWork):
    """
    Unit of Work em memória para testes.

    Não persiste nada; registra commits/rollbacks e repassa os
    eventos ao publisher (se fornecido) após o commit.

    Example:
        uow = InMemoryUnitOfWork()
        with uow:
            uow.publish_event(event)

        assert uow.committed
        assert len(uow.published_events) == 1
    """

    def __init__(self, event_publisher: Optional[EventPublisher] = None):
        super().__init__()
        self._event_publisher = event_publisher
        self._committed = False
        self._rolled_back = False
        self._published_events: List[DomainEvent] = []

    def _begin_transaction(self) -> None:
        pass

    def commit(self) -> None:
        self._committed = True
        events = list(self._events)
        self._published_events.extend(events)
        self.clear_events()
        if self._event_publisher:
            self._event_publisher.publish_batch(events)

    def rollback(self) -> None:
        self._rolled_back = True
        self.clear_events()

    @property
    def committed(self) -> bool:
        return self._committed

    @property
    def rolled_back(self) -> bool:
        return self._rolled_back

    @property
    def published_events(self) -> List[DomainEvent]:
        return self._published_events

    def reset(self) -> None:
        self._committed = False
        self._rolled_back = False
        self._published_events.clear()
        self.clear_events()

