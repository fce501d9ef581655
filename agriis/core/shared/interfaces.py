"""
Interfaces (Ports) - Contratos entre Core e Adapters.

Este módulo define as interfaces que os Adapters devem implementar.
São os "Ports" da Arquitetura Hexagonal.

Tipos de Ports:
- Driven Ports: Repository, UnitOfWork, EventPublisher, EventStore
- Driving Ports: os próprios Use Cases de cada módulo

Princípio: Core define interfaces; Adapters implementam.
"""

from abc import ABC, abstractmethod
from typing import Generic, List, Optional, Protocol, TypeVar

from .events import DomainEvent, evento_from_dict


T = TypeVar("T")


class UnitOfWork(ABC):
    """
    Unit of Work - Coordena transações atômicas.

    Garante que múltiplas operações de persistência sejam
    executadas como uma única unidade e que eventos de domínio
    só sejam publicados após commit bem-sucedido.

    Pattern: Context Manager
        with uow:
            pedido_repo.save(pedido)
            proposta_repo.save(proposta)
            uow.publish_event(event)
        # Commit ao sair sem erro, rollback se exceção
    """

    def __init__(self):
        self._events: List[DomainEvent] = []

    def __enter__(self) -> "UnitOfWork":
        self._begin_transaction()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> bool:
        if exc_type is not None:
            self.rollback()
        else:
            self.commit()
        return False  # Não suprime exceções

    @abstractmethod
    def _begin_transaction(self) -> None:
        """Inicia uma nova transação."""
        raise NotImplementedError

    @abstractmethod
    def commit(self) -> None:
        """
        Persiste todas as mudanças e publica eventos.

        Note:
            Eventos só são publicados após commit bem-sucedido.
            Se commit falhar, eventos são descartados.
        """
        raise NotImplementedError

    @abstractmethod
    def rollback(self) -> None:
        """Desfaz todas as mudanças e descarta eventos."""
        raise NotImplementedError

    def publish_event(self, event: DomainEvent) -> None:
        """
        Enfileira evento para publicação após commit.

        Args:
            event: Evento de domínio a ser publicado
        """
        self._events.append(event)

    def collect_events(self) -> List[DomainEvent]:
        """Retorna eventos enfileirados (testing/debugging)."""
        return list(self._events)

    def clear_events(self) -> None:
        """Limpa fila de eventos."""
        self._events.clear()


class Repository(Protocol, Generic[T]):
    """
    Interface genérica para repositórios.

    Ids são inteiros atribuídos pelo repositório no primeiro save.
    Usando Protocol para permitir duck typing.
    """

    def save(self, entity: T) -> T:
        """Persiste entidade (create ou update) e retorna com id."""
        ...

    def get_by_id(self, entity_id: int) -> Optional[T]:
        """Busca entidade por ID."""
        ...

    def delete(self, entity_id: int) -> bool:
        """Remove entidade. Retorna True se existia."""
        ...

    def list_all(self) -> List[T]:
        """Lista todas as entidades."""
        ...


class EventPublisher(ABC):
    """
    Interface para publicação de eventos.

    Adapters implementam para integrar com logging, Celery
    ou com a memória (testes).
    """

    @abstractmethod
    def publish(self, event: DomainEvent) -> None:
        """Publica evento para consumidores."""
        raise NotImplementedError

    @abstractmethod
    def publish_batch(self, events: List[DomainEvent]) -> None:
        """Publica múltiplos eventos em batch."""
        raise NotImplementedError


class EventStore(ABC):
    """
    Interface para persistência do histórico de eventos.

    Permite auditoria e reconstrução do que aconteceu com
    cada agregado (pedido, combo, produtor...).
    """

    @abstractmethod
    def append(
        self,
        event: DomainEvent,
        sequence: int = 1,
        correlation_id: Optional[str] = None,
        user_id: Optional[str] = None,
    ) -> None:
        """
        Adiciona evento ao store.

        Args:
            event: Evento a ser persistido
            sequence: Número de sequência dentro do agregado
            correlation_id: ID de correlação
            user_id: Usuário que originou a ação
        """
        raise NotImplementedError

    @abstractmethod
    def get_events_for_aggregate(
        self,
        aggregate_id: str,
        since_sequence: int = 0,
    ) -> List[dict]:
        """
        Recupera eventos de um agregado ordenados por sequência.

        Args:
            aggregate_id: ID do agregado
            since_sequence: Sequência inicial (replay parcial)
        """
        raise NotImplementedError

    @abstractmethod
    def last_sequence(self, aggregate_id: str) -> int:
        """Última sequência gravada para o agregado (0 se nenhuma)."""
        raise NotImplementedError

    def load_events(self, aggregate_id: str) -> List[DomainEvent]:
        """Eventos do agregado reconstruídos como DomainEvent."""
        return [evento_from_dict(row) for row in self.get_events_for_aggregate(aggregate_id)]


UoW = UnitOfWork
