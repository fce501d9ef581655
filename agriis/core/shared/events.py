"""
Domain Events dos módulos do Agriis.

Pedidos, Combos e Produtores registram fatos (pedido fechado, proposta
criada, combo expirado...) que outros módulos consomem sem import direto.

Ciclo de vida:
    1. O use case enfileira o evento na UnitOfWork
    2. Após o commit a UoW grava no Event Store e entrega ao publisher
    3. O publisher Celery roteia para o handler pelo event_type

Cada evento concreto é registrado com @registrar_evento, o que permite
reconstruí-lo a partir do Event Store (evento_from_dict).
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field, fields
from datetime import datetime
from typing import Any, Dict, Optional, Type
import uuid

_BASE_FIELDS = ("event_id", "aggregate_id", "occurred_at", "version")

EVENTOS_REGISTRADOS: Dict[str, Type["DomainEvent"]] = {}


def registrar_evento(cls: Type["DomainEvent"]) -> Type["DomainEvent"]:
    """Decorator: torna o evento reconstruível pelo nome da classe."""
    EVENTOS_REGISTRADOS[cls.__name__] = cls
    return cls


@dataclass
class DomainEvent(ABC):
    """
    Fato ocorrido em um agregado, nomeado no passado.

    aggregate_id aceita int (ids do banco) e é guardado como string,
    que é o formato das colunas do Event Store.

    Example:
        @registrar_evento
        @dataclass
        class PedidoFechadoEvent(DomainEvent):
            fornecedor_id: int = 0

            @property
            def aggregate_type(self) -> str:
                return "Pedido"
    """

    event_id: str = field(default_factory=lambda: str(uuid.uuid4()))
    aggregate_id: str = ""
    occurred_at: datetime = field(default_factory=datetime.now)
    version: int = 1

    def __post_init__(self):
        if self.aggregate_id in (None, ""):
            raise ValueError("aggregate_id é obrigatório")
        self.aggregate_id = str(self.aggregate_id)

    @property
    @abstractmethod
    def aggregate_type(self) -> str:
        ...

    @property
    def event_type(self) -> str:
        return self.__class__.__name__

    def _get_event_data(self) -> Dict[str, Any]:
        """Campos próprios do evento (sem os campos da base)."""
        return {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if f.name not in _BASE_FIELDS
        }

    def to_dict(self) -> Dict[str, Any]:
        """Formato de transporte (payload Celery e logs)."""
        return {
            "event_id": self.event_id,
            "event_type": self.event_type,
            "aggregate_id": self.aggregate_id,
            "aggregate_type": self.aggregate_type,
            "occurred_at": self.occurred_at.isoformat(),
            "version": self.version,
            "data": self._get_event_data(),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "DomainEvent":
        """
        Reconstrói o evento a partir de to_dict() ou de uma linha do Event Store.

        Aceita os dados em "data" (transporte) ou "event_data" (Event Store);
        chaves que o evento não conhece são ignoradas.
        """
        conhecidos = {f.name for f in fields(cls)} - set(_BASE_FIELDS)
        dados = data.get("data", data.get("event_data")) or {}

        occurred_at = data.get("occurred_at")
        if isinstance(occurred_at, str):
            occurred_at = datetime.fromisoformat(occurred_at)

        return cls(
            event_id=data.get("event_id") or str(uuid.uuid4()),
            aggregate_id=data["aggregate_id"],
            occurred_at=occurred_at or datetime.now(),
            version=data.get("version", 1),
            **{k: v for k, v in dados.items() if k in conhecidos},
        )

    def __repr__(self) -> str:
        return f"{self.event_type}(aggregate_id={self.aggregate_id}, event_id={self.event_id[:8]})"


def evento_from_dict(data: Dict[str, Any]) -> DomainEvent:
    """
    Reconstrói qualquer evento registrado pelo campo event_type.

    Raises:
        KeyError: event_type desconhecido
    """
    event_type = data["event_type"]
    try:
        event_cls = EVENTOS_REGISTRADOS[event_type]
    except KeyError:
        raise KeyError(f"Evento não registrado: {event_type}") from None
    return event_cls.from_dict(data)


class EventMetadata:
    """
    Rastreamento gravado junto aos eventos de uma transação.

    O correlation_id é compartilhado por todos os eventos de um mesmo
    commit; user_id é o usuário autenticado da requisição, se houver.
    """

    def __init__(
        self,
        correlation_id: Optional[str] = None,
        causation_id: Optional[str] = None,
        user_id: Optional[str] = None,
    ):
        self.correlation_id = correlation_id or str(uuid.uuid4())
        self.causation_id = causation_id
        self.user_id = str(user_id) if user_id is not None else None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "correlation_id": self.correlation_id,
            "causation_id": self.causation_id,
            "user_id": self.user_id,
        }
