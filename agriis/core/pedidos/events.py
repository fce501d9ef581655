"""
Domain Events do Domínio de Pedidos.

Publicados pelos serviços após o commit da unidade de trabalho e
roteados pelo dispatch_domain_event (Celery) para os handlers.
"""

from dataclasses import dataclass
from typing import Optional

from agriis.core.shared.events import DomainEvent, registrar_evento


@registrar_evento
@dataclass
class PedidoCriadoEvent(DomainEvent):
    """Pedido aberto para negociação."""

    fornecedor_id: int = 0
    produtor_id: int = 0
    data_limite_interacao: str = ""

    @property
    def aggregate_type(self) -> str:
        return "Pedido"


@registrar_evento
@dataclass
class PedidoFechadoEvent(DomainEvent):
    fornecedor_id: int = 0
    produtor_id: int = 0
    valor_liquido: float = 0.0

    @property
    def aggregate_type(self) -> str:
        return "Pedido"


@registrar_evento
@dataclass
class PedidoCanceladoPeloCompradorEvent(DomainEvent):
    fornecedor_id: int = 0
    produtor_id: int = 0

    @property
    def aggregate_type(self) -> str:
        return "Pedido"


@registrar_evento
@dataclass
class PedidoCanceladoPorTempoLimiteEvent(DomainEvent):
    """Emitido pelo job de prazo limite."""

    fornecedor_id: int = 0
    produtor_id: int = 0
    data_limite_interacao: str = ""

    @property
    def aggregate_type(self) -> str:
        return "Pedido"


@registrar_evento
@dataclass
class PropostaCriadaEvent(DomainEvent):
    pedido_id: int = 0
    autor: str = ""
    acao_comprador: Optional[str] = None
    usuario_id: int = 0

    @property
    def aggregate_type(self) -> str:
        return "Proposta"
