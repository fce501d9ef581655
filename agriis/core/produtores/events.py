"""
Domain Events do Domínio de Produtores.

Eventos:
- ProdutorCriadoEvent: Novo produtor cadastrado
- ProdutorStatusAlteradoEvent: Produtor autorizado/negado
"""

from dataclasses import dataclass
from typing import Optional

from agriis.core.shared.events import DomainEvent, registrar_evento


@registrar_evento
@dataclass
class ProdutorCriadoEvent(DomainEvent):
    nome: str = ""
    documento: str = ""

    @property
    def aggregate_type(self) -> str:
        return "Produtor"


@registrar_evento
@dataclass
class ProdutorStatusAlteradoEvent(DomainEvent):
    """
    Evento: status do produtor mudou.

    Attributes:
        status_anterior: Valor de StatusProdutor antes da mudança
        status_novo: Valor de StatusProdutor após a mudança
        usuario_id: Usuário que realizou a autorização (se manual)
    """

    status_anterior: str = ""
    status_novo: str = ""
    usuario_id: Optional[int] = None

    @property
    def aggregate_type(self) -> str:
        return "Produtor"
