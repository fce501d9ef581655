"""
Domain Events do Domínio de Combos.
"""

from dataclasses import dataclass

from agriis.core.shared.events import DomainEvent, registrar_evento


@registrar_evento
@dataclass
class ComboCriadoEvent(DomainEvent):
    nome: str = ""
    fornecedor_id: int = 0
    safra_id: int = 0

    @property
    def aggregate_type(self) -> str:
        return "Combo"

@registrar_evento
@dataclass
class ComboExpiradoEvent(DomainEvent):
    fornecedor_id: int = 0
    data_fim: str = ""

    @property
    def aggregate_type(self) -> str:
        return "Combo"
