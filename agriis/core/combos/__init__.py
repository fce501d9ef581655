"""
Módulo de Combos.
"""

from .entities import (
    Combo,
    ComboCategoriaDesconto,
    ComboItem,
    ComboLocalRecebimento,
    ModalidadePagamento,
    StatusCombo,
    TipoDesconto,
)
from .events import ComboCriadoEvent, ComboExpiradoEvent
from .dtos import (
    AtualizarComboInputDTO,
    ComboCategoriaDescontoInputDTO,
    ComboItemInputDTO,
    ComboLocalRecebimentoInputDTO,
    ComboOutputDTO,
    CriarComboInputDTO,
)
from .ports import ComboRepository, InMemoryComboRepository
from .use_cases import ComboService, MarcarCombosExpiradosService

__all__ = [
    "Combo",
    "ComboItem",
    "ComboLocalRecebimento",
    "ComboCategoriaDesconto",
    "StatusCombo",
    "ModalidadePagamento",
    "TipoDesconto",
    "ComboCriadoEvent",
    "ComboExpiradoEvent",
    "CriarComboInputDTO",
    "AtualizarComboInputDTO",
    "ComboItemInputDTO",
    "ComboLocalRecebimentoInputDTO",
    "ComboCategoriaDescontoInputDTO",
    "ComboOutputDTO",
    "ComboRepository",
    "InMemoryComboRepository",
    "ComboService",
    "MarcarCombosExpiradosService",
]
