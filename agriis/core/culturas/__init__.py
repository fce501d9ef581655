"""
Módulo de Culturas.
"""

from .entities import Cultura
from .dtos import CriarCulturaInputDTO, AtualizarCulturaInputDTO, CulturaOutputDTO
from .ports import CulturaRepository, InMemoryCulturaRepository
from .use_cases import CulturaService

__all__ = [
    "Cultura",
    "CriarCulturaInputDTO",
    "AtualizarCulturaInputDTO",
    "CulturaOutputDTO",
    "CulturaRepository",
    "InMemoryCulturaRepository",
    "CulturaService",
]
