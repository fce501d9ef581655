"""
Módulo de Safras.
"""

from .entities import Safra
from .dtos import CriarSafraInputDTO, AtualizarSafraInputDTO, SafraOutputDTO
from .ports import SafraRepository, InMemorySafraRepository
from .use_cases import SafraService

__all__ = [
    "Safra",
    "CriarSafraInputDTO",
    "AtualizarSafraInputDTO",
    "SafraOutputDTO",
    "SafraRepository",
    "InMemorySafraRepository",
    "SafraService",
]
