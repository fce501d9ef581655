"""
Módulo de Propriedades.
"""

from .entities import Propriedade, PropriedadeCultura, Talhao
from .ports import InMemoryPropriedadeRepository, PropriedadeRepository
from .use_cases import PropriedadeService

__all__ = [
    "Propriedade",
    "PropriedadeCultura",
    "Talhao",
    "PropriedadeRepository",
    "InMemoryPropriedadeRepository",
    "PropriedadeService",
]
