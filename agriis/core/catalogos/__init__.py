"""
Módulo de Catálogos.
"""

from .entities import Catalogo, CatalogoItem
from .ports import CatalogoRepository, InMemoryCatalogoRepository
from .use_cases import CatalogoService

__all__ = [
    "Catalogo",
    "CatalogoItem",
    "CatalogoRepository",
    "InMemoryCatalogoRepository",
    "CatalogoService",
]
