"""
Módulo de Produtores.
"""

from .entities import Produtor, StatusProdutor, TipoAtividadeAgropecuaria
from .events import ProdutorCriadoEvent, ProdutorStatusAlteradoEvent
from .ports import InMemoryProdutorRepository, ProdutorRepository
from .use_cases import ProdutorService

__all__ = [
    "Produtor",
    "StatusProdutor",
    "TipoAtividadeAgropecuaria",
    "ProdutorCriadoEvent",
    "ProdutorStatusAlteradoEvent",
    "ProdutorRepository",
    "InMemoryProdutorRepository",
    "ProdutorService",
]
