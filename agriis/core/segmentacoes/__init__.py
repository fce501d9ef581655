"""
Módulo de Segmentações (descontos por porte do produtor).
"""

from .dtos import ResultadoDescontoSegmentado
from .entities import Grupo, GrupoSegmentacao, Segmentacao
from .ports import InMemorySegmentacaoRepository, SegmentacaoRepository
from .use_cases import CalculoDescontoSegmentadoService, SegmentacaoService

__all__ = [
    "Segmentacao",
    "Grupo",
    "GrupoSegmentacao",
    "ResultadoDescontoSegmentado",
    "SegmentacaoRepository",
    "InMemorySegmentacaoRepository",
    "SegmentacaoService",
    "CalculoDescontoSegmentadoService",
]
