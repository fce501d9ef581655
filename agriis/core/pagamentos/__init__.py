"""
Módulo de Pagamentos.
"""

from .entities import CulturaFormaPagamento, FormaPagamento
from .dtos import (
    AtualizarFormaPagamentoInputDTO,
    CriarCulturaFormaPagamentoInputDTO,
    CriarFormaPagamentoInputDTO,
    CulturaFormaPagamentoOutputDTO,
    FormaPagamentoOutputDTO,
)
from .ports import (
    CulturaFormaPagamentoRepository,
    FormaPagamentoRepository,
    InMemoryCulturaFormaPagamentoRepository,
    InMemoryFormaPagamentoRepository,
)
from .use_cases import CulturaFormaPagamentoService, FormaPagamentoService

__all__ = [
    "FormaPagamento",
    "CulturaFormaPagamento",
    "CriarFormaPagamentoInputDTO",
    "AtualizarFormaPagamentoInputDTO",
    "CriarCulturaFormaPagamentoInputDTO",
    "FormaPagamentoOutputDTO",
    "CulturaFormaPagamentoOutputDTO",
    "FormaPagamentoRepository",
    "CulturaFormaPagamentoRepository",
    "InMemoryFormaPagamentoRepository",
    "InMemoryCulturaFormaPagamentoRepository",
    "FormaPagamentoService",
    "CulturaFormaPagamentoService",
]
