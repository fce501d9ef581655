"""
Módulo de Fornecedores.
"""

from .entities import Fornecedor, Moeda, UsuarioFornecedor
from .ports import (
    FornecedorRepository,
    InMemoryFornecedorRepository,
    InMemoryUsuarioFornecedorRepository,
    UsuarioFornecedorRepository,
)
from .use_cases import FornecedorService

__all__ = [
    "Fornecedor",
    "Moeda",
    "UsuarioFornecedor",
    "FornecedorRepository",
    "UsuarioFornecedorRepository",
    "InMemoryFornecedorRepository",
    "InMemoryUsuarioFornecedorRepository",
    "FornecedorService",
]
