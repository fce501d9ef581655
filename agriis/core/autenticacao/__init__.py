"""
Módulo de Autenticação.
"""

from .entities import RefreshToken
from .dtos import LoginOutputDTO, UsuarioLogadoDTO
from .ports import GeradorToken, InMemoryRefreshTokenRepository, RefreshTokenRepository
from .use_cases import AutenticacaoService, senha_atende_criterios

__all__ = [
    "RefreshToken",
    "LoginOutputDTO",
    "UsuarioLogadoDTO",
    "RefreshTokenRepository",
    "GeradorToken",
    "InMemoryRefreshTokenRepository",
    "AutenticacaoService",
    "senha_atende_criterios",
]
