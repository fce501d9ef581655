"""
Módulo de Usuários.
"""

from .entities import Usuario, Roles
from .dtos import (
    CriarUsuarioInputDTO,
    AtualizarUsuarioInputDTO,
    ListarUsuariosQueryDTO,
    UsuarioOutputDTO,
)
from .ports import UsuarioRepository, HasherSenha, InMemoryUsuarioRepository
from .use_cases import UsuarioService

__all__ = [
    "Usuario",
    "Roles",
    "CriarUsuarioInputDTO",
    "AtualizarUsuarioInputDTO",
    "ListarUsuariosQueryDTO",
    "UsuarioOutputDTO",
    "UsuarioRepository",
    "HasherSenha",
    "InMemoryUsuarioRepository",
    "UsuarioService",
]
