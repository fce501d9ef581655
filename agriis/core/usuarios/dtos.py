"""
DTOs do Domínio de Usuários.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional

from .entities import Usuario


@dataclass(frozen=True)
class CriarUsuarioInputDTO:
    """
    Attributes:
        nome: Nome completo
        email: Email (login)
        senha: Senha em texto puro (vira hash no service)
        celular / cpf: Opcionais
        roles: Nomes ou valores de Roles
    """

    nome: str
    email: str
    senha: Optional[str] = None
    celular: Optional[str] = None
    cpf: Optional[str] = None
    roles: tuple = field(default_factory=tuple)


@dataclass(frozen=True)
class AtualizarUsuarioInputDTO:
    nome: str
    email: Optional[str] = None
    celular: Optional[str] = None
    cpf: Optional[str] = None
    logo_url: Optional[str] = None


@dataclass(frozen=True)
class ListarUsuariosQueryDTO:
    ativo: Optional[bool] = None
    busca: Optional[str] = None
    pagina: int = 1
    por_pagina: int = 20


@dataclass
class UsuarioOutputDTO:
    id: int
    nome: str
    email: str
    celular: Optional[str]
    cpf: Optional[str]
    ativo: bool
    ultimo_login: Optional[datetime]
    logo_url: Optional[str]
    roles: List[str]
    criado_em: datetime

    @classmethod
    def from_entity(cls, usuario: Usuario) -> "UsuarioOutputDTO":
        return cls(
            id=usuario.id,
            nome=usuario.nome,
            email=usuario.email,
            celular=usuario.celular,
            cpf=usuario.cpf,
            ativo=usuario.ativo,
            ultimo_login=usuario.ultimo_login,
            logo_url=usuario.logo_url,
            roles=usuario.obter_roles(),
            criado_em=usuario.criado_em,
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "nome": self.nome,
            "email": self.email,
            "celular": self.celular,
            "cpf": self.cpf,
            "ativo": self.ativo,
            "ultimo_login": self.ultimo_login.isoformat() if self.ultimo_login else None,
            "logo_url": self.logo_url,
            "roles": list(self.roles),
            "criado_em": self.criado_em.isoformat(),
        }
