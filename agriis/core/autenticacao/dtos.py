"""
DTOs do Domínio de Autenticação.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional

from agriis.core.usuarios.entities import Usuario


@dataclass
class UsuarioLogadoDTO:
    id: int
    nome: str
    email: str
    roles: List[str] = field(default_factory=list)
    logo_url: Optional[str] = None
    ultimo_login: Optional[datetime] = None

    @classmethod
    def from_entity(cls, usuario: Usuario) -> "UsuarioLogadoDTO":
        return cls(
            id=usuario.id,
            nome=usuario.nome,
            email=usuario.email,
            roles=usuario.obter_roles(),
            logo_url=usuario.logo_url,
            ultimo_login=usuario.ultimo_login,
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "nome": self.nome,
            "email": self.email,
            "roles": self.roles,
            "logo_url": self.logo_url,
            "ultimo_login": self.ultimo_login.isoformat() if self.ultimo_login else None,
        }


@dataclass
class LoginOutputDTO:
    access_token: str
    refresh_token: str
    expires_in: int
    usuario: UsuarioLogadoDTO
    token_type: str = "Bearer"

    def to_dict(self) -> dict:
        return {
            "access_token": self.access_token,
            "refresh_token": self.refresh_token,
            "token_type": self.token_type,
            "expires_in": self.expires_in,
            "usuario": self.usuario.to_dict(),
        }
