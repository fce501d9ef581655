"""
Ports (Interfaces) do Domínio de Autenticação.
"""

from datetime import datetime
from typing import Dict, List, Optional, Protocol, runtime_checkable

from agriis.core.usuarios.entities import Usuario

from .entities import RefreshToken


@runtime_checkable
class RefreshTokenRepository(Protocol):

    def save(self, refresh_token: RefreshToken) -> RefreshToken:
        ...

    def get_by_token(self, token: str) -> Optional[RefreshToken]:
        ...

    def list_validos_por_usuario(self, usuario_id: int) -> List[RefreshToken]:
        ...

    def revogar_todos_por_usuario(self, usuario_id: int) -> int:
        """Revoga os tokens ainda não revogados; retorna a quantidade."""
        ...

    def delete_expirados(self, agora: datetime) -> int:
        ...


@runtime_checkable
class GeradorToken(Protocol):
    """
    Emissão e validação de tokens.

    O access token é assinado e carrega o id do usuário; o refresh
    token é um valor aleatório opaco guardado no repositório.
    """

    def gerar_access_token(self, usuario: Usuario) -> str:
        ...

    def obter_usuario_id(self, access_token: str) -> Optional[int]:
        """Id do usuário, ou None se assinatura inválida ou expirada."""
        ...

    def gerar_refresh_token(self) -> str:
        ...

    @property
    def access_token_segundos(self) -> int:
        ...


class InMemoryRefreshTokenRepository:

    def __init__(self):
        self._tokens: Dict[int, RefreshToken] = {}
        self._next_id = 1

    def save(self, refresh_token: RefreshToken) -> RefreshToken:
        if refresh_token.id is None:
            refresh_token.id = self._next_id
            self._next_id += 1
        self._tokens[refresh_token.id] = refresh_token
        return refresh_token

    def get_by_token(self, token: str) -> Optional[RefreshToken]:
        return next((t for t in self._tokens.values() if t.token == token), None)

    def list_validos_por_usuario(self, usuario_id: int) -> List[RefreshToken]:
        return [
            t for t in self._tokens.values()
            if t.usuario_id == usuario_id and t.esta_valido()
        ]

    def revogar_todos_por_usuario(self, usuario_id: int) -> int:
        ativos = [
            t for t in self._tokens.values()
            if t.usuario_id == usuario_id and not t.revogado
        ]
        for token in ativos:
            token.revogar()
        return len(ativos)

    def delete_expirados(self, agora: datetime) -> int:
        expirados = [i for i, t in self._tokens.items() if t.expirou(agora)]
        for token_id in expirados:
            del self._tokens[token_id]
        return len(expirados)
