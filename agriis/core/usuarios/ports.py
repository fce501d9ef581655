"""
Ports (Interfaces) do Domínio de Usuários.

- UsuarioRepository: persistência
- HasherSenha: geração/verificação de hash de senha (implementado no adapter
  com django.contrib.auth.hashers)
"""

from typing import Dict, List, Optional, Protocol, runtime_checkable

from agriis.core.shared.dtos import PaginacaoParams, PaginatedResultDTO

from .entities import Usuario


@runtime_checkable
class UsuarioRepository(Protocol):

    def save(self, usuario: Usuario) -> Usuario:
        ...

    def get_by_id(self, usuario_id: int) -> Optional[Usuario]:
        ...

    def get_by_email(self, email: str) -> Optional[Usuario]:
        ...

    def delete(self, usuario_id: int) -> bool:
        ...

    def list_paginated(
        self,
        params: PaginacaoParams,
        ativo: Optional[bool] = None,
        busca: Optional[str] = None,
    ) -> PaginatedResultDTO:
        """Lista por nome, filtrando por ativo e busca (nome/email)."""
        ...


@runtime_checkable
class HasherSenha(Protocol):

    def gerar_hash(self, senha: str) -> str:
        ...

    def verificar(self, senha: str, senha_hash: str) -> bool:
        ...


class InMemoryUsuarioRepository:
    """Implementação em memória para testes."""

    def __init__(self):
        self._usuarios: Dict[int, Usuario] = {}
        self._next_id = 1

    def save(self, usuario: Usuario) -> Usuario:
        if usuario.id is None:
            usuario.id = self._next_id
            self._next_id += 1
        self._usuarios[usuario.id] = usuario
        return usuario

    def get_by_id(self, usuario_id: int) -> Optional[Usuario]:
        return self._usuarios.get(usuario_id)

    def get_by_email(self, email: str) -> Optional[Usuario]:
        email = (email or "").strip().lower()
        for usuario in self._usuarios.values():
            if usuario.email == email:
                return usuario
        return None

    def delete(self, usuario_id: int) -> bool:
        return self._usuarios.pop(usuario_id, None) is not None

    def list_all(self) -> List[Usuario]:
        return sorted(self._usuarios.values(), key=lambda u: u.nome)

    def list_paginated(self, params, ativo=None, busca=None) -> PaginatedResultDTO:
        usuarios = self.list_all()
        if ativo is not None:
            usuarios = [u for u in usuarios if u.ativo == ativo]
        if busca:
            termo = busca.lower()
            usuarios = [u for u in usuarios if termo in u.nome.lower() or termo in u.email]
        return PaginatedResultDTO.paginar(usuarios, params)

    def clear(self) -> None:
        self._usuarios.clear()
        self._next_id = 1
