"""
Ports (Interfaces) do Domínio de Fornecedores.
"""

from typing import Dict, List, Optional, Protocol, runtime_checkable

from agriis.core.shared.dtos import PaginacaoParams, PaginatedResultDTO

from .entities import Fornecedor, UsuarioFornecedor


@runtime_checkable
class FornecedorRepository(Protocol):

    def save(self, fornecedor: Fornecedor) -> Fornecedor:
        ...

    def get_by_id(self, fornecedor_id: int) -> Optional[Fornecedor]:
        ...

    def get_by_cnpj(self, cnpj: str) -> Optional[Fornecedor]:
        """Busca por CNPJ (somente dígitos)."""
        ...

    def delete(self, fornecedor_id: int) -> bool:
        ...

    def list_paginated(
        self,
        params: PaginacaoParams,
        ativo: Optional[bool] = None,
        busca: Optional[str] = None,
    ) -> PaginatedResultDTO:
        ...


@runtime_checkable
class UsuarioFornecedorRepository(Protocol):

    def save(self, vinculo: UsuarioFornecedor) -> UsuarioFornecedor:
        ...

    def get_by_usuario_fornecedor(
        self, usuario_id: int, fornecedor_id: int
    ) -> Optional[UsuarioFornecedor]:
        ...

    def list_por_fornecedor(self, fornecedor_id: int) -> List[UsuarioFornecedor]:
        ...

    def list_por_usuario(self, usuario_id: int) -> List[UsuarioFornecedor]:
        ...


class InMemoryFornecedorRepository:

    def __init__(self):
        self._fornecedores: Dict[int, Fornecedor] = {}
        self._next_id = 1

    def save(self, fornecedor: Fornecedor) -> Fornecedor:
        if fornecedor.id is None:
            fornecedor.id = self._next_id
            self._next_id += 1
        self._fornecedores[fornecedor.id] = fornecedor
        return fornecedor

    def get_by_id(self, fornecedor_id: int) -> Optional[Fornecedor]:
        return self._fornecedores.get(fornecedor_id)

    def get_by_cnpj(self, cnpj: str) -> Optional[Fornecedor]:
        for fornecedor in self._fornecedores.values():
            if fornecedor.cnpj == cnpj:
                return fornecedor
        return None

    def delete(self, fornecedor_id: int) -> bool:
        return self._fornecedores.pop(fornecedor_id, None) is not None

    def list_paginated(self, params, ativo=None, busca=None) -> PaginatedResultDTO:
        fornecedores = sorted(self._fornecedores.values(), key=lambda f: f.nome)
        if ativo is not None:
            fornecedores = [f for f in fornecedores if f.ativo == ativo]
        if busca:
            termo = busca.lower()
            fornecedores = [
                f for f in fornecedores if termo in f.nome.lower() or termo in f.cnpj
            ]
        return PaginatedResultDTO.paginar(fornecedores, params)


class InMemoryUsuarioFornecedorRepository:

    def __init__(self):
        self._vinculos: Dict[int, UsuarioFornecedor] = {}
        self._next_id = 1

    def save(self, vinculo: UsuarioFornecedor) -> UsuarioFornecedor:
        if vinculo.id is None:
            vinculo.id = self._next_id
            self._next_id += 1
        self._vinculos[vinculo.id] = vinculo
        return vinculo

    def get_by_usuario_fornecedor(self, usuario_id, fornecedor_id) -> Optional[UsuarioFornecedor]:
        for vinculo in self._vinculos.values():
            if vinculo.usuario_id == usuario_id and vinculo.fornecedor_id == fornecedor_id:
                return vinculo
        return None

    def list_por_fornecedor(self, fornecedor_id: int) -> List[UsuarioFornecedor]:
        return [v for v in self._vinculos.values() if v.fornecedor_id == fornecedor_id]

    def list_por_usuario(self, usuario_id: int) -> List[UsuarioFornecedor]:
        return [v for v in self._vinculos.values() if v.usuario_id == usuario_id]
