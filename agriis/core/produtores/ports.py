"""
Ports (Interfaces) do Domínio de Produtores.
"""

from typing import Dict, Optional, Protocol, runtime_checkable

from agriis.core.shared.dtos import PaginacaoParams, PaginatedResultDTO

from .entities import Produtor, StatusProdutor


@runtime_checkable
class ProdutorRepository(Protocol):

    def save(self, produtor: Produtor) -> Produtor:
        ...

    def get_by_id(self, produtor_id: int) -> Optional[Produtor]:
        ...

    def get_by_documento(self, documento: str) -> Optional[Produtor]:
        """Busca por CPF ou CNPJ (somente dígitos)."""
        ...

    def delete(self, produtor_id: int) -> bool:
        ...

    def list_paginated(
        self,
        params: PaginacaoParams,
        status: Optional[StatusProdutor] = None,
        busca: Optional[str] = None,
    ) -> PaginatedResultDTO:
        ...


class InMemoryProdutorRepository:

    def __init__(self):
        self._produtores: Dict[int, Produtor] = {}
        self._next_id = 1

    def save(self, produtor: Produtor) -> Produtor:
        if produtor.id is None:
            produtor.id = self._next_id
            self._next_id += 1
        self._produtores[produtor.id] = produtor
        return produtor

    def get_by_id(self, produtor_id: int) -> Optional[Produtor]:
        return self._produtores.get(produtor_id)

    def get_by_documento(self, documento: str) -> Optional[Produtor]:
        for produtor in self._produtores.values():
            if documento in (produtor.cpf, produtor.cnpj):
                return produtor
        return None

    def delete(self, produtor_id: int) -> bool:
        return self._produtores.pop(produtor_id, None) is not None

    def list_paginated(self, params, status=None, busca=None) -> PaginatedResultDTO:
        produtores = sorted(self._produtores.values(), key=lambda p: p.nome)
        if status is not None:
            produtores = [p for p in produtores if p.status == status]
        if busca:
            termo = busca.lower()
            produtores = [
                p for p in produtores
                if termo in p.nome.lower() or termo in (p.cpf or "") or termo in (p.cnpj or "")
            ]
        return PaginatedResultDTO.paginar(produtores, params)

    def clear(self) -> None:
        self._produtores.clear()
        self._next_id = 1
