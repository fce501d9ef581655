"""
Ports (Interfaces) do Domínio de Catálogos.
"""

from datetime import date
from typing import Dict, List, Optional, Protocol, runtime_checkable

from agriis.core.shared.dtos import PaginacaoParams, PaginatedResultDTO

from .entities import Catalogo, CatalogoItem


@runtime_checkable
class CatalogoRepository(Protocol):
    """Persiste o agregado Catalogo com seus itens."""

    def save(self, catalogo: Catalogo) -> Catalogo:
        ...

    def get_by_id(self, catalogo_id: int) -> Optional[Catalogo]:
        ...

    def get_by_chave(
        self, safra_id: int, ponto_distribuicao_id: int, cultura_id: int, categoria_id: int
    ) -> Optional[Catalogo]:
        ...

    def delete(self, catalogo_id: int) -> bool:
        ...

    def list_paginated(self, params: PaginacaoParams, **filtros) -> PaginatedResultDTO:
        """Filtros: safra_id, ponto_distribuicao_id, cultura_id, categoria_id, moeda, ativo."""
        ...

    def list_vigentes(self, data: date) -> List[Catalogo]:
        ...

    def get_item_vigente(
        self, produto_id: int, data: date, cultura_id: Optional[int] = None
    ) -> Optional[CatalogoItem]:
        """Primeiro item ativo do produto em um catálogo vigente na data."""
        ...


class InMemoryCatalogoRepository:

    def __init__(self):
        self._catalogos: Dict[int, Catalogo] = {}
        self._next_id = 1
        self._next_item_id = 1

    def save(self, catalogo: Catalogo) -> Catalogo:
        if catalogo.id is None:
            catalogo.id = self._next_id
            self._next_id += 1
        for item in catalogo.itens:
            item.catalogo_id = catalogo.id
            if item.id is None:
                item.id = self._next_item_id
                self._next_item_id += 1
        self._catalogos[catalogo.id] = catalogo
        return catalogo

    def get_by_id(self, catalogo_id: int) -> Optional[Catalogo]:
        return self._catalogos.get(catalogo_id)

    def get_by_chave(self, safra_id, ponto_distribuicao_id, cultura_id, categoria_id):
        chave = (safra_id, ponto_distribuicao_id, cultura_id, categoria_id)
        return next((c for c in self._catalogos.values() if c.chave == chave), None)

    def delete(self, catalogo_id: int) -> bool:
        return self._catalogos.pop(catalogo_id, None) is not None

    def list_paginated(self, params, **filtros) -> PaginatedResultDTO:
        catalogos = list(self._catalogos.values())
        for nome, valor in filtros.items():
            if valor is not None:
                catalogos = [c for c in catalogos if getattr(c, nome) == valor]
        return PaginatedResultDTO.paginar(catalogos, params)

    def list_vigentes(self, data: date) -> List[Catalogo]:
        return [c for c in self._catalogos.values() if c.esta_vigente(data)]

    def get_item_vigente(self, produto_id, data, cultura_id=None) -> Optional[CatalogoItem]:
        for catalogo in self.list_vigentes(data):
            if cultura_id is not None and catalogo.cultura_id != cultura_id:
                continue
            item = catalogo.obter_item(produto_id)
            if item and item.ativo:
                return item
        return None
