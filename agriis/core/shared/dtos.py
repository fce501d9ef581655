"""
DTOs compartilhados de paginação.

Usados por todos os módulos nas listagens paginadas.
"""

from dataclasses import dataclass
from typing import Any, Generic, List, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class PaginacaoParams:
    """
    Parâmetros de paginação normalizados.

    pagina < 1 vira 1; por_pagina é limitado a [1, MAX_POR_PAGINA].
    """

    pagina: int = 1
    por_pagina: int = 20

    MAX_POR_PAGINA = 100

    @classmethod
    def criar(cls, pagina: Any = 1, por_pagina: Any = 20) -> "PaginacaoParams":
        try:
            pagina = int(pagina)
        except (TypeError, ValueError):
            pagina = 1
        try:
            por_pagina = int(por_pagina)
        except (TypeError, ValueError):
            por_pagina = 20
        return cls(
            pagina=max(1, pagina),
            por_pagina=min(max(1, por_pagina), cls.MAX_POR_PAGINA),
        )

    @property
    def offset(self) -> int:
        return (self.pagina - 1) * self.por_pagina


@dataclass
class PaginatedResultDTO(Generic[T]):
    """
    DTO para resultados paginados.

    Attributes:
        items: Itens da página atual
        total: Total de itens
        pagina: Página atual
        por_pagina: Itens por página
    """

    items: List[T]
    total: int
    pagina: int
    por_pagina: int

    @classmethod
    def paginar(cls, items: List[T], params: PaginacaoParams) -> "PaginatedResultDTO[T]":
        """Pagina uma lista já carregada em memória."""
        return cls(
            items=items[params.offset:params.offset + params.por_pagina],
            total=len(items),
            pagina=params.pagina,
            por_pagina=params.por_pagina,
        )

    @property
    def total_paginas(self) -> int:
        if self.por_pagina <= 0:
            return 0
        return (self.total + self.por_pagina - 1) // self.por_pagina

    @property
    def tem_proxima(self) -> bool:
        return self.pagina < self.total_paginas

    @property
    def tem_anterior(self) -> bool:
        return self.pagina > 1

    def map(self, func) -> "PaginatedResultDTO":
        return PaginatedResultDTO(
            items=[func(item) for item in self.items],
            total=self.total,
            pagina=self.pagina,
            por_pagina=self.por_pagina,
        )

    def to_dict(self) -> dict:
        return {
            "items": [
                item.to_dict() if hasattr(item, "to_dict") else item
                for item in self.items
            ],
            "total": self.total,
            "pagina": self.pagina,
            "por_pagina": self.por_pagina,
            "total_paginas": self.total_paginas,
            "tem_proxima": self.tem_proxima,
            "tem_anterior": self.tem_anterior,
        }
