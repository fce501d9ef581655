"""
DTOs do Domínio de Catálogos.
"""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from typing import Any, Dict, List, Optional

from .entities import Catalogo, CatalogoItem


@dataclass(frozen=True)
class CriarCatalogoInputDTO:
    safra_id: int
    ponto_distribuicao_id: int
    cultura_id: int
    categoria_id: int
    data_inicio: date
    data_fim: Optional[date] = None
    moeda: str = "REAL"


@dataclass(frozen=True)
class AtualizarCatalogoInputDTO:
    data_inicio: date
    data_fim: Optional[date] = None
    ativo: bool = True


@dataclass(frozen=True)
class ListarCatalogosQueryDTO:
    safra_id: Optional[int] = None
    ponto_distribuicao_id: Optional[int] = None
    cultura_id: Optional[int] = None
    categoria_id: Optional[int] = None
    moeda: Optional[str] = None
    ativo: Optional[bool] = None
    pagina: int = 1
    por_pagina: int = 20


@dataclass(frozen=True)
class CatalogoItemInputDTO:
    produto_id: int
    estrutura_precos: Dict[str, Any] = field(default_factory=dict)
    preco_base: Optional[Decimal] = None
    ativo: bool = True


@dataclass
class CatalogoItemOutputDTO:
    id: int
    catalogo_id: int
    produto_id: int
    estrutura_precos: Dict[str, Any]
    preco_base: Optional[Decimal]
    ativo: bool

    @classmethod
    def from_entity(cls, item: CatalogoItem) -> "CatalogoItemOutputDTO":
        return cls(
            id=item.id,
            catalogo_id=item.catalogo_id,
            produto_id=item.produto_id,
            estrutura_precos=item.estrutura_precos,
            preco_base=item.preco_base,
            ativo=item.ativo,
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "catalogo_id": self.catalogo_id,
            "produto_id": self.produto_id,
            "estrutura_precos": self.estrutura_precos,
            "preco_base": float(self.preco_base) if self.preco_base is not None else None,
            "ativo": self.ativo,
        }


@dataclass
class CatalogoOutputDTO:
    id: int
    safra_id: int
    ponto_distribuicao_id: int
    cultura_id: int
    categoria_id: int
    moeda: str
    data_inicio: date
    data_fim: Optional[date]
    ativo: bool
    vigente: bool
    itens: List[CatalogoItemOutputDTO]

    @classmethod
    def from_entity(cls, catalogo: Catalogo) -> "CatalogoOutputDTO":
        return cls(
            id=catalogo.id,
            safra_id=catalogo.safra_id,
            ponto_distribuicao_id=catalogo.ponto_distribuicao_id,
            cultura_id=catalogo.cultura_id,
            categoria_id=catalogo.categoria_id,
            moeda=catalogo.moeda.value,
            data_inicio=catalogo.data_inicio,
            data_fim=catalogo.data_fim,
            ativo=catalogo.ativo,
            vigente=catalogo.esta_vigente(),
            itens=[CatalogoItemOutputDTO.from_entity(i) for i in catalogo.itens],
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "safra_id": self.safra_id,
            "ponto_distribuicao_id": self.ponto_distribuicao_id,
            "cultura_id": self.cultura_id,
            "categoria_id": self.categoria_id,
            "moeda": self.moeda,
            "data_inicio": self.data_inicio.isoformat(),
            "data_fim": self.data_fim.isoformat() if self.data_fim else None,
            "ativo": self.ativo,
            "vigente": self.vigente,
            "itens": [i.to_dict() for i in self.itens],
        }
