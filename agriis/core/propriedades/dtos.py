"""
DTOs do Domínio de Propriedades.
"""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Any, Dict, List, Optional

from .entities import Propriedade


@dataclass(frozen=True)
class CriarPropriedadeInputDTO:
    nome: str
    area_total: Decimal
    produtor_id: int
    nirf: Optional[str] = None
    inscricao_estadual: Optional[str] = None
    endereco_id: Optional[int] = None


@dataclass(frozen=True)
class AtualizarPropriedadeInputDTO:
    nome: str
    area_total: Decimal
    nirf: Optional[str] = None
    inscricao_estadual: Optional[str] = None
    endereco_id: Optional[int] = None


@dataclass(frozen=True)
class AdicionarTalhaoInputDTO:
    nome: str
    area: Decimal
    descricao: Optional[str] = None


@dataclass(frozen=True)
class AdicionarCulturaPropriedadeInputDTO:
    cultura_id: int
    area: Decimal
    safra_id: Optional[int] = None


@dataclass
class PropriedadeOutputDTO:
    id: int
    nome: str
    nirf: Optional[str]
    inscricao_estadual: Optional[str]
    area_total: Decimal
    area_culturas: Decimal
    area_disponivel: Decimal
    produtor_id: int
    endereco_id: Optional[int]
    talhoes: List[Dict[str, Any]]
    culturas: List[Dict[str, Any]]
    criado_em: datetime

    @classmethod
    def from_entity(cls, propriedade: Propriedade) -> "PropriedadeOutputDTO":
        return cls(
            id=propriedade.id,
            nome=propriedade.nome,
            nirf=propriedade.nirf,
            inscricao_estadual=propriedade.inscricao_estadual,
            area_total=propriedade.area_total.valor,
            area_culturas=propriedade.area_total_culturas().valor,
            area_disponivel=propriedade.area_disponivel().valor,
            produtor_id=propriedade.produtor_id,
            endereco_id=propriedade.endereco_id,
            talhoes=[
                {"id": t.id, "nome": t.nome, "area": float(t.area.valor), "descricao": t.descricao}
                for t in propriedade.talhoes
            ],
            culturas=[
                {
                    "id": c.id,
                    "cultura_id": c.cultura_id,
                    "area": float(c.area.valor),
                    "safra_id": c.safra_id,
                }
                for c in propriedade.culturas
            ],
            criado_em=propriedade.criado_em,
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "nome": self.nome,
            "nirf": self.nirf,
            "inscricao_estadual": self.inscricao_estadual,
            "area_total": float(self.area_total),
            "area_culturas": float(self.area_culturas),
            "area_disponivel": float(self.area_disponivel),
            "produtor_id": self.produtor_id,
            "endereco_id": self.endereco_id,
            "talhoes": self.talhoes,
            "culturas": self.culturas,
            "criado_em": self.criado_em.isoformat(),
        }
