"""
DTOs do Domínio de Safras.
"""

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from .entities import Safra


@dataclass(frozen=True)
class CriarSafraInputDTO:
    plantio_inicial: date
    plantio_final: date
    plantio_nome: str
    descricao: str


@dataclass(frozen=True)
class AtualizarSafraInputDTO:
    plantio_inicial: date
    plantio_final: date
    plantio_nome: str
    descricao: str


@dataclass
class SafraOutputDTO:
    id: int
    plantio_inicial: date
    plantio_final: date
    plantio_nome: str
    descricao: str
    ano_colheita: int
    safra_formatada: str
    ativa: bool
    criado_em: datetime
    atualizado_em: Optional[datetime]

    @classmethod
    def from_entity(cls, safra: Safra) -> "SafraOutputDTO":
        return cls(
            id=safra.id,
            plantio_inicial=safra.plantio_inicial,
            plantio_final=safra.plantio_final,
            plantio_nome=safra.plantio_nome,
            descricao=safra.descricao,
            ano_colheita=safra.ano_colheita,
            safra_formatada=safra.safra_formatada,
            ativa=safra.esta_ativa(),
            criado_em=safra.criado_em,
            atualizado_em=safra.atualizado_em,
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "plantio_inicial": self.plantio_inicial.isoformat(),
            "plantio_final": self.plantio_final.isoformat(),
            "plantio_nome": self.plantio_nome,
            "descricao": self.descricao,
            "ano_colheita": self.ano_colheita,
            "safra_formatada": self.safra_formatada,
            "ativa": self.ativa,
            "criado_em": self.criado_em.isoformat(),
            "atualizado_em": self.atualizado_em.isoformat() if self.atualizado_em else None,
        }
