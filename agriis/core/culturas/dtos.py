"""
DTOs do Domínio de Culturas.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from .entities import Cultura


@dataclass(frozen=True)
class CriarCulturaInputDTO:
    nome: str
    descricao: Optional[str] = None

    def to_dict(self) -> dict:
        return {"nome": self.nome, "descricao": self.descricao}


@dataclass(frozen=True)
class AtualizarCulturaInputDTO:
    nome: str
    descricao: Optional[str] = None
    ativo: bool = True

    def to_dict(self) -> dict:
        return {"nome": self.nome, "descricao": self.descricao, "ativo": self.ativo}


@dataclass
class CulturaOutputDTO:
    id: int
    nome: str
    descricao: Optional[str]
    ativo: bool
    criado_em: datetime
    atualizado_em: Optional[datetime]

    @classmethod
    def from_entity(cls, cultura: Cultura) -> "CulturaOutputDTO":
        return cls(
            id=cultura.id,
            nome=cultura.nome,
            descricao=cultura.descricao,
            ativo=cultura.ativo,
            criado_em=cultura.criado_em,
            atualizado_em=cultura.atualizado_em,
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "nome": self.nome,
            "descricao": self.descricao,
            "ativo": self.ativo,
            "criado_em": self.criado_em.isoformat(),
            "atualizado_em": self.atualizado_em.isoformat() if self.atualizado_em else None,
        }
