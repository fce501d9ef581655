"""
DTOs do Domínio de Segmentações.
"""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Any, Dict, List, Optional

from .entities import Grupo, GrupoSegmentacao, Segmentacao


@dataclass(frozen=True)
class CriarSegmentacaoInputDTO:
    nome: str
    fornecedor_id: int
    descricao: Optional[str] = None
    eh_padrao: bool = False
    configuracao_territorial: Optional[Dict[str, Any]] = None


@dataclass(frozen=True)
class AtualizarSegmentacaoInputDTO:
    nome: str
    descricao: Optional[str] = None
    configuracao_territorial: Optional[Dict[str, Any]] = None


@dataclass(frozen=True)
class GrupoInputDTO:
    nome: str
    area_minima: Decimal
    area_maxima: Optional[Decimal] = None
    descricao: Optional[str] = None


@dataclass(frozen=True)
class DescontoCategoriaInputDTO:
    categoria_id: int
    percentual_desconto: Decimal
    observacoes: Optional[str] = None


def _desconto_dict(desconto: GrupoSegmentacao) -> Dict[str, Any]:
    return {
        "id": desconto.id,
        "categoria_id": desconto.categoria_id,
        "percentual_desconto": float(desconto.percentual_desconto),
        "observacoes": desconto.observacoes,
        "ativo": desconto.ativo,
    }


def _grupo_dict(grupo: Grupo) -> Dict[str, Any]:
    return {
        "id": grupo.id,
        "nome": grupo.nome,
        "descricao": grupo.descricao,
        "area_minima": float(grupo.area_minima),
        "area_maxima": float(grupo.area_maxima) if grupo.area_maxima is not None else None,
        "ativo": grupo.ativo,
        "descontos": [_desconto_dict(d) for d in grupo.descontos],
    }


@dataclass
class SegmentacaoOutputDTO:
    id: int
    nome: str
    fornecedor_id: int
    descricao: Optional[str]
    eh_padrao: bool
    configuracao_territorial: Optional[Dict[str, Any]]
    ativo: bool
    grupos: List[Dict[str, Any]]
    criado_em: datetime

    @classmethod
    def from_entity(cls, segmentacao: Segmentacao) -> "SegmentacaoOutputDTO":
        return cls(
            id=segmentacao.id,
            nome=segmentacao.nome,
            fornecedor_id=segmentacao.fornecedor_id,
            descricao=segmentacao.descricao,
            eh_padrao=segmentacao.eh_padrao,
            configuracao_territorial=segmentacao.configuracao_territorial,
            ativo=segmentacao.ativo,
            grupos=[_grupo_dict(g) for g in segmentacao.grupos],
            criado_em=segmentacao.criado_em,
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "nome": self.nome,
            "fornecedor_id": self.fornecedor_id,
            "descricao": self.descricao,
            "eh_padrao": self.eh_padrao,
            "configuracao_territorial": self.configuracao_territorial,
            "ativo": self.ativo,
            "grupos": self.grupos,
            "criado_em": self.criado_em.isoformat(),
        }


@dataclass
class ResultadoDescontoSegmentado:
    """Resultado do cálculo de desconto por segmentação."""

    percentual_desconto: Decimal
    valor_desconto: Decimal
    valor_final: Decimal
    segmentacao_aplicada: Optional[str] = None
    grupo_aplicado: Optional[str] = None
    observacoes: Optional[str] = None

    @property
    def tem_desconto(self) -> bool:
        return self.valor_desconto > 0

    def to_dict(self) -> dict:
        return {
            "percentual_desconto": float(self.percentual_desconto),
            "valor_desconto": float(self.valor_desconto),
            "valor_final": float(self.valor_final),
            "segmentacao_aplicada": self.segmentacao_aplicada,
            "grupo_aplicado": self.grupo_aplicado,
            "observacoes": self.observacoes,
        }
