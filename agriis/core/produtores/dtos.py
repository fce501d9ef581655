"""
DTOs do Domínio de Produtores.
"""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import List, Optional

from .entities import Produtor


@dataclass(frozen=True)
class CriarProdutorInputDTO:
    nome: str
    cpf: Optional[str] = None
    cnpj: Optional[str] = None
    inscricao_estadual: Optional[str] = None
    tipo_atividade: Optional[str] = None
    area_plantio: Decimal = Decimal("0")
    culturas: tuple = ()


@dataclass(frozen=True)
class AtualizarProdutorInputDTO:
    nome: str
    inscricao_estadual: Optional[str] = None
    tipo_atividade: Optional[str] = None
    area_plantio: Optional[Decimal] = None


@dataclass(frozen=True)
class ListarProdutoresQueryDTO:
    status: Optional[str] = None
    busca: Optional[str] = None
    pagina: int = 1
    por_pagina: int = 20


@dataclass
class ProdutorOutputDTO:
    id: int
    nome: str
    cpf: Optional[str]
    cnpj: Optional[str]
    documento_principal: str
    inscricao_estadual: Optional[str]
    tipo_atividade: Optional[str]
    area_plantio: Decimal
    status: str
    esta_autorizado: bool
    data_autorizacao: Optional[datetime]
    usuario_autorizacao_id: Optional[int]
    culturas: List[int]
    criado_em: datetime

    @classmethod
    def from_entity(cls, produtor: Produtor) -> "ProdutorOutputDTO":
        return cls(
            id=produtor.id,
            nome=produtor.nome,
            cpf=produtor.cpf,
            cnpj=produtor.cnpj,
            documento_principal=produtor.documento_principal,
            inscricao_estadual=produtor.inscricao_estadual,
            tipo_atividade=produtor.tipo_atividade.value if produtor.tipo_atividade else None,
            area_plantio=produtor.area_plantio.valor,
            status=produtor.status.value,
            esta_autorizado=produtor.esta_autorizado(),
            data_autorizacao=produtor.data_autorizacao,
            usuario_autorizacao_id=produtor.usuario_autorizacao_id,
            culturas=list(produtor.culturas),
            criado_em=produtor.criado_em,
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "nome": self.nome,
            "cpf": self.cpf,
            "cnpj": self.cnpj,
            "documento_principal": self.documento_principal,
            "inscricao_estadual": self.inscricao_estadual,
            "tipo_atividade": self.tipo_atividade,
            "area_plantio": float(self.area_plantio),
            "status": self.status,
            "esta_autorizado": self.esta_autorizado,
            "data_autorizacao": (
                self.data_autorizacao.isoformat() if self.data_autorizacao else None
            ),
            "usuario_autorizacao_id": self.usuario_autorizacao_id,
            "culturas": self.culturas,
            "criado_em": self.criado_em.isoformat(),
        }
