"""
DTOs do Domínio de Fornecedores.
"""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Optional

from .entities import Fornecedor, UsuarioFornecedor


@dataclass(frozen=True)
class CriarFornecedorInputDTO:
    nome: str
    cnpj: str
    inscricao_estadual: Optional[str] = None
    endereco: Optional[str] = None
    telefone: Optional[str] = None
    email: Optional[str] = None
    moeda_padrao: str = "REAL"
    pedido_minimo: Optional[Decimal] = None


@dataclass(frozen=True)
class AtualizarFornecedorInputDTO:
    nome: str
    inscricao_estadual: Optional[str] = None
    endereco: Optional[str] = None
    telefone: Optional[str] = None
    email: Optional[str] = None
    moeda_padrao: Optional[str] = None
    logo_url: Optional[str] = None


@dataclass(frozen=True)
class ListarFornecedoresQueryDTO:
    ativo: Optional[bool] = None
    busca: Optional[str] = None
    pagina: int = 1
    por_pagina: int = 20


@dataclass(frozen=True)
class VincularUsuarioInputDTO:
    usuario_id: int
    role: str = "FORNECEDOR_WEB_REPRESENTANTE"


@dataclass
class FornecedorOutputDTO:
    id: int
    nome: str
    cnpj: str
    cnpj_formatado: str
    inscricao_estadual: Optional[str]
    endereco: Optional[str]
    telefone: Optional[str]
    email: Optional[str]
    logo_url: Optional[str]
    moeda_padrao: str
    pedido_minimo: Optional[Decimal]
    ativo: bool
    criado_em: datetime

    @classmethod
    def from_entity(cls, fornecedor: Fornecedor) -> "FornecedorOutputDTO":
        return cls(
            id=fornecedor.id,
            nome=fornecedor.nome,
            cnpj=fornecedor.cnpj,
            cnpj_formatado=fornecedor.cnpj_formatado,
            inscricao_estadual=fornecedor.inscricao_estadual,
            endereco=fornecedor.endereco,
            telefone=fornecedor.telefone,
            email=fornecedor.email,
            logo_url=fornecedor.logo_url,
            moeda_padrao=fornecedor.moeda_padrao.value,
            pedido_minimo=fornecedor.pedido_minimo,
            ativo=fornecedor.ativo,
            criado_em=fornecedor.criado_em,
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "nome": self.nome,
            "cnpj": self.cnpj,
            "cnpj_formatado": self.cnpj_formatado,
            "inscricao_estadual": self.inscricao_estadual,
            "endereco": self.endereco,
            "telefone": self.telefone,
            "email": self.email,
            "logo_url": self.logo_url,
            "moeda_padrao": self.moeda_padrao,
            "pedido_minimo": float(self.pedido_minimo) if self.pedido_minimo is not None else None,
            "ativo": self.ativo,
            "criado_em": self.criado_em.isoformat(),
        }


@dataclass
class UsuarioFornecedorOutputDTO:
    id: int
    usuario_id: int
    fornecedor_id: int
    role: str
    ativo: bool

    @classmethod
    def from_entity(cls, vinculo: UsuarioFornecedor) -> "UsuarioFornecedorOutputDTO":
        return cls(
            id=vinculo.id,
            usuario_id=vinculo.usuario_id,
            fornecedor_id=vinculo.fornecedor_id,
            role=vinculo.role.value,
            ativo=vinculo.ativo,
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "usuario_id": self.usuario_id,
            "fornecedor_id": self.fornecedor_id,
            "role": self.role,
            "ativo": self.ativo,
        }
