"""
DTOs do Domínio de Combos.
"""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Any, Dict, List, Optional, Tuple

from .entities import Combo, ComboCategoriaDesconto, ComboItem, ComboLocalRecebimento


@dataclass(frozen=True)
class CriarComboInputDTO:
    nome: str
    hectare_minimo: Decimal
    hectare_maximo: Decimal
    data_inicio: datetime
    data_fim: datetime
    modalidade_pagamento: str
    fornecedor_id: int
    safra_id: int
    descricao: Optional[str] = None
    permite_alteracao_item: bool = True
    permite_exclusao_item: bool = True
    municipios_permitidos: Tuple[int, ...] = ()


@dataclass(frozen=True)
class AtualizarComboInputDTO:
    nome: str
    hectare_minimo: Decimal
    hectare_maximo: Decimal
    data_inicio: datetime
    data_fim: datetime
    descricao: Optional[str] = None
    permite_alteracao_item: bool = True
    permite_exclusao_item: bool = True
    municipios_permitidos: Optional[Tuple[int, ...]] = None


@dataclass(frozen=True)
class ComboItemInputDTO:
    produto_id: int
    quantidade: Decimal
    preco_unitario: Decimal
    percentual_desconto: Decimal = Decimal("0")
    produto_obrigatorio: bool = False
    ordem: int = 0


@dataclass(frozen=True)
class ComboLocalRecebimentoInputDTO:
    ponto_distribuicao_id: int
    preco_adicional: Decimal = Decimal("0")
    percentual_desconto: Decimal = Decimal("0")
    local_padrao: bool = False
    observacoes: Optional[str] = None


@dataclass(frozen=True)
class ComboCategoriaDescontoInputDTO:
    categoria_id: int
    tipo_desconto: str
    valor_desconto: Decimal
    hectare_minimo: Decimal = Decimal("0")
    hectare_maximo: Optional[Decimal] = None


def _float(valor: Optional[Decimal]) -> Optional[float]:
    return float(valor) if valor is not None else None


def item_to_dict(item: ComboItem) -> Dict[str, Any]:
    return {
        "id": item.id,
        "produto_id": item.produto_id,
        "quantidade": float(item.quantidade),
        "preco_unitario": float(item.preco_unitario),
        "percentual_desconto": float(item.percentual_desconto),
        "produto_obrigatorio": item.produto_obrigatorio,
        "ordem": item.ordem,
        "valor_com_desconto": float(item.valor_com_desconto()),
    }


def local_to_dict(local: ComboLocalRecebimento) -> Dict[str, Any]:
    return {
        "id": local.id,
        "ponto_distribuicao_id": local.ponto_distribuicao_id,
        "preco_adicional": float(local.preco_adicional),
        "percentual_desconto": float(local.percentual_desconto),
        "local_padrao": local.local_padrao,
        "observacoes": local.observacoes,
    }


def categoria_to_dict(categoria: ComboCategoriaDesconto) -> Dict[str, Any]:
    return {
        "id": categoria.id,
        "categoria_id": categoria.categoria_id,
        "tipo_desconto": categoria.tipo_desconto.value,
        "percentual_desconto": float(categoria.percentual_desconto),
        "valor_desconto_fixo": float(categoria.valor_desconto_fixo),
        "valor_desconto_por_hectare": float(categoria.valor_desconto_por_hectare),
        "hectare_minimo": float(categoria.hectare_minimo),
        "hectare_maximo": _float(categoria.hectare_maximo),
        "ativo": categoria.ativo,
    }


@dataclass
class ComboOutputDTO:
    id: int
    nome: str
    descricao: Optional[str]
    hectare_minimo: Decimal
    hectare_maximo: Decimal
    data_inicio: datetime
    data_fim: datetime
    modalidade_pagamento: str
    status: str
    restricoes_municipios: Optional[List[int]]
    permite_alteracao_item: bool
    permite_exclusao_item: bool
    fornecedor_id: int
    safra_id: int
    itens: List[Dict[str, Any]]
    locais_recebimento: List[Dict[str, Any]]
    categorias_desconto: List[Dict[str, Any]]
    criado_em: datetime

    @classmethod
    def from_entity(cls, combo: Combo) -> "ComboOutputDTO":
        return cls(
            id=combo.id,
            nome=combo.nome,
            descricao=combo.descricao,
            hectare_minimo=combo.hectare_minimo,
            hectare_maximo=combo.hectare_maximo,
            data_inicio=combo.data_inicio,
            data_fim=combo.data_fim,
            modalidade_pagamento=combo.modalidade_pagamento.value,
            status=combo.status.value,
            restricoes_municipios=combo.restricoes_municipios,
            permite_alteracao_item=combo.permite_alteracao_item,
            permite_exclusao_item=combo.permite_exclusao_item,
            fornecedor_id=combo.fornecedor_id,
            safra_id=combo.safra_id,
            itens=[item_to_dict(i) for i in sorted(combo.itens, key=lambda i: i.ordem)],
            locais_recebimento=[local_to_dict(l) for l in combo.locais_recebimento],
            categorias_desconto=[categoria_to_dict(c) for c in combo.categorias_desconto],
            criado_em=combo.criado_em,
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "nome": self.nome,
            "descricao": self.descricao,
            "hectare_minimo": float(self.hectare_minimo),
            "hectare_maximo": float(self.hectare_maximo),
            "data_inicio": self.data_inicio.isoformat(),
            "data_fim": self.data_fim.isoformat(),
            "modalidade_pagamento": self.modalidade_pagamento,
            "status": self.status,
            "restricoes_municipios": self.restricoes_municipios,
            "permite_alteracao_item": self.permite_alteracao_item,
            "permite_exclusao_item": self.permite_exclusao_item,
            "fornecedor_id": self.fornecedor_id,
            "safra_id": self.safra_id,
            "itens": self.itens,
            "locais_recebimento": self.locais_recebimento,
            "categorias_desconto": self.categorias_desconto,
            "criado_em": self.criado_em.isoformat(),
        }
