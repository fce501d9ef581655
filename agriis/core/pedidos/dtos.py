"""
DTOs do Domínio de Pedidos.
"""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Any, Dict, List, Optional

from .entities import Pedido, PedidoItem, PedidoItemTransporte, Proposta


# =============================================================================
# Input DTOs
# =============================================================================

@dataclass(frozen=True)
class CriarPedidoInputDTO:
    fornecedor_id: int
    produtor_id: int
    permite_contato: bool = False
    negociar_pedido: bool = False
    dias_limite_interacao: Optional[int] = None


@dataclass(frozen=True)
class AtualizarPedidoInputDTO:
    permite_contato: bool
    negociar_pedido: bool


@dataclass(frozen=True)
class AdicionarItemCarrinhoInputDTO:
    produto_id: int
    quantidade: Decimal
    catalogo_id: Optional[int] = None
    uf: Optional[str] = None
    observacoes: Optional[str] = None


@dataclass(frozen=True)
class AgendarTransporteInputDTO:
    quantidade: Decimal
    data_agendamento: datetime
    valor_frete: Decimal = Decimal("0")
    endereco_origem: Optional[str] = None
    endereco_destino: Optional[str] = None
    peso_total: Optional[Decimal] = None
    volume_total: Optional[Decimal] = None
    observacoes: Optional[str] = None


@dataclass(frozen=True)
class ReagendarTransporteInputDTO:
    nova_data_agendamento: datetime
    observacoes: Optional[str] = None


@dataclass(frozen=True)
class AtualizarValorFreteInputDTO:
    novo_valor_frete: Decimal
    motivo: Optional[str] = None


@dataclass(frozen=True)
class SolicitacaoAgendamentoInputDTO:
    pedido_item_id: int
    quantidade: Decimal
    data_agendamento: datetime


@dataclass(frozen=True)
class ItemFreteInputDTO:
    """Produto a transportar; dimensões em cm e peso nominal em kg."""

    quantidade: Decimal
    altura: Decimal
    largura: Decimal
    comprimento: Decimal
    peso_nominal: Decimal
    densidade: Optional[Decimal] = None
    tipo_calculo_peso: str = "PesoNominal"


@dataclass(frozen=True)
class CalcularFreteInputDTO:
    item: ItemFreteInputDTO
    distancia_km: Decimal
    valor_por_kg_km: Optional[Decimal] = None
    valor_minimo_frete: Optional[Decimal] = None


@dataclass(frozen=True)
class CalcularFreteConsolidadoInputDTO:
    itens: List[ItemFreteInputDTO]
    distancia_km: Decimal
    valor_por_kg_km: Optional[Decimal] = None
    valor_minimo_frete: Optional[Decimal] = None


@dataclass(frozen=True)
class CriarPropostaInputDTO:
    """
    Entrada de um turno de negociação.

    acao_comprador é usado no fluxo do produtor; observacao é
    obrigatória no fluxo do fornecedor.
    """

    acao_comprador: Optional[str] = None
    observacao: Optional[str] = None


# =============================================================================
# Output DTOs
# =============================================================================

def _float(valor: Optional[Decimal]) -> Optional[float]:
    return float(valor) if valor is not None else None


def transporte_to_dict(transporte: PedidoItemTransporte) -> Dict[str, Any]:
    return {
        "id": transporte.id,
        "pedido_item_id": transporte.pedido_item_id,
        "quantidade": float(transporte.quantidade),
        "valor_frete": float(transporte.valor_frete),
        "peso_total": _float(transporte.peso_total),
        "volume_total": _float(transporte.volume_total),
        "endereco_origem": transporte.endereco_origem,
        "endereco_destino": transporte.endereco_destino,
        "data_agendamento": (
            transporte.data_agendamento.isoformat() if transporte.data_agendamento else None
        ),
        "informacoes_transporte": transporte.informacoes_transporte,
        "observacoes": transporte.observacoes,
    }


def item_to_dict(item: PedidoItem) -> Dict[str, Any]:
    return {
        "id": item.id,
        "produto_id": item.produto_id,
        "quantidade": float(item.quantidade),
        "preco_unitario": float(item.preco_unitario),
        "percentual_desconto": float(item.percentual_desconto),
        "valor_total": float(item.valor_total),
        "valor_desconto": float(item.valor_desconto),
        "valor_final": float(item.valor_final),
        "observacoes": item.observacoes,
        "dados_adicionais": item.dados_adicionais,
        "transportes": [transporte_to_dict(t) for t in item.transportes],
    }


@dataclass
class PedidoOutputDTO:
    id: int
    status: str
    status_carrinho: str
    quantidade_itens: int
    totais: Optional[Dict[str, Any]]
    permite_contato: bool
    negociar_pedido: bool
    data_limite_interacao: datetime
    fornecedor_id: int
    produtor_id: int
    itens: List[Dict[str, Any]]
    criado_em: datetime
    atualizado_em: Optional[datetime] = None

    @classmethod
    def from_entity(cls, pedido: Pedido) -> "PedidoOutputDTO":
        return cls(
            id=pedido.id,
            status=pedido.status.value,
            status_carrinho=pedido.status_carrinho.value,
            quantidade_itens=pedido.quantidade_itens,
            totais=pedido.totais,
            permite_contato=pedido.permite_contato,
            negociar_pedido=pedido.negociar_pedido,
            data_limite_interacao=pedido.data_limite_interacao,
            fornecedor_id=pedido.fornecedor_id,
            produtor_id=pedido.produtor_id,
            itens=[item_to_dict(i) for i in pedido.itens],
            criado_em=pedido.criado_em,
            atualizado_em=pedido.atualizado_em,
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "status": self.status,
            "status_carrinho": self.status_carrinho,
            "quantidade_itens": self.quantidade_itens,
            "totais": self.totais,
            "permite_contato": self.permite_contato,
            "negociar_pedido": self.negociar_pedido,
            "data_limite_interacao": self.data_limite_interacao.isoformat(),
            "fornecedor_id": self.fornecedor_id,
            "produtor_id": self.produtor_id,
            "itens": self.itens,
            "criado_em": self.criado_em.isoformat(),
            "atualizado_em": self.atualizado_em.isoformat() if self.atualizado_em else None,
        }


@dataclass
class PropostaOutputDTO:
    id: int
    pedido_id: int
    acao_comprador: Optional[str]
    observacao: Optional[str]
    usuario_produtor_id: Optional[int]
    usuario_fornecedor_id: Optional[int]
    criado_em: datetime

    @classmethod
    def from_entity(cls, proposta: Proposta) -> "PropostaOutputDTO":
        return cls(
            id=proposta.id,
            pedido_id=proposta.pedido_id,
            acao_comprador=proposta.acao_comprador.value if proposta.acao_comprador else None,
            observacao=proposta.observacao,
            usuario_produtor_id=proposta.usuario_produtor_id,
            usuario_fornecedor_id=proposta.usuario_fornecedor_id,
            criado_em=proposta.criado_em,
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "pedido_id": self.pedido_id,
            "acao_comprador": self.acao_comprador,
            "observacao": self.observacao,
            "usuario_produtor_id": self.usuario_produtor_id,
            "usuario_fornecedor_id": self.usuario_fornecedor_id,
            "criado_em": self.criado_em.isoformat(),
        }
