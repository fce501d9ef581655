"""
Mappers do agregado Pedido e da Proposta.
"""

from decimal import Decimal
from typing import Any, Dict, Optional

from agriis.core.pedidos.entities import (
    AcaoCompradorPedido,
    Pedido,
    PedidoItem,
    PedidoItemTransporte,
    Proposta,
    StatusCarrinho,
    StatusPedido,
)

from .models import PedidoItemModel, PedidoItemTransporteModel, PedidoModel, PropostaModel


def _auditoria(entity) -> Dict[str, Any]:
    return {'criado_em': entity.criado_em, 'atualizado_em': entity.atualizado_em}


def _decimal(valor) -> Optional[Decimal]:
    return Decimal(valor) if valor is not None else None


class PedidoMapper:

    @staticmethod
    def to_model_data(entity: Pedido) -> Dict[str, Any]:
        return {
            'status': entity.status.value,
            'status_carrinho': entity.status_carrinho.value,
            'quantidade_itens': entity.quantidade_itens,
            'totais': entity.totais,
            'permite_contato': entity.permite_contato,
            'negociar_pedido': entity.negociar_pedido,
            'data_limite_interacao': entity.data_limite_interacao,
            'fornecedor_id': entity.fornecedor_id,
            'produtor_id': entity.produtor_id,
            **_auditoria(entity),
        }

    @staticmethod
    def item_to_model_data(item: PedidoItem) -> Dict[str, Any]:
        return {
            'produto_id': item.produto_id,
            'quantidade': item.quantidade,
            'preco_unitario': item.preco_unitario,
            'percentual_desconto': item.percentual_desconto,
            'valor_total': item.valor_total,
            'valor_desconto': item.valor_desconto,
            'valor_final': item.valor_final,
            'observacoes': item.observacoes,
            'dados_adicionais': item.dados_adicionais,
            **_auditoria(item),
        }

    @staticmethod
    def transporte_to_model_data(transporte: PedidoItemTransporte) -> Dict[str, Any]:
        return {
            'quantidade': transporte.quantidade,
            'valor_frete': transporte.valor_frete,
            'peso_total': transporte.peso_total,
            'volume_total': transporte.volume_total,
            'endereco_origem': transporte.endereco_origem,
            'endereco_destino': transporte.endereco_destino,
            'data_agendamento': transporte.data_agendamento,
            'informacoes_transporte': transporte.informacoes_transporte,
            'observacoes': transporte.observacoes,
            **_auditoria(transporte),
        }

    @staticmethod
    def _transporte_to_entity(model: PedidoItemTransporteModel) -> PedidoItemTransporte:
        return PedidoItemTransporte(
            id=model.id,
            pedido_item_id=model.pedido_item_id,
            quantidade=Decimal(model.quantidade),
            valor_frete=Decimal(model.valor_frete),
            peso_total=_decimal(model.peso_total),
            volume_total=_decimal(model.volume_total),
            endereco_origem=model.endereco_origem,
            endereco_destino=model.endereco_destino,
            data_agendamento=model.data_agendamento,
            informacoes_transporte=model.informacoes_transporte,
            observacoes=model.observacoes,
            criado_em=model.criado_em,
            atualizado_em=model.atualizado_em,
        )

    @classmethod
    def _item_to_entity(cls, model: PedidoItemModel) -> PedidoItem:
        return PedidoItem(
            id=model.id,
            pedido_id=model.pedido_id,
            produto_id=model.produto_id,
            quantidade=Decimal(model.quantidade),
            preco_unitario=Decimal(model.preco_unitario),
            percentual_desconto=Decimal(model.percentual_desconto),
            valor_total=Decimal(model.valor_total),
            valor_desconto=Decimal(model.valor_desconto),
            valor_final=Decimal(model.valor_final),
            observacoes=model.observacoes,
            dados_adicionais=model.dados_adicionais,
            transportes=[cls._transporte_to_entity(t) for t in model.transportes.all()],
            criado_em=model.criado_em,
            atualizado_em=model.atualizado_em,
        )

    @classmethod
    def to_entity(cls, model: PedidoModel) -> Pedido:
        return Pedido(
            id=model.id,
            status=StatusPedido(model.status),
            status_carrinho=StatusCarrinho(model.status_carrinho),
            quantidade_itens=model.quantidade_itens,
            totais=model.totais,
            permite_contato=model.permite_contato,
            negociar_pedido=model.negociar_pedido,
            data_limite_interacao=model.data_limite_interacao,
            fornecedor_id=model.fornecedor_id,
            produtor_id=model.produtor_id,
            itens=[cls._item_to_entity(i) for i in model.itens.all()],
            criado_em=model.criado_em,
            atualizado_em=model.atualizado_em,
        )


class PropostaMapper:

    @staticmethod
    def to_model_data(entity: Proposta) -> Dict[str, Any]:
        return {
            'pedido_id': entity.pedido_id,
            'acao_comprador': entity.acao_comprador.value if entity.acao_comprador else None,
            'observacao': entity.observacao,
            'usuario_produtor_id': entity.usuario_produtor_id,
            'usuario_fornecedor_id': entity.usuario_fornecedor_id,
            **_auditoria(entity),
        }

    @staticmethod
    def to_entity(model: PropostaModel) -> Proposta:
        return Proposta(
            id=model.id,
            pedido_id=model.pedido_id,
            acao_comprador=(
                AcaoCompradorPedido(model.acao_comprador) if model.acao_comprador else None
            ),
            observacao=model.observacao,
            usuario_produtor_id=model.usuario_produtor_id,
            usuario_fornecedor_id=model.usuario_fornecedor_id,
            criado_em=model.criado_em,
            atualizado_em=model.atualizado_em,
        )
