"""
Repositórios Django de Pedido e Proposta.
"""

from datetime import datetime
from typing import List, Optional

from agriis.core.pedidos.entities import Pedido, Proposta, StatusPedido
from agriis.core.shared.dtos import PaginacaoParams, PaginatedResultDTO

from ..shared.repository import BaseRepository
from .mappers import PedidoMapper, PropostaMapper
from .models import PedidoItemModel, PedidoItemTransporteModel, PedidoModel, PropostaModel


class DjangoPedidoRepository(BaseRepository[Pedido, PedidoModel]):
    model_class = PedidoModel
    prefetch_related_fields = ['itens__transportes']

    def to_entity(self, model: PedidoModel) -> Pedido:
        return PedidoMapper.to_entity(model)

    def to_model_data(self, entity: Pedido) -> dict:
        return PedidoMapper.to_model_data(entity)

    def _save_children(self, entity: Pedido, model: PedidoModel) -> None:
        """Sincroniza itens e, para cada item, seus transportes."""
        ids_itens = [i.id for i in entity.itens if i.id is not None]
        PedidoItemModel.objects.filter(pedido=model).exclude(id__in=ids_itens).delete()

        for item in entity.itens:
            data = PedidoMapper.item_to_model_data(item)
            if item.id is None:
                item_model = PedidoItemModel.objects.create(pedido=model, **data)
                item.id = item_model.id
            else:
                PedidoItemModel.objects.filter(id=item.id).update(**data)
                item_model = PedidoItemModel.objects.get(id=item.id)
            item.pedido_id = model.id

            ids_transportes = [t.id for t in item.transportes if t.id is not None]
            PedidoItemTransporteModel.objects.filter(pedido_item=item_model).exclude(
                id__in=ids_transportes
            ).delete()

            for transporte in item.transportes:
                dados = PedidoMapper.transporte_to_model_data(transporte)
                if transporte.id is None:
                    transporte.id = PedidoItemTransporteModel.objects.create(
                        pedido_item=item_model, **dados
                    ).id
                else:
                    PedidoItemTransporteModel.objects.filter(id=transporte.id).update(**dados)
                transporte.pedido_item_id = item.id

    def list_por_produtor(self, produtor_id: int) -> List[Pedido]:
        return self.filter_by(produtor_id=produtor_id)

    def list_por_fornecedor(self, fornecedor_id: int) -> List[Pedido]:
        return self.filter_by(fornecedor_id=fornecedor_id)

    def list_por_status(self, status: StatusPedido) -> List[Pedido]:
        return self.filter_by(status=status.value)

    def list_proximos_prazo_limite(self, agora: datetime, limite: datetime) -> List[Pedido]:
        return self.filter_by(
            order_by='data_limite_interacao',
            status=StatusPedido.EM_NEGOCIACAO.value,
            data_limite_interacao__gte=agora,
            data_limite_interacao__lte=limite,
        )

    def list_com_prazo_ultrapassado(self, agora: datetime) -> List[Pedido]:
        return self.filter_by(
            order_by='data_limite_interacao',
            status=StatusPedido.EM_NEGOCIACAO.value,
            data_limite_interacao__lt=agora,
        )


class DjangoPropostaRepository(BaseRepository[Proposta, PropostaModel]):
    model_class = PropostaModel
    default_order_field = '-criado_em'

    def to_entity(self, model: PropostaModel) -> Proposta:
        return PropostaMapper.to_entity(model)

    def to_model_data(self, entity: Proposta) -> dict:
        return PropostaMapper.to_model_data(entity)

    def get_ultima_por_pedido(self, pedido_id: int) -> Optional[Proposta]:
        model = PropostaModel.objects.filter(pedido_id=pedido_id).order_by(
            '-criado_em', '-id'
        ).first()
        return self.to_entity(model) if model else None

    def list_por_pedido(self, pedido_id: int, params: PaginacaoParams) -> PaginatedResultDTO:
        return self.list_paginated(params, filters={'pedido_id': pedido_id})
