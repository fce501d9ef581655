"""
Repositório Django do agregado Segmentacao.
"""

from typing import List, Optional

from agriis.core.segmentacoes.entities import Segmentacao

from ..shared.repository import BaseRepository
from .mappers import SegmentacaoMapper
from .models import GrupoModel, GrupoSegmentacaoModel, SegmentacaoModel


class DjangoSegmentacaoRepository(BaseRepository[Segmentacao, SegmentacaoModel]):
    model_class = SegmentacaoModel
    prefetch_related_fields = ['grupos__descontos']
    default_order_field = 'id'

    def to_entity(self, model: SegmentacaoModel) -> Segmentacao:
        return SegmentacaoMapper.to_entity(model)

    def to_model_data(self, entity: Segmentacao) -> dict:
        return SegmentacaoMapper.to_model_data(entity)

    def _save_children(self, entity: Segmentacao, model: SegmentacaoModel) -> None:
        ids_grupos = [g.id for g in entity.grupos if g.id is not None]
        GrupoModel.objects.filter(segmentacao=model).exclude(id__in=ids_grupos).delete()

        for grupo in entity.grupos:
            data = SegmentacaoMapper.grupo_to_model_data(grupo)
            if grupo.id is None:
                grupo_model = GrupoModel.objects.create(segmentacao=model, **data)
                grupo.id = grupo_model.id
            else:
                GrupoModel.objects.filter(id=grupo.id).update(**data)
                grupo_model = GrupoModel(id=grupo.id)

            ids_descontos = [d.id for d in grupo.descontos if d.id is not None]
            GrupoSegmentacaoModel.objects.filter(grupo_id=grupo.id).exclude(
                id__in=ids_descontos
            ).delete()
            for desconto in grupo.descontos:
                desconto_data = SegmentacaoMapper.desconto_to_model_data(desconto)
                if desconto.id is None:
                    desconto.id = GrupoSegmentacaoModel.objects.create(
                        grupo=grupo_model, **desconto_data
                    ).id
                else:
                    GrupoSegmentacaoModel.objects.filter(id=desconto.id).update(**desconto_data)

    def list_por_fornecedor(self, fornecedor_id: int) -> List[Segmentacao]:
        return self.filter_by(fornecedor_id=fornecedor_id)

    def list_ativas_por_fornecedor(self, fornecedor_id: int) -> List[Segmentacao]:
        return self.filter_by(fornecedor_id=fornecedor_id, ativo=True)

    def get_padrao(self, fornecedor_id: int) -> Optional[Segmentacao]:
        return self.first_by(fornecedor_id=fornecedor_id, ativo=True, eh_padrao=True)
