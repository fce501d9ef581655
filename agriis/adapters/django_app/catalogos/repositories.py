"""
Repositório Django do agregado Catalogo.
"""

from datetime import date
from typing import List, Optional

from django.db.models import Q

from agriis.core.catalogos.entities import Catalogo, CatalogoItem
from agriis.core.shared.dtos import PaginacaoParams, PaginatedResultDTO

from ..shared.repository import BaseRepository
from .mappers import CatalogoMapper
from .models import CatalogoItemModel, CatalogoModel


class DjangoCatalogoRepository(BaseRepository[Catalogo, CatalogoModel]):
    model_class = CatalogoModel
    prefetch_related_fields = ['itens']
    default_order_field = '-data_inicio'

    def to_entity(self, model: CatalogoModel) -> Catalogo:
        return CatalogoMapper.to_entity(model)

    def to_model_data(self, entity: Catalogo) -> dict:
        return CatalogoMapper.to_model_data(entity)

    def _save_children(self, entity: Catalogo, model: CatalogoModel) -> None:
        ids_mantidos = [i.id for i in entity.itens if i.id is not None]
        CatalogoItemModel.objects.filter(catalogo=model).exclude(id__in=ids_mantidos).delete()

        for item in entity.itens:
            item.catalogo_id = model.id
            data = CatalogoMapper.item_to_model_data(item)
            if item.id is None:
                item.id = CatalogoItemModel.objects.create(catalogo=model, **data).id
            else:
                CatalogoItemModel.objects.filter(id=item.id).update(**data)

    def get_by_chave(
        self, safra_id: int, ponto_distribuicao_id: int, cultura_id: int, categoria_id: int
    ) -> Optional[Catalogo]:
        return self.first_by(
            safra_id=safra_id,
            ponto_distribuicao_id=ponto_distribuicao_id,
            cultura_id=cultura_id,
            categoria_id=categoria_id,
        )

    def list_paginated(self, params: PaginacaoParams, **filtros) -> PaginatedResultDTO:
        if filtros.get('moeda') is not None:
            filtros['moeda'] = filtros['moeda'].value
        return super().list_paginated(params, filters=filtros)

    @staticmethod
    def _filtro_vigencia(data: date, prefixo: str = '') -> Q:
        return (
            Q(**{f'{prefixo}ativo': True, f'{prefixo}data_inicio__lte': data})
            & (Q(**{f'{prefixo}data_fim__isnull': True}) | Q(**{f'{prefixo}data_fim__gte': data}))
        )

    def list_vigentes(self, data: date) -> List[Catalogo]:
        qs = self._get_base_queryset().filter(self._filtro_vigencia(data))
        qs = qs.order_by(self.default_order_field)
        return [self.to_entity(m) for m in qs]

    def get_item_vigente(
        self, produto_id: int, data: date, cultura_id: Optional[int] = None
    ) -> Optional[CatalogoItem]:
        qs = CatalogoItemModel.objects.filter(
            produto_id=produto_id,
            ativo=True,
        ).filter(self._filtro_vigencia(data, prefixo='catalogo__'))
        if cultura_id is not None:
            qs = qs.filter(catalogo__cultura_id=cultura_id)
        model = qs.order_by('-catalogo__data_inicio').first()
        return CatalogoMapper.item_to_entity(model) if model else None
