"""
Repositório Django do agregado Propriedade.
"""

from typing import List

from agriis.core.propriedades.entities import Propriedade

from ..shared.repository import BaseRepository
from .mappers import PropriedadeMapper
from .models import PropriedadeCulturaModel, PropriedadeModel, TalhaoModel


class DjangoPropriedadeRepository(BaseRepository[Propriedade, PropriedadeModel]):
    model_class = PropriedadeModel
    prefetch_related_fields = ['talhoes', 'culturas']
    default_order_field = 'nome'

    def to_entity(self, model: PropriedadeModel) -> Propriedade:
        return PropriedadeMapper.to_entity(model)

    def to_model_data(self, entity: Propriedade) -> dict:
        return PropriedadeMapper.to_model_data(entity)

    def _save_children(self, entity: Propriedade, model: PropriedadeModel) -> None:
        """Sincroniza talhões e culturas (remove os que saíram do agregado)."""
        self._sync(
            TalhaoModel,
            model,
            entity.talhoes,
            PropriedadeMapper.talhao_to_model_data,
        )
        self._sync(
            PropriedadeCulturaModel,
            model,
            entity.culturas,
            PropriedadeMapper.cultura_to_model_data,
        )

    @staticmethod
    def _sync(child_model, parent: PropriedadeModel, filhos, to_data) -> None:
        ids_mantidos = [f.id for f in filhos if f.id is not None]
        child_model.objects.filter(propriedade=parent).exclude(id__in=ids_mantidos).delete()

        for filho in filhos:
            data = to_data(filho)
            if filho.id is None:
                filho.id = child_model.objects.create(propriedade=parent, **data).id
            else:
                child_model.objects.filter(id=filho.id).update(**data)

    def list_por_produtor(self, produtor_id: int) -> List[Propriedade]:
        return self.filter_by(produtor_id=produtor_id)
