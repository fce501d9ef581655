"""
Repositório Django de Safras.
"""

from typing import Optional

from agriis.core.safras.entities import Safra

from ..shared.repository import BaseRepository
from .mappers import SafraMapper
from .models import SafraModel


class DjangoSafraRepository(BaseRepository[Safra, SafraModel]):
    model_class = SafraModel
    default_order_field = '-plantio_inicial'

    def to_entity(self, model: SafraModel) -> Safra:
        return SafraMapper.to_entity(model)

    def to_model_data(self, entity: Safra) -> dict:
        return SafraMapper.to_model_data(entity)

    def get_by_periodo(self, plantio_inicial, plantio_final, plantio_nome) -> Optional[Safra]:
        return self.first_by(
            plantio_inicial=plantio_inicial,
            plantio_final=plantio_final,
            plantio_nome=plantio_nome,
        )
