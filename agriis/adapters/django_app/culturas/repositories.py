"""
Repositório Django de Culturas.

Culturas mudam pouco e são lidas em quase todo fluxo (catálogos,
propriedades, produtores), por isso get_by_id passa pelo cache.
"""

from typing import List, Optional

from agriis.core.culturas.entities import Cultura

from ..shared.repository import BaseRepository, CachingRepositoryMixin
from .mappers import CulturaMapper
from .models import CulturaModel


class DjangoCulturaRepository(CachingRepositoryMixin, BaseRepository[Cultura, CulturaModel]):
    model_class = CulturaModel
    default_order_field = 'nome'
    cache_timeout = 300

    def to_entity(self, model: CulturaModel) -> Cultura:
        return CulturaMapper.to_entity(model)

    def to_model_data(self, entity: Cultura) -> dict:
        return CulturaMapper.to_model_data(entity)

    def get_by_nome(self, nome: str) -> Optional[Cultura]:
        return self.first_by(nome__iexact=(nome or '').strip())

    def list_ativas(self) -> List[Cultura]:
        return self.filter_by(ativo=True)
