"""
Repositório Django de Usuários.
"""

from typing import Optional

from django.db.models import Q

from agriis.core.shared.dtos import PaginacaoParams, PaginatedResultDTO
from agriis.core.usuarios.entities import Usuario

from ..shared.repository import BaseRepository
from .mappers import UsuarioMapper
from .models import UsuarioModel


class DjangoUsuarioRepository(BaseRepository[Usuario, UsuarioModel]):
    model_class = UsuarioModel
    default_order_field = 'nome'

    def to_entity(self, model: UsuarioModel) -> Usuario:
        return UsuarioMapper.to_entity(model)

    def to_model_data(self, entity: Usuario) -> dict:
        return UsuarioMapper.to_model_data(entity)

    def get_by_email(self, email: str) -> Optional[Usuario]:
        return self.first_by(email=(email or '').strip().lower())

    def list_paginated(
        self,
        params: PaginacaoParams,
        ativo: Optional[bool] = None,
        busca: Optional[str] = None,
    ) -> PaginatedResultDTO:
        qs = self._get_base_queryset().order_by(self.default_order_field)
        if ativo is not None:
            qs = qs.filter(ativo=ativo)
        if busca:
            qs = qs.filter(Q(nome__icontains=busca) | Q(email__icontains=busca))

        total = qs.count()
        page = qs[params.offset:params.offset + params.por_pagina]
        return PaginatedResultDTO(
            items=[self.to_entity(m) for m in page],
            total=total,
            pagina=params.pagina,
            por_pagina=params.por_pagina,
        )
