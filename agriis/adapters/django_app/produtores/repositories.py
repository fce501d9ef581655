"""
Repositório Django de Produtores.
"""

from typing import Optional

from django.db.models import Q

from agriis.core.produtores.entities import Produtor, StatusProdutor
from agriis.core.shared.dtos import PaginacaoParams, PaginatedResultDTO

from ..shared.repository import BaseRepository
from .mappers import ProdutorMapper
from .models import ProdutorModel


class DjangoProdutorRepository(BaseRepository[Produtor, ProdutorModel]):
    model_class = ProdutorModel
    default_order_field = 'nome'

    def to_entity(self, model: ProdutorModel) -> Produtor:
        return ProdutorMapper.to_entity(model)

    def to_model_data(self, entity: Produtor) -> dict:
        return ProdutorMapper.to_model_data(entity)

    def get_by_documento(self, documento: str) -> Optional[Produtor]:
        model = self._get_base_queryset().filter(
            Q(cpf=documento) | Q(cnpj=documento)
        ).first()
        return self.to_entity(model) if model else None

    def list_paginated(
        self,
        params: PaginacaoParams,
        status: Optional[StatusProdutor] = None,
        busca: Optional[str] = None,
    ) -> PaginatedResultDTO:
        qs = self._get_base_queryset().order_by(self.default_order_field)
        if status is not None:
            qs = qs.filter(status=status.value)
        if busca:
            qs = qs.filter(
                Q(nome__icontains=busca) | Q(cpf__contains=busca) | Q(cnpj__contains=busca)
            )

        total = qs.count()
        page = qs[params.offset:params.offset + params.por_pagina]
        return PaginatedResultDTO(
            items=[self.to_entity(m) for m in page],
            total=total,
            pagina=params.pagina,
            por_pagina=params.por_pagina,
        )
