"""
Repositórios Django de Fornecedores.
"""

from typing import List, Optional

from django.db.models import Q

from agriis.core.fornecedores.entities import Fornecedor, UsuarioFornecedor
from agriis.core.shared.dtos import PaginacaoParams, PaginatedResultDTO

from ..shared.repository import BaseRepository
from .mappers import FornecedorMapper, UsuarioFornecedorMapper
from .models import FornecedorModel, UsuarioFornecedorModel


class DjangoFornecedorRepository(BaseRepository[Fornecedor, FornecedorModel]):
    model_class = FornecedorModel
    default_order_field = 'nome'

    def to_entity(self, model: FornecedorModel) -> Fornecedor:
        return FornecedorMapper.to_entity(model)

    def to_model_data(self, entity: Fornecedor) -> dict:
        return FornecedorMapper.to_model_data(entity)

    def get_by_cnpj(self, cnpj: str) -> Optional[Fornecedor]:
        return self.first_by(cnpj=cnpj)

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
            qs = qs.filter(Q(nome__icontains=busca) | Q(cnpj__contains=busca))

        total = qs.count()
        page = qs[params.offset:params.offset + params.por_pagina]
        return PaginatedResultDTO(
            items=[self.to_entity(m) for m in page],
            total=total,
            pagina=params.pagina,
            por_pagina=params.por_pagina,
        )


class DjangoUsuarioFornecedorRepository(
    BaseRepository[UsuarioFornecedor, UsuarioFornecedorModel]
):
    model_class = UsuarioFornecedorModel
    default_order_field = 'id'

    def to_entity(self, model: UsuarioFornecedorModel) -> UsuarioFornecedor:
        return UsuarioFornecedorMapper.to_entity(model)

    def to_model_data(self, entity: UsuarioFornecedor) -> dict:
        return UsuarioFornecedorMapper.to_model_data(entity)

    def get_by_usuario_fornecedor(
        self, usuario_id: int, fornecedor_id: int
    ) -> Optional[UsuarioFornecedor]:
        return self.first_by(usuario_id=usuario_id, fornecedor_id=fornecedor_id)

    def list_por_fornecedor(self, fornecedor_id: int) -> List[UsuarioFornecedor]:
        return self.filter_by(fornecedor_id=fornecedor_id)

    def list_por_usuario(self, usuario_id: int) -> List[UsuarioFornecedor]:
        return self.filter_by(usuario_id=usuario_id)
