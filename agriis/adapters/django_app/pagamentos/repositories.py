"""
Repositórios Django de Pagamentos.
"""

from typing import List, Optional

from agriis.core.pagamentos.entities import CulturaFormaPagamento, FormaPagamento

from ..shared.repository import BaseRepository
from .mappers import CulturaFormaPagamentoMapper, FormaPagamentoMapper
from .models import CulturaFormaPagamentoModel, FormaPagamentoModel


class DjangoFormaPagamentoRepository(BaseRepository[FormaPagamento, FormaPagamentoModel]):
    model_class = FormaPagamentoModel
    default_order_field = 'descricao'

    def to_entity(self, model: FormaPagamentoModel) -> FormaPagamento:
        return FormaPagamentoMapper.to_entity(model)

    def to_model_data(self, entity: FormaPagamento) -> dict:
        return FormaPagamentoMapper.to_model_data(entity)

    def list_ativas(self) -> List[FormaPagamento]:
        return self.filter_by(ativo=True)

    def existe_ativa(self, forma_id: int) -> bool:
        return FormaPagamentoModel.objects.filter(id=forma_id, ativo=True).exists()


class DjangoCulturaFormaPagamentoRepository(
    BaseRepository[CulturaFormaPagamento, CulturaFormaPagamentoModel]
):
    model_class = CulturaFormaPagamentoModel
    select_related_fields = ['forma_pagamento']
    default_order_field = 'id'

    def to_entity(self, model: CulturaFormaPagamentoModel) -> CulturaFormaPagamento:
        return CulturaFormaPagamentoMapper.to_entity(model)

    def to_model_data(self, entity: CulturaFormaPagamento) -> dict:
        return CulturaFormaPagamentoMapper.to_model_data(entity)

    def get_by_chave(
        self, fornecedor_id: int, cultura_id: int, forma_pagamento_id: int
    ) -> Optional[CulturaFormaPagamento]:
        return self.first_by(
            fornecedor_id=fornecedor_id,
            cultura_id=cultura_id,
            forma_pagamento_id=forma_pagamento_id,
        )

    def list_por_fornecedor(self, fornecedor_id: int) -> List[CulturaFormaPagamento]:
        return self.filter_by(fornecedor_id=fornecedor_id)

    def list_formas_por_fornecedor_cultura(
        self, fornecedor_id: int, cultura_id: int
    ) -> List[FormaPagamento]:
        qs = FormaPagamentoModel.objects.filter(
            ativo=True,
            associacoes__fornecedor_id=fornecedor_id,
            associacoes__cultura_id=cultura_id,
            associacoes__ativo=True,
        ).distinct().order_by('descricao')
        return [FormaPagamentoMapper.to_entity(m) for m in qs]
