"""
Mappers de Pagamentos.
"""

from typing import Any, Dict

from agriis.core.pagamentos.entities import CulturaFormaPagamento, FormaPagamento

from .models import CulturaFormaPagamentoModel, FormaPagamentoModel


class FormaPagamentoMapper:

    @staticmethod
    def to_model_data(entity: FormaPagamento) -> Dict[str, Any]:
        return {
            'descricao': entity.descricao,
            'ativo': entity.ativo,
            'criado_em': entity.criado_em,
            'atualizado_em': entity.atualizado_em,
        }

    @staticmethod
    def to_entity(model: FormaPagamentoModel) -> FormaPagamento:
        return FormaPagamento(
            id=model.id,
            descricao=model.descricao,
            ativo=model.ativo,
            criado_em=model.criado_em,
            atualizado_em=model.atualizado_em,
        )


class CulturaFormaPagamentoMapper:

    @staticmethod
    def to_model_data(entity: CulturaFormaPagamento) -> Dict[str, Any]:
        return {
            'fornecedor_id': entity.fornecedor_id,
            'cultura_id': entity.cultura_id,
            'forma_pagamento_id': entity.forma_pagamento_id,
            'ativo': entity.ativo,
            'criado_em': entity.criado_em,
            'atualizado_em': entity.atualizado_em,
        }

    @staticmethod
    def to_entity(model: CulturaFormaPagamentoModel) -> CulturaFormaPagamento:
        return CulturaFormaPagamento(
            id=model.id,
            fornecedor_id=model.fornecedor_id,
            cultura_id=model.cultura_id,
            forma_pagamento_id=model.forma_pagamento_id,
            ativo=model.ativo,
            forma_pagamento=FormaPagamentoMapper.to_entity(model.forma_pagamento),
            criado_em=model.criado_em,
            atualizado_em=model.atualizado_em,
        )
