"""
Mapper do agregado Combo.
"""

from decimal import Decimal
from typing import Any, Dict

from agriis.core.combos.entities import (
    Combo,
    ComboCategoriaDesconto,
    ComboItem,
    ComboLocalRecebimento,
    ModalidadePagamento,
    StatusCombo,
    TipoDesconto,
)

from .models import (
    ComboCategoriaDescontoModel,
    ComboItemModel,
    ComboLocalRecebimentoModel,
    ComboModel,
)


def _auditoria(entity) -> Dict[str, Any]:
    return {'criado_em': entity.criado_em, 'atualizado_em': entity.atualizado_em}


class ComboMapper:

    @staticmethod
    def to_model_data(entity: Combo) -> Dict[str, Any]:
        return {
            'nome': entity.nome,
            'descricao': entity.descricao,
            'hectare_minimo': entity.hectare_minimo,
            'hectare_maximo': entity.hectare_maximo,
            'data_inicio': entity.data_inicio,
            'data_fim': entity.data_fim,
            'modalidade_pagamento': entity.modalidade_pagamento.value,
            'status': entity.status.value,
            'restricoes_municipios': entity.restricoes_municipios,
            'permite_alteracao_item': entity.permite_alteracao_item,
            'permite_exclusao_item': entity.permite_exclusao_item,
            'fornecedor_id': entity.fornecedor_id,
            'safra_id': entity.safra_id,
            **_auditoria(entity),
        }

    @staticmethod
    def item_to_model_data(item: ComboItem) -> Dict[str, Any]:
        return {
            'produto_id': item.produto_id,
            'quantidade': item.quantidade,
            'preco_unitario': item.preco_unitario,
            'percentual_desconto': item.percentual_desconto,
            'produto_obrigatorio': item.produto_obrigatorio,
            'ordem': item.ordem,
            **_auditoria(item),
        }

    @staticmethod
    def local_to_model_data(local: ComboLocalRecebimento) -> Dict[str, Any]:
        return {
            'ponto_distribuicao_id': local.ponto_distribuicao_id,
            'preco_adicional': local.preco_adicional,
            'percentual_desconto': local.percentual_desconto,
            'local_padrao': local.local_padrao,
            'observacoes': local.observacoes,
            **_auditoria(local),
        }

    @staticmethod
    def categoria_to_model_data(categoria: ComboCategoriaDesconto) -> Dict[str, Any]:
        return {
            'categoria_id': categoria.categoria_id,
            'tipo_desconto': categoria.tipo_desconto.value,
            'percentual_desconto': categoria.percentual_desconto,
            'valor_desconto_fixo': categoria.valor_desconto_fixo,
            'valor_desconto_por_hectare': categoria.valor_desconto_por_hectare,
            'hectare_minimo': categoria.hectare_minimo,
            'hectare_maximo': categoria.hectare_maximo,
            'ativo': categoria.ativo,
            **_auditoria(categoria),
        }

    @staticmethod
    def _item_to_entity(model: ComboItemModel) -> ComboItem:
        return ComboItem(
            id=model.id,
            produto_id=model.produto_id,
            quantidade=Decimal(model.quantidade),
            preco_unitario=Decimal(model.preco_unitario),
            percentual_desconto=Decimal(model.percentual_desconto),
            produto_obrigatorio=model.produto_obrigatorio,
            ordem=model.ordem,
            criado_em=model.criado_em,
            atualizado_em=model.atualizado_em,
        )

    @staticmethod
    def _local_to_entity(model: ComboLocalRecebimentoModel) -> ComboLocalRecebimento:
        return ComboLocalRecebimento(
            id=model.id,
            ponto_distribuicao_id=model.ponto_distribuicao_id,
            preco_adicional=Decimal(model.preco_adicional),
            percentual_desconto=Decimal(model.percentual_desconto),
            local_padrao=model.local_padrao,
            observacoes=model.observacoes,
            criado_em=model.criado_em,
            atualizado_em=model.atualizado_em,
        )

    @staticmethod
    def _categoria_to_entity(model: ComboCategoriaDescontoModel) -> ComboCategoriaDesconto:
        return ComboCategoriaDesconto(
            id=model.id,
            categoria_id=model.categoria_id,
            tipo_desconto=TipoDesconto(model.tipo_desconto),
            percentual_desconto=Decimal(model.percentual_desconto),
            valor_desconto_fixo=Decimal(model.valor_desconto_fixo),
            valor_desconto_por_hectare=Decimal(model.valor_desconto_por_hectare),
            hectare_minimo=Decimal(model.hectare_minimo),
            hectare_maximo=(
                Decimal(model.hectare_maximo) if model.hectare_maximo is not None else None
            ),
            ativo=model.ativo,
            criado_em=model.criado_em,
            atualizado_em=model.atualizado_em,
        )

    @classmethod
    def to_entity(cls, model: ComboModel) -> Combo:
        return Combo(
            id=model.id,
            nome=model.nome,
            descricao=model.descricao,
            hectare_minimo=Decimal(model.hectare_minimo),
            hectare_maximo=Decimal(model.hectare_maximo),
            data_inicio=model.data_inicio,
            data_fim=model.data_fim,
            modalidade_pagamento=ModalidadePagamento(model.modalidade_pagamento),
            status=StatusCombo(model.status),
            restricoes_municipios=model.restricoes_municipios or None,
            permite_alteracao_item=model.permite_alteracao_item,
            permite_exclusao_item=model.permite_exclusao_item,
            fornecedor_id=model.fornecedor_id,
            safra_id=model.safra_id,
            itens=[cls._item_to_entity(i) for i in model.itens.all()],
            locais_recebimento=[cls._local_to_entity(l) for l in model.locais_recebimento.all()],
            categorias_desconto=[
                cls._categoria_to_entity(c) for c in model.categorias_desconto.all()
            ],
            criado_em=model.criado_em,
            atualizado_em=model.atualizado_em,
        )
