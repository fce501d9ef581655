"""
Mapper do agregado Catalogo.
"""

from agriis.core.catalogos.entities import Catalogo, CatalogoItem
from agriis.core.fornecedores.entities import Moeda

from .models import CatalogoItemModel, CatalogoModel


class CatalogoMapper:

    @staticmethod
    def to_model_data(entity: Catalogo) -> dict:
        return {
            'safra_id': entity.safra_id,
            'ponto_distribuicao_id': entity.ponto_distribuicao_id,
            'cultura_id': entity.cultura_id,
            'categoria_id': entity.categoria_id,
            'moeda': entity.moeda.value,
            'data_inicio': entity.data_inicio,
            'data_fim': entity.data_fim,
            'ativo': entity.ativo,
            'criado_em': entity.criado_em,
            'atualizado_em': entity.atualizado_em,
        }

    @staticmethod
    def item_to_model_data(item: CatalogoItem) -> dict:
        return {
            'produto_id': item.produto_id,
            'estrutura_precos': item.estrutura_precos,
            'preco_base': item.preco_base,
            'ativo': item.ativo,
            'criado_em': item.criado_em,
            'atualizado_em': item.atualizado_em,
        }

    @staticmethod
    def item_to_entity(model: CatalogoItemModel) -> CatalogoItem:
        return CatalogoItem(
            id=model.id,
            catalogo_id=model.catalogo_id,
            produto_id=model.produto_id,
            estrutura_precos=model.estrutura_precos or {},
            preco_base=model.preco_base,
            ativo=model.ativo,
            criado_em=model.criado_em,
            atualizado_em=model.atualizado_em,
        )

    @classmethod
    def to_entity(cls, model: CatalogoModel) -> Catalogo:
        return Catalogo(
            id=model.id,
            safra_id=model.safra_id,
            ponto_distribuicao_id=model.ponto_distribuicao_id,
            cultura_id=model.cultura_id,
            categoria_id=model.categoria_id,
            moeda=Moeda(model.moeda),
            data_inicio=model.data_inicio,
            data_fim=model.data_fim,
            ativo=model.ativo,
            itens=[cls.item_to_entity(i) for i in model.itens.all()],
            criado_em=model.criado_em,
            atualizado_em=model.atualizado_em,
        )
