"""
Mapper Safra <-> SafraModel.
"""

from agriis.core.safras.entities import Safra

from .models import SafraModel


class SafraMapper:

    @staticmethod
    def to_model_data(entity: Safra) -> dict:
        return {
            'plantio_inicial': entity.plantio_inicial,
            'plantio_final': entity.plantio_final,
            'plantio_nome': entity.plantio_nome,
            'descricao': entity.descricao,
            'ano_colheita': entity.ano_colheita,
            'criado_em': entity.criado_em,
            'atualizado_em': entity.atualizado_em,
        }

    @staticmethod
    def to_entity(model: SafraModel) -> Safra:
        return Safra(
            id=model.id,
            plantio_inicial=model.plantio_inicial,
            plantio_final=model.plantio_final,
            plantio_nome=model.plantio_nome,
            descricao=model.descricao,
            criado_em=model.criado_em,
            atualizado_em=model.atualizado_em,
        )
