"""
Mapper Cultura <-> CulturaModel.
"""

from typing import Any, Dict

from agriis.core.culturas.entities import Cultura

from .models import CulturaModel


class CulturaMapper:

    @staticmethod
    def to_model_data(entity: Cultura) -> Dict[str, Any]:
        return {
            'nome': entity.nome,
            'descricao': entity.descricao,
            'ativo': entity.ativo,
            'criado_em': entity.criado_em,
            'atualizado_em': entity.atualizado_em,
        }

    @staticmethod
    def to_entity(model: CulturaModel) -> Cultura:
        return Cultura(
            id=model.id,
            nome=model.nome,
            descricao=model.descricao,
            ativo=model.ativo,
            criado_em=model.criado_em,
            atualizado_em=model.atualizado_em,
        )
