"""
Mapper Produtor <-> ProdutorModel.
"""

from decimal import Decimal

from agriis.core.produtores.entities import (
    Produtor,
    StatusProdutor,
    TipoAtividadeAgropecuaria,
)
from agriis.core.shared.value_objects import AreaPlantio

from .models import ProdutorModel


class ProdutorMapper:

    @staticmethod
    def to_model_data(entity: Produtor) -> dict:
        return {
            'nome': entity.nome,
            'cpf': entity.cpf,
            'cnpj': entity.cnpj,
            'inscricao_estadual': entity.inscricao_estadual,
            'tipo_atividade': entity.tipo_atividade.value if entity.tipo_atividade else None,
            'area_plantio': entity.area_plantio.valor,
            'status': entity.status.value,
            'data_autorizacao': entity.data_autorizacao,
            'usuario_autorizacao_id': entity.usuario_autorizacao_id,
            'retornos_api_check': entity.retornos_api_check,
            'culturas': list(entity.culturas),
            'criado_em': entity.criado_em,
            'atualizado_em': entity.atualizado_em,
        }

    @staticmethod
    def to_entity(model: ProdutorModel) -> Produtor:
        return Produtor(
            id=model.id,
            nome=model.nome,
            cpf=model.cpf,
            cnpj=model.cnpj,
            inscricao_estadual=model.inscricao_estadual,
            tipo_atividade=(
                TipoAtividadeAgropecuaria(model.tipo_atividade) if model.tipo_atividade else None
            ),
            area_plantio=AreaPlantio(Decimal(model.area_plantio)),
            status=StatusProdutor(model.status),
            data_autorizacao=model.data_autorizacao,
            usuario_autorizacao_id=model.usuario_autorizacao_id,
            retornos_api_check=model.retornos_api_check,
            culturas=list(model.culturas or []),
            criado_em=model.criado_em,
            atualizado_em=model.atualizado_em,
        )
