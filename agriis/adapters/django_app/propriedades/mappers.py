"""
Mapper do agregado Propriedade.
"""

from decimal import Decimal

from agriis.core.propriedades.entities import Propriedade, PropriedadeCultura, Talhao
from agriis.core.shared.value_objects import AreaPlantio

from .models import PropriedadeCulturaModel, PropriedadeModel, TalhaoModel


class PropriedadeMapper:

    @staticmethod
    def to_model_data(entity: Propriedade) -> dict:
        return {
            'nome': entity.nome,
            'nirf': entity.nirf,
            'inscricao_estadual': entity.inscricao_estadual,
            'area_total': entity.area_total.valor,
            'produtor_id': entity.produtor_id,
            'endereco_id': entity.endereco_id,
            'dados_adicionais': entity.dados_adicionais,
            'criado_em': entity.criado_em,
            'atualizado_em': entity.atualizado_em,
        }

    @staticmethod
    def talhao_to_model_data(talhao: Talhao) -> dict:
        return {
            'nome': talhao.nome,
            'area': talhao.area.valor,
            'descricao': talhao.descricao,
            'criado_em': talhao.criado_em,
            'atualizado_em': talhao.atualizado_em,
        }

    @staticmethod
    def cultura_to_model_data(cultura: PropriedadeCultura) -> dict:
        return {
            'cultura_id': cultura.cultura_id,
            'area': cultura.area.valor,
            'safra_id': cultura.safra_id,
            'criado_em': cultura.criado_em,
            'atualizado_em': cultura.atualizado_em,
        }

    @staticmethod
    def _talhao_to_entity(model: TalhaoModel) -> Talhao:
        return Talhao(
            id=model.id,
            nome=model.nome,
            area=AreaPlantio(Decimal(model.area)),
            descricao=model.descricao,
            criado_em=model.criado_em,
            atualizado_em=model.atualizado_em,
        )

    @staticmethod
    def _cultura_to_entity(model: PropriedadeCulturaModel) -> PropriedadeCultura:
        return PropriedadeCultura(
            id=model.id,
            cultura_id=model.cultura_id,
            area=AreaPlantio(Decimal(model.area)),
            safra_id=model.safra_id,
            criado_em=model.criado_em,
            atualizado_em=model.atualizado_em,
        )

    @classmethod
    def to_entity(cls, model: PropriedadeModel) -> Propriedade:
        return Propriedade(
            id=model.id,
            nome=model.nome,
            nirf=model.nirf,
            inscricao_estadual=model.inscricao_estadual,
            area_total=AreaPlantio(Decimal(model.area_total)),
            produtor_id=model.produtor_id,
            endereco_id=model.endereco_id,
            dados_adicionais=model.dados_adicionais or {},
            talhoes=[cls._talhao_to_entity(t) for t in model.talhoes.all()],
            culturas=[cls._cultura_to_entity(c) for c in model.culturas.all()],
            criado_em=model.criado_em,
            atualizado_em=model.atualizado_em,
        )
