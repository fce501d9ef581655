"""
Mapper do agregado Segmentacao.
"""

from decimal import Decimal

from agriis.core.segmentacoes.entities import Grupo, GrupoSegmentacao, Segmentacao

from .models import GrupoModel, GrupoSegmentacaoModel, SegmentacaoModel


class SegmentacaoMapper:

    @staticmethod
    def to_model_data(entity: Segmentacao) -> dict:
        return {
            'nome': entity.nome,
            'fornecedor_id': entity.fornecedor_id,
            'descricao': entity.descricao,
            'eh_padrao': entity.eh_padrao,
            'configuracao_territorial': entity.configuracao_territorial,
            'ativo': entity.ativo,
            'criado_em': entity.criado_em,
            'atualizado_em': entity.atualizado_em,
        }

    @staticmethod
    def grupo_to_model_data(grupo: Grupo) -> dict:
        return {
            'nome': grupo.nome,
            'descricao': grupo.descricao,
            'area_minima': grupo.area_minima,
            'area_maxima': grupo.area_maxima,
            'ativo': grupo.ativo,
            'criado_em': grupo.criado_em,
            'atualizado_em': grupo.atualizado_em,
        }

    @staticmethod
    def desconto_to_model_data(desconto: GrupoSegmentacao) -> dict:
        return {
            'categoria_id': desconto.categoria_id,
            'percentual_desconto': desconto.percentual_desconto,
            'observacoes': desconto.observacoes,
            'ativo': desconto.ativo,
            'criado_em': desconto.criado_em,
            'atualizado_em': desconto.atualizado_em,
        }

    @staticmethod
    def _desconto_to_entity(model: GrupoSegmentacaoModel) -> GrupoSegmentacao:
        return GrupoSegmentacao(
            id=model.id,
            categoria_id=model.categoria_id,
            percentual_desconto=Decimal(model.percentual_desconto),
            observacoes=model.observacoes,
            ativo=model.ativo,
            criado_em=model.criado_em,
            atualizado_em=model.atualizado_em,
        )

    @classmethod
    def _grupo_to_entity(cls, model: GrupoModel) -> Grupo:
        return Grupo(
            id=model.id,
            nome=model.nome,
            descricao=model.descricao,
            area_minima=Decimal(model.area_minima),
            area_maxima=Decimal(model.area_maxima) if model.area_maxima is not None else None,
            ativo=model.ativo,
            descontos=[cls._desconto_to_entity(d) for d in model.descontos.all()],
            criado_em=model.criado_em,
            atualizado_em=model.atualizado_em,
        )

    @classmethod
    def to_entity(cls, model: SegmentacaoModel) -> Segmentacao:
        return Segmentacao(
            id=model.id,
            nome=model.nome,
            fornecedor_id=model.fornecedor_id,
            descricao=model.descricao,
            eh_padrao=model.eh_padrao,
            configuracao_territorial=model.configuracao_territorial,
            ativo=model.ativo,
            grupos=[cls._grupo_to_entity(g) for g in model.grupos.all()],
            criado_em=model.criado_em,
            atualizado_em=model.atualizado_em,
        )
