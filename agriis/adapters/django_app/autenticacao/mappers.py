"""
Mapper de RefreshToken.
"""

from typing import Any, Dict

from agriis.core.autenticacao.entities import RefreshToken

from .models import RefreshTokenModel


class RefreshTokenMapper:

    @staticmethod
    def to_model_data(entity: RefreshToken) -> Dict[str, Any]:
        return {
            'token': entity.token,
            'usuario_id': entity.usuario_id,
            'data_expiracao': entity.data_expiracao,
            'revogado': entity.revogado,
            'data_revogacao': entity.data_revogacao,
            'endereco_ip': entity.endereco_ip,
            'user_agent': entity.user_agent,
            'criado_em': entity.criado_em,
            'atualizado_em': entity.atualizado_em,
        }

    @staticmethod
    def to_entity(model: RefreshTokenModel) -> RefreshToken:
        return RefreshToken(
            id=model.id,
            token=model.token,
            usuario_id=model.usuario_id,
            data_expiracao=model.data_expiracao,
            revogado=model.revogado,
            data_revogacao=model.data_revogacao,
            endereco_ip=model.endereco_ip,
            user_agent=model.user_agent,
            criado_em=model.criado_em,
            atualizado_em=model.atualizado_em,
        )
