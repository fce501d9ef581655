"""
Repositório Django de RefreshToken.
"""

from datetime import datetime
from typing import List, Optional

from agriis.core.autenticacao.entities import RefreshToken

from ..shared.repository import BaseRepository
from .mappers import RefreshTokenMapper
from .models import RefreshTokenModel


class DjangoRefreshTokenRepository(BaseRepository[RefreshToken, RefreshTokenModel]):
    model_class = RefreshTokenModel

    def to_entity(self, model: RefreshTokenModel) -> RefreshToken:
        return RefreshTokenMapper.to_entity(model)

    def to_model_data(self, entity: RefreshToken) -> dict:
        return RefreshTokenMapper.to_model_data(entity)

    def get_by_token(self, token: str) -> Optional[RefreshToken]:
        return self.first_by(token=token)

    def list_validos_por_usuario(self, usuario_id: int) -> List[RefreshToken]:
        return self.filter_by(
            usuario_id=usuario_id,
            revogado=False,
            data_expiracao__gt=datetime.now(),
        )

    def revogar_todos_por_usuario(self, usuario_id: int) -> int:
        agora = datetime.now()
        return RefreshTokenModel.objects.filter(
            usuario_id=usuario_id, revogado=False
        ).update(revogado=True, data_revogacao=agora, atualizado_em=agora)

    def delete_expirados(self, agora: datetime) -> int:
        deleted, _ = RefreshTokenModel.objects.filter(data_expiracao__lte=agora).delete()
        return deleted
