"""
Entidades do Domínio de Autenticação.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from agriis.core.shared.entities import EntidadeBase
from agriis.core.shared.exceptions import ValidationError


@dataclass(eq=False)
class RefreshToken(EntidadeBase):
    """
    Token opaco de renovação do access token.

    Válido enquanto não revogado e não expirado. Cada renovação revoga
    o token usado e emite um novo (rotação).

    Example:
        token = RefreshToken.criar("abc", usuario_id=1,
                                   data_expiracao=datetime.now() + timedelta(days=60))
        token.esta_valido()     # True
        token.revogar()
        token.esta_valido()     # False
    """

    token: str = ""
    usuario_id: int = 0
    data_expiracao: Optional[datetime] = None
    revogado: bool = False
    data_revogacao: Optional[datetime] = None
    endereco_ip: Optional[str] = None
    user_agent: Optional[str] = None

    @classmethod
    def criar(
        cls,
        token: str,
        usuario_id: int,
        data_expiracao: datetime,
        endereco_ip: Optional[str] = None,
        user_agent: Optional[str] = None,
    ) -> "RefreshToken":
        """
        Raises:
            ValidationError: Token vazio, usuario_id não positivo ou expiração no passado
        """
        if not token or not token.strip():
            raise ValidationError("Token é obrigatório", field="token")
        if not usuario_id or usuario_id <= 0:
            raise ValidationError("ID do usuário deve ser maior que zero", field="usuario_id")
        if data_expiracao is None or data_expiracao <= datetime.now():
            raise ValidationError("Data de expiração deve ser futura", field="data_expiracao")

        return cls(
            token=token,
            usuario_id=usuario_id,
            data_expiracao=data_expiracao,
            endereco_ip=endereco_ip,
            user_agent=user_agent,
        )

    def expirou(self, agora: Optional[datetime] = None) -> bool:
        return self.data_expiracao <= (agora or datetime.now())

    def esta_valido(self, agora: Optional[datetime] = None) -> bool:
        return not self.revogado and not self.expirou(agora)

    def revogar(self) -> None:
        if self.revogado:
            return
        self.revogado = True
        self.data_revogacao = datetime.now()
        self._atualizar_timestamp()

    def __repr__(self) -> str:
        return (
            f"RefreshToken(id={self.id}, usuario_id={self.usuario_id}, "
            f"revogado={self.revogado})"
        )
