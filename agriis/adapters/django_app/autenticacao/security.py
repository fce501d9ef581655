"""
Implementações Django de hash de senha e tokens de acesso.

- Senhas: django.contrib.auth.hashers (PASSWORD_HASHERS do settings)
- Access token: django.core.signing.TimestampSigner, valor = id do usuário
- Refresh token: secrets.token_urlsafe
"""

from typing import Optional
import logging
import secrets

from django.contrib.auth.hashers import check_password, make_password
from django.core import signing

from agriis.core.usuarios.entities import Usuario

logger = logging.getLogger(__name__)

ACCESS_TOKEN_SALT = 'agriis.autenticacao.access'


class DjangoHasherSenha:

    def gerar_hash(self, senha: str) -> str:
        return make_password(senha)

    def verificar(self, senha: str, senha_hash: str) -> bool:
        return check_password(senha, senha_hash)


class DjangoGeradorToken:
    """
    Access tokens assinados com SECRET_KEY e validade em minutos.

    Example:
        gerador = DjangoGeradorToken(access_token_minutos=60)
        token = gerador.gerar_access_token(usuario)
        gerador.obter_usuario_id(token)     # usuario.id
    """

    def __init__(self, access_token_minutos: int = 60, refresh_token_bytes: int = 48):
        self.access_token_minutos = access_token_minutos
        self.refresh_token_bytes = refresh_token_bytes
        self._signer = signing.TimestampSigner(salt=ACCESS_TOKEN_SALT)

    @property
    def access_token_segundos(self) -> int:
        return self.access_token_minutos * 60

    def gerar_access_token(self, usuario: Usuario) -> str:
        return self._signer.sign(str(usuario.id))

    def obter_usuario_id(self, access_token: str) -> Optional[int]:
        try:
            valor = self._signer.unsign(access_token, max_age=self.access_token_segundos)
        except signing.SignatureExpired:
            logger.debug("Access token expirado")
            return None
        except signing.BadSignature:
            logger.warning("Access token com assinatura inválida")
            return None
        return int(valor)

    def gerar_refresh_token(self) -> str:
        return secrets.token_urlsafe(self.refresh_token_bytes)
