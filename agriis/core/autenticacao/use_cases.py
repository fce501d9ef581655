"""
Use Cases do Domínio de Autenticação.

AutenticacaoService retorna Result em todas as operações; credenciais
inválidas e regras violadas viram Result.failure, nunca exceção.
"""

from datetime import datetime, timedelta
from typing import Optional
import logging
import re

from agriis.core.shared.exceptions import DomainException
from agriis.core.shared.interfaces import UnitOfWork
from agriis.core.shared.results import Result
from agriis.core.usuarios.entities import Usuario
from agriis.core.usuarios.ports import HasherSenha, UsuarioRepository

from .dtos import LoginOutputDTO, UsuarioLogadoDTO
from .entities import RefreshToken
from .ports import GeradorToken, RefreshTokenRepository

logger = logging.getLogger(__name__)

REFRESH_TOKEN_DIAS_PADRAO = 60
SENHA_MIN_LENGTH = 6


def senha_atende_criterios(senha: Optional[str]) -> bool:
    """Mínimo de 6 caracteres, com pelo menos uma letra e um dígito."""
    if not senha or len(senha) < SENHA_MIN_LENGTH:
        return False
    return bool(re.search(r"[A-Za-z]", senha)) and bool(re.search(r"\d", senha))


class AutenticacaoService:
    """
    Login, rotação de refresh token, logout e troca de senha.

    Example:
        result = service.login("ana@fazenda.com", "abc123")
        if result.is_success:
            token = result.value.access_token
            service.obter_usuario_id_do_token(token)   # id do usuário
    """

    def __init__(
        self,
        usuario_repo: UsuarioRepository,
        refresh_token_repo: RefreshTokenRepository,
        hasher: HasherSenha,
        gerador_token: GeradorToken,
        uow: UnitOfWork,
        refresh_token_dias: int = REFRESH_TOKEN_DIAS_PADRAO,
    ):
        self.usuario_repo = usuario_repo
        self.refresh_token_repo = refresh_token_repo
        self.hasher = hasher
        self.gerador_token = gerador_token
        self.uow = uow
        self.refresh_token_dias = refresh_token_dias

    def _emitir_tokens(
        self,
        usuario: Usuario,
        endereco_ip: Optional[str],
        user_agent: Optional[str],
    ) -> LoginOutputDTO:
        refresh_token = RefreshToken.criar(
            token=self.gerador_token.gerar_refresh_token(),
            usuario_id=usuario.id,
            data_expiracao=datetime.now() + timedelta(days=self.refresh_token_dias),
            endereco_ip=endereco_ip,
            user_agent=user_agent,
        )
        self.refresh_token_repo.save(refresh_token)

        return LoginOutputDTO(
            access_token=self.gerador_token.gerar_access_token(usuario),
            refresh_token=refresh_token.token,
            expires_in=self.gerador_token.access_token_segundos,
            usuario=UsuarioLogadoDTO.from_entity(usuario),
        )

    def login(
        self,
        email: str,
        senha: str,
        endereco_ip: Optional[str] = None,
        user_agent: Optional[str] = None,
    ) -> Result[LoginOutputDTO]:
        email = (email or "").strip().lower()
        usuario = self.usuario_repo.get_by_email(email) if email else None

        if usuario is None:
            logger.warning(f"Tentativa de login com email inexistente: {email}")
            return Result.failure("Email ou senha inválidos", "CREDENCIAIS_INVALIDAS")

        if not usuario.ativo:
            return Result.failure("Usuário inativo", "USUARIO_INATIVO")

        if not usuario.senha_hash or not self.hasher.verificar(
            senha or "", usuario.senha_hash
        ):
            logger.warning(f"Senha incorreta para: {email}")
            return Result.failure("Email ou senha inválidos", "CREDENCIAIS_INVALIDAS")

        try:
            with self.uow:
                usuario.registrar_login()
                self.usuario_repo.save(usuario)
                output = self._emitir_tokens(
                    usuario, endereco_ip, user_agent
                )
        except DomainException as e:
            return Result.from_exception(e)

        logger.info(f"Login realizado com sucesso para: {email}")
        return Result.success(output)

    def renovar_token(
        self,
        refresh_token: str,
        endereco_ip: Optional[str] = None,
        user_agent: Optional[str] = None,
    ) -> Result[LoginOutputDTO]:
        atual = self.refresh_token_repo.get_by_token(refresh_token) if refresh_token else None
        if atual is None or not atual.esta_valido():
            return Result.failure("Refresh token inválido ou expirado", "REFRESH_TOKEN_INVALIDO")

        usuario = self.usuario_repo.get_by_id(atual.usuario_id)
        if usuario is None or not usuario.ativo:
            return Result.failure("Usuário inválido", "USUARIO_INVALIDO")

        try:
            with self.uow:
                atual.revogar()
                self.refresh_token_repo.save(atual)
                output = self._emitir_tokens(usuario, endereco_ip, user_agent)
        except DomainException as e:
            return Result.from_exception(e)

        logger.info(f"Token renovado com sucesso para usuário: {usuario.id}")
        return Result.success(output)

    def logout(self, usuario_id: int, refresh_token: Optional[str] = None) -> Result[bool]:
        """Revoga o refresh token informado, ou todos os do usuário."""
        with self.uow:
            if refresh_token:
                token = self.refresh_token_repo.get_by_token(refresh_token)
                if token is not None and token.usuario_id == usuario_id:
                    token.revogar()
                    self.refresh_token_repo.save(token)
            else:
                self.refresh_token_repo.revogar_todos_por_usuario(usuario_id)

        logger.info(f"Logout realizado para usuário: {usuario_id}")
        return Result.success(True)

    def alterar_senha(
        self, usuario_id: int, senha_atual: str, nova_senha: str
    ) -> Result[bool]:
        usuario = self.usuario_repo.get_by_id(usuario_id)
        if usuario is None:
            return Result.failure("Usuário não encontrado", "USUARIO_NAO_ENCONTRADO")

        if not usuario.senha_hash or not self.hasher.verificar(
            senha_atual or "", usuario.senha_hash
        ):
            return Result.failure("Senha atual incorreta", "SENHA_INCORRETA")

        if not senha_atende_criterios(nova_senha):
            return Result.failure(
                "Nova senha não atende aos critérios de segurança", "SENHA_FRACA"
            )

        try:
            with self.uow:
                usuario.definir_senha(self.hasher.gerar_hash(nova_senha))
                self.usuario_repo.save(usuario)
                # Força novo login em todos os dispositivos
                self.refresh_token_repo.revogar_todos_por_usuario(usuario_id)
        except DomainException as e:
            return Result.from_exception(e)

        logger.info(f"Senha alterada para usuário: {usuario_id}")
        return Result.success(True)

    def revogar_todos_tokens(self, usuario_id: int) -> Result[int]:
        with self.uow:
            revogados = self.refresh_token_repo.revogar_todos_por_usuario(usuario_id)
        return Result.success(revogados)

    def limpar_tokens_expirados(self, agora: Optional[datetime] = None) -> int:
        with self.uow:
            removidos = self.refresh_token_repo.delete_expirados(agora or datetime.now())
        if removidos:
            logger.info(f"{removidos} refresh token(s) expirado(s) removido(s)")
        return removidos

    def obter_usuario_id_do_token(self, access_token: str) -> Optional[int]:
        if not access_token:
            return None
        return self.gerador_token.obter_usuario_id(access_token)
