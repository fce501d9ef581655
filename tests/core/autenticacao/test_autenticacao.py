"""
Testes do AutenticacaoService.

Todas as operações retornam Result; falhas são verificadas pelo
error_code e pela mensagem.
"""

from datetime import datetime, timedelta

import pytest

from agriis.core.autenticacao.entities import RefreshToken
from agriis.core.autenticacao.ports import InMemoryRefreshTokenRepository
from agriis.core.autenticacao.use_cases import AutenticacaoService, senha_atende_criterios
from agriis.core.shared.exceptions import ValidationError
from agriis.core.usuarios.entities import Roles, Usuario


@pytest.fixture
def token_repo():
    return InMemoryRefreshTokenRepository()


@pytest.fixture
def service(usuario_repo, token_repo, hasher, gerador_token, uow):
    return AutenticacaoService(usuario_repo, token_repo, hasher, gerador_token, uow)


@pytest.fixture
def ana(usuario_repo, hasher):
    usuario = Usuario.criar("Ana", "ana@fazenda.com")
    usuario.definir_senha(hasher.gerar_hash("abc123"))
    usuario.adicionar_role(Roles.COMPRADOR)
    return usuario_repo.save(usuario)


class TestRefreshToken:

    def test_expiracao_no_passado(self):
        with pytest.raises(ValidationError) as exc_info:
            RefreshToken.criar("abc", 1, datetime.now() - timedelta(minutes=1))

        assert exc_info.value.field == "data_expiracao"

    def test_revogar(self):
        token = RefreshToken.criar("abc", 1, datetime.now() + timedelta(days=1))
        token.revogar()

        assert not token.esta_valido()
        assert token.data_revogacao is not None


@pytest.mark.parametrize(
    "senha, esperado",
    [("abc123", True), ("abcdef", False), ("123456", False), ("a1", False), (None, False)],
)
def test_criterios_de_senha(senha, esperado):
    assert senha_atende_criterios(senha) is esperado


class TestLogin:

    def test_sucesso(self, service, ana, token_repo):
        result = service.login(" ANA@fazenda.com ", "abc123", endereco_ip="10.0.0.1")

        assert result.is_success
        assert result.value.access_token == f"access-{ana.id}"
        assert result.value.expires_in == 3600
        assert result.value.usuario.roles == ["RoleComprador"]
        assert ana.ultimo_login is not None
        assert token_repo.get_by_token(result.value.refresh_token).endereco_ip == "10.0.0.1"

    @pytest.mark.parametrize(
        "email, senha", [("ninguem@fazenda.com", "abc123"), ("ana@fazenda.com", "errada1")]
    )
    def test_credenciais_invalidas(self, service, ana, email, senha):
        result = service.login(email, senha)

        assert result.is_failure
        assert result.error_code == "CREDENCIAIS_INVALIDAS"
        assert result.error == "Email ou senha inválidos"

    def test_usuario_sem_senha(self, service, usuario_repo):
        usuario_repo.save(Usuario.criar("Rep", "rep@agro.com"))

        assert service.login("rep@agro.com", "").error_code == "CREDENCIAIS_INVALIDAS"

    def test_usuario_inativo(self, service, ana):
        ana.desativar()

        assert service.login("ana@fazenda.com", "abc123").error_code == "USUARIO_INATIVO"


class TestRenovarToken:

    def test_rotaciona_refresh_token(self, service, ana, token_repo):
        login = service.login("ana@fazenda.com", "abc123").value

        result = service.renovar_token(login.refresh_token)

        assert result.is_success
        assert result.value.refresh_token != login.refresh_token
        assert token_repo.get_by_token(login.refresh_token).revogado

        reuso = service.renovar_token(login.refresh_token)
        assert reuso.error_code == "REFRESH_TOKEN_INVALIDO"

    def test_token_desconhecido(self, service):
        assert service.renovar_token("refresh-99").error_code == "REFRESH_TOKEN_INVALIDO"

    def test_usuario_desativado(self, service, ana):
        login = service.login("ana@fazenda.com", "abc123").value
        ana.desativar()

        assert service.renovar_token(login.refresh_token).error_code == "USUARIO_INVALIDO"


class TestLogoutESenha:

    def test_logout_de_um_token(self, service, ana, token_repo):
        primeiro = service.login("ana@fazenda.com", "abc123").value
        segundo = service.login("ana@fazenda.com", "abc123").value

        assert service.logout(ana.id, primeiro.refresh_token).value is True
        assert [t.token for t in token_repo.list_validos_por_usuario(ana.id)] == [
            segundo.refresh_token
        ]

    def test_logout_de_todos(self, service, ana, token_repo):
        service.login("ana@fazenda.com", "abc123")
        service.login("ana@fazenda.com", "abc123")

        service.logout(ana.id)

        assert token_repo.list_validos_por_usuario(ana.id) == []

    def test_alterar_senha(self, service, ana, token_repo):
        service.login("ana@fazenda.com", "abc123")

        result = service.alterar_senha(ana.id, "abc123", "nova123")

        assert result.is_success
        assert token_repo.list_validos_por_usuario(ana.id) == []
        assert service.login("ana@fazenda.com", "nova123").is_success

    @pytest.mark.parametrize(
        "usuario_id, atual, nova, codigo",
        [
            (99, "abc123", "nova123", "USUARIO_NAO_ENCONTRADO"),
            (None, "errada", "nova123", "SENHA_INCORRETA"),
            (None, "abc123", "fraca", "SENHA_FRACA"),
        ],
    )
    def test_alterar_senha_falhas(self, service, ana, usuario_id, atual, nova, codigo):
        result = service.alterar_senha(usuario_id or ana.id, atual, nova)

        assert result.error_code == codigo

    def test_revogar_e_limpar(self, service, ana, token_repo):
        service.login("ana@fazenda.com", "abc123")
        service.login("ana@fazenda.com", "abc123")

        assert service.revogar_todos_tokens(ana.id).value == 2
        assert service.limpar_tokens_expirados(agora=datetime.now() + timedelta(days=61)) == 2

    def test_usuario_do_token(self, service, ana):
        assert service.obter_usuario_id_do_token(f"access-{ana.id}") == ana.id
        assert service.obter_usuario_id_do_token("lixo") is None
        assert service.obter_usuario_id_do_token("") is None
