"""Testes de Usuários."""

import pytest

from agriis.core.shared.exceptions import (
    BusinessRuleViolationError,
    EntityNotFoundError,
    ValidationError,
)
from agriis.core.usuarios.dtos import (
    AtualizarUsuarioInputDTO,
    CriarUsuarioInputDTO,
    ListarUsuariosQueryDTO,
)
from agriis.core.usuarios.entities import Roles, Usuario
from agriis.core.usuarios.use_cases import UsuarioService


@pytest.fixture
def service(usuario_repo, hasher, uow):
    return UsuarioService(usuario_repo, hasher, uow)


class TestRoles:

    @pytest.mark.parametrize("valor", ["ADMIN", "admin", "RoleAdmin", "roleadmin"])
    def test_from_string(self, valor):
        assert Roles.from_string(valor) == Roles.ADMIN

    def test_role_invalida(self):
        with pytest.raises(ValidationError) as exc_info:
            Roles.from_string("Gerente")

        assert exc_info.value.message == "Role inválida: Gerente"


class TestUsuario:

    def test_criar_normaliza_email(self):
        usuario = Usuario.criar(" Ana ", "Ana@Fazenda.COM", cpf="529.982.247-25")

        assert usuario.nome == "Ana"
        assert usuario.email == "ana@fazenda.com"
        assert usuario.cpf == "52998224725"

    @pytest.mark.parametrize(
        "nome, email, mensagem",
        [
            ("", "a@b.com", "Nome é obrigatório"),
            ("Ana", "", "Email é obrigatório"),
            ("Ana", "ana.fazenda.com", "Email inválido"),
        ],
    )
    def test_dados_invalidos(self, nome, email, mensagem):
        with pytest.raises(ValidationError) as exc_info:
            Usuario.criar(nome, email)

        assert exc_info.value.message == mensagem

    def test_roles_sem_duplicidade(self):
        usuario = Usuario.criar("Ana", "ana@fazenda.com")
        usuario.adicionar_role(Roles.COMPRADOR)
        usuario.adicionar_role(Roles.COMPRADOR)

        assert usuario.obter_roles() == ["RoleComprador"]

        usuario.remover_role(Roles.COMPRADOR)
        assert not usuario.possui_role(Roles.COMPRADOR)

    def test_login_de_inativo(self):
        usuario = Usuario.criar("Ana", "ana@fazenda.com")
        usuario.desativar()

        with pytest.raises(BusinessRuleViolationError) as exc_info:
            usuario.registrar_login()

        assert exc_info.value.message == "Usuário inativo"
        assert usuario.ultimo_login is None


class TestUsuarioService:

    def test_criar_com_senha_e_roles(self, service, usuario_repo):
        dto = service.criar(CriarUsuarioInputDTO(
            nome="Ana", email="ana@fazenda.com", senha="abc123", roles=("COMPRADOR",),
        ))

        assert dto.roles == ["RoleComprador"]
        assert usuario_repo.get_by_id(dto.id).senha_hash == "hash:abc123"

    def test_criar_sem_senha(self, service, usuario_repo):
        dto = service.criar(CriarUsuarioInputDTO(nome="Rep", email="rep@agro.com"))

        assert usuario_repo.get_by_id(dto.id).senha_hash is None

    def test_email_unico(self, service):
        service.criar(CriarUsuarioInputDTO(nome="Ana", email="ana@fazenda.com"))

        with pytest.raises(BusinessRuleViolationError) as exc_info:
            service.criar(CriarUsuarioInputDTO(nome="Outra Ana", email="ANA@fazenda.com"))

        assert exc_info.value.message == "Já existe um usuário com este email"

    def test_atualizar_email(self, service):
        ana = service.criar(CriarUsuarioInputDTO(nome="Ana", email="ana@fazenda.com"))
        service.criar(CriarUsuarioInputDTO(nome="Bia", email="bia@fazenda.com"))

        with pytest.raises(BusinessRuleViolationError):
            service.atualizar(ana.id, AtualizarUsuarioInputDTO(nome="Ana", email="bia@fazenda.com"))

        dto = service.atualizar(ana.id, AtualizarUsuarioInputDTO(
            nome="Ana Maria", email="anamaria@fazenda.com", logo_url="https://cdn/ana.png",
        ))
        assert dto.email == "anamaria@fazenda.com"
        assert dto.logo_url == "https://cdn/ana.png"
        assert service.obter_por_email("anamaria@fazenda.com").id == ana.id

    def test_obter_inexistente(self, service):
        with pytest.raises(EntityNotFoundError):
            service.obter_por_id(5)

        assert service.obter_por_email("ninguem@agriis.com") is None

    def test_listar(self, service):
        service.criar(CriarUsuarioInputDTO(nome="Bruno", email="bruno@agro.com"))
        carla = service.criar(CriarUsuarioInputDTO(nome="Carla", email="carla@agro.com"))
        service.desativar(carla.id)

        assert [u.nome for u in service.listar(ListarUsuariosQueryDTO(ativo=True)).items] == ["Bruno"]
        assert service.listar(ListarUsuariosQueryDTO(busca="carla")).total == 1
        assert service.ativar(carla.id).ativo is True

    def test_roles(self, service):
        dto = service.criar(CriarUsuarioInputDTO(nome="Ana", email="ana@fazenda.com"))

        dto = service.adicionar_role(dto.id, "RoleAdmin")
        assert dto.roles == ["RoleAdmin"]

        dto = service.remover_role(dto.id, "ADMIN")
        assert dto.roles == []
