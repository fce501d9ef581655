"""Testes de Fornecedores e do vínculo de usuários."""

from decimal import Decimal

import pytest

from agriis.core.fornecedores.dtos import (
    AtualizarFornecedorInputDTO,
    CriarFornecedorInputDTO,
    ListarFornecedoresQueryDTO,
    VincularUsuarioInputDTO,
)
from agriis.core.fornecedores.entities import Fornecedor, Moeda, UsuarioFornecedor
from agriis.core.fornecedores.ports import (
    InMemoryFornecedorRepository,
    InMemoryUsuarioFornecedorRepository,
)
from agriis.core.fornecedores.use_cases import FornecedorService
from agriis.core.shared.exceptions import (
    BusinessRuleViolationError,
    EntityNotFoundError,
    ValidationError,
)
from agriis.core.usuarios.entities import Roles, Usuario


@pytest.fixture
def service(usuario_repo, uow):
    return FornecedorService(
        InMemoryFornecedorRepository(), InMemoryUsuarioFornecedorRepository(), usuario_repo, uow
    )


@pytest.fixture
def fornecedor(service):
    return service.criar(CriarFornecedorInputDTO(
        nome="Agro Insumos", cnpj="11.222.333/0001-81", email="Vendas@AgroInsumos.com",
    ))


class TestFornecedorEntidade:

    def test_criar_normaliza(self):
        fornecedor = Fornecedor.criar("  Agro Insumos ", "11.222.333/0001-81", email=" A@B.COM ")

        assert fornecedor.nome == "Agro Insumos"
        assert fornecedor.cnpj == "11222333000181"
        assert fornecedor.email == "a@b.com"
        assert fornecedor.moeda_padrao == Moeda.REAL

    def test_cnpj_invalido(self):
        with pytest.raises(ValidationError):
            Fornecedor.criar("Agro", "11.222.333/0001-82")

    def test_pedido_minimo_negativo(self):
        fornecedor = Fornecedor.criar("Agro", "11.222.333/0001-81")

        with pytest.raises(ValidationError) as exc_info:
            fornecedor.definir_pedido_minimo(-1)

        assert exc_info.value.message == "Pedido mínimo não pode ser negativo"

    def test_moeda_from_string(self):
        assert Moeda.from_string("dolar") == Moeda.DOLAR
        assert Moeda.from_string("Real") == Moeda.REAL

    def test_vinculo_exige_role_de_fornecedor(self):
        with pytest.raises(ValidationError) as exc_info:
            UsuarioFornecedor.criar(1, 1, Roles.COMPRADOR)

        assert exc_info.value.message == "Role inválida para usuário de fornecedor"


class TestFornecedorService:

    def test_criar(self, fornecedor):
        assert fornecedor.cnpj_formatado == "11.222.333/0001-81"
        assert fornecedor.email == "vendas@agroinsumos.com"
        assert fornecedor.moeda_padrao == "Real"
        assert fornecedor.pedido_minimo is None

    def test_cnpj_duplicado(self, service, fornecedor):
        with pytest.raises(BusinessRuleViolationError) as exc_info:
            service.criar(CriarFornecedorInputDTO(nome="Outro", cnpj="11222333000181"))

        assert exc_info.value.message == "Já existe um fornecedor com este CNPJ"

    def test_criar_com_pedido_minimo_em_dolar(self, service):
        dto = service.criar(CriarFornecedorInputDTO(
            nome="Import Agro", cnpj="11.444.777/0001-61",
            moeda_padrao="DOLAR", pedido_minimo=Decimal("5000"),
        ))

        assert dto.moeda_padrao == "Dolar"
        assert dto.pedido_minimo == Decimal("5000")

    def test_atualizar(self, service, fornecedor):
        dto = service.atualizar(fornecedor.id, AtualizarFornecedorInputDTO(
            nome="Agro Insumos Ltda", telefone="6499990000", moeda_padrao="Dolar",
            logo_url="https://cdn.agriis.com/logo.png",
        ))

        assert dto.nome == "Agro Insumos Ltda"
        assert dto.email is None
        assert dto.moeda_padrao == "Dolar"
        assert dto.logo_url == "https://cdn.agriis.com/logo.png"

    def test_obter_inexistente(self, service):
        with pytest.raises(EntityNotFoundError) as exc_info:
            service.obter_por_id(99)

        assert exc_info.value.message == "Fornecedor não encontrado"

    def test_listar_com_filtros(self, service, fornecedor):
        outro = service.criar(CriarFornecedorInputDTO(nome="Bio Sementes", cnpj="11.444.777/0001-61"))
        service.desativar(outro.id)

        ativos = service.listar(ListarFornecedoresQueryDTO(ativo=True))
        busca = service.listar(ListarFornecedoresQueryDTO(busca="bio"))

        assert [f.nome for f in ativos.items] == ["Agro Insumos"]
        assert busca.total == 1
        assert busca.items[0].ativo is False

        assert service.ativar(outro.id).ativo is True

    def test_definir_pedido_minimo(self, service, fornecedor):
        assert service.definir_pedido_minimo(fornecedor.id, "1500.50").pedido_minimo == Decimal("1500.50")
        assert service.definir_pedido_minimo(fornecedor.id, None).pedido_minimo is None


class TestVinculoUsuario:

    def test_vincular_adiciona_role(self, service, fornecedor, usuario_repo):
        usuario = usuario_repo.save(Usuario.criar("Rep", "rep@agro.com"))

        vinculo = service.vincular_usuario(fornecedor.id, VincularUsuarioInputDTO(usuario_id=usuario.id))

        assert vinculo.role == "RoleFornecedorWebRepresentante"
        assert usuario.possui_role(Roles.FORNECEDOR_WEB_REPRESENTANTE)
        assert [v.usuario_id for v in service.listar_usuarios(fornecedor.id)] == [usuario.id]

    def test_vinculo_duplicado(self, service, fornecedor, usuario_repo):
        usuario = usuario_repo.save(Usuario.criar("Adm", "adm@agro.com"))
        dto = VincularUsuarioInputDTO(usuario_id=usuario.id, role="FORNECEDOR_WEB_ADMIN")
        service.vincular_usuario(fornecedor.id, dto)

        with pytest.raises(BusinessRuleViolationError) as exc_info:
            service.vincular_usuario(fornecedor.id, dto)

        assert exc_info.value.message == "Usuário já vinculado a este fornecedor"

    def test_usuario_inexistente(self, service, fornecedor):
        with pytest.raises(EntityNotFoundError) as exc_info:
            service.vincular_usuario(fornecedor.id, VincularUsuarioInputDTO(usuario_id=42))

        assert exc_info.value.message == "Usuário não encontrado"

    def test_listar_usuarios_de_fornecedor_inexistente(self, service):
        with pytest.raises(EntityNotFoundError):
            service.listar_usuarios(7)
