"""
Configurações globais do Pytest para o Agriis.

Carregado automaticamente pelo pytest. Fornece a FakeUnitOfWork,
repositórios em memória e as opções/markers compartilhados.

Django é configurado pelo pytest-django (DJANGO_SETTINGS_MODULE
definido em pyproject.toml).
"""

from decimal import Decimal
from pathlib import Path
from typing import List

import pytest

from agriis.core.shared.events import DomainEvent


class FakeUnitOfWork:
    """
    Fake Unit of Work para testes de use cases.

    Permite verificar:
    - commit/rollback
    - eventos publicados (somente os de transações confirmadas)
    """

    def __init__(self):
        self._pendentes: List[DomainEvent] = []
        self._events: List[DomainEvent] = []
        self.commits = 0
        self.rollbacks = 0

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if exc_type is not None:
            self.rollback()
        else:
            self.commit()
        return False

    def commit(self):
        self.commits += 1
        self._events.extend(self._pendentes)
        self._pendentes.clear()

    def rollback(self):
        self.rollbacks += 1
        self._pendentes.clear()

    def publish_event(self, event: DomainEvent):
        self._pendentes.append(event)

    def collect_events(self) -> List[DomainEvent]:
        return list(self._events)

    def events_of(self, tipo) -> List[DomainEvent]:
        return [e for e in self._events if isinstance(e, tipo)]

    @property
    def committed(self) -> bool:
        return self.commits > 0

    @property
    def rolled_back(self) -> bool:
        return self.rollbacks > 0


@pytest.fixture(scope="session")
def project_root():
    return Path(__file__).parent.parent


@pytest.fixture
def uow():
    return FakeUnitOfWork()


# =============================================================================
# Repositórios em memória
# =============================================================================

@pytest.fixture
def cultura_repo():
    from agriis.core.culturas.ports import InMemoryCulturaRepository
    return InMemoryCulturaRepository()


@pytest.fixture
def fornecedor_repo():
    from agriis.core.fornecedores.ports import InMemoryFornecedorRepository
    return InMemoryFornecedorRepository()


@pytest.fixture
def produtor_repo():
    from agriis.core.produtores.ports import InMemoryProdutorRepository
    return InMemoryProdutorRepository()


@pytest.fixture
def catalogo_repo():
    from agriis.core.catalogos.ports import InMemoryCatalogoRepository
    return InMemoryCatalogoRepository()


@pytest.fixture
def segmentacao_repo():
    from agriis.core.segmentacoes.ports import InMemorySegmentacaoRepository
    return InMemorySegmentacaoRepository()


@pytest.fixture
def pedido_repo():
    from agriis.core.pedidos.ports import InMemoryPedidoRepository
    return InMemoryPedidoRepository()


@pytest.fixture
def proposta_repo():
    from agriis.core.pedidos.ports import InMemoryPropostaRepository
    return InMemoryPropostaRepository()


@pytest.fixture
def usuario_repo():
    from agriis.core.usuarios.ports import InMemoryUsuarioRepository
    return InMemoryUsuarioRepository()


class FakeHasher:
    """Hash reversível, suficiente para use cases."""

    def gerar_hash(self, senha: str) -> str:
        return f"hash:{senha}"

    def verificar(self, senha: str, senha_hash: str) -> bool:
        return senha_hash == f"hash:{senha}"


class FakeGeradorToken:
    """Tokens previsíveis: access 'access-<id>', refresh 'refresh-<n>'."""

    access_token_segundos = 3600

    def __init__(self):
        self._contador = 0

    def gerar_access_token(self, usuario) -> str:
        return f"access-{usuario.id}"

    def obter_usuario_id(self, access_token: str):
        prefixo, _, usuario_id = access_token.partition("-")
        if prefixo != "access" or not usuario_id.isdigit():
            return None
        return int(usuario_id)

    def gerar_refresh_token(self) -> str:
        self._contador += 1
        return f"refresh-{self._contador}"


@pytest.fixture
def hasher():
    return FakeHasher()


@pytest.fixture
def gerador_token():
    return FakeGeradorToken()


# =============================================================================
# Services de pedidos
# =============================================================================

@pytest.fixture
def carrinho_service(catalogo_repo, produtor_repo, segmentacao_repo, proposta_repo):
    from agriis.core.pedidos.use_cases import CarrinhoComprasService
    from agriis.core.segmentacoes.use_cases import CalculoDescontoSegmentadoService

    return CarrinhoComprasService(
        catalogo_repo=catalogo_repo,
        produtor_repo=produtor_repo,
        calculo_desconto_service=CalculoDescontoSegmentadoService(segmentacao_repo),
        proposta_repo=proposta_repo,
    )


@pytest.fixture
def pedido_service(
    pedido_repo, proposta_repo, fornecedor_repo, produtor_repo, carrinho_service, uow, fornecedor
):
    """PedidoService com o fornecedor 1 cadastrado."""
    from agriis.core.pedidos.use_cases import PedidoService
    return PedidoService(
        pedido_repo, proposta_repo, fornecedor_repo, produtor_repo, carrinho_service, uow
    )


@pytest.fixture
def proposta_service(pedido_repo, proposta_repo, uow):
    from agriis.core.pedidos.use_cases import PropostaService
    return PropostaService(pedido_repo, proposta_repo, uow)


# =============================================================================
# Dados de exemplo
# =============================================================================

@pytest.fixture
def fornecedor(fornecedor_repo):
    """Fornecedor de id 1, dono da segmentação de exemplo."""
    from agriis.core.fornecedores.entities import Fornecedor

    return fornecedor_repo.save(Fornecedor.criar("Agro Insumos", "11.222.333/0001-81"))


@pytest.fixture
def produtor(produtor_repo):
    """Produtor autorizado com 80 ha."""
    from agriis.core.produtores.entities import Produtor, StatusProdutor
    from agriis.core.shared.value_objects import AreaPlantio

    produtor = Produtor.criar(
        nome="Fazenda Santa Rita",
        cpf="529.982.247-25",
        area_plantio=AreaPlantio.criar(80),
    )
    produtor.atualizar_status(StatusProdutor.AUTORIZADO_MANUALMENTE, usuario_autorizacao_id=1)
    return produtor_repo.save(produtor)


@pytest.fixture
def catalogo(catalogo_repo):
    """Catálogo vigente com o produto 10 (MT: 100, padrão: 120)."""
    from datetime import date, timedelta

    from agriis.core.catalogos.entities import Catalogo, CatalogoItem
    from agriis.core.fornecedores.entities import Moeda

    catalogo = Catalogo.criar(
        safra_id=1,
        ponto_distribuicao_id=1,
        cultura_id=1,
        categoria_id=5,
        moeda=Moeda.REAL,
        data_inicio=date.today() - timedelta(days=10),
    )
    catalogo.adicionar_item(CatalogoItem.criar(
        produto_id=10,
        estrutura_precos={"estados": {"MT": 100}, "padrao": 120},
    ))
    catalogo.adicionar_item(CatalogoItem.criar(produto_id=20, preco_base=Decimal("50")))
    return catalogo_repo.save(catalogo)


@pytest.fixture
def segmentacao(segmentacao_repo):
    """Segmentação padrão do fornecedor 1: 0-100 ha com 5% na categoria 5."""
    from agriis.core.segmentacoes.entities import Grupo, GrupoSegmentacao, Segmentacao

    segmentacao = Segmentacao.criar("Porte", fornecedor_id=1, eh_padrao=True)
    pequeno = Grupo.criar("Pequeno", area_minima=0, area_maxima=100)
    pequeno.adicionar_desconto(GrupoSegmentacao.criar(categoria_id=5, percentual_desconto=5))
    segmentacao.adicionar_grupo(pequeno)
    segmentacao.adicionar_grupo(Grupo.criar("Grande", area_minima=100))
    return segmentacao_repo.save(segmentacao)


# =============================================================================
# Markers / opções
# =============================================================================

def pytest_configure(config):
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )
    config.addinivalue_line(
        "markers", "integration: marks tests as integration tests"
    )


def pytest_collection_modifyitems(config, items):
    skip_integration = pytest.mark.skip(reason="use --run-integration para executar")

    for item in items:
        if "integration" in item.keywords:
            if not config.getoption("--run-integration", default=False):
                item.add_marker(skip_integration)


def pytest_addoption(parser):
    parser.addoption(
        "--run-integration",
        action="store_true",
        default=False,
        help="run integration tests",
    )
