"""
Testes do domínio de Catálogos.

Coverage:
- CatalogoItem.obter_preco: UF -> padrão -> preço base, janelas de vigência
- Catalogo: vigência e unicidade de produto
- CatalogoService: chave única, itens, consulta de preço
"""

from datetime import date, datetime, timedelta
from decimal import Decimal

import pytest

from agriis.core.catalogos.dtos import (
    AtualizarCatalogoInputDTO,
    CatalogoItemInputDTO,
    CriarCatalogoInputDTO,
    ListarCatalogosQueryDTO,
)
from agriis.core.catalogos.entities import Catalogo, CatalogoItem
from agriis.core.catalogos.use_cases import CatalogoService
from agriis.core.fornecedores.entities import Moeda
from agriis.core.shared.exceptions import (
    BusinessRuleViolationError,
    EntityNotFoundError,
    ValidationError,
)

HOJE = date(2024, 3, 15)

ESTRUTURA = {
    "estados": {
        "MT": 120.5,
        "GO": [
            {"data_inicio": "2024-01-01", "data_fim": "2024-02-29", "valor": 110},
            {"data_inicio": "2024-03-01", "valor": 115},
        ],
        "PR": [{"data_inicio": "2023-01-01", "data_fim": "2023-12-31", "valor": 90}],
    },
    "padrao": 125.0,
}


@pytest.fixture
def service(catalogo_repo, uow):
    return CatalogoService(catalogo_repo, uow)


def _criar_dto(**kwargs):
    dados = dict(
        safra_id=1,
        ponto_distribuicao_id=2,
        cultura_id=3,
        categoria_id=4,
        data_inicio=date.today() - timedelta(days=1),
    )
    dados.update(kwargs)
    return CriarCatalogoInputDTO(**dados)


class TestObterPreco:

    @pytest.fixture
    def item(self):
        return CatalogoItem.criar(produto_id=1, estrutura_precos=ESTRUTURA, preco_base=Decimal("80"))

    def test_preco_fixo_da_uf(self, item):
        assert item.obter_preco("MT", HOJE) == Decimal("120.5")

    def test_uf_em_minusculas(self, item):
        assert item.obter_preco("mt", HOJE) == Decimal("120.5")

    @pytest.mark.parametrize(
        "dia, esperado",
        [
            (date(2024, 1, 10), Decimal("110")),
            (date(2024, 2, 29), Decimal("110")),
            (date(2024, 3, 1), Decimal("115")),
            (datetime(2030, 1, 1, 9, 30), Decimal("115")),
        ],
    )
    def test_janelas_de_vigencia(self, item, dia, esperado):
        assert item.obter_preco("GO", dia) == esperado

    def test_uf_sem_janela_vigente_nao_cai_para_padrao(self, item):
        assert item.obter_preco("PR", HOJE) is None

    def test_uf_ausente_usa_padrao(self, item):
        assert item.obter_preco("BA", HOJE) == Decimal("125.0")
        assert item.obter_preco(None, HOJE) == Decimal("125.0")

    def test_sem_estrutura_usa_preco_base(self):
        item = CatalogoItem.criar(produto_id=1, preco_base=50)

        assert item.obter_preco("MT", HOJE) == Decimal("50")

    def test_sem_padrao_usa_preco_base(self):
        item = CatalogoItem.criar(
            produto_id=1, estrutura_precos={"estados": {"MT": 1}}, preco_base=Decimal("7")
        )

        assert item.obter_preco("SP", HOJE) == Decimal("7")

    def test_estrutura_malformada_usa_preco_base(self):
        item = CatalogoItem.criar(
            produto_id=1, estrutura_precos={"estados": ["MT"]}, preco_base=Decimal("9")
        )

        assert item.obter_preco("MT", HOJE) == Decimal("9")

    def test_preco_base_negativo(self):
        with pytest.raises(ValidationError):
            CatalogoItem.criar(produto_id=1, preco_base=-1)

    def test_estrutura_nao_objeto(self):
        with pytest.raises(ValidationError):
            CatalogoItem.criar(produto_id=1, estrutura_precos=[1, 2])


class TestCatalogo:

    def _catalogo(self, data_fim=None):
        return Catalogo.criar(1, 2, 3, 4, Moeda.REAL, date(2024, 1, 1), data_fim)

    def test_vigencia(self):
        catalogo = self._catalogo(data_fim=date(2024, 6, 30))

        assert catalogo.esta_vigente(date(2024, 6, 30))
        assert not catalogo.esta_vigente(date(2024, 7, 1))
        assert not catalogo.esta_vigente(date(2023, 12, 31))

    def test_catalogo_inativo_nao_vigente(self):
        catalogo = self._catalogo()
        catalogo.atualizar(date(2024, 1, 1), None, ativo=False)

        assert not catalogo.esta_vigente(date(2024, 2, 1))

    def test_data_fim_anterior(self):
        with pytest.raises(ValidationError) as exc_info:
            self._catalogo(data_fim=date(2023, 1, 1))

        assert exc_info.value.field == "data_fim"

    def test_produto_unico(self):
        catalogo = self._catalogo()
        catalogo.adicionar_item(CatalogoItem.criar(10, preco_base=1))

        with pytest.raises(BusinessRuleViolationError) as exc_info:
            catalogo.adicionar_item(CatalogoItem.criar(10, preco_base=2))

        assert exc_info.value.message == "Produto já existe no catálogo"

    def test_ids_obrigatorios(self):
        with pytest.raises(ValidationError) as exc_info:
            Catalogo.criar(1, 0, 3, 4, Moeda.REAL, date(2024, 1, 1))

        assert exc_info.value.field == "ponto_distribuicao_id"


class TestCatalogoService:

    def test_criar(self, service, uow):
        dto = service.criar(_criar_dto(moeda="Dolar"))

        assert dto.id is not None
        assert dto.moeda == "Dolar"
        assert dto.vigente is True
        assert uow.committed

    def test_chave_duplicada(self, service):
        service.criar(_criar_dto())

        with pytest.raises(BusinessRuleViolationError):
            service.criar(_criar_dto(moeda="REAL"))

    def test_moeda_invalida(self, service):
        with pytest.raises(ValidationError) as exc_info:
            service.criar(_criar_dto(moeda="EURO"))

        assert exc_info.value.message == "Moeda inválida: EURO"

    def test_atualizar(self, service):
        dto = service.criar(_criar_dto())

        atualizado = service.atualizar(dto.id, AtualizarCatalogoInputDTO(
            data_inicio=date.today() + timedelta(days=30),
        ))

        assert atualizado.vigente is False

    def test_listar_com_filtros(self, service):
        service.criar(_criar_dto())
        service.criar(_criar_dto(categoria_id=9, moeda="DOLAR"))

        pagina = service.listar(ListarCatalogosQueryDTO(moeda="Dolar"))

        assert pagina.total == 1
        assert pagina.items[0].categoria_id == 9

    def test_listar_vigentes(self, service):
        service.criar(_criar_dto())
        service.criar(_criar_dto(categoria_id=8, data_inicio=date.today() + timedelta(days=5)))

        assert [c.categoria_id for c in service.listar_vigentes()] == [4]

    def test_itens(self, service):
        catalogo = service.criar(_criar_dto())

        item = service.adicionar_item(
            catalogo.id, CatalogoItemInputDTO(produto_id=10, estrutura_precos=ESTRUTURA)
        )
        assert item.id is not None
        assert item.catalogo_id == catalogo.id

        atualizado = service.atualizar_item(
            catalogo.id, item.id,
            CatalogoItemInputDTO(produto_id=10, preco_base=Decimal("99"), ativo=False),
        )
        assert atualizado.preco_base == Decimal("99")
        assert atualizado.estrutura_precos == {}
        assert atualizado.ativo is False

        service.remover_item(catalogo.id, item.id)
        assert service.obter_por_id(catalogo.id).itens == []

    def test_remover_item_inexistente(self, service):
        catalogo = service.criar(_criar_dto())

        with pytest.raises(EntityNotFoundError) as exc_info:
            service.remover_item(catalogo.id, 999)

        assert exc_info.value.message == "Item não encontrado"

    def test_consultar_preco(self, service):
        catalogo = service.criar(_criar_dto())
        service.adicionar_item(
            catalogo.id, CatalogoItemInputDTO(produto_id=10, estrutura_precos=ESTRUTURA)
        )

        assert service.consultar_preco(catalogo.id, 10, "GO", HOJE) == Decimal("115")

        with pytest.raises(EntityNotFoundError):
            service.consultar_preco(catalogo.id, 11, "GO")

    def test_remover(self, service):
        catalogo = service.criar(_criar_dto())
        service.remover(catalogo.id)

        with pytest.raises(EntityNotFoundError):
            service.obter_por_id(catalogo.id)
