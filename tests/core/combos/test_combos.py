"""
Testes do domínio de Combos.

Coverage:
- Combo: faixa de hectares, vigência, municípios, permissões de itens
- ComboCategoriaDesconto: tipos de desconto por faixa
- ComboService e MarcarCombosExpiradosService
"""

from datetime import datetime, timedelta
from decimal import Decimal

import pytest

from agriis.core.combos.dtos import (
    AtualizarComboInputDTO,
    ComboCategoriaDescontoInputDTO,
    ComboItemInputDTO,
    ComboLocalRecebimentoInputDTO,
    CriarComboInputDTO,
)
from agriis.core.combos.entities import (
    Combo,
    ComboCategoriaDesconto,
    ComboItem,
    ModalidadePagamento,
    StatusCombo,
    TipoDesconto,
)
from agriis.core.combos.events import ComboCriadoEvent, ComboExpiradoEvent
from agriis.core.combos.ports import InMemoryComboRepository
from agriis.core.combos.use_cases import ComboService, MarcarCombosExpiradosService
from agriis.core.shared.exceptions import (
    BusinessRuleViolationError,
    EntityNotFoundError,
    ValidationError,
)


def _periodo(inicio_em_dias=0, duracao_dias=30):
    inicio = datetime.now() + timedelta(days=inicio_em_dias)
    return inicio, inicio + timedelta(days=duracao_dias)


def _combo(**kwargs) -> Combo:
    inicio, fim = _periodo()
    dados = dict(
        nome="Combo Soja",
        hectare_minimo=100,
        hectare_maximo=1000,
        data_inicio=inicio,
        data_fim=fim,
        modalidade_pagamento=ModalidadePagamento.NORMAL,
        fornecedor_id=1,
        safra_id=1,
    )
    dados.update(kwargs)
    return Combo.criar(**dados)


@pytest.fixture
def combo_repo():
    return InMemoryComboRepository()


@pytest.fixture
def service(combo_repo, uow):
    return ComboService(combo_repo, uow)


def _criar_dto(**kwargs):
    inicio, fim = _periodo()
    dados = dict(
        nome="Combo Milho",
        hectare_minimo=Decimal("50"),
        hectare_maximo=Decimal("500"),
        data_inicio=inicio,
        data_fim=fim,
        modalidade_pagamento="Barter",
        fornecedor_id=1,
        safra_id=2,
    )
    dados.update(kwargs)
    return CriarComboInputDTO(**dados)


class TestComboEntidade:

    def test_criar(self):
        combo = _combo()

        assert combo.status == StatusCombo.ATIVO
        assert combo.atualizado_em is None
        assert combo.permite_alteracao_item

    def test_inicio_no_passado(self):
        inicio = datetime.now() - timedelta(days=2)

        with pytest.raises(ValidationError) as exc_info:
            _combo(data_inicio=inicio, data_fim=inicio + timedelta(days=10))

        assert exc_info.value.message == "Data início não pode ser no passado"

    def test_faixa_de_hectares_invalida(self):
        with pytest.raises(ValidationError) as exc_info:
            _combo(hectare_minimo=500, hectare_maximo=500)

        assert exc_info.value.message == "Hectare máximo deve ser maior que o mínimo"

    def test_valido_para_produtor(self):
        combo = _combo()
        combo.definir_restricoes_municipios([5201405, 5103403, 5201405])
        agora = combo.data_inicio + timedelta(days=1)

        assert combo.restricoes_municipios == [5103403, 5201405]
        assert combo.valido_para_produtor(250, 5201405, agora)
        assert not combo.valido_para_produtor(50, 5201405, agora)
        assert not combo.valido_para_produtor(250, 1100015, agora)
        assert not combo.valido_para_produtor(250, 5201405, combo.data_fim + timedelta(days=1))

    @pytest.mark.parametrize("status", [
        StatusCombo.INATIVO, StatusCombo.SUSPENSO, StatusCombo.EXPIRADO,
    ])
    def test_valido_para_produtor_exige_combo_ativo(self, status):
        combo = _combo()
        combo.atualizar_status(status)

        assert not combo.valido_para_produtor(250, None, combo.data_inicio + timedelta(days=1))

    @pytest.mark.parametrize("hectare, valido", [
        (100, True),
        (1000, True),
        (Decimal("99.99"), False),
        (Decimal("1000.01"), False),
    ])
    def test_valido_para_produtor_limites_de_hectare(self, hectare, valido):
        combo = _combo()

        assert combo.valido_para_produtor(hectare, None, combo.data_inicio) is valido

    def test_valido_para_produtor_limites_do_periodo(self):
        combo = _combo()

        assert combo.valido_para_produtor(250, None, combo.data_inicio)
        assert combo.valido_para_produtor(250, None, combo.data_fim)
        assert not combo.valido_para_produtor(
            250, None, combo.data_inicio - timedelta(microseconds=1)
        )
        assert not combo.valido_para_produtor(250, None, combo.data_fim + timedelta(microseconds=1))

    def test_status_aceita_nome_ou_valor(self):
        assert StatusCombo.from_string("SUSPENSO") == StatusCombo.SUSPENSO
        assert TipoDesconto.from_string("valorfixo") == TipoDesconto.VALOR_FIXO
        with pytest.raises(ValidationError) as exc_info:
            ModalidadePagamento.from_string("Permuta")

        assert exc_info.value.field == "ModalidadePagamento"

    def test_sem_restricao_aceita_qualquer_municipio(self):
        assert _combo().municipio_permitido(None)

    def test_expirado_eh_terminal(self):
        combo = _combo()
        combo.expirar()

        with pytest.raises(BusinessRuleViolationError):
            combo.atualizar_status(StatusCombo.ATIVO)

    def test_permissoes_de_itens(self):
        combo = _combo()
        item = ComboItem.criar(produto_id=10, quantidade=2, preco_unitario=100)
        item.id = 1
        combo.adicionar_item(item)
        combo.configurar_permissoes(permite_alteracao=False, permite_exclusao=False)

        with pytest.raises(BusinessRuleViolationError) as exc_info:
            combo.atualizar_item(1, 3, 100, 0, False, 0)
        assert exc_info.value.message == "Alteração de itens não permitida para este combo"

        with pytest.raises(BusinessRuleViolationError):
            combo.remover_item(1)

    def test_valor_total_itens(self):
        combo = _combo()
        combo.adicionar_item(ComboItem.criar(10, quantidade=2, preco_unitario=100, percentual_desconto=10))
        combo.adicionar_item(ComboItem.criar(11, quantidade=1, preco_unitario=50))

        assert combo.valor_total_itens() == Decimal("230")


class TestCategoriaDesconto:

    @pytest.mark.parametrize(
        "tipo, valor, esperado",
        [
            (TipoDesconto.PERCENTUAL, 10, Decimal("100")),
            (TipoDesconto.VALOR_FIXO, 75, Decimal("75")),
            (TipoDesconto.POR_HECTARE, 2, Decimal("400")),
        ],
    )
    def test_calcular_desconto(self, tipo, valor, esperado):
        categoria = ComboCategoriaDesconto.criar(1, tipo, valor, hectare_minimo=100)

        assert categoria.calcular_desconto(valor_base=1000, hectare=200) == esperado

    def test_fora_da_faixa(self):
        categoria = ComboCategoriaDesconto.criar(
            1, TipoDesconto.PERCENTUAL, 10, hectare_minimo=0, hectare_maximo=100
        )

        assert categoria.calcular_desconto(1000, 150) == Decimal("0")

    def test_definir_desconto_zera_outros_tipos(self):
        categoria = ComboCategoriaDesconto.criar(1, TipoDesconto.PERCENTUAL, 10)
        categoria.definir_desconto(TipoDesconto.VALOR_FIXO, 30)

        assert categoria.percentual_desconto == Decimal("0")
        assert categoria.valor_desconto_fixo == Decimal("30")

    def test_tipo_from_string(self):
        assert TipoDesconto.from_string("ValorFixo") == TipoDesconto.VALOR_FIXO
        assert TipoDesconto.from_string("POR_HECTARE") == TipoDesconto.POR_HECTARE


class TestComboService:

    def test_criar(self, service, uow):
        dto = service.criar(_criar_dto(municipios_permitidos=(5201405,)))

        assert dto.modalidade_pagamento == "Barter"
        assert dto.restricoes_municipios == [5201405]
        assert uow.events_of(ComboCriadoEvent)[0].aggregate_id == dto.id

    def test_nome_unico_entre_ativos(self, service):
        service.criar(_criar_dto())

        with pytest.raises(BusinessRuleViolationError):
            service.criar(_criar_dto(nome="combo milho"))

        assert service.criar(_criar_dto(safra_id=3)).safra_id == 3

    def test_atualizar_mantem_municipios_quando_none(self, service):
        criado = service.criar(_criar_dto(municipios_permitidos=(1,)))
        inicio, fim = _periodo(duracao_dias=60)

        dto = service.atualizar(criado.id, AtualizarComboInputDTO(
            nome="Combo Milho Safrinha",
            hectare_minimo=Decimal("10"),
            hectare_maximo=Decimal("300"),
            data_inicio=inicio,
            data_fim=fim,
        ))

        assert dto.nome == "Combo Milho Safrinha"
        assert dto.restricoes_municipios == [1]

    def test_atualizar_status(self, service):
        criado = service.criar(_criar_dto())

        assert service.atualizar_status(criado.id, "Suspenso").status == "Suspenso"

        with pytest.raises(ValidationError):
            service.atualizar_status(criado.id, "Pausado")

    def test_itens_locais_e_categorias(self, service):
        criado = service.criar(_criar_dto())

        dto = service.adicionar_item(criado.id, ComboItemInputDTO(
            produto_id=10, quantidade=Decimal("5"), preco_unitario=Decimal("20"),
        ))
        item_id = dto.itens[0]["id"]
        dto = service.atualizar_item(criado.id, item_id, ComboItemInputDTO(
            produto_id=10, quantidade=Decimal("6"), preco_unitario=Decimal("20"), ordem=1,
        ))
        assert dto.itens[0]["quantidade"] == 6.0

        dto = service.adicionar_local_recebimento(criado.id, ComboLocalRecebimentoInputDTO(
            ponto_distribuicao_id=3, local_padrao=True,
        ))
        dto = service.adicionar_local_recebimento(criado.id, ComboLocalRecebimentoInputDTO(
            ponto_distribuicao_id=4, local_padrao=True,
        ))
        assert [l["local_padrao"] for l in dto.locais_recebimento] == [False, True]

        dto = service.adicionar_categoria_desconto(criado.id, ComboCategoriaDescontoInputDTO(
            categoria_id=5, tipo_desconto="Percentual", valor_desconto=Decimal("3"),
        ))
        assert dto.categorias_desconto[0]["percentual_desconto"] == 3.0

        dto = service.remover_item(criado.id, item_id)
        assert dto.itens == []

    def test_item_inexistente(self, service):
        criado = service.criar(_criar_dto())

        with pytest.raises(EntityNotFoundError):
            service.remover_item(criado.id, 42)

    def test_listar_validos_para_produtor(self, service):
        service.criar(_criar_dto())
        service.criar(_criar_dto(nome="Grande", hectare_minimo=Decimal("1000"), hectare_maximo=Decimal("9000")))
        futuro_inicio, futuro_fim = _periodo(inicio_em_dias=10)
        service.criar(_criar_dto(nome="Futuro", data_inicio=futuro_inicio, data_fim=futuro_fim))

        nomes = [c.nome for c in service.listar_validos_para_produtor(hectare=200)]

        assert nomes == ["Combo Milho"]


class TestMarcarCombosExpirados:

    def test_marca_somente_vencidos(self, combo_repo, uow):
        vencido = combo_repo.save(_combo())
        vigente = combo_repo.save(_combo(nome="Outro"))
        depois_do_fim = vencido.data_fim + timedelta(seconds=1)
        vigente.data_fim = depois_do_fim + timedelta(days=10)

        quantidade = MarcarCombosExpiradosService(combo_repo, uow).execute(agora=depois_do_fim)

        assert quantidade == 1
        assert vencido.status == StatusCombo.EXPIRADO
        assert vigente.status == StatusCombo.ATIVO
        assert uow.events_of(ComboExpiradoEvent)[0].aggregate_id == vencido.id
