"""Testes de formas de pagamento e associações por fornecedor/cultura."""

import pytest

from agriis.core.pagamentos.dtos import (
    AtualizarFormaPagamentoInputDTO,
    CriarCulturaFormaPagamentoInputDTO,
    CriarFormaPagamentoInputDTO,
)
from agriis.core.pagamentos.entities import CulturaFormaPagamento, FormaPagamento
from agriis.core.pagamentos.ports import (
    InMemoryCulturaFormaPagamentoRepository,
    InMemoryFormaPagamentoRepository,
)
from agriis.core.pagamentos.use_cases import CulturaFormaPagamentoService, FormaPagamentoService
from agriis.core.shared.exceptions import (
    BusinessRuleViolationError,
    EntityNotFoundError,
    ValidationError,
)


@pytest.fixture
def forma_repo():
    return InMemoryFormaPagamentoRepository()


@pytest.fixture
def formas(forma_repo, uow):
    return FormaPagamentoService(forma_repo, uow)


@pytest.fixture
def associacoes(forma_repo, uow):
    return CulturaFormaPagamentoService(
        InMemoryCulturaFormaPagamentoRepository(forma_repo=forma_repo), forma_repo, uow
    )


class TestEntidades:

    def test_descricao_limitada(self):
        with pytest.raises(ValidationError) as exc_info:
            FormaPagamento.criar("x" * 46)

        assert exc_info.value.message == "Descrição deve ter no máximo 45 caracteres"

    def test_associacao_exige_ids(self):
        with pytest.raises(ValidationError) as exc_info:
            CulturaFormaPagamento.criar(fornecedor_id=1, cultura_id=0, forma_pagamento_id=1)

        assert exc_info.value.field == "cultura_id"


class TestFormaPagamentoService:

    def test_criar_e_listar_ativas(self, formas):
        boleto = formas.criar(CriarFormaPagamentoInputDTO(descricao="Boleto 30 dias"))
        formas.criar(CriarFormaPagamentoInputDTO(descricao="À vista"))

        formas.atualizar(boleto.id, AtualizarFormaPagamentoInputDTO(descricao="Boleto 30 dias", ativo=False))

        assert [f.descricao for f in formas.listar_ativas()] == ["À vista"]

    def test_remover_inexistente(self, formas):
        with pytest.raises(EntityNotFoundError):
            formas.remover(7)


class TestCulturaFormaPagamentoService:

    def test_associar_e_listar(self, formas, associacoes):
        pix = formas.criar(CriarFormaPagamentoInputDTO(descricao="Pix"))
        barter = formas.criar(CriarFormaPagamentoInputDTO(descricao="Barter"))

        dto = associacoes.criar(CriarCulturaFormaPagamentoInputDTO(1, 2, pix.id))
        associacoes.criar(CriarCulturaFormaPagamentoInputDTO(1, 2, barter.id))
        associacoes.criar(CriarCulturaFormaPagamentoInputDTO(1, 3, pix.id))

        assert dto.forma_pagamento_descricao == "Pix"
        assert [f.descricao for f in associacoes.listar_formas_por_fornecedor_cultura(1, 2)] == [
            "Barter", "Pix",
        ]
        assert len(associacoes.listar_por_fornecedor(1)) == 3
        assert associacoes.existe_associacao_ativa(1, 3, pix.id)
        assert not associacoes.existe_associacao_ativa(1, 3, barter.id)

    def test_associacao_duplicada(self, formas, associacoes):
        pix = formas.criar(CriarFormaPagamentoInputDTO(descricao="Pix"))
        associacoes.criar(CriarCulturaFormaPagamentoInputDTO(1, 2, pix.id))

        with pytest.raises(BusinessRuleViolationError) as exc_info:
            associacoes.criar(CriarCulturaFormaPagamentoInputDTO(1, 2, pix.id))

        assert exc_info.value.rule == "cultura_forma_pagamento_unica"

    def test_forma_inativa(self, formas, associacoes):
        pix = formas.criar(CriarFormaPagamentoInputDTO(descricao="Pix"))
        formas.atualizar(pix.id, AtualizarFormaPagamentoInputDTO(descricao="Pix", ativo=False))

        with pytest.raises(BusinessRuleViolationError) as exc_info:
            associacoes.criar(CriarCulturaFormaPagamentoInputDTO(1, 2, pix.id))

        assert exc_info.value.message == "Forma de pagamento não encontrada ou inativa"

    def test_remover(self, formas, associacoes):
        pix = formas.criar(CriarFormaPagamentoInputDTO(descricao="Pix"))
        dto = associacoes.criar(CriarCulturaFormaPagamentoInputDTO(1, 2, pix.id))

        associacoes.remover(dto.id)

        assert associacoes.listar_por_fornecedor(1) == []
        with pytest.raises(EntityNotFoundError):
            associacoes.remover(dto.id)
