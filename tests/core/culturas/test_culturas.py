"""Testes de Culturas."""

import pytest

from agriis.core.culturas.dtos import AtualizarCulturaInputDTO, CriarCulturaInputDTO
from agriis.core.culturas.entities import Cultura
from agriis.core.culturas.use_cases import CulturaService
from agriis.core.shared.exceptions import (
    BusinessRuleViolationError,
    EntityNotFoundError,
    ValidationError,
)


@pytest.fixture
def service(cultura_repo, uow):
    return CulturaService(cultura_repo, uow)


class TestCultura:

    def test_criar(self):
        cultura = Cultura.criar("  Soja ", descricao="Glycine max")

        assert cultura.nome == "Soja"
        assert cultura.ativo is True

    @pytest.mark.parametrize("nome", ["", "   ", None, "x" * 257])
    def test_nome_invalido(self, nome):
        with pytest.raises(ValidationError) as exc_info:
            Cultura.criar(nome)

        assert exc_info.value.field == "nome"


class TestCulturaService:

    def test_criar(self, service, uow):
        dto = service.criar(CriarCulturaInputDTO(nome="Milho"))

        assert dto.id is not None
        assert uow.committed

    def test_nome_unico_ignora_caixa(self, service):
        service.criar(CriarCulturaInputDTO(nome="Milho"))

        with pytest.raises(BusinessRuleViolationError) as exc_info:
            service.criar(CriarCulturaInputDTO(nome="milho"))

        assert exc_info.value.message == "Já existe uma cultura com este nome"

    def test_atualizar_mantendo_nome(self, service):
        dto = service.criar(CriarCulturaInputDTO(nome="Milho"))

        atualizado = service.atualizar(
            dto.id, AtualizarCulturaInputDTO(nome="Milho", descricao="Zea mays", ativo=False)
        )

        assert atualizado.descricao == "Zea mays"
        assert atualizado.ativo is False

    def test_atualizar_para_nome_existente(self, service):
        service.criar(CriarCulturaInputDTO(nome="Milho"))
        soja = service.criar(CriarCulturaInputDTO(nome="Soja"))

        with pytest.raises(BusinessRuleViolationError):
            service.atualizar(soja.id, AtualizarCulturaInputDTO(nome="Milho"))

    def test_listar_ativas(self, service):
        service.criar(CriarCulturaInputDTO(nome="Soja"))
        algodao = service.criar(CriarCulturaInputDTO(nome="Algodão"))
        service.atualizar(algodao.id, AtualizarCulturaInputDTO(nome="Algodão", ativo=False))

        assert [c.nome for c in service.listar()] == ["Algodão", "Soja"]
        assert [c.nome for c in service.listar_ativas()] == ["Soja"]

    def test_remover(self, service):
        dto = service.criar(CriarCulturaInputDTO(nome="Trigo"))
        service.remover(dto.id)

        with pytest.raises(EntityNotFoundError) as exc_info:
            service.obter_por_id(dto.id)

        assert exc_info.value.code == "ENTITY_NOT_FOUND"
