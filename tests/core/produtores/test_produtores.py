"""
Testes do domínio de Produtores (entidade, value objects e service).
"""

from decimal import Decimal

import pytest

from agriis.core.culturas.entities import Cultura
from agriis.core.produtores.dtos import (
    AtualizarProdutorInputDTO,
    CriarProdutorInputDTO,
    ListarProdutoresQueryDTO,
)
from agriis.core.produtores.entities import Produtor, StatusProdutor, TipoAtividadeAgropecuaria
from agriis.core.produtores.events import ProdutorCriadoEvent, ProdutorStatusAlteradoEvent
from agriis.core.produtores.use_cases import ProdutorService
from agriis.core.shared.exceptions import (
    BusinessRuleViolationError,
    EntityNotFoundError,
    ValidationError,
)
from agriis.core.shared.value_objects import AreaPlantio, Cnpj, Cpf

CPF = "529.982.247-25"
OUTRO_CPF = "111.444.777-35"
CNPJ = "11.444.777/0001-61"


@pytest.fixture
def soja(cultura_repo):
    return cultura_repo.save(Cultura.criar("Soja"))


@pytest.fixture
def service(produtor_repo, cultura_repo, uow):
    return ProdutorService(produtor_repo, cultura_repo, uow)


class TestValueObjects:

    @pytest.mark.parametrize("valor", [CPF, "52998224725", OUTRO_CPF])
    def test_cpf_valido(self, valor):
        assert len(Cpf.criar(valor).valor) == 11

    @pytest.mark.parametrize("valor", ["529.982.247-26", "111.111.111-11", "123"])
    def test_cpf_invalido(self, valor):
        with pytest.raises(ValidationError) as exc_info:
            Cpf.criar(valor)

        assert exc_info.value.message == "CPF inválido"

    def test_cnpj_formatado(self):
        assert Cnpj.criar("11444777000161").valor_formatado == CNPJ

    def test_cnpj_invalido(self):
        with pytest.raises(ValidationError):
            Cnpj.criar("11.444.777/0001-62")

    def test_area_quantizada(self):
        area = AreaPlantio.criar(150.5)

        assert area.valor == Decimal("150.5000")
        assert area.valor_formatado == "150.50 ha"
        assert (area + AreaPlantio.criar(10)).valor == Decimal("160.5")

    @pytest.mark.parametrize("valor", [-1, 1000001])
    def test_area_fora_dos_limites(self, valor):
        with pytest.raises(ValidationError):
            AreaPlantio.criar(valor)

    def test_area_de_alqueires(self):
        assert AreaPlantio.de_alqueires_paulistas(10).valor == Decimal("24.2")


class TestProdutorEntidade:

    def test_criar_pessoa_fisica(self):
        produtor = Produtor.criar(nome="  João  ", cpf=CPF)

        assert produtor.nome == "João"
        assert produtor.cpf == "52998224725"
        assert produtor.status == StatusProdutor.PENDENTE_VALIDACAO_AUTOMATICA
        assert produtor.eh_pessoa_fisica()
        assert produtor.documento_principal == CPF

    def test_documento_obrigatorio(self):
        with pytest.raises(ValidationError) as exc_info:
            Produtor.criar(nome="João")

        assert exc_info.value.message == "CPF ou CNPJ deve ser informado"

    def test_autorizacao_registra_data(self):
        produtor = Produtor.criar(nome="João", cnpj=CNPJ)

        anterior = produtor.atualizar_status(StatusProdutor.AUTORIZADO_MANUALMENTE, 7)

        assert anterior == StatusProdutor.PENDENTE_VALIDACAO_AUTOMATICA
        assert produtor.esta_autorizado()
        assert produtor.data_autorizacao is not None
        assert produtor.usuario_autorizacao_id == 7

    def test_culturas_sem_duplicidade(self):
        produtor = Produtor.criar(nome="João", cpf=CPF)
        produtor.adicionar_cultura(1)
        produtor.adicionar_cultura(1)

        assert produtor.culturas == [1]

        with pytest.raises(ValidationError):
            produtor.adicionar_cultura(0)

    def test_tipo_atividade_from_string(self):
        assert TipoAtividadeAgropecuaria.from_string("pecuaria") == TipoAtividadeAgropecuaria.PECUARIA

        with pytest.raises(ValidationError):
            TipoAtividadeAgropecuaria.from_string("Pesca")

    def test_status_from_string(self):
        assert StatusProdutor.from_string("AutorizadoManualmente").eh_autorizado
        assert StatusProdutor.from_string("NEGADO") == StatusProdutor.NEGADO


class TestProdutorService:

    def test_criar(self, service, uow, soja):
        dto = service.criar(CriarProdutorInputDTO(
            nome="Fazenda Boa Vista",
            cpf=CPF,
            tipo_atividade="Agricultura",
            area_plantio=Decimal("350"),
            culturas=(soja.id,),
        ))

        assert dto.id is not None
        assert dto.culturas == [soja.id]
        assert dto.tipo_atividade == "Agricultura"
        assert dto.esta_autorizado is False
        assert uow.events_of(ProdutorCriadoEvent)[0].documento == CPF

    def test_documento_duplicado(self, service):
        service.criar(CriarProdutorInputDTO(nome="A", cpf=CPF))

        with pytest.raises(BusinessRuleViolationError) as exc_info:
            service.criar(CriarProdutorInputDTO(nome="B", cpf="52998224725"))

        assert exc_info.value.message == "Já existe um produtor com este documento"

    def test_cultura_inexistente(self, service, uow):
        with pytest.raises(EntityNotFoundError):
            service.criar(CriarProdutorInputDTO(nome="A", cpf=CPF, culturas=(99,)))

        assert uow.rolled_back

    def test_atualizar(self, service):
        criado = service.criar(CriarProdutorInputDTO(nome="A", cpf=CPF))

        dto = service.atualizar(criado.id, AtualizarProdutorInputDTO(
            nome="Agropecuária A", tipo_atividade="MISTA", area_plantio=Decimal("12.5"),
        ))

        assert dto.nome == "Agropecuária A"
        assert dto.tipo_atividade == "Mista"
        assert dto.area_plantio == Decimal("12.5")

    def test_obter_por_documento(self, service):
        criado = service.criar(CriarProdutorInputDTO(nome="A", cnpj=CNPJ))

        assert service.obter_por_documento(CNPJ).id == criado.id
        assert service.obter_por_documento(OUTRO_CPF) is None

        with pytest.raises(ValidationError):
            service.obter_por_documento("   ")

    def test_autorizar_e_negar(self, service, uow):
        criado = service.criar(CriarProdutorInputDTO(nome="A", cpf=CPF))

        assert service.autorizar(criado.id, usuario_id=3).esta_autorizado
        negado = service.negar(criado.id, usuario_id=3)

        assert negado.status == "Negado"
        eventos = uow.events_of(ProdutorStatusAlteradoEvent)
        assert [(e.status_anterior, e.status_novo) for e in eventos] == [
            ("PendenteValidacaoAutomatica", "AutorizadoManualmente"),
            ("AutorizadoManualmente", "Negado"),
        ]

    def test_listar_por_status_e_busca(self, service):
        a = service.criar(CriarProdutorInputDTO(nome="Alfa", cpf=CPF))
        service.criar(CriarProdutorInputDTO(nome="Beta", cpf=OUTRO_CPF))
        service.autorizar(a.id, usuario_id=1)

        autorizados = service.listar(ListarProdutoresQueryDTO(status="AutorizadoManualmente"))
        busca = service.listar(ListarProdutoresQueryDTO(busca="bet"))

        assert [p.nome for p in autorizados.items] == ["Alfa"]
        assert [p.nome for p in busca.items] == ["Beta"]

    def test_culturas(self, service, soja):
        criado = service.criar(CriarProdutorInputDTO(nome="A", cpf=CPF))

        assert service.adicionar_cultura(criado.id, soja.id).culturas == [soja.id]
        assert service.remover_cultura(criado.id, soja.id).culturas == []

        with pytest.raises(EntityNotFoundError):
            service.adicionar_cultura(criado.id, 99)

    def test_remover(self, service):
        criado = service.criar(CriarProdutorInputDTO(nome="A", cpf=CPF))
        service.remover(criado.id)

        with pytest.raises(EntityNotFoundError):
            service.obter_por_id(criado.id)
