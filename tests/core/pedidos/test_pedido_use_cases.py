"""
Testes Unitários para PedidoService e CarrinhoComprasService.

Estratégia:
- Repositórios em memória e FakeUnitOfWork (tests/conftest.py)
- Operações retornam Result: verifica-se is_success/error/error_code
"""

from datetime import datetime, timedelta
from decimal import Decimal

import pytest

from agriis.core.pedidos.dtos import (
    AdicionarItemCarrinhoInputDTO,
    AgendarTransporteInputDTO,
    AtualizarPedidoInputDTO,
    CriarPedidoInputDTO,
)
from agriis.core.pedidos.entities import AcaoCompradorPedido, Proposta, StatusPedido
from agriis.core.pedidos.events import PedidoCriadoEvent, PedidoFechadoEvent


@pytest.fixture
def pedido(pedido_service, produtor):
    result = pedido_service.criar(CriarPedidoInputDTO(fornecedor_id=1, produtor_id=produtor.id))
    assert result.is_success
    return result.value


def _item(produto_id=10, quantidade="5", **kwargs):
    return AdicionarItemCarrinhoInputDTO(
        produto_id=produto_id, quantidade=Decimal(quantidade), **kwargs
    )


class TestCriarPedido:

    def test_criar_pedido_sucesso(self, pedido_service, pedido_repo, uow, produtor):
        result = pedido_service.criar(CriarPedidoInputDTO(
            fornecedor_id=1, produtor_id=produtor.id, permite_contato=True,
        ))

        assert result.is_success
        assert result.value.status == "EmNegociacao"
        assert result.value.status_carrinho == "EmAberto"
        assert result.value.permite_contato is True
        assert pedido_repo.get_by_id(result.value.id) is not None
        assert uow.committed

    def test_criar_pedido_publica_evento(self, pedido_service, uow, produtor):
        result = pedido_service.criar(CriarPedidoInputDTO(fornecedor_id=1, produtor_id=produtor.id))

        eventos = uow.events_of(PedidoCriadoEvent)
        assert len(eventos) == 1
        assert eventos[0].aggregate_id == result.value.id
        assert eventos[0].produtor_id == produtor.id

    def test_criar_pedido_usa_dias_padrao_do_service(
        self, pedido_repo, proposta_repo, fornecedor_repo, produtor_repo,
        carrinho_service, uow, fornecedor, produtor,
    ):
        from agriis.core.pedidos.use_cases import PedidoService

        service = PedidoService(
            pedido_repo, proposta_repo, fornecedor_repo, produtor_repo,
            carrinho_service, uow, dias_limite_padrao=2,
        )
        result = service.criar(CriarPedidoInputDTO(fornecedor_id=1, produtor_id=produtor.id))

        assert result.value.data_limite_interacao < datetime.now() + timedelta(days=2, minutes=1)

    def test_criar_pedido_dias_invalidos(self, pedido_service, produtor):
        result = pedido_service.criar(CriarPedidoInputDTO(
            fornecedor_id=1, produtor_id=produtor.id, dias_limite_interacao=-1,
        ))

        assert result.is_failure
        assert result.error == "Dias limite deve ser maior que zero"
        assert "dias_limite_interacao" in result.validation_errors

    @pytest.mark.parametrize("fornecedor_id, produtor_existe, mensagem", [
        (99, True, "Fornecedor não encontrado"),
        (1, False, "Produtor não encontrado"),
    ])
    def test_criar_pedido_participante_inexistente(
        self, pedido_service, pedido_repo, uow, produtor, fornecedor_id, produtor_existe, mensagem
    ):
        produtor_id = produtor.id if produtor_existe else produtor.id + 100

        result = pedido_service.criar(CriarPedidoInputDTO(
            fornecedor_id=fornecedor_id, produtor_id=produtor_id,
        ))

        assert result.is_failure
        assert result.error == mensagem
        assert result.error_code == "ENTITY_NOT_FOUND"
        assert pedido_repo.list_por_produtor(produtor_id) == []
        assert uow.events_of(PedidoCriadoEvent) == []


class TestConsultas:

    def test_obter_por_id_inexistente(self, pedido_service):
        result = pedido_service.obter_por_id(999)

        assert result.is_failure
        assert result.error_code == "ENTITY_NOT_FOUND"

    def test_listar_por_produtor_e_fornecedor(self, pedido_service, pedido, produtor):
        assert [p.id for p in pedido_service.listar_por_produtor(produtor.id).value] == [pedido.id]
        assert [p.id for p in pedido_service.listar_por_fornecedor(1).value] == [pedido.id]
        assert pedido_service.listar_por_fornecedor(2).value == []

    def test_listar_por_status(self, pedido_service, pedido):
        assert len(pedido_service.listar_por_status("EmNegociacao").value) == 1
        assert pedido_service.listar_por_status("FECHADO").value == []

    def test_listar_por_status_invalido(self, pedido_service):
        result = pedido_service.listar_por_status("Arquivado")

        assert result.is_failure

    def test_listar_proximos_prazo_limite(self, pedido_service, pedido_repo, pedido):
        assert pedido_service.listar_proximos_prazo_limite(dias_antes=1).value == []

        entidade = pedido_repo.get_by_id(pedido.id)
        entidade.data_limite_interacao = datetime.now() + timedelta(hours=5)

        resultado = pedido_service.listar_proximos_prazo_limite(dias_antes=1).value
        assert [p.id for p in resultado] == [pedido.id]

    def test_listar_com_prazo_ultrapassado(self, pedido_service, pedido_repo, pedido):
        pedido_repo.get_by_id(pedido.id).data_limite_interacao = datetime.now() - timedelta(hours=1)

        resultado = pedido_service.listar_com_prazo_ultrapassado().value
        assert [p.id for p in resultado] == [pedido.id]


class TestCarrinho:

    def test_adicionar_item_preco_padrao(self, pedido_service, pedido, catalogo):
        result = pedido_service.adicionar_item_carrinho(pedido.id, _item(quantidade="5"))

        assert result.is_success
        item = result.value.itens[0]
        assert item["preco_unitario"] == 120.0
        assert item["valor_final"] == 600.0
        assert item["dados_adicionais"]["catalogo_id"] == catalogo.id
        assert result.value.totais["valor_liquido"] == 600.0

    def test_adicionar_item_preco_por_uf(self, pedido_service, pedido, catalogo):
        result = pedido_service.adicionar_item_carrinho(pedido.id, _item(uf="mt"))

        assert result.value.itens[0]["preco_unitario"] == 100.0

    def test_adicionar_item_com_catalogo_explicito(self, pedido_service, pedido, catalogo):
        result = pedido_service.adicionar_item_carrinho(
            pedido.id, _item(produto_id=20, catalogo_id=catalogo.id)
        )

        assert result.value.itens[0]["preco_unitario"] == 50.0

    def test_adicionar_produto_existente_soma_quantidade(self, pedido_service, pedido, catalogo):
        pedido_service.adicionar_item_carrinho(pedido.id, _item(quantidade="5"))
        result = pedido_service.adicionar_item_carrinho(pedido.id, _item(quantidade="3"))

        assert result.value.quantidade_itens == 1
        assert result.value.itens[0]["quantidade"] == 8.0

    def test_adicionar_produto_fora_de_catalogo(self, pedido_service, pedido, catalogo):
        result = pedido_service.adicionar_item_carrinho(pedido.id, _item(produto_id=99))

        assert result.is_failure
        assert result.error == "Produto 99 não encontrado em catálogo vigente"
        assert result.error_code == "ENTITY_NOT_FOUND"

    def test_adicionar_produto_sem_preco(self, pedido_service, pedido, catalogo):
        from agriis.core.catalogos.entities import CatalogoItem

        catalogo.adicionar_item(CatalogoItem.criar(
            produto_id=30, estrutura_precos={"estados": {"GO": 90}},
        ))
        result = pedido_service.adicionar_item_carrinho(pedido.id, _item(produto_id=30, uf="MT"))

        assert result.is_failure
        assert result.error == "Preço não encontrado para o produto 30 no catálogo"

    def test_desconto_segmentado_aplicado(self, pedido_service, pedido, catalogo, segmentacao):
        result = pedido_service.adicionar_item_carrinho(pedido.id, _item(quantidade="10"))

        item = result.value.itens[0]
        assert item["percentual_desconto"] == 5.0
        assert item["valor_total"] == 1200.0
        assert item["valor_final"] == 1140.0
        assert item["dados_adicionais"]["segmentacao_aplicada"] == "Porte"
        assert item["dados_adicionais"]["grupo_aplicado"] == "Pequeno"
        assert item["dados_adicionais"]["area_produtor"] == 80.0

    def test_alteracao_com_usuario_registra_proposta(
        self, pedido_service, pedido, catalogo, proposta_repo
    ):
        proposta_repo.save(Proposta.do_produtor(pedido.id, AcaoCompradorPedido.INICIOU, 7))

        pedido_service.adicionar_item_carrinho(pedido.id, _item(), usuario_id=7)

        ultima = proposta_repo.get_ultima_por_pedido(pedido.id)
        assert ultima.acao_comprador == AcaoCompradorPedido.ALTEROU_CARRINHO
        assert ultima.usuario_produtor_id == 7

    def test_alteracao_antes_da_negociacao_nao_registra_proposta(
        self, pedido_service, proposta_service, pedido, catalogo, proposta_repo
    ):
        from agriis.core.pedidos.dtos import CriarPropostaInputDTO
        from agriis.core.pedidos.use_cases import PRODUTOR_MOBILE

        pedido_service.adicionar_item_carrinho(pedido.id, _item(), usuario_id=10)
        assert proposta_repo.get_ultima_por_pedido(pedido.id) is None

        result = proposta_service.criar_proposta(
            pedido.id, 10, PRODUTOR_MOBILE, CriarPropostaInputDTO()
        )

        assert result.is_success
        assert result.value.acao_comprador == "Iniciou"

    def test_alteracao_sem_usuario_nao_registra_proposta(
        self, pedido_service, pedido, catalogo, proposta_repo
    ):
        pedido_service.adicionar_item_carrinho(pedido.id, _item())

        assert proposta_repo.get_ultima_por_pedido(pedido.id) is None

    def test_atualizar_quantidade_item(self, pedido_service, pedido, catalogo):
        adicionado = pedido_service.adicionar_item_carrinho(pedido.id, _item()).value
        item_id = adicionado.itens[0]["id"]

        result = pedido_service.atualizar_quantidade_item(pedido.id, item_id, Decimal("2"))

        assert result.value.itens[0]["quantidade"] == 2.0
        assert result.value.totais["valor_liquido"] == 240.0

    def test_remover_item(self, pedido_service, pedido, catalogo):
        adicionado = pedido_service.adicionar_item_carrinho(pedido.id, _item()).value

        result = pedido_service.remover_item_carrinho(pedido.id, adicionado.itens[0]["id"])

        assert result.value.quantidade_itens == 0
        assert result.value.totais["valor_liquido"] == 0.0

    def test_remover_item_inexistente(self, pedido_service, pedido):
        result = pedido_service.remover_item_carrinho(pedido.id, 999)

        assert result.error == "Item não encontrado no pedido"

    def test_carrinho_fora_do_prazo(self, pedido_service, pedido_repo, pedido, catalogo):
        pedido_repo.get_by_id(pedido.id).data_limite_interacao = datetime.now() - timedelta(minutes=1)

        result = pedido_service.adicionar_item_carrinho(pedido.id, _item())

        assert result.is_failure
        assert result.error == "Pedido fora do prazo limite para modificações"

    def test_carrinho_pedido_fechado(self, pedido_service, pedido, catalogo):
        pedido_service.adicionar_item_carrinho(pedido.id, _item())
        pedido_service.fechar(pedido.id)

        result = pedido_service.adicionar_item_carrinho(pedido.id, _item(produto_id=20))

        assert result.is_failure
        assert result.error_code == "BUSINESS_RULE_VIOLATION"


class TestCicloDeVida:

    def test_atualizar_preferencias(self, pedido_service, pedido):
        result = pedido_service.atualizar(pedido.id, AtualizarPedidoInputDTO(True, True))

        assert result.value.permite_contato is True
        assert result.value.negociar_pedido is True

    def test_fechar_pedido(self, pedido_service, pedido, catalogo, uow):
        pedido_service.adicionar_item_carrinho(pedido.id, _item())

        result = pedido_service.fechar(pedido.id)

        assert result.value.status == "Fechado"
        evento = uow.events_of(PedidoFechadoEvent)[0]
        assert evento.valor_liquido == 600.0

    def test_fechar_pedido_vazio(self, pedido_service, pedido, uow):
        result = pedido_service.fechar(pedido.id)

        assert result.error == "Não é possível fechar um pedido sem itens"
        assert uow.rolled_back
        assert uow.events_of(PedidoFechadoEvent) == []

    def test_cancelar_por_comprador(self, pedido_service, pedido_repo, pedido):
        result = pedido_service.cancelar_por_comprador(pedido.id)

        assert result.value.status == "CanceladoPeloComprador"
        assert pedido_repo.get_by_id(pedido.id).status == StatusPedido.CANCELADO_PELO_COMPRADOR

    def test_atualizar_prazo_limite(self, pedido_service, pedido):
        result = pedido_service.atualizar_prazo_limite(pedido.id, 30)

        assert result.value.data_limite_interacao > datetime.now() + timedelta(days=29)

    def test_atualizar_prazo_pedido_cancelado(self, pedido_service, pedido):
        pedido_service.cancelar_por_comprador(pedido.id)

        result = pedido_service.atualizar_prazo_limite(pedido.id, 30)

        assert result.error == "Prazo só pode ser alterado em pedidos em negociação"

    def test_recalcular_totais(self, pedido_service, pedido, catalogo):
        pedido_service.adicionar_item_carrinho(pedido.id, _item(quantidade="2"))

        result = pedido_service.recalcular_totais(pedido.id)

        assert result.value.valor_bruto == Decimal("240")
        assert result.value.quantidade_itens == 1


class TestAgendarTransporte:

    def test_agendar_transporte(self, pedido_service, pedido, catalogo):
        item_id = pedido_service.adicionar_item_carrinho(pedido.id, _item()).value.itens[0]["id"]

        result = pedido_service.agendar_transporte(pedido.id, item_id, AgendarTransporteInputDTO(
            quantidade=Decimal("2"),
            data_agendamento=datetime.now() + timedelta(days=3),
            valor_frete=Decimal("150"),
            endereco_destino="Sorriso - MT",
        ))

        transportes = result.value.itens[0]["transportes"]
        assert len(transportes) == 1
        assert transportes[0]["id"] is not None
        assert transportes[0]["valor_frete"] == 150.0

    def test_agendar_transporte_excedendo_quantidade(self, pedido_service, pedido, catalogo):
        item_id = pedido_service.adicionar_item_carrinho(pedido.id, _item()).value.itens[0]["id"]

        result = pedido_service.agendar_transporte(pedido.id, item_id, AgendarTransporteInputDTO(
            quantidade=Decimal("6"),
            data_agendamento=datetime.now() + timedelta(days=3),
        ))

        assert result.is_failure
        assert result.error == "Quantidade solicitada (6) excede a disponível (5)"

    def test_agendar_transporte_item_inexistente(self, pedido_service, pedido):
        result = pedido_service.agendar_transporte(pedido.id, 42, AgendarTransporteInputDTO(
            quantidade=Decimal("1"),
            data_agendamento=datetime.now() + timedelta(days=1),
        ))

        assert result.error == "Item não encontrado no pedido"
