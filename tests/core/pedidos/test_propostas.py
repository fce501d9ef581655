"""
Testes do protocolo de negociação (PropostaService).

Fluxos:
- Produtor (PRODUTOR_MOBILE): Iniciou -> AlterouCarrinho -> Aceitou/Cancelou
- Fornecedor (FORNECEDOR_WEB): observação obrigatória
- Pedidos fechados/cancelados rejeitam novas propostas
"""

from decimal import Decimal

import pytest

from agriis.core.pedidos.dtos import AdicionarItemCarrinhoInputDTO, CriarPedidoInputDTO, CriarPropostaInputDTO
from agriis.core.pedidos.entities import AcaoCompradorPedido, StatusPedido
from agriis.core.pedidos.events import (
    PedidoCanceladoPeloCompradorEvent,
    PedidoFechadoEvent,
    PropostaCriadaEvent,
)
from agriis.core.pedidos.use_cases import FORNECEDOR_WEB, PRODUTOR_MOBILE

USUARIO_PRODUTOR = 10
USUARIO_FORNECEDOR = 20


@pytest.fixture
def pedido(pedido_service, produtor, catalogo):
    criado = pedido_service.criar(
        CriarPedidoInputDTO(fornecedor_id=1, produtor_id=produtor.id)
    ).value
    pedido_service.adicionar_item_carrinho(
        criado.id, AdicionarItemCarrinhoInputDTO(produto_id=10, quantidade=Decimal("2"))
    )
    return criado


def _produtor(service, pedido_id, acao=None, observacao=None):
    return service.criar_proposta(
        pedido_id, USUARIO_PRODUTOR, PRODUTOR_MOBILE,
        CriarPropostaInputDTO(acao_comprador=acao, observacao=observacao),
    )


def _fornecedor(service, pedido_id, observacao=None):
    return service.criar_proposta(
        pedido_id, USUARIO_FORNECEDOR, FORNECEDOR_WEB,
        CriarPropostaInputDTO(observacao=observacao),
    )


class TestFluxoProdutor:

    def test_primeira_proposta_sempre_inicia(self, proposta_service, pedido):
        result = _produtor(proposta_service, pedido.id, acao="Aceitou")

        assert result.is_success
        assert result.value.acao_comprador == "Iniciou"
        assert result.value.observacao == "Iniciou a negociação"
        assert result.value.usuario_produtor_id == USUARIO_PRODUTOR

    def test_acao_obrigatoria_apos_inicio(self, proposta_service, pedido):
        _produtor(proposta_service, pedido.id)

        result = _produtor(proposta_service, pedido.id)

        assert result.is_failure
        assert result.error == "Informar uma ação."
        assert result.error_code == "ACAO_OBRIGATORIA"

    def test_aceitou_fecha_pedido(self, proposta_service, pedido_repo, uow, pedido):
        _produtor(proposta_service, pedido.id)

        result = _produtor(proposta_service, pedido.id, acao="Aceitou")

        assert result.value.acao_comprador == "Aceitou"
        entidade = pedido_repo.get_by_id(pedido.id)
        assert entidade.status == StatusPedido.FECHADO
        assert entidade.totais["valor_liquido"] == 240.0
        assert len(uow.events_of(PedidoFechadoEvent)) == 1

    def test_cancelou_cancela_pedido(self, proposta_service, pedido_repo, uow, pedido):
        _produtor(proposta_service, pedido.id)

        result = _produtor(proposta_service, pedido.id, acao="Cancelou", observacao="Desisti")

        assert result.value.observacao == "Desisti"
        assert pedido_repo.get_by_id(pedido.id).status == StatusPedido.CANCELADO_PELO_COMPRADOR
        assert len(uow.events_of(PedidoCanceladoPeloCompradorEvent)) == 1

    def test_acao_repetida_retorna_ultima_sem_duplicar(self, proposta_service, proposta_repo, pedido):
        _produtor(proposta_service, pedido.id)
        primeira = _produtor(proposta_service, pedido.id, acao="AlterouCarrinho").value

        repetida = _produtor(proposta_service, pedido.id, acao="ALTEROU_CARRINHO").value

        assert repetida.id == primeira.id
        assert proposta_repo.list_por_pedido(pedido.id, _params()).total == 2

    def test_aceitar_pedido_sem_itens_falha(
        self, pedido_service, proposta_service, pedido_repo, produtor
    ):
        vazio = pedido_service.criar(
            CriarPedidoInputDTO(fornecedor_id=1, produtor_id=produtor.id)
        ).value
        _produtor(proposta_service, vazio.id)

        result = _produtor(proposta_service, vazio.id, acao="Aceitou")

        assert result.is_failure
        assert result.error == "Não é possível fechar um pedido sem itens"
        assert pedido_repo.get_by_id(vazio.id).status == StatusPedido.EM_NEGOCIACAO

    def test_proposta_publica_evento(self, proposta_service, uow, pedido):
        result = _produtor(proposta_service, pedido.id)

        evento = uow.events_of(PropostaCriadaEvent)[-1]
        assert evento.aggregate_id == result.value.id
        assert evento.autor == "produtor"
        assert evento.acao_comprador == "Iniciou"


class TestFluxoFornecedor:

    def test_observacao_obrigatoria(self, proposta_service, pedido):
        result = _fornecedor(proposta_service, pedido.id, observacao="  ")

        assert result.error == "Informar uma observação"
        assert result.error_code == "OBSERVACAO_OBRIGATORIA"

    def test_proposta_do_fornecedor(self, proposta_service, pedido):
        result = _fornecedor(proposta_service, pedido.id, observacao="Posso dar 3% à vista")

        assert result.is_success
        assert result.value.usuario_fornecedor_id == USUARIO_FORNECEDOR
        assert result.value.usuario_produtor_id is None
        assert result.value.acao_comprador is None


class TestPedidoEncerrado:

    def test_pedido_inexistente(self, proposta_service):
        result = _produtor(proposta_service, 999)

        assert result.error == "O pedido não pode ser encontrado"
        assert result.error_code == "PEDIDO_NAO_ENCONTRADO"

    @pytest.mark.parametrize("client", [PRODUTOR_MOBILE, FORNECEDOR_WEB])
    def test_pedido_cancelado(self, proposta_service, pedido_service, pedido, client):
        pedido_service.cancelar_por_comprador(pedido.id)

        result = proposta_service.criar_proposta(
            pedido.id, 1, client, CriarPropostaInputDTO(acao_comprador="Aceitou", observacao="x")
        )

        assert result.error == (
            "Não é possível continuar com a proposta, pois este pedido encontra-se cancelado."
        )
        assert result.error_code == "PEDIDO_CANCELADO"

    def test_pedido_fechado(self, proposta_service, pedido_service, pedido):
        pedido_service.fechar(pedido.id)

        result = _fornecedor(proposta_service, pedido.id, observacao="Ainda dá?")

        assert result.error == (
            "Não é possível continuar com a proposta, pois este pedido encontra-se negociado."
        )
        assert result.error_code == "PEDIDO_FECHADO"

    def test_cliente_desconhecido(self, proposta_service, pedido):
        result = proposta_service.criar_proposta(
            pedido.id, 1, "ADMIN_WEB", CriarPropostaInputDTO(observacao="oi")
        )

        assert result.error == "Tipo de cliente não implementado: ADMIN_WEB"
        assert result.error_code == "CLIENTE_NAO_SUPORTADO"


class TestConsultaPropostas:

    def test_listar_mais_recentes_primeiro(self, proposta_service, pedido):
        _produtor(proposta_service, pedido.id)
        _fornecedor(proposta_service, pedido.id, observacao="Contraproposta")
        _produtor(proposta_service, pedido.id, acao="AlterouCarrinho")

        pagina = proposta_service.listar_propostas(pedido.id, pagina=1, por_pagina=2).value

        assert pagina.total == 3
        assert len(pagina.items) == 2
        assert pagina.items[0].acao_comprador == "AlterouCarrinho"
        assert pagina.items[1].usuario_fornecedor_id == USUARIO_FORNECEDOR

    def test_listar_pedido_inexistente(self, proposta_service):
        result = proposta_service.listar_propostas(999)

        assert result.error_code == "PEDIDO_NAO_ENCONTRADO"

    def test_obter_ultima_proposta(self, proposta_service, pedido):
        assert proposta_service.obter_ultima_proposta(pedido.id).value is None

        _produtor(proposta_service, pedido.id)

        ultima = proposta_service.obter_ultima_proposta(pedido.id).value
        assert ultima.acao_comprador == AcaoCompradorPedido.INICIOU.value


def _params():
    from agriis.core.shared.dtos import PaginacaoParams
    return PaginacaoParams.criar(1, 50)
