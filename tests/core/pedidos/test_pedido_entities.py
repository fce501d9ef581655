"""
Testes Unitários para Entidades do Domínio de Pedidos.

Coverage:
- Pedido: criação, itens, ciclo de vida, prazo limite, totais
- PedidoItem: cálculo de valores e validações
- PedidoItemTransporte: agendamento e quantidade disponível
- Proposta: factories por autor
"""

from datetime import datetime, timedelta
from decimal import Decimal

import pytest

from agriis.core.pedidos.entities import (
    AcaoCompradorPedido,
    Pedido,
    PedidoItem,
    PedidoItemTransporte,
    Proposta,
    StatusCarrinho,
    StatusPedido,
    TotaisPedido,
)
from agriis.core.shared.exceptions import BusinessRuleViolationError, ValidationError


def _pedido_com_item(quantidade=10, preco=100, desconto=0) -> Pedido:
    pedido = Pedido.criar(fornecedor_id=1, produtor_id=2)
    pedido.id = 1
    pedido.adicionar_item(PedidoItem.criar(1, 10, quantidade, preco, desconto))
    return pedido


class TestPedidoCriacao:

    def test_criar_pedido_valores_iniciais(self):
        antes = datetime.now()
        pedido = Pedido.criar(fornecedor_id=1, produtor_id=2, dias_limite_interacao=3)

        assert pedido.status == StatusPedido.EM_NEGOCIACAO
        assert pedido.status_carrinho == StatusCarrinho.EM_ABERTO
        assert pedido.quantidade_itens == 0
        assert pedido.itens == []
        assert antes + timedelta(days=3) <= pedido.data_limite_interacao
        assert pedido.data_limite_interacao <= datetime.now() + timedelta(days=3)

    def test_prazo_padrao_sete_dias(self):
        pedido = Pedido.criar(fornecedor_id=1, produtor_id=2)

        diferenca = pedido.data_limite_interacao - datetime.now()
        assert timedelta(days=6, hours=23) < diferenca <= timedelta(days=7)

    @pytest.mark.parametrize("dias", [0, -1])
    def test_dias_limite_invalido(self, dias):
        with pytest.raises(ValidationError) as exc_info:
            Pedido.criar(fornecedor_id=1, produtor_id=2, dias_limite_interacao=dias)

        assert exc_info.value.message == "Dias limite deve ser maior que zero"

    def test_ids_invalidos(self):
        with pytest.raises(ValidationError):
            Pedido.criar(fornecedor_id=0, produtor_id=2)
        with pytest.raises(ValidationError):
            Pedido.criar(fornecedor_id=1, produtor_id=-5)


class TestPedidoItens:

    def test_adicionar_item_atualiza_quantidade(self):
        pedido = _pedido_com_item()

        assert pedido.quantidade_itens == 1
        assert pedido.atualizado_em is not None

    def test_remover_item(self):
        pedido = _pedido_com_item()
        pedido.itens[0].id = 7

        assert pedido.remover_item(7) is True
        assert pedido.quantidade_itens == 0

    def test_remover_item_inexistente_retorna_false(self):
        pedido = _pedido_com_item()

        assert pedido.remover_item(999) is False
        assert pedido.quantidade_itens == 1

    def test_nao_adiciona_item_em_pedido_fechado(self):
        pedido = _pedido_com_item()
        pedido.fechar()

        with pytest.raises(BusinessRuleViolationError) as exc_info:
            pedido.adicionar_item(PedidoItem.criar(1, 11, 1, 10))

        assert exc_info.value.rule == "pedido_em_negociacao"


class TestPedidoCicloDeVida:

    def test_fechar_pedido(self):
        pedido = _pedido_com_item()
        pedido.fechar()

        assert pedido.status == StatusPedido.FECHADO
        assert pedido.status_carrinho == StatusCarrinho.FINALIZADO

    def test_fechar_pedido_sem_itens(self):
        pedido = Pedido.criar(fornecedor_id=1, produtor_id=2)

        with pytest.raises(BusinessRuleViolationError) as exc_info:
            pedido.fechar()

        assert exc_info.value.message == "Não é possível fechar um pedido sem itens"

    def test_fechar_pedido_cancelado(self):
        pedido = _pedido_com_item()
        pedido.cancelar_por_comprador()

        with pytest.raises(BusinessRuleViolationError) as exc_info:
            pedido.fechar()

        assert exc_info.value.message == "Apenas pedidos em negociação podem ser fechados"

    def test_cancelar_por_comprador(self):
        pedido = Pedido.criar(fornecedor_id=1, produtor_id=2)
        pedido.cancelar_por_comprador()

        assert pedido.status == StatusPedido.CANCELADO_PELO_COMPRADOR
        assert pedido.status.eh_terminal

    def test_cancelar_pedido_fechado(self):
        pedido = _pedido_com_item()
        pedido.fechar()

        with pytest.raises(BusinessRuleViolationError) as exc_info:
            pedido.cancelar_por_tempo_limite()

        assert exc_info.value.message == "Não é possível cancelar um pedido já fechado"

    def test_cancelar_duas_vezes(self):
        pedido = Pedido.criar(fornecedor_id=1, produtor_id=2)
        pedido.cancelar_por_tempo_limite()

        with pytest.raises(BusinessRuleViolationError) as exc_info:
            pedido.cancelar_por_comprador()

        assert exc_info.value.message == "Pedido já está cancelado"
        assert pedido.status == StatusPedido.CANCELADO_POR_TEMPO_LIMITE


class TestPedidoPrazoLimite:

    def test_dentro_do_prazo(self):
        pedido = Pedido.criar(fornecedor_id=1, produtor_id=2, dias_limite_interacao=1)

        assert pedido.esta_dentro_prazo_limite() is True
        assert pedido.esta_dentro_prazo_limite(datetime.now() + timedelta(days=2)) is False

    def test_limite_exato_ainda_esta_no_prazo(self):
        pedido = Pedido.criar(fornecedor_id=1, produtor_id=2)

        assert pedido.esta_dentro_prazo_limite(pedido.data_limite_interacao) is True

    def test_atualizar_prazo(self):
        pedido = Pedido.criar(fornecedor_id=1, produtor_id=2, dias_limite_interacao=1)
        pedido.atualizar_prazo_limite(10)

        assert pedido.data_limite_interacao > datetime.now() + timedelta(days=9)

    def test_atualizar_prazo_invalido(self):
        pedido = Pedido.criar(fornecedor_id=1, produtor_id=2)

        with pytest.raises(ValidationError):
            pedido.atualizar_prazo_limite(0)


class TestTotais:

    def test_recalcular_totais(self):
        pedido = _pedido_com_item(quantidade=10, preco=100, desconto=10)
        pedido.adicionar_item(PedidoItem.criar(1, 20, 2, 50))

        totais = pedido.recalcular_totais()

        assert totais.valor_bruto == Decimal("1100")
        assert totais.valor_desconto == Decimal("100")
        assert totais.valor_liquido == Decimal("1000")
        assert totais.quantidade_itens == 2
        assert pedido.totais["valor_liquido"] == 1000.0

    def test_totais_sem_itens(self):
        totais = TotaisPedido.de_itens([])

        assert totais.valor_liquido == Decimal("0")
        assert totais.percentual_desconto_medio == Decimal("0")


class TestPedidoItem:

    def test_calculo_de_valores(self):
        item = PedidoItem.criar(1, 10, Decimal("4"), Decimal("25"), Decimal("20"))

        assert item.valor_total == Decimal("100")
        assert item.valor_desconto == Decimal("20")
        assert item.valor_final == Decimal("80")

    def test_atualizar_quantidade_recalcula(self):
        item = PedidoItem.criar(1, 10, 1, 10)
        item.atualizar_quantidade(3)

        assert item.valor_final == Decimal("30")

    @pytest.mark.parametrize(
        "quantidade, preco, desconto, mensagem",
        [
            (0, 10, 0, "Quantidade deve ser maior que zero"),
            (1, -1, 0, "Preço unitário não pode ser negativo"),
            (1, 10, 101, "Percentual de desconto deve estar entre 0 e 100"),
            (1, 10, -1, "Percentual de desconto deve estar entre 0 e 100"),
        ],
    )
    def test_validacoes(self, quantidade, preco, desconto, mensagem):
        with pytest.raises(ValidationError) as exc_info:
            PedidoItem.criar(1, 10, quantidade, preco, desconto)

        assert exc_info.value.message == mensagem


class TestTransporte:

    def test_agendar_data_passada(self):
        transporte = PedidoItemTransporte.criar(quantidade=1)

        with pytest.raises(ValidationError) as exc_info:
            transporte.agendar(datetime.now() - timedelta(hours=1))

        assert exc_info.value.message == "Data de agendamento deve ser futura"

    def test_quantidade_disponivel(self):
        item = PedidoItem.criar(1, 10, 10, 5)
        item.adicionar_transporte(PedidoItemTransporte.criar(quantidade=6))

        assert item.quantidade_disponivel_transporte() == Decimal("4")

        with pytest.raises(BusinessRuleViolationError) as exc_info:
            item.adicionar_transporte(PedidoItemTransporte.criar(quantidade=5))

        assert exc_info.value.rule == "transporte_quantidade_disponivel"


class TestProposta:

    def test_proposta_do_produtor(self):
        proposta = Proposta.do_produtor(1, "Aceitou", 10)

        assert proposta.acao_comprador == AcaoCompradorPedido.ACEITOU
        assert proposta.eh_proposta_produtor()
        assert not proposta.eh_proposta_fornecedor()

    def test_proposta_do_produtor_sem_acao(self):
        with pytest.raises(ValidationError) as exc_info:
            Proposta.do_produtor(1, None, 10)

        assert exc_info.value.message == "Ação do comprador é obrigatória"

    def test_proposta_do_fornecedor(self):
        proposta = Proposta.do_fornecedor(1, "Frete incluso", 20)

        assert proposta.eh_proposta_fornecedor()
        assert proposta.acao_comprador is None

    @pytest.mark.parametrize("observacao", [None, "", "   "])
    def test_proposta_do_fornecedor_sem_observacao(self, observacao):
        with pytest.raises(ValidationError):
            Proposta.do_fornecedor(1, observacao, 20)

    def test_acao_aceita_nome_ou_valor(self):
        assert AcaoCompradorPedido.from_string("ALTEROU_CARRINHO") == AcaoCompradorPedido.ALTEROU_CARRINHO
        assert AcaoCompradorPedido.from_string("alteroucarrinho") == AcaoCompradorPedido.ALTEROU_CARRINHO

    def test_proposta_do_produtor_campos(self):
        proposta = Proposta.do_produtor(1, AcaoCompradorPedido.INICIOU, 10, "start")

        assert proposta.pedido_id == 1
        assert proposta.acao_comprador == AcaoCompradorPedido.INICIOU
        assert proposta.usuario_produtor_id == 10
        assert proposta.usuario_fornecedor_id is None
        assert proposta.observacao == "start"
        assert proposta.id is None

    @pytest.mark.parametrize("pedido_id", [0, -1])
    def test_pedido_id_nao_positivo(self, pedido_id):
        with pytest.raises(ValidationError) as produtor_exc:
            Proposta.do_produtor(pedido_id, AcaoCompradorPedido.INICIOU, 10)
        with pytest.raises(ValidationError) as fornecedor_exc:
            Proposta.do_fornecedor(pedido_id, "Frete incluso", 20)

        assert produtor_exc.value.field == "pedido_id"
        assert fornecedor_exc.value.field == "pedido_id"

    @pytest.mark.parametrize("usuario_id", [0, -3, None])
    def test_usuario_nao_positivo(self, usuario_id):
        with pytest.raises(ValidationError) as produtor_exc:
            Proposta.do_produtor(1, AcaoCompradorPedido.ACEITOU, usuario_id)
        with pytest.raises(ValidationError) as fornecedor_exc:
            Proposta.do_fornecedor(1, "Frete incluso", usuario_id)

        assert produtor_exc.value.field == "usuario_produtor_id"
        assert fornecedor_exc.value.field == "usuario_fornecedor_id"

    @pytest.mark.parametrize("pedido_id", ["1", 1.0, True])
    def test_pedido_id_de_outro_tipo(self, pedido_id):
        with pytest.raises(ValidationError) as exc_info:
            Proposta.do_produtor(pedido_id, AcaoCompradorPedido.INICIOU, 10)

        assert exc_info.value.message == "ID do pedido deve ser maior que zero"
