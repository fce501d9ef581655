"""Testes do job que cancela pedidos com prazo limite ultrapassado."""

from datetime import datetime, timedelta

import pytest

from agriis.core.pedidos.entities import Pedido, StatusPedido
from agriis.core.pedidos.events import PedidoCanceladoPorTempoLimiteEvent
from agriis.core.pedidos.use_cases import CancelarPedidosComPrazoUltrapassadoService


@pytest.fixture
def job(pedido_repo, uow):
    return CancelarPedidosComPrazoUltrapassadoService(pedido_repo, uow)


def _salvar(pedido_repo, dias_atras=0, status=None) -> Pedido:
    pedido = Pedido.criar(fornecedor_id=1, produtor_id=2, dias_limite_interacao=1)
    pedido.data_limite_interacao = datetime.now() - timedelta(days=dias_atras)
    if status == StatusPedido.FECHADO:
        pedido.status = StatusPedido.FECHADO
    return pedido_repo.save(pedido)


def test_cancela_somente_vencidos(job, pedido_repo, uow):
    vencido = _salvar(pedido_repo, dias_atras=2)
    no_prazo = pedido_repo.save(Pedido.criar(fornecedor_id=1, produtor_id=3))

    cancelados = job.execute()

    assert cancelados == 1
    assert pedido_repo.get_by_id(vencido.id).status == StatusPedido.CANCELADO_POR_TEMPO_LIMITE
    assert pedido_repo.get_by_id(no_prazo.id).status == StatusPedido.EM_NEGOCIACAO

    eventos = uow.events_of(PedidoCanceladoPorTempoLimiteEvent)
    assert [e.aggregate_id for e in eventos] == [vencido.id]
    assert eventos[0].produtor_id == 2


def test_ignora_pedidos_fechados(job, pedido_repo):
    fechado = _salvar(pedido_repo, dias_atras=5, status=StatusPedido.FECHADO)

    assert job.execute() == 0
    assert pedido_repo.get_by_id(fechado.id).status == StatusPedido.FECHADO


def test_usa_instante_informado(job, pedido_repo):
    pedido = pedido_repo.save(Pedido.criar(fornecedor_id=1, produtor_id=2, dias_limite_interacao=3))

    assert job.execute(agora=datetime.now() + timedelta(days=2)) == 0
    assert job.execute(agora=datetime.now() + timedelta(days=4)) == 1
    assert pedido_repo.get_by_id(pedido.id).status.eh_cancelado


def test_nada_a_cancelar(job, uow):
    assert job.execute() == 0
    assert uow.collect_events() == []
