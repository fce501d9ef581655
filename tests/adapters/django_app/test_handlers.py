"""
Testes de eventos: handlers Celery, publishers e Unit of Work.

Handlers são chamados diretamente (sem broker); as tasks encadeadas
são substituídas por mocks.
"""

from unittest.mock import Mock, patch

import pytest

from agriis.adapters.django_app.events import handlers
from agriis.adapters.django_app.events.publishers import (
    CeleryEventPublisher,
    CompositeEventPublisher,
    InMemoryEventPublisher,
    LoggingEventPublisher,
    get_event_publisher,
)
from agriis.adapters.django_app.shared.unit_of_work import InMemoryUnitOfWork
from agriis.core.combos.events import ComboExpiradoEvent
from agriis.core.pedidos.events import (
    PedidoCriadoEvent,
    PedidoFechadoEvent,
    PropostaCriadaEvent,
)

HANDLERS = 'agriis.adapters.django_app.events.handlers'


@pytest.fixture
def tasks():
    """Substitui as tasks de notificação e métrica."""
    with patch(f'{HANDLERS}.notify_fornecedor') as fornecedor, \
            patch(f'{HANDLERS}.notify_produtor') as produtor, \
            patch(f'{HANDLERS}.notify_pedido_partes') as partes, \
            patch(f'{HANDLERS}.record_metric') as metric:
        yield Mock(fornecedor=fornecedor, produtor=produtor, partes=partes, metric=metric)


class TestPedidoHandlers:

    def test_pedido_criado(self, tasks):
        event = PedidoCriadoEvent(aggregate_id=7, fornecedor_id=1, produtor_id=2)

        handlers.handle_pedido_criado(event.to_dict())

        tasks.fornecedor.delay.assert_called_once_with(
            fornecedor_id=1, message="Novo pedido 7 em negociação"
        )
        tasks.metric.delay.assert_called_once()

    def test_pedido_fechado_prioridade_alta(self, tasks):
        event = PedidoFechadoEvent(aggregate_id=7, fornecedor_id=1, valor_liquido=240.0)

        handlers.handle_pedido_fechado(event.to_dict())

        assert tasks.fornecedor.delay.call_args.kwargs['priority'] == 'high'
        assert tasks.metric.delay.call_args.kwargs['value'] == 240.0

    def test_cancelado_por_tempo_avisa_as_duas_partes(self, tasks):
        handlers.handle_pedido_cancelado_por_tempo_limite({
            'aggregate_id': '7', 'data': {'fornecedor_id': 1, 'produtor_id': 2},
        })

        tasks.fornecedor.delay.assert_called_once()
        tasks.produtor.delay.assert_called_once()

    @pytest.mark.parametrize(
        'autor, destino', [('fornecedor', 'produtor'), ('produtor', 'fornecedor')]
    )
    def test_proposta_notifica_parte_contraria(self, tasks, autor, destino):
        event = PropostaCriadaEvent(
            aggregate_id=3, pedido_id=7, autor=autor, acao_comprador='Iniciou'
        )

        handlers.handle_proposta_criada(event.to_dict())

        assert tasks.partes.delay.call_args.kwargs['destino'] == destino

    def test_combo_expirado(self, tasks):
        event = ComboExpiradoEvent(aggregate_id=4, fornecedor_id=9)

        handlers.handle_combo_expirado(event.to_dict())

        assert tasks.fornecedor.delay.call_args.kwargs['fornecedor_id'] == 9


class TestDispatcher:

    def test_roteia_para_handler(self):
        handler = Mock()
        payload = {'aggregate_id': '7', 'data': {}}

        with patch.dict(handlers.EVENT_HANDLERS, {'PedidoFechadoEvent': handler}):
            handlers.dispatch_domain_event('PedidoFechadoEvent', payload)

        handler.delay.assert_called_once_with(payload)

    def test_evento_sem_handler(self):
        handlers.dispatch_domain_event('ProdutorCriadoEvent', {'aggregate_id': '1'})


class TestScheduledTasks:

    def test_cancelar_pedidos_prazo(self, tasks):
        container = Mock()
        container.services.cancelar_pedidos_prazo_service.return_value.execute.return_value = 3

        with patch('agriis.config.container.get_container', return_value=container):
            assert handlers.cancelar_pedidos_prazo_ultrapassado() == 3

    def test_falha_retorna_zero(self):
        with patch('agriis.config.container.get_container', side_effect=RuntimeError('db')):
            assert handlers.marcar_combos_expirados() == 0

    def test_beat_usa_intervalo_do_settings(self, settings):
        from agriis.config import celery as celery_config

        agendamento = celery_config.app.conf.beat_schedule['cancelar-pedidos-prazo-ultrapassado']

        assert agendamento['schedule'] == settings.PEDIDO_VERIFICACAO_PRAZO_SEGUNDOS
        assert agendamento['task'] == f'{HANDLERS}.cancelar_pedidos_prazo_ultrapassado'
        assert not hasattr(celery_config, 'debug_task')


class TestPublishers:

    def test_in_memory_filtra_por_tipo(self):
        publisher = InMemoryEventPublisher()
        publisher.publish_batch([
            PedidoCriadoEvent(aggregate_id=1),
            PedidoFechadoEvent(aggregate_id=1),
        ])

        assert len(publisher.published_events) == 2
        assert len(publisher.get_events_by_type('PedidoFechadoEvent')) == 1

    def test_logging_com_handler_sincrono(self):
        recebidos = []
        publisher = LoggingEventPublisher()
        publisher.register_handler('PedidoCriadoEvent', recebidos.append)

        publisher.publish(PedidoCriadoEvent(aggregate_id=1))

        assert len(recebidos) == 1

    def test_handler_com_erro_nao_interrompe(self):
        publisher = InMemoryEventPublisher()
        publisher.register_handler('PedidoCriadoEvent', Mock(side_effect=RuntimeError('x')))

        publisher.publish(PedidoCriadoEvent(aggregate_id=1))

        assert len(publisher.published_events) == 1

    def test_composite_propaga_mesmo_com_falha(self):
        quebrado = Mock()
        quebrado.publish.side_effect = RuntimeError('broker')
        memoria = InMemoryEventPublisher()

        composite = CompositeEventPublisher([quebrado])
        composite.add_publisher(memoria)
        composite.publish(PedidoCriadoEvent(aggregate_id=1))

        assert len(memoria.published_events) == 1

    def test_celery_envia_payload_serializavel(self):
        with patch(f'{HANDLERS}.dispatch_domain_event') as dispatch:
            CeleryEventPublisher(also_log=False).publish(PedidoFechadoEvent(aggregate_id=5))

        event_type, payload = dispatch.delay.call_args[0]
        assert event_type == 'PedidoFechadoEvent'
        assert isinstance(payload['occurred_at'], str)

    def test_factory(self):
        assert isinstance(get_event_publisher('celery'), CeleryEventPublisher)
        assert isinstance(get_event_publisher(), LoggingEventPublisher)


class TestInMemoryUnitOfWork:

    def test_eventos_publicados_apos_commit(self):
        publisher = InMemoryEventPublisher()
        uow = InMemoryUnitOfWork(event_publisher=publisher)

        with uow:
            uow.publish_event(PedidoCriadoEvent(aggregate_id=1))
            assert publisher.published_events == []

        assert uow.committed
        assert len(publisher.published_events) == 1

        uow.reset()
        assert not uow.committed
        assert uow.published_events == []

    def test_eventos_descartados_em_rollback(self):
        publisher = InMemoryEventPublisher()
        uow = InMemoryUnitOfWork(event_publisher=publisher)

        with pytest.raises(ValueError):
            with uow:
                uow.publish_event(PedidoCriadoEvent(aggregate_id=1))
                raise ValueError("falha")

        assert uow.rolled_back
        assert publisher.published_events == []
