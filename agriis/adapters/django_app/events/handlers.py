"""
Event Handlers - Processadores de Eventos de Domínio.

Handlers são executados de forma assíncrona via Celery quando
Domain Events são publicados pelo CeleryEventPublisher.

Payload recebido (DomainEvent.to_dict):
    {event_id, event_type, aggregate_id, aggregate_type,
     occurred_at, version, data: {...campos do evento}}

Tipos de tasks:
- Handlers de eventos (pedidos, propostas, combos, produtores)
- Notificação e métricas (apenas registradas em log)
- Agendadas pelo Celery Beat (prazo de pedidos, combos expirados,
  limpeza de tokens e do Event Store)
"""

import logging
from datetime import datetime, timedelta
from typing import Any, Dict

from celery import shared_task

logger = logging.getLogger(__name__)


def _dados(event_data: Dict[str, Any]) -> Dict[str, Any]:
    return event_data.get('data') or {}


# =============================================================================
# Event Handlers - Pedidos
# =============================================================================

@shared_task(
    bind=True,
    max_retries=3,
    default_retry_delay=60,
    autoretry_for=(Exception,),
    acks_late=True,
)
def handle_pedido_criado(self, event_data: Dict[str, Any]) -> None:
    """
    Handler para PedidoCriadoEvent.

    Ações:
    - Avisar o fornecedor de que há um novo carrinho em negociação
    - Registrar métrica
    """
    pedido_id = event_data.get('aggregate_id')
    dados = _dados(event_data)

    logger.info(
        f"[HANDLER] PedidoCriado: {pedido_id} | "
        f"Produtor: {dados.get('produtor_id')} | Fornecedor: {dados.get('fornecedor_id')}"
    )

    notify_fornecedor.delay(
        fornecedor_id=dados.get('fornecedor_id'),
        message=f"Novo pedido {pedido_id} em negociação",
    )
    record_metric.delay(metric_name='pedidos_criados', value=1, tags={})


@shared_task(
    bind=True,
    max_retries=3,
    default_retry_delay=60,
    acks_late=True,
)
def handle_pedido_fechado(self, event_data: Dict[str, Any]) -> None:
    try:
        pedido_id = event_data.get('aggregate_id')
        dados = _dados(event_data)

        logger.info(
            f"[HANDLER] PedidoFechado: {pedido_id} | "
            f"Valor líquido: {dados.get('valor_liquido')}"
        )

        notify_fornecedor.delay(
            fornecedor_id=dados.get('fornecedor_id'),
            message=f"Pedido {pedido_id} fechado pelo produtor",
            priority='high',
        )
        record_metric.delay(
            metric_name='pedidos_fechados_valor',
            value=dados.get('valor_liquido', 0),
            tags={'fornecedor_id': str(dados.get('fornecedor_id'))},
        )

    except Exception as e:
        logger.error(f"Erro no handler PedidoFechado: {e}", exc_info=True)
        raise


@shared_task(
    bind=True,
    max_retries=3,
    default_retry_delay=60,
    acks_late=True,
)
def handle_pedido_cancelado_pelo_comprador(self, event_data: Dict[str, Any]) -> None:
    try:
        pedido_id = event_data.get('aggregate_id')
        dados = _dados(event_data)

        logger.info(f"[HANDLER] PedidoCanceladoPeloComprador: {pedido_id}")

        notify_fornecedor.delay(
            fornecedor_id=dados.get('fornecedor_id'),
            message=f"Pedido {pedido_id} cancelado pelo produtor",
        )
        record_metric.delay(
            metric_name='pedidos_cancelados', value=1, tags={'motivo': 'comprador'}
        )

    except Exception as e:
        logger.error(f"Erro no handler PedidoCanceladoPeloComprador: {e}", exc_info=True)
        raise


@shared_task(
    bind=True,
    max_retries=3,
    default_retry_delay=60,
    acks_late=True,
)
def handle_pedido_cancelado_por_tempo_limite(self, event_data: Dict[str, Any]) -> None:
    """
    Handler para PedidoCanceladoPorTempoLimiteEvent.

    Ambas as partes são avisadas: o prazo venceu sem fechamento.
    """
    try:
        pedido_id = event_data.get('aggregate_id')
        dados = _dados(event_data)

        logger.info(
            f"[HANDLER] PedidoCanceladoPorTempoLimite: {pedido_id} | "
            f"Prazo: {dados.get('data_limite_interacao')}"
        )

        mensagem = f"Pedido {pedido_id} cancelado: prazo limite de interação ultrapassado"
        notify_fornecedor.delay(fornecedor_id=dados.get('fornecedor_id'), message=mensagem)
        notify_produtor.delay(produtor_id=dados.get('produtor_id'), message=mensagem)
        record_metric.delay(
            metric_name='pedidos_cancelados', value=1, tags={'motivo': 'tempo_limite'}
        )

    except Exception as e:
        logger.error(f"Erro no handler PedidoCanceladoPorTempoLimite: {e}", exc_info=True)
        raise


@shared_task(
    bind=True,
    max_retries=3,
    default_retry_delay=60,
    acks_late=True,
)
def handle_proposta_criada(self, event_data: Dict[str, Any]) -> None:
    """
    Handler para PropostaCriadaEvent.

    A parte contrária ao autor da proposta é notificada.
    """
    try:
        dados = _dados(event_data)
        pedido_id = dados.get('pedido_id')
        autor = dados.get('autor')

        logger.info(
            f"[HANDLER] PropostaCriada: pedido {pedido_id} | "
            f"Autor: {autor} | Ação: {dados.get('acao_comprador')}"
        )

        if autor == 'fornecedor':
            notify_pedido_partes.delay(
                pedido_id=pedido_id,
                destino='produtor',
                message=f"Nova proposta do fornecedor no pedido {pedido_id}",
            )
        else:
            notify_pedido_partes.delay(
                pedido_id=pedido_id,
                destino='fornecedor',
                message=f"Produtor {dados.get('acao_comprador')} no pedido {pedido_id}",
            )

    except Exception as e:
        logger.error(f"Erro no handler PropostaCriada: {e}", exc_info=True)
        raise


# =============================================================================
# Event Handlers - Combos e Produtores
# =============================================================================

@shared_task(bind=True, max_retries=3, default_retry_delay=60, acks_late=True)
def handle_combo_criado(self, event_data: Dict[str, Any]) -> None:
    dados = _dados(event_data)
    logger.info(
        f"[HANDLER] ComboCriado: {event_data.get('aggregate_id')} | "
        f"{dados.get('nome')} | Safra: {dados.get('safra_id')}"
    )
    record_metric.delay(metric_name='combos_criados', value=1, tags={})


@shared_task(bind=True, max_retries=3, default_retry_delay=60, acks_late=True)
def handle_combo_expirado(self, event_data: Dict[str, Any]) -> None:
    dados = _dados(event_data)
    combo_id = event_data.get('aggregate_id')
    logger.info(f"[HANDLER] ComboExpirado: {combo_id} | Fim: {dados.get('data_fim')}")
    notify_fornecedor.delay(
        fornecedor_id=dados.get('fornecedor_id'),
        message=f"Combo {combo_id} expirou",
    )


@shared_task(bind=True, max_retries=3, default_retry_delay=60, acks_late=True)
def handle_produtor_status_alterado(self, event_data: Dict[str, Any]) -> None:
    dados = _dados(event_data)
    logger.info(
        f"[HANDLER] ProdutorStatusAlterado: {event_data.get('aggregate_id')} | "
        f"{dados.get('status_anterior')} -> {dados.get('status_novo')}"
    )
    notify_produtor.delay(
        produtor_id=event_data.get('aggregate_id'),
        message=f"Seu cadastro está: {dados.get('status_novo')}",
    )


# =============================================================================
# Event Dispatcher (Router)
# =============================================================================

EVENT_HANDLERS = {
    'PedidoCriadoEvent': handle_pedido_criado,
    'PedidoFechadoEvent': handle_pedido_fechado,
    'PedidoCanceladoPeloCompradorEvent': handle_pedido_cancelado_pelo_comprador,
    'PedidoCanceladoPorTempoLimiteEvent': handle_pedido_cancelado_por_tempo_limite,
    'PropostaCriadaEvent': handle_proposta_criada,
    'ComboCriadoEvent': handle_combo_criado,
    'ComboExpiradoEvent': handle_combo_expirado,
    'ProdutorStatusAlteradoEvent': handle_produtor_status_alterado,
}


@shared_task(bind=True, max_retries=5, default_retry_delay=30)
def dispatch_domain_event(self, event_type: str, event_data: Dict[str, Any]) -> None:
    """
    Dispatcher central para Domain Events.

    Roteia eventos para os handlers apropriados. Eventos sem handler
    (ex.: ProdutorCriadoEvent) ficam apenas no Event Store.

    Args:
        event_type: Tipo do evento (ex: 'PedidoFechadoEvent')
        event_data: Evento serializado (DomainEvent.to_dict)
    """
    handler = EVENT_HANDLERS.get(event_type)

    if handler:
        logger.info(f"[DISPATCHER] Roteando {event_type} para handler")
        handler.delay(event_data)
    else:
        logger.debug(f"[DISPATCHER] Sem handler para {event_type}")


# =============================================================================
# Notification Tasks
# =============================================================================

@shared_task(bind=True, max_retries=3, default_retry_delay=120)
def notify_fornecedor(self, fornecedor_id, message: str, priority: str = 'normal') -> None:
    logger.info(f"[NOTIFICATION] Fornecedor {fornecedor_id} [{priority}]: {message}")


@shared_task(bind=True, max_retries=3, default_retry_delay=120)
def notify_produtor(self, produtor_id, message: str) -> None:
    logger.info(f"[NOTIFICATION] Produtor {produtor_id}: {message}")


@shared_task(bind=True, max_retries=3, default_retry_delay=120)
def notify_pedido_partes(self, pedido_id, destino: str, message: str) -> None:
    """
    Resolve o produtor ou fornecedor do pedido e encaminha a notificação.

    Args:
        pedido_id: ID do pedido
        destino: 'produtor' ou 'fornecedor'
    """
    from agriis.config.container import get_container

    pedido = get_container().repositories.pedido_repository().get_by_id(int(pedido_id))
    if pedido is None:
        logger.warning(f"[NOTIFICATION] Pedido {pedido_id} não encontrado")
        return

    if destino == 'produtor':
        notify_produtor.delay(produtor_id=pedido.produtor_id, message=message)
    else:
        notify_fornecedor.delay(fornecedor_id=pedido.fornecedor_id, message=message)


# =============================================================================
# Metric Tasks
# =============================================================================

@shared_task(bind=True, ignore_result=True)
def record_metric(self, metric_name: str, value: float, tags: Dict[str, str] = None) -> None:
    logger.info(f"[METRIC] {metric_name}={value} | tags={tags or {}}")


# =============================================================================
# Scheduled Tasks (Beat)
# =============================================================================

@shared_task(bind=True)
def cancelar_pedidos_prazo_ultrapassado(self) -> int:
    """
    Cancela pedidos em negociação com prazo limite vencido.

    Falhas são registradas e a próxima execução tenta novamente.

    Returns:
        Número de pedidos cancelados
    """
    logger.info("[SCHEDULED] Verificando pedidos com prazo ultrapassado...")

    try:
        # Importação tardia para evitar circular import
        from agriis.config.container import get_container

        service = get_container().services.cancelar_pedidos_prazo_service()
        cancelados = service.execute()

        logger.info(f"[SCHEDULED] {cancelados} pedido(s) cancelado(s) por tempo limite")
        record_metric.delay(
            metric_name='pedidos_cancelados_tempo_limite', value=cancelados, tags={}
        )
        return cancelados

    except Exception as e:
        logger.error(f"Erro ao cancelar pedidos com prazo ultrapassado: {e}", exc_info=True)
        return 0


@shared_task(bind=True)
def alertar_pedidos_proximos_prazo(self, dias_antes: int = 1) -> int:
    """
    Avisa produtores com pedidos cujo prazo vence nos próximos dias.

    Returns:
        Número de pedidos alertados
    """
    logger.info("[SCHEDULED] Verificando pedidos próximos do prazo limite...")

    try:
        from agriis.config.container import get_container

        result = get_container().services.pedido_service().listar_proximos_prazo_limite(
            dias_antes
        )
        if result.is_failure:
            logger.error(f"[SCHEDULED] Falha ao listar pedidos: {result.error}")
            return 0

        for pedido in result.value:
            notify_produtor.delay(
                produtor_id=pedido.produtor_id,
                message=(
                    f"Pedido {pedido.id} expira em "
                    f"{pedido.data_limite_interacao.strftime('%d/%m/%Y %H:%M')}"
                ),
            )
        return len(result.value)

    except Exception as e:
        logger.error(f"Erro ao alertar pedidos próximos do prazo: {e}", exc_info=True)
        return 0


@shared_task(bind=True)
def marcar_combos_expirados(self) -> int:
    logger.info("[SCHEDULED] Verificando combos expirados...")

    try:
        from agriis.config.container import get_container

        expirados = get_container().services.marcar_combos_expirados_service().execute()
        logger.info(f"[SCHEDULED] {expirados} combo(s) marcado(s) como expirado(s)")
        return expirados

    except Exception as e:
        logger.error(f"Erro ao marcar combos expirados: {e}", exc_info=True)
        return 0


@shared_task(bind=True)
def limpar_refresh_tokens_expirados(self) -> int:
    logger.info("[SCHEDULED] Limpando refresh tokens expirados...")

    try:
        from agriis.config.container import get_container

        return get_container().services.autenticacao_service().limpar_tokens_expirados()

    except Exception as e:
        logger.error(f"Erro ao limpar refresh tokens: {e}", exc_info=True)
        return 0


@shared_task(bind=True)
def cleanup_old_events(self, days: int = 90) -> int:
    """
    Limpa eventos antigos do Event Store.

    Executada semanalmente pelo Celery Beat.

    Args:
        days: Número de dias para manter eventos

    Returns:
        Número de eventos removidos
    """
    logger.info(f"[SCHEDULED] Limpando eventos com mais de {days} dias...")

    try:
        from agriis.adapters.django_app.eventos.repositories import DjangoEventStore

        deleted = DjangoEventStore().remove_older_than(datetime.now() - timedelta(days=days))
        logger.info(f"[SCHEDULED] {deleted} eventos removidos")
        return deleted

    except Exception as e:
        logger.error(f"Erro ao limpar eventos: {e}", exc_info=True)
        return 0
