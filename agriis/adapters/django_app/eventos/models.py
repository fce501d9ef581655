"""
Django Models do Event Store.

DomainEventModel persiste todos os eventos publicados pelos use cases
(pedidos, propostas, combos, produtores...) para auditoria e replay.
"""

from django.core.serializers.json import DjangoJSONEncoder
from django.db import models


class DomainEventModel(models.Model):
    """
    Event Store genérico para Domain Events.

    Fields:
        event_id: UUID do evento (PK)
        event_type / aggregate_type / aggregate_id: identificação
        event_data: dados serializados
        sequence: ordem do evento dentro do agregado
        correlation_id / causation_id / user_id: rastreamento
    """

    event_id = models.CharField(
        max_length=36,
        primary_key=True,
        help_text="UUID único do evento"
    )

    event_type = models.CharField(
        max_length=100,
        db_index=True,
        help_text="Tipo do evento (ex: PedidoFechadoEvent)"
    )

    aggregate_type = models.CharField(
        max_length=100,
        db_index=True,
        help_text="Tipo do agregado (ex: Pedido)"
    )

    aggregate_id = models.CharField(
        max_length=36,
        db_index=True,
        help_text="ID do agregado que gerou o evento"
    )

    event_data = models.JSONField(
        default=dict,
        encoder=DjangoJSONEncoder,
        help_text="Dados serializados do evento"
    )

    version = models.IntegerField(
        default=1,
        help_text="Versão do schema do evento"
    )

    sequence = models.BigIntegerField(
        default=0,
        help_text="Sequência do evento no agregado"
    )

    occurred_at = models.DateTimeField(
        db_index=True,
        help_text="Quando o evento ocorreu"
    )

    recorded_at = models.DateTimeField(
        auto_now_add=True,
        help_text="Quando o evento foi persistido"
    )

    correlation_id = models.CharField(
        max_length=36,
        null=True,
        blank=True,
        db_index=True,
        help_text="ID para rastrear fluxo de eventos relacionados"
    )

    causation_id = models.CharField(
        max_length=36,
        null=True,
        blank=True,
        help_text="ID do evento que causou este"
    )

    user_id = models.CharField(
        max_length=100,
        null=True,
        blank=True,
        db_index=True,
        help_text="Usuário que iniciou a ação"
    )

    class Meta:
        db_table = 'domain_events'
        verbose_name = 'Evento de Domínio'
        verbose_name_plural = 'Eventos de Domínio'
        ordering = ['recorded_at']
        indexes = [
            models.Index(
                fields=['aggregate_type', 'aggregate_id', 'sequence'],
                name='idx_event_aggregate_seq',
            ),
            models.Index(fields=['event_type', 'recorded_at'], name='idx_event_etype_recorded'),
        ]

    def __str__(self):
        return f"{self.event_type} - {self.aggregate_type}#{self.aggregate_id} @ {self.occurred_at}"
