"""
Migration inicial do Event Store.

Cria a tabela domain_events.
"""

from django.db import migrations, models
import django.core.serializers.json


class Migration(migrations.Migration):
    """Migration inicial."""

    initial = True

    dependencies = [
    ]

    operations = [
        migrations.CreateModel(
            name='DomainEventModel',
            fields=[
                ('event_id', models.CharField(
                    max_length=36,
                    primary_key=True,
                    serialize=False,
                    help_text='UUID único do evento'
                )),
                ('event_type', models.CharField(
                    max_length=100,
                    db_index=True,
                    help_text='Tipo do evento (ex: PedidoFechadoEvent)'
                )),
                ('aggregate_type', models.CharField(
                    max_length=100,
                    db_index=True,
                    help_text='Tipo do agregado (ex: Pedido)'
                )),
                ('aggregate_id', models.CharField(
                    max_length=36,
                    db_index=True,
                    help_text='ID do agregado que gerou o evento'
                )),
                ('event_data', models.JSONField(
                    default=dict,
                    encoder=django.core.serializers.json.DjangoJSONEncoder,
                    help_text='Dados serializados do evento'
                )),
                ('version', models.IntegerField(
                    default=1,
                    help_text='Versão do schema do evento'
                )),
                ('sequence', models.BigIntegerField(
                    default=0,
                    help_text='Sequência do evento no agregado'
                )),
                ('occurred_at', models.DateTimeField(
                    db_index=True,
                    help_text='Quando o evento ocorreu'
                )),
                ('recorded_at', models.DateTimeField(
                    auto_now_add=True,
                    help_text='Quando o evento foi persistido'
                )),
                ('correlation_id', models.CharField(
                    max_length=36,
                    null=True,
                    blank=True,
                    db_index=True,
                    help_text='ID para rastrear fluxo de eventos relacionados'
                )),
                ('causation_id', models.CharField(
                    max_length=36,
                    null=True,
                    blank=True,
                    help_text='ID do evento que causou este'
                )),
                ('user_id', models.CharField(
                    max_length=100,
                    null=True,
                    blank=True,
                    db_index=True,
                    help_text='Usuário que iniciou a ação'
                )),
            ],
            options={
                'db_table': 'domain_events',
                'verbose_name': 'Evento de Domínio',
                'verbose_name_plural': 'Eventos de Domínio',
                'ordering': ['recorded_at'],
            },
        ),
        migrations.AddIndex(
            model_name='domaineventmodel',
            index=models.Index(
                fields=['aggregate_type', 'aggregate_id', 'sequence'],
                name='idx_event_aggregate_seq'
            ),
        ),
        migrations.AddIndex(
            model_name='domaineventmodel',
            index=models.Index(
                fields=['event_type', 'recorded_at'],
                name='idx_event_etype_recorded'
            ),
        ),
    ]
