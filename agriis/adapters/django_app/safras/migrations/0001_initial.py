"""
Migration inicial de Safras.
"""

from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
    ]

    operations = [
        migrations.CreateModel(
            name='SafraModel',
            fields=[
                ('id', models.BigAutoField(
                    auto_created=True, primary_key=True, serialize=False, verbose_name='ID'
                )),
                ('plantio_inicial', models.DateField(
                    db_index=True, help_text='Início do plantio'
                )),
                ('plantio_final', models.DateField(help_text='Fim do plantio')),
                ('plantio_nome', models.CharField(
                    max_length=256, help_text='Nome do plantio (ex: S1)'
                )),
                ('descricao', models.CharField(max_length=64, help_text='Descrição da safra')),
                ('ano_colheita', models.IntegerField(
                    db_index=True, help_text='Ano de colheita (derivado)'
                )),
                ('criado_em', models.DateTimeField(help_text='Data de criação')),
                ('atualizado_em', models.DateTimeField(
                    null=True, blank=True, help_text='Última atualização'
                )),
            ],
            options={
                'db_table': 'safras',
                'verbose_name': 'Safra',
                'verbose_name_plural': 'Safras',
                'ordering': ['-plantio_inicial'],
            },
        ),
        migrations.AddConstraint(
            model_name='saframodel',
            constraint=models.UniqueConstraint(
                fields=('plantio_inicial', 'plantio_final', 'plantio_nome'),
                name='uq_safra_periodo',
            ),
        ),
    ]
