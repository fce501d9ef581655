"""
Migration inicial de Culturas.
"""

from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
    ]

    operations = [
        migrations.CreateModel(
            name='CulturaModel',
            fields=[
                ('id', models.BigAutoField(
                    auto_created=True, primary_key=True, serialize=False, verbose_name='ID'
                )),
                ('nome', models.CharField(
                    max_length=256, unique=True, help_text='Nome da cultura (único)'
                )),
                ('descricao', models.TextField(
                    null=True, blank=True, help_text='Descrição da cultura'
                )),
                ('ativo', models.BooleanField(
                    default=True, db_index=True, help_text='Se a cultura está disponível'
                )),
                ('criado_em', models.DateTimeField(help_text='Data de criação')),
                ('atualizado_em', models.DateTimeField(
                    null=True, blank=True, help_text='Última atualização'
                )),
            ],
            options={
                'db_table': 'culturas',
                'verbose_name': 'Cultura',
                'verbose_name_plural': 'Culturas',
                'ordering': ['nome'],
            },
        ),
    ]
