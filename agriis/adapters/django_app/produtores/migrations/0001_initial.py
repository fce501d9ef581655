"""
Migration inicial de Produtores.
"""

from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('usuarios', '0001_initial'),
    ]

    operations = [
        migrations.CreateModel(
            name='ProdutorModel',
            fields=[
                ('id', models.BigAutoField(
                    auto_created=True, primary_key=True, serialize=False, verbose_name='ID'
                )),
                ('nome', models.CharField(max_length=200)),
                ('cpf', models.CharField(max_length=11, null=True, blank=True, unique=True)),
                ('cnpj', models.CharField(max_length=14, null=True, blank=True, unique=True)),
                ('inscricao_estadual', models.CharField(max_length=30, null=True, blank=True)),
                ('tipo_atividade', models.CharField(max_length=20, null=True, blank=True)),
                ('area_plantio', models.DecimalField(
                    max_digits=18, decimal_places=4, default=0
                )),
                ('status', models.CharField(
                    max_length=40,
                    choices=[
                        ('PendenteValidacaoAutomatica', 'Pendente validação automática'),
                        ('PendenteValidacaoManual', 'Pendente validação manual'),
                        ('PendenteCnpj', 'Pendente CNPJ'),
                        ('AutorizadoAutomaticamente', 'Autorizado automaticamente'),
                        ('AutorizadoManualmente', 'Autorizado manualmente'),
                        ('Negado', 'Negado'),
                    ],
                    default='PendenteValidacaoAutomatica',
                    db_index=True,
                )),
                ('data_autorizacao', models.DateTimeField(null=True, blank=True)),
                ('retornos_api_check', models.JSONField(null=True, blank=True)),
                ('culturas', models.JSONField(default=list, help_text='IDs das culturas')),
                ('criado_em', models.DateTimeField()),
                ('atualizado_em', models.DateTimeField(null=True, blank=True)),
                ('usuario_autorizacao', models.ForeignKey(
                    on_delete=django.db.models.deletion.SET_NULL,
                    null=True,
                    blank=True,
                    related_name='produtores_autorizados',
                    to='usuarios.usuariomodel',
                )),
            ],
            options={
                'db_table': 'produtores',
                'verbose_name': 'Produtor',
                'verbose_name_plural': 'Produtores',
                'ordering': ['nome'],
            },
        ),
    ]
