"""
Migration inicial de Usuários.
"""

from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
    ]

    operations = [
        migrations.CreateModel(
            name='UsuarioModel',
            fields=[
                ('id', models.BigAutoField(
                    auto_created=True, primary_key=True, serialize=False, verbose_name='ID'
                )),
                ('nome', models.CharField(max_length=200, help_text='Nome completo')),
                ('email', models.EmailField(
                    max_length=254, unique=True, help_text='Email (login)'
                )),
                ('celular', models.CharField(max_length=20, null=True, blank=True)),
                ('cpf', models.CharField(max_length=11, null=True, blank=True, db_index=True)),
                ('senha_hash', models.CharField(max_length=256, null=True, blank=True)),
                ('ativo', models.BooleanField(default=True, db_index=True)),
                ('ultimo_login', models.DateTimeField(null=True, blank=True)),
                ('logo_url', models.CharField(max_length=500, null=True, blank=True)),
                ('roles', models.JSONField(
                    default=list, help_text='Lista de roles (valores de Roles)'
                )),
                ('criado_em', models.DateTimeField()),
                ('atualizado_em', models.DateTimeField(null=True, blank=True)),
            ],
            options={
                'db_table': 'usuarios',
                'verbose_name': 'Usuário',
                'verbose_name_plural': 'Usuários',
                'ordering': ['nome'],
            },
        ),
    ]
