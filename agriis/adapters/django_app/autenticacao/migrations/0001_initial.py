"""
Migration inicial de Autenticação.
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
            name='RefreshTokenModel',
            fields=[
                ('id', models.BigAutoField(
                    auto_created=True, primary_key=True, serialize=False, verbose_name='ID'
                )),
                ('token', models.CharField(max_length=200, unique=True)),
                ('data_expiracao', models.DateTimeField(db_index=True)),
                ('revogado', models.BooleanField(default=False)),
                ('data_revogacao', models.DateTimeField(null=True, blank=True)),
                ('endereco_ip', models.CharField(max_length=45, null=True, blank=True)),
                ('user_agent', models.CharField(max_length=500, null=True, blank=True)),
                ('criado_em', models.DateTimeField()),
                ('atualizado_em', models.DateTimeField(null=True, blank=True)),
                ('usuario', models.ForeignKey(
                    on_delete=django.db.models.deletion.CASCADE,
                    related_name='refresh_tokens',
                    to='usuarios.usuariomodel',
                )),
            ],
            options={
                'db_table': 'refresh_tokens',
                'ordering': ['-criado_em'],
            },
        ),
        migrations.AddIndex(
            model_name='refreshtokenmodel',
            index=models.Index(
                fields=['usuario', 'revogado'], name='idx_refresh_usuario_revogado'
            ),
        ),
    ]
