"""
Migration inicial de Fornecedores.

Cria as tabelas:
- fornecedores
- usuarios_fornecedores: vínculo usuário/fornecedor com papel
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
            name='FornecedorModel',
            fields=[
                ('id', models.BigAutoField(
                    auto_created=True, primary_key=True, serialize=False, verbose_name='ID'
                )),
                ('nome', models.CharField(max_length=200)),
                ('cnpj', models.CharField(max_length=14, unique=True, help_text='Somente dígitos')),
                ('inscricao_estadual', models.CharField(max_length=30, null=True, blank=True)),
                ('endereco', models.CharField(max_length=300, null=True, blank=True)),
                ('telefone', models.CharField(max_length=20, null=True, blank=True)),
                ('email', models.CharField(max_length=254, null=True, blank=True)),
                ('logo_url', models.CharField(max_length=500, null=True, blank=True)),
                ('moeda_padrao', models.CharField(
                    max_length=10,
                    choices=[('Real', 'Real'), ('Dolar', 'Dólar')],
                    default='Real',
                )),
                ('pedido_minimo', models.DecimalField(
                    max_digits=18, decimal_places=2, null=True, blank=True
                )),
                ('token_lincros', models.CharField(max_length=200, null=True, blank=True)),
                ('ativo', models.BooleanField(default=True, db_index=True)),
                ('dados_adicionais', models.JSONField(default=dict, blank=True)),
                ('criado_em', models.DateTimeField()),
                ('atualizado_em', models.DateTimeField(null=True, blank=True)),
            ],
            options={
                'db_table': 'fornecedores',
                'verbose_name': 'Fornecedor',
                'verbose_name_plural': 'Fornecedores',
                'ordering': ['nome'],
            },
        ),
        migrations.CreateModel(
            name='UsuarioFornecedorModel',
            fields=[
                ('id', models.BigAutoField(
                    auto_created=True, primary_key=True, serialize=False, verbose_name='ID'
                )),
                ('role', models.CharField(max_length=50)),
                ('ativo', models.BooleanField(default=True)),
                ('criado_em', models.DateTimeField()),
                ('atualizado_em', models.DateTimeField(null=True, blank=True)),
                ('usuario', models.ForeignKey(
                    on_delete=django.db.models.deletion.CASCADE,
                    related_name='fornecedores',
                    to='usuarios.usuariomodel',
                )),
                ('fornecedor', models.ForeignKey(
                    on_delete=django.db.models.deletion.CASCADE,
                    related_name='usuarios',
                    to='fornecedores.fornecedormodel',
                )),
            ],
            options={
                'db_table': 'usuarios_fornecedores',
            },
        ),
        migrations.AddConstraint(
            model_name='usuariofornecedormodel',
            constraint=models.UniqueConstraint(
                fields=('usuario', 'fornecedor'), name='uq_usuario_fornecedor'
            ),
        ),
    ]
