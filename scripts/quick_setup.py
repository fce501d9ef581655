#!/usr/bin/env python
"""
Setup rápido para desenvolvimento local.

Este script:
1. Configura Django settings
2. Executa as migrations (SQLite se DATABASE_* não definidos)
3. Cria dados de exemplo (opcional): usuário admin, cultura, safra,
   fornecedor, produtor autorizado e catálogo vigente

Uso:
    python scripts/quick_setup.py
    python scripts/quick_setup.py --with-sample-data
"""

import argparse
import os
import sys
from datetime import date
from decimal import Decimal

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))


def setup_django():
    """Configura Django para uso standalone."""
    os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'agriis.config.settings')

    import django
    django.setup()


def run_migrations():
    from django.core.management import call_command

    print("📦 Executando migrations...")
    call_command('migrate', verbosity=1)
    print("✅ Migrations concluídas!")


def create_sample_data():
    """Cria dados de exemplo usando os services do container."""
    from agriis.config.container import get_container
    from agriis.core.catalogos.dtos import CatalogoItemInputDTO, CriarCatalogoInputDTO
    from agriis.core.culturas.dtos import CriarCulturaInputDTO
    from agriis.core.fornecedores.dtos import CriarFornecedorInputDTO
    from agriis.core.produtores.dtos import CriarProdutorInputDTO
    from agriis.core.safras.dtos import CriarSafraInputDTO
    from agriis.core.usuarios.dtos import CriarUsuarioInputDTO

    services = get_container().services
    hoje = date.today()

    print("📝 Criando dados de exemplo...")

    admin = services.usuario_service().criar(CriarUsuarioInputDTO(
        nome='Administrador',
        email='admin@agriis.local',
        senha='admin123',
        roles=('ADMIN',),
    ))
    print(f"   ✓ Usuário {admin.email} (senha: admin123)")

    soja = services.cultura_service().criar(CriarCulturaInputDTO(nome='Soja'))
    print(f"   ✓ Cultura {soja.nome}")

    safra = services.safra_service().criar(CriarSafraInputDTO(
        plantio_inicial=date(hoje.year, 1, 1),
        plantio_final=date(hoje.year, 12, 31),
        plantio_nome=f'S{hoje.year}',
        descricao=f'Safra {hoje.year}/{hoje.year + 1}',
    ))
    print(f"   ✓ Safra {safra.descricao}")

    fornecedor = services.fornecedor_service().criar(CriarFornecedorInputDTO(
        nome='Agro Insumos Ltda',
        cnpj='11.222.333/0001-81',
        email='vendas@agroinsumos.local',
    ))
    print(f"   ✓ Fornecedor {fornecedor.nome}")

    produtor_service = services.produtor_service()
    produtor = produtor_service.criar(CriarProdutorInputDTO(
        nome='Fazenda Boa Vista',
        cpf='529.982.247-25',
        area_plantio=Decimal('850'),
        culturas=(soja.id,),
    ))
    produtor_service.autorizar(produtor.id, admin.id)
    print(f"   ✓ Produtor {produtor.nome} (autorizado)")

    catalogo_service = services.catalogo_service()
    catalogo = catalogo_service.criar(CriarCatalogoInputDTO(
        safra_id=safra.id,
        ponto_distribuicao_id=1,
        cultura_id=soja.id,
        categoria_id=1,
        data_inicio=hoje,
    ))
    catalogo_service.adicionar_item(catalogo.id, CatalogoItemInputDTO(
        produto_id=1,
        estrutura_precos={'estados': {'MT': 120.5}, 'padrao': 125.0},
    ))
    print(f"   ✓ Catálogo {catalogo.id} com 1 item")

    print("✅ Dados de exemplo criados!")


def check_connection():
    from django.db import connection

    print("🔍 Verificando conexão com o banco...")

    try:
        with connection.cursor() as cursor:
            cursor.execute("SELECT 1")
        print("✅ Conexão OK!")
        return True
    except Exception as e:
        print(f"❌ Erro de conexão: {e}")
        return False


def show_info():
    from django.conf import settings

    print("\n" + "=" * 60)
    print("📊 Informações do Setup")
    print("=" * 60)
    print(f"  Database Engine: {settings.DATABASES['default']['ENGINE']}")
    print(f"  Database Name: {settings.DATABASES['default']['NAME']}")
    print(f"  Debug Mode: {settings.DEBUG}")
    print(f"  Event Publisher: {settings.EVENT_PUBLISHER_MODE}")
    print("=" * 60)
    print("\n🚀 Próximos passos:")
    print("   1. python manage.py runserver")
    print("   2. POST http://localhost:8000/api/autenticacao/login/")
    print("   3. celery -A agriis.config.celery worker -B -l INFO")
    print("\n")


def main():
    parser = argparse.ArgumentParser(description='Setup rápido para desenvolvimento')
    parser.add_argument(
        '--with-sample-data',
        action='store_true',
        help='Criar dados de exemplo'
    )
    parser.add_argument(
        '--check-only',
        action='store_true',
        help='Apenas verificar conexão'
    )

    args = parser.parse_args()

    print("\n" + "=" * 60)
    print("🌱 Agriis - Quick Setup")
    print("=" * 60 + "\n")

    setup_django()

    if args.check_only:
        check_connection()
        return

    if not check_connection():
        print("\n⚠️  Certifique-se de que o banco de dados está rodando.")
        print("   Sem DATABASE_HOST/DATABASE_URL o SQLite local é usado.")
        return

    run_migrations()

    if args.with_sample_data:
        create_sample_data()

    show_info()


if __name__ == '__main__':
    main()
