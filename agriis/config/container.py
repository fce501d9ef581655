"""
Dependency Injection Container.

Configura e gerencia as dependências da aplicação com dependency-injector.

Organização:
- Repositories: persistência (Singleton, uma instância por processo)
- Services: casos de uso dos módulos (Factory, nova instância por chamada)
- Container: infraestrutura (config, publisher, event store, UoW) e
  composição dos dois sub-containers acima

Imports são lazy (resolvidos na primeira chamada do provider) para que o
container possa ser importado antes do Django estar configurado.

Example:
    from agriis.config.container import get_container

    pedido_service = get_container().services.pedido_service()
    result = pedido_service.obter_por_id(10)
"""

from typing import Any, Callable, Dict, Optional

from dependency_injector import containers, providers


def _lazy(caminho: str) -> Callable[..., Any]:
    """Retorna callable que importa ``modulo.Nome`` e o instancia na chamada."""
    modulo, nome = caminho.rsplit('.', 1)

    def construir(*args, **kwargs):
        return getattr(__import__(modulo, fromlist=[nome]), nome)(*args, **kwargs)

    construir.__name__ = nome
    return construir


DJANGO_APP = 'agriis.adapters.django_app'
CORE = 'agriis.core'


# =============================================================================
# Repositories
# =============================================================================

class Repositories(containers.DeclarativeContainer):
    """Repositórios Django (ORM)."""

    cultura_repository = providers.Singleton(
        _lazy(f'{DJANGO_APP}.culturas.repositories.DjangoCulturaRepository')
    )
    safra_repository = providers.Singleton(
        _lazy(f'{DJANGO_APP}.safras.repositories.DjangoSafraRepository')
    )
    usuario_repository = providers.Singleton(
        _lazy(f'{DJANGO_APP}.usuarios.repositories.DjangoUsuarioRepository')
    )
    fornecedor_repository = providers.Singleton(
        _lazy(f'{DJANGO_APP}.fornecedores.repositories.DjangoFornecedorRepository')
    )
    usuario_fornecedor_repository = providers.Singleton(
        _lazy(f'{DJANGO_APP}.fornecedores.repositories.DjangoUsuarioFornecedorRepository')
    )
    produtor_repository = providers.Singleton(
        _lazy(f'{DJANGO_APP}.produtores.repositories.DjangoProdutorRepository')
    )
    propriedade_repository = providers.Singleton(
        _lazy(f'{DJANGO_APP}.propriedades.repositories.DjangoPropriedadeRepository')
    )
    catalogo_repository = providers.Singleton(
        _lazy(f'{DJANGO_APP}.catalogos.repositories.DjangoCatalogoRepository')
    )
    segmentacao_repository = providers.Singleton(
        _lazy(f'{DJANGO_APP}.segmentacoes.repositories.DjangoSegmentacaoRepository')
    )
    forma_pagamento_repository = providers.Singleton(
        _lazy(f'{DJANGO_APP}.pagamentos.repositories.DjangoFormaPagamentoRepository')
    )
    cultura_forma_pagamento_repository = providers.Singleton(
        _lazy(f'{DJANGO_APP}.pagamentos.repositories.DjangoCulturaFormaPagamentoRepository')
    )
    combo_repository = providers.Singleton(
        _lazy(f'{DJANGO_APP}.combos.repositories.DjangoComboRepository')
    )
    pedido_repository = providers.Singleton(
        _lazy(f'{DJANGO_APP}.pedidos.repositories.DjangoPedidoRepository')
    )
    proposta_repository = providers.Singleton(
        _lazy(f'{DJANGO_APP}.pedidos.repositories.DjangoPropostaRepository')
    )
    refresh_token_repository = providers.Singleton(
        _lazy(f'{DJANGO_APP}.autenticacao.repositories.DjangoRefreshTokenRepository')
    )


class InMemoryRepositories(containers.DeclarativeContainer):
    """Repositórios em memória (testes)."""

    cultura_repository = providers.Singleton(
        _lazy(f'{CORE}.culturas.ports.InMemoryCulturaRepository')
    )
    safra_repository = providers.Singleton(
        _lazy(f'{CORE}.safras.ports.InMemorySafraRepository')
    )
    usuario_repository = providers.Singleton(
        _lazy(f'{CORE}.usuarios.ports.InMemoryUsuarioRepository')
    )
    fornecedor_repository = providers.Singleton(
        _lazy(f'{CORE}.fornecedores.ports.InMemoryFornecedorRepository')
    )
    usuario_fornecedor_repository = providers.Singleton(
        _lazy(f'{CORE}.fornecedores.ports.InMemoryUsuarioFornecedorRepository')
    )
    produtor_repository = providers.Singleton(
        _lazy(f'{CORE}.produtores.ports.InMemoryProdutorRepository')
    )
    propriedade_repository = providers.Singleton(
        _lazy(f'{CORE}.propriedades.ports.InMemoryPropriedadeRepository')
    )
    catalogo_repository = providers.Singleton(
        _lazy(f'{CORE}.catalogos.ports.InMemoryCatalogoRepository')
    )
    segmentacao_repository = providers.Singleton(
        _lazy(f'{CORE}.segmentacoes.ports.InMemorySegmentacaoRepository')
    )
    forma_pagamento_repository = providers.Singleton(
        _lazy(f'{CORE}.pagamentos.ports.InMemoryFormaPagamentoRepository')
    )
    cultura_forma_pagamento_repository = providers.Singleton(
        _lazy(f'{CORE}.pagamentos.ports.InMemoryCulturaFormaPagamentoRepository'),
        forma_repo=forma_pagamento_repository,
    )
    combo_repository = providers.Singleton(
        _lazy(f'{CORE}.combos.ports.InMemoryComboRepository')
    )
    pedido_repository = providers.Singleton(
        _lazy(f'{CORE}.pedidos.ports.InMemoryPedidoRepository')
    )
    proposta_repository = providers.Singleton(
        _lazy(f'{CORE}.pedidos.ports.InMemoryPropostaRepository')
    )
    refresh_token_repository = providers.Singleton(
        _lazy(f'{CORE}.autenticacao.ports.InMemoryRefreshTokenRepository')
    )


# =============================================================================
# Services
# =============================================================================

class Services(containers.DeclarativeContainer):
    """Casos de uso. Dependências são injetadas pelo container principal."""

    config = providers.Configuration()
    repositories = providers.DependenciesContainer()
    unit_of_work = providers.Dependency()
    hasher = providers.Dependency()
    gerador_token = providers.Dependency()

    cultura_service = providers.Factory(
        _lazy(f'{CORE}.culturas.use_cases.CulturaService'),
        cultura_repo=repositories.cultura_repository,
        uow=unit_of_work,
    )

    safra_service = providers.Factory(
        _lazy(f'{CORE}.safras.use_cases.SafraService'),
        safra_repo=repositories.safra_repository,
        uow=unit_of_work,
    )

    usuario_service = providers.Factory(
        _lazy(f'{CORE}.usuarios.use_cases.UsuarioService'),
        usuario_repo=repositories.usuario_repository,
        hasher=hasher,
        uow=unit_of_work,
    )

    fornecedor_service = providers.Factory(
        _lazy(f'{CORE}.fornecedores.use_cases.FornecedorService'),
        fornecedor_repo=repositories.fornecedor_repository,
        usuario_fornecedor_repo=repositories.usuario_fornecedor_repository,
        usuario_repo=repositories.usuario_repository,
        uow=unit_of_work,
    )

    produtor_service = providers.Factory(
        _lazy(f'{CORE}.produtores.use_cases.ProdutorService'),
        produtor_repo=repositories.produtor_repository,
        cultura_repo=repositories.cultura_repository,
        uow=unit_of_work,
    )

    propriedade_service = providers.Factory(
        _lazy(f'{CORE}.propriedades.use_cases.PropriedadeService'),
        propriedade_repo=repositories.propriedade_repository,
        produtor_repo=repositories.produtor_repository,
        cultura_repo=repositories.cultura_repository,
        uow=unit_of_work,
    )

    catalogo_service = providers.Factory(
        _lazy(f'{CORE}.catalogos.use_cases.CatalogoService'),
        catalogo_repo=repositories.catalogo_repository,
        uow=unit_of_work,
    )

    segmentacao_service = providers.Factory(
        _lazy(f'{CORE}.segmentacoes.use_cases.SegmentacaoService'),
        segmentacao_repo=repositories.segmentacao_repository,
        uow=unit_of_work,
    )

    # Leitura apenas (sem UoW)
    calculo_desconto_segmentado_service = providers.Factory(
        _lazy(f'{CORE}.segmentacoes.use_cases.CalculoDescontoSegmentadoService'),
        segmentacao_repo=repositories.segmentacao_repository,
    )

    forma_pagamento_service = providers.Factory(
        _lazy(f'{CORE}.pagamentos.use_cases.FormaPagamentoService'),
        forma_pagamento_repo=repositories.forma_pagamento_repository,
        uow=unit_of_work,
    )

    cultura_forma_pagamento_service = providers.Factory(
        _lazy(f'{CORE}.pagamentos.use_cases.CulturaFormaPagamentoService'),
        cultura_forma_pagamento_repo=repositories.cultura_forma_pagamento_repository,
        forma_pagamento_repo=repositories.forma_pagamento_repository,
        uow=unit_of_work,
    )

    combo_service = providers.Factory(
        _lazy(f'{CORE}.combos.use_cases.ComboService'),
        combo_repo=repositories.combo_repository,
        uow=unit_of_work,
    )

    marcar_combos_expirados_service = providers.Factory(
        _lazy(f'{CORE}.combos.use_cases.MarcarCombosExpiradosService'),
        combo_repo=repositories.combo_repository,
        uow=unit_of_work,
    )

    carrinho_compras_service = providers.Factory(
        _lazy(f'{CORE}.pedidos.use_cases.CarrinhoComprasService'),
        catalogo_repo=repositories.catalogo_repository,
        produtor_repo=repositories.produtor_repository,
        calculo_desconto_service=calculo_desconto_segmentado_service,
        proposta_repo=repositories.proposta_repository,
    )

    pedido_service = providers.Factory(
        _lazy(f'{CORE}.pedidos.use_cases.PedidoService'),
        pedido_repo=repositories.pedido_repository,
        proposta_repo=repositories.proposta_repository,
        fornecedor_repo=repositories.fornecedor_repository,
        produtor_repo=repositories.produtor_repository,
        carrinho_service=carrinho_compras_service,
        uow=unit_of_work,
        dias_limite_padrao=config.pedido_dias_limite_interacao.as_int(),
    )

    proposta_service = providers.Factory(
        _lazy(f'{CORE}.pedidos.use_cases.PropostaService'),
        pedido_repo=repositories.pedido_repository,
        proposta_repo=repositories.proposta_repository,
        uow=unit_of_work,
    )

    transporte_service = providers.Factory(
        _lazy(f'{CORE}.pedidos.use_cases.TransporteService'),
        pedido_repo=repositories.pedido_repository,
        uow=unit_of_work,
    )

    cancelar_pedidos_prazo_service = providers.Factory(
        _lazy(f'{CORE}.pedidos.use_cases.CancelarPedidosComPrazoUltrapassadoService'),
        pedido_repo=repositories.pedido_repository,
        uow=unit_of_work,
    )

    autenticacao_service = providers.Factory(
        _lazy(f'{CORE}.autenticacao.use_cases.AutenticacaoService'),
        usuario_repo=repositories.usuario_repository,
        refresh_token_repo=repositories.refresh_token_repository,
        hasher=hasher,
        gerador_token=gerador_token,
        uow=unit_of_work,
        refresh_token_dias=config.auth_refresh_token_dias.as_int(),
    )


# =============================================================================
# Container principal
# =============================================================================

class Container(containers.DeclarativeContainer):
    """
    Container principal.

    Example:
        container = Container()
        container.config.from_dict(config_from_settings())
        container.services.proposta_service().criar_proposta(...)
    """

    config = providers.Configuration()

    # Infrastructure
    event_publisher = providers.Singleton(
        lambda mode: __import__(
            f'{DJANGO_APP}.events.publishers',
            fromlist=['get_event_publisher']
        ).get_event_publisher(mode or 'logging'),
        mode=config.event_publisher_mode,
    )

    event_store = providers.Singleton(
        _lazy(f'{DJANGO_APP}.eventos.repositories.DjangoEventStore')
    )

    unit_of_work = providers.Factory(
        _lazy(f'{DJANGO_APP}.shared.unit_of_work.DjangoUnitOfWork'),
        event_publisher=event_publisher,
        event_store=event_store,
    )

    hasher = providers.Singleton(
        _lazy(f'{DJANGO_APP}.autenticacao.security.DjangoHasherSenha')
    )

    gerador_token = providers.Singleton(
        _lazy(f'{DJANGO_APP}.autenticacao.security.DjangoGeradorToken'),
        access_token_minutos=config.auth_access_token_minutos.as_int(),
    )

    repositories = providers.Container(Repositories)

    services = providers.Container(
        Services,
        config=config,
        repositories=repositories,
        unit_of_work=unit_of_work,
        hasher=hasher,
        gerador_token=gerador_token,
    )


class TestingContainer(containers.DeclarativeContainer):
    """
    Container para testes: repositórios em memória e UoW compartilhada.

    A UoW é Singleton para que os testes inspecionem os eventos publicados.

    Example:
        container = TestingContainer()
        container.config.from_dict(config_from_settings())
        uow = container.unit_of_work()
        container.services.pedido_service().criar(dto)
        assert uow.published_events
    """

    config = providers.Configuration()

    event_publisher = providers.Singleton(
        _lazy(f'{DJANGO_APP}.events.publishers.InMemoryEventPublisher')
    )

    unit_of_work = providers.Singleton(
        _lazy(f'{DJANGO_APP}.shared.unit_of_work.InMemoryUnitOfWork'),
        event_publisher=event_publisher,
    )

    hasher = providers.Singleton(
        _lazy(f'{DJANGO_APP}.autenticacao.security.DjangoHasherSenha')
    )

    gerador_token = providers.Singleton(
        _lazy(f'{DJANGO_APP}.autenticacao.security.DjangoGeradorToken'),
        access_token_minutos=config.auth_access_token_minutos.as_int(),
    )

    repositories = providers.Container(InMemoryRepositories)

    services = providers.Container(
        Services,
        config=config,
        repositories=repositories,
        unit_of_work=unit_of_work,
        hasher=hasher,
        gerador_token=gerador_token,
    )


# =============================================================================
# Container Global
# =============================================================================

def config_from_settings() -> Dict[str, Any]:
    """Lê do settings.py os parâmetros usados pelos providers."""
    from django.conf import settings

    return {
        'event_publisher_mode': getattr(settings, 'EVENT_PUBLISHER_MODE', 'logging'),
        'pedido_dias_limite_interacao': getattr(settings, 'PEDIDO_DIAS_LIMITE_INTERACAO', 7),
        'auth_access_token_minutos': getattr(settings, 'AUTH_ACCESS_TOKEN_MINUTOS', 60),
        'auth_refresh_token_dias': getattr(settings, 'AUTH_REFRESH_TOKEN_DIAS', 60),
    }


_container: Optional[Container] = None


def get_container() -> Container:
    """
    Retorna instância global do container (criada sob demanda).
    """
    global _container

    if _container is None:
        _container = Container()
        _container.config.from_dict(config_from_settings())

    return _container


def set_container(container) -> None:
    """Substitui o container global (testes com TestingContainer)."""
    global _container
    _container = container


def reset_container() -> None:
    """Reset do container (para testes)."""
    global _container
    _container = None
