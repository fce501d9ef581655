"""
Fixtures dos testes de adapters Django.

pytest-django configura o Django a partir de agriis.config.settings;
aqui ficam o container mockado das views e o usuário autenticado.
"""

from unittest.mock import Mock, patch

import pytest


@pytest.fixture
def container():
    """Container DI mockado para as views (get_container da camada de API)."""
    mock_container = Mock()
    with patch(
        'agriis.adapters.django_app.shared.api.get_container', return_value=mock_container
    ):
        yield mock_container


@pytest.fixture
def usuario_autenticado(container):
    """Faz qualquer Bearer token resolver para o usuário 10."""
    autenticacao = container.services.autenticacao_service.return_value
    autenticacao.obter_usuario_id_do_token.return_value = 10
    return 10


@pytest.fixture
def service_mock(container):
    """Registra um service mockado no container: service_mock('pedido_service')."""
    def registrar(nome):
        service = Mock()
        getattr(container.services, nome).return_value = service
        return service
    return registrar
