"""
Testes de Integração End-to-End.

Fluxo completo via HTTP:
- Request → URLconf → View → Service → Repositório em memória
- Domain Events publicados pela UoW após cada commit

O container global é substituído pelo TestingContainer.
Executar com: pytest --run-integration
"""

import json
from datetime import date, timedelta

import pytest
from django.test import Client

from agriis.config.container import (
    TestingContainer,
    config_from_settings,
    reset_container,
    set_container,
)
from agriis.core.catalogos.entities import Catalogo, CatalogoItem
from agriis.core.fornecedores.entities import Fornecedor, Moeda
from agriis.core.produtores.entities import Produtor, StatusProdutor
from agriis.core.segmentacoes.entities import Grupo, GrupoSegmentacao, Segmentacao
from agriis.core.shared.value_objects import AreaPlantio
from agriis.core.usuarios.dtos import CriarUsuarioInputDTO

pytestmark = [pytest.mark.integration, pytest.mark.django_db]


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def container():
    container = TestingContainer()
    container.config.from_dict(config_from_settings())
    set_container(container)
    yield container
    reset_container()


@pytest.fixture
def api():
    return Client()


@pytest.fixture
def dados(container):
    """Fornecedor, produtor de 80 ha, catálogo vigente e segmentação padrão."""
    repos = container.repositories

    fornecedor = repos.fornecedor_repository().save(
        Fornecedor.criar("Agro Insumos", "11.222.333/0001-81")
    )

    produtor = Produtor.criar(
        "Fazenda Santa Rita", cpf="529.982.247-25", area_plantio=AreaPlantio.criar(80)
    )
    produtor.atualizar_status(StatusProdutor.AUTORIZADO_MANUALMENTE, usuario_autorizacao_id=1)
    repos.produtor_repository().save(produtor)

    catalogo = Catalogo.criar(
        safra_id=1,
        ponto_distribuicao_id=1,
        cultura_id=1,
        categoria_id=5,
        moeda=Moeda.REAL,
        data_inicio=date.today() - timedelta(days=10),
    )
    catalogo.adicionar_item(CatalogoItem.criar(
        produto_id=10, estrutura_precos={"estados": {"MT": 100}, "padrao": 120},
    ))
    repos.catalogo_repository().save(catalogo)

    segmentacao = Segmentacao.criar("Porte", fornecedor_id=fornecedor.id, eh_padrao=True)
    pequeno = Grupo.criar("Pequeno", area_minima=0, area_maxima=100)
    pequeno.adicionar_desconto(GrupoSegmentacao.criar(categoria_id=5, percentual_desconto=5))
    segmentacao.adicionar_grupo(pequeno)
    repos.segmentacao_repository().save(segmentacao)

    return {'fornecedor_id': fornecedor.id, 'produtor_id': produtor.id}


def _login(api, container, email, roles):
    container.services.usuario_service().criar(CriarUsuarioInputDTO(
        nome=email.split('@')[0], email=email, senha='abc123', roles=roles,
    ))
    response = api.post(
        '/api/autenticacao/login/',
        data=json.dumps({'email': email, 'senha': 'abc123'}),
        content_type='application/json',
    )
    assert response.status_code == 200
    return response.json()['data']['access_token']


def _post(api, path, body, token=None, client_id=None):
    headers = {}
    if token:
        headers['HTTP_AUTHORIZATION'] = f'Bearer {token}'
    if client_id:
        headers['HTTP_X_CLIENT_ID'] = client_id
    return api.post(path, data=json.dumps(body), content_type='application/json', **headers)


# =============================================================================
# Fluxo de negociação
# =============================================================================

class TestNegociacaoCompleta:

    def test_produtor_aceita_proposta_do_fornecedor(self, api, container, dados):
        token_produtor = _login(api, container, 'produtor@fazenda.com', ('COMPRADOR',))
        token_fornecedor = _login(
            api, container, 'vendas@agro.com', ('FORNECEDOR_WEB_REPRESENTANTE',)
        )

        criado = _post(api, '/api/pedidos/', dados)
        assert criado.status_code == 201
        pedido_id = criado.json()['data']['id']

        inicio = _post(
            api, f'/api/pedidos/{pedido_id}/propostas/', {},
            token=token_produtor, client_id='PRODUTOR_MOBILE',
        )
        assert inicio.json()['data']['acao_comprador'] == 'Iniciou'

        item = _post(
            api, f'/api/pedidos/{pedido_id}/itens/',
            {'produto_id': 10, 'quantidade': 2, 'uf': 'MT'},
            token=token_produtor,
        )
        assert item.status_code == 201
        assert item.json()['data']['totais']['valor_liquido'] == 190.0

        contraproposta = _post(
            api, f'/api/pedidos/{pedido_id}/propostas/',
            {'observacao': 'Frete incluso para entrega em março'},
            token=token_fornecedor, client_id='FORNECEDOR_WEB',
        )
        assert contraproposta.status_code == 201

        aceite = _post(
            api, f'/api/pedidos/{pedido_id}/propostas/', {'acao_comprador': 'Aceitou'},
            token=token_produtor, client_id='PRODUTOR_MOBILE',
        )
        assert aceite.status_code == 201

        pedido = api.get(f'/api/pedidos/{pedido_id}/').json()['data']
        assert pedido['status'] == 'Fechado'

        propostas = api.get(f'/api/pedidos/{pedido_id}/propostas/').json()['data']
        assert propostas['total'] == 4
        assert propostas['items'][0]['acao_comprador'] == 'Aceitou'

        tipos = [e.event_type for e in container.unit_of_work().published_events]
        assert 'PedidoCriadoEvent' in tipos
        assert 'PedidoFechadoEvent' in tipos

    def test_fornecedor_nao_negocia_pedido_fechado(self, api, container, dados):
        token_produtor = _login(api, container, 'produtor@fazenda.com', ('COMPRADOR',))
        pedido_id = _post(api, '/api/pedidos/', dados).json()['data']['id']
        _post(api, f'/api/pedidos/{pedido_id}/itens/', {'produto_id': 10, 'quantidade': 1})
        _post(
            api, f'/api/pedidos/{pedido_id}/propostas/', {},
            token=token_produtor, client_id='PRODUTOR_MOBILE',
        )
        _post(
            api, f'/api/pedidos/{pedido_id}/propostas/', {'acao_comprador': 'Aceitou'},
            token=token_produtor, client_id='PRODUTOR_MOBILE',
        )

        response = _post(
            api, f'/api/pedidos/{pedido_id}/propostas/', {'observacao': 'Nova condição'},
            token=token_produtor, client_id='FORNECEDOR_WEB',
        )

        assert response.status_code == 400
        assert response.json()['meta']['error_code'] == 'PEDIDO_FECHADO'

    def test_proposta_sem_token(self, api, container, dados):
        pedido_id = _post(api, '/api/pedidos/', dados).json()['data']['id']

        response = _post(
            api, f'/api/pedidos/{pedido_id}/propostas/', {}, client_id='PRODUTOR_MOBILE'
        )

        assert response.status_code == 401


class TestCancelamentoPorPrazo:

    def test_job_cancela_pedido_vencido(self, api, container, dados):
        pedido_id = _post(api, '/api/pedidos/', dados).json()['data']['id']
        pedido = container.repositories.pedido_repository().get_by_id(pedido_id)

        cancelados = container.services.cancelar_pedidos_prazo_service().execute(
            agora=pedido.data_limite_interacao + timedelta(minutes=1)
        )

        assert cancelados == 1
        assert api.get(f'/api/pedidos/{pedido_id}/').json()['data']['status'] == (
            'CanceladoPorTempoLimite'
        )


class TestHealth:

    def test_health_check(self, api):
        assert api.get('/health/').json() == {'status': 'ok'}
