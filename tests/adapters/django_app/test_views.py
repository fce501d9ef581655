"""
Testes das API Views JSON.

Testa:
- Formato {success, data/error, meta}
- Conversão de Result e de exceções em status HTTP
- Autenticação por Bearer token e canal X-Client-Id nas propostas
"""

import json

import pytest

from agriis.adapters.django_app.autenticacao.api_views import (
    AlterarSenhaAPIView,
    LoginAPIView,
    LogoutAPIView,
)
from agriis.adapters.django_app.culturas.api_views import (
    CulturaAPIDetailView,
    CulturaAPIListView,
)
from agriis.adapters.django_app.pedidos.api_views import (
    FreteAPICalcularConsolidadoView,
    FreteAPICalcularView,
    PedidoAPIAcaoView,
    PedidoAPIDetailView,
    PedidoAPIItensView,
    PedidoAPIListView,
    PedidoAPIReagendarTransporteView,
    PedidoAPITransportesListView,
    PedidoAPITransportesValidarView,
    PedidoAPIValorFreteView,
    PropostaAPIListView,
)
from agriis.adapters.django_app.shared.api import (
    get_bearer_token,
    json_response,
    parse_date,
    parse_json_body,
)
from agriis.core.shared.exceptions import (
    BusinessRuleViolationError,
    EntityNotFoundError,
    ValidationError,
)
from agriis.core.shared.results import Result


def _json(response):
    return json.loads(response.content)


def _post(rf, path, body, **extra):
    return rf.post(path, data=json.dumps(body), content_type='application/json', **extra)


# =============================================================================
# Helpers
# =============================================================================

class TestHelpers:

    def test_json_response_com_meta(self):
        response = json_response(success=True, data=[], meta={'total': 0})

        assert _json(response) == {'success': True, 'data': [], 'meta': {'total': 0}}

    def test_json_response_erro(self):
        response = json_response(success=False, error='Algo deu errado', status=400)

        assert response.status_code == 400
        assert _json(response) == {'success': False, 'error': 'Algo deu errado'}

    def test_parse_json_body_invalido(self, rf):
        request = rf.post('/', data='[1, 2]', content_type='application/json')

        with pytest.raises(ValueError):
            parse_json_body(request)

    def test_bearer_token(self, rf):
        assert get_bearer_token(rf.get('/', HTTP_AUTHORIZATION='Bearer abc')) == 'abc'
        assert get_bearer_token(rf.get('/', HTTP_AUTHORIZATION='Basic abc')) is None

    def test_parse_date_invalida(self):
        with pytest.raises(ValidationError) as exc_info:
            parse_date('01/02/2025', 'data_inicio')

        assert exc_info.value.field == 'data_inicio'


# =============================================================================
# Exceções -> status HTTP
# =============================================================================

class TestCulturaAPI:

    def test_listar_ativas(self, rf, service_mock):
        service = service_mock('cultura_service')
        service.listar_ativas.return_value = []

        response = CulturaAPIListView().get(rf.get('/api/culturas/', {'ativas': 'true'}))

        assert response.status_code == 200
        service.listar_ativas.assert_called_once_with()
        service.listar.assert_not_called()

    def test_criar_sem_nome(self, rf, service_mock):
        service_mock('cultura_service')

        response = CulturaAPIListView().post(_post(rf, '/api/culturas/', {}))

        assert response.status_code == 400
        assert _json(response)['error'] == 'Campo obrigatório: nome'
        assert _json(response)['meta']['field'] == 'nome'

    @pytest.mark.parametrize(
        'erro, status',
        [
            (EntityNotFoundError('Cultura não encontrada', 'Cultura', 9), 404),
            (BusinessRuleViolationError('Já existe uma cultura com este nome', rule='x'), 422),
            (ValidationError('Nome inválido', field='nome'), 400),
            (RuntimeError('boom'), 500),
        ],
    )
    def test_excecoes(self, rf, service_mock, erro, status):
        service_mock('cultura_service').obter_por_id.side_effect = erro

        response = CulturaAPIDetailView().get(rf.get('/api/culturas/9/'), pk=9)

        assert response.status_code == status
        assert _json(response)['success'] is False
        if status == 500:
            assert _json(response)['error'] == 'Erro interno do servidor'
        else:
            assert '[' not in _json(response)['error']


# =============================================================================
# Pedidos e Propostas (Result)
# =============================================================================

class TestPedidoAPI:

    def test_listar_exige_filtro(self, rf, service_mock):
        service_mock('pedido_service')

        response = PedidoAPIListView().get(rf.get('/api/pedidos/'))

        assert response.status_code == 400

    def test_listar_por_produtor(self, rf, service_mock):
        service = service_mock('pedido_service')
        service.listar_por_produtor.return_value = Result.success([{'id': 1}])

        response = PedidoAPIListView().get(rf.get('/api/pedidos/', {'produtor_id': '3'}))

        assert _json(response)['data'] == [{'id': 1}]
        service.listar_por_produtor.assert_called_once_with(3)

    def test_criar(self, rf, service_mock):
        service = service_mock('pedido_service')
        service.criar.return_value = Result.success({'id': 7})

        response = PedidoAPIListView().post(_post(rf, '/api/pedidos/', {
            'fornecedor_id': 1, 'produtor_id': '2', 'dias_limite_interacao': 5,
        }))

        assert response.status_code == 201
        dto = service.criar.call_args[0][0]
        assert (dto.fornecedor_id, dto.produtor_id, dto.dias_limite_interacao) == (1, 2, 5)
        assert dto.permite_contato is False

    def test_pedido_nao_encontrado(self, rf, service_mock):
        service_mock('pedido_service').obter_por_id.return_value = Result.failure(
            'Pedido não encontrado', 'PEDIDO_NAO_ENCONTRADO'
        )

        response = PedidoAPIDetailView().get(rf.get('/api/pedidos/5/'), pk=5)

        assert response.status_code == 404
        assert _json(response)['meta']['error_code'] == 'PEDIDO_NAO_ENCONTRADO'

    def test_acao_fechar(self, rf, service_mock):
        service = service_mock('pedido_service')
        service.fechar.return_value = Result.failure(
            'Não é possível fechar um pedido sem itens', 'PEDIDO_SEM_ITENS'
        )

        view = PedidoAPIAcaoView(acao='fechar')
        response = view.post(rf.post('/api/pedidos/5/fechar/'), pk=5)

        assert response.status_code == 400
        service.fechar.assert_called_once_with(5)

    def test_adicionar_item_com_usuario(self, rf, service_mock, usuario_autenticado):
        service = service_mock('pedido_service')
        service.adicionar_item_carrinho.return_value = Result.success({'id': 5})

        request = _post(
            rf, '/api/pedidos/5/itens/', {'produto_id': 10, 'quantidade': '2.5', 'uf': 'MT'},
            HTTP_AUTHORIZATION='Bearer token',
        )
        response = PedidoAPIItensView().post(request, pk=5)

        assert response.status_code == 201
        args, kwargs = service.adicionar_item_carrinho.call_args
        assert str(args[1].quantidade) == '2.5'
        assert kwargs['usuario_id'] == usuario_autenticado


class TestTransporteAPI:

    def test_calcular_frete(self, rf, service_mock):
        service = service_mock('transporte_service')
        service.calcular_frete.return_value = Result.success({'valor_frete': 37500.0})

        response = FreteAPICalcularView().post(_post(rf, '/api/pedidos/frete/calcular/', {
            'quantidade': 100, 'altura': 50, 'largura': 40, 'comprimento': 30,
            'peso_nominal': '25', 'distancia_km': 300, 'tipo_calculo_peso': 'PesoCubado',
        }))

        assert _json(response)['data'] == {'valor_frete': 37500.0}
        dto = service.calcular_frete.call_args[0][0]
        assert dto.item.tipo_calculo_peso == 'PesoCubado'
        assert dto.item.densidade is None
        assert dto.valor_minimo_frete is None

    def test_calcular_frete_sem_dimensoes(self, rf, service_mock):
        service = service_mock('transporte_service')

        response = FreteAPICalcularView().post(_post(rf, '/api/pedidos/frete/calcular/', {
            'quantidade': 100, 'distancia_km': 300,
        }))

        assert response.status_code == 400
        assert _json(response)['error'] == 'Campo obrigatório: altura'
        service.calcular_frete.assert_not_called()

    def test_calcular_frete_consolidado(self, rf, service_mock):
        service = service_mock('transporte_service')
        service.calcular_frete_consolidado.return_value = Result.success({})
        item = {'quantidade': 1, 'altura': 10, 'largura': 10, 'comprimento': 10, 'peso_nominal': 2}

        FreteAPICalcularConsolidadoView().post(
            _post(rf, '/api/pedidos/frete/calcular-consolidado/', {
                'itens': [item, item], 'distancia_km': '12.5',
            })
        )

        dto = service.calcular_frete_consolidado.call_args[0][0]
        assert len(dto.itens) == 2
        assert str(dto.distancia_km) == '12.5'

    def test_listar_transportes_pedido_inexistente(self, rf, service_mock):
        service_mock('transporte_service').listar_transportes_pedido.return_value = (
            Result.failure('Pedido não encontrado', 'ENTITY_NOT_FOUND')
        )

        response = PedidoAPITransportesListView().get(rf.get('/api/pedidos/9/transportes/'), pk=9)

        assert response.status_code == 404

    def test_reagendar(self, rf, service_mock):
        service = service_mock('transporte_service')
        service.reagendar_transporte.return_value = Result.success({'id': 3})

        request = rf.put(
            '/api/pedidos/5/transportes/3/reagendar/',
            data=json.dumps({'nova_data_agendamento': '2025-03-20T08:00:00'}),
            content_type='application/json',
        )
        response = PedidoAPIReagendarTransporteView().put(request, pk=5, transporte_id=3)

        assert response.status_code == 200
        pedido_id, transporte_id, dto = service.reagendar_transporte.call_args[0]
        assert (pedido_id, transporte_id) == (5, 3)
        assert dto.nova_data_agendamento.day == 20

    def test_atualizar_valor_frete_sem_valor(self, rf, service_mock):
        service = service_mock('transporte_service')

        request = rf.put(
            '/api/pedidos/5/transportes/3/frete/',
            data=json.dumps({'motivo': 'Diesel'}),
            content_type='application/json',
        )
        response = PedidoAPIValorFreteView().put(request, pk=5, transporte_id=3)

        assert response.status_code == 400
        service.atualizar_valor_frete.assert_not_called()

    def test_validar_agendamentos(self, rf, service_mock):
        service = service_mock('transporte_service')
        service.validar_multiplos_agendamentos.return_value = Result.success(
            {'eh_valido': True, 'erros': []}
        )

        response = PedidoAPITransportesValidarView().post(
            _post(rf, '/api/pedidos/5/transportes/validar/', {'agendamentos': [
                {'pedido_item_id': '4', 'quantidade': 2, 'data_agendamento': '2025-03-20'},
            ]}),
            pk=5,
        )

        assert _json(response)['data']['eh_valido'] is True
        pedido_id, solicitacoes = service.validar_multiplos_agendamentos.call_args[0]
        assert pedido_id == 5
        assert solicitacoes[0].pedido_item_id == 4


class TestPropostaAPI:

    def test_criar_sem_token(self, rf, container):
        response = PropostaAPIListView().post(
            _post(rf, '/api/pedidos/5/propostas/', {'acao_comprador': 'Iniciou'}), pk=5
        )

        assert response.status_code == 401

    def test_criar_com_client_id(self, rf, service_mock, usuario_autenticado):
        service = service_mock('proposta_service')
        service.criar_proposta.return_value = Result.success({'id': 1})

        request = _post(
            rf, '/api/pedidos/5/propostas/', {'acao_comprador': 'Aceitou'},
            HTTP_AUTHORIZATION='Bearer token', HTTP_X_CLIENT_ID='PRODUTOR_MOBILE',
        )
        response = PropostaAPIListView().post(request, pk=5)

        assert response.status_code == 201
        pedido_id, usuario_id, client_id, dto = service.criar_proposta.call_args[0]
        assert (pedido_id, usuario_id, client_id) == (5, 10, 'PRODUTOR_MOBILE')
        assert dto.acao_comprador == 'Aceitou'

    def test_listar_paginado(self, rf, service_mock):
        service = service_mock('proposta_service')
        service.listar_propostas.return_value = Result.success([])

        PropostaAPIListView().get(rf.get('/api/pedidos/5/propostas/', {'pagina': '2'}), pk=5)

        service.listar_propostas.assert_called_once_with(5, 2, 20)


# =============================================================================
# Autenticação
# =============================================================================

class TestAutenticacaoAPI:

    def test_login_invalido_retorna_401(self, rf, service_mock):
        service_mock('autenticacao_service').login.return_value = Result.failure(
            'Email ou senha inválidos', 'CREDENCIAIS_INVALIDAS'
        )

        response = LoginAPIView().post(
            _post(rf, '/api/autenticacao/login/', {'email': 'a@b.com', 'senha': 'x'})
        )

        assert response.status_code == 401
        assert _json(response)['error'] == 'Email ou senha inválidos'

    def test_login_exige_senha(self, rf, service_mock):
        service_mock('autenticacao_service')

        response = LoginAPIView().post(_post(rf, '/api/autenticacao/login/', {'email': 'a@b.com'}))

        assert response.status_code == 400

    def test_logout(self, rf, usuario_autenticado, container):
        service = container.services.autenticacao_service.return_value
        service.logout.return_value = Result.success(True)

        request = _post(rf, '/api/autenticacao/logout/', {}, HTTP_AUTHORIZATION='Bearer token')
        response = LogoutAPIView().post(request)

        assert _json(response)['data'] is True
        service.logout.assert_called_once_with(10, None)

    def test_alterar_senha_sem_token(self, rf, container):
        response = AlterarSenhaAPIView().post(
            _post(rf, '/api/autenticacao/alterar-senha/', {'senha_atual': 'a', 'nova_senha': 'b'})
        )

        assert response.status_code == 401
