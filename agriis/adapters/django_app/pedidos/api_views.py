"""
API Views JSON para Pedidos e Propostas.

Endpoints:
- GET  /api/pedidos/?produtor_id=|fornecedor_id=|status=  - Listar
- POST /api/pedidos/                                       - Criar
- GET  /api/pedidos/proximos-prazo-limite/?dias_antes=1
- GET  /api/pedidos/prazo-ultrapassado/
- GET|PUT /api/pedidos/<id>/                               - Obter / Atualizar preferências
- POST /api/pedidos/<id>/fechar/
- POST /api/pedidos/<id>/cancelar/
- PUT  /api/pedidos/<id>/prazo-limite/                     - {"dias": 5}
- POST /api/pedidos/<id>/totais/                           - Recalcular totais
- POST /api/pedidos/<id>/itens/                            - Adicionar item ao carrinho
- PUT|DELETE /api/pedidos/<id>/itens/<item_id>/            - Quantidade / remover
- POST /api/pedidos/<id>/itens/<item_id>/transportes/      - Agendar transporte
- GET  /api/pedidos/<id>/transportes/                      - Listar transportes
- GET  /api/pedidos/<id>/transportes/resumo/
- POST /api/pedidos/<id>/transportes/validar/              - Validar lote de agendamentos
- PUT  /api/pedidos/<id>/transportes/<transporte_id>/reagendar/
- PUT  /api/pedidos/<id>/transportes/<transporte_id>/frete/  - {"novo_valor_frete": 120}
- POST /api/pedidos/frete/calcular/
- POST /api/pedidos/frete/calcular-consolidado/
- GET|POST /api/pedidos/<id>/propostas/                    - Listar / criar proposta
- GET  /api/pedidos/<id>/propostas/ultima/

Propostas exigem "Authorization: Bearer <token>" e o canal em
"X-Client-Id" (PRODUTOR_MOBILE ou FORNECEDOR_WEB).
"""

import logging

from django.http import HttpRequest, JsonResponse

from agriis.core.pedidos.dtos import (
    AdicionarItemCarrinhoInputDTO,
    AgendarTransporteInputDTO,
    AtualizarPedidoInputDTO,
    AtualizarValorFreteInputDTO,
    CalcularFreteConsolidadoInputDTO,
    CalcularFreteInputDTO,
    CriarPedidoInputDTO,
    CriarPropostaInputDTO,
    ItemFreteInputDTO,
    ReagendarTransporteInputDTO,
    SolicitacaoAgendamentoInputDTO,
)

from ..shared.api import (
    BaseAPIView,
    get_user_id,
    json_response,
    parse_bool,
    parse_datetime,
    parse_decimal,
    parse_int,
    require_fields,
)

logger = logging.getLogger(__name__)


class PedidoAPIListView(BaseAPIView):

    def get(self, request: HttpRequest) -> JsonResponse:
        try:
            service = self.get_service('pedido_service')
            produtor_id = parse_int(request.GET.get('produtor_id'), 'produtor_id')
            fornecedor_id = parse_int(request.GET.get('fornecedor_id'), 'fornecedor_id')
            status = request.GET.get('status')

            if produtor_id is not None:
                result = service.listar_por_produtor(produtor_id)
            elif fornecedor_id is not None:
                result = service.listar_por_fornecedor(fornecedor_id)
            elif status:
                result = service.listar_por_status(status)
            else:
                return json_response(
                    success=False,
                    error="Informe produtor_id, fornecedor_id ou status",
                    status=400,
                )
            return self.result_response(result)
        except Exception as e:
            return self.handle_exception(e)

    def post(self, request: HttpRequest) -> JsonResponse:
        try:
            data = self.parse_body(request)
            require_fields(data, ['fornecedor_id', 'produtor_id'])

            result = self.get_service('pedido_service').criar(
                CriarPedidoInputDTO(
                    fornecedor_id=parse_int(data['fornecedor_id'], 'fornecedor_id'),
                    produtor_id=parse_int(data['produtor_id'], 'produtor_id'),
                    permite_contato=bool(parse_bool(data.get('permite_contato'))),
                    negociar_pedido=bool(parse_bool(data.get('negociar_pedido'))),
                    dias_limite_interacao=parse_int(
                        data.get('dias_limite_interacao'), 'dias_limite_interacao'
                    ),
                )
            )
            if result.is_success:
                logger.info(f"API: Pedido criado: {result.value.id}")
            return self.result_response(result, status=201)
        except Exception as e:
            return self.handle_exception(e)


class PedidoAPIProximosPrazoView(BaseAPIView):

    def get(self, request: HttpRequest) -> JsonResponse:
        try:
            dias_antes = parse_int(request.GET.get('dias_antes'), 'dias_antes') or 1
            return self.result_response(
                self.get_service('pedido_service').listar_proximos_prazo_limite(dias_antes)
            )
        except Exception as e:
            return self.handle_exception(e)


class PedidoAPIPrazoUltrapassadoView(BaseAPIView):

    def get(self, request: HttpRequest) -> JsonResponse:
        try:
            return self.result_response(
                self.get_service('pedido_service').listar_com_prazo_ultrapassado()
            )
        except Exception as e:
            return self.handle_exception(e)


class PedidoAPIDetailView(BaseAPIView):

    def get(self, request: HttpRequest, pk: int) -> JsonResponse:
        try:
            return self.result_response(self.get_service('pedido_service').obter_por_id(pk))
        except Exception as e:
            return self.handle_exception(e)

    def put(self, request: HttpRequest, pk: int) -> JsonResponse:
        try:
            data = self.parse_body(request)
            result = self.get_service('pedido_service').atualizar(
                pk,
                AtualizarPedidoInputDTO(
                    permite_contato=bool(parse_bool(data.get('permite_contato'))),
                    negociar_pedido=bool(parse_bool(data.get('negociar_pedido'))),
                ),
            )
            return self.result_response(result)
        except Exception as e:
            return self.handle_exception(e)


class PedidoAPIAcaoView(BaseAPIView):
    """POST sem corpo que dispara uma operação do PedidoService (fechar, cancelar...)."""

    acao = None

    def post(self, request: HttpRequest, pk: int) -> JsonResponse:
        try:
            service = self.get_service('pedido_service')
            return self.result_response(getattr(service, self.acao)(pk))
        except Exception as e:
            return self.handle_exception(e)


class PedidoAPIPrazoLimiteView(BaseAPIView):

    def put(self, request: HttpRequest, pk: int) -> JsonResponse:
        try:
            data = self.parse_body(request)
            require_fields(data, ['dias'])
            result = self.get_service('pedido_service').atualizar_prazo_limite(
                pk, parse_int(data['dias'], 'dias')
            )
            return self.result_response(result)
        except Exception as e:
            return self.handle_exception(e)


class PedidoAPIItensView(BaseAPIView):

    def post(self, request: HttpRequest, pk: int) -> JsonResponse:
        try:
            data = self.parse_body(request)
            require_fields(data, ['produto_id', 'quantidade'])

            result = self.get_service('pedido_service').adicionar_item_carrinho(
                pk,
                AdicionarItemCarrinhoInputDTO(
                    produto_id=parse_int(data['produto_id'], 'produto_id'),
                    quantidade=parse_decimal(data['quantidade'], 'quantidade'),
                    catalogo_id=parse_int(data.get('catalogo_id'), 'catalogo_id'),
                    uf=data.get('uf'),
                    observacoes=data.get('observacoes'),
                ),
                usuario_id=get_user_id(request),
            )
            return self.result_response(result, status=201)
        except Exception as e:
            return self.handle_exception(e)


class PedidoAPIItemDetailView(BaseAPIView):

    def put(self, request: HttpRequest, pk: int, item_id: int) -> JsonResponse:
        try:
            data = self.parse_body(request)
            require_fields(data, ['quantidade'])
            result = self.get_service('pedido_service').atualizar_quantidade_item(
                pk,
                item_id,
                parse_decimal(data['quantidade'], 'quantidade'),
                usuario_id=get_user_id(request),
            )
            return self.result_response(result)
        except Exception as e:
            return self.handle_exception(e)

    def delete(self, request: HttpRequest, pk: int, item_id: int) -> JsonResponse:
        try:
            result = self.get_service('pedido_service').remover_item_carrinho(
                pk, item_id, usuario_id=get_user_id(request)
            )
            return self.result_response(result)
        except Exception as e:
            return self.handle_exception(e)


class PedidoAPITransportesView(BaseAPIView):

    def post(self, request: HttpRequest, pk: int, item_id: int) -> JsonResponse:
        try:
            data = self.parse_body(request)
            require_fields(data, ['quantidade', 'data_agendamento'])

            result = self.get_service('pedido_service').agendar_transporte(
                pk,
                item_id,
                AgendarTransporteInputDTO(
                    quantidade=parse_decimal(data['quantidade'], 'quantidade'),
                    data_agendamento=parse_datetime(data['data_agendamento'], 'data_agendamento'),
                    valor_frete=parse_decimal(data.get('valor_frete', 0), 'valor_frete'),
                    endereco_origem=data.get('endereco_origem'),
                    endereco_destino=data.get('endereco_destino'),
                    peso_total=parse_decimal(data.get('peso_total'), 'peso_total'),
                    volume_total=parse_decimal(data.get('volume_total'), 'volume_total'),
                    observacoes=data.get('observacoes'),
                ),
            )
            return self.result_response(result, status=201)
        except Exception as e:
            return self.handle_exception(e)


class PropostaAPIListView(BaseAPIView):

    def get(self, request: HttpRequest, pk: int) -> JsonResponse:
        try:
            params = self.get_paginacao(request)
            result = self.get_service('proposta_service').listar_propostas(
                pk, params.pagina, params.por_pagina
            )
            return self.result_response(result)
        except Exception as e:
            return self.handle_exception(e)

    def post(self, request: HttpRequest, pk: int) -> JsonResponse:
        try:
            usuario_id = get_user_id(request)
            if usuario_id is None:
                return self.unauthorized()

            data = self.parse_body(request)
            client_id = request.headers.get('X-Client-Id') or data.get('client_id') or ''

            result = self.get_service('proposta_service').criar_proposta(
                pk,
                usuario_id,
                client_id,
                CriarPropostaInputDTO(
                    acao_comprador=data.get('acao_comprador'),
                    observacao=data.get('observacao'),
                ),
            )
            return self.result_response(result, status=201)
        except Exception as e:
            return self.handle_exception(e)


class PropostaAPIUltimaView(BaseAPIView):

    def get(self, request: HttpRequest, pk: int) -> JsonResponse:
        try:
            return self.result_response(
                self.get_service('proposta_service').obter_ultima_proposta(pk)
            )
        except Exception as e:
            return self.handle_exception(e)


# =============================================================================
# Transporte e frete
# =============================================================================

def _item_frete(data: dict) -> ItemFreteInputDTO:
    require_fields(data, ['quantidade', 'altura', 'largura', 'comprimento', 'peso_nominal'])
    return ItemFreteInputDTO(
        quantidade=parse_decimal(data['quantidade'], 'quantidade'),
        altura=parse_decimal(data['altura'], 'altura'),
        largura=parse_decimal(data['largura'], 'largura'),
        comprimento=parse_decimal(data['comprimento'], 'comprimento'),
        peso_nominal=parse_decimal(data['peso_nominal'], 'peso_nominal'),
        densidade=parse_decimal(data.get('densidade'), 'densidade'),
        tipo_calculo_peso=data.get('tipo_calculo_peso') or 'PesoNominal',
    )


class FreteAPICalcularView(BaseAPIView):

    def post(self, request: HttpRequest) -> JsonResponse:
        try:
            data = self.parse_body(request)
            require_fields(data, ['distancia_km'])
            result = self.get_service('transporte_service').calcular_frete(
                CalcularFreteInputDTO(
                    item=_item_frete(data),
                    distancia_km=parse_decimal(data['distancia_km'], 'distancia_km'),
                    valor_por_kg_km=parse_decimal(data.get('valor_por_kg_km'), 'valor_por_kg_km'),
                    valor_minimo_frete=parse_decimal(
                        data.get('valor_minimo_frete'), 'valor_minimo_frete'
                    ),
                )
            )
            return self.result_response(result)
        except Exception as e:
            return self.handle_exception(e)


class FreteAPICalcularConsolidadoView(BaseAPIView):

    def post(self, request: HttpRequest) -> JsonResponse:
        try:
            data = self.parse_body(request)
            require_fields(data, ['itens', 'distancia_km'])
            result = self.get_service('transporte_service').calcular_frete_consolidado(
                CalcularFreteConsolidadoInputDTO(
                    itens=[_item_frete(item) for item in data['itens']],
                    distancia_km=parse_decimal(data['distancia_km'], 'distancia_km'),
                    valor_por_kg_km=parse_decimal(data.get('valor_por_kg_km'), 'valor_por_kg_km'),
                    valor_minimo_frete=parse_decimal(
                        data.get('valor_minimo_frete'), 'valor_minimo_frete'
                    ),
                )
            )
            return self.result_response(result)
        except Exception as e:
            return self.handle_exception(e)


class PedidoAPITransportesListView(BaseAPIView):

    def get(self, request: HttpRequest, pk: int) -> JsonResponse:
        try:
            return self.result_response(
                self.get_service('transporte_service').listar_transportes_pedido(pk)
            )
        except Exception as e:
            return self.handle_exception(e)


class PedidoAPITransportesResumoView(BaseAPIView):

    def get(self, request: HttpRequest, pk: int) -> JsonResponse:
        try:
            return self.result_response(
                self.get_service('transporte_service').obter_resumo_transporte(pk)
            )
        except Exception as e:
            return self.handle_exception(e)


class PedidoAPITransportesValidarView(BaseAPIView):

    def post(self, request: HttpRequest, pk: int) -> JsonResponse:
        try:
            data = self.parse_body(request)
            require_fields(data, ['agendamentos'])

            solicitacoes = []
            for agendamento in data['agendamentos']:
                require_fields(agendamento, ['pedido_item_id', 'quantidade', 'data_agendamento'])
                solicitacoes.append(SolicitacaoAgendamentoInputDTO(
                    pedido_item_id=parse_int(agendamento['pedido_item_id'], 'pedido_item_id'),
                    quantidade=parse_decimal(agendamento['quantidade'], 'quantidade'),
                    data_agendamento=parse_datetime(
                        agendamento['data_agendamento'], 'data_agendamento'
                    ),
                ))

            result = self.get_service('transporte_service').validar_multiplos_agendamentos(
                pk, solicitacoes
            )
            return self.result_response(result)
        except Exception as e:
            return self.handle_exception(e)


class PedidoAPIReagendarTransporteView(BaseAPIView):

    def put(self, request: HttpRequest, pk: int, transporte_id: int) -> JsonResponse:
        try:
            data = self.parse_body(request)
            require_fields(data, ['nova_data_agendamento'])
            result = self.get_service('transporte_service').reagendar_transporte(
                pk,
                transporte_id,
                ReagendarTransporteInputDTO(
                    nova_data_agendamento=parse_datetime(
                        data['nova_data_agendamento'], 'nova_data_agendamento'
                    ),
                    observacoes=data.get('observacoes'),
                ),
            )
            return self.result_response(result)
        except Exception as e:
            return self.handle_exception(e)


class PedidoAPIValorFreteView(BaseAPIView):

    def put(self, request: HttpRequest, pk: int, transporte_id: int) -> JsonResponse:
        try:
            data = self.parse_body(request)
            require_fields(data, ['novo_valor_frete'])
            result = self.get_service('transporte_service').atualizar_valor_frete(
                pk,
                transporte_id,
                AtualizarValorFreteInputDTO(
                    novo_valor_frete=parse_decimal(data['novo_valor_frete'], 'novo_valor_frete'),
                    motivo=data.get('motivo'),
                ),
            )
            return self.result_response(result)
        except Exception as e:
            return self.handle_exception(e)
