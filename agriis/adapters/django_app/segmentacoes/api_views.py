"""
API Views JSON para Segmentações.

Endpoints:
- GET  /api/segmentacoes/?fornecedor_id=<id>                  - Listar por fornecedor
- POST /api/segmentacoes/                                     - Criar
- GET  /api/segmentacoes/padrao/<fornecedor_id>/              - Segmentação padrão
- POST /api/segmentacoes/calcular-desconto/                   - Calcular desconto
- GET|PUT|DELETE /api/segmentacoes/<id>/                      - Obter / Atualizar / Remover
- POST /api/segmentacoes/<id>/ativar|desativar|padrao/        - Ciclo de vida
- POST /api/segmentacoes/<id>/grupos/                         - Adicionar grupo
- PUT|DELETE /api/segmentacoes/<id>/grupos/<grupo_id>/        - Atualizar / remover grupo
- POST|PUT /api/segmentacoes/<id>/grupos/<grupo_id>/descontos/             - Adicionar / atualizar desconto
- DELETE /api/segmentacoes/<id>/grupos/<grupo_id>/descontos/<categoria_id>/ - Remover desconto
"""

import logging

from django.http import HttpRequest, JsonResponse

from agriis.core.segmentacoes.dtos import (
    AtualizarSegmentacaoInputDTO,
    CriarSegmentacaoInputDTO,
    DescontoCategoriaInputDTO,
    GrupoInputDTO,
)

from ..shared.api import (
    BaseAPIView,
    json_response,
    parse_bool,
    parse_decimal,
    parse_int,
    require_fields,
)

logger = logging.getLogger(__name__)


def _grupo_input(data: dict) -> GrupoInputDTO:
    require_fields(data, ['nome', 'area_minima'])
    return GrupoInputDTO(
        nome=data['nome'],
        area_minima=parse_decimal(data['area_minima'], 'area_minima'),
        area_maxima=parse_decimal(data.get('area_maxima'), 'area_maxima'),
        descricao=data.get('descricao'),
    )


def _desconto_input(data: dict) -> DescontoCategoriaInputDTO:
    require_fields(data, ['categoria_id', 'percentual_desconto'])
    return DescontoCategoriaInputDTO(
        categoria_id=parse_int(data['categoria_id'], 'categoria_id'),
        percentual_desconto=parse_decimal(data['percentual_desconto'], 'percentual_desconto'),
        observacoes=data.get('observacoes'),
    )


class SegmentacaoAPIListView(BaseAPIView):

    def get(self, request: HttpRequest) -> JsonResponse:
        try:
            require_fields(request.GET, ['fornecedor_id'])
            fornecedor_id = parse_int(request.GET.get('fornecedor_id'), 'fornecedor_id')
            segmentacoes = self.get_service('segmentacao_service').listar_por_fornecedor(
                fornecedor_id
            )
            return json_response(success=True, data=[s.to_dict() for s in segmentacoes])
        except Exception as e:
            return self.handle_exception(e)

    def post(self, request: HttpRequest) -> JsonResponse:
        try:
            data = self.parse_body(request)
            require_fields(data, ['nome', 'fornecedor_id'])

            output = self.get_service('segmentacao_service').criar(
                CriarSegmentacaoInputDTO(
                    nome=data['nome'],
                    fornecedor_id=parse_int(data['fornecedor_id'], 'fornecedor_id'),
                    descricao=data.get('descricao'),
                    eh_padrao=bool(parse_bool(data.get('eh_padrao'))),
                    configuracao_territorial=data.get('configuracao_territorial'),
                )
            )
            logger.info(f"API: Segmentação criada: {output.id}")
            return json_response(success=True, data=output.to_dict(), status=201)
        except Exception as e:
            return self.handle_exception(e)


class SegmentacaoAPIPadraoView(BaseAPIView):

    def get(self, request: HttpRequest, fornecedor_id: int) -> JsonResponse:
        try:
            output = self.get_service('segmentacao_service').obter_padrao(fornecedor_id)
            return json_response(success=True, data=output.to_dict())
        except Exception as e:
            return self.handle_exception(e)


class SegmentacaoAPICalcularDescontoView(BaseAPIView):

    def post(self, request: HttpRequest) -> JsonResponse:
        try:
            data = self.parse_body(request)
            require_fields(data, ['fornecedor_id', 'categoria_id', 'area', 'valor_base'])

            resultado = self.get_service('calculo_desconto_segmentado_service').calcular(
                fornecedor_id=parse_int(data['fornecedor_id'], 'fornecedor_id'),
                categoria_id=parse_int(data['categoria_id'], 'categoria_id'),
                area=parse_decimal(data['area'], 'area'),
                valor_base=parse_decimal(data['valor_base'], 'valor_base'),
            )
            return json_response(success=True, data=resultado.to_dict())
        except Exception as e:
            return self.handle_exception(e)


class SegmentacaoAPIDetailView(BaseAPIView):

    def get(self, request: HttpRequest, pk: int) -> JsonResponse:
        try:
            output = self.get_service('segmentacao_service').obter_por_id(pk)
            return json_response(success=True, data=output.to_dict())
        except Exception as e:
            return self.handle_exception(e)

    def put(self, request: HttpRequest, pk: int) -> JsonResponse:
        try:
            data = self.parse_body(request)
            require_fields(data, ['nome'])

            output = self.get_service('segmentacao_service').atualizar(
                pk,
                AtualizarSegmentacaoInputDTO(
                    nome=data['nome'],
                    descricao=data.get('descricao'),
                    configuracao_territorial=data.get('configuracao_territorial'),
                ),
            )
            return json_response(success=True, data=output.to_dict())
        except Exception as e:
            return self.handle_exception(e)

    def delete(self, request: HttpRequest, pk: int) -> JsonResponse:
        try:
            self.get_service('segmentacao_service').remover(pk)
            return json_response(success=True, data={'id': pk})
        except Exception as e:
            return self.handle_exception(e)


class SegmentacaoAPIAcaoView(BaseAPIView):
    """POST de ciclo de vida: acao vem da URL (ativar, desativar, definir_como_padrao)."""

    acao = ''

    def post(self, request: HttpRequest, pk: int) -> JsonResponse:
        try:
            service = self.get_service('segmentacao_service')
            output = getattr(service, self.acao)(pk)
            return json_response(success=True, data=output.to_dict())
        except Exception as e:
            return self.handle_exception(e)


class SegmentacaoAPIGruposView(BaseAPIView):

    def post(self, request: HttpRequest, pk: int) -> JsonResponse:
        try:
            data = self.parse_body(request)
            output = self.get_service('segmentacao_service').adicionar_grupo(
                pk, _grupo_input(data)
            )
            return json_response(success=True, data=output.to_dict(), status=201)
        except Exception as e:
            return self.handle_exception(e)


class SegmentacaoAPIGrupoDetailView(BaseAPIView):

    def put(self, request: HttpRequest, pk: int, grupo_id: int) -> JsonResponse:
        try:
            data = self.parse_body(request)
            output = self.get_service('segmentacao_service').atualizar_grupo(
                pk, grupo_id, _grupo_input(data)
            )
            return json_response(success=True, data=output.to_dict())
        except Exception as e:
            return self.handle_exception(e)

    def delete(self, request: HttpRequest, pk: int, grupo_id: int) -> JsonResponse:
        try:
            output = self.get_service('segmentacao_service').remover_grupo(pk, grupo_id)
            return json_response(success=True, data=output.to_dict())
        except Exception as e:
            return self.handle_exception(e)


class SegmentacaoAPIDescontosView(BaseAPIView):

    def post(self, request: HttpRequest, pk: int, grupo_id: int) -> JsonResponse:
        try:
            data = self.parse_body(request)
            output = self.get_service('segmentacao_service').adicionar_desconto(
                pk, grupo_id, _desconto_input(data)
            )
            return json_response(success=True, data=output.to_dict(), status=201)
        except Exception as e:
            return self.handle_exception(e)

    def put(self, request: HttpRequest, pk: int, grupo_id: int) -> JsonResponse:
        try:
            data = self.parse_body(request)
            output = self.get_service('segmentacao_service').atualizar_desconto(
                pk, grupo_id, _desconto_input(data)
            )
            return json_response(success=True, data=output.to_dict())
        except Exception as e:
            return self.handle_exception(e)


class SegmentacaoAPIDescontoDetailView(BaseAPIView):

    def delete(
        self, request: HttpRequest, pk: int, grupo_id: int, categoria_id: int
    ) -> JsonResponse:
        try:
            output = self.get_service('segmentacao_service').remover_desconto(
                pk, grupo_id, categoria_id
            )
            return json_response(success=True, data=output.to_dict())
        except Exception as e:
            return self.handle_exception(e)
