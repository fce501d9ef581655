"""
API Views JSON para Propriedades.

Endpoints:
- GET  /api/propriedades/?produtor_id=<id>               - Listar por produtor
- POST /api/propriedades/                                - Criar
- GET|PUT|DELETE /api/propriedades/<id>/                 - Obter / Atualizar / Remover
- POST /api/propriedades/<id>/talhoes/                   - Adicionar talhão
- POST /api/propriedades/<id>/culturas/                  - Adicionar cultura
- DELETE /api/propriedades/<id>/culturas/<cultura_id>/   - Remover cultura
"""

import logging

from django.http import HttpRequest, JsonResponse

from agriis.core.propriedades.dtos import (
    AdicionarCulturaPropriedadeInputDTO,
    AdicionarTalhaoInputDTO,
    AtualizarPropriedadeInputDTO,
    CriarPropriedadeInputDTO,
)

from ..shared.api import (
    BaseAPIView,
    json_response,
    parse_decimal,
    parse_int,
    require_fields,
)

logger = logging.getLogger(__name__)


class PropriedadeAPIListView(BaseAPIView):

    def get(self, request: HttpRequest) -> JsonResponse:
        try:
            require_fields(request.GET, ['produtor_id'])
            produtor_id = parse_int(request.GET.get('produtor_id'), 'produtor_id')
            propriedades = self.get_service('propriedade_service').listar_por_produtor(produtor_id)
            return json_response(success=True, data=[p.to_dict() for p in propriedades])
        except Exception as e:
            return self.handle_exception(e)

    def post(self, request: HttpRequest) -> JsonResponse:
        try:
            data = self.parse_body(request)
            require_fields(data, ['nome', 'area_total', 'produtor_id'])

            output = self.get_service('propriedade_service').criar(
                CriarPropriedadeInputDTO(
                    nome=data['nome'],
                    area_total=parse_decimal(data['area_total'], 'area_total'),
                    produtor_id=parse_int(data['produtor_id'], 'produtor_id'),
                    nirf=data.get('nirf'),
                    inscricao_estadual=data.get('inscricao_estadual'),
                    endereco_id=parse_int(data.get('endereco_id'), 'endereco_id'),
                )
            )
            logger.info(f"API: Propriedade criada: {output.id}")
            return json_response(success=True, data=output.to_dict(), status=201)
        except Exception as e:
            return self.handle_exception(e)


class PropriedadeAPIDetailView(BaseAPIView):

    def get(self, request: HttpRequest, pk: int) -> JsonResponse:
        try:
            output = self.get_service('propriedade_service').obter_por_id(pk)
            return json_response(success=True, data=output.to_dict())
        except Exception as e:
            return self.handle_exception(e)

    def put(self, request: HttpRequest, pk: int) -> JsonResponse:
        try:
            data = self.parse_body(request)
            require_fields(data, ['nome', 'area_total'])

            output = self.get_service('propriedade_service').atualizar(
                pk,
                AtualizarPropriedadeInputDTO(
                    nome=data['nome'],
                    area_total=parse_decimal(data['area_total'], 'area_total'),
                    nirf=data.get('nirf'),
                    inscricao_estadual=data.get('inscricao_estadual'),
                    endereco_id=parse_int(data.get('endereco_id'), 'endereco_id'),
                ),
            )
            return json_response(success=True, data=output.to_dict())
        except Exception as e:
            return self.handle_exception(e)

    def delete(self, request: HttpRequest, pk: int) -> JsonResponse:
        try:
            self.get_service('propriedade_service').remover(pk)
            return json_response(success=True, data={'id': pk})
        except Exception as e:
            return self.handle_exception(e)


class PropriedadeAPITalhoesView(BaseAPIView):

    def post(self, request: HttpRequest, pk: int) -> JsonResponse:
        try:
            data = self.parse_body(request)
            require_fields(data, ['nome', 'area'])

            output = self.get_service('propriedade_service').adicionar_talhao(
                pk,
                AdicionarTalhaoInputDTO(
                    nome=data['nome'],
                    area=parse_decimal(data['area'], 'area'),
                    descricao=data.get('descricao'),
                ),
            )
            return json_response(success=True, data=output.to_dict(), status=201)
        except Exception as e:
            return self.handle_exception(e)


class PropriedadeAPICulturasView(BaseAPIView):

    def post(self, request: HttpRequest, pk: int) -> JsonResponse:
        try:
            data = self.parse_body(request)
            require_fields(data, ['cultura_id', 'area'])

            output = self.get_service('propriedade_service').adicionar_cultura(
                pk,
                AdicionarCulturaPropriedadeInputDTO(
                    cultura_id=parse_int(data['cultura_id'], 'cultura_id'),
                    area=parse_decimal(data['area'], 'area'),
                    safra_id=parse_int(data.get('safra_id'), 'safra_id'),
                ),
            )
            return json_response(success=True, data=output.to_dict(), status=201)
        except Exception as e:
            return self.handle_exception(e)


class PropriedadeAPICulturaDetailView(BaseAPIView):

    def delete(self, request: HttpRequest, pk: int, cultura_id: int) -> JsonResponse:
        try:
            output = self.get_service('propriedade_service').remover_cultura(pk, cultura_id)
            return json_response(success=True, data=output.to_dict())
        except Exception as e:
            return self.handle_exception(e)
