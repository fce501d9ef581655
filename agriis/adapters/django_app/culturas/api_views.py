"""
API Views JSON para Culturas.

Endpoints:
- GET  /api/culturas/           - Listar (?ativas=true)
- POST /api/culturas/           - Criar
- GET  /api/culturas/<id>/      - Obter
- PUT  /api/culturas/<id>/      - Atualizar
- DELETE /api/culturas/<id>/    - Remover
"""

import logging

from django.http import HttpRequest, JsonResponse

from agriis.core.culturas.dtos import AtualizarCulturaInputDTO, CriarCulturaInputDTO

from ..shared.api import BaseAPIView, json_response, parse_bool, require_fields

logger = logging.getLogger(__name__)


class CulturaAPIListView(BaseAPIView):

    def get(self, request: HttpRequest) -> JsonResponse:
        try:
            service = self.get_service('cultura_service')
            if parse_bool(request.GET.get('ativas')):
                culturas = service.listar_ativas()
            else:
                culturas = service.listar()
            return json_response(success=True, data=[c.to_dict() for c in culturas])
        except Exception as e:
            return self.handle_exception(e)

    def post(self, request: HttpRequest) -> JsonResponse:
        try:
            data = self.parse_body(request)
            require_fields(data, ['nome'])

            output = self.get_service('cultura_service').criar(
                CriarCulturaInputDTO(nome=data['nome'], descricao=data.get('descricao'))
            )
            logger.info(f"API: Cultura criada: {output.id}")
            return json_response(success=True, data=output.to_dict(), status=201)
        except Exception as e:
            return self.handle_exception(e)


class CulturaAPIDetailView(BaseAPIView):

    def get(self, request: HttpRequest, pk: int) -> JsonResponse:
        try:
            output = self.get_service('cultura_service').obter_por_id(pk)
            return json_response(success=True, data=output.to_dict())
        except Exception as e:
            return self.handle_exception(e)

    def put(self, request: HttpRequest, pk: int) -> JsonResponse:
        try:
            data = self.parse_body(request)
            require_fields(data, ['nome'])

            output = self.get_service('cultura_service').atualizar(
                pk,
                AtualizarCulturaInputDTO(
                    nome=data['nome'],
                    descricao=data.get('descricao'),
                    ativo=parse_bool(data.get('ativo', True)),
                ),
            )
            return json_response(success=True, data=output.to_dict())
        except Exception as e:
            return self.handle_exception(e)

    def delete(self, request: HttpRequest, pk: int) -> JsonResponse:
        try:
            self.get_service('cultura_service').remover(pk)
            return json_response(success=True, status=200)
        except Exception as e:
            return self.handle_exception(e)
