"""
API Views JSON para Safras.

Endpoints:
- GET  /api/safras/            - Listar
- POST /api/safras/            - Criar
- GET  /api/safras/atual/      - Safra S1 vigente
- GET|PUT|DELETE /api/safras/<id>/
"""

import logging

from django.http import HttpRequest, JsonResponse

from agriis.core.safras.dtos import AtualizarSafraInputDTO, CriarSafraInputDTO

from ..shared.api import BaseAPIView, json_response, parse_date, require_fields

logger = logging.getLogger(__name__)

CAMPOS_OBRIGATORIOS = ['plantio_inicial', 'plantio_final', 'plantio_nome', 'descricao']


def _dados_safra(data: dict) -> dict:
    require_fields(data, CAMPOS_OBRIGATORIOS)
    return {
        'plantio_inicial': parse_date(data['plantio_inicial'], 'plantio_inicial'),
        'plantio_final': parse_date(data['plantio_final'], 'plantio_final'),
        'plantio_nome': data['plantio_nome'],
        'descricao': data['descricao'],
    }


class SafraAPIListView(BaseAPIView):

    def get(self, request: HttpRequest) -> JsonResponse:
        try:
            safras = self.get_service('safra_service').listar()
            return json_response(success=True, data=[s.to_dict() for s in safras])
        except Exception as e:
            return self.handle_exception(e)

    def post(self, request: HttpRequest) -> JsonResponse:
        try:
            dados = _dados_safra(self.parse_body(request))
            output = self.get_service('safra_service').criar(CriarSafraInputDTO(**dados))
            logger.info(f"API: Safra criada: {output.id}")
            return json_response(success=True, data=output.to_dict(), status=201)
        except Exception as e:
            return self.handle_exception(e)


class SafraAPIAtualView(BaseAPIView):

    def get(self, request: HttpRequest) -> JsonResponse:
        try:
            safra = self.get_service('safra_service').obter_atual()
            if safra is None:
                return json_response(success=False, error="Nenhuma safra ativa encontrada", status=404)
            return json_response(success=True, data=safra.to_dict())
        except Exception as e:
            return self.handle_exception(e)


class SafraAPIDetailView(BaseAPIView):

    def get(self, request: HttpRequest, pk: int) -> JsonResponse:
        try:
            output = self.get_service('safra_service').obter_por_id(pk)
            return json_response(success=True, data=output.to_dict())
        except Exception as e:
            return self.handle_exception(e)

    def put(self, request: HttpRequest, pk: int) -> JsonResponse:
        try:
            dados = _dados_safra(self.parse_body(request))
            output = self.get_service('safra_service').atualizar(pk, AtualizarSafraInputDTO(**dados))
            return json_response(success=True, data=output.to_dict())
        except Exception as e:
            return self.handle_exception(e)

    def delete(self, request: HttpRequest, pk: int) -> JsonResponse:
        try:
            self.get_service('safra_service').remover(pk)
            return json_response(success=True)
        except Exception as e:
            return self.handle_exception(e)
