"""
API Views JSON para Produtores.

Endpoints:
- GET  /api/produtores/                           - Listar (?status, ?busca, ?pagina)
- POST /api/produtores/                           - Criar
- GET  /api/produtores/documento/<documento>/     - Buscar por CPF/CNPJ
- GET|PUT|DELETE /api/produtores/<id>/            - Obter / Atualizar / Remover
- POST /api/produtores/<id>/autorizar/            - Autorizar (usuário do token)
- POST /api/produtores/<id>/negar/                - Negar (usuário do token)
- POST|DELETE /api/produtores/<id>/culturas/<cultura_id>/ - Vincular / desvincular cultura
"""

import logging

from django.http import HttpRequest, JsonResponse

from agriis.core.produtores.dtos import (
    AtualizarProdutorInputDTO,
    CriarProdutorInputDTO,
    ListarProdutoresQueryDTO,
)
from agriis.core.shared.exceptions import ValidationError

from ..shared.api import (
    BaseAPIView,
    get_user_id,
    json_response,
    parse_decimal,
    require_fields,
)

logger = logging.getLogger(__name__)


class ProdutorAPIListView(BaseAPIView):

    def get(self, request: HttpRequest) -> JsonResponse:
        try:
            paginacao = self.get_paginacao(request)
            resultado = self.get_service('produtor_service').listar(
                ListarProdutoresQueryDTO(
                    status=request.GET.get('status') or None,
                    busca=request.GET.get('busca') or None,
                    pagina=paginacao.pagina,
                    por_pagina=paginacao.por_pagina,
                )
            )
            return json_response(success=True, data=resultado.to_dict())
        except Exception as e:
            return self.handle_exception(e)

    def post(self, request: HttpRequest) -> JsonResponse:
        try:
            data = self.parse_body(request)
            require_fields(data, ['nome'])

            output = self.get_service('produtor_service').criar(
                CriarProdutorInputDTO(
                    nome=data['nome'],
                    cpf=data.get('cpf'),
                    cnpj=data.get('cnpj'),
                    inscricao_estadual=data.get('inscricao_estadual'),
                    tipo_atividade=data.get('tipo_atividade'),
                    area_plantio=parse_decimal(data.get('area_plantio'), 'area_plantio') or 0,
                    culturas=tuple(data.get('culturas', [])),
                )
            )
            logger.info(f"API: Produtor criado: {output.id}")
            return json_response(success=True, data=output.to_dict(), status=201)
        except Exception as e:
            return self.handle_exception(e)


class ProdutorAPIDocumentoView(BaseAPIView):

    def get(self, request: HttpRequest, documento: str) -> JsonResponse:
        try:
            output = self.get_service('produtor_service').obter_por_documento(documento)
            if output is None:
                return json_response(
                    success=False, error="Produtor não encontrado", status=404
                )
            return json_response(success=True, data=output.to_dict())
        except Exception as e:
            return self.handle_exception(e)


class ProdutorAPIDetailView(BaseAPIView):

    def get(self, request: HttpRequest, pk: int) -> JsonResponse:
        try:
            output = self.get_service('produtor_service').obter_por_id(pk)
            return json_response(success=True, data=output.to_dict())
        except Exception as e:
            return self.handle_exception(e)

    def put(self, request: HttpRequest, pk: int) -> JsonResponse:
        try:
            data = self.parse_body(request)
            require_fields(data, ['nome'])

            output = self.get_service('produtor_service').atualizar(
                pk,
                AtualizarProdutorInputDTO(
                    nome=data['nome'],
                    inscricao_estadual=data.get('inscricao_estadual'),
                    tipo_atividade=data.get('tipo_atividade'),
                    area_plantio=parse_decimal(data.get('area_plantio'), 'area_plantio'),
                ),
            )
            return json_response(success=True, data=output.to_dict())
        except Exception as e:
            return self.handle_exception(e)

    def delete(self, request: HttpRequest, pk: int) -> JsonResponse:
        try:
            self.get_service('produtor_service').remover(pk)
            return json_response(success=True, data={'id': pk})
        except Exception as e:
            return self.handle_exception(e)


class _ProdutorStatusView(BaseAPIView):
    acao = ''

    def post(self, request: HttpRequest, pk: int) -> JsonResponse:
        try:
            usuario_id = get_user_id(request)
            if usuario_id is None:
                raise ValidationError("Usuário não autenticado", field="authorization")

            service = self.get_service('produtor_service')
            output = getattr(service, self.acao)(pk, usuario_id)
            return json_response(success=True, data=output.to_dict())
        except Exception as e:
            return self.handle_exception(e)


class ProdutorAPIAutorizarView(_ProdutorStatusView):
    acao = 'autorizar'


class ProdutorAPINegarView(_ProdutorStatusView):
    acao = 'negar'


class ProdutorAPICulturaView(BaseAPIView):

    def post(self, request: HttpRequest, pk: int, cultura_id: int) -> JsonResponse:
        try:
            output = self.get_service('produtor_service').adicionar_cultura(pk, cultura_id)
            return json_response(success=True, data=output.to_dict())
        except Exception as e:
            return self.handle_exception(e)

    def delete(self, request: HttpRequest, pk: int, cultura_id: int) -> JsonResponse:
        try:
            output = self.get_service('produtor_service').remover_cultura(pk, cultura_id)
            return json_response(success=True, data=output.to_dict())
        except Exception as e:
            return self.handle_exception(e)
