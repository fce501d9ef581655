"""
API Views JSON para Pagamentos.

Endpoints:
- GET  /api/pagamentos/formas/                       - Formas ativas
- POST /api/pagamentos/formas/                       - Criar forma
- GET|PUT|DELETE /api/pagamentos/formas/<id>/        - Obter / Atualizar / Remover
- GET  /api/pagamentos/associacoes/?fornecedor_id=   - Associações do fornecedor
- POST /api/pagamentos/associacoes/                  - Associar forma a cultura
- DELETE /api/pagamentos/associacoes/<id>/           - Remover associação
- GET  /api/pagamentos/fornecedor/<fid>/cultura/<cid>/ - Formas aceitas
"""

import logging

from django.http import HttpRequest, JsonResponse

from agriis.core.pagamentos.dtos import (
    AtualizarFormaPagamentoInputDTO,
    CriarCulturaFormaPagamentoInputDTO,
    CriarFormaPagamentoInputDTO,
)

from ..shared.api import BaseAPIView, json_response, parse_bool, parse_int, require_fields

logger = logging.getLogger(__name__)


class FormaPagamentoAPIListView(BaseAPIView):

    def get(self, request: HttpRequest) -> JsonResponse:
        try:
            formas = self.get_service('forma_pagamento_service').listar_ativas()
            return json_response(success=True, data=[f.to_dict() for f in formas])
        except Exception as e:
            return self.handle_exception(e)

    def post(self, request: HttpRequest) -> JsonResponse:
        try:
            data = self.parse_body(request)
            require_fields(data, ['descricao'])

            output = self.get_service('forma_pagamento_service').criar(
                CriarFormaPagamentoInputDTO(descricao=data['descricao'])
            )
            return json_response(success=True, data=output.to_dict(), status=201)
        except Exception as e:
            return self.handle_exception(e)


class FormaPagamentoAPIDetailView(BaseAPIView):

    def get(self, request: HttpRequest, pk: int) -> JsonResponse:
        try:
            output = self.get_service('forma_pagamento_service').obter_por_id(pk)
            return json_response(success=True, data=output.to_dict())
        except Exception as e:
            return self.handle_exception(e)

    def put(self, request: HttpRequest, pk: int) -> JsonResponse:
        try:
            data = self.parse_body(request)
            require_fields(data, ['descricao'])

            output = self.get_service('forma_pagamento_service').atualizar(
                pk,
                AtualizarFormaPagamentoInputDTO(
                    descricao=data['descricao'],
                    ativo=parse_bool(data.get('ativo', True)),
                ),
            )
            return json_response(success=True, data=output.to_dict())
        except Exception as e:
            return self.handle_exception(e)

    def delete(self, request: HttpRequest, pk: int) -> JsonResponse:
        try:
            self.get_service('forma_pagamento_service').remover(pk)
            return json_response(success=True, data={'id': pk})
        except Exception as e:
            return self.handle_exception(e)


class CulturaFormaPagamentoAPIListView(BaseAPIView):

    def get(self, request: HttpRequest) -> JsonResponse:
        try:
            require_fields(request.GET, ['fornecedor_id'])
            fornecedor_id = parse_int(request.GET.get('fornecedor_id'), 'fornecedor_id')
            assocs = self.get_service('cultura_forma_pagamento_service').listar_por_fornecedor(
                fornecedor_id
            )
            return json_response(success=True, data=[a.to_dict() for a in assocs])
        except Exception as e:
            return self.handle_exception(e)

    def post(self, request: HttpRequest) -> JsonResponse:
        try:
            data = self.parse_body(request)
            require_fields(data, ['fornecedor_id', 'cultura_id', 'forma_pagamento_id'])

            output = self.get_service('cultura_forma_pagamento_service').criar(
                CriarCulturaFormaPagamentoInputDTO(
                    fornecedor_id=parse_int(data['fornecedor_id'], 'fornecedor_id'),
                    cultura_id=parse_int(data['cultura_id'], 'cultura_id'),
                    forma_pagamento_id=parse_int(data['forma_pagamento_id'], 'forma_pagamento_id'),
                )
            )
            logger.info(f"API: Associação de forma de pagamento criada: {output.id}")
            return json_response(success=True, data=output.to_dict(), status=201)
        except Exception as e:
            return self.handle_exception(e)


class CulturaFormaPagamentoAPIDetailView(BaseAPIView):

    def delete(self, request: HttpRequest, pk: int) -> JsonResponse:
        try:
            self.get_service('cultura_forma_pagamento_service').remover(pk)
            return json_response(success=True, data={'id': pk})
        except Exception as e:
            return self.handle_exception(e)


class FormasPorFornecedorCulturaAPIView(BaseAPIView):

    def get(self, request: HttpRequest, fornecedor_id: int, cultura_id: int) -> JsonResponse:
        try:
            service = self.get_service('cultura_forma_pagamento_service')
            formas = service.listar_formas_por_fornecedor_cultura(fornecedor_id, cultura_id)
            return json_response(success=True, data=[f.to_dict() for f in formas])
        except Exception as e:
            return self.handle_exception(e)
