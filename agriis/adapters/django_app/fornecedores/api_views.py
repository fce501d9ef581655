"""
API Views JSON para Fornecedores.

Endpoints:
- GET  /api/fornecedores/                      - Listar (?ativo, ?busca, ?pagina)
- POST /api/fornecedores/                      - Criar
- GET|PUT /api/fornecedores/<id>/              - Obter / Atualizar
- POST /api/fornecedores/<id>/ativar/          - Ativar
- POST /api/fornecedores/<id>/desativar/       - Desativar
- PUT  /api/fornecedores/<id>/pedido-minimo/   - Definir pedido mínimo
- GET|POST /api/fornecedores/<id>/usuarios/    - Listar / vincular usuários
"""

import logging

from django.http import HttpRequest, JsonResponse

from agriis.core.fornecedores.dtos import (
    AtualizarFornecedorInputDTO,
    CriarFornecedorInputDTO,
    ListarFornecedoresQueryDTO,
    VincularUsuarioInputDTO,
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


class FornecedorAPIListView(BaseAPIView):

    def get(self, request: HttpRequest) -> JsonResponse:
        try:
            paginacao = self.get_paginacao(request)
            resultado = self.get_service('fornecedor_service').listar(
                ListarFornecedoresQueryDTO(
                    ativo=parse_bool(request.GET.get('ativo')),
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
            require_fields(data, ['nome', 'cnpj'])

            output = self.get_service('fornecedor_service').criar(
                CriarFornecedorInputDTO(
                    nome=data['nome'],
                    cnpj=data['cnpj'],
                    inscricao_estadual=data.get('inscricao_estadual'),
                    endereco=data.get('endereco'),
                    telefone=data.get('telefone'),
                    email=data.get('email'),
                    moeda_padrao=data.get('moeda_padrao') or 'REAL',
                    pedido_minimo=parse_decimal(data.get('pedido_minimo'), 'pedido_minimo'),
                )
            )
            logger.info(f"API: Fornecedor criado: {output.id}")
            return json_response(success=True, data=output.to_dict(), status=201)
        except Exception as e:
            return self.handle_exception(e)


class FornecedorAPIDetailView(BaseAPIView):

    def get(self, request: HttpRequest, pk: int) -> JsonResponse:
        try:
            output = self.get_service('fornecedor_service').obter_por_id(pk)
            return json_response(success=True, data=output.to_dict())
        except Exception as e:
            return self.handle_exception(e)

    def put(self, request: HttpRequest, pk: int) -> JsonResponse:
        try:
            data = self.parse_body(request)
            require_fields(data, ['nome'])

            output = self.get_service('fornecedor_service').atualizar(
                pk,
                AtualizarFornecedorInputDTO(
                    nome=data['nome'],
                    inscricao_estadual=data.get('inscricao_estadual'),
                    endereco=data.get('endereco'),
                    telefone=data.get('telefone'),
                    email=data.get('email'),
                    moeda_padrao=data.get('moeda_padrao'),
                    logo_url=data.get('logo_url'),
                ),
            )
            return json_response(success=True, data=output.to_dict())
        except Exception as e:
            return self.handle_exception(e)


class FornecedorAPIAtivarView(BaseAPIView):

    def post(self, request: HttpRequest, pk: int) -> JsonResponse:
        try:
            output = self.get_service('fornecedor_service').ativar(pk)
            return json_response(success=True, data=output.to_dict())
        except Exception as e:
            return self.handle_exception(e)


class FornecedorAPIDesativarView(BaseAPIView):

    def post(self, request: HttpRequest, pk: int) -> JsonResponse:
        try:
            output = self.get_service('fornecedor_service').desativar(pk)
            return json_response(success=True, data=output.to_dict())
        except Exception as e:
            return self.handle_exception(e)


class FornecedorAPIPedidoMinimoView(BaseAPIView):

    def put(self, request: HttpRequest, pk: int) -> JsonResponse:
        try:
            data = self.parse_body(request)
            output = self.get_service('fornecedor_service').definir_pedido_minimo(
                pk, parse_decimal(data.get('valor'), 'valor')
            )
            return json_response(success=True, data=output.to_dict())
        except Exception as e:
            return self.handle_exception(e)


class FornecedorAPIUsuariosView(BaseAPIView):

    def get(self, request: HttpRequest, pk: int) -> JsonResponse:
        try:
            vinculos = self.get_service('fornecedor_service').listar_usuarios(pk)
            return json_response(success=True, data=[v.to_dict() for v in vinculos])
        except Exception as e:
            return self.handle_exception(e)

    def post(self, request: HttpRequest, pk: int) -> JsonResponse:
        try:
            data = self.parse_body(request)
            require_fields(data, ['usuario_id'])

            output = self.get_service('fornecedor_service').vincular_usuario(
                pk,
                VincularUsuarioInputDTO(
                    usuario_id=parse_int(data['usuario_id'], 'usuario_id'),
                    role=data.get('role') or 'FORNECEDOR_WEB_REPRESENTANTE',
                ),
            )
            return json_response(success=True, data=output.to_dict(), status=201)
        except Exception as e:
            return self.handle_exception(e)
