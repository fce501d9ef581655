"""
API Views JSON para Catálogos.

Endpoints:
- GET  /api/catalogos/                                  - Listar (filtros + paginação)
- POST /api/catalogos/                                  - Criar
- GET  /api/catalogos/vigentes/?data=AAAA-MM-DD         - Catálogos vigentes
- GET|PUT|DELETE /api/catalogos/<id>/                   - Obter / Atualizar / Remover
- POST /api/catalogos/<id>/itens/                       - Adicionar item
- PUT|DELETE /api/catalogos/<id>/itens/<item_id>/       - Atualizar / remover item
- GET  /api/catalogos/<id>/preco/<produto_id>/?uf=MT&data=AAAA-MM-DD - Consultar preço
"""

import logging

from django.http import HttpRequest, JsonResponse

from agriis.core.catalogos.dtos import (
    AtualizarCatalogoInputDTO,
    CatalogoItemInputDTO,
    CriarCatalogoInputDTO,
    ListarCatalogosQueryDTO,
)

from ..shared.api import (
    BaseAPIView,
    json_response,
    parse_bool,
    parse_date,
    parse_decimal,
    parse_int,
    require_fields,
)

logger = logging.getLogger(__name__)


def _item_input(data: dict) -> CatalogoItemInputDTO:
    ativo = parse_bool(data.get('ativo'))
    return CatalogoItemInputDTO(
        produto_id=parse_int(data.get('produto_id'), 'produto_id') or 0,
        estrutura_precos=data.get('estrutura_precos') or {},
        preco_base=parse_decimal(data.get('preco_base'), 'preco_base'),
        ativo=True if ativo is None else ativo,
    )


class CatalogoAPIListView(BaseAPIView):

    def get(self, request: HttpRequest) -> JsonResponse:
        try:
            paginacao = self.get_paginacao(request)
            params = request.GET
            resultado = self.get_service('catalogo_service').listar(
                ListarCatalogosQueryDTO(
                    safra_id=parse_int(params.get('safra_id'), 'safra_id'),
                    ponto_distribuicao_id=parse_int(
                        params.get('ponto_distribuicao_id'), 'ponto_distribuicao_id'
                    ),
                    cultura_id=parse_int(params.get('cultura_id'), 'cultura_id'),
                    categoria_id=parse_int(params.get('categoria_id'), 'categoria_id'),
                    moeda=params.get('moeda') or None,
                    ativo=parse_bool(params.get('ativo')),
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
            require_fields(
                data,
                ['safra_id', 'ponto_distribuicao_id', 'cultura_id', 'categoria_id', 'data_inicio'],
            )

            output = self.get_service('catalogo_service').criar(
                CriarCatalogoInputDTO(
                    safra_id=parse_int(data['safra_id'], 'safra_id'),
                    ponto_distribuicao_id=parse_int(
                        data['ponto_distribuicao_id'], 'ponto_distribuicao_id'
                    ),
                    cultura_id=parse_int(data['cultura_id'], 'cultura_id'),
                    categoria_id=parse_int(data['categoria_id'], 'categoria_id'),
                    data_inicio=parse_date(data['data_inicio'], 'data_inicio'),
                    data_fim=parse_date(data.get('data_fim'), 'data_fim'),
                    moeda=data.get('moeda') or 'REAL',
                )
            )
            logger.info(f"API: Catálogo criado: {output.id}")
            return json_response(success=True, data=output.to_dict(), status=201)
        except Exception as e:
            return self.handle_exception(e)


class CatalogoAPIVigentesView(BaseAPIView):

    def get(self, request: HttpRequest) -> JsonResponse:
        try:
            data = parse_date(request.GET.get('data'), 'data')
            catalogos = self.get_service('catalogo_service').listar_vigentes(data)
            return json_response(success=True, data=[c.to_dict() for c in catalogos])
        except Exception as e:
            return self.handle_exception(e)


class CatalogoAPIDetailView(BaseAPIView):

    def get(self, request: HttpRequest, pk: int) -> JsonResponse:
        try:
            output = self.get_service('catalogo_service').obter_por_id(pk)
            return json_response(success=True, data=output.to_dict())
        except Exception as e:
            return self.handle_exception(e)

    def put(self, request: HttpRequest, pk: int) -> JsonResponse:
        try:
            data = self.parse_body(request)
            require_fields(data, ['data_inicio'])
            ativo = parse_bool(data.get('ativo'))

            output = self.get_service('catalogo_service').atualizar(
                pk,
                AtualizarCatalogoInputDTO(
                    data_inicio=parse_date(data['data_inicio'], 'data_inicio'),
                    data_fim=parse_date(data.get('data_fim'), 'data_fim'),
                    ativo=True if ativo is None else ativo,
                ),
            )
            return json_response(success=True, data=output.to_dict())
        except Exception as e:
            return self.handle_exception(e)

    def delete(self, request: HttpRequest, pk: int) -> JsonResponse:
        try:
            self.get_service('catalogo_service').remover(pk)
            return json_response(success=True, data={'id': pk})
        except Exception as e:
            return self.handle_exception(e)


class CatalogoAPIItensView(BaseAPIView):

    def post(self, request: HttpRequest, pk: int) -> JsonResponse:
        try:
            data = self.parse_body(request)
            require_fields(data, ['produto_id'])
            output = self.get_service('catalogo_service').adicionar_item(pk, _item_input(data))
            return json_response(success=True, data=output.to_dict(), status=201)
        except Exception as e:
            return self.handle_exception(e)


class CatalogoAPIItemDetailView(BaseAPIView):

    def put(self, request: HttpRequest, pk: int, item_id: int) -> JsonResponse:
        try:
            data = self.parse_body(request)
            output = self.get_service('catalogo_service').atualizar_item(
                pk, item_id, _item_input(data)
            )
            return json_response(success=True, data=output.to_dict())
        except Exception as e:
            return self.handle_exception(e)

    def delete(self, request: HttpRequest, pk: int, item_id: int) -> JsonResponse:
        try:
            self.get_service('catalogo_service').remover_item(pk, item_id)
            return json_response(success=True, data={'id': item_id})
        except Exception as e:
            return self.handle_exception(e)


class CatalogoAPIPrecoView(BaseAPIView):

    def get(self, request: HttpRequest, pk: int, produto_id: int) -> JsonResponse:
        try:
            preco = self.get_service('catalogo_service').consultar_preco(
                pk,
                produto_id,
                uf=request.GET.get('uf') or None,
                data=parse_date(request.GET.get('data'), 'data'),
            )
            return json_response(
                success=True,
                data={
                    'catalogo_id': pk,
                    'produto_id': produto_id,
                    'preco': float(preco) if preco is not None else None,
                },
            )
        except Exception as e:
            return self.handle_exception(e)
