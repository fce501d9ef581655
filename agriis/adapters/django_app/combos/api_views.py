"""
API Views JSON para Combos.

Endpoints:
- GET  /api/combos/?fornecedor_id=<id>         - Listar por fornecedor
- POST /api/combos/                            - Criar
- GET  /api/combos/vigentes/                   - Combos vigentes
- GET  /api/combos/validos/?hectare=&municipio_id= - Válidos para o produtor
- GET|PUT|DELETE /api/combos/<id>/             - Obter / Atualizar / Remover
- PUT  /api/combos/<id>/status/                - Alterar status
- GET  /api/combos/<id>/validar/?hectare=&municipio_id=
- POST /api/combos/<id>/itens/                 - Adicionar item
- PUT|DELETE /api/combos/<id>/itens/<item_id>/ - Atualizar / remover item
- POST /api/combos/<id>/locais-recebimento/    - Adicionar local de recebimento
- POST /api/combos/<id>/categorias-desconto/   - Adicionar categoria de desconto
"""

import logging

from django.http import HttpRequest, JsonResponse

from agriis.core.combos.dtos import (
    AtualizarComboInputDTO,
    ComboCategoriaDescontoInputDTO,
    ComboItemInputDTO,
    ComboLocalRecebimentoInputDTO,
    CriarComboInputDTO,
)
from agriis.core.shared.exceptions import ValidationError

from ..shared.api import (
    BaseAPIView,
    json_response,
    parse_bool,
    parse_datetime,
    parse_decimal,
    parse_int,
    require_fields,
)

logger = logging.getLogger(__name__)

CAMPOS_COMBO = ['nome', 'hectare_minimo', 'hectare_maximo', 'data_inicio', 'data_fim']


def _municipios(valor):
    if valor is None:
        return None
    if not isinstance(valor, list):
        raise ValidationError("municipios_permitidos deve ser uma lista", field="municipios_permitidos")
    return tuple(parse_int(m, 'municipios_permitidos') for m in valor)


def _item_input(data: dict) -> ComboItemInputDTO:
    require_fields(data, ['produto_id', 'quantidade', 'preco_unitario'])
    return ComboItemInputDTO(
        produto_id=parse_int(data['produto_id'], 'produto_id'),
        quantidade=parse_decimal(data['quantidade'], 'quantidade'),
        preco_unitario=parse_decimal(data['preco_unitario'], 'preco_unitario'),
        percentual_desconto=parse_decimal(data.get('percentual_desconto', 0), 'percentual_desconto'),
        produto_obrigatorio=bool(parse_bool(data.get('produto_obrigatorio'))),
        ordem=parse_int(data.get('ordem', 0), 'ordem'),
    )


class ComboAPIListView(BaseAPIView):

    def get(self, request: HttpRequest) -> JsonResponse:
        try:
            require_fields(request.GET, ['fornecedor_id'])
            fornecedor_id = parse_int(request.GET.get('fornecedor_id'), 'fornecedor_id')
            combos = self.get_service('combo_service').listar_por_fornecedor(fornecedor_id)
            return json_response(success=True, data=[c.to_dict() for c in combos])
        except Exception as e:
            return self.handle_exception(e)

    def post(self, request: HttpRequest) -> JsonResponse:
        try:
            data = self.parse_body(request)
            require_fields(
                data, CAMPOS_COMBO + ['modalidade_pagamento', 'fornecedor_id', 'safra_id']
            )

            output = self.get_service('combo_service').criar(
                CriarComboInputDTO(
                    nome=data['nome'],
                    hectare_minimo=parse_decimal(data['hectare_minimo'], 'hectare_minimo'),
                    hectare_maximo=parse_decimal(data['hectare_maximo'], 'hectare_maximo'),
                    data_inicio=parse_datetime(data['data_inicio'], 'data_inicio'),
                    data_fim=parse_datetime(data['data_fim'], 'data_fim'),
                    modalidade_pagamento=data['modalidade_pagamento'],
                    fornecedor_id=parse_int(data['fornecedor_id'], 'fornecedor_id'),
                    safra_id=parse_int(data['safra_id'], 'safra_id'),
                    descricao=data.get('descricao'),
                    permite_alteracao_item=parse_bool(data.get('permite_alteracao_item', True)),
                    permite_exclusao_item=parse_bool(data.get('permite_exclusao_item', True)),
                    municipios_permitidos=_municipios(data.get('municipios_permitidos')) or (),
                )
            )
            logger.info(f"API: Combo criado: {output.id}")
            return json_response(success=True, data=output.to_dict(), status=201)
        except Exception as e:
            return self.handle_exception(e)


class ComboAPIVigentesView(BaseAPIView):

    def get(self, request: HttpRequest) -> JsonResponse:
        try:
            combos = self.get_service('combo_service').listar_vigentes()
            return json_response(success=True, data=[c.to_dict() for c in combos])
        except Exception as e:
            return self.handle_exception(e)


class ComboAPIValidosView(BaseAPIView):

    def get(self, request: HttpRequest) -> JsonResponse:
        try:
            require_fields(request.GET, ['hectare'])
            combos = self.get_service('combo_service').listar_validos_para_produtor(
                parse_decimal(request.GET.get('hectare'), 'hectare'),
                parse_int(request.GET.get('municipio_id'), 'municipio_id'),
            )
            return json_response(success=True, data=[c.to_dict() for c in combos])
        except Exception as e:
            return self.handle_exception(e)


class ComboAPIDetailView(BaseAPIView):

    def get(self, request: HttpRequest, pk: int) -> JsonResponse:
        try:
            output = self.get_service('combo_service').obter_por_id(pk)
            return json_response(success=True, data=output.to_dict())
        except Exception as e:
            return self.handle_exception(e)

    def put(self, request: HttpRequest, pk: int) -> JsonResponse:
        try:
            data = self.parse_body(request)
            require_fields(data, CAMPOS_COMBO)

            output = self.get_service('combo_service').atualizar(
                pk,
                AtualizarComboInputDTO(
                    nome=data['nome'],
                    hectare_minimo=parse_decimal(data['hectare_minimo'], 'hectare_minimo'),
                    hectare_maximo=parse_decimal(data['hectare_maximo'], 'hectare_maximo'),
                    data_inicio=parse_datetime(data['data_inicio'], 'data_inicio'),
                    data_fim=parse_datetime(data['data_fim'], 'data_fim'),
                    descricao=data.get('descricao'),
                    permite_alteracao_item=parse_bool(data.get('permite_alteracao_item', True)),
                    permite_exclusao_item=parse_bool(data.get('permite_exclusao_item', True)),
                    municipios_permitidos=_municipios(data.get('municipios_permitidos')),
                ),
            )
            return json_response(success=True, data=output.to_dict())
        except Exception as e:
            return self.handle_exception(e)

    def delete(self, request: HttpRequest, pk: int) -> JsonResponse:
        try:
            self.get_service('combo_service').remover(pk)
            return json_response(success=True, data={'id': pk})
        except Exception as e:
            return self.handle_exception(e)


class ComboAPIStatusView(BaseAPIView):

    def put(self, request: HttpRequest, pk: int) -> JsonResponse:
        try:
            data = self.parse_body(request)
            require_fields(data, ['status'])
            output = self.get_service('combo_service').atualizar_status(pk, data['status'])
            return json_response(success=True, data=output.to_dict())
        except Exception as e:
            return self.handle_exception(e)


class ComboAPIValidarView(BaseAPIView):

    def get(self, request: HttpRequest, pk: int) -> JsonResponse:
        try:
            require_fields(request.GET, ['hectare'])
            valido = self.get_service('combo_service').validar_combo_para_produtor(
                pk,
                parse_decimal(request.GET.get('hectare'), 'hectare'),
                parse_int(request.GET.get('municipio_id'), 'municipio_id'),
            )
            return json_response(success=True, data={'combo_id': pk, 'valido': valido})
        except Exception as e:
            return self.handle_exception(e)


class ComboAPIItensView(BaseAPIView):

    def post(self, request: HttpRequest, pk: int) -> JsonResponse:
        try:
            output = self.get_service('combo_service').adicionar_item(
                pk, _item_input(self.parse_body(request))
            )
            return json_response(success=True, data=output.to_dict(), status=201)
        except Exception as e:
            return self.handle_exception(e)


class ComboAPIItemDetailView(BaseAPIView):

    def put(self, request: HttpRequest, pk: int, item_id: int) -> JsonResponse:
        try:
            output = self.get_service('combo_service').atualizar_item(
                pk, item_id, _item_input(self.parse_body(request))
            )
            return json_response(success=True, data=output.to_dict())
        except Exception as e:
            return self.handle_exception(e)

    def delete(self, request: HttpRequest, pk: int, item_id: int) -> JsonResponse:
        try:
            output = self.get_service('combo_service').remover_item(pk, item_id)
            return json_response(success=True, data=output.to_dict())
        except Exception as e:
            return self.handle_exception(e)


class ComboAPILocaisRecebimentoView(BaseAPIView):

    def post(self, request: HttpRequest, pk: int) -> JsonResponse:
        try:
            data = self.parse_body(request)
            require_fields(data, ['ponto_distribuicao_id'])

            output = self.get_service('combo_service').adicionar_local_recebimento(
                pk,
                ComboLocalRecebimentoInputDTO(
                    ponto_distribuicao_id=parse_int(
                        data['ponto_distribuicao_id'], 'ponto_distribuicao_id'
                    ),
                    preco_adicional=parse_decimal(data.get('preco_adicional', 0), 'preco_adicional'),
                    percentual_desconto=parse_decimal(
                        data.get('percentual_desconto', 0), 'percentual_desconto'
                    ),
                    local_padrao=bool(parse_bool(data.get('local_padrao'))),
                    observacoes=data.get('observacoes'),
                ),
            )
            return json_response(success=True, data=output.to_dict(), status=201)
        except Exception as e:
            return self.handle_exception(e)


class ComboAPICategoriasDescontoView(BaseAPIView):

    def post(self, request: HttpRequest, pk: int) -> JsonResponse:
        try:
            data = self.parse_body(request)
            require_fields(data, ['categoria_id', 'tipo_desconto', 'valor_desconto'])

            output = self.get_service('combo_service').adicionar_categoria_desconto(
                pk,
                ComboCategoriaDescontoInputDTO(
                    categoria_id=parse_int(data['categoria_id'], 'categoria_id'),
                    tipo_desconto=data['tipo_desconto'],
                    valor_desconto=parse_decimal(data['valor_desconto'], 'valor_desconto'),
                    hectare_minimo=parse_decimal(data.get('hectare_minimo', 0), 'hectare_minimo'),
                    hectare_maximo=parse_decimal(data.get('hectare_maximo'), 'hectare_maximo'),
                ),
            )
            return json_response(success=True, data=output.to_dict(), status=201)
        except Exception as e:
            return self.handle_exception(e)
