"""
API Views JSON para Usuários.

Endpoints:
- GET  /api/usuarios/                   - Listar (?ativo, ?busca, ?pagina)
- POST /api/usuarios/                   - Criar
- GET|PUT /api/usuarios/<id>/           - Obter / Atualizar
- POST /api/usuarios/<id>/ativar/       - Ativar
- POST /api/usuarios/<id>/desativar/    - Desativar
- POST|DELETE /api/usuarios/<id>/roles/ - Adicionar / remover role
"""

import logging

from django.http import HttpRequest, JsonResponse

from agriis.core.usuarios.dtos import (
    AtualizarUsuarioInputDTO,
    CriarUsuarioInputDTO,
    ListarUsuariosQueryDTO,
)

from ..shared.api import BaseAPIView, json_response, parse_bool, require_fields

logger = logging.getLogger(__name__)


class UsuarioAPIListView(BaseAPIView):

    def get(self, request: HttpRequest) -> JsonResponse:
        try:
            paginacao = self.get_paginacao(request)
            resultado = self.get_service('usuario_service').listar(
                ListarUsuariosQueryDTO(
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
            require_fields(data, ['nome', 'email'])

            output = self.get_service('usuario_service').criar(
                CriarUsuarioInputDTO(
                    nome=data['nome'],
                    email=data['email'],
                    senha=data.get('senha'),
                    celular=data.get('celular'),
                    cpf=data.get('cpf'),
                    roles=tuple(data.get('roles', [])),
                )
            )
            logger.info(f"API: Usuário criado: {output.id}")
            return json_response(success=True, data=output.to_dict(), status=201)
        except Exception as e:
            return self.handle_exception(e)


class UsuarioAPIDetailView(BaseAPIView):

    def get(self, request: HttpRequest, pk: int) -> JsonResponse:
        try:
            output = self.get_service('usuario_service').obter_por_id(pk)
            return json_response(success=True, data=output.to_dict())
        except Exception as e:
            return self.handle_exception(e)

    def put(self, request: HttpRequest, pk: int) -> JsonResponse:
        try:
            data = self.parse_body(request)
            require_fields(data, ['nome'])

            output = self.get_service('usuario_service').atualizar(
                pk,
                AtualizarUsuarioInputDTO(
                    nome=data['nome'],
                    email=data.get('email'),
                    celular=data.get('celular'),
                    cpf=data.get('cpf'),
                    logo_url=data.get('logo_url'),
                ),
            )
            return json_response(success=True, data=output.to_dict())
        except Exception as e:
            return self.handle_exception(e)


class UsuarioAPIAtivarView(BaseAPIView):

    def post(self, request: HttpRequest, pk: int) -> JsonResponse:
        try:
            output = self.get_service('usuario_service').ativar(pk)
            return json_response(success=True, data=output.to_dict())
        except Exception as e:
            return self.handle_exception(e)


class UsuarioAPIDesativarView(BaseAPIView):

    def post(self, request: HttpRequest, pk: int) -> JsonResponse:
        try:
            output = self.get_service('usuario_service').desativar(pk)
            return json_response(success=True, data=output.to_dict())
        except Exception as e:
            return self.handle_exception(e)


class UsuarioAPIRolesView(BaseAPIView):

    def post(self, request: HttpRequest, pk: int) -> JsonResponse:
        try:
            data = self.parse_body(request)
            require_fields(data, ['role'])
            output = self.get_service('usuario_service').adicionar_role(pk, data['role'])
            return json_response(success=True, data=output.to_dict())
        except Exception as e:
            return self.handle_exception(e)

    def delete(self, request: HttpRequest, pk: int) -> JsonResponse:
        try:
            data = self.parse_body(request)
            require_fields(data, ['role'])
            output = self.get_service('usuario_service').remover_role(pk, data['role'])
            return json_response(success=True, data=output.to_dict())
        except Exception as e:
            return self.handle_exception(e)
