"""
API Views JSON para Autenticação.

Endpoints:
- POST /api/autenticacao/login/          - {"email", "senha"}
- POST /api/autenticacao/refresh/        - {"refresh_token"}
- POST /api/autenticacao/logout/         - {"refresh_token"?} (Bearer)
- POST /api/autenticacao/alterar-senha/  - {"senha_atual", "nova_senha"} (Bearer)
"""

import logging

from django.http import HttpRequest, JsonResponse

from ..shared.api import BaseAPIView, get_user_id, require_fields

logger = logging.getLogger(__name__)


def _origem(request: HttpRequest):
    return request.META.get('REMOTE_ADDR'), request.headers.get('User-Agent')


class LoginAPIView(BaseAPIView):

    def post(self, request: HttpRequest) -> JsonResponse:
        try:
            data = self.parse_body(request)
            require_fields(data, ['email', 'senha'])
            endereco_ip, user_agent = _origem(request)

            result = self.get_service('autenticacao_service').login(
                data['email'], data['senha'], endereco_ip, user_agent
            )
            return self.result_response(result, failure_status=401)
        except Exception as e:
            return self.handle_exception(e)


class RefreshTokenAPIView(BaseAPIView):

    def post(self, request: HttpRequest) -> JsonResponse:
        try:
            data = self.parse_body(request)
            require_fields(data, ['refresh_token'])
            endereco_ip, user_agent = _origem(request)

            result = self.get_service('autenticacao_service').renovar_token(
                data['refresh_token'], endereco_ip, user_agent
            )
            return self.result_response(result)
        except Exception as e:
            return self.handle_exception(e)


class LogoutAPIView(BaseAPIView):

    def post(self, request: HttpRequest) -> JsonResponse:
        try:
            usuario_id = get_user_id(request)
            if usuario_id is None:
                return self.unauthorized()

            data = self.parse_body(request)
            result = self.get_service('autenticacao_service').logout(
                usuario_id, data.get('refresh_token')
            )
            return self.result_response(result)
        except Exception as e:
            return self.handle_exception(e)


class AlterarSenhaAPIView(BaseAPIView):

    def post(self, request: HttpRequest) -> JsonResponse:
        try:
            usuario_id = get_user_id(request)
            if usuario_id is None:
                return self.unauthorized()

            data = self.parse_body(request)
            require_fields(data, ['senha_atual', 'nova_senha'])
            result = self.get_service('autenticacao_service').alterar_senha(
                usuario_id, data['senha_atual'], data['nova_senha']
            )
            return self.result_response(result)
        except Exception as e:
            return self.handle_exception(e)
