"""
Infraestrutura comum das APIs JSON dos módulos.

Formato:
- Entrada: JSON
- Saída: JSON com estrutura {success, data/error, meta}

Autenticação:
- Header "Authorization: Bearer <access_token>" emitido pelo módulo
  de Autenticação. Views resolvem o usuário via get_user_id().
"""

import json
import logging
from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from typing import Any, Dict, Iterable, Optional

from django.http import HttpRequest, JsonResponse
from django.utils.decorators import method_decorator
from django.views import View
from django.views.decorators.csrf import csrf_exempt

from agriis.config.container import get_container
from agriis.core.shared.dtos import PaginacaoParams
from agriis.core.shared.exceptions import (
    BusinessRuleViolationError,
    DomainException,
    EntityNotFoundError,
    ValidationError,
)
from agriis.core.shared.results import Result

logger = logging.getLogger(__name__)

NOT_FOUND_CODES = ("ENTITY_NOT_FOUND", "PEDIDO_NAO_ENCONTRADO")


# =============================================================================
# Helpers
# =============================================================================

def json_response(success: bool, data: Any = None, error: str = None,
                  status: int = 200, meta: Dict = None) -> JsonResponse:
    """
    Cria resposta JSON padronizada.

    Args:
        success: Se operação foi bem sucedida
        data: Dados da resposta
        error: Mensagem de erro (se aplicável)
        status: HTTP status code
        meta: Metadados adicionais
    """
    response = {'success': success}

    if data is not None:
        response['data'] = data

    if error is not None:
        response['error'] = error

    if meta is not None:
        response['meta'] = meta

    return JsonResponse(response, status=status)


def parse_json_body(request: HttpRequest) -> Dict:
    """
    Parseia body JSON do request.

    Raises:
        ValueError: Se JSON inválido ou não for um objeto
    """
    if not request.body:
        return {}

    try:
        data = json.loads(request.body)
    except json.JSONDecodeError as e:
        raise ValueError(f"JSON inválido: {e}")

    if not isinstance(data, dict):
        raise ValueError("JSON inválido: esperado um objeto")
    return data


def get_bearer_token(request: HttpRequest) -> Optional[str]:
    header = request.headers.get('Authorization', '')
    if header.lower().startswith('bearer '):
        return header[7:].strip() or None
    return None


def get_user_id(request: HttpRequest) -> Optional[int]:
    """Extrai ID do usuário do access token (None se ausente/inválido)."""
    token = get_bearer_token(request)
    if not token:
        return None
    servico = getattr(get_container().services, 'autenticacao_service')()
    return servico.obter_usuario_id_do_token(token)


def require_fields(data: Dict, fields: Iterable[str]) -> None:
    """
    Valida presença de campos obrigatórios no body.

    Raises:
        ValidationError: No primeiro campo ausente ou vazio
    """
    for name in fields:
        value = data.get(name)
        if value is None or (isinstance(value, str) and not value.strip()):
            raise ValidationError(f"Campo obrigatório: {name}", field=name)


def parse_int(value: Any, field: str) -> Optional[int]:
    """Converte parâmetro opcional para int (ValidationError se inválido)."""
    if value is None or value == '':
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field} deve ser um número inteiro", field=field)


def parse_date(value: Any, field: str) -> Optional[date]:
    """Converte 'AAAA-MM-DD' para date (ValidationError se inválido)."""
    if value is None or value == '':
        return None
    try:
        return date.fromisoformat(str(value)[:10])
    except ValueError:
        raise ValidationError(f"{field} deve estar no formato AAAA-MM-DD", field=field)


def parse_datetime(value: Any, field: str) -> Optional[datetime]:
    """Converte ISO 8601 para datetime (ValidationError se inválido)."""
    if value is None or value == '':
        return None
    try:
        return datetime.fromisoformat(str(value))
    except ValueError:
        raise ValidationError(f"{field} deve estar no formato ISO 8601", field=field)


def parse_decimal(value: Any, field: str) -> Optional[Decimal]:
    if value is None or value == '':
        return None
    try:
        return Decimal(str(value))
    except InvalidOperation:
        raise ValidationError(f"{field} deve ser numérico", field=field)


def parse_bool(value: Any) -> Optional[bool]:
    if value is None or value == '':
        return None
    if isinstance(value, bool):
        return value
    return str(value).lower() in ('1', 'true', 'sim', 'yes')


# =============================================================================
# Base API View
# =============================================================================

@method_decorator(csrf_exempt, name='dispatch')
class BaseAPIView(View):
    """
    View base para APIs JSON.

    Fornece:
    - Parsing de JSON
    - Acesso ao container DI
    - Tratamento de erros padronizado (exceções e Result)
    """

    def get_container(self):
        return get_container()

    def get_service(self, service_name: str):
        container = self.get_container()
        return getattr(container.services, service_name)()

    def parse_body(self, request: HttpRequest) -> Dict:
        return parse_json_body(request)

    def get_paginacao(self, request: HttpRequest) -> PaginacaoParams:
        return PaginacaoParams.criar(
            request.GET.get('pagina', request.GET.get('page', 1)),
            request.GET.get('por_pagina', request.GET.get('per_page', 20)),
        )

    def unauthorized(self) -> JsonResponse:
        return json_response(success=False, error="Não autenticado", status=401)

    def result_response(
        self, result: Result, status: int = 200, failure_status: Optional[int] = None
    ) -> JsonResponse:
        """Converte Result em resposta (não encontrado -> 404, demais falhas -> 400)."""
        if result.is_success:
            value = result.value
            if isinstance(value, list):
                data = [v.to_dict() if hasattr(v, 'to_dict') else v for v in value]
            else:
                data = value.to_dict() if hasattr(value, 'to_dict') else value
            return json_response(success=True, data=data, status=status)

        meta = {'error_code': result.error_code}
        if result.validation_errors:
            meta['validation_errors'] = result.validation_errors
        falha_status = failure_status or (404 if result.error_code in NOT_FOUND_CODES else 400)
        return json_response(success=False, error=result.error, status=falha_status, meta=meta)

    def handle_exception(self, e: Exception) -> JsonResponse:
        """
        Trata exceções e retorna resposta apropriada.

        ValidationError -> 400, EntityNotFoundError -> 404,
        BusinessRuleViolationError -> 422, demais erros de domínio -> 400,
        erros inesperados -> 500.
        """
        if isinstance(e, ValidationError):
            return json_response(
                success=False,
                error=getattr(e, 'message', str(e)),
                status=400,
                meta={'field': getattr(e, 'field', None)}
            )

        if isinstance(e, EntityNotFoundError):
            return json_response(
                success=False,
                error=getattr(e, 'message', str(e)),
                status=404
            )

        if isinstance(e, BusinessRuleViolationError):
            return json_response(
                success=False,
                error=getattr(e, 'message', str(e)),
                status=422,
                meta={'rule': getattr(e, 'rule', None)}
            )

        if isinstance(e, DomainException):
            return json_response(
                success=False,
                error=getattr(e, 'message', str(e)),
                status=400
            )

        if isinstance(e, ValueError):
            return json_response(
                success=False,
                error=getattr(e, 'message', str(e)),
                status=400
            )

        logger.exception(f"Erro inesperado na API: {e}")
        return json_response(
            success=False,
            error="Erro interno do servidor",
            status=500
        )
