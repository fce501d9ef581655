"""
Result - Retorno explícito de sucesso/falha nas fronteiras da aplicação.

Serviços de Pedidos, Propostas e Autenticação retornam Result em vez
de propagar exceções de domínio, permitindo que a camada HTTP decida
o status sem try/except por tipo.

Example:
    result = proposta_service.criar_proposta(pedido_id, usuario_id, client_id, dto)
    if result.is_failure:
        return json_response(False, error=result.error, status=400)
    return json_response(True, data=result.value.to_dict())
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Generic, List, Optional, TypeVar

from .exceptions import DomainException, ValidationError

T = TypeVar("T")
U = TypeVar("U")


@dataclass(frozen=True)
class Result(Generic[T]):
    """
    Resultado de uma operação.

    Attributes:
        is_success: Se a operação foi bem sucedida
        value: Valor em caso de sucesso
        error: Mensagem de erro em caso de falha
        error_code: Código de erro opcional
        validation_errors: Erros por campo (falhas de validação)
    """

    is_success: bool
    value: Optional[T] = None
    error: Optional[str] = None
    error_code: Optional[str] = None
    validation_errors: Dict[str, List[str]] = field(default_factory=dict)

    @property
    def is_failure(self) -> bool:
        return not self.is_success

    @classmethod
    def success(cls, value: T = None) -> "Result[T]":
        return cls(is_success=True, value=value)

    @classmethod
    def failure(cls, error: str, error_code: Optional[str] = None) -> "Result[T]":
        return cls(is_success=False, error=error, error_code=error_code)

    @classmethod
    def validation_failure(cls, errors: Dict[str, List[str]]) -> "Result[T]":
        return cls(
            is_success=False,
            error="Erro de validação",
            error_code="VALIDATION_ERROR",
            validation_errors=dict(errors),
        )

    @classmethod
    def from_exception(cls, exc: DomainException) -> "Result[T]":
        """Converte exceção de domínio em falha."""
        if isinstance(exc, ValidationError) and exc.field:
            return cls(
                is_success=False,
                error=exc.message,
                error_code=exc.code,
                validation_errors={exc.field: [exc.message]},
            )
        return cls.failure(exc.message, exc.code)

    @classmethod
    def combine(cls, *results: "Result[Any]") -> "Result[None]":
        """Primeira falha encontrada, ou sucesso se todos forem sucesso."""
        for result in results:
            if result.is_failure:
                return cls(
                    is_success=False,
                    error=result.error,
                    error_code=result.error_code,
                    validation_errors=result.validation_errors,
                )
        return cls.success()

    def map(self, func: Callable[[T], U]) -> "Result[U]":
        if self.is_failure:
            return Result(
                is_success=False,
                error=self.error,
                error_code=self.error_code,
                validation_errors=self.validation_errors,
            )
        return Result.success(func(self.value))

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"success": self.is_success}
        if self.is_success:
            value = self.value
            data["data"] = value.to_dict() if hasattr(value, "to_dict") else value
        else:
            data["error"] = self.error
            if self.error_code:
                data["error_code"] = self.error_code
            if self.validation_errors:
                data["validation_errors"] = self.validation_errors
        return data
