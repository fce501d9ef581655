"""
Exceções de Domínio do Agriis.

Este módulo define exceções específicas do domínio que permitem
comunicar erros de forma clara e tipada entre as camadas.

Hierarquia:
    DomainException (base)
    ├── ValidationError (argumento inválido / validação de entrada)
    ├── EntityNotFoundError (entidade não existe)
    ├── BusinessRuleViolationError (regra de negócio violada)
    └── ConcurrencyError (conflito de versão)

Na fronteira da aplicação, serviços que retornam Result convertem
estas exceções via Result.from_exception; os demais deixam a exceção
chegar à camada HTTP, que a traduz para o status adequado.
"""


class DomainException(Exception):
    """
    Exceção base para todos os erros de domínio.

    Todas as exceções específicas do domínio devem herdar desta classe.
    Isso permite capturar qualquer erro de domínio de forma genérica.

    Example:
        try:
            pedido.fechar()
        except DomainException as e:
            logger.error(f"Erro de domínio: {e}")
    """

    def __init__(self, message: str, code: str = None):
        self.message = message
        self.code = code or self.__class__.__name__
        super().__init__(self.message)

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"

    def to_dict(self) -> dict:
        """Serializa exceção para dicionário (útil para APIs)."""
        return {
            "error": self.code,
            "message": self.message,
        }


class ValidationError(DomainException):
    """
    Erro de validação de argumentos ou dados de entrada.

    Lançada por factories e mutators de entidades quando os dados
    fornecidos não atendem às invariantes mínimas.

    Example:
        if pedido_id <= 0:
            raise ValidationError(
                "ID do pedido deve ser maior que zero",
                field="pedido_id",
            )
    """

    def __init__(self, message: str, field: str = None):
        self.field = field
        code = f"VALIDATION_ERROR_{field.upper()}" if field else "VALIDATION_ERROR"
        super().__init__(message, code)

    def to_dict(self) -> dict:
        result = super().to_dict()
        if self.field:
            result["field"] = self.field
        return result


class EntityNotFoundError(DomainException):
    """
    Entidade não encontrada no repositório.

    Example:
        cultura = repo.get_by_id(cultura_id)
        if not cultura:
            raise EntityNotFoundError(
                "Cultura não encontrada",
                entity_type="Cultura",
                entity_id=cultura_id,
            )
    """

    def __init__(self, message: str, entity_type: str = None, entity_id=None):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(message, "ENTITY_NOT_FOUND")

    def to_dict(self) -> dict:
        result = super().to_dict()
        if self.entity_type:
            result["entity_type"] = self.entity_type
        if self.entity_id is not None:
            result["entity_id"] = self.entity_id
        return result


class BusinessRuleViolationError(DomainException):
    """
    Violação de regra de negócio.

    Lançada quando uma operação viola uma regra estabelecida
    no domínio (ex.: alterar pedido já fechado).

    Example:
        if pedido.status != StatusPedido.EM_NEGOCIACAO:
            raise BusinessRuleViolationError(
                "Pedido não está em negociação",
                rule="pedido_em_negociacao",
            )
    """

    def __init__(self, message: str, rule: str = None):
        self.rule = rule
        super().__init__(message, "BUSINESS_RULE_VIOLATION")

    def to_dict(self) -> dict:
        result = super().to_dict()
        if self.rule:
            result["rule"] = self.rule
        return result


class ConcurrencyError(DomainException):
    """
    Erro de concorrência/conflito de versão.

    Lançada quando uma operação falha devido a modificação
    concorrente do agregado.
    """

    def __init__(self, message: str):
        super().__init__(message, "CONCURRENCY_ERROR")
