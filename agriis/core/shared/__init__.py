"""
Shared Domain Components.

Contém componentes compartilhados entre todos os módulos:
- Exceções de domínio e tipo Result
- Entidade base auditável
- Objetos de valor (AreaPlantio, Cpf, Cnpj)
- Interfaces (Ports)
- Base classes para Domain Events
- DTOs de paginação
"""

from .exceptions import (
    DomainException,
    ValidationError,
    EntityNotFoundError,
    BusinessRuleViolationError,
    ConcurrencyError,
)
from .events import DomainEvent, EventMetadata, evento_from_dict, registrar_evento
from .interfaces import UnitOfWork, EventPublisher, EventStore
from .entities import EntidadeBase, EnumFromString, to_decimal
from .results import Result
from .dtos import PaginacaoParams, PaginatedResultDTO
from .value_objects import AreaPlantio, Cpf, Cnpj

__all__ = [
    "DomainException",
    "ValidationError",
    "EntityNotFoundError",
    "BusinessRuleViolationError",
    "ConcurrencyError",
    "DomainEvent",
    "EventMetadata",
    "evento_from_dict",
    "registrar_evento",
    "UnitOfWork",
    "EventPublisher",
    "EventStore",
    "EntidadeBase",
    "EnumFromString",
    "to_decimal",
    "Result",
    "PaginacaoParams",
    "PaginatedResultDTO",
    "AreaPlantio",
    "Cpf",
    "Cnpj",
]
