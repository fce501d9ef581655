"""
Entidade base do Agriis.

Toda entidade de domínio herda de EntidadeBase, que fornece:
- id inteiro (None até o primeiro save)
- carimbos de auditoria criado_em / atualizado_em
- igualdade por identidade (tipo + id)

Subclasses devem ser declaradas com @dataclass(eq=False) para
preservar __eq__/__hash__ definidos aqui.
"""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal, InvalidOperation
from typing import Any, Optional

from .exceptions import ValidationError


def to_decimal(value: Any, field_name: str = "valor") -> Decimal:
    """
    Converte número/string para Decimal.

    Args:
        value: Valor a converter (int, float, str ou Decimal)
        field_name: Nome do campo para mensagem de erro

    Raises:
        ValidationError: Se valor não for numérico
    """
    if isinstance(value, Decimal):
        return value
    if value is None or isinstance(value, bool):
        raise ValidationError(f"{field_name} deve ser numérico", field=field_name)
    try:
        # float passa por str para evitar 0.1 -> 0.1000000000000000055...
        return Decimal(str(value))
    except (InvalidOperation, ValueError):
        raise ValidationError(f"{field_name} deve ser numérico", field=field_name)


@dataclass(eq=False)
class EntidadeBase:
    """
    Entidade base com identidade e auditoria.

    Attributes:
        id: Identificador inteiro atribuído pelo repositório
        criado_em: Data/hora de criação
        atualizado_em: Data/hora da última alteração (None se nunca alterada)
    """

    id: Optional[int] = None
    criado_em: datetime = field(default_factory=datetime.now)
    atualizado_em: Optional[datetime] = None

    def _atualizar_timestamp(self) -> None:
        """Marca a entidade como modificada agora."""
        self.atualizado_em = datetime.now()

    @property
    def eh_transiente(self) -> bool:
        """True se a entidade ainda não foi persistida."""
        return self.id is None

    def __eq__(self, other) -> bool:
        if not isinstance(other, EntidadeBase) or type(self) is not type(other):
            return False
        if self.id is None or other.id is None:
            return self is other
        return self.id == other.id

    def __hash__(self) -> int:
        if self.id is None:
            return id(self)
        return hash((type(self).__name__, self.id))


class EnumFromString:
    """
    Mixin de Enum com conversão tolerante a partir de texto.

    Example:
        class StatusCombo(EnumFromString, Enum):
            ATIVO = "Ativo"

        StatusCombo.from_string("ativo")  # StatusCombo.ATIVO
    """

    @classmethod
    def from_string(cls, value):
        """Aceita o próprio enum, o nome (VALOR_FIXO) ou o valor (ValorFixo)."""
        if isinstance(value, cls):
            return value
        try:
            return cls[str(value).upper()]
        except KeyError:
            pass
        for item in cls:
            if item.value.lower() == str(value).lower():
                return item
        raise ValidationError(f"{cls.__name__} inválido: {value}", field=cls.__name__)
