"""
Objetos de Valor compartilhados.

- AreaPlantio: área em hectares (0 a 1.000.000, 4 casas decimais)
- Cpf: CPF com dígitos verificadores validados
- Cnpj: CNPJ com dígitos verificadores validados

Imutáveis e comparados por valor.
"""

from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_EVEN
import re
from typing import Union

from .entities import to_decimal
from .exceptions import ValidationError

Numero = Union[int, float, str, Decimal]


@dataclass(frozen=True, order=True)
class AreaPlantio:
    """
    Área de plantio em hectares.

    Example:
        area = AreaPlantio.criar(150.5)
        area.valor_formatado          # "150.50 ha"
        (area + AreaPlantio.criar(10)).valor   # Decimal("160.5000")
    """

    valor: Decimal = Decimal("0")

    LIMITE_MAXIMO = Decimal("1000000")
    HECTARES_POR_ALQUEIRE_PAULISTA = Decimal("2.42")
    HECTARES_POR_ALQUEIRE_MINEIRO = Decimal("4.84")

    @classmethod
    def criar(cls, valor: Numero) -> "AreaPlantio":
        """
        Cria área validada.

        Raises:
            ValidationError: Se negativa ou acima do limite
        """
        valor = to_decimal(valor, "area")
        if valor < 0:
            raise ValidationError("Área de plantio não pode ser negativa", field="area")
        if valor > cls.LIMITE_MAXIMO:
            raise ValidationError(
                "Área de plantio excede o limite máximo permitido", field="area"
            )
        return cls(valor=valor.quantize(Decimal("0.0001"), rounding=ROUND_HALF_EVEN))

    @classmethod
    def de_metros_quadrados(cls, metros: Numero) -> "AreaPlantio":
        return cls.criar(to_decimal(metros) / Decimal("10000"))

    @classmethod
    def de_alqueires_paulistas(cls, alqueires: Numero) -> "AreaPlantio":
        return cls.criar(to_decimal(alqueires) * cls.HECTARES_POR_ALQUEIRE_PAULISTA)

    @property
    def valor_formatado(self) -> str:
        return f"{self.valor:.2f} ha"

    @property
    def em_metros_quadrados(self) -> Decimal:
        return self.valor * 10000

    @property
    def em_alqueires_paulistas(self) -> Decimal:
        return self.valor / self.HECTARES_POR_ALQUEIRE_PAULISTA

    def __add__(self, other: "AreaPlantio") -> "AreaPlantio":
        return AreaPlantio.criar(self.valor + other.valor)

    def __sub__(self, other: "AreaPlantio") -> "AreaPlantio":
        return AreaPlantio.criar(self.valor - other.valor)

    def __str__(self) -> str:
        return self.valor_formatado


def _somente_digitos(valor: str) -> str:
    return re.sub(r"[^\d]", "", valor or "")


def _digito_verificador(digitos: str, pesos) -> int:
    soma = sum(int(d) * p for d, p in zip(digitos, pesos))
    resto = soma % 11
    return 0 if resto < 2 else 11 - resto


@dataclass(frozen=True)
class Cpf:
    """CPF (somente dígitos em `valor`)."""

    valor: str

    @classmethod
    def criar(cls, valor: str) -> "Cpf":
        if not valor or not valor.strip():
            raise ValidationError("CPF não pode ser vazio ou nulo", field="cpf")
        digitos = _somente_digitos(valor)
        if not cls.eh_valido(digitos):
            raise ValidationError("CPF inválido", field="cpf")
        return cls(valor=digitos)

    @staticmethod
    def eh_valido(digitos: str) -> bool:
        digitos = _somente_digitos(digitos)
        if len(digitos) != 11 or len(set(digitos)) == 1:
            return False
        dv1 = _digito_verificador(digitos[:9], range(10, 1, -1))
        dv2 = _digito_verificador(digitos[:10], range(11, 1, -1))
        return digitos[-2:] == f"{dv1}{dv2}"

    @property
    def valor_formatado(self) -> str:
        v = self.valor
        return f"{v[:3]}.{v[3:6]}.{v[6:9]}-{v[9:]}"

    def __str__(self) -> str:
        return self.valor_formatado


@dataclass(frozen=True)
class Cnpj:
    """CNPJ (somente dígitos em `valor`)."""

    valor: str

    PESOS_1 = (5, 4, 3, 2, 9, 8, 7, 6, 5, 4, 3, 2)
    PESOS_2 = (6, 5, 4, 3, 2, 9, 8, 7, 6, 5, 4, 3, 2)

    @classmethod
    def criar(cls, valor: str) -> "Cnpj":
        if not valor or not valor.strip():
            raise ValidationError("CNPJ não pode ser vazio ou nulo", field="cnpj")
        digitos = _somente_digitos(valor)
        if not cls.eh_valido(digitos):
            raise ValidationError("CNPJ inválido", field="cnpj")
        return cls(valor=digitos)

    @classmethod
    def eh_valido(cls, digitos: str) -> bool:
        digitos = _somente_digitos(digitos)
        if len(digitos) != 14 or len(set(digitos)) == 1:
            return False
        dv1 = _digito_verificador(digitos[:12], cls.PESOS_1)
        dv2 = _digito_verificador(digitos[:13], cls.PESOS_2)
        return digitos[-2:] == f"{dv1}{dv2}"

    @property
    def valor_formatado(self) -> str:
        v = self.valor
        return f"{v[:2]}.{v[2:5]}.{v[5:8]}/{v[8:12]}-{v[12:]}"

    def __str__(self) -> str:
        return self.valor_formatado
