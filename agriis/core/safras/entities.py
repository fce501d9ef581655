"""
Entidades do Domínio de Safras.

Safra representa o período de plantio/colheita de referência
para catálogos, combos e culturas das propriedades.

Regras:
- plantio_inicial < plantio_final
- plantio_inicial não anterior a 1900
- plantio_final até 10 anos no futuro
- plantio_nome obrigatório (até 256) e descrição obrigatória (até 64)
- ano_colheita derivado das datas
- Safra ativa: hoje dentro do período e plantio_nome == "S1"
"""

from dataclasses import dataclass, field
from datetime import date
from typing import ClassVar

from agriis.core.shared.entities import EntidadeBase
from agriis.core.shared.exceptions import ValidationError


def _daqui_a_anos(anos: int) -> date:
    hoje = date.today()
    try:
        return hoje.replace(year=hoje.year + anos)
    except ValueError:  # 29/02
        return hoje.replace(year=hoje.year + anos, day=28)


@dataclass(eq=False)
class Safra(EntidadeBase):
    """
    Entidade de Domínio: Safra.

    Example:
        safra = Safra.criar(
            plantio_inicial=date(2024, 9, 1),
            plantio_final=date(2025, 3, 31),
            plantio_nome="S1",
            descricao="Safra verão 24/25",
        )
        safra.safra_formatada   # "2024/2025 S1"
        safra.ano_colheita      # 2025
    """

    plantio_inicial: date = field(default_factory=date.today)
    plantio_final: date = field(default_factory=date.today)
    plantio_nome: str = ""
    descricao: str = ""

    PLANTIO_NOME_MAX_LENGTH: ClassVar[int] = 256
    DESCRICAO_MAX_LENGTH: ClassVar[int] = 64
    NOME_SAFRA_PRINCIPAL: ClassVar[str] = "S1"

    @classmethod
    def criar(
        cls,
        plantio_inicial: date,
        plantio_final: date,
        plantio_nome: str,
        descricao: str,
    ) -> "Safra":
        """
        Factory method para criar safra validada.

        Raises:
            ValidationError: Se datas, nome ou descrição inválidos
        """
        cls._validar_datas(plantio_inicial, plantio_final)
        return cls(
            plantio_inicial=plantio_inicial,
            plantio_final=plantio_final,
            plantio_nome=cls._validar_plantio_nome(plantio_nome),
            descricao=cls._validar_descricao(descricao),
        )

    @classmethod
    def _validar_datas(cls, inicial: date, final: date) -> None:
        if not inicial or not final:
            raise ValidationError("Datas de plantio são obrigatórias", field="plantio_inicial")
        if inicial >= final:
            raise ValidationError(
                "A data inicial do plantio deve ser anterior à data final",
                field="plantio_inicial",
            )
        if inicial < date(1900, 1, 1):
            raise ValidationError(
                "A data inicial do plantio não pode ser anterior a 1900",
                field="plantio_inicial",
            )
        if final > _daqui_a_anos(10):
            raise ValidationError(
                "A data final do plantio não pode ser superior a 10 anos no futuro",
                field="plantio_final",
            )

    @classmethod
    def _validar_plantio_nome(cls, nome: str) -> str:
        if not nome or not nome.strip():
            raise ValidationError("O nome do plantio é obrigatório", field="plantio_nome")
        if len(nome.strip()) > cls.PLANTIO_NOME_MAX_LENGTH:
            raise ValidationError(
                "O nome do plantio não pode ter mais de 256 caracteres",
                field="plantio_nome",
            )
        return nome.strip()

    @classmethod
    def _validar_descricao(cls, descricao: str) -> str:
        if not descricao or not descricao.strip():
            raise ValidationError("A descrição é obrigatória", field="descricao")
        if len(descricao.strip()) > cls.DESCRICAO_MAX_LENGTH:
            raise ValidationError(
                "A descrição não pode ter mais de 64 caracteres",
                field="descricao",
            )
        return descricao.strip()

    def atualizar(
        self,
        plantio_inicial: date,
        plantio_final: date,
        plantio_nome: str,
        descricao: str,
    ) -> None:
        self._validar_datas(plantio_inicial, plantio_final)
        self.plantio_nome = self._validar_plantio_nome(plantio_nome)
        self.descricao = self._validar_descricao(descricao)
        self.plantio_inicial = plantio_inicial
        self.plantio_final = plantio_final
        self._atualizar_timestamp()

    @property
    def ano_colheita(self) -> int:
        if self.plantio_final.year > self.plantio_inicial.year:
            return self.plantio_final.year
        return self.plantio_inicial.year

    def esta_ativa(self, hoje: date = None) -> bool:
        hoje = hoje or date.today()
        return (
            self.plantio_inicial <= hoje <= self.plantio_final
            and self.plantio_nome == self.NOME_SAFRA_PRINCIPAL
        )

    @property
    def safra_formatada(self) -> str:
        return f"{self.plantio_inicial.year}/{self.plantio_final.year} {self.plantio_nome}"

    @property
    def anos_formatados(self) -> str:
        return f"{self.plantio_inicial.year}/{self.plantio_final.year}"

    def __repr__(self) -> str:
        return f"Safra(id={self.id}, {self.safra_formatada})"
