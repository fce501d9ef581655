"""
Entidades do Domínio de Culturas.

Cultura agrícola (Soja, Milho, Algodão...) referenciada por produtores,
propriedades, catálogos e formas de pagamento.

Regras:
- Nome obrigatório, até 256 caracteres, único no sistema
"""

from dataclasses import dataclass
from typing import ClassVar, Optional

from agriis.core.shared.entities import EntidadeBase
from agriis.core.shared.exceptions import ValidationError


@dataclass(eq=False)
class Cultura(EntidadeBase):
    """
    Entidade de Domínio: Cultura.

    Attributes:
        nome: Nome da cultura (único)
        descricao: Descrição opcional
        ativo: Se a cultura está disponível para uso

    Example:
        soja = Cultura.criar(nome="Soja", descricao="Glycine max")
        soja.desativar()
    """

    nome: str = ""
    descricao: Optional[str] = None
    ativo: bool = True

    NOME_MAX_LENGTH: ClassVar[int] = 256

    @classmethod
    def criar(cls, nome: str, descricao: Optional[str] = None) -> "Cultura":
        """
        Factory method para criar cultura validada.

        Raises:
            ValidationError: Se nome vazio ou muito longo
        """
        return cls(nome=cls._validar_nome(nome), descricao=descricao)

    @classmethod
    def _validar_nome(cls, nome: str) -> str:
        if not nome or not nome.strip():
            raise ValidationError("Nome da cultura é obrigatório", field="nome")
        nome = nome.strip()
        if len(nome) > cls.NOME_MAX_LENGTH:
            raise ValidationError(
                f"Nome deve ter no máximo {cls.NOME_MAX_LENGTH} caracteres",
                field="nome",
            )
        return nome

    def atualizar(self, nome: str, descricao: Optional[str] = None) -> None:
        self.nome = self._validar_nome(nome)
        self.descricao = descricao
        self._atualizar_timestamp()

    def ativar(self) -> None:
        self.ativo = True
        self._atualizar_timestamp()

    def desativar(self) -> None:
        self.ativo = False
        self._atualizar_timestamp()

    def __repr__(self) -> str:
        return f"Cultura(id={self.id}, nome={self.nome!r}, ativo={self.ativo})"
