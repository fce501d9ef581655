"""
Entidades do Domínio de Pagamentos.

- FormaPagamento: forma aceita nas negociações (à vista, boleto 30 dias...)
- CulturaFormaPagamento: quais formas um fornecedor aceita para cada cultura

Regras:
- Descrição obrigatória, até 45 caracteres
- (fornecedor, cultura, forma de pagamento) é única
"""

from dataclasses import dataclass
from typing import ClassVar, Optional

from agriis.core.shared.entities import EntidadeBase
from agriis.core.shared.exceptions import ValidationError


@dataclass(eq=False)
class FormaPagamento(EntidadeBase):

    descricao: str = ""
    ativo: bool = True

    DESCRICAO_MAX_LENGTH: ClassVar[int] = 45

    @classmethod
    def criar(cls, descricao: str) -> "FormaPagamento":
        return cls(descricao=cls._validar_descricao(descricao))

    @classmethod
    def _validar_descricao(cls, descricao: str) -> str:
        if not descricao or not descricao.strip():
            raise ValidationError("Descrição é obrigatória", field="descricao")
        descricao = descricao.strip()
        if len(descricao) > cls.DESCRICAO_MAX_LENGTH:
            raise ValidationError(
                f"Descrição deve ter no máximo {cls.DESCRICAO_MAX_LENGTH} caracteres",
                field="descricao",
            )
        return descricao

    def atualizar_descricao(self, descricao: str) -> None:
        self.descricao = self._validar_descricao(descricao)
        self._atualizar_timestamp()

    def ativar(self) -> None:
        self.ativo = True
        self._atualizar_timestamp()

    def desativar(self) -> None:
        self.ativo = False
        self._atualizar_timestamp()


@dataclass(eq=False)
class CulturaFormaPagamento(EntidadeBase):
    """
    Associação fornecedor x cultura x forma de pagamento.

    Example:
        assoc = CulturaFormaPagamento.criar(fornecedor_id=1, cultura_id=2, forma_pagamento_id=3)
    """

    fornecedor_id: int = 0
    cultura_id: int = 0
    forma_pagamento_id: int = 0
    ativo: bool = True
    forma_pagamento: Optional[FormaPagamento] = None

    @classmethod
    def criar(
        cls, fornecedor_id: int, cultura_id: int, forma_pagamento_id: int
    ) -> "CulturaFormaPagamento":
        for nome, valor in (
            ("fornecedor_id", fornecedor_id),
            ("cultura_id", cultura_id),
            ("forma_pagamento_id", forma_pagamento_id),
        ):
            if not valor or valor <= 0:
                raise ValidationError(f"{nome} deve ser maior que zero", field=nome)

        return cls(
            fornecedor_id=fornecedor_id,
            cultura_id=cultura_id,
            forma_pagamento_id=forma_pagamento_id,
        )

    def ativar(self) -> None:
        self.ativo = True
        self._atualizar_timestamp()

    def desativar(self) -> None:
        self.ativo = False
        self._atualizar_timestamp()
