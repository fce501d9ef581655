"""
DTOs do Domínio de Pagamentos.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from .entities import CulturaFormaPagamento, FormaPagamento


@dataclass(frozen=True)
class CriarFormaPagamentoInputDTO:
    descricao: str


@dataclass(frozen=True)
class AtualizarFormaPagamentoInputDTO:
    descricao: str
    ativo: bool = True


@dataclass(frozen=True)
class CriarCulturaFormaPagamentoInputDTO:
    fornecedor_id: int
    cultura_id: int
    forma_pagamento_id: int


@dataclass
class FormaPagamentoOutputDTO:
    id: int
    descricao: str
    ativo: bool
    criado_em: datetime

    @classmethod
    def from_entity(cls, forma: FormaPagamento) -> "FormaPagamentoOutputDTO":
        return cls(
            id=forma.id,
            descricao=forma.descricao,
            ativo=forma.ativo,
            criado_em=forma.criado_em,
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "descricao": self.descricao,
            "ativo": self.ativo,
            "criado_em": self.criado_em.isoformat(),
        }


@dataclass
class CulturaFormaPagamentoOutputDTO:
    id: int
    fornecedor_id: int
    cultura_id: int
    forma_pagamento_id: int
    forma_pagamento_descricao: Optional[str]
    ativo: bool
    criado_em: datetime

    @classmethod
    def from_entity(cls, assoc: CulturaFormaPagamento) -> "CulturaFormaPagamentoOutputDTO":
        return cls(
            id=assoc.id,
            fornecedor_id=assoc.fornecedor_id,
            cultura_id=assoc.cultura_id,
            forma_pagamento_id=assoc.forma_pagamento_id,
            forma_pagamento_descricao=(
                assoc.forma_pagamento.descricao if assoc.forma_pagamento else None
            ),
            ativo=assoc.ativo,
            criado_em=assoc.criado_em,
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "fornecedor_id": self.fornecedor_id,
            "cultura_id": self.cultura_id,
            "forma_pagamento_id": self.forma_pagamento_id,
            "forma_pagamento_descricao": self.forma_pagamento_descricao,
            "ativo": self.ativo,
            "criado_em": self.criado_em.isoformat(),
        }
