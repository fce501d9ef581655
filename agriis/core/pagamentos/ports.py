"""
Ports (Interfaces) do Domínio de Pagamentos.
"""

from typing import Dict, List, Optional, Protocol, runtime_checkable

from .entities import CulturaFormaPagamento, FormaPagamento


@runtime_checkable
class FormaPagamentoRepository(Protocol):

    def save(self, forma: FormaPagamento) -> FormaPagamento:
        ...

    def get_by_id(self, forma_id: int) -> Optional[FormaPagamento]:
        ...

    def delete(self, forma_id: int) -> bool:
        ...

    def list_ativas(self) -> List[FormaPagamento]:
        ...

    def existe_ativa(self, forma_id: int) -> bool:
        ...


@runtime_checkable
class CulturaFormaPagamentoRepository(Protocol):

    def save(self, assoc: CulturaFormaPagamento) -> CulturaFormaPagamento:
        ...

    def get_by_id(self, assoc_id: int) -> Optional[CulturaFormaPagamento]:
        ...

    def delete(self, assoc_id: int) -> bool:
        ...

    def get_by_chave(
        self, fornecedor_id: int, cultura_id: int, forma_pagamento_id: int
    ) -> Optional[CulturaFormaPagamento]:
        ...

    def list_por_fornecedor(self, fornecedor_id: int) -> List[CulturaFormaPagamento]:
        ...

    def list_formas_por_fornecedor_cultura(
        self, fornecedor_id: int, cultura_id: int
    ) -> List[FormaPagamento]:
        """Formas ativas com associação ativa para o par fornecedor/cultura."""
        ...


class InMemoryFormaPagamentoRepository:

    def __init__(self):
        self._formas: Dict[int, FormaPagamento] = {}
        self._next_id = 1

    def save(self, forma: FormaPagamento) -> FormaPagamento:
        if forma.id is None:
            forma.id = self._next_id
            self._next_id += 1
        self._formas[forma.id] = forma
        return forma

    def get_by_id(self, forma_id: int) -> Optional[FormaPagamento]:
        return self._formas.get(forma_id)

    def delete(self, forma_id: int) -> bool:
        return self._formas.pop(forma_id, None) is not None

    def list_ativas(self) -> List[FormaPagamento]:
        return sorted(
            (f for f in self._formas.values() if f.ativo), key=lambda f: f.descricao
        )

    def existe_ativa(self, forma_id: int) -> bool:
        forma = self._formas.get(forma_id)
        return bool(forma and forma.ativo)


class InMemoryCulturaFormaPagamentoRepository:

    def __init__(self, forma_repo: Optional[InMemoryFormaPagamentoRepository] = None):
        self._assocs: Dict[int, CulturaFormaPagamento] = {}
        self._next_id = 1
        self._forma_repo = forma_repo

    def save(self, assoc: CulturaFormaPagamento) -> CulturaFormaPagamento:
        if assoc.id is None:
            assoc.id = self._next_id
            self._next_id += 1
        self._assocs[assoc.id] = assoc
        return assoc

    def get_by_id(self, assoc_id: int) -> Optional[CulturaFormaPagamento]:
        return self._assocs.get(assoc_id)

    def delete(self, assoc_id: int) -> bool:
        return self._assocs.pop(assoc_id, None) is not None

    def get_by_chave(
        self, fornecedor_id: int, cultura_id: int, forma_pagamento_id: int
    ) -> Optional[CulturaFormaPagamento]:
        for assoc in self._assocs.values():
            if (assoc.fornecedor_id, assoc.cultura_id, assoc.forma_pagamento_id) == (
                fornecedor_id, cultura_id, forma_pagamento_id
            ):
                return assoc
        return None

    def list_por_fornecedor(self, fornecedor_id: int) -> List[CulturaFormaPagamento]:
        return [a for a in self._assocs.values() if a.fornecedor_id == fornecedor_id]

    def list_formas_por_fornecedor_cultura(
        self, fornecedor_id: int, cultura_id: int
    ) -> List[FormaPagamento]:
        if self._forma_repo is None:
            return []
        formas = []
        for assoc in self._assocs.values():
            if assoc.fornecedor_id != fornecedor_id or assoc.cultura_id != cultura_id:
                continue
            forma = self._forma_repo.get_by_id(assoc.forma_pagamento_id)
            if assoc.ativo and forma and forma.ativo:
                formas.append(forma)
        return sorted(formas, key=lambda f: f.descricao)
