"""
Ports (Interfaces) do Domínio de Culturas.
"""

from typing import Dict, List, Optional, Protocol, runtime_checkable

from .entities import Cultura


@runtime_checkable
class CulturaRepository(Protocol):
    """Interface do repositório de culturas."""

    def save(self, cultura: Cultura) -> Cultura:
        ...

    def get_by_id(self, cultura_id: int) -> Optional[Cultura]:
        ...

    def get_by_nome(self, nome: str) -> Optional[Cultura]:
        """Busca por nome (case-insensitive)."""
        ...

    def delete(self, cultura_id: int) -> bool:
        ...

    def list_all(self) -> List[Cultura]:
        """Lista ordenada por nome."""
        ...

    def list_ativas(self) -> List[Cultura]:
        ...


class InMemoryCulturaRepository:
    """Implementação em memória para testes."""

    def __init__(self):
        self._culturas: Dict[int, Cultura] = {}
        self._next_id = 1

    def save(self, cultura: Cultura) -> Cultura:
        if cultura.id is None:
            cultura.id = self._next_id
            self._next_id += 1
        self._culturas[cultura.id] = cultura
        return cultura

    def get_by_id(self, cultura_id: int) -> Optional[Cultura]:
        return self._culturas.get(cultura_id)

    def get_by_nome(self, nome: str) -> Optional[Cultura]:
        nome = (nome or "").strip().lower()
        for cultura in self._culturas.values():
            if cultura.nome.lower() == nome:
                return cultura
        return None

    def delete(self, cultura_id: int) -> bool:
        return self._culturas.pop(cultura_id, None) is not None

    def list_all(self) -> List[Cultura]:
        return sorted(self._culturas.values(), key=lambda c: c.nome)

    def list_ativas(self) -> List[Cultura]:
        return [c for c in self.list_all() if c.ativo]

    def clear(self) -> None:
        self._culturas.clear()
        self._next_id = 1
