"""
Ports (Interfaces) do Domínio de Propriedades.
"""

from typing import Dict, List, Optional, Protocol, runtime_checkable

from .entities import Propriedade


@runtime_checkable
class PropriedadeRepository(Protocol):
    """Persiste o agregado completo (talhões e culturas incluídos)."""

    def save(self, propriedade: Propriedade) -> Propriedade:
        ...

    def get_by_id(self, propriedade_id: int) -> Optional[Propriedade]:
        ...

    def list_por_produtor(self, produtor_id: int) -> List[Propriedade]:
        ...

    def delete(self, propriedade_id: int) -> bool:
        ...


class InMemoryPropriedadeRepository:

    def __init__(self):
        self._propriedades: Dict[int, Propriedade] = {}
        self._next_id = 1
        self._next_child_id = 1

    def save(self, propriedade: Propriedade) -> Propriedade:
        if propriedade.id is None:
            propriedade.id = self._next_id
            self._next_id += 1
        for filho in [*propriedade.talhoes, *propriedade.culturas]:
            if filho.id is None:
                filho.id = self._next_child_id
                self._next_child_id += 1
        self._propriedades[propriedade.id] = propriedade
        return propriedade

    def get_by_id(self, propriedade_id: int) -> Optional[Propriedade]:
        return self._propriedades.get(propriedade_id)

    def list_por_produtor(self, produtor_id: int) -> List[Propriedade]:
        return sorted(
            (p for p in self._propriedades.values() if p.produtor_id == produtor_id),
            key=lambda p: p.nome,
        )

    def delete(self, propriedade_id: int) -> bool:
        return self._propriedades.pop(propriedade_id, None) is not None
