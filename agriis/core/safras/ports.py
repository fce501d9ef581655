"""
Ports (Interfaces) do Domínio de Safras.
"""

from datetime import date
from typing import Dict, List, Optional, Protocol, runtime_checkable

from .entities import Safra


@runtime_checkable
class SafraRepository(Protocol):

    def save(self, safra: Safra) -> Safra:
        ...

    def get_by_id(self, safra_id: int) -> Optional[Safra]:
        ...

    def get_by_periodo(
        self, plantio_inicial: date, plantio_final: date, plantio_nome: str
    ) -> Optional[Safra]:
        """Busca pela chave natural (período + nome do plantio)."""
        ...

    def delete(self, safra_id: int) -> bool:
        ...

    def list_all(self) -> List[Safra]:
        """Lista da mais recente para a mais antiga (plantio_inicial)."""
        ...


class InMemorySafraRepository:
    """Implementação em memória para testes."""

    def __init__(self):
        self._safras: Dict[int, Safra] = {}
        self._next_id = 1

    def save(self, safra: Safra) -> Safra:
        if safra.id is None:
            safra.id = self._next_id
            self._next_id += 1
        self._safras[safra.id] = safra
        return safra

    def get_by_id(self, safra_id: int) -> Optional[Safra]:
        return self._safras.get(safra_id)

    def get_by_periodo(self, plantio_inicial, plantio_final, plantio_nome) -> Optional[Safra]:
        for safra in self._safras.values():
            if (
                safra.plantio_inicial == plantio_inicial
                and safra.plantio_final == plantio_final
                and safra.plantio_nome == plantio_nome
            ):
                return safra
        return None

    def delete(self, safra_id: int) -> bool:
        return self._safras.pop(safra_id, None) is not None

    def list_all(self) -> List[Safra]:
        return sorted(self._safras.values(), key=lambda s: s.plantio_inicial, reverse=True)

    def clear(self) -> None:
        self._safras.clear()
        self._next_id = 1
