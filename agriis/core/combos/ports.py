"""
Ports (Interfaces) do Domínio de Combos.
"""

from datetime import datetime
from typing import Dict, List, Optional, Protocol, runtime_checkable

from .entities import Combo, StatusCombo


@runtime_checkable
class ComboRepository(Protocol):

    def save(self, combo: Combo) -> Combo:
        ...

    def get_by_id(self, combo_id: int) -> Optional[Combo]:
        ...

    def delete(self, combo_id: int) -> bool:
        ...

    def existe_combo_ativo(self, fornecedor_id: int, safra_id: int, nome: str) -> bool:
        ...

    def list_por_fornecedor(self, fornecedor_id: int) -> List[Combo]:
        ...

    def list_vigentes(self, agora: datetime) -> List[Combo]:
        """Combos ativos com agora dentro do período."""
        ...

    def list_ativos_expirados(self, agora: datetime) -> List[Combo]:
        """Combos ainda ativos com data_fim anterior a agora."""
        ...


class InMemoryComboRepository:

    def __init__(self):
        self._combos: Dict[int, Combo] = {}
        self._next_id = 1
        self._next_child_id = 1

    def _atribuir_ids(self, colecao) -> None:
        for filho in colecao:
            if filho.id is None:
                filho.id = self._next_child_id
                self._next_child_id += 1

    def save(self, combo: Combo) -> Combo:
        if combo.id is None:
            combo.id = self._next_id
            self._next_id += 1
        self._atribuir_ids(combo.itens)
        self._atribuir_ids(combo.locais_recebimento)
        self._atribuir_ids(combo.categorias_desconto)
        self._combos[combo.id] = combo
        return combo

    def get_by_id(self, combo_id: int) -> Optional[Combo]:
        return self._combos.get(combo_id)

    def delete(self, combo_id: int) -> bool:
        return self._combos.pop(combo_id, None) is not None

    def existe_combo_ativo(self, fornecedor_id: int, safra_id: int, nome: str) -> bool:
        nome = (nome or "").strip().lower()
        return any(
            c.fornecedor_id == fornecedor_id
            and c.safra_id == safra_id
            and c.nome.lower() == nome
            and c.status == StatusCombo.ATIVO
            for c in self._combos.values()
        )

    def list_por_fornecedor(self, fornecedor_id: int) -> List[Combo]:
        return [c for c in self._combos.values() if c.fornecedor_id == fornecedor_id]

    def list_vigentes(self, agora: datetime) -> List[Combo]:
        return [c for c in self._combos.values() if c.esta_vigente(agora)]

    def list_ativos_expirados(self, agora: datetime) -> List[Combo]:
        return [
            c for c in self._combos.values()
            if c.status == StatusCombo.ATIVO and c.data_fim < agora
        ]
