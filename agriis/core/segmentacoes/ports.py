"""
Ports (Interfaces) do Domínio de Segmentações.
"""

from typing import Dict, List, Optional, Protocol, runtime_checkable

from .entities import Segmentacao


@runtime_checkable
class SegmentacaoRepository(Protocol):
    """Persiste o agregado completo (grupos e descontos)."""

    def save(self, segmentacao: Segmentacao) -> Segmentacao:
        ...

    def get_by_id(self, segmentacao_id: int) -> Optional[Segmentacao]:
        ...

    def delete(self, segmentacao_id: int) -> bool:
        ...

    def list_por_fornecedor(self, fornecedor_id: int) -> List[Segmentacao]:
        ...

    def list_ativas_por_fornecedor(self, fornecedor_id: int) -> List[Segmentacao]:
        ...

    def get_padrao(self, fornecedor_id: int) -> Optional[Segmentacao]:
        ...


class InMemorySegmentacaoRepository:

    def __init__(self):
        self._segmentacoes: Dict[int, Segmentacao] = {}
        self._next_id = 1
        self._next_child_id = 1

    def _novo_child_id(self) -> int:
        child_id = self._next_child_id
        self._next_child_id += 1
        return child_id

    def save(self, segmentacao: Segmentacao) -> Segmentacao:
        if segmentacao.id is None:
            segmentacao.id = self._next_id
            self._next_id += 1
        for grupo in segmentacao.grupos:
            if grupo.id is None:
                grupo.id = self._novo_child_id()
            for desconto in grupo.descontos:
                if desconto.id is None:
                    desconto.id = self._novo_child_id()
        self._segmentacoes[segmentacao.id] = segmentacao
        return segmentacao

    def get_by_id(self, segmentacao_id: int) -> Optional[Segmentacao]:
        return self._segmentacoes.get(segmentacao_id)

    def delete(self, segmentacao_id: int) -> bool:
        return self._segmentacoes.pop(segmentacao_id, None) is not None

    def list_por_fornecedor(self, fornecedor_id: int) -> List[Segmentacao]:
        return sorted(
            (s for s in self._segmentacoes.values() if s.fornecedor_id == fornecedor_id),
            key=lambda s: s.id,
        )

    def list_ativas_por_fornecedor(self, fornecedor_id: int) -> List[Segmentacao]:
        return [s for s in self.list_por_fornecedor(fornecedor_id) if s.ativo]

    def get_padrao(self, fornecedor_id: int) -> Optional[Segmentacao]:
        return next(
            (s for s in self.list_ativas_por_fornecedor(fornecedor_id) if s.eh_padrao), None
        )
