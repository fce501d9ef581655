"""
Ports (Interfaces) do Domínio de Pedidos.
"""

from datetime import datetime
from typing import Dict, List, Optional, Protocol, runtime_checkable

from agriis.core.shared.dtos import PaginacaoParams, PaginatedResultDTO

from .entities import Pedido, Proposta, StatusPedido


@runtime_checkable
class PedidoRepository(Protocol):
    """
    Interface para persistência de Pedidos.

    Itens e transportes fazem parte do agregado e são salvos junto
    com o pedido. Propostas ficam no PropostaRepository.
    """

    def save(self, pedido: Pedido) -> Pedido:
        ...

    def get_by_id(self, pedido_id: int) -> Optional[Pedido]:
        ...

    def delete(self, pedido_id: int) -> bool:
        ...

    def list_por_produtor(self, produtor_id: int) -> List[Pedido]:
        ...

    def list_por_fornecedor(self, fornecedor_id: int) -> List[Pedido]:
        ...

    def list_por_status(self, status: StatusPedido) -> List[Pedido]:
        ...

    def list_proximos_prazo_limite(self, agora: datetime, limite: datetime) -> List[Pedido]:
        """Pedidos em negociação com prazo entre agora e limite."""
        ...

    def list_com_prazo_ultrapassado(self, agora: datetime) -> List[Pedido]:
        """Pedidos em negociação com data_limite_interacao < agora."""
        ...


@runtime_checkable
class PropostaRepository(Protocol):

    def save(self, proposta: Proposta) -> Proposta:
        ...

    def get_ultima_por_pedido(self, pedido_id: int) -> Optional[Proposta]:
        ...

    def list_por_pedido(self, pedido_id: int, params: PaginacaoParams) -> PaginatedResultDTO:
        """Propostas do pedido, mais recentes primeiro."""
        ...


class InMemoryPedidoRepository:

    def __init__(self):
        self._pedidos: Dict[int, Pedido] = {}
        self._next_id = 1
        self._next_item_id = 1

    def _novo_id_filho(self) -> int:
        novo = self._next_item_id
        self._next_item_id += 1
        return novo

    def save(self, pedido: Pedido) -> Pedido:
        if pedido.id is None:
            pedido.id = self._next_id
            self._next_id += 1
        for item in pedido.itens:
            item.pedido_id = pedido.id
            if item.id is None:
                item.id = self._novo_id_filho()
            for transporte in item.transportes:
                transporte.pedido_item_id = item.id
                if transporte.id is None:
                    transporte.id = self._novo_id_filho()
        self._pedidos[pedido.id] = pedido
        return pedido

    def get_by_id(self, pedido_id: int) -> Optional[Pedido]:
        return self._pedidos.get(pedido_id)

    def delete(self, pedido_id: int) -> bool:
        return self._pedidos.pop(pedido_id, None) is not None

    def list_por_produtor(self, produtor_id: int) -> List[Pedido]:
        return [p for p in self._pedidos.values() if p.produtor_id == produtor_id]

    def list_por_fornecedor(self, fornecedor_id: int) -> List[Pedido]:
        return [p for p in self._pedidos.values() if p.fornecedor_id == fornecedor_id]

    def list_por_status(self, status: StatusPedido) -> List[Pedido]:
        return [p for p in self._pedidos.values() if p.status == status]

    def list_proximos_prazo_limite(self, agora: datetime, limite: datetime) -> List[Pedido]:
        return [
            p for p in self.list_por_status(StatusPedido.EM_NEGOCIACAO)
            if agora <= p.data_limite_interacao <= limite
        ]

    def list_com_prazo_ultrapassado(self, agora: datetime) -> List[Pedido]:
        return [
            p for p in self.list_por_status(StatusPedido.EM_NEGOCIACAO)
            if p.data_limite_interacao < agora
        ]

    def clear(self) -> None:
        self._pedidos.clear()


class InMemoryPropostaRepository:

    def __init__(self):
        self._propostas: Dict[int, Proposta] = {}
        self._next_id = 1

    def save(self, proposta: Proposta) -> Proposta:
        if proposta.id is None:
            proposta.id = self._next_id
            self._next_id += 1
        self._propostas[proposta.id] = proposta
        return proposta

    def _do_pedido(self, pedido_id: int) -> List[Proposta]:
        return sorted(
            (p for p in self._propostas.values() if p.pedido_id == pedido_id),
            key=lambda p: (p.criado_em, p.id),
            reverse=True,
        )

    def get_ultima_por_pedido(self, pedido_id: int) -> Optional[Proposta]:
        propostas = self._do_pedido(pedido_id)
        return propostas[0] if propostas else None

    def list_por_pedido(self, pedido_id: int, params: PaginacaoParams) -> PaginatedResultDTO:
        return PaginatedResultDTO.paginar(self._do_pedido(pedido_id), params)
