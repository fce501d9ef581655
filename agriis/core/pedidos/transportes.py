"""
Serviços de domínio de frete e agendamento de transporte.

O frete é cobrado por peso × distância × valor por kg/km, com valor
mínimo. O peso considerado depende do TipoCalculoPeso do produto:
- PesoNominal: peso nominal × quantidade
- PesoCubado: volume × densidade (peso nominal se não houver densidade)

Dimensões em centímetros, peso em kg, volume em m³.
"""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Any, Dict, Iterable, List, Optional, Tuple

from agriis.core.shared.entities import EnumFromString, to_decimal
from agriis.core.shared.exceptions import DomainException, ValidationError

from .entities import Pedido, PedidoItem, validar_data_agendamento

VALOR_POR_KG_KM_PADRAO = Decimal("0.05")
VALOR_MINIMO_FRETE_PADRAO = Decimal("50.00")

_CM3_POR_M3 = Decimal("1000000")


class TipoCalculoPeso(EnumFromString, Enum):
    PESO_NOMINAL = "PesoNominal"
    PESO_CUBADO = "PesoCubado"


def _positivo(valor, campo: str, mensagem: str) -> Decimal:
    valor = to_decimal(valor, campo)
    if valor <= 0:
        raise ValidationError(mensagem, field=campo)
    return valor


@dataclass(frozen=True)
class DimensoesProduto:
    altura: Decimal
    largura: Decimal
    comprimento: Decimal
    peso_nominal: Decimal
    densidade: Optional[Decimal] = None

    @classmethod
    def criar(
        cls, altura, largura, comprimento, peso_nominal, densidade=None
    ) -> "DimensoesProduto":
        """
        Raises:
            ValidationError: medida, peso ou densidade não positivos
        """
        return cls(
            altura=_positivo(altura, "altura", "Altura deve ser maior que zero"),
            largura=_positivo(largura, "largura", "Largura deve ser maior que zero"),
            comprimento=_positivo(
                comprimento, "comprimento", "Comprimento deve ser maior que zero"
            ),
            peso_nominal=_positivo(
                peso_nominal, "peso_nominal", "Peso nominal deve ser maior que zero"
            ),
            densidade=(
                None if densidade is None
                else _positivo(densidade, "densidade", "Densidade deve ser maior que zero")
            ),
        )

    @property
    def volume(self) -> Decimal:
        return self.altura * self.largura * self.comprimento / _CM3_POR_M3


@dataclass(frozen=True)
class CalculoFrete:
    peso_total: Decimal
    volume_total: Decimal
    peso_cubado_total: Optional[Decimal]
    peso_para_frete: Decimal
    valor_frete: Decimal
    distancia_km: Decimal
    tipo_calculo: TipoCalculoPeso

    def to_dict(self) -> Dict[str, Any]:
        return {
            "peso_total": float(self.peso_total),
            "volume_total": float(self.volume_total),
            "peso_cubado_total": (
                float(self.peso_cubado_total) if self.peso_cubado_total is not None else None
            ),
            "peso_para_frete": float(self.peso_para_frete),
            "valor_frete": float(self.valor_frete),
            "distancia_km": float(self.distancia_km),
            "tipo_calculo": self.tipo_calculo.value,
        }


@dataclass(frozen=True)
class CalculoFreteConsolidado:
    calculos: List[CalculoFrete]
    peso_total: Decimal
    volume_total: Decimal
    peso_cubado_total: Optional[Decimal]
    valor_frete: Decimal
    distancia_km: Decimal

    def to_dict(self) -> Dict[str, Any]:
        return {
            "calculos_individuais": [c.to_dict() for c in self.calculos],
            "peso_total_consolidado": float(self.peso_total),
            "volume_total_consolidado": float(self.volume_total),
            "peso_cubado_total_consolidado": (
                float(self.peso_cubado_total) if self.peso_cubado_total is not None else None
            ),
            "valor_frete_consolidado": float(self.valor_frete),
            "distancia_km": float(self.distancia_km),
        }


class FreteCalculoService:
    """
    Cálculo de frete por item e consolidado.

    Example:
        dimensoes = DimensoesProduto.criar(50, 40, 30, peso_nominal=25)
        calculo = FreteCalculoService().calcular_frete(
            dimensoes, TipoCalculoPeso.PESO_NOMINAL, quantidade=100, distancia_km=300
        )
        calculo.valor_frete   # Decimal("37500.00")
    """

    def calcular_frete(
        self,
        dimensoes: DimensoesProduto,
        tipo_calculo: TipoCalculoPeso,
        quantidade,
        distancia_km,
        valor_por_kg_km=VALOR_POR_KG_KM_PADRAO,
        valor_minimo_frete=VALOR_MINIMO_FRETE_PADRAO,
    ) -> CalculoFrete:
        """
        Raises:
            ValidationError: dimensões ausentes, quantidade ou distância não positivas
        """
        if dimensoes is None:
            raise ValidationError("Dimensões do produto são obrigatórias", field="dimensoes")
        quantidade = _positivo(quantidade, "quantidade", "Quantidade deve ser maior que zero")
        distancia_km = _positivo(
            distancia_km, "distancia_km", "Distância deve ser maior que zero"
        )
        tipo_calculo = TipoCalculoPeso.from_string(tipo_calculo)

        peso_total = dimensoes.peso_nominal * quantidade
        volume_total = dimensoes.volume * quantidade
        peso_cubado_total = (
            volume_total * dimensoes.densidade if dimensoes.densidade is not None else None
        )

        if tipo_calculo == TipoCalculoPeso.PESO_CUBADO and peso_cubado_total is not None:
            peso_para_frete = peso_cubado_total
        else:
            peso_para_frete = peso_total

        valor_calculado = peso_para_frete * distancia_km * to_decimal(
            valor_por_kg_km, "valor_por_kg_km"
        )
        return CalculoFrete(
            peso_total=peso_total,
            volume_total=volume_total,
            peso_cubado_total=peso_cubado_total,
            peso_para_frete=peso_para_frete,
            valor_frete=max(valor_calculado, to_decimal(valor_minimo_frete, "valor_minimo_frete")),
            distancia_km=distancia_km,
            tipo_calculo=tipo_calculo,
        )

    def calcular_frete_consolidado(
        self,
        itens: Iterable[Tuple[DimensoesProduto, TipoCalculoPeso, Any]],
        distancia_km,
        valor_por_kg_km=VALOR_POR_KG_KM_PADRAO,
        valor_minimo_frete=VALOR_MINIMO_FRETE_PADRAO,
    ) -> CalculoFreteConsolidado:
        """
        Soma os fretes individuais (sem mínimo por item) e aplica o
        mínimo sobre o total.

        itens: tuplas (dimensoes, tipo_calculo, quantidade)
        """
        itens = list(itens or [])
        if not itens:
            raise ValidationError("Lista de itens não pode ser vazia", field="itens")

        calculos = [
            self.calcular_frete(
                dimensoes, tipo_calculo, quantidade, distancia_km, valor_por_kg_km, 0
            )
            for dimensoes, tipo_calculo, quantidade in itens
        ]

        cubados = [c.peso_cubado_total for c in calculos if c.peso_cubado_total is not None]
        total = sum((c.valor_frete for c in calculos), Decimal("0"))

        return CalculoFreteConsolidado(
            calculos=calculos,
            peso_total=sum((c.peso_total for c in calculos), Decimal("0")),
            volume_total=sum((c.volume_total for c in calculos), Decimal("0")),
            peso_cubado_total=sum(cubados, Decimal("0")) if cubados else None,
            valor_frete=max(total, to_decimal(valor_minimo_frete, "valor_minimo_frete")),
            distancia_km=calculos[0].distancia_km,
        )

    @staticmethod
    def quantidade_disponivel(item: PedidoItem) -> Decimal:
        return max(Decimal("0"), item.quantidade_disponivel_transporte())


# =============================================================================
# Agendamento
# =============================================================================

@dataclass(frozen=True)
class SolicitacaoAgendamento:
    item: PedidoItem
    quantidade: Decimal
    data_agendamento: datetime


@dataclass(frozen=True)
class ValidacaoAgendamento:
    eh_valido: bool
    erros: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {"eh_valido": self.eh_valido, "erros": list(self.erros)}


@dataclass(frozen=True)
class ResumoTransportePedido:
    total_itens: int
    itens_com_transporte: int
    total_transportes: int
    transportes_agendados: int
    peso_total: Decimal
    volume_total: Decimal
    valor_frete_total: Decimal
    proximo_agendamento: Optional[datetime]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "total_itens": self.total_itens,
            "itens_com_transporte": self.itens_com_transporte,
            "total_transportes": self.total_transportes,
            "transportes_agendados": self.transportes_agendados,
            "peso_total": float(self.peso_total),
            "volume_total": float(self.volume_total),
            "valor_frete_total": float(self.valor_frete_total),
            "proximo_agendamento": (
                self.proximo_agendamento.isoformat() if self.proximo_agendamento else None
            ),
        }


class TransporteAgendamentoService:
    """Validações de agendamento que envolvem mais de um transporte."""

    def validar_multiplos_agendamentos(
        self, solicitacoes: Iterable[SolicitacaoAgendamento], agora: Optional[datetime] = None
    ) -> ValidacaoAgendamento:
        """
        Cada solicitação é validada contra a quantidade disponível atual
        do item; as solicitações não se somam entre si.
        """
        erros = []
        for solicitacao in solicitacoes:
            prefixo = f"Item {solicitacao.item.id}"
            try:
                validar_data_agendamento(solicitacao.data_agendamento, agora)
            except DomainException as e:
                erros.append(f"{prefixo}: {e.message}")
                continue

            disponivel = FreteCalculoService.quantidade_disponivel(solicitacao.item)
            if solicitacao.quantidade > disponivel:
                erros.append(
                    f"{prefixo}: Quantidade solicitada ({solicitacao.quantidade}) "
                    f"excede a disponível ({disponivel})"
                )

        return ValidacaoAgendamento(eh_valido=not erros, erros=erros)

    def calcular_resumo(
        self, pedido: Pedido, agora: Optional[datetime] = None
    ) -> ResumoTransportePedido:
        agora = agora or datetime.now()
        transportes = [t for item in pedido.itens for t in item.transportes]
        agendados = [t for t in transportes if t.data_agendamento is not None]
        futuros = sorted(t.data_agendamento for t in agendados if t.data_agendamento > agora)

        return ResumoTransportePedido(
            total_itens=len(pedido.itens),
            itens_com_transporte=sum(1 for item in pedido.itens if item.transportes),
            total_transportes=len(transportes),
            transportes_agendados=len(agendados),
            peso_total=sum((t.peso_total or Decimal("0") for t in transportes), Decimal("0")),
            volume_total=sum((t.volume_total or Decimal("0") for t in transportes), Decimal("0")),
            valor_frete_total=sum((t.valor_frete for t in transportes), Decimal("0")),
            proximo_agendamento=futuros[0] if futuros else None,
        )
