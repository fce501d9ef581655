"""
Entidades do Domínio de Pedidos.

Pedido é o carrinho/negociação entre um produtor (comprador) e um
fornecedor. Cada turno da negociação é registrado como uma Proposta.

Agregado:
- Pedido (raiz)
  - PedidoItem: linha de produto com valores calculados
    - PedidoItemTransporte: agendamentos de entrega do item
- Proposta: turno de negociação (persistido à parte, ligado ao pedido)

Regras de status:
- Criação: EmNegociacao, carrinho EmAberto, prazo = agora + dias_limite
- Fechado, CanceladoPorTempoLimite e CanceladoPeloComprador são terminais
- Itens só mudam em EmNegociacao
"""

from dataclasses import dataclass, field
from datetime import datetime, timedelta
from decimal import Decimal
from enum import Enum
from typing import Any, Dict, Iterable, List, Optional

from agriis.core.shared.entities import EntidadeBase, EnumFromString, to_decimal
from agriis.core.shared.exceptions import BusinessRuleViolationError, ValidationError

DIAS_LIMITE_INTERACAO_PADRAO = 7
PRAZO_MAXIMO_AGENDAMENTO_DIAS = 90


class StatusPedido(EnumFromString, Enum):
    EM_NEGOCIACAO = "EmNegociacao"
    FECHADO = "Fechado"
    CANCELADO_POR_TEMPO_LIMITE = "CanceladoPorTempoLimite"
    CANCELADO_PELO_COMPRADOR = "CanceladoPeloComprador"

    @property
    def eh_terminal(self) -> bool:
        return self != StatusPedido.EM_NEGOCIACAO

    @property
    def eh_cancelado(self) -> bool:
        return self in (
            StatusPedido.CANCELADO_POR_TEMPO_LIMITE,
            StatusPedido.CANCELADO_PELO_COMPRADOR,
        )


class StatusCarrinho(EnumFromString, Enum):
    EM_ABERTO = "EmAberto"
    FINALIZADO = "Finalizado"


class AcaoCompradorPedido(EnumFromString, Enum):
    INICIOU = "Iniciou"
    ACEITOU = "Aceitou"
    ALTEROU_CARRINHO = "AlterouCarrinho"
    CANCELOU = "Cancelou"


def _validar_id(valor: Optional[int], campo: str, mensagem: str) -> int:
    if not isinstance(valor, int) or isinstance(valor, bool) or valor <= 0:
        raise ValidationError(mensagem, field=campo)
    return valor


def _validar_nao_negativo(valor, campo: str, mensagem: str) -> Optional[Decimal]:
    if valor is None:
        return None
    valor = to_decimal(valor, campo)
    if valor < 0:
        raise ValidationError(mensagem, field=campo)
    return valor


def validar_data_agendamento(
    data_agendamento: Optional[datetime], agora: Optional[datetime] = None
) -> None:
    """
    Agendamentos devem ser futuros e no máximo PRAZO_MAXIMO_AGENDAMENTO_DIAS à frente.

    Raises:
        ValidationError: data ausente, passada ou distante demais
    """
    agora = agora or datetime.now()
    if data_agendamento is None or data_agendamento <= agora:
        raise ValidationError(
            "Data de agendamento deve ser futura", field="data_agendamento"
        )
    if data_agendamento > agora + timedelta(days=PRAZO_MAXIMO_AGENDAMENTO_DIAS):
        raise ValidationError(
            f"Data de agendamento não pode ser superior a {PRAZO_MAXIMO_AGENDAMENTO_DIAS} dias",
            field="data_agendamento",
        )


# =============================================================================
# Transporte
# =============================================================================

@dataclass(eq=False)
class PedidoItemTransporte(EntidadeBase):

    pedido_item_id: Optional[int] = None
    quantidade: Decimal = Decimal("0")
    valor_frete: Decimal = Decimal("0")
    peso_total: Optional[Decimal] = None
    volume_total: Optional[Decimal] = None
    endereco_origem: Optional[str] = None
    endereco_destino: Optional[str] = None
    data_agendamento: Optional[datetime] = None
    informacoes_transporte: Optional[Dict[str, Any]] = None
    observacoes: Optional[str] = None

    @classmethod
    def criar(
        cls,
        quantidade,
        valor_frete=0,
        endereco_origem: Optional[str] = None,
        endereco_destino: Optional[str] = None,
    ) -> "PedidoItemTransporte":
        quantidade = to_decimal(quantidade, "quantidade")
        if quantidade <= 0:
            raise ValidationError("Quantidade deve ser maior que zero", field="quantidade")

        return cls(
            quantidade=quantidade,
            valor_frete=_validar_nao_negativo(
                valor_frete, "valor_frete", "Valor do frete não pode ser negativo"
            ),
            endereco_origem=endereco_origem,
            endereco_destino=endereco_destino,
        )

    def agendar(self, data_agendamento: datetime) -> None:
        validar_data_agendamento(data_agendamento)
        self.data_agendamento = data_agendamento
        self._atualizar_timestamp()

    def reagendar(self, nova_data: datetime, observacoes: Optional[str] = None) -> None:
        """Move o agendamento e registra o histórico nas observações."""
        self.agendar(nova_data)

        registro = f"Reagendado para {nova_data:%d/%m/%Y %H:%M}"
        if observacoes and observacoes.strip():
            registro += f" - {observacoes}"
        self._anexar_observacao(registro)

        if self.informacoes_transporte is not None:
            historico = list(self.informacoes_transporte.get("historico_reagendamentos", []))
            historico.append({
                "data_reagendamento": datetime.now().isoformat(),
                "nova_data_agendamento": nova_data.isoformat(),
                "observacoes": observacoes,
            })
            self.informacoes_transporte = {
                **self.informacoes_transporte, "historico_reagendamentos": historico,
            }

    def atualizar_peso_volume(self, peso_total=None, volume_total=None) -> None:
        self.peso_total = _validar_nao_negativo(
            peso_total, "peso_total", "Peso total não pode ser negativo"
        )
        self.volume_total = _validar_nao_negativo(
            volume_total, "volume_total", "Volume total não pode ser negativo"
        )
        self._atualizar_timestamp()

    def atualizar_valor_frete(self, valor_frete) -> None:
        self.valor_frete = _validar_nao_negativo(
            valor_frete, "valor_frete", "Valor do frete não pode ser negativo"
        )
        self._atualizar_timestamp()

    def alterar_valor_frete(self, novo_valor, motivo: Optional[str] = None) -> None:
        anterior = self.valor_frete
        self.atualizar_valor_frete(novo_valor)

        registro = f"Valor do frete alterado de R$ {anterior:.2f} para R$ {self.valor_frete:.2f}"
        if motivo and motivo.strip():
            registro += f" - Motivo: {motivo}"
        self._anexar_observacao(registro)

    def atualizar_informacoes_transporte(self, informacoes: Optional[Dict[str, Any]]) -> None:
        self.informacoes_transporte = informacoes
        self._atualizar_timestamp()

    def atualizar_enderecos(
        self, endereco_origem: Optional[str], endereco_destino: Optional[str]
    ) -> None:
        self.endereco_origem = endereco_origem
        self.endereco_destino = endereco_destino
        self._atualizar_timestamp()

    def atualizar_observacoes(self, observacoes: Optional[str]) -> None:
        self.observacoes = observacoes
        self._atualizar_timestamp()

    def _anexar_observacao(self, texto: str) -> None:
        if self.observacoes and self.observacoes.strip():
            texto = f"{self.observacoes}\n{texto}"
        self.atualizar_observacoes(texto)


# =============================================================================
# Item
# =============================================================================

@dataclass(eq=False)
class PedidoItem(EntidadeBase):
    """
    Linha de produto do pedido.

    valor_total, valor_desconto e valor_final são derivados e
    recalculados a cada alteração de quantidade, preço ou desconto.
    """

    pedido_id: Optional[int] = None
    produto_id: int = 0
    quantidade: Decimal = Decimal("0")
    preco_unitario: Decimal = Decimal("0")
    percentual_desconto: Decimal = Decimal("0")
    valor_total: Decimal = Decimal("0")
    valor_desconto: Decimal = Decimal("0")
    valor_final: Decimal = Decimal("0")
    observacoes: Optional[str] = None
    dados_adicionais: Optional[Dict[str, Any]] = None
    transportes: List[PedidoItemTransporte] = field(default_factory=list)

    @classmethod
    def criar(
        cls,
        pedido_id: int,
        produto_id: int,
        quantidade,
        preco_unitario,
        percentual_desconto=0,
        observacoes: Optional[str] = None,
    ) -> "PedidoItem":
        """
        Raises:
            ValidationError: ids não positivos, quantidade <= 0, preço negativo
                ou desconto fora de [0, 100]
        """
        item = cls(
            pedido_id=_validar_id(pedido_id, "pedido_id", "ID do pedido deve ser maior que zero"),
            produto_id=_validar_id(
                produto_id, "produto_id", "ID do produto deve ser maior que zero"
            ),
            quantidade=cls._validar_quantidade(quantidade),
            preco_unitario=cls._validar_preco(preco_unitario),
            percentual_desconto=cls._validar_percentual(percentual_desconto),
            observacoes=observacoes,
        )
        item._calcular_valores()
        return item

    @staticmethod
    def _validar_quantidade(quantidade) -> Decimal:
        quantidade = to_decimal(quantidade, "quantidade")
        if quantidade <= 0:
            raise ValidationError("Quantidade deve ser maior que zero", field="quantidade")
        return quantidade

    @staticmethod
    def _validar_preco(preco) -> Decimal:
        return _validar_nao_negativo(
            to_decimal(preco, "preco_unitario"),
            "preco_unitario",
            "Preço unitário não pode ser negativo",
        )

    @staticmethod
    def _validar_percentual(percentual) -> Decimal:
        percentual = to_decimal(percentual, "percentual_desconto")
        if percentual < 0 or percentual > 100:
            raise ValidationError(
                "Percentual de desconto deve estar entre 0 e 100",
                field="percentual_desconto",
            )
        return percentual

    def _calcular_valores(self) -> None:
        self.valor_total = self.quantidade * self.preco_unitario
        self.valor_desconto = self.valor_total * self.percentual_desconto / Decimal("100")
        self.valor_final = self.valor_total - self.valor_desconto

    def atualizar_quantidade(self, quantidade) -> None:
        self.quantidade = self._validar_quantidade(quantidade)
        self._calcular_valores()
        self._atualizar_timestamp()

    def atualizar_preco_unitario(self, preco) -> None:
        self.preco_unitario = self._validar_preco(preco)
        self._calcular_valores()
        self._atualizar_timestamp()

    def atualizar_desconto(self, percentual) -> None:
        self.percentual_desconto = self._validar_percentual(percentual)
        self._calcular_valores()
        self._atualizar_timestamp()

    def atualizar_observacoes(self, observacoes: Optional[str]) -> None:
        self.observacoes = observacoes
        self._atualizar_timestamp()

    def atualizar_dados_adicionais(self, dados: Optional[Dict[str, Any]]) -> None:
        self.dados_adicionais = dados
        self._atualizar_timestamp()

    def obter_transporte(self, transporte_id: int) -> Optional[PedidoItemTransporte]:
        return next((t for t in self.transportes if t.id == transporte_id), None)

    def quantidade_disponivel_transporte(self) -> Decimal:
        agendada = sum((t.quantidade for t in self.transportes), Decimal("0"))
        return self.quantidade - agendada

    def adicionar_transporte(self, transporte: PedidoItemTransporte) -> None:
        disponivel = self.quantidade_disponivel_transporte()
        if transporte.quantidade > disponivel:
            raise BusinessRuleViolationError(
                f"Quantidade solicitada ({transporte.quantidade}) excede a disponível ({disponivel})",
                rule="transporte_quantidade_disponivel",
            )
        transporte.pedido_item_id = self.id
        self.transportes.append(transporte)
        self._atualizar_timestamp()


# =============================================================================
# Totais
# =============================================================================

@dataclass(frozen=True)
class TotaisPedido:
    valor_bruto: Decimal = Decimal("0")
    valor_desconto: Decimal = Decimal("0")
    valor_liquido: Decimal = Decimal("0")
    quantidade_itens: int = 0
    percentual_desconto_medio: Decimal = Decimal("0")
    data_calculo: datetime = field(default_factory=datetime.now)

    @classmethod
    def de_itens(cls, itens: Iterable[PedidoItem]) -> "TotaisPedido":
        itens = list(itens)
        bruto = sum((i.valor_total for i in itens), Decimal("0"))
        desconto = sum((i.valor_desconto for i in itens), Decimal("0"))
        liquido = sum((i.valor_final for i in itens), Decimal("0"))
        return cls(
            valor_bruto=bruto,
            valor_desconto=desconto,
            valor_liquido=liquido,
            quantidade_itens=len(itens),
            percentual_desconto_medio=(desconto / bruto * 100) if bruto > 0 else Decimal("0"),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "valor_bruto": float(self.valor_bruto),
            "valor_desconto": float(self.valor_desconto),
            "valor_liquido": float(self.valor_liquido),
            "quantidade_itens": self.quantidade_itens,
            "percentual_desconto_medio": float(self.percentual_desconto_medio),
            "data_calculo": self.data_calculo.isoformat(),
        }


# =============================================================================
# Pedido
# =============================================================================

@dataclass(eq=False)
class Pedido(EntidadeBase):
    """
    Entidade de Domínio: Pedido (Aggregate Root).

    Example:
        pedido = Pedido.criar(fornecedor_id=1, produtor_id=2)
        pedido.status                   # StatusPedido.EM_NEGOCIACAO
        pedido.esta_dentro_prazo_limite()   # True
    """

    status: StatusPedido = StatusPedido.EM_NEGOCIACAO
    status_carrinho: StatusCarrinho = StatusCarrinho.EM_ABERTO
    quantidade_itens: int = 0
    totais: Optional[Dict[str, Any]] = None
    permite_contato: bool = False
    negociar_pedido: bool = False
    data_limite_interacao: datetime = field(
        default_factory=lambda: datetime.now() + timedelta(days=DIAS_LIMITE_INTERACAO_PADRAO)
    )
    fornecedor_id: int = 0
    produtor_id: int = 0
    itens: List[PedidoItem] = field(default_factory=list)

    @classmethod
    def criar(
        cls,
        fornecedor_id: int,
        produtor_id: int,
        permite_contato: bool = False,
        negociar_pedido: bool = False,
        dias_limite_interacao: int = DIAS_LIMITE_INTERACAO_PADRAO,
    ) -> "Pedido":
        """
        Factory method para criar pedido em negociação.

        Raises:
            ValidationError: Se ids ou dias_limite_interacao não positivos
        """
        _validar_id(fornecedor_id, "fornecedor_id", "ID do fornecedor deve ser maior que zero")
        _validar_id(produtor_id, "produtor_id", "ID do produtor deve ser maior que zero")
        if not dias_limite_interacao or dias_limite_interacao <= 0:
            raise ValidationError(
                "Dias limite deve ser maior que zero", field="dias_limite_interacao"
            )

        return cls(
            fornecedor_id=fornecedor_id,
            produtor_id=produtor_id,
            permite_contato=permite_contato,
            negociar_pedido=negociar_pedido,
            data_limite_interacao=datetime.now() + timedelta(days=dias_limite_interacao),
        )

    def _garantir_em_negociacao(self, mensagem: str) -> None:
        if self.status != StatusPedido.EM_NEGOCIACAO:
            raise BusinessRuleViolationError(mensagem, rule="pedido_em_negociacao")

    def atualizar_preferencias(self, permite_contato: bool, negociar_pedido: bool) -> None:
        self.permite_contato = permite_contato
        self.negociar_pedido = negociar_pedido
        self._atualizar_timestamp()

    # =========================================================================
    # Itens
    # =========================================================================

    def obter_item(self, item_id: int) -> Optional[PedidoItem]:
        return next((i for i in self.itens if i.id == item_id), None)

    def obter_transporte(self, transporte_id: int) -> Optional[PedidoItemTransporte]:
        for item in self.itens:
            transporte = item.obter_transporte(transporte_id)
            if transporte is not None:
                return transporte
        return None

    def adicionar_item(self, item: PedidoItem) -> None:
        self._garantir_em_negociacao(
            "Não é possível adicionar itens a um pedido que não está em negociação"
        )
        self.itens.append(item)
        self.quantidade_itens = len(self.itens)
        self._atualizar_timestamp()

    def remover_item(self, item_id: int) -> bool:
        self._garantir_em_negociacao(
            "Não é possível remover itens de um pedido que não está em negociação"
        )
        item = self.obter_item(item_id)
        if item is None:
            return False
        self.itens.remove(item)
        self.quantidade_itens = len(self.itens)
        self._atualizar_timestamp()
        return True

    # =========================================================================
    # Ciclo de vida
    # =========================================================================

    def fechar(self) -> None:
        self._garantir_em_negociacao("Apenas pedidos em negociação podem ser fechados")
        if not self.itens:
            raise BusinessRuleViolationError(
                "Não é possível fechar um pedido sem itens", rule="pedido_com_itens"
            )
        self.status = StatusPedido.FECHADO
        self.status_carrinho = StatusCarrinho.FINALIZADO
        self._atualizar_timestamp()

    def _cancelar(self, novo_status: StatusPedido) -> None:
        if self.status == StatusPedido.FECHADO:
            raise BusinessRuleViolationError(
                "Não é possível cancelar um pedido já fechado", rule="pedido_terminal"
            )
        if self.status.eh_cancelado:
            raise BusinessRuleViolationError(
                "Pedido já está cancelado", rule="pedido_terminal"
            )
        self.status = novo_status
        self._atualizar_timestamp()

    def cancelar_por_comprador(self) -> None:
        self._cancelar(StatusPedido.CANCELADO_PELO_COMPRADOR)

    def cancelar_por_tempo_limite(self) -> None:
        self._cancelar(StatusPedido.CANCELADO_POR_TEMPO_LIMITE)

    # =========================================================================
    # Prazo e totais
    # =========================================================================

    def esta_dentro_prazo_limite(self, agora: Optional[datetime] = None) -> bool:
        return (agora or datetime.now()) <= self.data_limite_interacao

    def atualizar_prazo_limite(self, dias: int) -> None:
        if not dias or dias <= 0:
            raise ValidationError("Dias deve ser maior que zero", field="dias")
        self.data_limite_interacao = datetime.now() + timedelta(days=dias)
        self._atualizar_timestamp()

    def atualizar_totais(self, totais: Dict[str, Any]) -> None:
        self.totais = totais
        self._atualizar_timestamp()

    def recalcular_totais(self) -> TotaisPedido:
        totais = TotaisPedido.de_itens(self.itens)
        self.atualizar_totais(totais.to_dict())
        return totais

    def __repr__(self) -> str:
        return f"Pedido(id={self.id}, status={self.status.value}, itens={self.quantidade_itens})"


# =============================================================================
# Proposta
# =============================================================================

@dataclass(eq=False)
class Proposta(EntidadeBase):
    """
    Turno de negociação de um pedido.

    Tem exatamente um autor: o produtor (com acao_comprador) ou o
    fornecedor (com observação obrigatória). Use as factories
    do_produtor / do_fornecedor.

    Example:
        Proposta.do_produtor(1, AcaoCompradorPedido.INICIOU, 10, "start")
        Proposta.do_fornecedor(1, "desconto especial", 20)
    """

    pedido_id: int = 0
    acao_comprador: Optional[AcaoCompradorPedido] = None
    observacao: Optional[str] = None
    usuario_produtor_id: Optional[int] = None
    usuario_fornecedor_id: Optional[int] = None

    @classmethod
    def do_produtor(
        cls,
        pedido_id: int,
        acao_comprador: AcaoCompradorPedido,
        usuario_produtor_id: int,
        observacao: Optional[str] = None,
    ) -> "Proposta":
        """
        Raises:
            ValidationError: pedido_id/usuario_produtor_id não positivos ou ação ausente
        """
        _validar_id(pedido_id, "pedido_id", "ID do pedido deve ser maior que zero")
        if acao_comprador is None:
            raise ValidationError("Ação do comprador é obrigatória", field="acao_comprador")
        _validar_id(
            usuario_produtor_id,
            "usuario_produtor_id",
            "ID do usuário produtor deve ser maior que zero",
        )
        return cls(
            pedido_id=pedido_id,
            acao_comprador=AcaoCompradorPedido.from_string(acao_comprador),
            usuario_produtor_id=usuario_produtor_id,
            observacao=observacao,
        )

    @classmethod
    def do_fornecedor(
        cls, pedido_id: int, observacao: str, usuario_fornecedor_id: int
    ) -> "Proposta":
        """
        Raises:
            ValidationError: pedido_id/usuario_fornecedor_id não positivos ou
                observação vazia
        """
        _validar_id(pedido_id, "pedido_id", "ID do pedido deve ser maior que zero")
        if observacao is None or not observacao.strip():
            raise ValidationError(
                "Observação é obrigatória para propostas do fornecedor", field="observacao"
            )
        _validar_id(
            usuario_fornecedor_id,
            "usuario_fornecedor_id",
            "ID do usuário fornecedor deve ser maior que zero",
        )
        return cls(
            pedido_id=pedido_id,
            observacao=observacao,
            usuario_fornecedor_id=usuario_fornecedor_id,
        )

    def eh_proposta_produtor(self) -> bool:
        return self.usuario_produtor_id is not None

    def eh_proposta_fornecedor(self) -> bool:
        return self.usuario_fornecedor_id is not None

    def __repr__(self) -> str:
        autor = "produtor" if self.eh_proposta_produtor() else "fornecedor"
        return f"Proposta(id={self.id}, pedido_id={self.pedido_id}, autor={autor})"
