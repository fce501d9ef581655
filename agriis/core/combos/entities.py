"""
Entidades do Domínio de Combos.

Combo é uma oferta agrupada de produtos criada pelo fornecedor para
uma safra, restrita por faixa de hectares, período e (opcionalmente)
municípios.

Agregado:
- Combo (raiz)
  - ComboItem: produtos do combo
  - ComboLocalRecebimento: pontos de distribuição aceitos
  - ComboCategoriaDesconto: descontos por categoria e faixa de hectare

Regras:
- hectare_minimo >= 0 e hectare_maximo > hectare_minimo
- data_fim > data_inicio; data_inicio não pode estar no passado na criação
- Itens só podem ser alterados/removidos se o combo permitir
- Ciclo de vida: Ativo -> Inativo / Expirado / Suspenso
"""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import List, Optional

from agriis.core.shared.entities import EntidadeBase, EnumFromString, to_decimal
from agriis.core.shared.exceptions import BusinessRuleViolationError, ValidationError


class StatusCombo(EnumFromString, Enum):
    ATIVO = "Ativo"
    INATIVO = "Inativo"
    EXPIRADO = "Expirado"
    SUSPENSO = "Suspenso"


class ModalidadePagamento(EnumFromString, Enum):
    NORMAL = "Normal"
    BARTER = "Barter"


class TipoDesconto(EnumFromString, Enum):
    PERCENTUAL = "Percentual"
    VALOR_FIXO = "ValorFixo"
    POR_HECTARE = "PorHectare"


def _validar_percentual(valor, campo: str) -> Decimal:
    valor = to_decimal(valor, campo)
    if valor < 0 or valor > 100:
        raise ValidationError("Percentual de desconto deve estar entre 0 e 100", field=campo)
    return valor


def _validar_nao_negativo(valor, campo: str, mensagem: str) -> Decimal:
    valor = to_decimal(valor, campo)
    if valor < 0:
        raise ValidationError(mensagem, field=campo)
    return valor


@dataclass(eq=False)
class ComboItem(EntidadeBase):

    produto_id: int = 0
    quantidade: Decimal = Decimal("0")
    preco_unitario: Decimal = Decimal("0")
    percentual_desconto: Decimal = Decimal("0")
    produto_obrigatorio: bool = False
    ordem: int = 0

    @classmethod
    def criar(
        cls,
        produto_id: int,
        quantidade,
        preco_unitario,
        percentual_desconto=0,
        produto_obrigatorio: bool = False,
        ordem: int = 0,
    ) -> "ComboItem":
        if not produto_id or produto_id <= 0:
            raise ValidationError("ID do produto deve ser maior que zero", field="produto_id")
        item = cls(produto_id=produto_id)
        item.atualizar(quantidade, preco_unitario, percentual_desconto, produto_obrigatorio, ordem)
        item.atualizado_em = None
        return item

    def atualizar(
        self,
        quantidade,
        preco_unitario,
        percentual_desconto,
        produto_obrigatorio: bool,
        ordem: int,
    ) -> None:
        quantidade = to_decimal(quantidade, "quantidade")
        if quantidade <= 0:
            raise ValidationError("Quantidade deve ser maior que zero", field="quantidade")
        if ordem is None or ordem < 0:
            raise ValidationError("Ordem deve ser maior ou igual a zero", field="ordem")

        self.quantidade = quantidade
        self.preco_unitario = _validar_nao_negativo(
            preco_unitario, "preco_unitario", "Preço unitário não pode ser negativo"
        )
        self.percentual_desconto = _validar_percentual(percentual_desconto, "percentual_desconto")
        self.produto_obrigatorio = produto_obrigatorio
        self.ordem = ordem
        self._atualizar_timestamp()

    def valor_com_desconto(self) -> Decimal:
        valor_total = self.quantidade * self.preco_unitario
        return valor_total - valor_total * self.percentual_desconto / Decimal("100")


@dataclass(eq=False)
class ComboLocalRecebimento(EntidadeBase):

    ponto_distribuicao_id: int = 0
    preco_adicional: Decimal = Decimal("0")
    percentual_desconto: Decimal = Decimal("0")
    local_padrao: bool = False
    observacoes: Optional[str] = None

    @classmethod
    def criar(
        cls,
        ponto_distribuicao_id: int,
        preco_adicional=0,
        percentual_desconto=0,
        local_padrao: bool = False,
        observacoes: Optional[str] = None,
    ) -> "ComboLocalRecebimento":
        if not ponto_distribuicao_id or ponto_distribuicao_id <= 0:
            raise ValidationError(
                "ID do ponto de distribuição deve ser maior que zero",
                field="ponto_distribuicao_id",
            )
        return cls(
            ponto_distribuicao_id=ponto_distribuicao_id,
            preco_adicional=_validar_nao_negativo(
                preco_adicional, "preco_adicional", "Preço adicional não pode ser negativo"
            ),
            percentual_desconto=_validar_percentual(percentual_desconto, "percentual_desconto"),
            local_padrao=local_padrao,
            observacoes=observacoes,
        )


@dataclass(eq=False)
class ComboCategoriaDesconto(EntidadeBase):
    """
    Desconto por categoria de produto dentro do combo.

    O valor do desconto depende do tipo:
    - Percentual: valor_base * percentual / 100
    - ValorFixo: valor fixo
    - PorHectare: valor por hectare * hectares do produtor

    hectare_maximo None significa faixa sem limite superior.
    """

    categoria_id: int = 0
    tipo_desconto: TipoDesconto = TipoDesconto.PERCENTUAL
    percentual_desconto: Decimal = Decimal("0")
    valor_desconto_fixo: Decimal = Decimal("0")
    valor_desconto_por_hectare: Decimal = Decimal("0")
    hectare_minimo: Decimal = Decimal("0")
    hectare_maximo: Optional[Decimal] = None
    ativo: bool = True

    @classmethod
    def criar(
        cls,
        categoria_id: int,
        tipo_desconto: TipoDesconto,
        valor_desconto=0,
        hectare_minimo=0,
        hectare_maximo=None,
    ) -> "ComboCategoriaDesconto":
        if not categoria_id or categoria_id <= 0:
            raise ValidationError("ID da categoria deve ser maior que zero", field="categoria_id")

        categoria = cls(categoria_id=categoria_id)
        categoria.atualizar_faixa_hectare(hectare_minimo, hectare_maximo)
        categoria.definir_desconto(tipo_desconto, valor_desconto)
        categoria.atualizado_em = None
        return categoria

    def definir_desconto(self, tipo_desconto: TipoDesconto, valor) -> None:
        """Define o tipo e zera os valores dos demais tipos."""
        self.percentual_desconto = Decimal("0")
        self.valor_desconto_fixo = Decimal("0")
        self.valor_desconto_por_hectare = Decimal("0")

        if tipo_desconto == TipoDesconto.PERCENTUAL:
            self.percentual_desconto = _validar_percentual(valor, "valor_desconto")
        elif tipo_desconto == TipoDesconto.VALOR_FIXO:
            self.valor_desconto_fixo = _validar_nao_negativo(
                valor, "valor_desconto", "Valor fixo não pode ser negativo"
            )
        else:
            self.valor_desconto_por_hectare = _validar_nao_negativo(
                valor, "valor_desconto", "Valor por hectare não pode ser negativo"
            )

        self.tipo_desconto = tipo_desconto
        self._atualizar_timestamp()

    def atualizar_faixa_hectare(self, hectare_minimo, hectare_maximo=None) -> None:
        hectare_minimo = _validar_nao_negativo(
            hectare_minimo, "hectare_minimo", "Hectare mínimo deve ser maior ou igual a zero"
        )
        if hectare_maximo is not None:
            hectare_maximo = to_decimal(hectare_maximo, "hectare_maximo")
            if hectare_maximo <= hectare_minimo:
                raise ValidationError(
                    "Hectare máximo deve ser maior que o mínimo", field="hectare_maximo"
                )
        self.hectare_minimo = hectare_minimo
        self.hectare_maximo = hectare_maximo
        self._atualizar_timestamp()

    def ativar(self) -> None:
        self.ativo = True
        self._atualizar_timestamp()

    def desativar(self) -> None:
        self.ativo = False
        self._atualizar_timestamp()

    def faixa_hectare_valida(self, hectare) -> bool:
        hectare = to_decimal(hectare, "hectare")
        if hectare < self.hectare_minimo:
            return False
        return self.hectare_maximo is None or hectare <= self.hectare_maximo

    def calcular_desconto(self, valor_base, hectare) -> Decimal:
        if not self.ativo or not self.faixa_hectare_valida(hectare):
            return Decimal("0")

        if self.tipo_desconto == TipoDesconto.PERCENTUAL:
            return to_decimal(valor_base, "valor_base") * self.percentual_desconto / Decimal("100")
        if self.tipo_desconto == TipoDesconto.VALOR_FIXO:
            return self.valor_desconto_fixo
        return self.valor_desconto_por_hectare * to_decimal(hectare, "hectare")


@dataclass(eq=False)
class Combo(EntidadeBase):
    """
    Entidade de Domínio: Combo (Aggregate Root).

    Example:
        combo = Combo.criar(
            nome="Combo Soja 2025",
            hectare_minimo=100,
            hectare_maximo=1000,
            data_inicio=datetime(2025, 9, 1),
            data_fim=datetime(2025, 12, 31),
            modalidade_pagamento=ModalidadePagamento.NORMAL,
            fornecedor_id=1,
            safra_id=3,
        )
        combo.valido_para_produtor(hectare=250, municipio_id=5201405)
    """

    nome: str = ""
    descricao: Optional[str] = None
    hectare_minimo: Decimal = Decimal("0")
    hectare_maximo: Decimal = Decimal("0")
    data_inicio: Optional[datetime] = None
    data_fim: Optional[datetime] = None
    modalidade_pagamento: ModalidadePagamento = ModalidadePagamento.NORMAL
    status: StatusCombo = StatusCombo.ATIVO
    restricoes_municipios: Optional[List[int]] = None
    permite_alteracao_item: bool = True
    permite_exclusao_item: bool = True
    fornecedor_id: int = 0
    safra_id: int = 0
    itens: List[ComboItem] = field(default_factory=list)
    locais_recebimento: List[ComboLocalRecebimento] = field(default_factory=list)
    categorias_desconto: List[ComboCategoriaDesconto] = field(default_factory=list)

    @classmethod
    def criar(
        cls,
        nome: str,
        hectare_minimo,
        hectare_maximo,
        data_inicio: datetime,
        data_fim: datetime,
        modalidade_pagamento: ModalidadePagamento,
        fornecedor_id: int,
        safra_id: int,
        descricao: Optional[str] = None,
    ) -> "Combo":
        """
        Factory method para criar combo validado.

        Raises:
            ValidationError: Se faixa de hectares, período ou ids inválidos
        """
        if not fornecedor_id or fornecedor_id <= 0:
            raise ValidationError("ID do fornecedor deve ser maior que zero", field="fornecedor_id")
        if not safra_id or safra_id <= 0:
            raise ValidationError("ID da safra deve ser maior que zero", field="safra_id")
        if data_inicio and data_inicio.date() < datetime.now().date():
            raise ValidationError("Data início não pode ser no passado", field="data_inicio")

        combo = cls(
            modalidade_pagamento=modalidade_pagamento,
            fornecedor_id=fornecedor_id,
            safra_id=safra_id,
        )
        combo.atualizar_informacoes(
            nome, hectare_minimo, hectare_maximo, data_inicio, data_fim, descricao
        )
        combo.atualizado_em = None
        return combo

    def atualizar_informacoes(
        self,
        nome: str,
        hectare_minimo,
        hectare_maximo,
        data_inicio: datetime,
        data_fim: datetime,
        descricao: Optional[str] = None,
    ) -> None:
        if not nome or not nome.strip():
            raise ValidationError("Nome do combo é obrigatório", field="nome")

        hectare_minimo = _validar_nao_negativo(
            hectare_minimo, "hectare_minimo", "Hectare mínimo deve ser maior ou igual a zero"
        )
        hectare_maximo = to_decimal(hectare_maximo, "hectare_maximo")
        if hectare_maximo <= hectare_minimo:
            raise ValidationError("Hectare máximo deve ser maior que o mínimo", field="hectare_maximo")

        if not data_inicio or not data_fim:
            raise ValidationError("Período do combo é obrigatório", field="data_inicio")
        if data_fim <= data_inicio:
            raise ValidationError("Data fim deve ser posterior à data início", field="data_fim")

        self.nome = nome.strip()
        self.descricao = descricao
        self.hectare_minimo = hectare_minimo
        self.hectare_maximo = hectare_maximo
        self.data_inicio = data_inicio
        self.data_fim = data_fim
        self._atualizar_timestamp()

    def configurar_permissoes(self, permite_alteracao: bool, permite_exclusao: bool) -> None:
        self.permite_alteracao_item = permite_alteracao
        self.permite_exclusao_item = permite_exclusao
        self._atualizar_timestamp()

    def definir_restricoes_municipios(self, municipios: Optional[List[int]]) -> None:
        self.restricoes_municipios = sorted({int(m) for m in municipios}) if municipios else None
        self._atualizar_timestamp()

    # =========================================================================
    # Ciclo de vida
    # =========================================================================

    def atualizar_status(self, novo_status: StatusCombo) -> None:
        if self.status == StatusCombo.EXPIRADO and novo_status != StatusCombo.EXPIRADO:
            raise BusinessRuleViolationError(
                "Combo expirado não pode ter o status alterado",
                rule="combo_expirado_terminal",
            )
        self.status = novo_status
        self._atualizar_timestamp()

    def expirar(self) -> None:
        self.atualizar_status(StatusCombo.EXPIRADO)

    def esta_vigente(self, agora: Optional[datetime] = None) -> bool:
        agora = agora or datetime.now()
        return (
            self.status == StatusCombo.ATIVO
            and self.data_inicio <= agora <= self.data_fim
        )

    def validar_hectare_produtor(self, hectare) -> bool:
        hectare = to_decimal(hectare, "hectare")
        return self.hectare_minimo <= hectare <= self.hectare_maximo

    def municipio_permitido(self, municipio_id: Optional[int]) -> bool:
        if not self.restricoes_municipios:
            return True
        return municipio_id in self.restricoes_municipios

    def valido_para_produtor(
        self, hectare, municipio_id: Optional[int] = None, agora: Optional[datetime] = None
    ) -> bool:
        return (
            self.esta_vigente(agora)
            and self.validar_hectare_produtor(hectare)
            and self.municipio_permitido(municipio_id)
        )

    # =========================================================================
    # Itens, locais e categorias
    # =========================================================================

    def adicionar_item(self, item: ComboItem) -> None:
        if item is None:
            raise ValidationError("Item é obrigatório", field="item")
        self.itens.append(item)
        self._atualizar_timestamp()

    def obter_item(self, item_id: int) -> Optional[ComboItem]:
        return next((i for i in self.itens if i.id == item_id), None)

    def atualizar_item(
        self,
        item_id: int,
        quantidade,
        preco_unitario,
        percentual_desconto,
        produto_obrigatorio: bool,
        ordem: int,
    ) -> Optional[ComboItem]:
        if not self.permite_alteracao_item:
            raise BusinessRuleViolationError(
                "Alteração de itens não permitida para este combo",
                rule="combo_permite_alteracao_item",
            )
        item = self.obter_item(item_id)
        if item is None:
            return None
        item.atualizar(quantidade, preco_unitario, percentual_desconto, produto_obrigatorio, ordem)
        self._atualizar_timestamp()
        return item

    def remover_item(self, item_id: int) -> bool:
        if not self.permite_exclusao_item:
            raise BusinessRuleViolationError(
                "Exclusão de itens não permitida para este combo",
                rule="combo_permite_exclusao_item",
            )
        item = self.obter_item(item_id)
        if item is None:
            return False
        self.itens.remove(item)
        self._atualizar_timestamp()
        return True

    def adicionar_local_recebimento(self, local: ComboLocalRecebimento) -> None:
        if local.local_padrao:
            for existente in self.locais_recebimento:
                existente.local_padrao = False
        self.locais_recebimento.append(local)
        self._atualizar_timestamp()

    def adicionar_categoria_desconto(self, categoria: ComboCategoriaDesconto) -> None:
        self.categorias_desconto.append(categoria)
        self._atualizar_timestamp()

    def valor_total_itens(self) -> Decimal:
        return sum((i.valor_com_desconto() for i in self.itens), Decimal("0"))

    def __repr__(self) -> str:
        return f"Combo(id={self.id}, nome={self.nome!r}, status={self.status.value})"
