"""
Entidades do Domínio de Catálogos.

Agregado Catalogo:
- Catalogo: tabela de preços por safra, ponto de distribuição, cultura e categoria
- CatalogoItem: preço de um produto no catálogo

Estrutura de preços (JSON) do item:
    {
        "estados": {"MT": 120.5, "GO": [{"data_inicio": "2024-01-01", "data_fim": "2024-06-30", "valor": 118}]},
        "padrao": 125.0
    }

Resolução de preço: estado da UF -> "padrao" -> preco_base.
Cada elemento é um número ou uma lista de janelas de vigência.
"""

from dataclasses import dataclass, field
from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from typing import Any, Dict, List, Optional, Union

from agriis.core.fornecedores.entities import Moeda
from agriis.core.shared.entities import EntidadeBase, to_decimal
from agriis.core.shared.exceptions import BusinessRuleViolationError, ValidationError

Data = Union[date, datetime]


def _como_data(valor: Any) -> Optional[date]:
    if isinstance(valor, datetime):
        return valor.date()
    if isinstance(valor, date):
        return valor
    try:
        return date.fromisoformat(str(valor)[:10])
    except ValueError:
        return None


@dataclass(eq=False)
class CatalogoItem(EntidadeBase):
    """Preço de um produto no catálogo."""

    catalogo_id: Optional[int] = None
    produto_id: int = 0
    estrutura_precos: Dict[str, Any] = field(default_factory=dict)
    preco_base: Optional[Decimal] = None
    ativo: bool = True

    @classmethod
    def criar(
        cls,
        produto_id: int,
        estrutura_precos: Optional[Dict[str, Any]] = None,
        preco_base=None,
    ) -> "CatalogoItem":
        if not produto_id or produto_id <= 0:
            raise ValidationError("ID do produto deve ser maior que zero", field="produto_id")
        return cls(
            produto_id=produto_id,
            estrutura_precos=cls._validar_estrutura(estrutura_precos),
            preco_base=cls._validar_preco_base(preco_base),
        )

    @staticmethod
    def _validar_estrutura(estrutura: Optional[Dict[str, Any]]) -> Dict[str, Any]:
        if estrutura is None:
            return {}
        if not isinstance(estrutura, dict):
            raise ValidationError(
                "Estrutura de preços deve ser um objeto JSON", field="estrutura_precos"
            )
        return estrutura

    @staticmethod
    def _validar_preco_base(preco_base) -> Optional[Decimal]:
        if preco_base is None:
            return None
        preco = to_decimal(preco_base, "preco_base")
        if preco < 0:
            raise ValidationError("Preço base não pode ser negativo", field="preco_base")
        return preco

    def atualizar_precos(self, estrutura_precos: Dict[str, Any], preco_base=None) -> None:
        self.estrutura_precos = self._validar_estrutura(estrutura_precos)
        self.preco_base = self._validar_preco_base(preco_base)
        self._atualizar_timestamp()

    def ativar(self) -> None:
        self.ativo = True
        self._atualizar_timestamp()

    def desativar(self) -> None:
        self.ativo = False
        self._atualizar_timestamp()

    def obter_preco(self, uf: Optional[str], data: Data) -> Optional[Decimal]:
        """
        Resolve preço para a UF na data.

        Uma UF ou "padrao" presente sem janela vigente resulta em None
        (não cai para o próximo nível). Estrutura malformada resulta
        em preco_base.
        """
        if not self.estrutura_precos:
            return self.preco_base

        try:
            estados = self.estrutura_precos.get("estados") or {}
            if uf and uf.upper() in estados:
                return self._preco_para_data(estados[uf.upper()], data)

            if "padrao" in self.estrutura_precos:
                return self._preco_para_data(self.estrutura_precos["padrao"], data)
        except (AttributeError, TypeError, InvalidOperation, KeyError):
            return self.preco_base

        return self.preco_base

    @staticmethod
    def _preco_para_data(elemento: Any, data: Data) -> Optional[Decimal]:
        if isinstance(elemento, (int, float, Decimal)) and not isinstance(elemento, bool):
            return Decimal(str(elemento))

        if isinstance(elemento, list):
            dia = _como_data(data)
            for janela in elemento:
                if "data_inicio" not in janela or "valor" not in janela:
                    continue
                inicio = _como_data(janela["data_inicio"])
                if inicio is None or dia < inicio:
                    continue
                fim = _como_data(janela["data_fim"]) if janela.get("data_fim") else None
                if fim is None or dia <= fim:
                    return Decimal(str(janela["valor"]))

        return None


@dataclass(eq=False)
class Catalogo(EntidadeBase):
    """
    Raiz do agregado Catalogo.

    Chave única: (safra_id, ponto_distribuicao_id, cultura_id, categoria_id).

    Example:
        catalogo = Catalogo.criar(
            safra_id=1, ponto_distribuicao_id=3, cultura_id=2, categoria_id=5,
            moeda=Moeda.REAL, data_inicio=date(2024, 7, 1),
        )
        item = catalogo.adicionar_item(CatalogoItem.criar(10, {"padrao": 99.9}))
        catalogo.obter_item(10).obter_preco("MT", date.today())
    """

    safra_id: int = 0
    ponto_distribuicao_id: int = 0
    cultura_id: int = 0
    categoria_id: int = 0
    moeda: Moeda = Moeda.REAL
    data_inicio: date = field(default_factory=date.today)
    data_fim: Optional[date] = None
    ativo: bool = True
    itens: List[CatalogoItem] = field(default_factory=list)

    @classmethod
    def criar(
        cls,
        safra_id: int,
        ponto_distribuicao_id: int,
        cultura_id: int,
        categoria_id: int,
        moeda: Moeda,
        data_inicio: date,
        data_fim: Optional[date] = None,
    ) -> "Catalogo":
        for nome, valor in (
            ("safra_id", safra_id),
            ("ponto_distribuicao_id", ponto_distribuicao_id),
            ("cultura_id", cultura_id),
            ("categoria_id", categoria_id),
        ):
            if not valor or valor <= 0:
                raise ValidationError(f"{nome} deve ser maior que zero", field=nome)

        catalogo = cls(
            safra_id=safra_id,
            ponto_distribuicao_id=ponto_distribuicao_id,
            cultura_id=cultura_id,
            categoria_id=categoria_id,
            moeda=moeda,
        )
        catalogo._definir_vigencia(data_inicio, data_fim)
        return catalogo

    def _definir_vigencia(self, data_inicio: date, data_fim: Optional[date]) -> None:
        if data_inicio is None:
            raise ValidationError("Data de início é obrigatória", field="data_inicio")
        if data_fim is not None and data_fim < data_inicio:
            raise ValidationError(
                "Data fim deve ser posterior à data início", field="data_fim"
            )
        self.data_inicio = data_inicio
        self.data_fim = data_fim

    def atualizar(self, data_inicio: date, data_fim: Optional[date], ativo: bool) -> None:
        self._definir_vigencia(data_inicio, data_fim)
        self.ativo = ativo
        self._atualizar_timestamp()

    def esta_vigente(self, data: Optional[Data] = None) -> bool:
        dia = _como_data(data) if data is not None else date.today()
        return (
            self.ativo
            and self.data_inicio <= dia
            and (self.data_fim is None or dia <= self.data_fim)
        )

    def adicionar_item(self, item: CatalogoItem) -> CatalogoItem:
        if self.obter_item(item.produto_id):
            raise BusinessRuleViolationError(
                "Produto já existe no catálogo", rule="catalogo_produto_unico"
            )
        item.catalogo_id = self.id
        self.itens.append(item)
        self._atualizar_timestamp()
        return item

    def obter_item(self, produto_id: int) -> Optional[CatalogoItem]:
        return next((i for i in self.itens if i.produto_id == produto_id), None)

    def obter_item_por_id(self, item_id: int) -> Optional[CatalogoItem]:
        return next((i for i in self.itens if i.id == item_id), None)

    def remover_item(self, item_id: int) -> bool:
        item = self.obter_item_por_id(item_id)
        if item is None:
            return False
        self.itens.remove(item)
        self._atualizar_timestamp()
        return True

    @property
    def chave(self) -> tuple:
        return (self.safra_id, self.ponto_distribuicao_id, self.cultura_id, self.categoria_id)
