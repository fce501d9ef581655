"""
Entidades do Domínio de Propriedades.

Agregado Propriedade:
- Propriedade: imóvel rural de um produtor (raiz)
- Talhao: subdivisão da propriedade
- PropriedadeCultura: área cultivada por cultura/safra

Regras:
- Nome obrigatório, área total > 0
- Soma das áreas das culturas não excede a área total
- Soma das áreas dos talhões não excede a área total
- Nome de talhão único dentro da propriedade
"""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, Dict, List, Optional

from agriis.core.shared.entities import EntidadeBase
from agriis.core.shared.exceptions import BusinessRuleViolationError, ValidationError
from agriis.core.shared.value_objects import AreaPlantio


@dataclass(eq=False)
class Talhao(EntidadeBase):
    nome: str = ""
    area: AreaPlantio = field(default_factory=AreaPlantio)
    descricao: Optional[str] = None

    @classmethod
    def criar(cls, nome: str, area: AreaPlantio, descricao: Optional[str] = None) -> "Talhao":
        if not nome or not nome.strip():
            raise ValidationError("Nome do talhão é obrigatório", field="nome")
        if area.valor <= 0:
            raise ValidationError("Área do talhão deve ser maior que zero", field="area")
        return cls(nome=nome.strip(), area=area, descricao=descricao)


@dataclass(eq=False)
class PropriedadeCultura(EntidadeBase):
    cultura_id: int = 0
    area: AreaPlantio = field(default_factory=AreaPlantio)
    safra_id: Optional[int] = None

    @classmethod
    def criar(
        cls, cultura_id: int, area: AreaPlantio, safra_id: Optional[int] = None
    ) -> "PropriedadeCultura":
        if not cultura_id or cultura_id <= 0:
            raise ValidationError("ID da cultura deve ser maior que zero", field="cultura_id")
        if area.valor <= 0:
            raise ValidationError("Área da cultura deve ser maior que zero", field="area")
        return cls(cultura_id=cultura_id, area=area, safra_id=safra_id)


@dataclass(eq=False)
class Propriedade(EntidadeBase):
    """
    Raiz do agregado Propriedade.

    Example:
        propriedade = Propriedade.criar("Fazenda Boa Vista", AreaPlantio.criar(500), produtor_id=1)
        propriedade.adicionar_talhao(Talhao.criar("Talhão 1", AreaPlantio.criar(120)))
        propriedade.adicionar_cultura(cultura_id=2, area=AreaPlantio.criar(300))
    """

    nome: str = ""
    nirf: Optional[str] = None
    inscricao_estadual: Optional[str] = None
    area_total: AreaPlantio = field(default_factory=AreaPlantio)
    produtor_id: int = 0
    endereco_id: Optional[int] = None
    dados_adicionais: Dict[str, Any] = field(default_factory=dict)
    talhoes: List[Talhao] = field(default_factory=list)
    culturas: List[PropriedadeCultura] = field(default_factory=list)

    @classmethod
    def criar(
        cls,
        nome: str,
        area_total: AreaPlantio,
        produtor_id: int,
        nirf: Optional[str] = None,
        inscricao_estadual: Optional[str] = None,
        endereco_id: Optional[int] = None,
    ) -> "Propriedade":
        if not produtor_id or produtor_id <= 0:
            raise ValidationError("ID do produtor deve ser maior que zero", field="produtor_id")
        return cls(
            nome=cls._validar_nome(nome),
            area_total=cls._validar_area_total(area_total),
            produtor_id=produtor_id,
            nirf=nirf,
            inscricao_estadual=inscricao_estadual,
            endereco_id=endereco_id,
        )

    @staticmethod
    def _validar_nome(nome: str) -> str:
        if not nome or not nome.strip():
            raise ValidationError("Nome da propriedade é obrigatório", field="nome")
        return nome.strip()

    @staticmethod
    def _validar_area_total(area_total: AreaPlantio) -> AreaPlantio:
        if area_total is None or area_total.valor <= 0:
            raise ValidationError(
                "Área total da propriedade deve ser maior que zero", field="area_total"
            )
        return area_total

    def atualizar_dados(
        self,
        nome: str,
        area_total: AreaPlantio,
        nirf: Optional[str] = None,
        inscricao_estadual: Optional[str] = None,
        endereco_id: Optional[int] = None,
    ) -> None:
        area_total = self._validar_area_total(area_total)
        if self.area_total_culturas().valor > area_total.valor:
            raise BusinessRuleViolationError(
                "Área das culturas excede a área total da propriedade",
                rule="area_culturas",
            )
        if self.area_total_talhoes().valor > area_total.valor:
            raise BusinessRuleViolationError(
                "Área dos talhões excede a área total da propriedade",
                rule="area_talhoes",
            )

        self.nome = self._validar_nome(nome)
        self.area_total = area_total
        self.nirf = nirf
        self.inscricao_estadual = inscricao_estadual
        self.endereco_id = endereco_id
        self._atualizar_timestamp()

    def adicionar_talhao(self, talhao: Talhao) -> None:
        if any(t.nome.lower() == talhao.nome.lower() for t in self.talhoes):
            raise BusinessRuleViolationError(
                "Já existe um talhão com este nome na propriedade",
                rule="talhao_nome_unico",
            )
        if self.area_total_talhoes().valor + talhao.area.valor > self.area_total.valor:
            raise BusinessRuleViolationError(
                "Área dos talhões excede a área total da propriedade",
                rule="area_talhoes",
            )
        self.talhoes.append(talhao)
        self._atualizar_timestamp()

    def adicionar_cultura(
        self, cultura_id: int, area: AreaPlantio, safra_id: Optional[int] = None
    ) -> PropriedadeCultura:
        cultura = PropriedadeCultura.criar(cultura_id, area, safra_id)
        if self.area_total_culturas().valor + area.valor > self.area_total.valor:
            raise BusinessRuleViolationError(
                "Área das culturas excede a área total da propriedade",
                rule="area_culturas",
            )
        self.culturas.append(cultura)
        self._atualizar_timestamp()
        return cultura

    def remover_cultura(self, cultura_id: int) -> bool:
        for cultura in self.culturas:
            if cultura.cultura_id == cultura_id:
                self.culturas.remove(cultura)
                self._atualizar_timestamp()
                return True
        return False

    def area_total_culturas(self) -> AreaPlantio:
        return AreaPlantio(sum((c.area.valor for c in self.culturas), Decimal("0")))

    def area_total_talhoes(self) -> AreaPlantio:
        return AreaPlantio(sum((t.area.valor for t in self.talhoes), Decimal("0")))

    def area_disponivel(self) -> AreaPlantio:
        return AreaPlantio(self.area_total.valor - self.area_total_culturas().valor)

    def definir_dados_adicionais(self, dados: Dict[str, Any]) -> None:
        if dados is not None:
            self.dados_adicionais = dict(dados)
            self._atualizar_timestamp()
