"""
Entidades do Domínio de Segmentações.

Agregado Segmentacao (descontos por porte do produtor):
- Segmentacao: conjunto de faixas de área de um fornecedor
- Grupo: faixa de área (hectares) dentro da segmentação
- GrupoSegmentacao: percentual de desconto de uma categoria no grupo

Regras:
- Área mínima >= 0; área máxima (opcional) > área mínima
- Percentual de desconto entre 0 e 100
- Uma categoria aparece no máximo uma vez por grupo
"""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, Dict, List, Optional

from agriis.core.shared.entities import EntidadeBase, to_decimal
from agriis.core.shared.exceptions import BusinessRuleViolationError, ValidationError

CEM = Decimal("100")


def _validar_percentual(valor) -> Decimal:
    percentual = to_decimal(valor, "percentual_desconto")
    if percentual < 0 or percentual > CEM:
        raise ValidationError(
            "Percentual de desconto deve estar entre 0 e 100",
            field="percentual_desconto",
        )
    return percentual


@dataclass(eq=False)
class GrupoSegmentacao(EntidadeBase):
    """Desconto de uma categoria de produto dentro de um grupo."""

    categoria_id: int = 0
    percentual_desconto: Decimal = Decimal("0")
    observacoes: Optional[str] = None
    ativo: bool = True

    @classmethod
    def criar(
        cls, categoria_id: int, percentual_desconto, observacoes: Optional[str] = None
    ) -> "GrupoSegmentacao":
        if not categoria_id or categoria_id <= 0:
            raise ValidationError("ID da categoria deve ser válido", field="categoria_id")
        return cls(
            categoria_id=categoria_id,
            percentual_desconto=_validar_percentual(percentual_desconto),
            observacoes=observacoes,
        )

    def atualizar_percentual_desconto(self, percentual) -> None:
        self.percentual_desconto = _validar_percentual(percentual)
        self._atualizar_timestamp()

    def ativar(self) -> None:
        self.ativo = True
        self._atualizar_timestamp()

    def desativar(self) -> None:
        self.ativo = False
        self._atualizar_timestamp()

    def calcular_valor_desconto(self, valor_base) -> Decimal:
        valor_base = to_decimal(valor_base, "valor_base")
        if not self.ativo:
            return Decimal("0")
        return valor_base * self.percentual_desconto / CEM

    def calcular_valor_com_desconto(self, valor_base) -> Decimal:
        valor_base = to_decimal(valor_base, "valor_base")
        return valor_base - self.calcular_valor_desconto(valor_base)


@dataclass(eq=False)
class Grupo(EntidadeBase):
    """Faixa de área (em hectares)."""

    nome: str = ""
    descricao: Optional[str] = None
    area_minima: Decimal = Decimal("0")
    area_maxima: Optional[Decimal] = None
    ativo: bool = True
    descontos: List[GrupoSegmentacao] = field(default_factory=list)

    @classmethod
    def criar(
        cls,
        nome: str,
        area_minima,
        area_maxima=None,
        descricao: Optional[str] = None,
    ) -> "Grupo":
        if not nome or not nome.strip():
            raise ValidationError("Nome do grupo é obrigatório", field="nome")
        grupo = cls(nome=nome.strip(), descricao=descricao)
        grupo._definir_faixa(area_minima, area_maxima)
        return grupo

    def _definir_faixa(self, area_minima, area_maxima) -> None:
        minima = to_decimal(area_minima, "area_minima")
        maxima = to_decimal(area_maxima, "area_maxima") if area_maxima is not None else None
        if minima < 0:
            raise ValidationError("Área mínima não pode ser negativa", field="area_minima")
        if maxima is not None and maxima <= minima:
            raise ValidationError(
                "Área máxima deve ser maior que a área mínima", field="area_maxima"
            )
        self.area_minima = minima
        self.area_maxima = maxima

    def atualizar(self, nome: str, area_minima, area_maxima=None, descricao=None) -> None:
        if not nome or not nome.strip():
            raise ValidationError("Nome do grupo é obrigatório", field="nome")
        self._definir_faixa(area_minima, area_maxima)
        self.nome = nome.strip()
        self.descricao = descricao
        self._atualizar_timestamp()

    def ativar(self) -> None:
        self.ativo = True
        self._atualizar_timestamp()

    def desativar(self) -> None:
        self.ativo = False
        self._atualizar_timestamp()

    def area_se_enquadra(self, area) -> bool:
        area = to_decimal(area, "area")
        if not self.ativo:
            return False
        if area < self.area_minima:
            return False
        if self.area_maxima is not None and area > self.area_maxima:
            return False
        return True

    def adicionar_desconto(self, desconto: GrupoSegmentacao) -> None:
        if self.obter_desconto(desconto.categoria_id):
            raise BusinessRuleViolationError(
                "Já existe desconto para esta categoria no grupo",
                rule="grupo_categoria_unica",
            )
        self.descontos.append(desconto)
        self._atualizar_timestamp()

    def obter_desconto(self, categoria_id: int) -> Optional[GrupoSegmentacao]:
        return next((d for d in self.descontos if d.categoria_id == categoria_id), None)

    def remover_desconto(self, categoria_id: int) -> bool:
        desconto = self.obter_desconto(categoria_id)
        if desconto is None:
            return False
        self.descontos.remove(desconto)
        self._atualizar_timestamp()
        return True


@dataclass(eq=False)
class Segmentacao(EntidadeBase):
    """
    Raiz do agregado Segmentacao.

    Example:
        seg = Segmentacao.criar("Porte", fornecedor_id=1, eh_padrao=True)
        pequeno = Grupo.criar("Pequeno", area_minima=0, area_maxima=100)
        pequeno.adicionar_desconto(GrupoSegmentacao.criar(categoria_id=3, percentual_desconto=5))
        seg.adicionar_grupo(pequeno)
        seg.obter_grupo_por_area(80).nome   # "Pequeno"
    """

    nome: str = ""
    fornecedor_id: int = 0
    descricao: Optional[str] = None
    eh_padrao: bool = False
    configuracao_territorial: Optional[Dict[str, Any]] = None
    ativo: bool = True
    grupos: List[Grupo] = field(default_factory=list)

    @classmethod
    def criar(
        cls,
        nome: str,
        fornecedor_id: int,
        descricao: Optional[str] = None,
        eh_padrao: bool = False,
    ) -> "Segmentacao":
        if not fornecedor_id or fornecedor_id <= 0:
            raise ValidationError("ID do fornecedor deve ser válido", field="fornecedor_id")
        return cls(
            nome=cls._validar_nome(nome),
            fornecedor_id=fornecedor_id,
            descricao=descricao,
            eh_padrao=eh_padrao,
        )

    @staticmethod
    def _validar_nome(nome: str) -> str:
        if not nome or not nome.strip():
            raise ValidationError("Nome da segmentação é obrigatório", field="nome")
        return nome.strip()

    def atualizar_informacoes(self, nome: str, descricao: Optional[str] = None) -> None:
        self.nome = self._validar_nome(nome)
        self.descricao = descricao
        self._atualizar_timestamp()

    def definir_configuracao_territorial(self, configuracao: Optional[Dict[str, Any]]) -> None:
        self.configuracao_territorial = configuracao
        self._atualizar_timestamp()

    def ativar(self) -> None:
        self.ativo = True
        self._atualizar_timestamp()

    def desativar(self) -> None:
        self.ativo = False
        self._atualizar_timestamp()

    def definir_como_padrao(self) -> None:
        self.eh_padrao = True
        self._atualizar_timestamp()

    def remover_como_padrao(self) -> None:
        self.eh_padrao = False
        self._atualizar_timestamp()

    def adicionar_grupo(self, grupo: Grupo) -> None:
        self.grupos.append(grupo)
        self._atualizar_timestamp()

    def obter_grupo(self, grupo_id: int) -> Optional[Grupo]:
        return next((g for g in self.grupos if g.id == grupo_id), None)

    def remover_grupo(self, grupo_id: int) -> bool:
        grupo = self.obter_grupo(grupo_id)
        if grupo is None:
            return False
        self.grupos.remove(grupo)
        self._atualizar_timestamp()
        return True

    def grupos_aplicaveis(self, area) -> List[Grupo]:
        """Grupos ativos cuja faixa comporta a área, por área mínima."""
        return sorted(
            (g for g in self.grupos if g.area_se_enquadra(area)),
            key=lambda g: g.area_minima,
        )

    def obter_grupo_por_area(self, area) -> Optional[Grupo]:
        aplicaveis = self.grupos_aplicaveis(area)
        return aplicaveis[0] if aplicaveis else None
