"""
Use Cases do Domínio de Segmentações.

SegmentacaoService:
- criar / atualizar / remover / obter_por_id / listar_por_fornecedor / obter_padrao
- ativar / desativar / definir_como_padrao (uma padrão por fornecedor)
- grupos: adicionar_grupo / atualizar_grupo / remover_grupo
- descontos: adicionar_desconto / atualizar_desconto / remover_desconto

CalculoDescontoSegmentadoService:
- calcular: segmentação padrão (ou primeira ativa) -> grupo pela área
  -> desconto da categoria
- validar_area_se_enquadra / obter_grupos_aplicaveis
"""

from decimal import Decimal
from typing import List, Optional
import logging

from agriis.core.shared.entities import to_decimal
from agriis.core.shared.exceptions import (
    BusinessRuleViolationError,
    EntityNotFoundError,
    ValidationError,
)
from agriis.core.shared.interfaces import UnitOfWork

from .dtos import (
    AtualizarSegmentacaoInputDTO,
    CriarSegmentacaoInputDTO,
    DescontoCategoriaInputDTO,
    GrupoInputDTO,
    ResultadoDescontoSegmentado,
    SegmentacaoOutputDTO,
)
from .entities import Grupo, GrupoSegmentacao, Segmentacao
from .ports import SegmentacaoRepository

logger = logging.getLogger(__name__)


class SegmentacaoService:

    def __init__(self, segmentacao_repo: SegmentacaoRepository, uow: UnitOfWork):
        self.segmentacao_repo = segmentacao_repo
        self.uow = uow

    # =========================================================================
    # Segmentação
    # =========================================================================

    def _obter_entidade(self, segmentacao_id: int) -> Segmentacao:
        segmentacao = self.segmentacao_repo.get_by_id(segmentacao_id)
        if not segmentacao:
            raise EntityNotFoundError(
                "Segmentação não encontrada",
                entity_type="Segmentacao",
                entity_id=segmentacao_id,
            )
        return segmentacao

    def _desmarcar_padrao_atual(self, fornecedor_id: int, exceto_id: Optional[int]) -> None:
        for outra in self.segmentacao_repo.list_por_fornecedor(fornecedor_id):
            if outra.eh_padrao and outra.id != exceto_id:
                outra.remover_como_padrao()
                self.segmentacao_repo.save(outra)

    def criar(self, input_dto: CriarSegmentacaoInputDTO) -> SegmentacaoOutputDTO:
        with self.uow:
            if input_dto.eh_padrao and self.segmentacao_repo.get_padrao(input_dto.fornecedor_id):
                raise BusinessRuleViolationError(
                    "Já existe uma segmentação padrão para este fornecedor",
                    rule="segmentacao_padrao_unica",
                )

            segmentacao = Segmentacao.criar(
                nome=input_dto.nome,
                fornecedor_id=input_dto.fornecedor_id,
                descricao=input_dto.descricao,
                eh_padrao=input_dto.eh_padrao,
            )
            if input_dto.configuracao_territorial is not None:
                segmentacao.definir_configuracao_territorial(input_dto.configuracao_territorial)
            self.segmentacao_repo.save(segmentacao)

        logger.info(
            f"Segmentação criada: {segmentacao.id} (fornecedor={segmentacao.fornecedor_id})"
        )
        return SegmentacaoOutputDTO.from_entity(segmentacao)

    def atualizar(
        self, segmentacao_id: int, input_dto: AtualizarSegmentacaoInputDTO
    ) -> SegmentacaoOutputDTO:
        with self.uow:
            segmentacao = self._obter_entidade(segmentacao_id)
            segmentacao.atualizar_informacoes(input_dto.nome, input_dto.descricao)
            if input_dto.configuracao_territorial is not None:
                segmentacao.definir_configuracao_territorial(input_dto.configuracao_territorial)
            self.segmentacao_repo.save(segmentacao)
        return SegmentacaoOutputDTO.from_entity(segmentacao)

    def obter_por_id(self, segmentacao_id: int) -> SegmentacaoOutputDTO:
        return SegmentacaoOutputDTO.from_entity(self._obter_entidade(segmentacao_id))

    def listar_por_fornecedor(self, fornecedor_id: int) -> List[SegmentacaoOutputDTO]:
        return [
            SegmentacaoOutputDTO.from_entity(s)
            for s in self.segmentacao_repo.list_por_fornecedor(fornecedor_id)
        ]

    def obter_padrao(self, fornecedor_id: int) -> SegmentacaoOutputDTO:
        segmentacao = self.segmentacao_repo.get_padrao(fornecedor_id)
        if not segmentacao:
            raise EntityNotFoundError(
                "Segmentação padrão não encontrada",
                entity_type="Segmentacao",
                entity_id=fornecedor_id,
            )
        return SegmentacaoOutputDTO.from_entity(segmentacao)

    def ativar(self, segmentacao_id: int) -> SegmentacaoOutputDTO:
        with self.uow:
            segmentacao = self._obter_entidade(segmentacao_id)
            segmentacao.ativar()
            self.segmentacao_repo.save(segmentacao)
        return SegmentacaoOutputDTO.from_entity(segmentacao)

    def desativar(self, segmentacao_id: int) -> SegmentacaoOutputDTO:
        with self.uow:
            segmentacao = self._obter_entidade(segmentacao_id)
            segmentacao.desativar()
            self.segmentacao_repo.save(segmentacao)
        return SegmentacaoOutputDTO.from_entity(segmentacao)

    def definir_como_padrao(self, segmentacao_id: int) -> SegmentacaoOutputDTO:
        with self.uow:
            segmentacao = self._obter_entidade(segmentacao_id)
            if segmentacao.eh_padrao:
                raise BusinessRuleViolationError(
                    "Segmentação já é padrão", rule="segmentacao_padrao"
                )
            self._desmarcar_padrao_atual(segmentacao.fornecedor_id, exceto_id=segmentacao.id)
            segmentacao.definir_como_padrao()
            self.segmentacao_repo.save(segmentacao)

        logger.info(f"Segmentação {segmentacao_id} definida como padrão")
        return SegmentacaoOutputDTO.from_entity(segmentacao)

    def remover(self, segmentacao_id: int) -> None:
        with self.uow:
            self._obter_entidade(segmentacao_id)
            self.segmentacao_repo.delete(segmentacao_id)
        logger.info(f"Segmentação removida: {segmentacao_id}")

    # =========================================================================
    # Grupos e descontos
    # =========================================================================

    @staticmethod
    def _obter_grupo(segmentacao: Segmentacao, grupo_id: int) -> Grupo:
        grupo = segmentacao.obter_grupo(grupo_id)
        if not grupo:
            raise EntityNotFoundError(
                "Grupo não encontrado", entity_type="Grupo", entity_id=grupo_id
            )
        return grupo

    def adicionar_grupo(
        self, segmentacao_id: int, input_dto: GrupoInputDTO
    ) -> SegmentacaoOutputDTO:
        with self.uow:
            segmentacao = self._obter_entidade(segmentacao_id)
            segmentacao.adicionar_grupo(
                Grupo.criar(
                    nome=input_dto.nome,
                    area_minima=input_dto.area_minima,
                    area_maxima=input_dto.area_maxima,
                    descricao=input_dto.descricao,
                )
            )
            self.segmentacao_repo.save(segmentacao)
        return SegmentacaoOutputDTO.from_entity(segmentacao)

    def atualizar_grupo(
        self, segmentacao_id: int, grupo_id: int, input_dto: GrupoInputDTO
    ) -> SegmentacaoOutputDTO:
        with self.uow:
            segmentacao = self._obter_entidade(segmentacao_id)
            grupo = self._obter_grupo(segmentacao, grupo_id)
            grupo.atualizar(
                nome=input_dto.nome,
                area_minima=input_dto.area_minima,
                area_maxima=input_dto.area_maxima,
                descricao=input_dto.descricao,
            )
            self.segmentacao_repo.save(segmentacao)
        return SegmentacaoOutputDTO.from_entity(segmentacao)

    def remover_grupo(self, segmentacao_id: int, grupo_id: int) -> SegmentacaoOutputDTO:
        with self.uow:
            segmentacao = self._obter_entidade(segmentacao_id)
            self._obter_grupo(segmentacao, grupo_id)
            segmentacao.remover_grupo(grupo_id)
            self.segmentacao_repo.save(segmentacao)
        return SegmentacaoOutputDTO.from_entity(segmentacao)

    def adicionar_desconto(
        self, segmentacao_id: int, grupo_id: int, input_dto: DescontoCategoriaInputDTO
    ) -> SegmentacaoOutputDTO:
        with self.uow:
            segmentacao = self._obter_entidade(segmentacao_id)
            grupo = self._obter_grupo(segmentacao, grupo_id)
            grupo.adicionar_desconto(
                GrupoSegmentacao.criar(
                    categoria_id=input_dto.categoria_id,
                    percentual_desconto=input_dto.percentual_desconto,
                    observacoes=input_dto.observacoes,
                )
            )
            self.segmentacao_repo.save(segmentacao)
        return SegmentacaoOutputDTO.from_entity(segmentacao)

    def atualizar_desconto(
        self, segmentacao_id: int, grupo_id: int, input_dto: DescontoCategoriaInputDTO
    ) -> SegmentacaoOutputDTO:
        with self.uow:
            segmentacao = self._obter_entidade(segmentacao_id)
            grupo = self._obter_grupo(segmentacao, grupo_id)
            desconto = grupo.obter_desconto(input_dto.categoria_id)
            if not desconto:
                raise EntityNotFoundError(
                    "Desconto não encontrado para esta categoria",
                    entity_type="GrupoSegmentacao",
                    entity_id=input_dto.categoria_id,
                )
            desconto.atualizar_percentual_desconto(input_dto.percentual_desconto)
            desconto.observacoes = input_dto.observacoes
            self.segmentacao_repo.save(segmentacao)
        return SegmentacaoOutputDTO.from_entity(segmentacao)

    def remover_desconto(
        self, segmentacao_id: int, grupo_id: int, categoria_id: int
    ) -> SegmentacaoOutputDTO:
        with self.uow:
            segmentacao = self._obter_entidade(segmentacao_id)
            grupo = self._obter_grupo(segmentacao, grupo_id)
            if not grupo.remover_desconto(categoria_id):
                raise EntityNotFoundError(
                    "Desconto não encontrado para esta categoria",
                    entity_type="GrupoSegmentacao",
                    entity_id=categoria_id,
                )
            self.segmentacao_repo.save(segmentacao)
        return SegmentacaoOutputDTO.from_entity(segmentacao)


class CalculoDescontoSegmentadoService:
    """
    Calcula o desconto por porte (área) do produtor.

    Somente leitura: não abre Unit of Work.

    Example:
        resultado = service.calcular(
            fornecedor_id=1, categoria_id=3, area=Decimal("80"), valor_base=Decimal("1000"),
        )
        resultado.valor_final     # Decimal("950.00") com 5% de desconto
    """

    def __init__(self, segmentacao_repo: SegmentacaoRepository):
        self.segmentacao_repo = segmentacao_repo

    def _obter_segmentacao_aplicavel(self, fornecedor_id: int) -> Optional[Segmentacao]:
        ativas = self.segmentacao_repo.list_ativas_por_fornecedor(fornecedor_id)
        padrao = next((s for s in ativas if s.eh_padrao), None)
        return padrao or (ativas[0] if ativas else None)

    def calcular(
        self,
        fornecedor_id: int,
        categoria_id: int,
        area,
        valor_base,
    ) -> ResultadoDescontoSegmentado:
        """
        Raises:
            ValidationError: Área ou valor base não positivos
        """
        area = to_decimal(area, "area")
        valor_base = to_decimal(valor_base, "valor_base")
        if area <= 0:
            raise ValidationError("Área do produtor deve ser positiva", field="area")
        if valor_base <= 0:
            raise ValidationError("Valor base deve ser positivo", field="valor_base")

        def sem_desconto(observacoes, segmentacao=None, grupo=None):
            return ResultadoDescontoSegmentado(
                percentual_desconto=Decimal("0"),
                valor_desconto=Decimal("0"),
                valor_final=valor_base,
                segmentacao_aplicada=segmentacao,
                grupo_aplicado=grupo,
                observacoes=observacoes,
            )

        segmentacao = self._obter_segmentacao_aplicavel(fornecedor_id)
        if segmentacao is None:
            return sem_desconto("Nenhuma segmentação encontrada para o fornecedor")

        grupo = segmentacao.obter_grupo_por_area(area)
        if grupo is None:
            return sem_desconto(
                f"Nenhum grupo encontrado para área de {area} hectares",
                segmentacao=segmentacao.nome,
            )

        desconto = grupo.obter_desconto(categoria_id)
        if desconto is None or not desconto.ativo:
            return sem_desconto(
                "Nenhum desconto configurado para esta categoria",
                segmentacao=segmentacao.nome,
                grupo=grupo.nome,
            )

        resultado = ResultadoDescontoSegmentado(
            percentual_desconto=desconto.percentual_desconto,
            valor_desconto=desconto.calcular_valor_desconto(valor_base),
            valor_final=desconto.calcular_valor_com_desconto(valor_base),
            segmentacao_aplicada=segmentacao.nome,
            grupo_aplicado=grupo.nome,
            observacoes=(
                f"Desconto aplicado: {desconto.percentual_desconto}% "
                f"para área de {area} hectares"
            ),
        )
        logger.debug(
            f"Desconto segmentado fornecedor={fornecedor_id} categoria={categoria_id}: "
            f"{resultado.percentual_desconto}%"
        )
        return resultado

    def validar_area_se_enquadra(self, segmentacao_id: int, area) -> bool:
        return bool(self.obter_grupos_aplicaveis(segmentacao_id, area))

    def obter_grupos_aplicaveis(self, segmentacao_id: int, area) -> List[Grupo]:
        area = to_decimal(area, "area")
        if area <= 0:
            raise ValidationError("Área deve ser positiva", field="area")
        segmentacao = self.segmentacao_repo.get_by_id(segmentacao_id)
        if not segmentacao:
            raise EntityNotFoundError(
                "Segmentação não encontrada",
                entity_type="Segmentacao",
                entity_id=segmentacao_id,
            )
        return segmentacao.grupos_aplicaveis(area)
