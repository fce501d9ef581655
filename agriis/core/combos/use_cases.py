"""
Use Cases do Domínio de Combos.

ComboService:
- criar (nome único entre combos ativos do fornecedor na safra)
- atualizar / obter_por_id / listar_por_fornecedor / listar_vigentes
- listar_validos_para_produtor / validar_combo_para_produtor
- atualizar_status / remover
- adicionar_item / atualizar_item / remover_item
- adicionar_local_recebimento / adicionar_categoria_desconto

MarcarCombosExpiradosService:
- execute: combos ativos com data_fim passada -> Expirado
"""

from datetime import datetime
from typing import List, Optional
import logging

from agriis.core.shared.exceptions import BusinessRuleViolationError, EntityNotFoundError
from agriis.core.shared.interfaces import UnitOfWork

from .dtos import (
    AtualizarComboInputDTO,
    ComboCategoriaDescontoInputDTO,
    ComboItemInputDTO,
    ComboLocalRecebimentoInputDTO,
    ComboOutputDTO,
    CriarComboInputDTO,
)
from .entities import (
    Combo,
    ComboCategoriaDesconto,
    ComboItem,
    ComboLocalRecebimento,
    ModalidadePagamento,
    StatusCombo,
    TipoDesconto,
)
from .events import ComboCriadoEvent, ComboExpiradoEvent
from .ports import ComboRepository

logger = logging.getLogger(__name__)


class ComboService:
    """
    Application service de combos.

    Example:
        service = ComboService(combo_repo, uow)
        combo = service.criar(CriarComboInputDTO(...))
        service.adicionar_item(combo.id, ComboItemInputDTO(produto_id=7, ...))
        service.validar_combo_para_produtor(combo.id, hectare=300, municipio_id=None)
    """

    def __init__(self, combo_repo: ComboRepository, uow: UnitOfWork):
        self.combo_repo = combo_repo
        self.uow = uow

    def _obter_entidade(self, combo_id: int) -> Combo:
        combo = self.combo_repo.get_by_id(combo_id)
        if not combo:
            raise EntityNotFoundError(
                "Combo não encontrado", entity_type="Combo", entity_id=combo_id
            )
        return combo

    # =========================================================================
    # Queries
    # =========================================================================

    def obter_por_id(self, combo_id: int) -> ComboOutputDTO:
        return ComboOutputDTO.from_entity(self._obter_entidade(combo_id))

    def listar_por_fornecedor(self, fornecedor_id: int) -> List[ComboOutputDTO]:
        return [
            ComboOutputDTO.from_entity(c)
            for c in self.combo_repo.list_por_fornecedor(fornecedor_id)
        ]

    def listar_vigentes(self) -> List[ComboOutputDTO]:
        return [
            ComboOutputDTO.from_entity(c)
            for c in self.combo_repo.list_vigentes(datetime.now())
        ]

    def listar_validos_para_produtor(
        self, hectare, municipio_id: Optional[int] = None
    ) -> List[ComboOutputDTO]:
        agora = datetime.now()
        return [
            ComboOutputDTO.from_entity(c)
            for c in self.combo_repo.list_vigentes(agora)
            if c.valido_para_produtor(hectare, municipio_id, agora)
        ]

    def validar_combo_para_produtor(
        self, combo_id: int, hectare, municipio_id: Optional[int] = None
    ) -> bool:
        return self._obter_entidade(combo_id).valido_para_produtor(hectare, municipio_id)

    # =========================================================================
    # Commands
    # =========================================================================

    def criar(self, input_dto: CriarComboInputDTO) -> ComboOutputDTO:
        with self.uow:
            if self.combo_repo.existe_combo_ativo(
                input_dto.fornecedor_id, input_dto.safra_id, input_dto.nome
            ):
                raise BusinessRuleViolationError(
                    "Já existe um combo ativo com este nome para o fornecedor na safra selecionada",
                    rule="combo_nome_unico",
                )

            combo = Combo.criar(
                nome=input_dto.nome,
                hectare_minimo=input_dto.hectare_minimo,
                hectare_maximo=input_dto.hectare_maximo,
                data_inicio=input_dto.data_inicio,
                data_fim=input_dto.data_fim,
                modalidade_pagamento=ModalidadePagamento.from_string(
                    input_dto.modalidade_pagamento
                ),
                fornecedor_id=input_dto.fornecedor_id,
                safra_id=input_dto.safra_id,
                descricao=input_dto.descricao,
            )
            combo.configurar_permissoes(
                input_dto.permite_alteracao_item, input_dto.permite_exclusao_item
            )
            if input_dto.municipios_permitidos:
                combo.definir_restricoes_municipios(list(input_dto.municipios_permitidos))

            self.combo_repo.save(combo)

            self.uow.publish_event(ComboCriadoEvent(
                aggregate_id=combo.id,
                nome=combo.nome,
                fornecedor_id=combo.fornecedor_id,
                safra_id=combo.safra_id,
            ))

        logger.info(f"Combo criado: {combo.id} ({combo.nome})")
        return ComboOutputDTO.from_entity(combo)

    def atualizar(self, combo_id: int, input_dto: AtualizarComboInputDTO) -> ComboOutputDTO:
        with self.uow:
            combo = self._obter_entidade(combo_id)
            combo.atualizar_informacoes(
                nome=input_dto.nome,
                hectare_minimo=input_dto.hectare_minimo,
                hectare_maximo=input_dto.hectare_maximo,
                data_inicio=input_dto.data_inicio,
                data_fim=input_dto.data_fim,
                descricao=input_dto.descricao,
            )
            combo.configurar_permissoes(
                input_dto.permite_alteracao_item, input_dto.permite_exclusao_item
            )
            # None mantém as restrições atuais; tupla vazia remove
            if input_dto.municipios_permitidos is not None:
                combo.definir_restricoes_municipios(list(input_dto.municipios_permitidos))

            self.combo_repo.save(combo)

        return ComboOutputDTO.from_entity(combo)

    def atualizar_status(self, combo_id: int, status: str) -> ComboOutputDTO:
        with self.uow:
            combo = self._obter_entidade(combo_id)
            anterior = combo.status
            combo.atualizar_status(StatusCombo.from_string(status))
            self.combo_repo.save(combo)

        logger.info(
            f"Combo {combo_id}: status {anterior.value} -> {combo.status.value}"
        )
        return ComboOutputDTO.from_entity(combo)

    def remover(self, combo_id: int) -> None:
        with self.uow:
            self._obter_entidade(combo_id)
            self.combo_repo.delete(combo_id)

        logger.info(f"Combo removido: {combo_id}")

    # =========================================================================
    # Itens
    # =========================================================================

    def adicionar_item(self, combo_id: int, input_dto: ComboItemInputDTO) -> ComboOutputDTO:
        with self.uow:
            combo = self._obter_entidade(combo_id)
            combo.adicionar_item(ComboItem.criar(
                produto_id=input_dto.produto_id,
                quantidade=input_dto.quantidade,
                preco_unitario=input_dto.preco_unitario,
                percentual_desconto=input_dto.percentual_desconto,
                produto_obrigatorio=input_dto.produto_obrigatorio,
                ordem=input_dto.ordem,
            ))
            self.combo_repo.save(combo)

        return ComboOutputDTO.from_entity(combo)

    def atualizar_item(
        self, combo_id: int, item_id: int, input_dto: ComboItemInputDTO
    ) -> ComboOutputDTO:
        with self.uow:
            combo = self._obter_entidade(combo_id)
            item = combo.atualizar_item(
                item_id,
                quantidade=input_dto.quantidade,
                preco_unitario=input_dto.preco_unitario,
                percentual_desconto=input_dto.percentual_desconto,
                produto_obrigatorio=input_dto.produto_obrigatorio,
                ordem=input_dto.ordem,
            )
            if item is None:
                raise EntityNotFoundError(
                    "Item não encontrado no combo", entity_type="ComboItem", entity_id=item_id
                )
            self.combo_repo.save(combo)

        return ComboOutputDTO.from_entity(combo)

    def remover_item(self, combo_id: int, item_id: int) -> ComboOutputDTO:
        with self.uow:
            combo = self._obter_entidade(combo_id)
            if not combo.remover_item(item_id):
                raise EntityNotFoundError(
                    "Item não encontrado no combo", entity_type="ComboItem", entity_id=item_id
                )
            self.combo_repo.save(combo)

        return ComboOutputDTO.from_entity(combo)

    def adicionar_local_recebimento(
        self, combo_id: int, input_dto: ComboLocalRecebimentoInputDTO
    ) -> ComboOutputDTO:
        with self.uow:
            combo = self._obter_entidade(combo_id)
            combo.adicionar_local_recebimento(ComboLocalRecebimento.criar(
                ponto_distribuicao_id=input_dto.ponto_distribuicao_id,
                preco_adicional=input_dto.preco_adicional,
                percentual_desconto=input_dto.percentual_desconto,
                local_padrao=input_dto.local_padrao,
                observacoes=input_dto.observacoes,
            ))
            self.combo_repo.save(combo)

        return ComboOutputDTO.from_entity(combo)

    def adicionar_categoria_desconto(
        self, combo_id: int, input_dto: ComboCategoriaDescontoInputDTO
    ) -> ComboOutputDTO:
        with self.uow:
            combo = self._obter_entidade(combo_id)
            combo.adicionar_categoria_desconto(ComboCategoriaDesconto.criar(
                categoria_id=input_dto.categoria_id,
                tipo_desconto=TipoDesconto.from_string(input_dto.tipo_desconto),
                valor_desconto=input_dto.valor_desconto,
                hectare_minimo=input_dto.hectare_minimo,
                hectare_maximo=input_dto.hectare_maximo,
            ))
            self.combo_repo.save(combo)

        return ComboOutputDTO.from_entity(combo)


class MarcarCombosExpiradosService:
    """Marca como Expirado todo combo ativo cujo período terminou."""

    def __init__(self, combo_repo: ComboRepository, uow: UnitOfWork):
        self.combo_repo = combo_repo
        self.uow = uow

    def execute(self, agora: Optional[datetime] = None) -> int:
        agora = agora or datetime.now()

        with self.uow:
            combos = self.combo_repo.list_ativos_expirados(agora)
            for combo in combos:
                combo.expirar()
                self.combo_repo.save(combo)
                self.uow.publish_event(ComboExpiradoEvent(
                    aggregate_id=combo.id,
                    fornecedor_id=combo.fornecedor_id,
                    data_fim=combo.data_fim.isoformat(),
                ))

        if combos:
            logger.info(f"{len(combos)} combo(s) marcado(s) como expirado(s)")
        return len(combos)
