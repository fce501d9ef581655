"""
Use Cases do Domínio de Pagamentos.

FormaPagamentoService:
- criar / atualizar / obter_por_id / listar_ativas / remover

CulturaFormaPagamentoService:
- criar (associação única, forma de pagamento ativa)
- listar_por_fornecedor / listar_formas_por_fornecedor_cultura
- existe_associacao_ativa / remover
"""

from typing import List
import logging

from agriis.core.shared.exceptions import BusinessRuleViolationError, EntityNotFoundError
from agriis.core.shared.interfaces import UnitOfWork

from .dtos import (
    AtualizarFormaPagamentoInputDTO,
    CriarCulturaFormaPagamentoInputDTO,
    CriarFormaPagamentoInputDTO,
    CulturaFormaPagamentoOutputDTO,
    FormaPagamentoOutputDTO,
)
from .entities import CulturaFormaPagamento, FormaPagamento
from .ports import CulturaFormaPagamentoRepository, FormaPagamentoRepository

logger = logging.getLogger(__name__)


class FormaPagamentoService:

    def __init__(self, forma_pagamento_repo: FormaPagamentoRepository, uow: UnitOfWork):
        self.forma_pagamento_repo = forma_pagamento_repo
        self.uow = uow

    def _obter_entidade(self, forma_id: int) -> FormaPagamento:
        forma = self.forma_pagamento_repo.get_by_id(forma_id)
        if not forma:
            raise EntityNotFoundError(
                "Forma de pagamento não encontrada",
                entity_type="FormaPagamento",
                entity_id=forma_id,
            )
        return forma

    def obter_por_id(self, forma_id: int) -> FormaPagamentoOutputDTO:
        return FormaPagamentoOutputDTO.from_entity(self._obter_entidade(forma_id))

    def listar_ativas(self) -> List[FormaPagamentoOutputDTO]:
        return [
            FormaPagamentoOutputDTO.from_entity(f)
            for f in self.forma_pagamento_repo.list_ativas()
        ]

    def criar(self, input_dto: CriarFormaPagamentoInputDTO) -> FormaPagamentoOutputDTO:
        with self.uow:
            forma = FormaPagamento.criar(input_dto.descricao)
            self.forma_pagamento_repo.save(forma)

        logger.info(f"Forma de pagamento criada: {forma.id} ({forma.descricao})")
        return FormaPagamentoOutputDTO.from_entity(forma)

    def atualizar(
        self, forma_id: int, input_dto: AtualizarFormaPagamentoInputDTO
    ) -> FormaPagamentoOutputDTO:
        with self.uow:
            forma = self._obter_entidade(forma_id)
            forma.atualizar_descricao(input_dto.descricao)
            if input_dto.ativo:
                forma.ativar()
            else:
                forma.desativar()
            self.forma_pagamento_repo.save(forma)

        return FormaPagamentoOutputDTO.from_entity(forma)

    def remover(self, forma_id: int) -> None:
        with self.uow:
            self._obter_entidade(forma_id)
            self.forma_pagamento_repo.delete(forma_id)

        logger.info(f"Forma de pagamento removida: {forma_id}")


class CulturaFormaPagamentoService:
    """
    Associações de formas de pagamento por fornecedor e cultura.

    Example:
        service.criar(CriarCulturaFormaPagamentoInputDTO(
            fornecedor_id=1, cultura_id=2, forma_pagamento_id=3,
        ))
        formas = service.listar_formas_por_fornecedor_cultura(1, 2)
    """

    def __init__(
        self,
        cultura_forma_pagamento_repo: CulturaFormaPagamentoRepository,
        forma_pagamento_repo: FormaPagamentoRepository,
        uow: UnitOfWork,
    ):
        self.cultura_forma_pagamento_repo = cultura_forma_pagamento_repo
        self.forma_pagamento_repo = forma_pagamento_repo
        self.uow = uow

    def criar(
        self, input_dto: CriarCulturaFormaPagamentoInputDTO
    ) -> CulturaFormaPagamentoOutputDTO:
        with self.uow:
            existente = self.cultura_forma_pagamento_repo.get_by_chave(
                input_dto.fornecedor_id, input_dto.cultura_id, input_dto.forma_pagamento_id
            )
            if existente:
                raise BusinessRuleViolationError(
                    "Associação já existe para este fornecedor, cultura e forma de pagamento",
                    rule="cultura_forma_pagamento_unica",
                )

            if not self.forma_pagamento_repo.existe_ativa(input_dto.forma_pagamento_id):
                raise BusinessRuleViolationError(
                    "Forma de pagamento não encontrada ou inativa",
                    rule="forma_pagamento_ativa",
                )

            assoc = CulturaFormaPagamento.criar(
                fornecedor_id=input_dto.fornecedor_id,
                cultura_id=input_dto.cultura_id,
                forma_pagamento_id=input_dto.forma_pagamento_id,
            )
            assoc.forma_pagamento = self.forma_pagamento_repo.get_by_id(
                input_dto.forma_pagamento_id
            )
            self.cultura_forma_pagamento_repo.save(assoc)

        logger.info(
            f"Forma de pagamento {assoc.forma_pagamento_id} associada ao fornecedor "
            f"{assoc.fornecedor_id} / cultura {assoc.cultura_id}"
        )
        return CulturaFormaPagamentoOutputDTO.from_entity(assoc)

    def listar_por_fornecedor(self, fornecedor_id: int) -> List[CulturaFormaPagamentoOutputDTO]:
        return [
            CulturaFormaPagamentoOutputDTO.from_entity(a)
            for a in self.cultura_forma_pagamento_repo.list_por_fornecedor(fornecedor_id)
        ]

    def listar_formas_por_fornecedor_cultura(
        self, fornecedor_id: int, cultura_id: int
    ) -> List[FormaPagamentoOutputDTO]:
        formas = self.cultura_forma_pagamento_repo.list_formas_por_fornecedor_cultura(
            fornecedor_id, cultura_id
        )
        return [FormaPagamentoOutputDTO.from_entity(f) for f in formas]

    def existe_associacao_ativa(
        self, fornecedor_id: int, cultura_id: int, forma_pagamento_id: int
    ) -> bool:
        assoc = self.cultura_forma_pagamento_repo.get_by_chave(
            fornecedor_id, cultura_id, forma_pagamento_id
        )
        return bool(assoc and assoc.ativo)

    def remover(self, assoc_id: int) -> None:
        with self.uow:
            if not self.cultura_forma_pagamento_repo.get_by_id(assoc_id):
                raise EntityNotFoundError(
                    "Associação não encontrada",
                    entity_type="CulturaFormaPagamento",
                    entity_id=assoc_id,
                )
            self.cultura_forma_pagamento_repo.delete(assoc_id)
