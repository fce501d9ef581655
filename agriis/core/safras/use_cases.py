"""
Use Cases do Domínio de Safras.

SafraService:
- criar (período único)
- atualizar
- obter_por_id / listar
- obter_atual (safra S1 vigente)
- remover
"""

from typing import List, Optional
import logging

from agriis.core.shared.exceptions import BusinessRuleViolationError, EntityNotFoundError
from agriis.core.shared.interfaces import UnitOfWork

from .dtos import AtualizarSafraInputDTO, CriarSafraInputDTO, SafraOutputDTO
from .entities import Safra
from .ports import SafraRepository

logger = logging.getLogger(__name__)


class SafraService:

    def __init__(self, safra_repo: SafraRepository, uow: UnitOfWork):
        self.safra_repo = safra_repo
        self.uow = uow

    def _obter_entidade(self, safra_id: int) -> Safra:
        safra = self.safra_repo.get_by_id(safra_id)
        if not safra:
            raise EntityNotFoundError(
                "Safra não encontrada", entity_type="Safra", entity_id=safra_id
            )
        return safra

    def _garantir_periodo_unico(self, safra: Safra) -> None:
        existente = self.safra_repo.get_by_periodo(
            safra.plantio_inicial, safra.plantio_final, safra.plantio_nome
        )
        if existente and existente.id != safra.id:
            raise BusinessRuleViolationError(
                "Já existe uma safra cadastrada para este período",
                rule="safra_periodo_unico",
            )

    def criar(self, input_dto: CriarSafraInputDTO) -> SafraOutputDTO:
        with self.uow:
            safra = Safra.criar(
                plantio_inicial=input_dto.plantio_inicial,
                plantio_final=input_dto.plantio_final,
                plantio_nome=input_dto.plantio_nome,
                descricao=input_dto.descricao,
            )
            self._garantir_periodo_unico(safra)
            self.safra_repo.save(safra)

        logger.info(f"Safra criada: {safra.id} ({safra.safra_formatada})")
        return SafraOutputDTO.from_entity(safra)

    def atualizar(self, safra_id: int, input_dto: AtualizarSafraInputDTO) -> SafraOutputDTO:
        with self.uow:
            safra = self._obter_entidade(safra_id)
            safra.atualizar(
                plantio_inicial=input_dto.plantio_inicial,
                plantio_final=input_dto.plantio_final,
                plantio_nome=input_dto.plantio_nome,
                descricao=input_dto.descricao,
            )
            self._garantir_periodo_unico(safra)
            self.safra_repo.save(safra)

        return SafraOutputDTO.from_entity(safra)

    def obter_por_id(self, safra_id: int) -> SafraOutputDTO:
        return SafraOutputDTO.from_entity(self._obter_entidade(safra_id))

    def listar(self) -> List[SafraOutputDTO]:
        return [SafraOutputDTO.from_entity(s) for s in self.safra_repo.list_all()]

    def obter_atual(self) -> Optional[SafraOutputDTO]:
        for safra in self.safra_repo.list_all():
            if safra.esta_ativa():
                return SafraOutputDTO.from_entity(safra)
        return None

    def remover(self, safra_id: int) -> None:
        with self.uow:
            self._obter_entidade(safra_id)
            self.safra_repo.delete(safra_id)
        logger.info(f"Safra removida: {safra_id}")
