"""
Use Cases do Domínio de Culturas.

CulturaService:
- obter_por_id / listar / listar_ativas
- criar (nome único)
- atualizar (nome único excluindo a própria cultura)
- remover
"""

from typing import List
import logging

from agriis.core.shared.exceptions import BusinessRuleViolationError, EntityNotFoundError
from agriis.core.shared.interfaces import UnitOfWork

from .dtos import AtualizarCulturaInputDTO, CriarCulturaInputDTO, CulturaOutputDTO
from .entities import Cultura
from .ports import CulturaRepository

logger = logging.getLogger(__name__)


class CulturaService:
    """
    Application service de culturas.

    Example:
        service = CulturaService(cultura_repo, uow)
        soja = service.criar(CriarCulturaInputDTO(nome="Soja"))
    """

    def __init__(self, cultura_repo: CulturaRepository, uow: UnitOfWork):
        self.cultura_repo = cultura_repo
        self.uow = uow

    def _obter_entidade(self, cultura_id: int) -> Cultura:
        cultura = self.cultura_repo.get_by_id(cultura_id)
        if not cultura:
            raise EntityNotFoundError(
                "Cultura não encontrada",
                entity_type="Cultura",
                entity_id=cultura_id,
            )
        return cultura

    def _garantir_nome_unico(self, nome: str, excluir_id: int = None) -> None:
        existente = self.cultura_repo.get_by_nome(nome)
        if existente and existente.id != excluir_id:
            raise BusinessRuleViolationError(
                "Já existe uma cultura com este nome",
                rule="cultura_nome_unico",
            )

    def obter_por_id(self, cultura_id: int) -> CulturaOutputDTO:
        return CulturaOutputDTO.from_entity(self._obter_entidade(cultura_id))

    def listar(self) -> List[CulturaOutputDTO]:
        return [CulturaOutputDTO.from_entity(c) for c in self.cultura_repo.list_all()]

    def listar_ativas(self) -> List[CulturaOutputDTO]:
        return [CulturaOutputDTO.from_entity(c) for c in self.cultura_repo.list_ativas()]

    def criar(self, input_dto: CriarCulturaInputDTO) -> CulturaOutputDTO:
        with self.uow:
            cultura = Cultura.criar(nome=input_dto.nome, descricao=input_dto.descricao)
            self._garantir_nome_unico(cultura.nome)
            self.cultura_repo.save(cultura)

        logger.info(f"Cultura criada: {cultura.id} ({cultura.nome})")
        return CulturaOutputDTO.from_entity(cultura)

    def atualizar(self, cultura_id: int, input_dto: AtualizarCulturaInputDTO) -> CulturaOutputDTO:
        with self.uow:
            cultura = self._obter_entidade(cultura_id)
            cultura.atualizar(nome=input_dto.nome, descricao=input_dto.descricao)
            self._garantir_nome_unico(cultura.nome, excluir_id=cultura.id)

            if input_dto.ativo and not cultura.ativo:
                cultura.ativar()
            elif not input_dto.ativo and cultura.ativo:
                cultura.desativar()

            self.cultura_repo.save(cultura)

        return CulturaOutputDTO.from_entity(cultura)

    def remover(self, cultura_id: int) -> None:
        with self.uow:
            self._obter_entidade(cultura_id)
            self.cultura_repo.delete(cultura_id)

        logger.info(f"Cultura removida: {cultura_id}")
