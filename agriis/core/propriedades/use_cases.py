"""
Use Cases do Domínio de Propriedades.

PropriedadeService:
- criar (produtor deve existir) / atualizar / remover
- obter_por_id / listar_por_produtor / calcular_area_total_produtor
- adicionar_talhao
- adicionar_cultura (cultura deve existir) / remover_cultura
"""

from decimal import Decimal
from typing import List
import logging

from agriis.core.culturas.ports import CulturaRepository
from agriis.core.produtores.ports import ProdutorRepository
from agriis.core.shared.exceptions import EntityNotFoundError
from agriis.core.shared.interfaces import UnitOfWork
from agriis.core.shared.value_objects import AreaPlantio

from .dtos import (
    AdicionarCulturaPropriedadeInputDTO,
    AdicionarTalhaoInputDTO,
    AtualizarPropriedadeInputDTO,
    CriarPropriedadeInputDTO,
    PropriedadeOutputDTO,
)
from .entities import Propriedade, Talhao
from .ports import PropriedadeRepository

logger = logging.getLogger(__name__)


class PropriedadeService:

    def __init__(
        self,
        propriedade_repo: PropriedadeRepository,
        produtor_repo: ProdutorRepository,
        cultura_repo: CulturaRepository,
        uow: UnitOfWork,
    ):
        self.propriedade_repo = propriedade_repo
        self.produtor_repo = produtor_repo
        self.cultura_repo = cultura_repo
        self.uow = uow

    def _obter_entidade(self, propriedade_id: int) -> Propriedade:
        propriedade = self.propriedade_repo.get_by_id(propriedade_id)
        if not propriedade:
            raise EntityNotFoundError(
                "Propriedade não encontrada",
                entity_type="Propriedade",
                entity_id=propriedade_id,
            )
        return propriedade

    def criar(self, input_dto: CriarPropriedadeInputDTO) -> PropriedadeOutputDTO:
        with self.uow:
            if not self.produtor_repo.get_by_id(input_dto.produtor_id):
                raise EntityNotFoundError(
                    "Produtor não encontrado",
                    entity_type="Produtor",
                    entity_id=input_dto.produtor_id,
                )

            propriedade = Propriedade.criar(
                nome=input_dto.nome,
                area_total=AreaPlantio.criar(input_dto.area_total),
                produtor_id=input_dto.produtor_id,
                nirf=input_dto.nirf,
                inscricao_estadual=input_dto.inscricao_estadual,
                endereco_id=input_dto.endereco_id,
            )
            self.propriedade_repo.save(propriedade)

        logger.info(
            f"Propriedade criada: {propriedade.id} (produtor={propriedade.produtor_id})"
        )
        return PropriedadeOutputDTO.from_entity(propriedade)

    def atualizar(
        self, propriedade_id: int, input_dto: AtualizarPropriedadeInputDTO
    ) -> PropriedadeOutputDTO:
        with self.uow:
            propriedade = self._obter_entidade(propriedade_id)
            propriedade.atualizar_dados(
                nome=input_dto.nome,
                area_total=AreaPlantio.criar(input_dto.area_total),
                nirf=input_dto.nirf,
                inscricao_estadual=input_dto.inscricao_estadual,
                endereco_id=input_dto.endereco_id,
            )
            self.propriedade_repo.save(propriedade)
        return PropriedadeOutputDTO.from_entity(propriedade)

    def obter_por_id(self, propriedade_id: int) -> PropriedadeOutputDTO:
        return PropriedadeOutputDTO.from_entity(self._obter_entidade(propriedade_id))

    def listar_por_produtor(self, produtor_id: int) -> List[PropriedadeOutputDTO]:
        return [
            PropriedadeOutputDTO.from_entity(p)
            for p in self.propriedade_repo.list_por_produtor(produtor_id)
        ]

    def calcular_area_total_produtor(self, produtor_id: int) -> Decimal:
        return sum(
            (p.area_total.valor for p in self.propriedade_repo.list_por_produtor(produtor_id)),
            Decimal("0"),
        )

    def adicionar_talhao(
        self, propriedade_id: int, input_dto: AdicionarTalhaoInputDTO
    ) -> PropriedadeOutputDTO:
        with self.uow:
            propriedade = self._obter_entidade(propriedade_id)
            propriedade.adicionar_talhao(
                Talhao.criar(
                    nome=input_dto.nome,
                    area=AreaPlantio.criar(input_dto.area),
                    descricao=input_dto.descricao,
                )
            )
            self.propriedade_repo.save(propriedade)
        return PropriedadeOutputDTO.from_entity(propriedade)

    def adicionar_cultura(
        self, propriedade_id: int, input_dto: AdicionarCulturaPropriedadeInputDTO
    ) -> PropriedadeOutputDTO:
        with self.uow:
            propriedade = self._obter_entidade(propriedade_id)
            if not self.cultura_repo.get_by_id(input_dto.cultura_id):
                raise EntityNotFoundError(
                    "Cultura não encontrada",
                    entity_type="Cultura",
                    entity_id=input_dto.cultura_id,
                )
            propriedade.adicionar_cultura(
                cultura_id=input_dto.cultura_id,
                area=AreaPlantio.criar(input_dto.area),
                safra_id=input_dto.safra_id,
            )
            self.propriedade_repo.save(propriedade)
        return PropriedadeOutputDTO.from_entity(propriedade)

    def remover_cultura(self, propriedade_id: int, cultura_id: int) -> PropriedadeOutputDTO:
        with self.uow:
            propriedade = self._obter_entidade(propriedade_id)
            if not propriedade.remover_cultura(cultura_id):
                raise EntityNotFoundError(
                    "Cultura não associada à propriedade",
                    entity_type="PropriedadeCultura",
                    entity_id=cultura_id,
                )
            self.propriedade_repo.save(propriedade)
        return PropriedadeOutputDTO.from_entity(propriedade)

    def remover(self, propriedade_id: int) -> None:
        with self.uow:
            self._obter_entidade(propriedade_id)
            self.propriedade_repo.delete(propriedade_id)
        logger.info(f"Propriedade removida: {propriedade_id}")
