"""
Use Cases do Domínio de Catálogos.

CatalogoService:
- criar (chave única) / atualizar / remover
- obter_por_id / listar / listar_vigentes
- adicionar_item / atualizar_item / remover_item
- consultar_preco (UF + data)
"""

from datetime import date
from decimal import Decimal
from typing import List, Optional
import logging

from agriis.core.fornecedores.entities import Moeda
from agriis.core.shared.dtos import PaginacaoParams, PaginatedResultDTO
from agriis.core.shared.exceptions import BusinessRuleViolationError, EntityNotFoundError
from agriis.core.shared.interfaces import UnitOfWork

from .dtos import (
    AtualizarCatalogoInputDTO,
    CatalogoItemInputDTO,
    CatalogoItemOutputDTO,
    CatalogoOutputDTO,
    CriarCatalogoInputDTO,
    ListarCatalogosQueryDTO,
)
from .entities import Catalogo, CatalogoItem
from .ports import CatalogoRepository

logger = logging.getLogger(__name__)


class CatalogoService:

    def __init__(self, catalogo_repo: CatalogoRepository, uow: UnitOfWork):
        self.catalogo_repo = catalogo_repo
        self.uow = uow

    def _obter_entidade(self, catalogo_id: int) -> Catalogo:
        catalogo = self.catalogo_repo.get_by_id(catalogo_id)
        if not catalogo:
            raise EntityNotFoundError(
                "Catálogo não encontrado", entity_type="Catalogo", entity_id=catalogo_id
            )
        return catalogo

    @staticmethod
    def _obter_item(catalogo: Catalogo, item_id: int) -> CatalogoItem:
        item = catalogo.obter_item_por_id(item_id)
        if not item:
            raise EntityNotFoundError(
                "Item não encontrado", entity_type="CatalogoItem", entity_id=item_id
            )
        return item

    def criar(self, input_dto: CriarCatalogoInputDTO) -> CatalogoOutputDTO:
        with self.uow:
            existente = self.catalogo_repo.get_by_chave(
                input_dto.safra_id,
                input_dto.ponto_distribuicao_id,
                input_dto.cultura_id,
                input_dto.categoria_id,
            )
            if existente:
                raise BusinessRuleViolationError(
                    "Já existe um catálogo para esta combinação de safra, "
                    "ponto de distribuição, cultura e categoria",
                    rule="catalogo_chave_unica",
                )

            catalogo = Catalogo.criar(
                safra_id=input_dto.safra_id,
                ponto_distribuicao_id=input_dto.ponto_distribuicao_id,
                cultura_id=input_dto.cultura_id,
                categoria_id=input_dto.categoria_id,
                moeda=Moeda.from_string(input_dto.moeda),
                data_inicio=input_dto.data_inicio,
                data_fim=input_dto.data_fim,
            )
            self.catalogo_repo.save(catalogo)

        logger.info(f"Catálogo criado: {catalogo.id} chave={catalogo.chave}")
        return CatalogoOutputDTO.from_entity(catalogo)

    def atualizar(
        self, catalogo_id: int, input_dto: AtualizarCatalogoInputDTO
    ) -> CatalogoOutputDTO:
        with self.uow:
            catalogo = self._obter_entidade(catalogo_id)
            catalogo.atualizar(input_dto.data_inicio, input_dto.data_fim, input_dto.ativo)
            self.catalogo_repo.save(catalogo)
        return CatalogoOutputDTO.from_entity(catalogo)

    def obter_por_id(self, catalogo_id: int) -> CatalogoOutputDTO:
        return CatalogoOutputDTO.from_entity(self._obter_entidade(catalogo_id))

    def listar(self, query: ListarCatalogosQueryDTO) -> PaginatedResultDTO:
        params = PaginacaoParams.criar(query.pagina, query.por_pagina)
        resultado = self.catalogo_repo.list_paginated(
            params,
            safra_id=query.safra_id,
            ponto_distribuicao_id=query.ponto_distribuicao_id,
            cultura_id=query.cultura_id,
            categoria_id=query.categoria_id,
            moeda=Moeda.from_string(query.moeda) if query.moeda else None,
            ativo=query.ativo,
        )
        return resultado.map(CatalogoOutputDTO.from_entity)

    def listar_vigentes(self, data: Optional[date] = None) -> List[CatalogoOutputDTO]:
        return [
            CatalogoOutputDTO.from_entity(c)
            for c in self.catalogo_repo.list_vigentes(data or date.today())
        ]

    def remover(self, catalogo_id: int) -> None:
        with self.uow:
            self._obter_entidade(catalogo_id)
            self.catalogo_repo.delete(catalogo_id)
        logger.info(f"Catálogo removido: {catalogo_id}")

    def adicionar_item(
        self, catalogo_id: int, input_dto: CatalogoItemInputDTO
    ) -> CatalogoItemOutputDTO:
        with self.uow:
            catalogo = self._obter_entidade(catalogo_id)
            item = catalogo.adicionar_item(
                CatalogoItem.criar(
                    produto_id=input_dto.produto_id,
                    estrutura_precos=input_dto.estrutura_precos,
                    preco_base=input_dto.preco_base,
                )
            )
            self.catalogo_repo.save(catalogo)
        return CatalogoItemOutputDTO.from_entity(item)

    def atualizar_item(
        self, catalogo_id: int, item_id: int, input_dto: CatalogoItemInputDTO
    ) -> CatalogoItemOutputDTO:
        with self.uow:
            catalogo = self._obter_entidade(catalogo_id)
            item = self._obter_item(catalogo, item_id)
            item.atualizar_precos(input_dto.estrutura_precos, input_dto.preco_base)
            if input_dto.ativo:
                item.ativar()
            else:
                item.desativar()
            self.catalogo_repo.save(catalogo)
        return CatalogoItemOutputDTO.from_entity(item)

    def remover_item(self, catalogo_id: int, item_id: int) -> None:
        with self.uow:
            catalogo = self._obter_entidade(catalogo_id)
            self._obter_item(catalogo, item_id)
            catalogo.remover_item(item_id)
            self.catalogo_repo.save(catalogo)

    def consultar_preco(
        self,
        catalogo_id: int,
        produto_id: int,
        uf: Optional[str],
        data: Optional[date] = None,
    ) -> Optional[Decimal]:
        """
        Preço do produto no catálogo para a UF/data (None se sem preço vigente).

        Raises:
            EntityNotFoundError: Catálogo inexistente ou produto fora do catálogo
        """
        catalogo = self._obter_entidade(catalogo_id)
        item = catalogo.obter_item(produto_id)
        if not item:
            raise EntityNotFoundError(
                "Item não encontrado no catálogo",
                entity_type="CatalogoItem",
                entity_id=produto_id,
            )
        return item.obter_preco(uf, data or date.today())
