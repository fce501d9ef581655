"""
Use Cases do Domínio de Produtores.

ProdutorService:
- criar (documento único) / atualizar / remover
- obter_por_id / obter_por_documento / listar
- autorizar / negar (registra usuário responsável)
- adicionar_cultura / remover_cultura
"""

from typing import Optional
import logging
import re

from agriis.core.culturas.ports import CulturaRepository
from agriis.core.shared.dtos import PaginacaoParams, PaginatedResultDTO
from agriis.core.shared.exceptions import (
    BusinessRuleViolationError,
    EntityNotFoundError,
    ValidationError,
)
from agriis.core.shared.interfaces import UnitOfWork
from agriis.core.shared.value_objects import AreaPlantio

from .dtos import (
    AtualizarProdutorInputDTO,
    CriarProdutorInputDTO,
    ListarProdutoresQueryDTO,
    ProdutorOutputDTO,
)
from .entities import Produtor, StatusProdutor, TipoAtividadeAgropecuaria
from .events import ProdutorCriadoEvent, ProdutorStatusAlteradoEvent
from .ports import ProdutorRepository

logger = logging.getLogger(__name__)


def _tipo_atividade(valor: Optional[str]) -> Optional[TipoAtividadeAgropecuaria]:
    return TipoAtividadeAgropecuaria.from_string(valor) if valor else None


class ProdutorService:
    """
    Application service de produtores.

    Example:
        service = ProdutorService(produtor_repo, cultura_repo, uow)
        produtor = service.criar(CriarProdutorInputDTO(nome="João", cpf="52998224725"))
        service.autorizar(produtor.id, usuario_id=1)
    """

    def __init__(
        self,
        produtor_repo: ProdutorRepository,
        cultura_repo: CulturaRepository,
        uow: UnitOfWork,
    ):
        self.produtor_repo = produtor_repo
        self.cultura_repo = cultura_repo
        self.uow = uow

    def _obter_entidade(self, produtor_id: int) -> Produtor:
        produtor = self.produtor_repo.get_by_id(produtor_id)
        if not produtor:
            raise EntityNotFoundError(
                "Produtor não encontrado", entity_type="Produtor", entity_id=produtor_id
            )
        return produtor

    def _validar_cultura(self, cultura_id: int) -> None:
        if not self.cultura_repo.get_by_id(cultura_id):
            raise EntityNotFoundError(
                "Cultura não encontrada", entity_type="Cultura", entity_id=cultura_id
            )

    def criar(self, input_dto: CriarProdutorInputDTO) -> ProdutorOutputDTO:
        with self.uow:
            produtor = Produtor.criar(
                nome=input_dto.nome,
                cpf=input_dto.cpf,
                cnpj=input_dto.cnpj,
                inscricao_estadual=input_dto.inscricao_estadual,
                tipo_atividade=_tipo_atividade(input_dto.tipo_atividade),
                area_plantio=AreaPlantio.criar(input_dto.area_plantio),
            )

            for documento in (produtor.cpf, produtor.cnpj):
                if documento and self.produtor_repo.get_by_documento(documento):
                    raise BusinessRuleViolationError(
                        "Já existe um produtor com este documento",
                        rule="produtor_documento_unico",
                    )

            for cultura_id in input_dto.culturas:
                self._validar_cultura(cultura_id)
                produtor.adicionar_cultura(cultura_id)

            self.produtor_repo.save(produtor)

            self.uow.publish_event(ProdutorCriadoEvent(
                aggregate_id=produtor.id,
                nome=produtor.nome,
                documento=produtor.documento_principal,
            ))

        logger.info(f"Produtor criado: {produtor.id} ({produtor.documento_principal})")
        return ProdutorOutputDTO.from_entity(produtor)

    def atualizar(
        self, produtor_id: int, input_dto: AtualizarProdutorInputDTO
    ) -> ProdutorOutputDTO:
        with self.uow:
            produtor = self._obter_entidade(produtor_id)
            produtor.atualizar_dados(
                nome=input_dto.nome,
                inscricao_estadual=input_dto.inscricao_estadual,
                tipo_atividade=_tipo_atividade(input_dto.tipo_atividade),
            )
            if input_dto.area_plantio is not None:
                produtor.atualizar_area_plantio(AreaPlantio.criar(input_dto.area_plantio))
            self.produtor_repo.save(produtor)

        return ProdutorOutputDTO.from_entity(produtor)

    def obter_por_id(self, produtor_id: int) -> ProdutorOutputDTO:
        return ProdutorOutputDTO.from_entity(self._obter_entidade(produtor_id))

    def obter_por_documento(self, documento: str) -> Optional[ProdutorOutputDTO]:
        digitos = re.sub(r"[^\d]", "", documento or "")
        if not digitos:
            raise ValidationError("Documento é obrigatório", field="documento")
        produtor = self.produtor_repo.get_by_documento(digitos)
        return ProdutorOutputDTO.from_entity(produtor) if produtor else None

    def listar(self, query: ListarProdutoresQueryDTO) -> PaginatedResultDTO:
        params = PaginacaoParams.criar(query.pagina, query.por_pagina)
        status = StatusProdutor.from_string(query.status) if query.status else None
        resultado = self.produtor_repo.list_paginated(params, status=status, busca=query.busca)
        return resultado.map(ProdutorOutputDTO.from_entity)

    def _alterar_status(
        self, produtor_id: int, novo_status: StatusProdutor, usuario_id: int
    ) -> ProdutorOutputDTO:
        with self.uow:
            produtor = self._obter_entidade(produtor_id)
            anterior = produtor.atualizar_status(novo_status, usuario_autorizacao_id=usuario_id)
            self.produtor_repo.save(produtor)

            self.uow.publish_event(ProdutorStatusAlteradoEvent(
                aggregate_id=produtor.id,
                status_anterior=anterior.value,
                status_novo=novo_status.value,
                usuario_id=usuario_id,
            ))

        logger.info(
            f"Produtor {produtor_id}: {anterior.value} -> {novo_status.value} "
            f"(usuario={usuario_id})"
        )
        return ProdutorOutputDTO.from_entity(produtor)

    def autorizar(self, produtor_id: int, usuario_id: int) -> ProdutorOutputDTO:
        return self._alterar_status(
            produtor_id, StatusProdutor.AUTORIZADO_MANUALMENTE, usuario_id
        )

    def negar(self, produtor_id: int, usuario_id: int) -> ProdutorOutputDTO:
        return self._alterar_status(produtor_id, StatusProdutor.NEGADO, usuario_id)

    def adicionar_cultura(self, produtor_id: int, cultura_id: int) -> ProdutorOutputDTO:
        with self.uow:
            produtor = self._obter_entidade(produtor_id)
            self._validar_cultura(cultura_id)
            produtor.adicionar_cultura(cultura_id)
            self.produtor_repo.save(produtor)
        return ProdutorOutputDTO.from_entity(produtor)

    def remover_cultura(self, produtor_id: int, cultura_id: int) -> ProdutorOutputDTO:
        with self.uow:
            produtor = self._obter_entidade(produtor_id)
            produtor.remover_cultura(cultura_id)
            self.produtor_repo.save(produtor)
        return ProdutorOutputDTO.from_entity(produtor)

    def remover(self, produtor_id: int) -> None:
        with self.uow:
            self._obter_entidade(produtor_id)
            self.produtor_repo.delete(produtor_id)
        logger.info(f"Produtor removido: {produtor_id}")
