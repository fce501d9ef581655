"""
Use Cases do Domínio de Fornecedores.

FornecedorService:
- criar (CNPJ único)
- atualizar / obter_por_id / listar
- ativar / desativar
- definir_pedido_minimo
- vincular_usuario / listar_usuarios
"""

from typing import List
import logging

from agriis.core.shared.dtos import PaginacaoParams, PaginatedResultDTO
from agriis.core.shared.entities import to_decimal
from agriis.core.shared.exceptions import BusinessRuleViolationError, EntityNotFoundError
from agriis.core.shared.interfaces import UnitOfWork
from agriis.core.shared.value_objects import Cnpj
from agriis.core.usuarios.entities import Roles
from agriis.core.usuarios.ports import UsuarioRepository

from .dtos import (
    AtualizarFornecedorInputDTO,
    CriarFornecedorInputDTO,
    FornecedorOutputDTO,
    ListarFornecedoresQueryDTO,
    UsuarioFornecedorOutputDTO,
    VincularUsuarioInputDTO,
)
from .entities import Fornecedor, Moeda, UsuarioFornecedor
from .ports import FornecedorRepository, UsuarioFornecedorRepository

logger = logging.getLogger(__name__)


class FornecedorService:
    """
    Application service de fornecedores.

    Example:
        service = FornecedorService(fornecedor_repo, usuario_fornecedor_repo, usuario_repo, uow)
        fornecedor = service.criar(CriarFornecedorInputDTO(
            nome="Agro Insumos", cnpj="11.222.333/0001-81",
        ))
    """

    def __init__(
        self,
        fornecedor_repo: FornecedorRepository,
        usuario_fornecedor_repo: UsuarioFornecedorRepository,
        usuario_repo: UsuarioRepository,
        uow: UnitOfWork,
    ):
        self.fornecedor_repo = fornecedor_repo
        self.usuario_fornecedor_repo = usuario_fornecedor_repo
        self.usuario_repo = usuario_repo
        self.uow = uow

    def _obter_entidade(self, fornecedor_id: int) -> Fornecedor:
        fornecedor = self.fornecedor_repo.get_by_id(fornecedor_id)
        if not fornecedor:
            raise EntityNotFoundError(
                "Fornecedor não encontrado",
                entity_type="Fornecedor",
                entity_id=fornecedor_id,
            )
        return fornecedor

    def criar(self, input_dto: CriarFornecedorInputDTO) -> FornecedorOutputDTO:
        with self.uow:
            cnpj = Cnpj.criar(input_dto.cnpj).valor
            if self.fornecedor_repo.get_by_cnpj(cnpj):
                raise BusinessRuleViolationError(
                    "Já existe um fornecedor com este CNPJ",
                    rule="fornecedor_cnpj_unico",
                )

            fornecedor = Fornecedor.criar(
                nome=input_dto.nome,
                cnpj=cnpj,
                inscricao_estadual=input_dto.inscricao_estadual,
                endereco=input_dto.endereco,
                telefone=input_dto.telefone,
                email=input_dto.email,
                moeda_padrao=Moeda.from_string(input_dto.moeda_padrao),
            )
            if input_dto.pedido_minimo is not None:
                fornecedor.definir_pedido_minimo(input_dto.pedido_minimo)

            self.fornecedor_repo.save(fornecedor)

        logger.info(f"Fornecedor criado: {fornecedor.id} ({fornecedor.cnpj})")
        return FornecedorOutputDTO.from_entity(fornecedor)

    def atualizar(
        self, fornecedor_id: int, input_dto: AtualizarFornecedorInputDTO
    ) -> FornecedorOutputDTO:
        with self.uow:
            fornecedor = self._obter_entidade(fornecedor_id)
            fornecedor.atualizar_dados(
                nome=input_dto.nome,
                inscricao_estadual=input_dto.inscricao_estadual,
                endereco=input_dto.endereco,
                telefone=input_dto.telefone,
                email=input_dto.email,
            )
            if input_dto.moeda_padrao:
                fornecedor.alterar_moeda_padrao(Moeda.from_string(input_dto.moeda_padrao))
            if input_dto.logo_url is not None:
                fornecedor.definir_logo(input_dto.logo_url)
            self.fornecedor_repo.save(fornecedor)

        return FornecedorOutputDTO.from_entity(fornecedor)

    def obter_por_id(self, fornecedor_id: int) -> FornecedorOutputDTO:
        return FornecedorOutputDTO.from_entity(self._obter_entidade(fornecedor_id))

    def listar(self, query: ListarFornecedoresQueryDTO) -> PaginatedResultDTO:
        params = PaginacaoParams.criar(query.pagina, query.por_pagina)
        resultado = self.fornecedor_repo.list_paginated(
            params, ativo=query.ativo, busca=query.busca
        )
        return resultado.map(FornecedorOutputDTO.from_entity)

    def ativar(self, fornecedor_id: int) -> FornecedorOutputDTO:
        with self.uow:
            fornecedor = self._obter_entidade(fornecedor_id)
            fornecedor.ativar()
            self.fornecedor_repo.save(fornecedor)
        return FornecedorOutputDTO.from_entity(fornecedor)

    def desativar(self, fornecedor_id: int) -> FornecedorOutputDTO:
        with self.uow:
            fornecedor = self._obter_entidade(fornecedor_id)
            fornecedor.desativar()
            self.fornecedor_repo.save(fornecedor)
        logger.info(f"Fornecedor desativado: {fornecedor_id}")
        return FornecedorOutputDTO.from_entity(fornecedor)

    def definir_pedido_minimo(self, fornecedor_id: int, valor) -> FornecedorOutputDTO:
        with self.uow:
            fornecedor = self._obter_entidade(fornecedor_id)
            fornecedor.definir_pedido_minimo(
                None if valor is None else to_decimal(valor, "pedido_minimo")
            )
            self.fornecedor_repo.save(fornecedor)
        return FornecedorOutputDTO.from_entity(fornecedor)

    def vincular_usuario(
        self, fornecedor_id: int, input_dto: VincularUsuarioInputDTO
    ) -> UsuarioFornecedorOutputDTO:
        """
        Vincula usuário ao fornecedor e garante a role correspondente
        no cadastro do usuário.

        Raises:
            EntityNotFoundError: Fornecedor ou usuário inexistente
            BusinessRuleViolationError: Vínculo já existente
        """
        with self.uow:
            self._obter_entidade(fornecedor_id)
            usuario = self.usuario_repo.get_by_id(input_dto.usuario_id)
            if not usuario:
                raise EntityNotFoundError(
                    "Usuário não encontrado",
                    entity_type="Usuario",
                    entity_id=input_dto.usuario_id,
                )

            if self.usuario_fornecedor_repo.get_by_usuario_fornecedor(usuario.id, fornecedor_id):
                raise BusinessRuleViolationError(
                    "Usuário já vinculado a este fornecedor",
                    rule="usuario_fornecedor_unico",
                )

            role = Roles.from_string(input_dto.role)
            vinculo = UsuarioFornecedor.criar(usuario.id, fornecedor_id, role)
            self.usuario_fornecedor_repo.save(vinculo)

            if not usuario.possui_role(role):
                usuario.adicionar_role(role)
                self.usuario_repo.save(usuario)

        logger.info(f"Usuário {usuario.id} vinculado ao fornecedor {fornecedor_id}")
        return UsuarioFornecedorOutputDTO.from_entity(vinculo)

    def listar_usuarios(self, fornecedor_id: int) -> List[UsuarioFornecedorOutputDTO]:
        self._obter_entidade(fornecedor_id)
        return [
            UsuarioFornecedorOutputDTO.from_entity(v)
            for v in self.usuario_fornecedor_repo.list_por_fornecedor(fornecedor_id)
        ]
