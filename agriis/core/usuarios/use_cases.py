"""
Use Cases do Domínio de Usuários.

UsuarioService:
- criar (email único, senha opcional com hash)
- atualizar / obter_por_id / obter_por_email / listar
- ativar / desativar
- adicionar_role / remover_role
"""

from typing import Optional
import logging

from agriis.core.shared.dtos import PaginacaoParams, PaginatedResultDTO
from agriis.core.shared.exceptions import BusinessRuleViolationError, EntityNotFoundError
from agriis.core.shared.interfaces import UnitOfWork

from .dtos import (
    AtualizarUsuarioInputDTO,
    CriarUsuarioInputDTO,
    ListarUsuariosQueryDTO,
    UsuarioOutputDTO,
)
from .entities import Roles, Usuario
from .ports import HasherSenha, UsuarioRepository

logger = logging.getLogger(__name__)


class UsuarioService:
    """
    Application service de usuários.

    Example:
        service = UsuarioService(usuario_repo, hasher, uow)
        usuario = service.criar(CriarUsuarioInputDTO(
            nome="Ana", email="ana@fazenda.com", senha="segredo1",
            roles=("COMPRADOR",),
        ))
    """

    def __init__(self, usuario_repo: UsuarioRepository, hasher: HasherSenha, uow: UnitOfWork):
        self.usuario_repo = usuario_repo
        self.hasher = hasher
        self.uow = uow

    def _obter_entidade(self, usuario_id: int) -> Usuario:
        usuario = self.usuario_repo.get_by_id(usuario_id)
        if not usuario:
            raise EntityNotFoundError(
                "Usuário não encontrado", entity_type="Usuario", entity_id=usuario_id
            )
        return usuario

    def _garantir_email_unico(self, email: str, excluir_id: Optional[int] = None) -> None:
        existente = self.usuario_repo.get_by_email(email)
        if existente and existente.id != excluir_id:
            raise BusinessRuleViolationError(
                "Já existe um usuário com este email", rule="usuario_email_unico"
            )

    def criar(self, input_dto: CriarUsuarioInputDTO) -> UsuarioOutputDTO:
        with self.uow:
            usuario = Usuario.criar(
                nome=input_dto.nome,
                email=input_dto.email,
                celular=input_dto.celular,
                cpf=input_dto.cpf,
            )
            self._garantir_email_unico(usuario.email)

            if input_dto.senha:
                usuario.definir_senha(self.hasher.gerar_hash(input_dto.senha))

            for role in input_dto.roles:
                usuario.adicionar_role(Roles.from_string(role))

            self.usuario_repo.save(usuario)

        logger.info(f"Usuário criado: {usuario.id} ({usuario.email})")
        return UsuarioOutputDTO.from_entity(usuario)

    def atualizar(self, usuario_id: int, input_dto: AtualizarUsuarioInputDTO) -> UsuarioOutputDTO:
        with self.uow:
            usuario = self._obter_entidade(usuario_id)
            usuario.atualizar_dados(
                nome=input_dto.nome, celular=input_dto.celular, cpf=input_dto.cpf
            )
            if input_dto.email and input_dto.email.strip().lower() != usuario.email:
                usuario.atualizar_email(input_dto.email)
                self._garantir_email_unico(usuario.email, excluir_id=usuario.id)
            if input_dto.logo_url is not None:
                usuario.atualizar_logo(input_dto.logo_url)
            self.usuario_repo.save(usuario)

        return UsuarioOutputDTO.from_entity(usuario)

    def obter_por_id(self, usuario_id: int) -> UsuarioOutputDTO:
        return UsuarioOutputDTO.from_entity(self._obter_entidade(usuario_id))

    def obter_por_email(self, email: str) -> Optional[UsuarioOutputDTO]:
        usuario = self.usuario_repo.get_by_email(email)
        return UsuarioOutputDTO.from_entity(usuario) if usuario else None

    def listar(self, query: ListarUsuariosQueryDTO) -> PaginatedResultDTO:
        params = PaginacaoParams.criar(query.pagina, query.por_pagina)
        resultado = self.usuario_repo.list_paginated(
            params, ativo=query.ativo, busca=query.busca
        )
        return resultado.map(UsuarioOutputDTO.from_entity)

    def ativar(self, usuario_id: int) -> UsuarioOutputDTO:
        with self.uow:
            usuario = self._obter_entidade(usuario_id)
            usuario.ativar()
            self.usuario_repo.save(usuario)
        return UsuarioOutputDTO.from_entity(usuario)

    def desativar(self, usuario_id: int) -> UsuarioOutputDTO:
        with self.uow:
            usuario = self._obter_entidade(usuario_id)
            usuario.desativar()
            self.usuario_repo.save(usuario)
        logger.info(f"Usuário desativado: {usuario_id}")
        return UsuarioOutputDTO.from_entity(usuario)

    def adicionar_role(self, usuario_id: int, role: str) -> UsuarioOutputDTO:
        with self.uow:
            usuario = self._obter_entidade(usuario_id)
            usuario.adicionar_role(Roles.from_string(role))
            self.usuario_repo.save(usuario)
        return UsuarioOutputDTO.from_entity(usuario)

    def remover_role(self, usuario_id: int, role: str) -> UsuarioOutputDTO:
        with self.uow:
            usuario = self._obter_entidade(usuario_id)
            usuario.remover_role(Roles.from_string(role))
            self.usuario_repo.save(usuario)
        return UsuarioOutputDTO.from_entity(usuario)
