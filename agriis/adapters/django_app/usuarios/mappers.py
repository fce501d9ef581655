"""
Mapper Usuario <-> UsuarioModel.
"""

from agriis.core.usuarios.entities import Roles, Usuario

from .models import UsuarioModel


class UsuarioMapper:

    @staticmethod
    def to_model_data(entity: Usuario) -> dict:
        return {
            'nome': entity.nome,
            'email': entity.email,
            'celular': entity.celular,
            'cpf': entity.cpf,
            'senha_hash': entity.senha_hash,
            'ativo': entity.ativo,
            'ultimo_login': entity.ultimo_login,
            'logo_url': entity.logo_url,
            'roles': entity.obter_roles(),
            'criado_em': entity.criado_em,
            'atualizado_em': entity.atualizado_em,
        }

    @staticmethod
    def to_entity(model: UsuarioModel) -> Usuario:
        return Usuario(
            id=model.id,
            nome=model.nome,
            email=model.email,
            celular=model.celular,
            cpf=model.cpf,
            senha_hash=model.senha_hash,
            ativo=model.ativo,
            ultimo_login=model.ultimo_login,
            logo_url=model.logo_url,
            roles=[Roles(r) for r in (model.roles or [])],
            criado_em=model.criado_em,
            atualizado_em=model.atualizado_em,
        )
