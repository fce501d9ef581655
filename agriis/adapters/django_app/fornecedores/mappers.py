"""
Mappers Fornecedor/UsuarioFornecedor <-> Models.
"""

from agriis.core.fornecedores.entities import Fornecedor, Moeda, UsuarioFornecedor
from agriis.core.usuarios.entities import Roles

from .models import FornecedorModel, UsuarioFornecedorModel


class FornecedorMapper:

    @staticmethod
    def to_model_data(entity: Fornecedor) -> dict:
        return {
            'nome': entity.nome,
            'cnpj': entity.cnpj,
            'inscricao_estadual': entity.inscricao_estadual,
            'endereco': entity.endereco,
            'telefone': entity.telefone,
            'email': entity.email,
            'logo_url': entity.logo_url,
            'moeda_padrao': entity.moeda_padrao.value,
            'pedido_minimo': entity.pedido_minimo,
            'token_lincros': entity.token_lincros,
            'ativo': entity.ativo,
            'dados_adicionais': entity.dados_adicionais,
            'criado_em': entity.criado_em,
            'atualizado_em': entity.atualizado_em,
        }

    @staticmethod
    def to_entity(model: FornecedorModel) -> Fornecedor:
        return Fornecedor(
            id=model.id,
            nome=model.nome,
            cnpj=model.cnpj,
            inscricao_estadual=model.inscricao_estadual,
            endereco=model.endereco,
            telefone=model.telefone,
            email=model.email,
            logo_url=model.logo_url,
            moeda_padrao=Moeda(model.moeda_padrao),
            pedido_minimo=model.pedido_minimo,
            token_lincros=model.token_lincros,
            ativo=model.ativo,
            dados_adicionais=model.dados_adicionais or {},
            criado_em=model.criado_em,
            atualizado_em=model.atualizado_em,
        )


class UsuarioFornecedorMapper:

    @staticmethod
    def to_model_data(entity: UsuarioFornecedor) -> dict:
        return {
            'usuario_id': entity.usuario_id,
            'fornecedor_id': entity.fornecedor_id,
            'role': entity.role.value,
            'ativo': entity.ativo,
            'criado_em': entity.criado_em,
            'atualizado_em': entity.atualizado_em,
        }

    @staticmethod
    def to_entity(model: UsuarioFornecedorModel) -> UsuarioFornecedor:
        return UsuarioFornecedor(
            id=model.id,
            usuario_id=model.usuario_id,
            fornecedor_id=model.fornecedor_id,
            role=Roles(model.role),
            ativo=model.ativo,
            criado_em=model.criado_em,
            atualizado_em=model.atualizado_em,
        )
