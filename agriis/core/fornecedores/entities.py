"""
Entidades do Domínio de Fornecedores.

Entidades:
- Fornecedor: empresa que vende insumos (identificada por CNPJ)
- UsuarioFornecedor: vínculo de um usuário com o fornecedor
- Moeda: moeda de negociação

Regras:
- CNPJ obrigatório e válido (único no sistema)
- Pedido mínimo não negativo
- Vínculo de usuário apenas com roles de fornecedor web
"""

from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum
from typing import Any, Dict, Optional

from agriis.core.shared.entities import EntidadeBase, to_decimal
from agriis.core.shared.exceptions import ValidationError
from agriis.core.shared.value_objects import Cnpj
from agriis.core.usuarios.entities import Roles


class Moeda(Enum):
    REAL = "Real"
    DOLAR = "Dolar"

    @classmethod
    def from_string(cls, value: str) -> "Moeda":
        try:
            return cls[value.upper()]
        except KeyError:
            pass

        for moeda in cls:
            if moeda.value.lower() == value.lower():
                return moeda

        raise ValidationError(f"Moeda inválida: {value}", field="moeda")


@dataclass(eq=False)
class Fornecedor(EntidadeBase):
    """
    Entidade de Domínio: Fornecedor.

    Example:
        fornecedor = Fornecedor.criar(nome="Agro Insumos", cnpj="11.222.333/0001-81")
        fornecedor.definir_pedido_minimo(5000)
    """

    nome: str = ""
    cnpj: str = ""
    inscricao_estadual: Optional[str] = None
    endereco: Optional[str] = None
    telefone: Optional[str] = None
    email: Optional[str] = None
    logo_url: Optional[str] = None
    moeda_padrao: Moeda = Moeda.REAL
    pedido_minimo: Optional[Decimal] = None
    token_lincros: Optional[str] = None
    ativo: bool = True
    dados_adicionais: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def criar(
        cls,
        nome: str,
        cnpj: str,
        inscricao_estadual: Optional[str] = None,
        endereco: Optional[str] = None,
        telefone: Optional[str] = None,
        email: Optional[str] = None,
        moeda_padrao: Moeda = Moeda.REAL,
    ) -> "Fornecedor":
        """
        Raises:
            ValidationError: Se nome vazio ou CNPJ inválido
        """
        return cls(
            nome=cls._validar_nome(nome),
            cnpj=Cnpj.criar(cnpj).valor,
            inscricao_estadual=inscricao_estadual,
            endereco=endereco,
            telefone=telefone,
            email=email.strip().lower() if email else None,
            moeda_padrao=moeda_padrao,
        )

    @staticmethod
    def _validar_nome(nome: str) -> str:
        if not nome or not nome.strip():
            raise ValidationError("Nome do fornecedor é obrigatório", field="nome")
        return nome.strip()

    def atualizar_dados(
        self,
        nome: str,
        inscricao_estadual: Optional[str] = None,
        endereco: Optional[str] = None,
        telefone: Optional[str] = None,
        email: Optional[str] = None,
    ) -> None:
        self.nome = self._validar_nome(nome)
        self.inscricao_estadual = inscricao_estadual
        self.endereco = endereco
        self.telefone = telefone
        self.email = email.strip().lower() if email else None
        self._atualizar_timestamp()

    def ativar(self) -> None:
        self.ativo = True
        self._atualizar_timestamp()

    def desativar(self) -> None:
        self.ativo = False
        self._atualizar_timestamp()

    def definir_pedido_minimo(self, valor) -> None:
        if valor is None:
            self.pedido_minimo = None
        else:
            valor = to_decimal(valor, "pedido_minimo")
            if valor < 0:
                raise ValidationError(
                    "Pedido mínimo não pode ser negativo", field="pedido_minimo"
                )
            self.pedido_minimo = valor
        self._atualizar_timestamp()

    def alterar_moeda_padrao(self, moeda: Moeda) -> None:
        self.moeda_padrao = moeda
        self._atualizar_timestamp()

    def definir_logo(self, logo_url: Optional[str]) -> None:
        self.logo_url = logo_url
        self._atualizar_timestamp()

    def definir_token_lincros(self, token: Optional[str]) -> None:
        self.token_lincros = token
        self._atualizar_timestamp()

    @property
    def cnpj_formatado(self) -> str:
        return Cnpj(self.cnpj).valor_formatado

    def __repr__(self) -> str:
        return f"Fornecedor(id={self.id}, nome={self.nome!r}, ativo={self.ativo})"


ROLES_FORNECEDOR = (Roles.FORNECEDOR_WEB_ADMIN, Roles.FORNECEDOR_WEB_REPRESENTANTE)


@dataclass(eq=False)
class UsuarioFornecedor(EntidadeBase):
    """Vínculo usuário x fornecedor com o papel exercido."""

    usuario_id: int = 0
    fornecedor_id: int = 0
    role: Roles = Roles.FORNECEDOR_WEB_REPRESENTANTE
    ativo: bool = True

    @classmethod
    def criar(cls, usuario_id: int, fornecedor_id: int, role: Roles) -> "UsuarioFornecedor":
        if not usuario_id or usuario_id <= 0:
            raise ValidationError("ID do usuário deve ser maior que zero", field="usuario_id")
        if not fornecedor_id or fornecedor_id <= 0:
            raise ValidationError(
                "ID do fornecedor deve ser maior que zero", field="fornecedor_id"
            )
        if role not in ROLES_FORNECEDOR:
            raise ValidationError("Role inválida para usuário de fornecedor", field="role")
        return cls(usuario_id=usuario_id, fornecedor_id=fornecedor_id, role=role)

    def alterar_role(self, role: Roles) -> None:
        if role not in ROLES_FORNECEDOR:
            raise ValidationError("Role inválida para usuário de fornecedor", field="role")
        self.role = role
        self._atualizar_timestamp()

    def ativar(self) -> None:
        self.ativo = True
        self._atualizar_timestamp()

    def desativar(self) -> None:
        self.ativo = False
        self._atualizar_timestamp()
