"""
Entidades do Domínio de Usuários.

Entidades:
- Usuario: pessoa que acessa o sistema (comprador, fornecedor, admin)
- Roles: papéis de acesso

Regras:
- Nome obrigatório
- Email obrigatório, válido, armazenado em minúsculas (único no sistema)
- CPF opcional, validado quando informado
- Roles sem duplicidade
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
import re
from typing import ClassVar, List, Optional

from agriis.core.shared.entities import EntidadeBase
from agriis.core.shared.exceptions import BusinessRuleViolationError, ValidationError
from agriis.core.shared.value_objects import Cpf


class Roles(Enum):
    """Papéis de acesso."""

    ADMIN = "RoleAdmin"
    COMPRADOR = "RoleComprador"
    FORNECEDOR_WEB_ADMIN = "RoleFornecedorWebAdmin"
    FORNECEDOR_WEB_REPRESENTANTE = "RoleFornecedorWebRepresentante"

    @classmethod
    def from_string(cls, value: str) -> "Roles":
        """Aceita nome (ADMIN) ou valor (RoleAdmin)."""
        try:
            return cls[value.upper()]
        except KeyError:
            pass

        for role in cls:
            if role.value.lower() == value.lower():
                return role

        raise ValidationError(f"Role inválida: {value}", field="role")


EMAIL_REGEX = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


@dataclass(eq=False)
class Usuario(EntidadeBase):
    """
    Entidade de Domínio: Usuário.

    Example:
        usuario = Usuario.criar(nome="Ana", email="Ana@Fazenda.com")
        usuario.email               # "ana@fazenda.com"
        usuario.adicionar_role(Roles.COMPRADOR)
    """

    nome: str = ""
    email: str = ""
    celular: Optional[str] = None
    cpf: Optional[str] = None
    senha_hash: Optional[str] = None
    ativo: bool = True
    ultimo_login: Optional[datetime] = None
    logo_url: Optional[str] = None
    roles: List[Roles] = field(default_factory=list)

    NOME_MAX_LENGTH: ClassVar[int] = 200

    @classmethod
    def criar(
        cls,
        nome: str,
        email: str,
        celular: Optional[str] = None,
        cpf: Optional[str] = None,
    ) -> "Usuario":
        """
        Factory method para criar usuário validado.

        Raises:
            ValidationError: Se nome, email ou CPF inválidos
        """
        return cls(
            nome=cls._validar_nome(nome),
            email=cls._validar_email(email),
            celular=celular,
            cpf=Cpf.criar(cpf).valor if cpf else None,
        )

    @classmethod
    def _validar_nome(cls, nome: str) -> str:
        if not nome or not nome.strip():
            raise ValidationError("Nome é obrigatório", field="nome")
        if len(nome.strip()) > cls.NOME_MAX_LENGTH:
            raise ValidationError("Nome muito longo", field="nome")
        return nome.strip()

    @staticmethod
    def _validar_email(email: str) -> str:
        if not email or not email.strip():
            raise ValidationError("Email é obrigatório", field="email")
        email = email.strip().lower()
        if not EMAIL_REGEX.match(email):
            raise ValidationError("Email inválido", field="email")
        return email

    def atualizar_dados(
        self,
        nome: str,
        celular: Optional[str] = None,
        cpf: Optional[str] = None,
    ) -> None:
        self.nome = self._validar_nome(nome)
        self.celular = celular
        self.cpf = Cpf.criar(cpf).valor if cpf else None
        self._atualizar_timestamp()

    def atualizar_email(self, email: str) -> None:
        self.email = self._validar_email(email)
        self._atualizar_timestamp()

    def definir_senha(self, senha_hash: str) -> None:
        if not senha_hash or not senha_hash.strip():
            raise ValidationError("Hash da senha é obrigatório", field="senha_hash")
        self.senha_hash = senha_hash
        self._atualizar_timestamp()

    def ativar(self) -> None:
        self.ativo = True
        self._atualizar_timestamp()

    def desativar(self) -> None:
        self.ativo = False
        self._atualizar_timestamp()

    def registrar_login(self) -> None:
        if not self.ativo:
            raise BusinessRuleViolationError("Usuário inativo", rule="usuario_ativo")
        self.ultimo_login = datetime.now()
        self._atualizar_timestamp()

    def atualizar_logo(self, logo_url: Optional[str]) -> None:
        self.logo_url = logo_url
        self._atualizar_timestamp()

    def adicionar_role(self, role: Roles) -> None:
        if role not in self.roles:
            self.roles.append(role)
            self._atualizar_timestamp()

    def remover_role(self, role: Roles) -> None:
        if role in self.roles:
            self.roles.remove(role)
            self._atualizar_timestamp()

    def possui_role(self, role: Roles) -> bool:
        return role in self.roles

    def obter_roles(self) -> List[str]:
        return [r.value for r in self.roles]

    def __repr__(self) -> str:
        return f"Usuario(id={self.id}, email={self.email!r}, ativo={self.ativo})"
