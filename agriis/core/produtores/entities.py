"""
Entidades do Domínio de Produtores.

Entidades:
- Produtor: produtor rural (pessoa física ou jurídica) comprador de insumos

Regras:
- Nome obrigatório
- CPF ou CNPJ deve ser informado (ambos validados)
- Status inicial: PendenteValidacaoAutomatica
- Culturas sem duplicidade e com id positivo
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Optional

from agriis.core.shared.entities import EntidadeBase
from agriis.core.shared.exceptions import ValidationError
from agriis.core.shared.value_objects import AreaPlantio, Cnpj, Cpf


class StatusProdutor(Enum):
    PENDENTE_VALIDACAO_AUTOMATICA = "PendenteValidacaoAutomatica"
    PENDENTE_VALIDACAO_MANUAL = "PendenteValidacaoManual"
    PENDENTE_CNPJ = "PendenteCnpj"
    AUTORIZADO_AUTOMATICAMENTE = "AutorizadoAutomaticamente"
    AUTORIZADO_MANUALMENTE = "AutorizadoManualmente"
    NEGADO = "Negado"

    @classmethod
    def from_string(cls, value: str) -> "StatusProdutor":
        try:
            return cls[value.upper()]
        except KeyError:
            pass

        for status in cls:
            if status.value.lower() == value.lower():
                return status

        raise ValidationError(f"Status de produtor inválido: {value}", field="status")

    @property
    def eh_autorizado(self) -> bool:
        return self in (
            StatusProdutor.AUTORIZADO_AUTOMATICAMENTE,
            StatusProdutor.AUTORIZADO_MANUALMENTE,
        )


class TipoAtividadeAgropecuaria(Enum):
    AGRICULTURA = "Agricultura"
    PECUARIA = "Pecuaria"
    MISTA = "Mista"

    @classmethod
    def from_string(cls, value: str) -> "TipoAtividadeAgropecuaria":
        for tipo in cls:
            if value.upper() in (tipo.name, tipo.value.upper()):
                return tipo
        raise ValidationError(
            f"Tipo de atividade inválido: {value}", field="tipo_atividade"
        )


@dataclass(eq=False)
class Produtor(EntidadeBase):
    """
    Entidade de Domínio: Produtor rural.

    Example:
        produtor = Produtor.criar(
            nome="João da Silva",
            cpf="529.982.247-25",
            area_plantio=AreaPlantio.criar(350),
        )
        produtor.adicionar_cultura(1)
        produtor.eh_pessoa_fisica()     # True
    """

    nome: str = ""
    cpf: Optional[str] = None
    cnpj: Optional[str] = None
    inscricao_estadual: Optional[str] = None
    tipo_atividade: Optional[TipoAtividadeAgropecuaria] = None
    area_plantio: AreaPlantio = field(default_factory=AreaPlantio)
    status: StatusProdutor = StatusProdutor.PENDENTE_VALIDACAO_AUTOMATICA
    data_autorizacao: Optional[datetime] = None
    usuario_autorizacao_id: Optional[int] = None
    retornos_api_check: Optional[Dict[str, Any]] = None
    culturas: List[int] = field(default_factory=list)

    @classmethod
    def criar(
        cls,
        nome: str,
        cpf: Optional[str] = None,
        cnpj: Optional[str] = None,
        inscricao_estadual: Optional[str] = None,
        tipo_atividade: Optional[TipoAtividadeAgropecuaria] = None,
        area_plantio: Optional[AreaPlantio] = None,
    ) -> "Produtor":
        """
        Cria novo produtor pendente de validação.

        Raises:
            ValidationError: Nome vazio, sem documento ou documento inválido
        """
        if not cpf and not cnpj:
            raise ValidationError("CPF ou CNPJ deve ser informado", field="documento")

        return cls(
            nome=cls._validar_nome(nome),
            cpf=Cpf.criar(cpf).valor if cpf else None,
            cnpj=Cnpj.criar(cnpj).valor if cnpj else None,
            inscricao_estadual=inscricao_estadual.strip() if inscricao_estadual else None,
            tipo_atividade=tipo_atividade,
            area_plantio=area_plantio or AreaPlantio(),
        )

    @staticmethod
    def _validar_nome(nome: str) -> str:
        if not nome or not nome.strip():
            raise ValidationError("Nome do produtor é obrigatório", field="nome")
        return nome.strip()

    def atualizar_dados(
        self,
        nome: str,
        inscricao_estadual: Optional[str] = None,
        tipo_atividade: Optional[TipoAtividadeAgropecuaria] = None,
    ) -> None:
        self.nome = self._validar_nome(nome)
        self.inscricao_estadual = inscricao_estadual.strip() if inscricao_estadual else None
        self.tipo_atividade = tipo_atividade
        self._atualizar_timestamp()

    def atualizar_status(
        self, novo_status: StatusProdutor, usuario_autorizacao_id: Optional[int] = None
    ) -> StatusProdutor:
        """Altera status; retorna o status anterior."""
        anterior = self.status
        self.status = novo_status

        if usuario_autorizacao_id is not None:
            self.usuario_autorizacao_id = usuario_autorizacao_id
        if novo_status.eh_autorizado:
            self.data_autorizacao = datetime.now()

        self._atualizar_timestamp()
        return anterior

    def adicionar_cultura(self, cultura_id: int) -> None:
        if cultura_id is None or cultura_id <= 0:
            raise ValidationError("ID da cultura deve ser maior que zero", field="cultura_id")
        if cultura_id not in self.culturas:
            self.culturas.append(cultura_id)
            self._atualizar_timestamp()

    def remover_cultura(self, cultura_id: int) -> None:
        if cultura_id in self.culturas:
            self.culturas.remove(cultura_id)
            self._atualizar_timestamp()

    def atualizar_area_plantio(self, nova_area: AreaPlantio) -> None:
        if nova_area is None:
            raise ValidationError("Área de plantio é obrigatória", field="area_plantio")
        self.area_plantio = nova_area
        self._atualizar_timestamp()

    def armazenar_retornos_api_check(self, retornos: Dict[str, Any]) -> None:
        self.retornos_api_check = retornos
        self._atualizar_timestamp()

    def esta_autorizado(self) -> bool:
        return self.status.eh_autorizado

    def eh_pessoa_fisica(self) -> bool:
        return self.cpf is not None

    def eh_pessoa_juridica(self) -> bool:
        return self.cnpj is not None

    @property
    def documento_principal(self) -> str:
        """CPF formatado (pessoa física) ou CNPJ formatado."""
        if self.eh_pessoa_fisica():
            return Cpf(self.cpf).valor_formatado
        return Cnpj(self.cnpj).valor_formatado

    def __repr__(self) -> str:
        return f"Produtor(id={self.id}, nome={self.nome!r}, status={self.status.value})"
