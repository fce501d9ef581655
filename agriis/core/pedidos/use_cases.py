"""
Use Cases do Domínio de Pedidos.

Serviços de aplicação:
- CarrinhoComprasService: preço de catálogo, desconto segmentado e totais
- PedidoService: ciclo de vida do pedido e operações de carrinho
- TransporteService: frete, reagendamento e resumo de transportes
- PropostaService: protocolo de negociação produtor/fornecedor
- CancelarPedidosComPrazoUltrapassadoService: job de prazo limite

PedidoService e PropostaService retornam Result; exceções de domínio
lançadas dentro do fluxo viram Result.failure.
"""

from datetime import date, datetime, timedelta
from decimal import Decimal
from typing import Callable, List, Optional, TypeVar
import logging

from agriis.core.catalogos.ports import CatalogoRepository
from agriis.core.fornecedores.ports import FornecedorRepository
from agriis.core.produtores.ports import ProdutorRepository
from agriis.core.segmentacoes.use_cases import CalculoDescontoSegmentadoService
from agriis.core.shared.dtos import PaginacaoParams, PaginatedResultDTO
from agriis.core.shared.entities import to_decimal
from agriis.core.shared.exceptions import (
    BusinessRuleViolationError,
    DomainException,
    EntityNotFoundError,
    ValidationError,
)
from agriis.core.shared.interfaces import UnitOfWork
from agriis.core.shared.results import Result

from .dtos import (
    AdicionarItemCarrinhoInputDTO,
    AgendarTransporteInputDTO,
    AtualizarPedidoInputDTO,
    AtualizarValorFreteInputDTO,
    CalcularFreteConsolidadoInputDTO,
    CalcularFreteInputDTO,
    CriarPedidoInputDTO,
    CriarPropostaInputDTO,
    ItemFreteInputDTO,
    PedidoOutputDTO,
    PropostaOutputDTO,
    ReagendarTransporteInputDTO,
    SolicitacaoAgendamentoInputDTO,
    transporte_to_dict,
)
from .entities import (
    DIAS_LIMITE_INTERACAO_PADRAO,
    AcaoCompradorPedido,
    Pedido,
    PedidoItem,
    PedidoItemTransporte,
    Proposta,
    StatusPedido,
    TotaisPedido,
)
from .events import (
    PedidoCanceladoPeloCompradorEvent,
    PedidoCanceladoPorTempoLimiteEvent,
    PedidoCriadoEvent,
    PedidoFechadoEvent,
    PropostaCriadaEvent,
)
from .ports import PedidoRepository, PropostaRepository
from .transportes import (
    VALOR_MINIMO_FRETE_PADRAO,
    VALOR_POR_KG_KM_PADRAO,
    CalculoFrete,
    CalculoFreteConsolidado,
    DimensoesProduto,
    FreteCalculoService,
    ResumoTransportePedido,
    SolicitacaoAgendamento,
    TipoCalculoPeso,
    TransporteAgendamentoService,
    ValidacaoAgendamento,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")

PRODUTOR_MOBILE = "PRODUTOR_MOBILE"
FORNECEDOR_WEB = "FORNECEDOR_WEB"


def _evento_fechado(pedido: Pedido) -> PedidoFechadoEvent:
    return PedidoFechadoEvent(
        aggregate_id=pedido.id,
        fornecedor_id=pedido.fornecedor_id,
        produtor_id=pedido.produtor_id,
        valor_liquido=float((pedido.totais or {}).get("valor_liquido", 0)),
    )


def _evento_cancelado_comprador(pedido: Pedido) -> PedidoCanceladoPeloCompradorEvent:
    return PedidoCanceladoPeloCompradorEvent(
        aggregate_id=pedido.id,
        fornecedor_id=pedido.fornecedor_id,
        produtor_id=pedido.produtor_id,
    )


def _evento_proposta(proposta: Proposta) -> PropostaCriadaEvent:
    produtor = proposta.eh_proposta_produtor()
    return PropostaCriadaEvent(
        aggregate_id=proposta.id,
        pedido_id=proposta.pedido_id,
        autor="produtor" if produtor else "fornecedor",
        acao_comprador=proposta.acao_comprador.value if proposta.acao_comprador else None,
        usuario_id=proposta.usuario_produtor_id if produtor else proposta.usuario_fornecedor_id,
    )


# =============================================================================
# Carrinho
# =============================================================================

class CarrinhoComprasService:
    """
    Regras de carrinho sobre um Pedido já carregado.

    Não controla transação: é chamado pelo PedidoService dentro da
    unidade de trabalho dele.

    Example:
        item = carrinho.adicionar_item(pedido, AdicionarItemCarrinhoInputDTO(
            produto_id=10, quantidade=Decimal("5"), uf="MT",
        ), usuario_id=3)
        carrinho.calcular_totais(pedido).valor_liquido
    """

    def __init__(
        self,
        catalogo_repo: CatalogoRepository,
        produtor_repo: ProdutorRepository,
        calculo_desconto_service: CalculoDescontoSegmentadoService,
        proposta_repo: PropostaRepository,
    ):
        self.catalogo_repo = catalogo_repo
        self.produtor_repo = produtor_repo
        self.calculo_desconto_service = calculo_desconto_service
        self.proposta_repo = proposta_repo

    def _localizar_item_catalogo(self, produto_id: int, catalogo_id: Optional[int]):
        """Retorna (catalogo, item) ou lança EntityNotFoundError."""
        if catalogo_id is not None:
            catalogo = self.catalogo_repo.get_by_id(catalogo_id)
            if not catalogo:
                raise EntityNotFoundError(
                    "Catálogo não encontrado", entity_type="Catalogo", entity_id=catalogo_id
                )
            item = catalogo.obter_item(produto_id)
        else:
            item = self.catalogo_repo.get_item_vigente(produto_id, date.today())
            catalogo = self.catalogo_repo.get_by_id(item.catalogo_id) if item else None

        if not item or not item.ativo:
            raise EntityNotFoundError(
                f"Produto {produto_id} não encontrado em catálogo vigente",
                entity_type="CatalogoItem",
                entity_id=produto_id,
            )
        return catalogo, item

    def _area_produtor(self, produtor_id: int) -> Decimal:
        produtor = self.produtor_repo.get_by_id(produtor_id)
        return produtor.area_plantio.valor if produtor else Decimal("0")

    def _aplicar_desconto_segmentado(self, pedido: Pedido, item: PedidoItem) -> None:
        dados = dict(item.dados_adicionais or {})
        categoria_id = dados.get("categoria_id")
        area = self._area_produtor(pedido.produtor_id)

        if categoria_id is None or area <= 0 or item.valor_total <= 0:
            return

        resultado = self.calculo_desconto_service.calcular(
            pedido.fornecedor_id, categoria_id, area, item.valor_total
        )
        item.atualizar_desconto(resultado.percentual_desconto)
        dados.update({
            "segmentacao_aplicada": resultado.segmentacao_aplicada,
            "grupo_aplicado": resultado.grupo_aplicado,
            "observacoes_desconto": resultado.observacoes,
            "area_produtor": float(area),
        })
        item.atualizar_dados_adicionais(dados)

    def _registrar_alteracao(self, pedido: Pedido, usuario_id: Optional[int]) -> None:
        if usuario_id is None or pedido.status != StatusPedido.EM_NEGOCIACAO:
            return
        # Sem proposta anterior a negociação ainda não foi iniciada
        if self.proposta_repo.get_ultima_por_pedido(pedido.id) is None:
            return
        self.proposta_repo.save(Proposta.do_produtor(
            pedido.id,
            AcaoCompradorPedido.ALTEROU_CARRINHO,
            usuario_id,
            "Alterou o carrinho",
        ))

    def adicionar_item(
        self,
        pedido: Pedido,
        input_dto: AdicionarItemCarrinhoInputDTO,
        usuario_id: Optional[int] = None,
    ) -> PedidoItem:
        """
        Adiciona produto ao carrinho com preço do catálogo.

        Se o produto já está no carrinho, soma a quantidade.

        Raises:
            EntityNotFoundError: Produto fora de catálogo vigente
            BusinessRuleViolationError: Preço não encontrado para a UF/data
        """
        existente = next(
            (i for i in pedido.itens if i.produto_id == input_dto.produto_id), None
        )
        if existente is not None:
            return self.atualizar_quantidade_item(
                pedido, existente.id, existente.quantidade + input_dto.quantidade, usuario_id
            )

        catalogo, item_catalogo = self._localizar_item_catalogo(
            input_dto.produto_id, input_dto.catalogo_id
        )
        preco = item_catalogo.obter_preco(input_dto.uf, date.today())
        if preco is None:
            raise BusinessRuleViolationError(
                f"Preço não encontrado para o produto {input_dto.produto_id} no catálogo",
                rule="preco_catalogo",
            )

        item = PedidoItem.criar(
            pedido_id=pedido.id,
            produto_id=input_dto.produto_id,
            quantidade=input_dto.quantidade,
            preco_unitario=preco,
            observacoes=input_dto.observacoes,
        )
        item.atualizar_dados_adicionais({
            "catalogo_id": catalogo.id if catalogo else None,
            "categoria_id": catalogo.categoria_id if catalogo else None,
        })
        self._aplicar_desconto_segmentado(pedido, item)

        pedido.adicionar_item(item)
        pedido.recalcular_totais()
        self._registrar_alteracao(pedido, usuario_id)
        return item

    def atualizar_quantidade_item(
        self, pedido: Pedido, item_id: int, quantidade, usuario_id: Optional[int] = None
    ) -> PedidoItem:
        if pedido.status != StatusPedido.EM_NEGOCIACAO:
            raise BusinessRuleViolationError(
                "Não é possível alterar itens de um pedido que não está em negociação",
                rule="pedido_em_negociacao",
            )
        item = pedido.obter_item(item_id)
        if item is None:
            raise EntityNotFoundError(
                "Item não encontrado no pedido", entity_type="PedidoItem", entity_id=item_id
            )

        item.atualizar_quantidade(quantidade)
        self._aplicar_desconto_segmentado(pedido, item)
        pedido.recalcular_totais()
        self._registrar_alteracao(pedido, usuario_id)
        return item

    def remover_item(
        self, pedido: Pedido, item_id: int, usuario_id: Optional[int] = None
    ) -> None:
        if not pedido.remover_item(item_id):
            raise EntityNotFoundError(
                "Item não encontrado no pedido", entity_type="PedidoItem", entity_id=item_id
            )
        pedido.recalcular_totais()
        self._registrar_alteracao(pedido, usuario_id)

    def calcular_totais(self, pedido: Pedido) -> TotaisPedido:
        return TotaisPedido.de_itens(pedido.itens)


# =============================================================================
# Pedido
# =============================================================================

class PedidoService:
    """
    Application service de pedidos.

    Example:
        result = service.criar(CriarPedidoInputDTO(fornecedor_id=1, produtor_id=2))
        if result.is_success:
            service.adicionar_item_carrinho(result.value.id, item_dto, usuario_id=3)
    """

    def __init__(
        self,
        pedido_repo: PedidoRepository,
        proposta_repo: PropostaRepository,
        fornecedor_repo: FornecedorRepository,
        produtor_repo: ProdutorRepository,
        carrinho_service: CarrinhoComprasService,
        uow: UnitOfWork,
        dias_limite_padrao: int = DIAS_LIMITE_INTERACAO_PADRAO,
    ):
        self.pedido_repo = pedido_repo
        self.proposta_repo = proposta_repo
        self.fornecedor_repo = fornecedor_repo
        self.produtor_repo = produtor_repo
        self.carrinho_service = carrinho_service
        self.uow = uow
        self.dias_limite_padrao = dias_limite_padrao

    def _executar(self, operacao: Callable[[], T]) -> Result[T]:
        try:
            return Result.success(operacao())
        except DomainException as e:
            logger.warning(f"Operação de pedido rejeitada: {e}")
            return Result.from_exception(e)

    def _obter_entidade(self, pedido_id: int) -> Pedido:
        pedido = self.pedido_repo.get_by_id(pedido_id)
        if not pedido:
            raise EntityNotFoundError(
                "Pedido não encontrado", entity_type="Pedido", entity_id=pedido_id
            )
        return pedido

    def _obter_para_modificacao(self, pedido_id: int) -> Pedido:
        pedido = self._obter_entidade(pedido_id)
        if not pedido.esta_dentro_prazo_limite():
            raise BusinessRuleViolationError(
                "Pedido fora do prazo limite para modificações",
                rule="pedido_prazo_limite",
            )
        return pedido

    def _verificar_participantes(self, fornecedor_id: int, produtor_id: int) -> None:
        if self.fornecedor_repo.get_by_id(fornecedor_id) is None:
            raise EntityNotFoundError(
                "Fornecedor não encontrado", entity_type="Fornecedor", entity_id=fornecedor_id
            )
        if self.produtor_repo.get_by_id(produtor_id) is None:
            raise EntityNotFoundError(
                "Produtor não encontrado", entity_type="Produtor", entity_id=produtor_id
            )

    @staticmethod
    def _para_dtos(pedidos: List[Pedido]) -> List[PedidoOutputDTO]:
        return [PedidoOutputDTO.from_entity(p) for p in pedidos]

    # =========================================================================
    # Queries
    # =========================================================================

    def obter_por_id(self, pedido_id: int) -> Result[PedidoOutputDTO]:
        return self._executar(
            lambda: PedidoOutputDTO.from_entity(self._obter_entidade(pedido_id))
        )

    def listar_por_produtor(self, produtor_id: int) -> Result[List[PedidoOutputDTO]]:
        return self._executar(
            lambda: self._para_dtos(self.pedido_repo.list_por_produtor(produtor_id))
        )

    def listar_por_fornecedor(self, fornecedor_id: int) -> Result[List[PedidoOutputDTO]]:
        return self._executar(
            lambda: self._para_dtos(self.pedido_repo.list_por_fornecedor(fornecedor_id))
        )

    def listar_por_status(self, status: str) -> Result[List[PedidoOutputDTO]]:
        return self._executar(
            lambda: self._para_dtos(
                self.pedido_repo.list_por_status(StatusPedido.from_string(status))
            )
        )

    def listar_proximos_prazo_limite(self, dias_antes: int = 1) -> Result[List[PedidoOutputDTO]]:
        agora = datetime.now()
        return self._executar(
            lambda: self._para_dtos(
                self.pedido_repo.list_proximos_prazo_limite(
                    agora, agora + timedelta(days=dias_antes)
                )
            )
        )

    def listar_com_prazo_ultrapassado(self) -> Result[List[PedidoOutputDTO]]:
        return self._executar(
            lambda: self._para_dtos(
                self.pedido_repo.list_com_prazo_ultrapassado(datetime.now())
            )
        )

    # =========================================================================
    # Commands
    # =========================================================================

    def criar(self, input_dto: CriarPedidoInputDTO) -> Result[PedidoOutputDTO]:
        def operacao():
            with self.uow:
                pedido = Pedido.criar(
                    fornecedor_id=input_dto.fornecedor_id,
                    produtor_id=input_dto.produtor_id,
                    permite_contato=input_dto.permite_contato,
                    negociar_pedido=input_dto.negociar_pedido,
                    dias_limite_interacao=(
                        input_dto.dias_limite_interacao or self.dias_limite_padrao
                    ),
                )
                self._verificar_participantes(pedido.fornecedor_id, pedido.produtor_id)
                pedido.recalcular_totais()
                self.pedido_repo.save(pedido)

                self.uow.publish_event(PedidoCriadoEvent(
                    aggregate_id=pedido.id,
                    fornecedor_id=pedido.fornecedor_id,
                    produtor_id=pedido.produtor_id,
                    data_limite_interacao=pedido.data_limite_interacao.isoformat(),
                ))

            logger.info(f"Pedido criado: {pedido.id} (produtor {pedido.produtor_id})")
            return PedidoOutputDTO.from_entity(pedido)

        return self._executar(operacao)

    def atualizar(
        self, pedido_id: int, input_dto: AtualizarPedidoInputDTO
    ) -> Result[PedidoOutputDTO]:
        def operacao():
            with self.uow:
                pedido = self._obter_entidade(pedido_id)
                pedido.atualizar_preferencias(
                    input_dto.permite_contato, input_dto.negociar_pedido
                )
                self.pedido_repo.save(pedido)
            return PedidoOutputDTO.from_entity(pedido)

        return self._executar(operacao)

    def fechar(self, pedido_id: int) -> Result[PedidoOutputDTO]:
        def operacao():
            with self.uow:
                pedido = self._obter_entidade(pedido_id)
                pedido.recalcular_totais()
                pedido.fechar()
                self.pedido_repo.save(pedido)
                self.uow.publish_event(_evento_fechado(pedido))

            logger.info(f"Pedido fechado: {pedido.id}")
            return PedidoOutputDTO.from_entity(pedido)

        return self._executar(operacao)

    def cancelar_por_comprador(self, pedido_id: int) -> Result[PedidoOutputDTO]:
        def operacao():
            with self.uow:
                pedido = self._obter_entidade(pedido_id)
                pedido.cancelar_por_comprador()
                self.pedido_repo.save(pedido)
                self.uow.publish_event(_evento_cancelado_comprador(pedido))

            logger.info(f"Pedido cancelado pelo comprador: {pedido.id}")
            return PedidoOutputDTO.from_entity(pedido)

        return self._executar(operacao)

    def atualizar_prazo_limite(self, pedido_id: int, dias: int) -> Result[PedidoOutputDTO]:
        def operacao():
            with self.uow:
                pedido = self._obter_entidade(pedido_id)
                if pedido.status != StatusPedido.EM_NEGOCIACAO:
                    raise BusinessRuleViolationError(
                        "Prazo só pode ser alterado em pedidos em negociação",
                        rule="pedido_em_negociacao",
                    )
                pedido.atualizar_prazo_limite(dias)
                self.pedido_repo.save(pedido)
            return PedidoOutputDTO.from_entity(pedido)

        return self._executar(operacao)

    def recalcular_totais(self, pedido_id: int) -> Result[TotaisPedido]:
        def operacao():
            with self.uow:
                pedido = self._obter_entidade(pedido_id)
                totais = pedido.recalcular_totais()
                self.pedido_repo.save(pedido)
            return totais

        return self._executar(operacao)

    # =========================================================================
    # Carrinho
    # =========================================================================

    def adicionar_item_carrinho(
        self,
        pedido_id: int,
        input_dto: AdicionarItemCarrinhoInputDTO,
        usuario_id: Optional[int] = None,
    ) -> Result[PedidoOutputDTO]:
        def operacao():
            with self.uow:
                pedido = self._obter_para_modificacao(pedido_id)
                self.carrinho_service.adicionar_item(pedido, input_dto, usuario_id)
                self.pedido_repo.save(pedido)

            logger.info(f"Produto {input_dto.produto_id} adicionado ao pedido {pedido_id}")
            return PedidoOutputDTO.from_entity(pedido)

        return self._executar(operacao)

    def remover_item_carrinho(
        self, pedido_id: int, item_id: int, usuario_id: Optional[int] = None
    ) -> Result[PedidoOutputDTO]:
        def operacao():
            with self.uow:
                pedido = self._obter_para_modificacao(pedido_id)
                self.carrinho_service.remover_item(pedido, item_id, usuario_id)
                self.pedido_repo.save(pedido)
            return PedidoOutputDTO.from_entity(pedido)

        return self._executar(operacao)

    def atualizar_quantidade_item(
        self,
        pedido_id: int,
        item_id: int,
        quantidade,
        usuario_id: Optional[int] = None,
    ) -> Result[PedidoOutputDTO]:
        def operacao():
            with self.uow:
                pedido = self._obter_para_modificacao(pedido_id)
                self.carrinho_service.atualizar_quantidade_item(
                    pedido, item_id, quantidade, usuario_id
                )
                self.pedido_repo.save(pedido)
            return PedidoOutputDTO.from_entity(pedido)

        return self._executar(operacao)

    def agendar_transporte(
        self, pedido_id: int, item_id: int, input_dto: AgendarTransporteInputDTO
    ) -> Result[PedidoOutputDTO]:
        """Agenda entrega de parte (ou toda) a quantidade de um item."""
        def operacao():
            with self.uow:
                pedido = self._obter_entidade(pedido_id)
                item = pedido.obter_item(item_id)
                if item is None:
                    raise EntityNotFoundError(
                        "Item não encontrado no pedido",
                        entity_type="PedidoItem",
                        entity_id=item_id,
                    )

                transporte = PedidoItemTransporte.criar(
                    quantidade=input_dto.quantidade,
                    valor_frete=input_dto.valor_frete,
                    endereco_origem=input_dto.endereco_origem,
                    endereco_destino=input_dto.endereco_destino,
                )
                transporte.agendar(input_dto.data_agendamento)
                transporte.atualizar_peso_volume(input_dto.peso_total, input_dto.volume_total)
                transporte.atualizar_observacoes(input_dto.observacoes)
                item.adicionar_transporte(transporte)

                self.pedido_repo.save(pedido)
            return PedidoOutputDTO.from_entity(pedido)

        return self._executar(operacao)


# =============================================================================
# Transporte
# =============================================================================

class TransporteService:
    """
    Frete, reagendamento e consultas de transporte de um pedido.

    Example:
        result = service.reagendar_transporte(
            pedido_id, transporte_id, ReagendarTransporteInputDTO(nova_data)
        )
    """

    def __init__(
        self,
        pedido_repo: PedidoRepository,
        uow: UnitOfWork,
        frete_service: Optional[FreteCalculoService] = None,
        agendamento_service: Optional[TransporteAgendamentoService] = None,
    ):
        self.pedido_repo = pedido_repo
        self.uow = uow
        self.frete_service = frete_service or FreteCalculoService()
        self.agendamento_service = agendamento_service or TransporteAgendamentoService()

    def _executar(self, operacao: Callable[[], T]) -> Result[T]:
        try:
            return Result.success(operacao())
        except DomainException as e:
            logger.warning(f"Operação de transporte rejeitada: {e}")
            return Result.from_exception(e)

    def _obter_pedido(self, pedido_id: int) -> Pedido:
        pedido = self.pedido_repo.get_by_id(pedido_id)
        if not pedido:
            raise EntityNotFoundError(
                "Pedido não encontrado", entity_type="Pedido", entity_id=pedido_id
            )
        return pedido

    @staticmethod
    def _obter_transporte(pedido: Pedido, transporte_id: int) -> PedidoItemTransporte:
        transporte = pedido.obter_transporte(transporte_id)
        if transporte is None:
            raise EntityNotFoundError(
                "Transporte não encontrado",
                entity_type="PedidoItemTransporte",
                entity_id=transporte_id,
            )
        return transporte

    @staticmethod
    def _frete_do_item(item_dto: ItemFreteInputDTO):
        dimensoes = DimensoesProduto.criar(
            item_dto.altura,
            item_dto.largura,
            item_dto.comprimento,
            item_dto.peso_nominal,
            item_dto.densidade,
        )
        tipo = TipoCalculoPeso.from_string(item_dto.tipo_calculo_peso)
        return dimensoes, tipo, item_dto.quantidade

    # =========================================================================
    # Frete
    # =========================================================================

    def calcular_frete(self, input_dto: CalcularFreteInputDTO) -> Result[CalculoFrete]:
        def operacao():
            dimensoes, tipo, quantidade = self._frete_do_item(input_dto.item)
            return self.frete_service.calcular_frete(
                dimensoes,
                tipo,
                quantidade,
                input_dto.distancia_km,
                input_dto.valor_por_kg_km or VALOR_POR_KG_KM_PADRAO,
                (
                    VALOR_MINIMO_FRETE_PADRAO if input_dto.valor_minimo_frete is None
                    else input_dto.valor_minimo_frete
                ),
            )

        return self._executar(operacao)

    def calcular_frete_consolidado(
        self, input_dto: CalcularFreteConsolidadoInputDTO
    ) -> Result[CalculoFreteConsolidado]:
        def operacao():
            return self.frete_service.calcular_frete_consolidado(
                [self._frete_do_item(i) for i in input_dto.itens],
                input_dto.distancia_km,
                input_dto.valor_por_kg_km or VALOR_POR_KG_KM_PADRAO,
                (
                    VALOR_MINIMO_FRETE_PADRAO if input_dto.valor_minimo_frete is None
                    else input_dto.valor_minimo_frete
                ),
            )

        return self._executar(operacao)

    # =========================================================================
    # Transportes agendados
    # =========================================================================

    def reagendar_transporte(
        self, pedido_id: int, transporte_id: int, input_dto: ReagendarTransporteInputDTO
    ) -> Result[dict]:
        def operacao():
            with self.uow:
                pedido = self._obter_pedido(pedido_id)
                transporte = self._obter_transporte(pedido, transporte_id)
                transporte.reagendar(input_dto.nova_data_agendamento, input_dto.observacoes)
                self.pedido_repo.save(pedido)
            logger.info(f"Transporte {transporte_id} do pedido {pedido_id} reagendado")
            return transporte_to_dict(transporte)

        return self._executar(operacao)

    def atualizar_valor_frete(
        self, pedido_id: int, transporte_id: int, input_dto: AtualizarValorFreteInputDTO
    ) -> Result[dict]:
        def operacao():
            with self.uow:
                pedido = self._obter_pedido(pedido_id)
                transporte = self._obter_transporte(pedido, transporte_id)
                transporte.alterar_valor_frete(input_dto.novo_valor_frete, input_dto.motivo)
                self.pedido_repo.save(pedido)
            return transporte_to_dict(transporte)

        return self._executar(operacao)

    def listar_transportes_pedido(self, pedido_id: int) -> Result[List[dict]]:
        def operacao():
            pedido = self._obter_pedido(pedido_id)
            return [
                transporte_to_dict(t) for item in pedido.itens for t in item.transportes
            ]

        return self._executar(operacao)

    def obter_resumo_transporte(self, pedido_id: int) -> Result[ResumoTransportePedido]:
        return self._executar(
            lambda: self.agendamento_service.calcular_resumo(self._obter_pedido(pedido_id))
        )

    def validar_multiplos_agendamentos(
        self, pedido_id: int, solicitacoes: List[SolicitacaoAgendamentoInputDTO]
    ) -> Result[ValidacaoAgendamento]:
        """Valida um lote de agendamentos sem gravá-los."""
        def operacao():
            if not solicitacoes:
                raise ValidationError(
                    "Lista de agendamentos não pode ser vazia", field="agendamentos"
                )
            pedido = self._obter_pedido(pedido_id)

            itens = []
            for solicitacao in solicitacoes:
                item = pedido.obter_item(solicitacao.pedido_item_id)
                if item is None:
                    raise EntityNotFoundError(
                        "Item não encontrado no pedido",
                        entity_type="PedidoItem",
                        entity_id=solicitacao.pedido_item_id,
                    )
                itens.append(SolicitacaoAgendamento(
                    item=item,
                    quantidade=to_decimal(solicitacao.quantidade, "quantidade"),
                    data_agendamento=solicitacao.data_agendamento,
                ))
            return self.agendamento_service.validar_multiplos_agendamentos(itens)

        return self._executar(operacao)


# =============================================================================
# Proposta
# =============================================================================

class PropostaService:
    """
    Protocolo de negociação de um pedido.

    client_id identifica o canal: PRODUTOR_MOBILE (comprador) ou
    FORNECEDOR_WEB (fornecedor).

    Example:
        result = service.criar_proposta(
            pedido_id=1, usuario_id=10, client_id=PRODUTOR_MOBILE,
            input_dto=CriarPropostaInputDTO(acao_comprador="Aceitou"),
        )
        result.is_success
    """

    def __init__(
        self,
        pedido_repo: PedidoRepository,
        proposta_repo: PropostaRepository,
        uow: UnitOfWork,
    ):
        self.pedido_repo = pedido_repo
        self.proposta_repo = proposta_repo
        self.uow = uow

    def criar_proposta(
        self,
        pedido_id: int,
        usuario_id: int,
        client_id: str,
        input_dto: CriarPropostaInputDTO,
    ) -> Result[PropostaOutputDTO]:
        pedido = self.pedido_repo.get_by_id(pedido_id)
        if not pedido:
            return Result.failure("O pedido não pode ser encontrado", "PEDIDO_NAO_ENCONTRADO")

        if pedido.status.eh_cancelado:
            return Result.failure(
                "Não é possível continuar com a proposta, pois este pedido encontra-se cancelado.",
                "PEDIDO_CANCELADO",
            )

        if pedido.status == StatusPedido.FECHADO:
            return Result.failure(
                "Não é possível continuar com a proposta, pois este pedido encontra-se negociado.",
                "PEDIDO_FECHADO",
            )

        if client_id == FORNECEDOR_WEB and pedido.status != StatusPedido.EM_NEGOCIACAO:
            return Result.failure(
                "A negociação só pode ser iniciada pelo comprador.", "NEGOCIACAO_NAO_INICIADA"
            )

        try:
            if client_id == PRODUTOR_MOBILE:
                return self._proposta_produtor(pedido, usuario_id, input_dto)
            if client_id == FORNECEDOR_WEB:
                return self._proposta_fornecedor(pedido, usuario_id, input_dto)
        except DomainException as e:
            logger.warning(f"Proposta rejeitada para pedido {pedido_id}: {e}")
            return Result.from_exception(e)

        return Result.failure(
            f"Tipo de cliente não implementado: {client_id}", "CLIENTE_NAO_SUPORTADO"
        )

    def _proposta_produtor(
        self, pedido: Pedido, usuario_id: int, input_dto: CriarPropostaInputDTO
    ) -> Result[PropostaOutputDTO]:
        ultima = self.proposta_repo.get_ultima_por_pedido(pedido.id)

        if ultima is None:
            acao = AcaoCompradorPedido.INICIOU
            observacao = "Iniciou a negociação"
        else:
            if not input_dto.acao_comprador:
                return Result.failure("Informar uma ação.", "ACAO_OBRIGATORIA")
            acao = AcaoCompradorPedido.from_string(input_dto.acao_comprador)
            observacao = input_dto.observacao

        with self.uow:
            if acao == AcaoCompradorPedido.ACEITOU:
                pedido.recalcular_totais()
                pedido.fechar()
                self.pedido_repo.save(pedido)
                self.uow.publish_event(_evento_fechado(pedido))
            elif acao == AcaoCompradorPedido.CANCELOU:
                pedido.cancelar_por_comprador()
                self.pedido_repo.save(pedido)
                self.uow.publish_event(_evento_cancelado_comprador(pedido))

            if ultima is not None and ultima.acao_comprador == acao:
                return Result.success(PropostaOutputDTO.from_entity(ultima))

            proposta = Proposta.do_produtor(pedido.id, acao, usuario_id, observacao)
            self.proposta_repo.save(proposta)
            self.uow.publish_event(_evento_proposta(proposta))

        logger.info(f"Proposta do produtor no pedido {pedido.id}: {acao.value}")
        return Result.success(PropostaOutputDTO.from_entity(proposta))

    def _proposta_fornecedor(
        self, pedido: Pedido, usuario_id: int, input_dto: CriarPropostaInputDTO
    ) -> Result[PropostaOutputDTO]:
        if not input_dto.observacao or not input_dto.observacao.strip():
            return Result.failure("Informar uma observação", "OBSERVACAO_OBRIGATORIA")

        with self.uow:
            proposta = Proposta.do_fornecedor(pedido.id, input_dto.observacao, usuario_id)
            self.proposta_repo.save(proposta)
            self.uow.publish_event(_evento_proposta(proposta))

        logger.info(f"Proposta do fornecedor no pedido {pedido.id}")
        return Result.success(PropostaOutputDTO.from_entity(proposta))

    def listar_propostas(
        self, pedido_id: int, pagina: int = 1, por_pagina: int = 20
    ) -> Result[PaginatedResultDTO]:
        if not self.pedido_repo.get_by_id(pedido_id):
            return Result.failure("O pedido não pode ser encontrado", "PEDIDO_NAO_ENCONTRADO")
        params = PaginacaoParams.criar(pagina, por_pagina)
        return Result.success(
            self.proposta_repo.list_por_pedido(pedido_id, params).map(
                PropostaOutputDTO.from_entity
            )
        )

    def obter_ultima_proposta(self, pedido_id: int) -> Result[Optional[PropostaOutputDTO]]:
        proposta = self.proposta_repo.get_ultima_por_pedido(pedido_id)
        return Result.success(PropostaOutputDTO.from_entity(proposta) if proposta else None)


# =============================================================================
# Job de prazo limite
# =============================================================================

class CancelarPedidosComPrazoUltrapassadoService:
    """
    Cancela pedidos em negociação com prazo limite ultrapassado.

    Executado periodicamente pelo Celery beat.
    """

    def __init__(self, pedido_repo: PedidoRepository, uow: UnitOfWork):
        self.pedido_repo = pedido_repo
        self.uow = uow

    def execute(self, agora: Optional[datetime] = None) -> int:
        agora = agora or datetime.now()

        with self.uow:
            pedidos = self.pedido_repo.list_com_prazo_ultrapassado(agora)
            for pedido in pedidos:
                pedido.cancelar_por_tempo_limite()
                self.pedido_repo.save(pedido)
                self.uow.publish_event(PedidoCanceladoPorTempoLimiteEvent(
                    aggregate_id=pedido.id,
                    fornecedor_id=pedido.fornecedor_id,
                    produtor_id=pedido.produtor_id,
                    data_limite_interacao=pedido.data_limite_interacao.isoformat(),
                ))

        if pedidos:
            logger.info(f"{len(pedidos)} pedido(s) cancelado(s) por tempo limite")
        return len(pedidos)
