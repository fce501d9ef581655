"""
Módulo de Pedidos.

Pedido (carrinho em negociação), itens, transportes e propostas.
"""

from .entities import (
    AcaoCompradorPedido,
    Pedido,
    PedidoItem,
    PedidoItemTransporte,
    Proposta,
    StatusCarrinho,
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
)
from .ports import (
    InMemoryPedidoRepository,
    InMemoryPropostaRepository,
    PedidoRepository,
    PropostaRepository,
)
from .transportes import (
    DimensoesProduto,
    FreteCalculoService,
    TipoCalculoPeso,
    TransporteAgendamentoService,
)
from .use_cases import (
    FORNECEDOR_WEB,
    PRODUTOR_MOBILE,
    CancelarPedidosComPrazoUltrapassadoService,
    CarrinhoComprasService,
    PedidoService,
    PropostaService,
    TransporteService,
)

__all__ = [
    "Pedido",
    "PedidoItem",
    "PedidoItemTransporte",
    "Proposta",
    "TotaisPedido",
    "StatusPedido",
    "StatusCarrinho",
    "AcaoCompradorPedido",
    "PedidoCriadoEvent",
    "PedidoFechadoEvent",
    "PedidoCanceladoPeloCompradorEvent",
    "PedidoCanceladoPorTempoLimiteEvent",
    "PropostaCriadaEvent",
    "CriarPedidoInputDTO",
    "AtualizarPedidoInputDTO",
    "AdicionarItemCarrinhoInputDTO",
    "AgendarTransporteInputDTO",
    "CriarPropostaInputDTO",
    "ReagendarTransporteInputDTO",
    "AtualizarValorFreteInputDTO",
    "SolicitacaoAgendamentoInputDTO",
    "ItemFreteInputDTO",
    "CalcularFreteInputDTO",
    "CalcularFreteConsolidadoInputDTO",
    "PedidoOutputDTO",
    "PropostaOutputDTO",
    "PedidoRepository",
    "PropostaRepository",
    "InMemoryPedidoRepository",
    "InMemoryPropostaRepository",
    "CarrinhoComprasService",
    "PedidoService",
    "PropostaService",
    "TransporteService",
    "DimensoesProduto",
    "TipoCalculoPeso",
    "FreteCalculoService",
    "TransporteAgendamentoService",
    "CancelarPedidosComPrazoUltrapassadoService",
    "PRODUTOR_MOBILE",
    "FORNECEDOR_WEB",
]
