"""
Testes de frete e agendamento de transportes.

Coverage:
- FreteCalculoService: peso nominal, peso cubado, valor mínimo, consolidado
- PedidoItemTransporte: reagendamento, alteração de frete, limite de 90 dias
- TransporteAgendamentoService: lote de agendamentos e resumo
- TransporteService: operações sobre o agregado Pedido
"""

from datetime import datetime, timedelta
from decimal import Decimal

import pytest

from agriis.core.pedidos.dtos import (
    AdicionarItemCarrinhoInputDTO,
    AgendarTransporteInputDTO,
    AtualizarValorFreteInputDTO,
    CalcularFreteConsolidadoInputDTO,
    CalcularFreteInputDTO,
    CriarPedidoInputDTO,
    ItemFreteInputDTO,
    ReagendarTransporteInputDTO,
    SolicitacaoAgendamentoInputDTO,
)
from agriis.core.pedidos.entities import (
    PedidoItem,
    PedidoItemTransporte,
    validar_data_agendamento,
)
from agriis.core.pedidos.transportes import (
    DimensoesProduto,
    FreteCalculoService,
    SolicitacaoAgendamento,
    TipoCalculoPeso,
    TransporteAgendamentoService,
)
from agriis.core.pedidos.use_cases import TransporteService
from agriis.core.shared.exceptions import ValidationError

AGORA = datetime(2025, 3, 10, 8, 0)


def _saco_sementes(densidade=None):
    # 50 x 40 x 30 cm = 0,06 m³
    return DimensoesProduto.criar(50, 40, 30, peso_nominal=25, densidade=densidade)


def _caixa_pequena():
    # 10 x 10 x 10 cm = 0,001 m³
    return DimensoesProduto.criar(10, 10, 10, peso_nominal=2)


class TestDimensoesProduto:

    def test_volume_em_metros_cubicos(self):
        assert _saco_sementes().volume == Decimal("0.06")

    @pytest.mark.parametrize("campo, medidas, mensagem", [
        ("altura", (0, 40, 30, 25), "Altura deve ser maior que zero"),
        ("largura", (50, -1, 30, 25), "Largura deve ser maior que zero"),
        ("comprimento", (50, 40, 0, 25), "Comprimento deve ser maior que zero"),
        ("peso_nominal", (50, 40, 30, 0), "Peso nominal deve ser maior que zero"),
    ])
    def test_medidas_nao_positivas(self, campo, medidas, mensagem):
        with pytest.raises(ValidationError) as exc_info:
            DimensoesProduto.criar(*medidas)

        assert exc_info.value.message == mensagem
        assert exc_info.value.field == campo

    def test_densidade_nao_positiva(self):
        with pytest.raises(ValidationError) as exc_info:
            _saco_sementes(densidade=0)

        assert exc_info.value.field == "densidade"


class TestFreteCalculo:

    @pytest.fixture
    def frete(self):
        return FreteCalculoService()

    def test_peso_nominal(self, frete):
        calculo = frete.calcular_frete(
            _saco_sementes(), TipoCalculoPeso.PESO_NOMINAL, quantidade=100, distancia_km=300
        )

        assert calculo.peso_total == Decimal("2500")
        assert calculo.volume_total == Decimal("6")
        assert calculo.peso_cubado_total is None
        assert calculo.peso_para_frete == Decimal("2500")
        assert calculo.valor_frete == Decimal("37500")

    def test_peso_cubado_usa_densidade(self, frete):
        calculo = frete.calcular_frete(
            _saco_sementes(densidade=300), "PesoCubado", quantidade=100, distancia_km=300
        )

        assert calculo.peso_cubado_total == Decimal("1800")
        assert calculo.peso_para_frete == Decimal("1800")
        assert calculo.valor_frete == Decimal("27000")
        assert calculo.tipo_calculo == TipoCalculoPeso.PESO_CUBADO

    def test_peso_cubado_sem_densidade_usa_nominal(self, frete):
        calculo = frete.calcular_frete(
            _saco_sementes(), TipoCalculoPeso.PESO_CUBADO, quantidade=100, distancia_km=300
        )

        assert calculo.peso_para_frete == Decimal("2500")

    def test_peso_nominal_ignora_densidade(self, frete):
        calculo = frete.calcular_frete(
            _saco_sementes(densidade=300), TipoCalculoPeso.PESO_NOMINAL, 100, 300
        )

        assert calculo.peso_cubado_total == Decimal("1800")
        assert calculo.peso_para_frete == Decimal("2500")

    def test_aplica_valor_minimo(self, frete):
        calculo = frete.calcular_frete(_saco_sementes(), TipoCalculoPeso.PESO_NOMINAL, 1, 10)

        assert calculo.valor_frete == Decimal("50.00")

    def test_valor_por_kg_km_informado(self, frete):
        calculo = frete.calcular_frete(
            _saco_sementes(), TipoCalculoPeso.PESO_NOMINAL, 10, 100,
            valor_por_kg_km=Decimal("0.10"), valor_minimo_frete=0,
        )

        assert calculo.valor_frete == Decimal("2500")

    @pytest.mark.parametrize("quantidade, distancia, campo", [
        (0, 300, "quantidade"),
        (10, 0, "distancia_km"),
        (10, -5, "distancia_km"),
    ])
    def test_quantidade_e_distancia_positivas(self, frete, quantidade, distancia, campo):
        with pytest.raises(ValidationError) as exc_info:
            frete.calcular_frete(_saco_sementes(), "PesoNominal", quantidade, distancia)

        assert exc_info.value.field == campo

    def test_dimensoes_obrigatorias(self, frete):
        with pytest.raises(ValidationError) as exc_info:
            frete.calcular_frete(None, "PesoNominal", 1, 10)

        assert exc_info.value.message == "Dimensões do produto são obrigatórias"

    def test_consolidado_aplica_minimo_sobre_o_total(self, frete):
        consolidado = frete.calcular_frete_consolidado(
            [
                (_saco_sementes(), TipoCalculoPeso.PESO_NOMINAL, 1),
                (_caixa_pequena(), TipoCalculoPeso.PESO_NOMINAL, 5),
            ],
            distancia_km=10,
        )

        assert [c.valor_frete for c in consolidado.calculos] == [Decimal("12.5"), Decimal("5")]
        assert consolidado.peso_total == Decimal("35")
        assert consolidado.volume_total == Decimal("0.065")
        assert consolidado.peso_cubado_total is None
        assert consolidado.valor_frete == Decimal("50.00")

    def test_consolidado_acima_do_minimo(self, frete):
        consolidado = frete.calcular_frete_consolidado(
            [
                (_saco_sementes(densidade=300), TipoCalculoPeso.PESO_CUBADO, 1),
                (_caixa_pequena(), TipoCalculoPeso.PESO_NOMINAL, 5),
            ],
            distancia_km=300,
        )

        # 18 kg cubados + 10 kg nominais
        assert consolidado.valor_frete == Decimal("420")
        assert consolidado.peso_cubado_total == Decimal("18")
        assert consolidado.to_dict()["valor_frete_consolidado"] == 420.0
        assert len(consolidado.to_dict()["calculos_individuais"]) == 2

    def test_consolidado_sem_itens(self, frete):
        with pytest.raises(ValidationError) as exc_info:
            frete.calcular_frete_consolidado([], distancia_km=10)

        assert exc_info.value.message == "Lista de itens não pode ser vazia"


class TestAgendamentoTransporte:

    @pytest.mark.parametrize("data, mensagem", [
        (AGORA, "Data de agendamento deve ser futura"),
        (AGORA - timedelta(days=1), "Data de agendamento deve ser futura"),
        (AGORA + timedelta(days=90, minutes=1),
         "Data de agendamento não pode ser superior a 90 dias"),
    ])
    def test_data_fora_da_janela(self, data, mensagem):
        with pytest.raises(ValidationError) as exc_info:
            validar_data_agendamento(data, agora=AGORA)

        assert exc_info.value.message == mensagem
        assert exc_info.value.field == "data_agendamento"

    def test_limite_de_90_dias_inclusivo(self):
        validar_data_agendamento(AGORA + timedelta(days=90), agora=AGORA)

    def test_agendar_alem_do_limite(self):
        transporte = PedidoItemTransporte.criar(quantidade=1)

        with pytest.raises(ValidationError):
            transporte.agendar(datetime.now() + timedelta(days=91))

    def test_reagendar_registra_historico(self):
        transporte = PedidoItemTransporte.criar(quantidade=1)
        transporte.atualizar_observacoes("Entregar pela manhã")
        transporte.atualizar_informacoes_transporte({"placa": "ABC1D23"})
        nova_data = datetime.now() + timedelta(days=5)

        transporte.reagendar(nova_data, "Chuva na região")

        assert transporte.data_agendamento == nova_data
        assert transporte.observacoes == (
            f"Entregar pela manhã\nReagendado para {nova_data:%d/%m/%Y %H:%M} - Chuva na região"
        )
        historico = transporte.informacoes_transporte["historico_reagendamentos"]
        assert historico[0]["nova_data_agendamento"] == nova_data.isoformat()
        assert transporte.informacoes_transporte["placa"] == "ABC1D23"

    def test_reagendar_para_data_passada(self):
        transporte = PedidoItemTransporte.criar(quantidade=1)

        with pytest.raises(ValidationError):
            transporte.reagendar(datetime.now() - timedelta(days=1))

        assert transporte.observacoes is None

    def test_alterar_valor_frete(self):
        transporte = PedidoItemTransporte.criar(quantidade=1, valor_frete=100)

        transporte.alterar_valor_frete(Decimal("120.5"), motivo="Pedágio")

        assert transporte.valor_frete == Decimal("120.5")
        assert transporte.observacoes == (
            "Valor do frete alterado de R$ 100.00 para R$ 120.50 - Motivo: Pedágio"
        )

    def test_alterar_valor_frete_negativo(self):
        transporte = PedidoItemTransporte.criar(quantidade=1, valor_frete=100)

        with pytest.raises(ValidationError):
            transporte.alterar_valor_frete(-1)

        assert transporte.valor_frete == Decimal("100")

    def test_validar_multiplos_sem_acumular(self):
        item = PedidoItem.criar(1, 10, 10, 5)
        item.id = 7
        item.adicionar_transporte(PedidoItemTransporte.criar(quantidade=4))
        data = AGORA + timedelta(days=2)

        validacao = TransporteAgendamentoService().validar_multiplos_agendamentos(
            [
                SolicitacaoAgendamento(item, Decimal("6"), data),
                SolicitacaoAgendamento(item, Decimal("6"), data),
                SolicitacaoAgendamento(item, Decimal("7"), data),
                SolicitacaoAgendamento(item, Decimal("1"), AGORA),
            ],
            agora=AGORA,
        )

        assert not validacao.eh_valido
        assert validacao.erros == [
            "Item 7: Quantidade solicitada (7) excede a disponível (6)",
            "Item 7: Data de agendamento deve ser futura",
        ]

    def test_resumo(self):
        item = PedidoItem.criar(1, 10, 10, 5)
        proximo = AGORA + timedelta(days=1)
        sem_data = PedidoItemTransporte.criar(quantidade=2, valor_frete=30)
        agendado = PedidoItemTransporte.criar(quantidade=3, valor_frete=70)
        agendado.data_agendamento = proximo
        agendado.atualizar_peso_volume(peso_total=75, volume_total=Decimal("0.18"))
        item.adicionar_transporte(sem_data)
        item.adicionar_transporte(agendado)

        class _Pedido:
            itens = [item, PedidoItem.criar(1, 11, 1, 5)]

        resumo = TransporteAgendamentoService().calcular_resumo(_Pedido(), agora=AGORA)

        assert resumo.to_dict() == {
            "total_itens": 2,
            "itens_com_transporte": 1,
            "total_transportes": 2,
            "transportes_agendados": 1,
            "peso_total": 75.0,
            "volume_total": 0.18,
            "valor_frete_total": 100.0,
            "proximo_agendamento": proximo.isoformat(),
        }


# =============================================================================
# TransporteService
# =============================================================================

def _item_frete(**kwargs):
    dados = dict(
        quantidade=Decimal("100"),
        altura=Decimal("50"),
        largura=Decimal("40"),
        comprimento=Decimal("30"),
        peso_nominal=Decimal("25"),
    )
    dados.update(kwargs)
    return ItemFreteInputDTO(**dados)


@pytest.fixture
def transporte_service(pedido_repo, uow):
    return TransporteService(pedido_repo, uow)


@pytest.fixture
def pedido_com_transporte(pedido_service, produtor, catalogo):
    """Pedido com o produto 10 (5 un.) e um transporte de 2 un. em 3 dias."""
    pedido = pedido_service.criar(
        CriarPedidoInputDTO(fornecedor_id=1, produtor_id=produtor.id)
    ).value
    item_id = pedido_service.adicionar_item_carrinho(
        pedido.id, AdicionarItemCarrinhoInputDTO(produto_id=10, quantidade=Decimal("5"))
    ).value.itens[0]["id"]
    pedido = pedido_service.agendar_transporte(pedido.id, item_id, AgendarTransporteInputDTO(
        quantidade=Decimal("2"),
        data_agendamento=datetime.now() + timedelta(days=3),
        valor_frete=Decimal("150"),
        peso_total=Decimal("50"),
    )).value
    return pedido


def _ids(pedido):
    item = pedido.itens[0]
    return item["id"], item["transportes"][0]["id"]


class TestTransporteService:

    def test_calcular_frete(self, transporte_service):
        result = transporte_service.calcular_frete(
            CalcularFreteInputDTO(item=_item_frete(), distancia_km=Decimal("300"))
        )

        assert result.is_success
        assert result.value.to_dict()["valor_frete"] == 37500.0
        assert result.value.to_dict()["tipo_calculo"] == "PesoNominal"

    def test_calcular_frete_tipo_invalido(self, transporte_service):
        result = transporte_service.calcular_frete(CalcularFreteInputDTO(
            item=_item_frete(tipo_calculo_peso="PesoLiquido"), distancia_km=Decimal("300"),
        ))

        assert result.is_failure
        assert "TipoCalculoPeso" in result.validation_errors

    def test_calcular_frete_minimo_zero_informado(self, transporte_service):
        result = transporte_service.calcular_frete(CalcularFreteInputDTO(
            item=_item_frete(quantidade=Decimal("1")),
            distancia_km=Decimal("10"),
            valor_minimo_frete=Decimal("0"),
        ))

        assert result.value.valor_frete == Decimal("12.5")

    def test_calcular_frete_consolidado(self, transporte_service):
        result = transporte_service.calcular_frete_consolidado(CalcularFreteConsolidadoInputDTO(
            itens=[
                _item_frete(quantidade=Decimal("1"), densidade=Decimal("300"),
                            tipo_calculo_peso="PesoCubado"),
                _item_frete(quantidade=Decimal("5"), altura=Decimal("10"), largura=Decimal("10"),
                            comprimento=Decimal("10"), peso_nominal=Decimal("2")),
            ],
            distancia_km=Decimal("300"),
        ))

        assert result.value.valor_frete == Decimal("420")

    def test_calcular_frete_consolidado_vazio(self, transporte_service):
        result = transporte_service.calcular_frete_consolidado(
            CalcularFreteConsolidadoInputDTO(itens=[], distancia_km=Decimal("10"))
        )

        assert result.error == "Lista de itens não pode ser vazia"

    def test_listar_transportes(self, transporte_service, pedido_com_transporte):
        item_id, transporte_id = _ids(pedido_com_transporte)

        result = transporte_service.listar_transportes_pedido(pedido_com_transporte.id)

        assert [t["id"] for t in result.value] == [transporte_id]
        assert result.value[0]["pedido_item_id"] == item_id

    def test_listar_transportes_pedido_inexistente(self, transporte_service):
        result = transporte_service.listar_transportes_pedido(999)

        assert result.error_code == "ENTITY_NOT_FOUND"

    def test_reagendar(self, transporte_service, pedido_repo, uow, pedido_com_transporte):
        _, transporte_id = _ids(pedido_com_transporte)
        nova_data = datetime.now() + timedelta(days=10)

        result = transporte_service.reagendar_transporte(
            pedido_com_transporte.id, transporte_id,
            ReagendarTransporteInputDTO(nova_data, observacoes="Pedido do produtor"),
        )

        assert result.is_success
        assert result.value["data_agendamento"] == nova_data.isoformat()
        salvo = pedido_repo.get_by_id(pedido_com_transporte.id).obter_transporte(transporte_id)
        assert salvo.data_agendamento == nova_data
        assert "Pedido do produtor" in salvo.observacoes

    def test_reagendar_transporte_inexistente(self, transporte_service, pedido_com_transporte):
        result = transporte_service.reagendar_transporte(
            pedido_com_transporte.id, 999,
            ReagendarTransporteInputDTO(datetime.now() + timedelta(days=1)),
        )

        assert result.error == "Transporte não encontrado"
        assert result.error_code == "ENTITY_NOT_FOUND"

    def test_reagendar_alem_de_90_dias(self, transporte_service, pedido_com_transporte):
        _, transporte_id = _ids(pedido_com_transporte)

        result = transporte_service.reagendar_transporte(
            pedido_com_transporte.id, transporte_id,
            ReagendarTransporteInputDTO(datetime.now() + timedelta(days=120)),
        )

        assert result.error == "Data de agendamento não pode ser superior a 90 dias"

    def test_atualizar_valor_frete(self, transporte_service, pedido_com_transporte):
        _, transporte_id = _ids(pedido_com_transporte)

        result = transporte_service.atualizar_valor_frete(
            pedido_com_transporte.id, transporte_id,
            AtualizarValorFreteInputDTO(Decimal("180"), motivo="Diesel"),
        )

        assert result.value["valor_frete"] == 180.0
        assert result.value["observacoes"] == (
            "Valor do frete alterado de R$ 150.00 para R$ 180.00 - Motivo: Diesel"
        )

    def test_validar_multiplos_agendamentos(self, transporte_service, pedido_com_transporte):
        item_id, _ = _ids(pedido_com_transporte)
        data = datetime.now() + timedelta(days=2)

        result = transporte_service.validar_multiplos_agendamentos(pedido_com_transporte.id, [
            SolicitacaoAgendamentoInputDTO(item_id, Decimal("3"), data),
            SolicitacaoAgendamentoInputDTO(item_id, Decimal("4"), data),
        ])

        assert result.is_success
        assert result.value.to_dict() == {
            "eh_valido": False,
            "erros": [f"Item {item_id}: Quantidade solicitada (4) excede a disponível (3)"],
        }

    def test_validar_multiplos_item_inexistente(self, transporte_service, pedido_com_transporte):
        result = transporte_service.validar_multiplos_agendamentos(pedido_com_transporte.id, [
            SolicitacaoAgendamentoInputDTO(999, Decimal("1"), datetime.now() + timedelta(days=1)),
        ])

        assert result.error == "Item não encontrado no pedido"

    def test_validar_multiplos_lista_vazia(self, transporte_service, pedido_com_transporte):
        result = transporte_service.validar_multiplos_agendamentos(pedido_com_transporte.id, [])

        assert result.validation_errors["agendamentos"]

    def test_resumo(self, transporte_service, pedido_com_transporte):
        result = transporte_service.obter_resumo_transporte(pedido_com_transporte.id)

        resumo = result.value.to_dict()
        assert resumo["total_transportes"] == 1
        assert resumo["transportes_agendados"] == 1
        assert resumo["peso_total"] == 50.0
        assert resumo["valor_frete_total"] == 150.0
        assert resumo["proximo_agendamento"] is not None
