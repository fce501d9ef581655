"""
Repositório Django do agregado Combo.
"""

from datetime import datetime
from typing import List

from agriis.core.combos.entities import Combo, StatusCombo

from ..shared.repository import BaseRepository
from .mappers import ComboMapper
from .models import (
    ComboCategoriaDescontoModel,
    ComboItemModel,
    ComboLocalRecebimentoModel,
    ComboModel,
)


class DjangoComboRepository(BaseRepository[Combo, ComboModel]):
    model_class = ComboModel
    prefetch_related_fields = ['itens', 'locais_recebimento', 'categorias_desconto']

    def to_entity(self, model: ComboModel) -> Combo:
        return ComboMapper.to_entity(model)

    def to_model_data(self, entity: Combo) -> dict:
        return ComboMapper.to_model_data(entity)

    def _save_children(self, entity: Combo, model: ComboModel) -> None:
        self._sync(ComboItemModel, model, entity.itens, ComboMapper.item_to_model_data)
        self._sync(
            ComboLocalRecebimentoModel,
            model,
            entity.locais_recebimento,
            ComboMapper.local_to_model_data,
        )
        self._sync(
            ComboCategoriaDescontoModel,
            model,
            entity.categorias_desconto,
            ComboMapper.categoria_to_model_data,
        )

    @staticmethod
    def _sync(child_model, parent: ComboModel, filhos, to_data) -> None:
        ids_mantidos = [f.id for f in filhos if f.id is not None]
        child_model.objects.filter(combo=parent).exclude(id__in=ids_mantidos).delete()

        for filho in filhos:
            data = to_data(filho)
            if filho.id is None:
                filho.id = child_model.objects.create(combo=parent, **data).id
            else:
                child_model.objects.filter(id=filho.id).update(**data)

    def existe_combo_ativo(self, fornecedor_id: int, safra_id: int, nome: str) -> bool:
        return ComboModel.objects.filter(
            fornecedor_id=fornecedor_id,
            safra_id=safra_id,
            nome__iexact=(nome or '').strip(),
            status=StatusCombo.ATIVO.value,
        ).exists()

    def list_por_fornecedor(self, fornecedor_id: int) -> List[Combo]:
        return self.filter_by(fornecedor_id=fornecedor_id)

    def list_vigentes(self, agora: datetime) -> List[Combo]:
        return self.filter_by(
            order_by='data_fim',
            status=StatusCombo.ATIVO.value,
            data_inicio__lte=agora,
            data_fim__gte=agora,
        )

    def list_ativos_expirados(self, agora: datetime) -> List[Combo]:
        return self.filter_by(
            order_by='data_fim',
            status=StatusCombo.ATIVO.value,
            data_fim__lt=agora,
        )
