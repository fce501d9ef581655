"""
Repository Base - Implementação base de repositórios com Django ORM.

Fornece funcionalidades comuns para todos os repositórios dos módulos:
- CRUD com ids inteiros (create quando id é None, upsert caso contrário)
- Paginação (PaginacaoParams -> PaginatedResultDTO)
- Filtros genéricos
- Otimização de queries (select_related, prefetch_related)
- Cache opcional via Django cache framework

Princípios:
- Repositórios são stateless
- Não contêm lógica de negócio
- Apenas persistência e queries
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Generic, List, Optional, Type, TypeVar
import logging

from django.db import models
from django.db.models import QuerySet

from agriis.core.shared.dtos import PaginacaoParams, PaginatedResultDTO

logger = logging.getLogger(__name__)

T = TypeVar("T")  # Entity type
M = TypeVar("M", bound=models.Model)  # Model type


class BaseRepository(ABC, Generic[T, M]):
    """
    Classe base abstrata para repositórios Django.

    Subclasses definem model_class e as conversões entity <-> model.
    Agregados com coleções filhas sobrescrevem _save_children.

    Example:
        class DjangoCulturaRepository(BaseRepository[Cultura, CulturaModel]):
            model_class = CulturaModel
            default_order_field = "nome"

            def to_entity(self, model):
                return CulturaMapper.to_entity(model)

            def to_model_data(self, entity):
                return CulturaMapper.to_model_data(entity)
    """

    model_class: Type[M]

    # Campos para select_related (otimização N+1)
    select_related_fields: List[str] = []

    # Campos para prefetch_related (reverse FK)
    prefetch_related_fields: List[str] = []

    default_order_field: str = "-criado_em"

    @abstractmethod
    def to_entity(self, model: M) -> T:
        """Converte Model Django para Entity de domínio."""
        raise NotImplementedError

    @abstractmethod
    def to_model_data(self, entity: T) -> Dict[str, Any]:
        """Campos do model (sem id) a partir da entidade."""
        raise NotImplementedError

    def _get_base_queryset(self) -> QuerySet:
        qs = self.model_class.objects.all()

        if self.select_related_fields:
            qs = qs.select_related(*self.select_related_fields)

        if self.prefetch_related_fields:
            qs = qs.prefetch_related(*self.prefetch_related_fields)

        return qs

    def save(self, entity: T) -> T:
        """
        Persiste entidade (create ou update).

        Entidades transientes (id None) recebem o id gerado pelo banco.

        Args:
            entity: Entidade a persistir

        Returns:
            A mesma entidade, com id preenchido
        """
        model_data = self.to_model_data(entity)

        if entity.id is None:
            model = self.model_class.objects.create(**model_data)
            entity.id = model.id
        else:
            model, _ = self.model_class.objects.update_or_create(
                id=entity.id,
                defaults=model_data,
            )

        self._save_children(entity, model)

        logger.debug(f"{self.model_class.__name__} saved: {entity.id}")
        return entity

    def _save_children(self, entity: T, model: M) -> None:
        """Hook para persistir coleções filhas do agregado."""

    def get_by_id(self, entity_id: int) -> Optional[T]:
        try:
            model = self._get_base_queryset().get(id=entity_id)
            return self.to_entity(model)
        except self.model_class.DoesNotExist:
            return None

    def delete(self, entity_id: int) -> bool:
        deleted_count, _ = self.model_class.objects.filter(id=entity_id).delete()
        return deleted_count > 0

    def exists(self, entity_id: int) -> bool:
        return self.model_class.objects.filter(id=entity_id).exists()

    def count(self) -> int:
        return self.model_class.objects.count()

    def list_all(self) -> List[T]:
        """
        Lista todas as entidades.

        Warning:
            Sem paginação. Use com cuidado em tabelas grandes.
        """
        qs = self._get_base_queryset().order_by(self.default_order_field)
        return [self.to_entity(m) for m in qs]

    def filter_by(self, order_by: Optional[str] = None, **filters) -> List[T]:
        """Lista entidades que atendem aos filtros."""
        qs = self._apply_filters(self._get_base_queryset(), filters)
        qs = qs.order_by(order_by or self.default_order_field)
        return [self.to_entity(m) for m in qs]

    def first_by(self, **filters) -> Optional[T]:
        model = self._apply_filters(self._get_base_queryset(), filters).first()
        return self.to_entity(model) if model else None

    def list_paginated(
        self,
        params: PaginacaoParams,
        filters: Optional[Dict[str, Any]] = None,
        order_by: Optional[str] = None,
    ) -> PaginatedResultDTO:
        """
        Lista entidades com paginação e filtros.

        Args:
            params: Parâmetros de paginação
            filters: Filtros como dict (valores None são ignorados)
            order_by: Campo de ordenação (default: default_order_field)
        """
        qs = self._get_base_queryset()

        if filters:
            qs = self._apply_filters(qs, filters)

        qs = qs.order_by(order_by or self.default_order_field)

        total = qs.count()
        page = qs[params.offset:params.offset + params.por_pagina]

        return PaginatedResultDTO(
            items=[self.to_entity(m) for m in page],
            total=total,
            pagina=params.pagina,
            por_pagina=params.por_pagina,
        )

    def _apply_filters(self, qs: QuerySet, filters: Dict[str, Any]) -> QuerySet:
        """
        Aplica filtros ao queryset.

        - valores None são ignorados
        - listas viram filtro __in
        - demais valores são repassados como lookup do ORM
        """
        for key, value in filters.items():
            if value is None:
                continue

            if isinstance(value, (list, tuple, set)) and not key.endswith("__in"):
                qs = qs.filter(**{f"{key}__in": list(value)})
            else:
                qs = qs.filter(**{key: value})

        return qs


class CachingRepositoryMixin:
    """
    Mixin para adicionar cache de get_by_id ao repositório.

    Usa Django cache framework (Redis em produção, LocMem em dev).

    Example:
        class DjangoCulturaRepository(CachingRepositoryMixin, BaseRepository):
            cache_timeout = 300
    """

    cache_timeout: int = 60
    cache_prefix: str = "agriis"

    def _get_cache_key(self, entity_id) -> str:
        return f"{self.cache_prefix}:{self.model_class.__name__}:{entity_id}"

    def get_by_id(self, entity_id):
        from django.core.cache import cache

        cache_key = self._get_cache_key(entity_id)
        cached = cache.get(cache_key)

        if cached is not None:
            logger.debug(f"Cache hit: {cache_key}")
            return cached

        entity = super().get_by_id(entity_id)

        if entity is not None:
            cache.set(cache_key, entity, self.cache_timeout)

        return entity

    def save(self, entity):
        from django.core.cache import cache

        entity = super().save(entity)
        cache.delete(self._get_cache_key(entity.id))
        return entity

    def delete(self, entity_id) -> bool:
        from django.core.cache import cache

        result = super().delete(entity_id)
        cache.delete(self._get_cache_key(entity_id))
        return result
