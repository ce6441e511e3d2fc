from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from src.service.catalog.app.dto.product_summary import ProductSummary
from src.service.catalog.domain.entity.product_entity import ProductEntity
from src.service.catalog.domain.value_object.product_filter import ProductFilter


class IProductQueryRepo(ABC):
    """Product read operations"""

    @abstractmethod
    async def get_by_id(self, product_id: UUID) -> Optional[ProductEntity]:
        pass

    @abstractmethod
    async def list_summaries(
        self, *, product_filter: ProductFilter, skip: int, limit: int
    ) -> List[ProductSummary]:
        """One window of the filtered products in insertion order, descriptions shortened."""
        pass

    @abstractmethod
    async def count(self, *, product_filter: ProductFilter) -> int:
        pass
