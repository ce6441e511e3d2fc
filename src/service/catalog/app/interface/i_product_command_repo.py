from abc import ABC, abstractmethod
from uuid import UUID

from src.service.catalog.domain.entity.product_entity import ProductEntity


class IProductCommandRepo(ABC):
    """Product write operations, each committed on its own"""

    @abstractmethod
    async def create(self, product: ProductEntity) -> ProductEntity:
        pass

    @abstractmethod
    async def update(self, product: ProductEntity) -> bool:
        """Overwrite the editable fields; False when the row is gone."""
        pass

    @abstractmethod
    async def delete(self, product_id: UUID) -> bool:
        """False when there was nothing to delete."""
        pass
