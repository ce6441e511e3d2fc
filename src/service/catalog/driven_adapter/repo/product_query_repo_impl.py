from typing import AsyncContextManager, Callable, List, Optional, TypeVar
from uuid import UUID

from sqlalchemy import Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.config.core_setting import settings
from src.platform.database.orm_db_setting import translate_store_errors
from src.platform.logging.loguru_io import Logger
from src.service.catalog.app.dto.product_summary import ProductSummary
from src.service.catalog.app.interface.i_product_query_repo import IProductQueryRepo
from src.service.catalog.domain.entity.product_entity import ProductEntity
from src.service.catalog.domain.value_object.product_filter import ProductFilter
from src.service.catalog.driven_adapter.model.product_model import ProductModel


_S = TypeVar('_S', bound=Select)


def apply_product_filter(stmt: _S, product_filter: ProductFilter) -> _S:
    """The one place listing predicates are built; page fetch and count both go through it."""
    if product_filter.seller_id is not None:
        stmt = stmt.where(ProductModel.seller_id == product_filter.seller_id)
    if product_filter.search_text:
        # autoescape keeps user-typed % and _ literal
        stmt = stmt.where(ProductModel.name.icontains(product_filter.search_text, autoescape=True))
    return stmt


class ProductQueryRepoImpl(IProductQueryRepo):
    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]) -> None:
        self.session_factory = session_factory
        self.preview_length = settings.LIST_DESCRIPTION_PREVIEW_LENGTH

    @Logger.io
    async def get_by_id(self, product_id: UUID) -> Optional[ProductEntity]:
        async with self.session_factory() as session:
            with translate_store_errors('get product'):
                result = await session.execute(
                    select(ProductModel).where(ProductModel.id == product_id)
                )
                product_model = result.scalar_one_or_none()

        return self._model_to_entity(product_model) if product_model else None

    @Logger.io
    async def list_summaries(
        self, *, product_filter: ProductFilter, skip: int, limit: int
    ) -> List[ProductSummary]:
        stmt = select(
            ProductModel.id,
            ProductModel.name,
            ProductModel.brand,
            ProductModel.price,
            ProductModel.category,
            ProductModel.free_shipping,
            ProductModel.available_quantity,
            func.substr(ProductModel.description, 1, self.preview_length).label('description'),
            ProductModel.image,
        )
        stmt = (
            apply_product_filter(stmt, product_filter)
            .order_by(ProductModel.created_at, ProductModel.id)
            .offset(skip)
            .limit(limit)
        )
        async with self.session_factory() as session:
            with translate_store_errors('list products'):
                rows = (await session.execute(stmt)).all()

        return [
            ProductSummary(
                id=row.id,
                name=row.name,
                brand=row.brand,
                price=row.price,
                category=row.category,
                free_shipping=row.free_shipping,
                available_quantity=row.available_quantity,
                description=row.description,
                image=row.image,
            )
            for row in rows
        ]

    @Logger.io
    async def count(self, *, product_filter: ProductFilter) -> int:
        stmt = apply_product_filter(
            select(func.count()).select_from(ProductModel), product_filter
        )
        async with self.session_factory() as session:
            with translate_store_errors('count products'):
                return (await session.execute(stmt)).scalar_one()

    def _model_to_entity(self, product_model: ProductModel) -> ProductEntity:
        return ProductEntity(
            id=product_model.id,
            name=product_model.name,
            brand=product_model.brand,
            category=product_model.category,
            price=product_model.price,
            available_quantity=product_model.available_quantity,
            free_shipping=product_model.free_shipping,
            description=product_model.description,
            image=product_model.image,
            seller_id=product_model.seller_id,
            created_at=product_model.created_at,
        )
