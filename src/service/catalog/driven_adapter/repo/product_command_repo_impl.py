from typing import AsyncContextManager, Callable
from uuid import UUID

from sqlalchemy import delete, update
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.database.orm_db_setting import translate_store_errors
from src.platform.logging.loguru_io import Logger
from src.service.catalog.app.interface.i_product_command_repo import IProductCommandRepo
from src.service.catalog.domain.entity.product_entity import ProductEntity
from src.service.catalog.driven_adapter.model.product_model import ProductModel


class ProductCommandRepoImpl(IProductCommandRepo):
    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]):
        self.session_factory = session_factory

    @Logger.io
    async def create(self, product: ProductEntity) -> ProductEntity:
        async with self.session_factory() as session:
            with translate_store_errors('create product'):
                product_model = ProductModel(
                    id=product.id,
                    name=product.name,
                    brand=product.brand,
                    category=product.category,
                    price=product.price,
                    available_quantity=product.available_quantity,
                    free_shipping=product.free_shipping,
                    description=product.description,
                    image=product.image,
                    seller_id=product.seller_id,
                )
                session.add(product_model)
                await session.commit()
                await session.refresh(product_model)

        product.id = product_model.id
        product.created_at = product_model.created_at
        return product

    @Logger.io
    async def update(self, product: ProductEntity) -> bool:
        # seller_id and id are never part of the SET clause
        stmt = (
            update(ProductModel)
            .where(ProductModel.id == product.id)
            .values(
                name=product.name,
                brand=product.brand,
                category=product.category,
                price=product.price,
                available_quantity=product.available_quantity,
                free_shipping=product.free_shipping,
                description=product.description,
                image=product.image,
            )
        )
        async with self.session_factory() as session:
            with translate_store_errors('update product'):
                result = await session.execute(stmt)
                await session.commit()
                return result.rowcount > 0  # type: ignore[attr-defined]

    @Logger.io
    async def delete(self, product_id: UUID) -> bool:
        async with self.session_factory() as session:
            with translate_store_errors('delete product'):
                result = await session.execute(
                    delete(ProductModel).where(ProductModel.id == product_id)
                )
                await session.commit()
                return result.rowcount > 0  # type: ignore[attr-defined]
