from decimal import Decimal
from typing import Self
from uuid import UUID

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import NotFoundError, OwnershipError
from src.platform.logging.loguru_io import Logger
from src.platform.metrics.catalog_metrics import metrics
from src.service.catalog.app.interface.i_product_command_repo import IProductCommandRepo
from src.service.catalog.app.interface.i_product_query_repo import IProductQueryRepo
from src.service.catalog.domain.entity.product_entity import ProductEntity


class EditProductUseCase:
    def __init__(
        self,
        product_command_repo: IProductCommandRepo,
        product_query_repo: IProductQueryRepo,
    ) -> None:
        self.product_command_repo = product_command_repo
        self.product_query_repo = product_query_repo

    @classmethod
    @inject
    def depends(
        cls,
        product_command_repo: IProductCommandRepo = Depends(
            Provide[Container.product_command_repo]
        ),
        product_query_repo: IProductQueryRepo = Depends(Provide[Container.product_query_repo]),
    ) -> Self:
        return cls(product_command_repo=product_command_repo, product_query_repo=product_query_repo)

    @Logger.io
    async def edit(
        self,
        *,
        product_id: UUID,
        caller_id: UUID,
        name: str,
        brand: str,
        category: str,
        price: Decimal,
        available_quantity: int,
        free_shipping: bool,
        description: str,
        image: str,
    ) -> ProductEntity:
        product = await self.product_query_repo.get_by_id(product_id)
        if not product:
            metrics.record_product_operation(operation='edit', result='not_found')
            raise NotFoundError('Product does not exist.')

        try:
            product.ensure_owned_by(caller_id)
        except OwnershipError:
            metrics.record_product_operation(operation='edit', result='forbidden')
            raise

        product.overwrite(
            name=name,
            brand=brand,
            category=category,
            price=price,
            available_quantity=available_quantity,
            free_shipping=free_shipping,
            description=description,
            image=image,
        )

        # Deleted between the read and the write
        if not await self.product_command_repo.update(product):
            metrics.record_product_operation(operation='edit', result='not_found')
            raise NotFoundError('Product does not exist.')

        metrics.record_product_operation(operation='edit', result='ok')
        Logger.base.info(f'✏️ [EDIT_PRODUCT] {product_id} by seller {caller_id}')
        return product
