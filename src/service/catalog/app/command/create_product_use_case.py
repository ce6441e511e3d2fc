from decimal import Decimal
from typing import Self
from uuid import UUID

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.platform.metrics.catalog_metrics import metrics
from src.service.catalog.app.interface.i_product_command_repo import IProductCommandRepo
from src.service.catalog.domain.entity.product_entity import ProductEntity


class CreateProductUseCase:
    def __init__(self, product_command_repo: IProductCommandRepo) -> None:
        self.product_command_repo = product_command_repo

    @classmethod
    @inject
    def depends(
        cls,
        product_command_repo: IProductCommandRepo = Depends(
            Provide[Container.product_command_repo]
        ),
    ) -> Self:
        return cls(product_command_repo=product_command_repo)

    @Logger.io
    async def create(
        self,
        *,
        seller_id: UUID,
        name: str,
        brand: str,
        category: str,
        price: Decimal,
        available_quantity: int,
        free_shipping: bool,
        description: str,
        image: str,
    ) -> ProductEntity:
        product = ProductEntity.create(
            seller_id=seller_id,
            name=name,
            brand=brand,
            category=category,
            price=price,
            available_quantity=available_quantity,
            free_shipping=free_shipping,
            description=description,
            image=image,
        )

        created = await self.product_command_repo.create(product)
        metrics.record_product_operation(operation='create', result='ok')
        Logger.base.info(f'🆕 [CREATE_PRODUCT] {created.id} by seller {seller_id}')
        return created
