from typing import Self
from uuid import UUID

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.catalog.app.interface.i_product_query_repo import IProductQueryRepo
from src.service.catalog.domain.entity.product_entity import ProductEntity


class GetProductUseCase:
    def __init__(self, product_query_repo: IProductQueryRepo) -> None:
        self.product_query_repo = product_query_repo

    @classmethod
    @inject
    def depends(
        cls,
        product_query_repo: IProductQueryRepo = Depends(Provide[Container.product_query_repo]),
    ) -> Self:
        return cls(product_query_repo=product_query_repo)

    @Logger.io
    async def get_by_id(self, product_id: UUID) -> ProductEntity:
        """Any signed-in user may read any product."""
        product = await self.product_query_repo.get_by_id(product_id)
        if not product:
            raise NotFoundError('Product does not exist.')
        return product
