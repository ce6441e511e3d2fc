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


class DeleteProductUseCase:
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
    async def delete(self, *, product_id: UUID, caller_id: UUID) -> None:
        product = await self.product_query_repo.get_by_id(product_id)
        if not product:
            metrics.record_product_operation(operation='delete', result='not_found')
            raise NotFoundError('Product does not exist.')

        try:
            product.ensure_owned_by(caller_id)
        except OwnershipError:
            metrics.record_product_operation(operation='delete', result='forbidden')
            raise

        if not await self.product_command_repo.delete(product_id):
            metrics.record_product_operation(operation='delete', result='not_found')
            raise NotFoundError('Product does not exist.')

        metrics.record_product_operation(operation='delete', result='ok')
        Logger.base.info(f'🗑️ [DELETE_PRODUCT] {product_id} by seller {caller_id}')
