from typing import Optional, Self
from uuid import UUID

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.platform.metrics.catalog_metrics import metrics
from src.service.catalog.app.dto.product_summary import ProductPage
from src.service.catalog.app.interface.i_product_query_repo import IProductQueryRepo
from src.service.catalog.domain.value_object.page_window import PageWindow
from src.service.catalog.domain.value_object.product_filter import ProductFilter


class ListProductsUseCase:
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
    async def list_for_buyer(
        self, *, page: int, limit: int, search_text: Optional[str] = None
    ) -> ProductPage:
        """Whole catalog, optionally narrowed by a case-insensitive name search."""
        Logger.base.info(f'🛒 [LIST_FOR_BUYER] page={page} limit={limit} search={search_text!r}')
        result = await self._list(
            window=PageWindow(page=page, limit=limit),
            product_filter=ProductFilter(search_text=search_text),
        )
        metrics.record_listing(view='buyer', size=len(result.items))
        return result

    @Logger.io
    async def list_for_seller(self, *, page: int, limit: int, seller_id: UUID) -> ProductPage:
        Logger.base.info(f'📋 [LIST_FOR_SELLER] seller={seller_id} page={page} limit={limit}')
        result = await self._list(
            window=PageWindow(page=page, limit=limit),
            product_filter=ProductFilter(seller_id=seller_id),
        )
        metrics.record_listing(view='seller', size=len(result.items))
        return result

    async def _list(self, *, window: PageWindow, product_filter: ProductFilter) -> ProductPage:
        # Two separate reads; a concurrent write can make total_page briefly disagree with items
        items = await self.product_query_repo.list_summaries(
            product_filter=product_filter, skip=window.skip, limit=window.limit
        )
        total_count = await self.product_query_repo.count(product_filter=product_filter)
        return ProductPage(items=items, total_page=window.total_pages(total_count))
