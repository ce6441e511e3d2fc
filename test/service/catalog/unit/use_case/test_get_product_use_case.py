from unittest.mock import Mock

import pytest

from src.platform.exception.exceptions import NotFoundError
from src.platform.types.identity import new_id
from src.service.catalog.app.query.get_product_use_case import GetProductUseCase
from src.service.catalog.domain.entity.product_entity import ProductEntity


@pytest.mark.unit
class TestGetProductUseCase:
    @pytest.mark.asyncio
    async def test_returns_full_product(
        self, mock_product_query_repo: Mock, existing_product: ProductEntity
    ):
        use_case = GetProductUseCase(product_query_repo=mock_product_query_repo)

        product = await use_case.get_by_id(existing_product.id)

        assert product is existing_product

    @pytest.mark.asyncio
    async def test_missing_is_not_found(self, mock_product_query_repo: Mock):
        mock_product_query_repo.get_by_id.return_value = None
        use_case = GetProductUseCase(product_query_repo=mock_product_query_repo)

        with pytest.raises(NotFoundError):
            await use_case.get_by_id(new_id())
