from decimal import Decimal
from unittest.mock import Mock
from uuid import UUID

import pytest

from src.service.catalog.app.command.create_product_use_case import CreateProductUseCase
from src.service.catalog.domain.entity.product_entity import ProductEntity


@pytest.mark.unit
class TestCreateProductUseCase:
    @pytest.mark.asyncio
    async def test_sets_owner_and_normalizes_price(
        self, mock_product_command_repo: Mock, seller_id: UUID
    ):
        # Arrange
        use_case = CreateProductUseCase(product_command_repo=mock_product_command_repo)

        # Act
        product = await use_case.create(
            seller_id=seller_id,
            name='Trail Runner',
            brand='Acme',
            category='shoes',
            price=Decimal('25.50'),
            available_quantity=3,
            free_shipping=False,
            description='desc',
            image='img.png',
        )

        # Assert
        mock_product_command_repo.create.assert_awaited_once()
        persisted: ProductEntity = mock_product_command_repo.create.await_args.args[0]
        assert persisted.seller_id == seller_id
        assert persisted.price == 2550
        assert persisted.id is not None
        assert product is persisted
