"""
Unit test fixtures for the catalog service.

Repositories are AsyncMocks; no client, no database.
"""

from datetime import datetime, timezone
from unittest.mock import AsyncMock, Mock
from uuid import UUID

import pytest

from src.platform.types.identity import new_id
from src.service.catalog.domain.entity.product_entity import ProductEntity


@pytest.fixture
def seller_id() -> UUID:
    return new_id()


@pytest.fixture
def other_seller_id() -> UUID:
    return new_id()


@pytest.fixture
def existing_product(seller_id: UUID) -> ProductEntity:
    return ProductEntity(
        id=new_id(),
        name='Trail Runner',
        brand='Acme',
        category='shoes',
        price=2550,
        available_quantity=10,
        free_shipping=True,
        description='Lightweight trail running shoe',
        image='https://cdn.example.com/trail-runner.png',
        seller_id=seller_id,
        created_at=datetime.now(timezone.utc),
    )


@pytest.fixture
def mock_product_command_repo() -> Mock:
    repo = AsyncMock()
    repo.create = AsyncMock(side_effect=lambda product: product)
    repo.update = AsyncMock(return_value=True)
    repo.delete = AsyncMock(return_value=True)
    return repo


@pytest.fixture
def mock_product_query_repo(existing_product: ProductEntity) -> Mock:
    repo = AsyncMock()
    repo.get_by_id = AsyncMock(return_value=existing_product)
    repo.list_summaries = AsyncMock(return_value=[])
    repo.count = AsyncMock(return_value=0)
    return repo
