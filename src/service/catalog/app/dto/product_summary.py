from typing import List
from uuid import UUID

import attrs


@attrs.frozen
class ProductSummary:
    """Listing row: the product without seller_id, description cut to a preview."""

    id: UUID
    name: str
    brand: str
    price: int
    category: str
    free_shipping: bool
    available_quantity: int
    description: str
    image: str


@attrs.frozen
class ProductPage:
    items: List[ProductSummary]
    total_page: int
