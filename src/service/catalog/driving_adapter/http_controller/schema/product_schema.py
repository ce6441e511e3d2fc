"""
Product API Schemas

Prices come in as major units (25.50) and go out as stored minor units (2550).
"""

from datetime import datetime
from decimal import Decimal
from typing import Annotated, List, Optional
from uuid import UUID

from pydantic import ConfigDict, Field, StringConstraints

from src.platform.config.core_setting import settings
from src.service.catalog.driving_adapter.http_controller.schema.camel_model import CamelModel


ShortText = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=60)]


class ProductRequest(CamelModel):
    """Add and edit share one payload; edit replaces every field."""

    model_config = ConfigDict(
        json_schema_extra={
            'example': {
                'name': 'Trail Runner 2',
                'brand': 'Acme',
                'category': 'shoes',
                'price': 25.50,
                'availableQuantity': 12,
                'freeShipping': True,
                'description': 'Lightweight trail running shoe',
                'image': 'https://cdn.example.com/trail-runner-2.png',
            }
        }
    )

    name: ShortText
    brand: ShortText
    category: ShortText
    price: Decimal = Field(..., gt=0, le=10_000_000, decimal_places=2)
    available_quantity: int = Field(..., ge=0)
    free_shipping: bool
    description: Annotated[
        str, StringConstraints(strip_whitespace=True, min_length=1, max_length=1000)
    ]
    image: Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=500)]


class SellerListRequest(CamelModel):
    page: int = Field(..., ge=1)
    limit: int = Field(..., ge=1, le=settings.PAGINATION_MAX_LIMIT)


class BuyerListRequest(SellerListRequest):
    model_config = ConfigDict(
        json_schema_extra={'example': {'page': 1, 'limit': 10, 'searchText': 'runner'}}
    )

    # Empty string means no filter
    search_text: Optional[Annotated[str, StringConstraints(strip_whitespace=True, max_length=60)]] = (
        None
    )


class MessageResponse(CamelModel):
    message: str


class ProductDetailResponse(CamelModel):
    id: UUID
    name: str
    brand: str
    category: str
    price: int
    available_quantity: int
    free_shipping: bool
    description: str
    image: str
    seller_id: UUID
    created_at: Optional[datetime] = None


class ProductDetailEnvelope(CamelModel):
    message: str = 'success'
    product_detail: ProductDetailResponse


class ProductSummaryResponse(CamelModel):
    id: UUID
    name: str
    brand: str
    price: int
    category: str
    free_shipping: bool
    available_quantity: int
    description: str
    image: str


class ProductListResponse(CamelModel):
    message: str = 'success'
    product_list: List[ProductSummaryResponse]
    total_page: int
