from datetime import datetime
from decimal import Decimal
from typing import Optional
from uuid import UUID

import attrs

from src.platform.exception.exceptions import OwnershipError
from src.platform.types.identity import new_id
from src.service.catalog.domain.value_object.money import to_minor_units


@attrs.define
class ProductEntity:
    name: str
    brand: str
    category: str
    price: int = attrs.field(validator=attrs.validators.gt(0))  # minor units
    available_quantity: int = attrs.field(validator=attrs.validators.ge(0))
    free_shipping: bool
    description: str
    image: str
    seller_id: UUID
    id: Optional[UUID] = None
    created_at: Optional[datetime] = None

    @classmethod
    def create(
        cls,
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
    ) -> 'ProductEntity':
        return cls(
            id=new_id(),
            seller_id=seller_id,
            name=name,
            brand=brand,
            category=category,
            price=to_minor_units(price),
            available_quantity=available_quantity,
            free_shipping=free_shipping,
            description=description,
            image=image,
        )

    def ensure_owned_by(self, caller_id: UUID) -> None:
        if self.seller_id != caller_id:
            raise OwnershipError('You are not owner of this product.')

    def overwrite(
        self,
        *,
        name: str,
        brand: str,
        category: str,
        price: Decimal,
        available_quantity: int,
        free_shipping: bool,
        description: str,
        image: str,
    ) -> None:
        """Replace every editable field; id and seller_id are not editable."""
        self.name = name
        self.brand = brand
        self.category = category
        self.price = to_minor_units(price)
        self.available_quantity = available_quantity
        self.free_shipping = free_shipping
        self.description = description
        self.image = image
