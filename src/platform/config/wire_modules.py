"""
Wire Modules Configuration

Modules holding `Provide[...]` markers; shared between production and tests.
"""

from types import ModuleType

from src.service.catalog.app.command import (
    create_product_use_case,
    delete_product_use_case,
    edit_product_use_case,
    register_user_use_case,
)
from src.service.catalog.app.query import get_product_use_case, list_products_use_case
from src.service.catalog.driving_adapter.http_controller import user_controller


WIRE_MODULES: list[ModuleType] = [
    register_user_use_case,
    create_product_use_case,
    edit_product_use_case,
    delete_product_use_case,
    get_product_use_case,
    list_products_use_case,
    user_controller,
]
