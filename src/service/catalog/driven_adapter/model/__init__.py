"""
Database Models

Import all models here to ensure they are registered with SQLAlchemy
"""

from src.service.catalog.driven_adapter.model.product_model import ProductModel
from src.service.catalog.driven_adapter.model.user_model import UserModel

__all__ = [
    'ProductModel',
    'UserModel',
]
