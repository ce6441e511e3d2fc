from datetime import datetime
from enum import Enum
from typing import TYPE_CHECKING, Optional
from uuid import UUID

import attrs
from pydantic import SecretStr

from src.platform.exception.exceptions import LoginError
from src.platform.types.identity import new_id


if TYPE_CHECKING:
    from src.service.catalog.app.interface.i_password_hasher import IPasswordHasher


class UserRole(str, Enum):
    BUYER = 'buyer'
    SELLER = 'seller'


@attrs.define
class UserEntity:
    email: str = ''
    first_name: str = ''
    last_name: str = ''
    hashed_password: str = attrs.field(default='', repr=False)  # Hide from repr for security
    id: Optional[UUID] = None
    role: UserRole = UserRole.BUYER
    created_at: Optional[datetime] = None

    @classmethod
    def register(
        cls,
        *,
        email: str,
        first_name: str,
        last_name: str,
        role: UserRole,
        plain_password: SecretStr,
        password_hasher: 'IPasswordHasher',
    ) -> 'UserEntity':
        return cls(
            id=new_id(),
            email=email.strip().lower(),
            first_name=first_name,
            last_name=last_name,
            role=role,
            hashed_password=password_hasher.hash_password(plain_password=plain_password),
        )

    @staticmethod
    def validate_user_exists(user_entity: Optional['UserEntity']) -> 'UserEntity':
        if not user_entity:
            raise LoginError('LOGIN_BAD_CREDENTIALS')

        return user_entity
