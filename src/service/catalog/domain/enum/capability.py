from enum import Enum
from typing import assert_never

from src.service.catalog.domain.entity.user_entity import UserRole


class Capability(str, Enum):
    """What a route requires of its caller before the handler runs."""

    ANY_USER = 'any_user'
    BUYER = 'buyer'
    SELLER = 'seller'

    def permits(self, role: UserRole) -> bool:
        match self:
            case Capability.ANY_USER:
                return True
            case Capability.BUYER:
                return role is UserRole.BUYER
            case Capability.SELLER:
                return role is UserRole.SELLER
            case _:
                assert_never(self)

    @property
    def denial_message(self) -> str:
        match self:
            case Capability.ANY_USER:
                return 'Not authenticated'
            case Capability.BUYER:
                return 'Only buyers can perform this action'
            case Capability.SELLER:
                return 'Only sellers can perform this action'
            case _:
                assert_never(self)
