from fastapi import Depends

from src.platform.exception.exceptions import CapabilityError
from src.service.catalog.domain.entity.user_entity import UserEntity
from src.service.catalog.domain.enum.capability import Capability
from src.service.catalog.driving_adapter.http_controller.user_controller import (
    get_current_user,
)


class RequireCapability:
    """
    Route gate evaluated before the handler body.

    Authentication failures (401) surface from get_current_user; a signed-in
    caller whose role lacks the capability gets CapabilityError (403).
    """

    def __init__(self, capability: Capability) -> None:
        self.capability = capability

    async def __call__(self, current_user: UserEntity = Depends(get_current_user)) -> UserEntity:
        if not self.capability.permits(current_user.role):
            raise CapabilityError(self.capability.denial_message)
        return current_user


require_user = RequireCapability(Capability.ANY_USER)
require_buyer = RequireCapability(Capability.BUYER)
require_seller = RequireCapability(Capability.SELLER)
