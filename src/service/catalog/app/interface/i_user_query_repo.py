from abc import ABC, abstractmethod
from typing import Optional

from src.service.catalog.domain.entity.user_entity import UserEntity


class IUserQueryRepo(ABC):
    """User read operations"""

    @abstractmethod
    async def exists_by_email(self, email: str) -> bool:
        pass

    @abstractmethod
    async def verify_password(self, email: str, plain_password: str) -> Optional[UserEntity]:
        pass
