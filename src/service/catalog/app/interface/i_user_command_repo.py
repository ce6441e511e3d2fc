from abc import ABC, abstractmethod

from src.service.catalog.domain.entity.user_entity import UserEntity


class IUserCommandRepo(ABC):
    """User write operations"""

    @abstractmethod
    async def create(self, user_entity: UserEntity) -> UserEntity:
        """Persist a new user; raises ConflictError when the email is taken."""
        pass
