from abc import ABC, abstractmethod

from pydantic import SecretStr


class IPasswordHasher(ABC):
    @abstractmethod
    def hash_password(self, *, plain_password: SecretStr) -> str:
        pass

    @abstractmethod
    def verify_password(self, *, plain_password: SecretStr, hashed_password: str) -> bool:
        pass
