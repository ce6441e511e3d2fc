"""
User API Schemas - Pydantic models for request/response
"""

from typing import Annotated, Any
from uuid import UUID

from pydantic import ConfigDict, EmailStr, Field, SecretStr, StringConstraints, field_validator

from src.service.catalog.domain.entity.user_entity import UserRole
from src.service.catalog.driving_adapter.http_controller.schema.camel_model import CamelModel


_EMAIL_MAX_LENGTH = 30

PersonName = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=20)]


def _normalize_email(value: Any) -> Any:
    return value.strip().lower() if isinstance(value, str) else value


class RegisterUserRequest(CamelModel):
    model_config = ConfigDict(
        json_schema_extra={
            'example': {
                'firstName': 'Jane',
                'lastName': 'Doe',
                'email': 'jane@example.com',
                'password': 'P@ssw0rd',
                'role': 'seller',
            }
        }
    )

    first_name: PersonName
    last_name: PersonName
    email: EmailStr
    password: SecretStr = Field(..., min_length=6, max_length=20)
    role: UserRole

    @field_validator('email', mode='before')
    @classmethod
    def normalize_email(cls, v: Any) -> Any:
        return _normalize_email(v)

    @field_validator('email')
    @classmethod
    def check_email_length(cls, v: str) -> str:
        if len(v) > _EMAIL_MAX_LENGTH:
            raise ValueError(f'email must be at most {_EMAIL_MAX_LENGTH} characters')
        return v


class LoginRequest(CamelModel):
    model_config = ConfigDict(
        json_schema_extra={'example': {'email': 'jane@example.com', 'password': 'P@ssw0rd'}}
    )

    email: EmailStr
    password: SecretStr = Field(..., min_length=1, max_length=72)

    @field_validator('email', mode='before')
    @classmethod
    def normalize_email(cls, v: Any) -> Any:
        return _normalize_email(v)


class UserResponse(CamelModel):
    id: UUID
    email: str
    first_name: str
    last_name: str
    role: UserRole
