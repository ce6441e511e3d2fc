"""
Session token issuing and verification

The token carries everything the request pipeline needs to know about the
caller (id and role), so authenticated requests don't hit the user table.
"""

from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional
from uuid import UUID

import jwt

from src.platform.config.core_setting import settings
from src.platform.exception.exceptions import AuthenticationError
from src.service.catalog.app.interface.i_user_query_repo import IUserQueryRepo
from src.service.catalog.domain.entity.user_entity import UserEntity, UserRole


class JwtAuth:
    def __init__(self) -> None:
        self.secret = settings.SECRET_KEY.get_secret_value()
        self.algorithm = settings.ALGORITHM
        self.token_expire_days = settings.TOKEN_EXPIRE_DAYS

    def create_jwt_token(self, user_entity: UserEntity) -> str:
        now = datetime.now(timezone.utc)
        payload = {
            'sub': str(user_entity.id),
            'exp': now + timedelta(days=self.token_expire_days),
            'iat': now,
            'email': user_entity.email,
            'first_name': user_entity.first_name,
            'last_name': user_entity.last_name,
            'role': user_entity.role.value,
        }

        return jwt.encode(payload, self.secret, algorithm=self.algorithm)

    def decode_jwt_token(self, token: str) -> Dict[str, Any]:
        try:
            return jwt.decode(token, self.secret, algorithms=[self.algorithm])
        except jwt.PyJWTError as e:
            raise AuthenticationError('Invalid token') from e

    async def authenticate_user(
        self, user_query_repo: IUserQueryRepo, email: str, password: str
    ) -> UserEntity:
        user_entity = await user_query_repo.verify_password(
            email=email.strip().lower(), plain_password=password
        )
        return UserEntity.validate_user_exists(user_entity)

    def get_current_user_info_from_jwt(self, token: Optional[str]) -> UserEntity:
        if not token:
            raise AuthenticationError('Not authenticated')

        payload = self.decode_jwt_token(token)

        sub = payload.get('sub')
        email = payload.get('email')
        role = payload.get('role')
        if not sub or not email or not role:
            raise AuthenticationError('Invalid token')

        try:
            user_id = UUID(sub)
            user_role = UserRole(role)
        except ValueError as e:
            raise AuthenticationError('Invalid token') from e

        # Rebuilt from the payload, no DB query
        return UserEntity(
            id=user_id,
            email=email,
            first_name=payload.get('first_name', ''),
            last_name=payload.get('last_name', ''),
            role=user_role,
        )
