from typing import AsyncContextManager, Callable, Optional

from pydantic import SecretStr
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.database.orm_db_setting import translate_store_errors
from src.platform.logging.loguru_io import Logger
from src.service.catalog.app.interface.i_password_hasher import IPasswordHasher
from src.service.catalog.app.interface.i_user_query_repo import IUserQueryRepo
from src.service.catalog.domain.entity.user_entity import UserEntity, UserRole
from src.service.catalog.driven_adapter.model.user_model import UserModel


class UserQueryRepoImpl(IUserQueryRepo):
    def __init__(
        self,
        session_factory: Callable[..., AsyncContextManager[AsyncSession]],
        password_hasher: IPasswordHasher,
    ) -> None:
        self.session_factory = session_factory
        self.password_hasher = password_hasher

    async def _get_model_by_email(self, email: str) -> Optional[UserModel]:
        async with self.session_factory() as session:
            with translate_store_errors('get user by email'):
                result = await session.execute(select(UserModel).where(UserModel.email == email))
                return result.scalar_one_or_none()

    @Logger.io
    async def exists_by_email(self, email: str) -> bool:
        async with self.session_factory() as session:
            with translate_store_errors('check user email'):
                result = await session.execute(
                    select(UserModel.id).where(UserModel.email == email)
                )
                return result.scalar_one_or_none() is not None

    @Logger.io
    async def verify_password(self, email: str, plain_password: str) -> Optional[UserEntity]:
        user_model = await self._get_model_by_email(email)
        if not user_model:
            return None

        if not self.password_hasher.verify_password(
            plain_password=SecretStr(plain_password), hashed_password=user_model.hashed_password
        ):
            return None

        return self._model_to_entity(user_model)

    def _model_to_entity(self, user_model: UserModel) -> UserEntity:
        return UserEntity(
            id=user_model.id,
            email=user_model.email,
            first_name=user_model.first_name,
            last_name=user_model.last_name,
            role=UserRole(user_model.role),
            created_at=user_model.created_at,
        )
