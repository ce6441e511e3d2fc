from typing import AsyncContextManager, Callable

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.database.orm_db_setting import translate_store_errors
from src.platform.exception.exceptions import ConflictError
from src.platform.logging.loguru_io import Logger
from src.service.catalog.app.interface.i_user_command_repo import IUserCommandRepo
from src.service.catalog.domain.entity.user_entity import UserEntity, UserRole
from src.service.catalog.driven_adapter.model.user_model import UserModel


class UserCommandRepoImpl(IUserCommandRepo):
    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]):
        self.session_factory = session_factory

    @Logger.io
    async def create(self, user_entity: UserEntity) -> UserEntity:
        async with self.session_factory() as session:
            with translate_store_errors('create user'):
                user_model = UserModel(
                    id=user_entity.id,
                    email=user_entity.email,
                    hashed_password=user_entity.hashed_password,
                    first_name=user_entity.first_name,
                    last_name=user_entity.last_name,
                    role=user_entity.role.value,
                )
                session.add(user_model)
                try:
                    await session.commit()
                except IntegrityError as e:
                    # The unique email index is the only constraint a new user can violate
                    raise ConflictError(
                        f'User with email {user_entity.email} already exists'
                    ) from e
                await session.refresh(user_model)

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
