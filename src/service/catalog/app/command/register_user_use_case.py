from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends
from pydantic import SecretStr

from src.platform.config.di import Container
from src.platform.exception.exceptions import ConflictError
from src.platform.logging.loguru_io import Logger
from src.platform.metrics.catalog_metrics import metrics
from src.service.catalog.app.interface.i_password_hasher import IPasswordHasher
from src.service.catalog.app.interface.i_user_command_repo import IUserCommandRepo
from src.service.catalog.app.interface.i_user_query_repo import IUserQueryRepo
from src.service.catalog.domain.entity.user_entity import UserEntity, UserRole


class RegisterUserUseCase:
    def __init__(
        self,
        user_command_repo: IUserCommandRepo,
        user_query_repo: IUserQueryRepo,
        password_hasher: IPasswordHasher,
    ) -> None:
        self.user_command_repo = user_command_repo
        self.user_query_repo = user_query_repo
        self.password_hasher = password_hasher

    @classmethod
    @inject
    def depends(
        cls,
        user_command_repo: IUserCommandRepo = Depends(Provide[Container.user_command_repo]),
        user_query_repo: IUserQueryRepo = Depends(Provide[Container.user_query_repo]),
        password_hasher: IPasswordHasher = Depends(Provide[Container.password_hasher]),
    ) -> Self:
        return cls(
            user_command_repo=user_command_repo,
            user_query_repo=user_query_repo,
            password_hasher=password_hasher,
        )

    @Logger.io
    async def register(
        self,
        *,
        email: str,
        password: SecretStr,
        first_name: str,
        last_name: str,
        role: UserRole,
    ) -> UserEntity:
        user_entity = UserEntity.register(
            email=email,
            first_name=first_name,
            last_name=last_name,
            role=role,
            plain_password=password,
            password_hasher=self.password_hasher,
        )

        # Fast path; the unique index still guards concurrent registrations
        if await self.user_query_repo.exists_by_email(user_entity.email):
            raise ConflictError(f'User with email {user_entity.email} already exists')

        created = await self.user_command_repo.create(user_entity)
        metrics.record_registration(role=created.role.value)
        Logger.base.info(f'👤 [REGISTER] {created.role.value} {created.id} registered')
        return created
