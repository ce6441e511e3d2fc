from typing import Optional

from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Cookie, Depends, Response, status

from src.platform.config.core_setting import settings
from src.platform.config.di import Container
from src.platform.constant.route_constant import USER_LOGIN, USER_ME, USER_REGISTER
from src.platform.logging.loguru_io import Logger
from src.service.catalog.app.command.register_user_use_case import RegisterUserUseCase
from src.service.catalog.app.interface.i_user_query_repo import IUserQueryRepo
from src.service.catalog.domain.entity.user_entity import UserEntity
from src.service.catalog.driving_adapter.http_controller.auth.jwt_auth import JwtAuth
from src.service.catalog.driving_adapter.http_controller.schema.user_schema import (
    LoginRequest,
    RegisterUserRequest,
    UserResponse,
)


router = APIRouter(tags=['user'])


@inject
async def get_current_user(
    jwt_auth: JwtAuth = Depends(Provide[Container.jwt_auth]),
    token: Optional[str] = Cookie(None, alias=settings.AUTH_COOKIE_NAME),
) -> UserEntity:
    """Caller identity from the session cookie (stateless, no DB query)"""
    return jwt_auth.get_current_user_info_from_jwt(token)


def _to_response(user_entity: UserEntity) -> UserResponse:
    return UserResponse(
        id=user_entity.id,
        email=user_entity.email,
        first_name=user_entity.first_name,
        last_name=user_entity.last_name,
        role=user_entity.role,
    )


@router.post(USER_REGISTER, response_model=UserResponse, status_code=status.HTTP_201_CREATED)
@Logger.io
async def register(
    request: RegisterUserRequest,
    use_case: RegisterUserUseCase = Depends(RegisterUserUseCase.depends),
) -> UserResponse:
    user_entity = await use_case.register(
        email=request.email,
        password=request.password,
        first_name=request.first_name,
        last_name=request.last_name,
        role=request.role,
    )
    return _to_response(user_entity)


@router.post(USER_LOGIN, response_model=UserResponse)
@Logger.io
@inject
async def login(
    response: Response,
    request: LoginRequest,
    user_query_repo: IUserQueryRepo = Depends(Provide[Container.user_query_repo]),
    jwt_auth: JwtAuth = Depends(Provide[Container.jwt_auth]),
) -> UserResponse:
    user_entity = await jwt_auth.authenticate_user(
        user_query_repo=user_query_repo,
        email=request.email,
        password=request.password.get_secret_value(),
    )

    response.set_cookie(
        key=settings.AUTH_COOKIE_NAME,
        value=jwt_auth.create_jwt_token(user_entity),
        max_age=settings.TOKEN_EXPIRE_DAYS * 24 * 60 * 60,
        httponly=True,
        samesite='lax',
        secure=not settings.DEBUG,
    )

    return _to_response(user_entity)


@router.get(USER_ME, response_model=UserResponse)
@Logger.io
async def get_me(current_user: UserEntity = Depends(get_current_user)) -> UserResponse:
    return _to_response(current_user)
