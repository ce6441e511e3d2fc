"""
https://python-dependency-injector.ets-labs.org/index.html
https://python-dependency-injector.ets-labs.org/examples/fastapi-sqlalchemy.html
"""

from dependency_injector import containers, providers

from src.platform.database.orm_db_setting import Database
from src.service.catalog.driven_adapter.repo.product_command_repo_impl import (
    ProductCommandRepoImpl,
)
from src.service.catalog.driven_adapter.repo.product_query_repo_impl import ProductQueryRepoImpl
from src.service.catalog.driven_adapter.repo.user_command_repo_impl import UserCommandRepoImpl
from src.service.catalog.driven_adapter.repo.user_query_repo_impl import UserQueryRepoImpl
from src.service.catalog.driven_adapter.security.bcrypt_password_hasher import (
    BcryptPasswordHasher,
)
from src.service.catalog.driving_adapter.http_controller.auth.jwt_auth import JwtAuth


class Container(containers.DeclarativeContainer):
    # Database (event-loop-aware engine behind Database.session)
    database = providers.Singleton(Database)

    # Security
    password_hasher = providers.Singleton(BcryptPasswordHasher)
    jwt_auth = providers.Singleton(JwtAuth)

    # Repositories (stateless - use session_factory per call)
    user_command_repo = providers.Singleton(
        UserCommandRepoImpl, session_factory=database.provided.session
    )
    user_query_repo = providers.Singleton(
        UserQueryRepoImpl,
        session_factory=database.provided.session,
        password_hasher=password_hasher,
    )
    product_command_repo = providers.Singleton(
        ProductCommandRepoImpl, session_factory=database.provided.session
    )
    product_query_repo = providers.Singleton(
        ProductQueryRepoImpl, session_factory=database.provided.session
    )


container = Container()


def cleanup() -> None:
    container.reset_singletons()
