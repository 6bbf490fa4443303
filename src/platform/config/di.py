"""
https://python-dependency-injector.ets-labs.org/index.html
https://python-dependency-injector.ets-labs.org/examples/fastapi-sqlalchemy.html
"""

from dependency_injector import containers, providers

from src.platform.config.core_setting import Settings
from src.platform.database.db_setting import Database
from src.platform.database.unit_of_work import SqlAlchemyUnitOfWork
from src.service.event_registration.driven_adapter.repo.event_query_repo_impl import (
    EventQueryRepoImpl,
)
from src.service.event_registration.driven_adapter.repo.payment_query_repo_impl import (
    PaymentQueryRepoImpl,
)
from src.service.event_registration.driven_adapter.repo.principal_query_repo_impl import (
    PrincipalQueryRepoImpl,
)
from src.service.event_registration.driven_adapter.repo.registration_query_repo_impl import (
    RegistrationQueryRepoImpl,
)
from src.service.event_registration.driven_adapter.repo.user_query_repo_impl import (
    UserQueryRepoImpl,
)
from src.service.event_registration.driven_adapter.security.bcrypt_password_hasher import (
    BcryptPasswordHasher,
)
from src.service.event_registration.driving_adapter.http_controller.auth.jwt_auth import JwtAuth


class Container(containers.DeclarativeContainer):
    # Configuration
    config_service = providers.Singleton(Settings)

    # Database (uses AsyncEngineManager with settings from config_service)
    database = providers.Singleton(Database)

    # Unit of Work - one per command use case (fresh session + transaction)
    unit_of_work = providers.Factory(
        SqlAlchemyUnitOfWork, session_factory=database.provided.session
    )

    # Query repositories (stateless - use session_factory per-request)
    principal_query_repo = providers.Singleton(
        PrincipalQueryRepoImpl, session_factory=database.provided.session
    )
    user_query_repo = providers.Singleton(
        UserQueryRepoImpl, session_factory=database.provided.session
    )
    event_query_repo = providers.Singleton(
        EventQueryRepoImpl, session_factory=database.provided.session
    )
    registration_query_repo = providers.Singleton(
        RegistrationQueryRepoImpl, session_factory=database.provided.session
    )
    payment_query_repo = providers.Singleton(
        PaymentQueryRepoImpl, session_factory=database.provided.session
    )

    # Auth services
    password_hasher = providers.Singleton(BcryptPasswordHasher)
    jwt_auth = providers.Singleton(JwtAuth)


container = Container()


def cleanup() -> None:
    container.reset_singletons()
