from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends
from pydantic import SecretStr

from src.platform.config.di import Container
from src.platform.exception.exceptions import AuthenticationError, DomainError
from src.platform.logging.loguru_io import Logger
from src.platform.metrics.registration_metrics import metrics
from src.service.event_registration.app.dto.auth_dto import AuthResult
from src.service.event_registration.app.interface.i_password_hasher import IPasswordHasher
from src.service.event_registration.app.interface.i_principal_query_repo import (
    IPrincipalQueryRepo,
)
from src.service.event_registration.app.interface.i_token_service import ITokenService


class LoginUseCase:
    def __init__(
        self,
        *,
        principal_query_repo: IPrincipalQueryRepo,
        password_hasher: IPasswordHasher,
        token_service: ITokenService,
    ) -> None:
        self.principal_query_repo = principal_query_repo
        self.password_hasher = password_hasher
        self.token_service = token_service

    @classmethod
    @inject
    def depends(
        cls,
        principal_query_repo: IPrincipalQueryRepo = Depends(
            Provide[Container.principal_query_repo]
        ),
        password_hasher: IPasswordHasher = Depends(Provide[Container.password_hasher]),
        token_service: ITokenService = Depends(Provide[Container.jwt_auth]),
    ) -> Self:
        return cls(
            principal_query_repo=principal_query_repo,
            password_hasher=password_hasher,
            token_service=token_service,
        )

    @Logger.io
    async def execute(self, *, email: str, password: SecretStr) -> AuthResult:
        """
        Authenticate by email and password

        The admin table is consulted first; an address present in both tables
        always signs in as the admin.
        """
        if not email or not password.get_secret_value():
            raise DomainError('Email and password are required')

        principal = await self.principal_query_repo.get_by_email(email=email.strip().lower())
        if principal is None or not self.password_hasher.verify_password(
            plain_password=password, hashed_password=principal.password_hash
        ):
            metrics.record_auth_failure(reason='login')
            raise AuthenticationError('Invalid email or password')

        Logger.base.info(
            f'🔑 [LOGIN] {"admin" if principal.is_admin else principal.role.value} {principal.id}'
        )
        tokens = self.token_service.create_token_pair(principal=principal)
        return AuthResult(
            principal=principal,
            access_token=tokens.access_token,
            refresh_token=tokens.refresh_token,
        )
