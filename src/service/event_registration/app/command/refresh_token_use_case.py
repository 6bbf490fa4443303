from typing import Self
from uuid import UUID

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import AuthenticationError, DomainError
from src.platform.logging.loguru_io import Logger
from src.service.event_registration.app.dto.auth_dto import AuthResult
from src.service.event_registration.app.dto.token_dto import TokenType
from src.service.event_registration.app.interface.i_principal_query_repo import (
    IPrincipalQueryRepo,
)
from src.service.event_registration.app.interface.i_token_service import ITokenService


class RefreshTokenUseCase:
    """
    Exchange a refresh token for a new access token

    The principal is re-read from storage so the new token carries the current
    role. The refresh token itself is not rotated.
    """

    def __init__(
        self, *, principal_query_repo: IPrincipalQueryRepo, token_service: ITokenService
    ) -> None:
        self.principal_query_repo = principal_query_repo
        self.token_service = token_service

    @classmethod
    @inject
    def depends(
        cls,
        principal_query_repo: IPrincipalQueryRepo = Depends(
            Provide[Container.principal_query_repo]
        ),
        token_service: ITokenService = Depends(Provide[Container.jwt_auth]),
    ) -> Self:
        return cls(principal_query_repo=principal_query_repo, token_service=token_service)

    @Logger.io
    async def execute(self, *, refresh_token: str) -> AuthResult:
        if not refresh_token:
            raise DomainError('Refresh token is required')

        verification = self.token_service.verify_token(
            token=refresh_token, token_type=TokenType.REFRESH
        )
        if not verification.valid or verification.claims is None:
            raise AuthenticationError('Invalid refresh token')

        try:
            principal_id = UUID(str(verification.claims['id']))
        except ValueError as e:
            raise AuthenticationError('Invalid refresh token') from e

        principal = await self.principal_query_repo.get_by_id(
            principal_id=principal_id, is_admin=bool(verification.claims['isAdmin'])
        )
        if principal is None:
            raise AuthenticationError('User not found')

        return AuthResult(
            principal=principal,
            access_token=self.token_service.create_token(
                principal=principal, token_type=TokenType.ACCESS
            ),
        )
