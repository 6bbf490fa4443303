from typing import Optional, Self
from uuid import UUID

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import AuthenticationError
from src.platform.logging.loguru_io import Logger
from src.platform.metrics.registration_metrics import metrics
from src.service.event_registration.app.dto.token_dto import TokenType
from src.service.event_registration.app.interface.i_principal_query_repo import (
    IPrincipalQueryRepo,
)
from src.service.event_registration.app.interface.i_token_service import ITokenService
from src.service.event_registration.domain.principal import Principal


class GetCurrentPrincipalUseCase:
    """
    Resolve the caller of a request from its access token

    Token claims are only used to locate the row; the returned principal is
    always the stored one, so role changes and deletions take effect on the
    next request.
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
    async def execute(self, *, access_token: Optional[str]) -> Principal:
        if not access_token:
            metrics.record_auth_failure(reason='no_token')
            raise AuthenticationError('No token provided')

        verification = self.token_service.verify_token(
            token=access_token, token_type=TokenType.ACCESS
        )
        if not verification.valid or verification.claims is None:
            metrics.record_auth_failure(reason='invalid_token')
            raise AuthenticationError(verification.error or 'Invalid token')

        try:
            principal_id = UUID(str(verification.claims['id']))
        except ValueError as e:
            metrics.record_auth_failure(reason='invalid_token')
            raise AuthenticationError('Invalid token') from e

        principal = await self.principal_query_repo.get_by_id(
            principal_id=principal_id, is_admin=bool(verification.claims['isAdmin'])
        )
        if principal is None:
            metrics.record_auth_failure(reason='unknown_principal')
            raise AuthenticationError('User not found')
        return principal
