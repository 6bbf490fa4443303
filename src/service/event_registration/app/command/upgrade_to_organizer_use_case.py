from datetime import datetime, timezone
from typing import List, Optional, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.database.unit_of_work import AbstractUnitOfWork
from src.platform.exception.exceptions import ForbiddenError, NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.event_registration.app.dto.auth_dto import AuthResult
from src.service.event_registration.app.dto.token_dto import TokenType
from src.service.event_registration.app.interface.i_token_service import ITokenService
from src.service.event_registration.domain.entity.user_entity import UserEntity
from src.service.event_registration.domain.principal import Principal


class UpgradeToOrganizerUseCase:
    """
    Promote a user to organizer (irreversible)

    A new access token is issued with role=organizer; tokens already handed out
    keep role=user until they expire or are refreshed.
    """

    def __init__(self, *, uow: AbstractUnitOfWork, token_service: ITokenService) -> None:
        self.uow = uow
        self.token_service = token_service

    @classmethod
    @inject
    def depends(
        cls,
        uow: AbstractUnitOfWork = Depends(Provide[Container.unit_of_work]),
        token_service: ITokenService = Depends(Provide[Container.jwt_auth]),
    ) -> Self:
        return cls(uow=uow, token_service=token_service)

    @Logger.io
    async def execute(
        self,
        *,
        principal: Principal,
        organization_name: Optional[str],
        organization_type: Optional[str],
        event_types: Optional[List[str]],
        organization_description: Optional[str] = None,
        organization_website: Optional[str] = None,
    ) -> AuthResult:
        if principal.is_admin or principal.id is None:
            raise ForbiddenError('Admins cannot become organizers')

        async with self.uow:
            user = await self.uow.principal_query_repo.get_by_id(
                principal_id=principal.id, is_admin=False
            )
            if not isinstance(user, UserEntity):
                raise NotFoundError('User not found')

            user.upgrade_to_organizer(
                organization_name=organization_name,
                organization_type=organization_type,
                event_types=event_types,
                organization_description=organization_description,
                organization_website=organization_website,
                now=datetime.now(timezone.utc),
            )
            user = await self.uow.user_command_repo.update(user=user)
            await self.uow.commit()

        Logger.base.info(f'🏢 [UPGRADE] User {user.id} is now an organizer')
        return AuthResult(
            principal=user,
            access_token=self.token_service.create_token(
                principal=user, token_type=TokenType.ACCESS
            ),
        )
