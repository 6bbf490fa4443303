from typing import Optional
from uuid import UUID

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from opentelemetry import trace

from src.platform.exception.exceptions import ForbiddenError
from src.service.event_registration.app.query.get_current_principal_use_case import (
    GetCurrentPrincipalUseCase,
)
from src.service.event_registration.app.query.get_event_use_case import GetEventUseCase
from src.service.event_registration.domain.entity.admin_user_entity import AdminUserEntity
from src.service.event_registration.domain.entity.event_entity import EventEntity
from src.service.event_registration.domain.entity.user_entity import UserEntity
from src.service.event_registration.domain.enum.user_role import UserRole
from src.service.event_registration.domain.principal import Principal


# auto_error=False: a missing or non-Bearer header is answered with our own 401 envelope
bearer_scheme = HTTPBearer(auto_error=False)


class RoleAuthStrategy:
    @staticmethod
    def is_organizer(user: UserEntity) -> bool:
        return user.role == UserRole.ORGANIZER

    @staticmethod
    def owns_event(user: UserEntity, event: EventEntity) -> bool:
        return event.is_owned_by(user)


async def require_auth(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    use_case: GetCurrentPrincipalUseCase = Depends(GetCurrentPrincipalUseCase.depends),
) -> Principal:
    """Valid access token + principal still present in storage"""
    token = credentials.credentials if credentials else None
    principal = await use_case.execute(access_token=token)
    trace.get_current_span().set_attribute('principal.id', str(principal.id))
    return principal


async def require_user(principal: Principal = Depends(require_auth)) -> UserEntity:
    if not isinstance(principal, UserEntity):
        raise ForbiddenError('User account required')
    return principal


async def require_organizer(principal: Principal = Depends(require_auth)) -> UserEntity:
    if isinstance(principal, UserEntity) and RoleAuthStrategy.is_organizer(principal):
        return principal
    raise ForbiddenError('Organizer access required', needsUpgrade=True)


async def require_event_ownership(
    event_id: UUID,
    organizer: UserEntity = Depends(require_organizer),
    get_event: GetEventUseCase = Depends(GetEventUseCase.depends),
) -> EventEntity:
    event = await get_event.get_entity(event_id=event_id)
    if not RoleAuthStrategy.owns_event(organizer, event):
        raise ForbiddenError('Access denied - you do not own this event')
    return event


async def require_admin(principal: Principal = Depends(require_auth)) -> AdminUserEntity:
    if not isinstance(principal, AdminUserEntity):
        raise ForbiddenError('Admin access required')
    return principal
