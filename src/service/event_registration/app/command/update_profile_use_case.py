from datetime import datetime, timezone
from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.database.unit_of_work import AbstractUnitOfWork
from src.platform.exception.exceptions import DomainError, NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.event_registration.domain.entity.admin_user_entity import AdminUserEntity
from src.service.event_registration.domain.principal import Principal


class UpdateProfileUseCase:
    def __init__(self, *, uow: AbstractUnitOfWork) -> None:
        self.uow = uow

    @classmethod
    @inject
    def depends(
        cls, uow: AbstractUnitOfWork = Depends(Provide[Container.unit_of_work])
    ) -> Self:
        return cls(uow=uow)

    @Logger.io
    async def execute(self, *, principal: Principal, name: str) -> Principal:
        name = (name or '').strip()
        if not name:
            raise DomainError('Name is required')
        if principal.id is None:
            raise NotFoundError('User not found')

        async with self.uow:
            current = await self.uow.principal_query_repo.get_by_id(
                principal_id=principal.id, is_admin=principal.is_admin
            )
            if current is None:
                raise NotFoundError('User not found')

            current.name = name
            current.updated_at = datetime.now(timezone.utc)
            if isinstance(current, AdminUserEntity):
                updated: Principal = await self.uow.admin_user_command_repo.update(admin=current)
            else:
                updated = await self.uow.user_command_repo.update(user=current)
            await self.uow.commit()

        return updated
