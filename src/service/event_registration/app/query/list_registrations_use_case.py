from typing import Self
from uuid import UUID

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import ForbiddenError, NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.event_registration.app.dto.page_dto import Page, PageRequest
from src.service.event_registration.app.dto.registration_dto import (
    RegistrationDetail,
    RegistrationFilter,
    RegistrationStats,
)
from src.service.event_registration.app.interface.i_registration_query_repo import (
    IRegistrationQueryRepo,
)
from src.service.event_registration.domain.principal import Principal


class ListRegistrationsUseCase:
    def __init__(self, *, registration_query_repo: IRegistrationQueryRepo) -> None:
        self.registration_query_repo = registration_query_repo

    @classmethod
    @inject
    def depends(
        cls,
        registration_query_repo: IRegistrationQueryRepo = Depends(
            Provide[Container.registration_query_repo]
        ),
    ) -> Self:
        return cls(registration_query_repo=registration_query_repo)

    @Logger.io
    async def list_mine(self, *, principal: Principal, page: PageRequest) -> Page[RegistrationDetail]:
        return await self.registration_query_repo.list_registrations(
            registration_filter=RegistrationFilter(user_id=principal.id), page=page
        )

    @Logger.io
    async def list_all(
        self, *, registration_filter: RegistrationFilter, page: PageRequest
    ) -> Page[RegistrationDetail]:
        return await self.registration_query_repo.list_registrations(
            registration_filter=registration_filter, page=page
        )

    @Logger.io
    async def get(self, *, registration_id: UUID, principal: Principal) -> RegistrationDetail:
        detail = await self.registration_query_repo.get_detail(registration_id=registration_id)
        if detail is None:
            raise NotFoundError('Registration not found')
        if not principal.is_admin and detail.registration.user_id != principal.id:
            raise ForbiddenError('Access denied')
        return detail

    @Logger.io
    async def stats(self) -> RegistrationStats:
        return await self.registration_query_repo.get_stats()
