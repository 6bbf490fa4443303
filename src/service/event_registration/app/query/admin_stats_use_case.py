from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.event_registration.app.dto.admin_dto import PlatformStats
from src.service.event_registration.app.dto.page_dto import Page, PageRequest
from src.service.event_registration.app.interface.i_event_query_repo import IEventQueryRepo
from src.service.event_registration.app.interface.i_registration_query_repo import (
    IRegistrationQueryRepo,
)
from src.service.event_registration.app.interface.i_user_query_repo import IUserQueryRepo
from src.service.event_registration.domain.entity.user_entity import UserEntity


class AdminStatsUseCase:
    def __init__(
        self,
        *,
        user_query_repo: IUserQueryRepo,
        event_query_repo: IEventQueryRepo,
        registration_query_repo: IRegistrationQueryRepo,
    ) -> None:
        self.user_query_repo = user_query_repo
        self.event_query_repo = event_query_repo
        self.registration_query_repo = registration_query_repo

    @classmethod
    @inject
    def depends(
        cls,
        user_query_repo: IUserQueryRepo = Depends(Provide[Container.user_query_repo]),
        event_query_repo: IEventQueryRepo = Depends(Provide[Container.event_query_repo]),
        registration_query_repo: IRegistrationQueryRepo = Depends(
            Provide[Container.registration_query_repo]
        ),
    ) -> Self:
        return cls(
            user_query_repo=user_query_repo,
            event_query_repo=event_query_repo,
            registration_query_repo=registration_query_repo,
        )

    @Logger.io
    async def platform_stats(self) -> PlatformStats:
        """Revenue is the sum of paid registration amounts"""
        registration_stats = await self.registration_query_repo.get_stats()
        return PlatformStats(
            total_users=await self.user_query_repo.count(),
            total_events=await self.event_query_repo.count(),
            total_registrations=registration_stats.total_registrations,
            total_revenue=registration_stats.total_revenue,
        )

    @Logger.io
    async def list_users(self, *, page: PageRequest) -> Page[UserEntity]:
        return await self.user_query_repo.list_users(page=page)
