from typing import Self
from uuid import UUID

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.event_registration.app.dto.event_dto import EventWithStats
from src.service.event_registration.app.interface.i_event_query_repo import IEventQueryRepo
from src.service.event_registration.domain.entity.event_entity import EventEntity


class GetEventUseCase:
    def __init__(self, *, event_query_repo: IEventQueryRepo) -> None:
        self.event_query_repo = event_query_repo

    @classmethod
    @inject
    def depends(
        cls,
        event_query_repo: IEventQueryRepo = Depends(Provide[Container.event_query_repo]),
    ) -> Self:
        return cls(event_query_repo=event_query_repo)

    @Logger.io
    async def execute(self, *, event_id: UUID) -> EventWithStats:
        event = await self.event_query_repo.get_with_stats(event_id=event_id)
        if event is None:
            raise NotFoundError('Event not found')
        return event

    @Logger.io
    async def get_entity(self, *, event_id: UUID) -> EventEntity:
        event = await self.event_query_repo.get_by_id(event_id=event_id)
        if event is None:
            raise NotFoundError('Event not found')
        return event
