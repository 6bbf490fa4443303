from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.event_registration.app.dto.event_dto import EventFilter, EventWithStats
from src.service.event_registration.app.dto.page_dto import Page, PageRequest
from src.service.event_registration.app.interface.i_event_query_repo import IEventQueryRepo


class ListEventsUseCase:
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
    async def execute(self, *, event_filter: EventFilter, page: PageRequest) -> Page[EventWithStats]:
        Logger.base.info(f'📋 [LIST-EVENTS] page={page.page} limit={page.limit} {event_filter}')

        events = await self.event_query_repo.list_events(event_filter=event_filter, page=page)

        Logger.base.info(f'✅ [LIST-EVENTS] {len(events.items)} of {events.total} events')
        return events
