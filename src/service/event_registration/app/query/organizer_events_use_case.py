from typing import List, Self
from uuid import UUID

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.event_registration.app.dto.event_dto import (
    EventAnalytics,
    EventWithStats,
    OrganizerDashboard,
)
from src.service.event_registration.app.interface.i_event_query_repo import IEventQueryRepo
from src.service.event_registration.app.interface.i_registration_query_repo import (
    IRegistrationQueryRepo,
)
from src.service.event_registration.domain.principal import Principal


class OrganizerEventsUseCase:
    """Organizer-facing reads: own events, dashboard totals, per-event analytics"""

    def __init__(
        self,
        *,
        event_query_repo: IEventQueryRepo,
        registration_query_repo: IRegistrationQueryRepo,
    ) -> None:
        self.event_query_repo = event_query_repo
        self.registration_query_repo = registration_query_repo

    @classmethod
    @inject
    def depends(
        cls,
        event_query_repo: IEventQueryRepo = Depends(Provide[Container.event_query_repo]),
        registration_query_repo: IRegistrationQueryRepo = Depends(
            Provide[Container.registration_query_repo]
        ),
    ) -> Self:
        return cls(
            event_query_repo=event_query_repo, registration_query_repo=registration_query_repo
        )

    @Logger.io
    async def list_my_events(self, *, principal: Principal) -> List[EventWithStats]:
        if principal.id is None:
            return []
        # Legacy events are matched by the display string the organizer signed them with
        names = [n for n in dict.fromkeys((principal.name, principal.email)) if n]
        return await self.event_query_repo.list_by_organizer(
            organizer_id=principal.id, organizer_names=names
        )

    @Logger.io
    async def dashboard(self, *, principal: Principal) -> OrganizerDashboard:
        events = await self.list_my_events(principal=principal)
        return OrganizerDashboard.from_events(events)

    @Logger.io
    async def analytics(self, *, event_id: UUID) -> EventAnalytics:
        event = await self.event_query_repo.get_by_id(event_id=event_id)
        if event is None:
            raise NotFoundError('Event not found')

        registrations = await self.registration_query_repo.list_for_event(event_id=event_id)
        return EventAnalytics.build(event=event, registrations=registrations)
