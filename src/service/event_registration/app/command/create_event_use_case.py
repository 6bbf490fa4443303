from datetime import datetime, timezone
from decimal import Decimal
from typing import Optional, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.core_setting import settings
from src.platform.config.di import Container
from src.platform.database.unit_of_work import AbstractUnitOfWork
from src.platform.logging.loguru_io import Logger
from src.platform.types.uuid7_id import new_uuid7
from src.service.event_registration.domain.entity.event_entity import EventEntity
from src.service.event_registration.domain.enum.event_status import EventStatus
from src.service.event_registration.domain.principal import Principal


class CreateEventUseCase:
    def __init__(self, *, uow: AbstractUnitOfWork) -> None:
        self.uow = uow

    @classmethod
    @inject
    def depends(
        cls, uow: AbstractUnitOfWork = Depends(Provide[Container.unit_of_work])
    ) -> Self:
        return cls(uow=uow)

    @Logger.io
    async def execute(
        self,
        *,
        principal: Principal,
        name: str,
        venue: str,
        date: datetime,
        details: Optional[str] = None,
        image_url: Optional[str] = None,
        status: Optional[EventStatus] = None,
        price: Optional[Decimal] = None,
        capacity: Optional[int] = None,
        registration_deadline: Optional[datetime] = None,
        organizer: Optional[str] = None,
    ) -> EventEntity:
        """
        Organizers own the events they create (organizer_id + display name).
        Admin-created events carry only the legacy organizer string.
        """
        if principal.is_admin:
            organizer_name = organizer or settings.DEFAULT_ORGANIZER_NAME
            organizer_id = None
        else:
            organizer_name = principal.display_name
            organizer_id = principal.id

        event = EventEntity.create(
            id=new_uuid7(),
            name=name,
            venue=venue,
            date=date,
            organizer=organizer_name,
            organizer_id=organizer_id,
            now=datetime.now(timezone.utc),
            details=details,
            image_url=image_url,
            status=status or EventStatus.PUBLISHED,
            price=price,
            capacity=capacity,
            registration_deadline=registration_deadline,
        )

        async with self.uow:
            event = await self.uow.event_command_repo.create(event=event)
            await self.uow.commit()

        Logger.base.info(f'📅 [CREATE-EVENT] {event.id} "{event.name}" by {organizer_name}')
        return event
