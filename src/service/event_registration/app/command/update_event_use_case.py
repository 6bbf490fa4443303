from datetime import datetime, timezone
from typing import Any, Dict, Self
from uuid import UUID

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.database.unit_of_work import AbstractUnitOfWork
from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.event_registration.domain.entity.event_entity import EventEntity


class UpdateEventUseCase:
    """Partial update; callers are already authorized by the ownership or admin guard"""

    def __init__(self, *, uow: AbstractUnitOfWork) -> None:
        self.uow = uow

    @classmethod
    @inject
    def depends(
        cls, uow: AbstractUnitOfWork = Depends(Provide[Container.unit_of_work])
    ) -> Self:
        return cls(uow=uow)

    @Logger.io
    async def execute(self, *, event_id: UUID, changes: Dict[str, Any]) -> EventEntity:
        async with self.uow:
            event = await self.uow.event_query_repo.get_by_id(event_id=event_id, for_update=True)
            if event is None:
                raise NotFoundError('Event not found')

            event.apply_changes(changes=changes, now=datetime.now(timezone.utc))
            event = await self.uow.event_command_repo.update(event=event)
            await self.uow.commit()

        return event
