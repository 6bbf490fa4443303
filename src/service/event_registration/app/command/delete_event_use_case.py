from typing import Self
from uuid import UUID

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.database.unit_of_work import AbstractUnitOfWork
from src.platform.exception.exceptions import DomainError, NotFoundError
from src.platform.logging.loguru_io import Logger


class DeleteEventUseCase:
    def __init__(self, *, uow: AbstractUnitOfWork) -> None:
        self.uow = uow

    @classmethod
    @inject
    def depends(
        cls, uow: AbstractUnitOfWork = Depends(Provide[Container.unit_of_work])
    ) -> Self:
        return cls(uow=uow)

    @Logger.io
    async def execute(self, *, event_id: UUID, conflict_status: int = 409) -> None:
        """
        Events with registrations cannot be deleted.
        The organizer route answers 409, the admin route 400.
        """
        async with self.uow:
            event = await self.uow.event_query_repo.get_by_id(event_id=event_id, for_update=True)
            if event is None:
                raise NotFoundError('Event not found')

            registrations = await self.uow.registration_query_repo.count_by_event(event_id=event_id)
            if registrations > 0:
                raise DomainError(
                    'Cannot delete event with existing registrations', conflict_status
                )

            await self.uow.event_command_repo.delete(event_id=event_id)
            await self.uow.commit()

        Logger.base.info(f'🗑️ [DELETE-EVENT] {event_id}')
