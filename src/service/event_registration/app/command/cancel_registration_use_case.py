from datetime import datetime, timezone
from typing import Self
from uuid import UUID

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.database.unit_of_work import AbstractUnitOfWork
from src.platform.exception.exceptions import DomainError, ForbiddenError, NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.event_registration.domain.principal import Principal


class CancelRegistrationUseCase:
    def __init__(self, *, uow: AbstractUnitOfWork) -> None:
        self.uow = uow

    @classmethod
    @inject
    def depends(
        cls, uow: AbstractUnitOfWork = Depends(Provide[Container.unit_of_work])
    ) -> Self:
        return cls(uow=uow)

    @Logger.io
    async def execute(self, *, registration_id: UUID, principal: Principal) -> None:
        """
        Owners may cancel unpaid registrations for upcoming events.
        Admins may cancel any registration; the row and its payment history are removed.
        """
        async with self.uow:
            registration = await self.uow.registration_query_repo.get_by_id(
                registration_id=registration_id, for_update=True
            )
            if registration is None:
                raise NotFoundError('Registration not found')

            if not principal.is_admin:
                if registration.user_id != principal.id:
                    raise ForbiddenError('Access denied')
                # Paid tickets are refused regardless of the event date
                if registration.is_paid:
                    raise DomainError('Cannot cancel paid registration')

                event = await self.uow.event_query_repo.get_by_id(
                    event_id=registration.event_id
                )
                if event is not None and event.has_passed(datetime.now(timezone.utc)):
                    raise DomainError(
                        'Cannot cancel', detail='Cannot cancel registration for past events'
                    )

            await self.uow.registration_command_repo.delete(registration_id=registration_id)
            await self.uow.commit()

        Logger.base.info(f'🚫 [CANCEL-REGISTRATION] {registration_id} by {principal.id}')
