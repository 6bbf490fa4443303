from typing import Self
from uuid import UUID

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.database.unit_of_work import AbstractUnitOfWork
from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.event_registration.domain.entity.registration_entity import (
    RegistrationEntity,
)
from src.service.event_registration.domain.enum.payment_status import PaymentStatus


class UpdateRegistrationStatusUseCase:
    """Admin override; any payment status may be set without touching payment history"""

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
        self, *, registration_id: UUID, payment_status: PaymentStatus
    ) -> RegistrationEntity:
        async with self.uow:
            registration = await self.uow.registration_query_repo.get_by_id(
                registration_id=registration_id, for_update=True
            )
            if registration is None:
                raise NotFoundError('Registration not found')

            previous = registration.payment_status
            registration.payment_status = payment_status
            registration = await self.uow.registration_command_repo.update(
                registration=registration
            )
            await self.uow.commit()

        Logger.base.info(
            f'🛠️ [REGISTRATION-STATUS] {registration_id} {previous.value} -> {payment_status.value}'
        )
        return registration
