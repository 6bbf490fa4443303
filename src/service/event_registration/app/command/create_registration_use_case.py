from datetime import datetime, timezone
from typing import Self
from uuid import UUID

from dependency_injector.wiring import Provide, inject
from fastapi import Depends
from opentelemetry import trace
from sqlalchemy.exc import IntegrityError

from src.platform.config.di import Container
from src.platform.database.integrity import is_unique_violation
from src.platform.database.unit_of_work import AbstractUnitOfWork
from src.platform.exception.exceptions import ConflictError, DomainError, NotFoundError
from src.platform.logging.loguru_io import Logger
from src.platform.metrics.registration_metrics import metrics
from src.platform.types.uuid7_id import new_uuid7
from src.service.event_registration.domain.entity.event_entity import EventEntity
from src.service.event_registration.domain.entity.registration_entity import (
    RegistrationEntity,
)
from src.service.event_registration.domain.enum.event_status import EventStatus


class CreateRegistrationUseCase:
    """
    Register a user for an event

    Flow (one transaction):
    1. Lock the event row (SELECT ... FOR UPDATE)
    2. Event must exist, be published, upcoming, and before its deadline
    3. One registration per (user, event)
    4. Existing registrations + requested tickets must fit the capacity
    5. Insert the registration as pending, amount = price x quantity

    Concurrent registrations for one event queue on the row lock, so the
    capacity count and the insert can never interleave.
    """

    def __init__(self, *, uow: AbstractUnitOfWork) -> None:
        self.uow = uow
        self.tracer = trace.get_tracer(__name__)

    @classmethod
    @inject
    def depends(
        cls, uow: AbstractUnitOfWork = Depends(Provide[Container.unit_of_work])
    ) -> Self:
        return cls(uow=uow)

    @Logger.io
    async def execute(
        self, *, user_id: UUID, event_id: UUID, ticket_quantity: int = 1
    ) -> tuple[RegistrationEntity, EventEntity]:
        with self.tracer.start_as_current_span(
            'use_case.create_registration',
            attributes={'event.id': str(event_id), 'user.id': str(user_id)},
        ):
            async with self.uow:
                event = await self.uow.event_query_repo.get_by_id(
                    event_id=event_id, for_update=True
                )
                if event is None or event.id is None:
                    raise NotFoundError('Event not found')

                now = datetime.now(timezone.utc)
                if event.status != EventStatus.PUBLISHED:
                    raise DomainError('Event not available')
                if event.has_passed(now):
                    raise DomainError('Event has passed')
                if event.registration_closed(now):
                    raise DomainError('Registration deadline passed')

                existing = await self.uow.registration_query_repo.get_by_user_and_event(
                    user_id=user_id, event_id=event_id
                )
                if existing is not None:
                    raise ConflictError('Already registered')

                registration = RegistrationEntity.create(
                    id=new_uuid7(),
                    user_id=user_id,
                    event_id=event.id,
                    ticket_quantity=ticket_quantity,
                    unit_price=event.price,
                    now=now,
                )

                if event.capacity is not None:
                    current = await self.uow.registration_query_repo.count_by_event(
                        event_id=event_id
                    )
                    if event.is_full(registration_count=current, requested=ticket_quantity):
                        raise ConflictError('Event full')

                try:
                    registration = await self.uow.registration_command_repo.create(
                        registration=registration
                    )
                    await self.uow.commit()
                except IntegrityError as e:
                    if is_unique_violation(e):
                        raise ConflictError('Already registered') from e
                    raise

        metrics.record_registration(event_id=event_id)
        Logger.base.info(
            f'🎫 [REGISTER] {registration.id} user={user_id} event={event_id} '
            f'tickets={ticket_quantity} amount={registration.payment_amount}'
        )
        return registration, event
