from datetime import datetime, timezone
from typing import Optional, Self
from uuid import UUID

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.database.unit_of_work import AbstractUnitOfWork
from src.platform.exception.exceptions import DomainError, NotFoundError
from src.platform.logging.loguru_io import Logger
from src.platform.metrics.registration_metrics import metrics
from src.platform.types.uuid7_id import new_uuid7
from src.service.event_registration.domain.entity.payment_entity import PaymentEntity
from src.service.event_registration.domain.entity.registration_entity import (
    RegistrationEntity,
)
from src.service.event_registration.domain.principal import Principal


class ProcessPaymentUseCase:
    """
    Simulated payment gateway (always succeeds)

    The payment_history row and the registration flip to `paid` are written in
    one transaction: both commit or neither does.
    """

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
        registration_id: UUID,
        payment_method: str,
        payment_reference: Optional[str] = None,
    ) -> tuple[PaymentEntity, RegistrationEntity]:
        if not payment_method:
            raise DomainError('Payment method is required', detail='Please specify the payment method')

        async with self.uow:
            registration = await self.uow.registration_query_repo.get_by_id(
                registration_id=registration_id, for_update=True
            )
            # Someone else's registration is reported exactly like a missing one
            if registration is None or registration.id is None or (
                not principal.is_admin and registration.user_id != principal.id
            ):
                raise NotFoundError('Registration not found')

            if registration.is_paid:
                raise DomainError(
                    'Already paid',
                    409,
                    detail='Payment for this registration has already been processed',
                )

            now = datetime.now(timezone.utc)
            event = await self.uow.event_query_repo.get_by_id(event_id=registration.event_id)
            if event is not None and event.has_passed(now):
                raise DomainError('Event has passed', detail='Cannot process payment for past events')

            payment = PaymentEntity.completed(
                id=new_uuid7(),
                registration_id=registration.id,
                amount=registration.payment_amount,
                payment_method=payment_method,
                reference=payment_reference,
                now=now,
            )
            payment = await self.uow.payment_command_repo.create(payment=payment)

            registration.mark_paid(payment_reference=payment.payment_reference)
            registration = await self.uow.registration_command_repo.update(
                registration=registration
            )
            await self.uow.commit()

        metrics.record_payment(payment_method=payment_method)
        Logger.base.info(
            f'💳 [PAYMENT] {payment.payment_reference} registration={registration_id} '
            f'amount={payment.amount} method={payment_method}'
        )
        return payment, registration
