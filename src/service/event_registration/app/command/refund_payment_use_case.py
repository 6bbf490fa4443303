from datetime import datetime, timezone
from typing import Optional, Self
from uuid import UUID

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.database.unit_of_work import AbstractUnitOfWork
from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.platform.metrics.registration_metrics import metrics
from src.platform.types.uuid7_id import new_uuid7
from src.service.event_registration.domain.entity.payment_entity import PaymentEntity


class RefundPaymentUseCase:
    """
    Admin refund

    Appends a negative REFUND_ row and marks both the original payment and the
    registration as refunded, all in one transaction. The original row keeps
    its amount.
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
    async def execute(self, *, payment_id: UUID, reason: Optional[str] = None) -> PaymentEntity:
        async with self.uow:
            payment = await self.uow.payment_query_repo.get_by_id(
                payment_id=payment_id, for_update=True
            )
            if payment is None:
                raise NotFoundError('Payment not found')

            now = datetime.now(timezone.utc)
            refund = await self.uow.payment_command_repo.create(
                payment=payment.build_refund(id=new_uuid7(), now=now)
            )

            payment.mark_refunded()
            await self.uow.payment_command_repo.update(payment=payment)

            registration = await self.uow.registration_query_repo.get_by_id(
                registration_id=payment.registration_id, for_update=True
            )
            if registration is None:
                raise NotFoundError('Registration not found')
            registration.mark_refunded()
            await self.uow.registration_command_repo.update(registration=registration)

            await self.uow.commit()

        metrics.record_refund()
        Logger.base.info(
            f'↩️ [REFUND] {refund.payment_reference} payment={payment_id} '
            f'amount={refund.amount} reason={reason or "-"}'
        )
        return refund
