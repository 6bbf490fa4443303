from datetime import datetime
from decimal import Decimal
from typing import Optional
from uuid import UUID

import attrs

from src.platform.exception.exceptions import DomainError
from src.service.event_registration.domain.enum.payment_status import PaymentStatus


MAX_TICKETS_PER_REGISTRATION = 10


def registration_reference(*, user_id: UUID, now: datetime) -> str:
    return f'REG_{int(now.timestamp() * 1000)}_{str(user_id)[-6:]}'


@attrs.define
class RegistrationEntity:
    user_id: UUID
    event_id: UUID
    ticket_quantity: int = 1
    payment_status: PaymentStatus = PaymentStatus.PENDING
    payment_reference: Optional[str] = None
    payment_amount: Decimal = Decimal('0')
    id: Optional[UUID] = None
    registration_date: Optional[datetime] = None
    created_at: Optional[datetime] = None

    @classmethod
    def create(
        cls,
        *,
        id: UUID,
        user_id: UUID,
        event_id: UUID,
        ticket_quantity: int,
        unit_price: Decimal,
        now: datetime,
    ) -> 'RegistrationEntity':
        if not 1 <= ticket_quantity <= MAX_TICKETS_PER_REGISTRATION:
            raise DomainError('Ticket quantity must be between 1 and 10')
        return cls(
            id=id,
            user_id=user_id,
            event_id=event_id,
            ticket_quantity=ticket_quantity,
            payment_status=PaymentStatus.PENDING,
            payment_reference=registration_reference(user_id=user_id, now=now),
            payment_amount=unit_price * ticket_quantity,
            registration_date=now,
            created_at=now,
        )

    @property
    def is_paid(self) -> bool:
        return self.payment_status == PaymentStatus.PAID

    def mark_paid(self, *, payment_reference: str) -> None:
        if self.is_paid:
            raise DomainError('Already paid', 409)
        self.payment_status = PaymentStatus.PAID
        self.payment_reference = payment_reference

    def mark_refunded(self) -> None:
        self.payment_status = PaymentStatus.REFUNDED
