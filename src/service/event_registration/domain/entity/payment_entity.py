from datetime import datetime
from decimal import Decimal
from typing import Optional
from uuid import UUID

import attrs

from src.platform.exception.exceptions import DomainError
from src.service.event_registration.domain.enum.payment_status import PaymentRecordStatus


REFUND_METHOD = 'refund'


def payment_reference(*, registration_id: UUID, now: datetime) -> str:
    return f'PAY_{int(now.timestamp() * 1000)}_{registration_id}'


def refund_reference(*, payment_id: Optional[UUID], now: datetime) -> str:
    return f'REFUND_{int(now.timestamp() * 1000)}_{payment_id}'


@attrs.define
class PaymentEntity:
    """One append-only payment_history row; refunds are new rows with a negative amount"""

    registration_id: UUID
    payment_reference: str
    amount: Decimal
    payment_method: str
    status: PaymentRecordStatus = PaymentRecordStatus.COMPLETED
    id: Optional[UUID] = None
    transaction_date: Optional[datetime] = None
    created_at: Optional[datetime] = None

    @classmethod
    def completed(
        cls,
        *,
        id: UUID,
        registration_id: UUID,
        amount: Decimal,
        payment_method: str,
        reference: Optional[str],
        now: datetime,
    ) -> 'PaymentEntity':
        if not payment_method:
            raise DomainError('Payment method is required')
        return cls(
            id=id,
            registration_id=registration_id,
            payment_reference=reference or payment_reference(registration_id=registration_id, now=now),
            amount=amount,
            payment_method=payment_method,
            status=PaymentRecordStatus.COMPLETED,
            transaction_date=now,
            created_at=now,
        )

    def build_refund(self, *, id: UUID, now: datetime) -> 'PaymentEntity':
        if self.status != PaymentRecordStatus.COMPLETED:
            raise DomainError('Only completed payments can be refunded')
        return PaymentEntity(
            id=id,
            registration_id=self.registration_id,
            payment_reference=refund_reference(payment_id=self.id, now=now),
            amount=-abs(self.amount),
            payment_method=REFUND_METHOD,
            status=PaymentRecordStatus.REFUNDED,
            transaction_date=now,
            created_at=now,
        )

    def mark_refunded(self) -> None:
        self.status = PaymentRecordStatus.REFUNDED
