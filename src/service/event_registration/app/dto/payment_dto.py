from datetime import datetime
from decimal import Decimal
from typing import Dict, Optional
from uuid import UUID

import attrs

from src.service.event_registration.domain.entity.payment_entity import PaymentEntity
from src.service.event_registration.domain.enum.payment_status import PaymentRecordStatus


@attrs.define(frozen=True)
class PaymentFilter:
    registration_id: Optional[UUID] = None
    user_id: Optional[UUID] = None
    status: Optional[PaymentRecordStatus] = None
    payment_method: Optional[str] = None
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None


@attrs.define(frozen=True)
class PaymentDetail:
    payment: PaymentEntity
    user_id: UUID
    user_name: str
    user_email: str
    event_id: UUID
    event_name: str


@attrs.define(frozen=True)
class PaymentStats:
    total_payments: int = 0
    total_amount: Decimal = Decimal('0')
    total_refunds: int = 0
    refunded_amount: Decimal = Decimal('0')
    by_method: Dict[str, int] = attrs.field(factory=dict)

    @property
    def net_revenue(self) -> Decimal:
        return self.total_amount - self.refunded_amount
