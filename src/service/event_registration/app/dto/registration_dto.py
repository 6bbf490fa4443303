from datetime import datetime
from decimal import Decimal
from typing import Optional
from uuid import UUID

import attrs

from src.service.event_registration.domain.entity.registration_entity import RegistrationEntity
from src.service.event_registration.domain.enum.event_status import EventStatus
from src.service.event_registration.domain.enum.payment_status import PaymentStatus


@attrs.define(frozen=True)
class RegistrationFilter:
    event_id: Optional[UUID] = None
    user_id: Optional[UUID] = None
    payment_status: Optional[PaymentStatus] = None


@attrs.define(frozen=True)
class RegistrationDetail:
    """Registration joined with its user and event columns"""

    registration: RegistrationEntity
    user_name: str
    user_email: str
    event_name: str
    event_date: datetime
    event_venue: str
    event_price: Decimal
    event_organizer: str
    event_status: EventStatus


@attrs.define(frozen=True)
class RegistrationStats:
    total_registrations: int = 0
    total_tickets: int = 0
    paid_registrations: int = 0
    pending_registrations: int = 0
    failed_registrations: int = 0
    refunded_registrations: int = 0
    total_revenue: Decimal = Decimal('0')
