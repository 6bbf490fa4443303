from datetime import datetime
from typing import List, Optional
from uuid import UUID

import attrs

from src.service.event_registration.domain.entity.event_entity import EventEntity
from src.service.event_registration.domain.enum.event_status import EventStatus
from src.service.event_registration.domain.enum.payment_status import PaymentStatus


RECENT_REGISTRATIONS_LIMIT = 10


@attrs.define(frozen=True)
class EventFilter:
    search: Optional[str] = None
    status: Optional[EventStatus] = None
    organizer: Optional[str] = None
    date_from: Optional[datetime] = None


@attrs.define(frozen=True)
class EventWithStats:
    event: EventEntity
    registration_count: int = 0
    paid_registrations: int = 0
    pending_registrations: int = 0


@attrs.define(frozen=True)
class OrganizerDashboard:
    total_events: int
    total_attendees: int
    avg_attendance: int
    active_events: int

    @classmethod
    def from_events(cls, events: List[EventWithStats]) -> 'OrganizerDashboard':
        total_attendees = sum(e.registration_count for e in events)
        total_capacity = sum(e.event.capacity or 0 for e in events)
        return cls(
            total_events=len(events),
            total_attendees=total_attendees,
            avg_attendance=round(total_attendees / total_capacity * 100) if total_capacity else 0,
            active_events=sum(1 for e in events if e.event.status == EventStatus.PUBLISHED),
        )


@attrs.define(frozen=True)
class RecentRegistration:
    id: UUID
    attendee_name: str
    email: str
    status: PaymentStatus
    ticket_quantity: int
    registered_at: Optional[datetime]


@attrs.define(frozen=True)
class EventAnalytics:
    total_registrations: int
    capacity_utilization: int
    confirmed: int
    pending: int
    cancelled: int
    recent_registrations: List[RecentRegistration] = attrs.field(factory=list)

    @classmethod
    def build(
        cls, *, event: EventEntity, registrations: List[RecentRegistration]
    ) -> 'EventAnalytics':
        """`registrations` must be ordered newest first"""
        capacity = event.capacity
        by_status = {status: 0 for status in PaymentStatus}
        for r in registrations:
            by_status[r.status] += 1
        return cls(
            total_registrations=len(registrations),
            capacity_utilization=round(len(registrations) / capacity * 100) if capacity else 0,
            confirmed=by_status[PaymentStatus.PAID],
            pending=by_status[PaymentStatus.PENDING],
            cancelled=by_status[PaymentStatus.FAILED] + by_status[PaymentStatus.REFUNDED],
            recent_registrations=registrations[:RECENT_REGISTRATIONS_LIMIT],
        )
