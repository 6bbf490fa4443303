from datetime import datetime
from decimal import Decimal
from typing import Any, Dict, List, Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator

from src.service.event_registration.app.dto.event_dto import (
    EventAnalytics,
    EventWithStats,
    OrganizerDashboard,
    RecentRegistration,
)
from src.service.event_registration.domain.entity.event_entity import EventEntity
from src.service.event_registration.domain.enum.event_status import EventStatus
from src.service.event_registration.driving_adapter.http_controller.schema.common_schema import (
    CamelModel,
    PaginationResponse,
    ensure_utc,
)


# Fields that may be cleared with an explicit null; `date` is listed so the
# domain can reject it with its own message
NULLABLE_EVENT_FIELDS = frozenset(
    {'details', 'image_url', 'capacity', 'registration_deadline', 'date'}
)


class EventCreateRequest(BaseModel):
    name: str
    venue: str
    date: datetime
    details: Optional[str] = None
    image_url: Optional[str] = None
    status: Optional[EventStatus] = None
    price: Optional[Decimal] = None
    capacity: Optional[int] = None
    registration_deadline: Optional[datetime] = None

    model_config = ConfigDict(
        json_schema_extra={
            'example': {
                'name': 'Spring Jazz Night',
                'venue': 'Gowra Hall',
                'date': '2030-04-12T19:30:00Z',
                'details': 'An evening of live jazz',
                'price': '25.00',
                'capacity': 200,
                'registration_deadline': '2030-04-10T23:59:59Z',
            }
        }
    )

    @field_validator('date', 'registration_deadline')
    @classmethod
    def assume_utc(cls, value: Optional[datetime]) -> Optional[datetime]:
        return ensure_utc(value)


class AdminEventCreateRequest(EventCreateRequest):
    organizer: Optional[str] = None


class EventUpdateRequest(BaseModel):
    name: Optional[str] = None
    venue: Optional[str] = None
    date: Optional[datetime] = None
    details: Optional[str] = None
    image_url: Optional[str] = None
    status: Optional[EventStatus] = None
    price: Optional[Decimal] = None
    capacity: Optional[int] = None
    registration_deadline: Optional[datetime] = None

    model_config = ConfigDict(
        json_schema_extra={'example': {'venue': 'Gowra Open Air Stage', 'capacity': 250}}
    )

    @field_validator('date', 'registration_deadline')
    @classmethod
    def assume_utc(cls, value: Optional[datetime]) -> Optional[datetime]:
        return ensure_utc(value)

    def to_changes(self) -> Dict[str, Any]:
        """Only the keys the client sent; null is dropped for columns that cannot be null"""
        return {
            field: value
            for field, value in self.model_dump(exclude_unset=True).items()
            if value is not None or field in NULLABLE_EVENT_FIELDS
        }


class AdminEventUpdateRequest(EventUpdateRequest):
    organizer: Optional[str] = None


class EventResponse(BaseModel):
    id: UUID
    name: str
    organizer: str
    organizer_id: Optional[UUID] = None
    details: Optional[str] = None
    date: datetime
    image_url: Optional[str] = None
    venue: str
    status: EventStatus
    price: Decimal
    capacity: Optional[int] = None
    registration_deadline: Optional[datetime] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    registration_count: Optional[int] = None
    paid_registrations: Optional[int] = None
    pending_registrations: Optional[int] = None

    @classmethod
    def from_entity(cls, event: EventEntity) -> 'EventResponse':
        return cls(
            id=event.id,
            name=event.name,
            organizer=event.organizer,
            organizer_id=event.organizer_id,
            details=event.details,
            date=event.date,
            image_url=event.image_url,
            venue=event.venue,
            status=event.status,
            price=event.price,
            capacity=event.capacity,
            registration_deadline=event.registration_deadline,
            created_at=event.created_at,
            updated_at=event.updated_at,
        )

    @classmethod
    def from_stats(cls, stats: EventWithStats, *, detailed: bool = False) -> 'EventResponse':
        response = cls.from_entity(stats.event)
        response.registration_count = stats.registration_count
        if detailed:
            response.paid_registrations = stats.paid_registrations
            response.pending_registrations = stats.pending_registrations
        return response


class EventPageData(BaseModel):
    events: List[EventResponse]
    pagination: PaginationResponse


class EventData(BaseModel):
    event: EventResponse


class DashboardResponse(CamelModel):
    total_events: int
    total_attendees: int
    avg_attendance: int
    active_events: int

    @classmethod
    def from_dto(cls, dashboard: OrganizerDashboard) -> 'DashboardResponse':
        return cls(
            total_events=dashboard.total_events,
            total_attendees=dashboard.total_attendees,
            avg_attendance=dashboard.avg_attendance,
            active_events=dashboard.active_events,
        )


class RecentRegistrationResponse(BaseModel):
    id: UUID
    attendee_name: str
    email: str
    status: str
    ticket_quantity: int
    registered_at: Optional[datetime] = None

    @classmethod
    def from_dto(cls, registration: RecentRegistration) -> 'RecentRegistrationResponse':
        return cls(
            id=registration.id,
            attendee_name=registration.attendee_name,
            email=registration.email,
            status=registration.status.value,
            ticket_quantity=registration.ticket_quantity,
            registered_at=registration.registered_at,
        )


class RegistrationBreakdown(BaseModel):
    confirmed: int
    pending: int
    cancelled: int


class EventAnalyticsResponse(CamelModel):
    total_registrations: int
    capacity_utilization: int
    registration_breakdown: RegistrationBreakdown
    recent_registrations: List[RecentRegistrationResponse] = Field(default_factory=list)

    @classmethod
    def from_dto(cls, analytics: EventAnalytics) -> 'EventAnalyticsResponse':
        return cls(
            total_registrations=analytics.total_registrations,
            capacity_utilization=analytics.capacity_utilization,
            registration_breakdown=RegistrationBreakdown(
                confirmed=analytics.confirmed,
                pending=analytics.pending,
                cancelled=analytics.cancelled,
            ),
            recent_registrations=[
                RecentRegistrationResponse.from_dto(r) for r in analytics.recent_registrations
            ],
        )


class EventAnalyticsEnvelope(BaseModel):
    success: bool = True
    analytics: EventAnalyticsResponse
