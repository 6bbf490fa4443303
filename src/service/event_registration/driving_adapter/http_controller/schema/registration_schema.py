from datetime import datetime
from decimal import Decimal
from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from src.service.event_registration.app.dto.registration_dto import (
    RegistrationDetail,
    RegistrationStats,
)
from src.service.event_registration.domain.entity.registration_entity import (
    MAX_TICKETS_PER_REGISTRATION,
    RegistrationEntity,
)
from src.service.event_registration.domain.enum.payment_status import PaymentStatus
from src.service.event_registration.driving_adapter.http_controller.schema.common_schema import (
    CamelModel,
    PaginationResponse,
)
from src.service.event_registration.driving_adapter.http_controller.schema.event_schema import (
    EventResponse,
)


class RegistrationCreateRequest(CamelModel):
    event_id: UUID
    ticket_quantity: int = Field(1, ge=1, le=MAX_TICKETS_PER_REGISTRATION)

    model_config = ConfigDict(
        json_schema_extra={
            'example': {'eventId': '01936d8f-5e73-7c4e-a9c5-123456789abc', 'ticketQuantity': 2}
        }
    )


class RegistrationStatusUpdateRequest(CamelModel):
    payment_status: PaymentStatus

    model_config = ConfigDict(json_schema_extra={'example': {'paymentStatus': 'failed'}})


class RegistrationResponse(BaseModel):
    id: UUID
    user_id: UUID
    event_id: UUID
    ticket_quantity: int
    payment_status: PaymentStatus
    payment_reference: Optional[str] = None
    payment_amount: Decimal
    registration_date: Optional[datetime] = None
    created_at: Optional[datetime] = None

    @classmethod
    def from_entity(cls, registration: RegistrationEntity) -> 'RegistrationResponse':
        return cls(
            id=registration.id,
            user_id=registration.user_id,
            event_id=registration.event_id,
            ticket_quantity=registration.ticket_quantity,
            payment_status=registration.payment_status,
            payment_reference=registration.payment_reference,
            payment_amount=registration.payment_amount,
            registration_date=registration.registration_date,
            created_at=registration.created_at,
        )


class RegistrationDetailResponse(RegistrationResponse):
    user_name: str
    user_email: str
    event_name: str
    event_date: datetime
    event_venue: str
    event_price: Decimal
    event_organizer: str
    event_status: str

    @classmethod
    def from_detail(cls, detail: RegistrationDetail) -> 'RegistrationDetailResponse':
        return cls(
            **RegistrationResponse.from_entity(detail.registration).model_dump(),
            user_name=detail.user_name,
            user_email=detail.user_email,
            event_name=detail.event_name,
            event_date=detail.event_date,
            event_venue=detail.event_venue,
            event_price=detail.event_price,
            event_organizer=detail.event_organizer,
            event_status=detail.event_status.value,
        )


class RegistrationCreatedData(BaseModel):
    registration: RegistrationResponse
    event: EventResponse


class RegistrationPageData(BaseModel):
    registrations: List[RegistrationDetailResponse]
    pagination: PaginationResponse


class RegistrationStatsResponse(CamelModel):
    total_registrations: int
    total_tickets: int
    paid_registrations: int
    pending_registrations: int
    failed_registrations: int
    refunded_registrations: int
    total_revenue: Decimal

    @classmethod
    def from_dto(cls, stats: RegistrationStats) -> 'RegistrationStatsResponse':
        return cls(
            total_registrations=stats.total_registrations,
            total_tickets=stats.total_tickets,
            paid_registrations=stats.paid_registrations,
            pending_registrations=stats.pending_registrations,
            failed_registrations=stats.failed_registrations,
            refunded_registrations=stats.refunded_registrations,
            total_revenue=stats.total_revenue,
        )
