from datetime import datetime
from decimal import Decimal
from typing import Dict, List, Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from src.service.event_registration.app.dto.payment_dto import PaymentDetail, PaymentStats
from src.service.event_registration.domain.entity.payment_entity import PaymentEntity
from src.service.event_registration.domain.enum.payment_status import PaymentRecordStatus
from src.service.event_registration.driving_adapter.http_controller.schema.common_schema import (
    CamelModel,
    PaginationResponse,
)
from src.service.event_registration.driving_adapter.http_controller.schema.registration_schema import (
    RegistrationResponse,
)


class ProcessPaymentRequest(CamelModel):
    registration_id: UUID
    payment_method: str = ''
    payment_reference: Optional[str] = Field(None, max_length=255)

    model_config = ConfigDict(
        json_schema_extra={
            'example': {
                'registrationId': '01936d8f-5e73-7c4e-a9c5-123456789abc',
                'paymentMethod': 'credit_card',
            }
        }
    )


class RefundRequest(BaseModel):
    reason: Optional[str] = None

    model_config = ConfigDict(json_schema_extra={'example': {'reason': 'Event rescheduled'}})


class PaymentResponse(BaseModel):
    id: UUID
    registration_id: UUID
    payment_reference: str
    amount: Decimal
    status: PaymentRecordStatus
    payment_method: str
    transaction_date: Optional[datetime] = None
    created_at: Optional[datetime] = None

    @classmethod
    def from_entity(cls, payment: PaymentEntity) -> 'PaymentResponse':
        return cls(
            id=payment.id,
            registration_id=payment.registration_id,
            payment_reference=payment.payment_reference,
            amount=payment.amount,
            status=payment.status,
            payment_method=payment.payment_method,
            transaction_date=payment.transaction_date,
            created_at=payment.created_at,
        )


class PaymentDetailResponse(PaymentResponse):
    user_id: UUID
    user_name: str
    user_email: str
    event_id: UUID
    event_name: str

    @classmethod
    def from_detail(cls, detail: PaymentDetail) -> 'PaymentDetailResponse':
        return cls(
            **PaymentResponse.from_entity(detail.payment).model_dump(),
            user_id=detail.user_id,
            user_name=detail.user_name,
            user_email=detail.user_email,
            event_id=detail.event_id,
            event_name=detail.event_name,
        )


class PaymentProcessedData(BaseModel):
    payment: PaymentResponse
    registration: RegistrationResponse


class PaymentPageData(BaseModel):
    payments: List[PaymentDetailResponse]
    pagination: PaginationResponse


class PaymentStatsResponse(CamelModel):
    total_payments: int
    total_amount: Decimal
    total_refunds: int
    refunded_amount: Decimal
    net_revenue: Decimal
    by_method: Dict[str, int]

    @classmethod
    def from_dto(cls, stats: PaymentStats) -> 'PaymentStatsResponse':
        return cls(
            total_payments=stats.total_payments,
            total_amount=stats.total_amount,
            total_refunds=stats.total_refunds,
            refunded_amount=stats.refunded_amount,
            net_revenue=stats.net_revenue,
            by_method=dict(stats.by_method),
        )
