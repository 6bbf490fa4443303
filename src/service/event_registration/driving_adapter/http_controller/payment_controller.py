from datetime import datetime
from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query

from src.platform.logging.loguru_io import Logger
from src.service.event_registration.app.command.process_payment_use_case import (
    ProcessPaymentUseCase,
)
from src.service.event_registration.app.command.refund_payment_use_case import (
    RefundPaymentUseCase,
)
from src.service.event_registration.app.dto.page_dto import PageRequest
from src.service.event_registration.app.dto.payment_dto import PaymentFilter
from src.service.event_registration.app.query.list_payments_use_case import ListPaymentsUseCase
from src.service.event_registration.domain.entity.admin_user_entity import AdminUserEntity
from src.service.event_registration.domain.enum.payment_status import PaymentRecordStatus
from src.service.event_registration.domain.principal import Principal
from src.service.event_registration.driving_adapter.http_controller.auth.role_auth import (
    require_admin,
    require_auth,
)
from src.service.event_registration.driving_adapter.http_controller.schema.common_schema import (
    DataResponse,
    PaginationResponse,
    ensure_utc,
    page_query,
)
from src.service.event_registration.driving_adapter.http_controller.schema.payment_schema import (
    PaymentDetailResponse,
    PaymentPageData,
    PaymentProcessedData,
    PaymentResponse,
    PaymentStatsResponse,
    ProcessPaymentRequest,
    RefundRequest,
)
from src.service.event_registration.driving_adapter.http_controller.schema.registration_schema import (
    RegistrationResponse,
)


router = APIRouter()


@router.post('/process', response_model=DataResponse[PaymentProcessedData])
@Logger.io
async def process_payment(
    request: ProcessPaymentRequest,
    principal: Principal = Depends(require_auth),
    use_case: ProcessPaymentUseCase = Depends(ProcessPaymentUseCase.depends),
) -> DataResponse[PaymentProcessedData]:
    payment, registration = await use_case.execute(
        principal=principal,
        registration_id=request.registration_id,
        payment_method=request.payment_method,
        payment_reference=request.payment_reference,
    )
    return DataResponse[PaymentProcessedData](
        data=PaymentProcessedData(
            payment=PaymentResponse.from_entity(payment),
            registration=RegistrationResponse.from_entity(registration),
        ),
        message='Payment processed successfully',
    )


@router.post('/{payment_id}/refund', response_model=DataResponse[PaymentResponse])
@Logger.io
async def refund_payment(
    payment_id: UUID,
    request: Optional[RefundRequest] = None,
    admin: AdminUserEntity = Depends(require_admin),
    use_case: RefundPaymentUseCase = Depends(RefundPaymentUseCase.depends),
) -> DataResponse[PaymentResponse]:
    refund = await use_case.execute(
        payment_id=payment_id, reason=request.reason if request else None
    )
    return DataResponse[PaymentResponse](
        data=PaymentResponse.from_entity(refund), message='Payment refunded successfully'
    )


@router.get('/my-payments', response_model=DataResponse[PaymentPageData])
@Logger.io
async def list_my_payments(
    principal: Principal = Depends(require_auth),
    page: PageRequest = Depends(page_query),
    use_case: ListPaymentsUseCase = Depends(ListPaymentsUseCase.depends),
) -> DataResponse[PaymentPageData]:
    payments = await use_case.list_mine(principal=principal, page=page)
    return DataResponse[PaymentPageData](
        data=PaymentPageData(
            payments=[PaymentDetailResponse.from_detail(p) for p in payments.items],
            pagination=PaginationResponse.from_page(payments),
        )
    )


@router.get('/stats/overview', response_model=DataResponse[PaymentStatsResponse])
@Logger.io
async def payment_stats(
    admin: AdminUserEntity = Depends(require_admin),
    use_case: ListPaymentsUseCase = Depends(ListPaymentsUseCase.depends),
) -> DataResponse[PaymentStatsResponse]:
    stats = await use_case.stats()
    return DataResponse[PaymentStatsResponse](data=PaymentStatsResponse.from_dto(stats))


@router.get('', response_model=DataResponse[PaymentPageData])
@Logger.io
async def list_payments(
    registration_id: Optional[UUID] = Query(None, alias='registrationId'),
    user_id: Optional[UUID] = Query(None, alias='userId'),
    payment_status: Optional[PaymentRecordStatus] = Query(None, alias='status'),
    payment_method: Optional[str] = Query(None, alias='paymentMethod'),
    start_date: Optional[datetime] = Query(None, alias='startDate'),
    end_date: Optional[datetime] = Query(None, alias='endDate'),
    page: PageRequest = Depends(page_query),
    admin: AdminUserEntity = Depends(require_admin),
    use_case: ListPaymentsUseCase = Depends(ListPaymentsUseCase.depends),
) -> DataResponse[PaymentPageData]:
    payments = await use_case.list_all(
        payment_filter=PaymentFilter(
            registration_id=registration_id,
            user_id=user_id,
            status=payment_status,
            payment_method=payment_method or None,
            start_date=ensure_utc(start_date),
            end_date=ensure_utc(end_date),
        ),
        page=page,
    )
    return DataResponse[PaymentPageData](
        data=PaymentPageData(
            payments=[PaymentDetailResponse.from_detail(p) for p in payments.items],
            pagination=PaginationResponse.from_page(payments),
        )
    )


@router.get('/{payment_id}', response_model=DataResponse[PaymentDetailResponse])
@Logger.io
async def get_payment(
    payment_id: UUID,
    principal: Principal = Depends(require_auth),
    use_case: ListPaymentsUseCase = Depends(ListPaymentsUseCase.depends),
) -> DataResponse[PaymentDetailResponse]:
    detail = await use_case.get(payment_id=payment_id, principal=principal)
    return DataResponse[PaymentDetailResponse](data=PaymentDetailResponse.from_detail(detail))
