from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status
from opentelemetry import trace

from src.platform.logging.loguru_io import Logger
from src.service.event_registration.app.command.cancel_registration_use_case import (
    CancelRegistrationUseCase,
)
from src.service.event_registration.app.command.create_registration_use_case import (
    CreateRegistrationUseCase,
)
from src.service.event_registration.app.command.update_registration_status_use_case import (
    UpdateRegistrationStatusUseCase,
)
from src.service.event_registration.app.dto.page_dto import PageRequest
from src.service.event_registration.app.dto.registration_dto import RegistrationFilter
from src.service.event_registration.app.query.list_registrations_use_case import (
    ListRegistrationsUseCase,
)
from src.service.event_registration.domain.entity.admin_user_entity import AdminUserEntity
from src.service.event_registration.domain.entity.user_entity import UserEntity
from src.service.event_registration.domain.enum.payment_status import PaymentStatus
from src.service.event_registration.domain.principal import Principal
from src.service.event_registration.driving_adapter.http_controller.auth.role_auth import (
    require_admin,
    require_auth,
    require_user,
)
from src.service.event_registration.driving_adapter.http_controller.schema.common_schema import (
    DataResponse,
    PaginationResponse,
    SuccessResponse,
    page_query,
)
from src.service.event_registration.driving_adapter.http_controller.schema.event_schema import (
    EventResponse,
)
from src.service.event_registration.driving_adapter.http_controller.schema.registration_schema import (
    RegistrationCreatedData,
    RegistrationCreateRequest,
    RegistrationDetailResponse,
    RegistrationPageData,
    RegistrationResponse,
    RegistrationStatsResponse,
    RegistrationStatusUpdateRequest,
)


router = APIRouter()
tracer = trace.get_tracer(__name__)


@router.post(
    '',
    response_model=DataResponse[RegistrationCreatedData],
    status_code=status.HTTP_201_CREATED,
)
@Logger.io
async def create_registration(
    request: RegistrationCreateRequest,
    user: UserEntity = Depends(require_user),
    use_case: CreateRegistrationUseCase = Depends(CreateRegistrationUseCase.depends),
) -> DataResponse[RegistrationCreatedData]:
    with tracer.start_as_current_span('controller.create_registration') as span:
        span.set_attribute('event.id', str(request.event_id))
        span.set_attribute('ticket_quantity', request.ticket_quantity)

        registration, event = await use_case.execute(
            user_id=user.id,
            event_id=request.event_id,
            ticket_quantity=request.ticket_quantity,
        )
        return DataResponse[RegistrationCreatedData](
            data=RegistrationCreatedData(
                registration=RegistrationResponse.from_entity(registration),
                event=EventResponse.from_entity(event),
            ),
            message='Registration created successfully',
        )


@router.get('/my-registrations', response_model=DataResponse[RegistrationPageData])
@Logger.io
async def list_my_registrations(
    principal: Principal = Depends(require_auth),
    page: PageRequest = Depends(page_query),
    use_case: ListRegistrationsUseCase = Depends(ListRegistrationsUseCase.depends),
) -> DataResponse[RegistrationPageData]:
    registrations = await use_case.list_mine(principal=principal, page=page)
    return DataResponse[RegistrationPageData](
        data=RegistrationPageData(
            registrations=[RegistrationDetailResponse.from_detail(r) for r in registrations.items],
            pagination=PaginationResponse.from_page(registrations),
        )
    )


@router.get('/stats/overview', response_model=DataResponse[RegistrationStatsResponse])
@Logger.io
async def registration_stats(
    admin: AdminUserEntity = Depends(require_admin),
    use_case: ListRegistrationsUseCase = Depends(ListRegistrationsUseCase.depends),
) -> DataResponse[RegistrationStatsResponse]:
    stats = await use_case.stats()
    return DataResponse[RegistrationStatsResponse](data=RegistrationStatsResponse.from_dto(stats))


@router.get('', response_model=DataResponse[RegistrationPageData])
@Logger.io
async def list_registrations(
    event_id: Optional[UUID] = Query(None, alias='eventId'),
    user_id: Optional[UUID] = Query(None, alias='userId'),
    payment_status: Optional[PaymentStatus] = Query(None, alias='paymentStatus'),
    page: PageRequest = Depends(page_query),
    admin: AdminUserEntity = Depends(require_admin),
    use_case: ListRegistrationsUseCase = Depends(ListRegistrationsUseCase.depends),
) -> DataResponse[RegistrationPageData]:
    registrations = await use_case.list_all(
        registration_filter=RegistrationFilter(
            event_id=event_id, user_id=user_id, payment_status=payment_status
        ),
        page=page,
    )
    return DataResponse[RegistrationPageData](
        data=RegistrationPageData(
            registrations=[RegistrationDetailResponse.from_detail(r) for r in registrations.items],
            pagination=PaginationResponse.from_page(registrations),
        )
    )


@router.get('/{registration_id}', response_model=DataResponse[RegistrationDetailResponse])
@Logger.io
async def get_registration(
    registration_id: UUID,
    principal: Principal = Depends(require_auth),
    use_case: ListRegistrationsUseCase = Depends(ListRegistrationsUseCase.depends),
) -> DataResponse[RegistrationDetailResponse]:
    detail = await use_case.get(registration_id=registration_id, principal=principal)
    return DataResponse[RegistrationDetailResponse](
        data=RegistrationDetailResponse.from_detail(detail)
    )


@router.delete('/{registration_id}', response_model=SuccessResponse)
@Logger.io
async def cancel_registration(
    registration_id: UUID,
    principal: Principal = Depends(require_auth),
    use_case: CancelRegistrationUseCase = Depends(CancelRegistrationUseCase.depends),
) -> SuccessResponse:
    await use_case.execute(registration_id=registration_id, principal=principal)
    return SuccessResponse(message='Registration cancelled successfully')


@router.put('/{registration_id}/status', response_model=DataResponse[RegistrationResponse])
@Logger.io
async def update_registration_status(
    registration_id: UUID,
    request: RegistrationStatusUpdateRequest,
    admin: AdminUserEntity = Depends(require_admin),
    use_case: UpdateRegistrationStatusUseCase = Depends(UpdateRegistrationStatusUseCase.depends),
) -> DataResponse[RegistrationResponse]:
    registration = await use_case.execute(
        registration_id=registration_id, payment_status=request.payment_status
    )
    return DataResponse[RegistrationResponse](
        data=RegistrationResponse.from_entity(registration),
        message='Registration status updated successfully',
    )
