from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status

from src.platform.logging.loguru_io import Logger
from src.service.event_registration.app.command.create_event_use_case import CreateEventUseCase
from src.service.event_registration.app.command.delete_event_use_case import DeleteEventUseCase
from src.service.event_registration.app.command.update_event_use_case import UpdateEventUseCase
from src.service.event_registration.app.dto.event_dto import EventFilter
from src.service.event_registration.app.dto.page_dto import PageRequest
from src.service.event_registration.app.dto.registration_dto import RegistrationFilter
from src.service.event_registration.app.query.admin_stats_use_case import AdminStatsUseCase
from src.service.event_registration.app.query.list_events_use_case import ListEventsUseCase
from src.service.event_registration.app.query.list_registrations_use_case import (
    ListRegistrationsUseCase,
)
from src.service.event_registration.domain.entity.admin_user_entity import AdminUserEntity
from src.service.event_registration.domain.enum.event_status import EventStatus
from src.service.event_registration.driving_adapter.http_controller.auth.role_auth import (
    require_admin,
)
from src.service.event_registration.driving_adapter.http_controller.schema.admin_schema import (
    AdminStatsResponse,
    PlatformStatsResponse,
    UserPageData,
)
from src.service.event_registration.driving_adapter.http_controller.schema.auth_schema import (
    UserResponse,
)
from src.service.event_registration.driving_adapter.http_controller.schema.common_schema import (
    DataResponse,
    PaginationResponse,
    SuccessResponse,
    page_query,
)
from src.service.event_registration.driving_adapter.http_controller.schema.event_schema import (
    AdminEventCreateRequest,
    AdminEventUpdateRequest,
    EventData,
    EventPageData,
    EventResponse,
)
from src.service.event_registration.driving_adapter.http_controller.schema.registration_schema import (
    RegistrationDetailResponse,
    RegistrationPageData,
)


# Every route here is admin-only
router = APIRouter()


@router.get('/stats', response_model=AdminStatsResponse)
@Logger.io
async def platform_stats(
    admin: AdminUserEntity = Depends(require_admin),
    use_case: AdminStatsUseCase = Depends(AdminStatsUseCase.depends),
) -> AdminStatsResponse:
    stats = await use_case.platform_stats()
    return AdminStatsResponse(stats=PlatformStatsResponse.from_dto(stats))


@router.get('/users', response_model=DataResponse[UserPageData])
@Logger.io
async def list_users(
    page: PageRequest = Depends(page_query),
    admin: AdminUserEntity = Depends(require_admin),
    use_case: AdminStatsUseCase = Depends(AdminStatsUseCase.depends),
) -> DataResponse[UserPageData]:
    users = await use_case.list_users(page=page)
    return DataResponse[UserPageData](
        data=UserPageData(
            users=[UserResponse.from_principal(u) for u in users.items],
            pagination=PaginationResponse.from_page(users),
        )
    )


@router.get('/events', response_model=DataResponse[EventPageData])
@Logger.io
async def list_events(
    search: Optional[str] = None,
    event_status: Optional[EventStatus] = Query(None, alias='status'),
    page: PageRequest = Depends(page_query),
    admin: AdminUserEntity = Depends(require_admin),
    use_case: ListEventsUseCase = Depends(ListEventsUseCase.depends),
) -> DataResponse[EventPageData]:
    events = await use_case.execute(
        event_filter=EventFilter(search=search or None, status=event_status), page=page
    )
    return DataResponse[EventPageData](
        data=EventPageData(
            events=[EventResponse.from_stats(e) for e in events.items],
            pagination=PaginationResponse.from_page(events),
        )
    )


@router.get('/registrations', response_model=DataResponse[RegistrationPageData])
@Logger.io
async def list_registrations(
    page: PageRequest = Depends(page_query),
    admin: AdminUserEntity = Depends(require_admin),
    use_case: ListRegistrationsUseCase = Depends(ListRegistrationsUseCase.depends),
) -> DataResponse[RegistrationPageData]:
    registrations = await use_case.list_all(registration_filter=RegistrationFilter(), page=page)
    return DataResponse[RegistrationPageData](
        data=RegistrationPageData(
            registrations=[RegistrationDetailResponse.from_detail(r) for r in registrations.items],
            pagination=PaginationResponse.from_page(registrations),
        )
    )


@router.post(
    '/events', response_model=DataResponse[EventData], status_code=status.HTTP_201_CREATED
)
@Logger.io
async def create_event(
    request: AdminEventCreateRequest,
    admin: AdminUserEntity = Depends(require_admin),
    use_case: CreateEventUseCase = Depends(CreateEventUseCase.depends),
) -> DataResponse[EventData]:
    event = await use_case.execute(principal=admin, **request.model_dump())
    return DataResponse[EventData](
        data=EventData(event=EventResponse.from_entity(event)),
        message='Event created successfully',
    )


@router.put('/events/{event_id}', response_model=DataResponse[EventData])
@Logger.io
async def update_event(
    event_id: UUID,
    request: AdminEventUpdateRequest,
    admin: AdminUserEntity = Depends(require_admin),
    use_case: UpdateEventUseCase = Depends(UpdateEventUseCase.depends),
) -> DataResponse[EventData]:
    event = await use_case.execute(event_id=event_id, changes=request.to_changes())
    return DataResponse[EventData](
        data=EventData(event=EventResponse.from_entity(event)),
        message='Event updated successfully',
    )


@router.delete('/events/{event_id}', response_model=SuccessResponse)
@Logger.io
async def delete_event(
    event_id: UUID,
    admin: AdminUserEntity = Depends(require_admin),
    use_case: DeleteEventUseCase = Depends(DeleteEventUseCase.depends),
) -> SuccessResponse:
    await use_case.execute(event_id=event_id, conflict_status=status.HTTP_400_BAD_REQUEST)
    return SuccessResponse(message='Event deleted successfully')
