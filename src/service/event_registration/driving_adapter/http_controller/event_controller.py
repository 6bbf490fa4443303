from datetime import datetime
from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status
from opentelemetry import trace

from src.platform.logging.loguru_io import Logger
from src.service.event_registration.app.command.create_event_use_case import CreateEventUseCase
from src.service.event_registration.app.command.delete_event_use_case import DeleteEventUseCase
from src.service.event_registration.app.command.update_event_use_case import UpdateEventUseCase
from src.service.event_registration.app.dto.event_dto import EventFilter
from src.service.event_registration.app.dto.page_dto import PageRequest
from src.service.event_registration.app.query.get_event_use_case import GetEventUseCase
from src.service.event_registration.app.query.list_events_use_case import ListEventsUseCase
from src.service.event_registration.app.query.organizer_events_use_case import (
    OrganizerEventsUseCase,
)
from src.service.event_registration.domain.entity.event_entity import EventEntity
from src.service.event_registration.domain.entity.user_entity import UserEntity
from src.service.event_registration.domain.enum.event_status import EventStatus
from src.service.event_registration.driving_adapter.http_controller.auth.role_auth import (
    require_event_ownership,
    require_organizer,
)
from src.service.event_registration.driving_adapter.http_controller.schema.common_schema import (
    DataResponse,
    PaginationResponse,
    SuccessResponse,
    ensure_utc,
    page_query,
)
from src.service.event_registration.driving_adapter.http_controller.schema.event_schema import (
    DashboardResponse,
    EventAnalyticsEnvelope,
    EventAnalyticsResponse,
    EventCreateRequest,
    EventData,
    EventPageData,
    EventResponse,
    EventUpdateRequest,
)


router = APIRouter()
tracer = trace.get_tracer(__name__)


@router.get('', response_model=DataResponse[EventPageData])
@Logger.io
async def list_events(
    search: Optional[str] = None,
    event_status: Optional[EventStatus] = Query(None, alias='status'),
    organizer: Optional[str] = None,
    date: Optional[datetime] = None,
    page: PageRequest = Depends(page_query),
    use_case: ListEventsUseCase = Depends(ListEventsUseCase.depends),
) -> DataResponse[EventPageData]:
    events = await use_case.execute(
        event_filter=EventFilter(
            search=search or None,
            status=event_status,
            organizer=organizer or None,
            date_from=ensure_utc(date),
        ),
        page=page,
    )
    return DataResponse[EventPageData](
        data=EventPageData(
            events=[EventResponse.from_stats(e) for e in events.items],
            pagination=PaginationResponse.from_page(events),
        ),
        message='Events retrieved successfully',
    )


@router.get('/my-events', response_model=DataResponse[List[EventResponse]])
@Logger.io
async def list_my_events(
    organizer: UserEntity = Depends(require_organizer),
    use_case: OrganizerEventsUseCase = Depends(OrganizerEventsUseCase.depends),
) -> DataResponse[List[EventResponse]]:
    events = await use_case.list_my_events(principal=organizer)
    return DataResponse[List[EventResponse]](
        data=[EventResponse.from_stats(e, detailed=True) for e in events]
    )


@router.get('/dashboard-analytics', response_model=DataResponse[DashboardResponse])
@Logger.io
async def dashboard_analytics(
    organizer: UserEntity = Depends(require_organizer),
    use_case: OrganizerEventsUseCase = Depends(OrganizerEventsUseCase.depends),
) -> DataResponse[DashboardResponse]:
    dashboard = await use_case.dashboard(principal=organizer)
    return DataResponse[DashboardResponse](data=DashboardResponse.from_dto(dashboard))


@router.get('/{event_id}', response_model=DataResponse[EventData])
@Logger.io
async def get_event(
    event_id: UUID,
    use_case: GetEventUseCase = Depends(GetEventUseCase.depends),
) -> DataResponse[EventData]:
    event = await use_case.execute(event_id=event_id)
    return DataResponse[EventData](
        data=EventData(event=EventResponse.from_stats(event, detailed=True))
    )


@router.post('', response_model=DataResponse[EventData], status_code=status.HTTP_201_CREATED)
@Logger.io
async def create_event(
    request: EventCreateRequest,
    organizer: UserEntity = Depends(require_organizer),
    use_case: CreateEventUseCase = Depends(CreateEventUseCase.depends),
) -> DataResponse[EventData]:
    with tracer.start_as_current_span('controller.create_event') as span:
        span.set_attribute('organizer.id', str(organizer.id))
        event = await use_case.execute(principal=organizer, **request.model_dump())
        return DataResponse[EventData](
            data=EventData(event=EventResponse.from_entity(event)),
            message='Event created successfully',
        )


@router.put('/{event_id}', response_model=DataResponse[EventData])
@Logger.io
async def update_event(
    request: EventUpdateRequest,
    event: EventEntity = Depends(require_event_ownership),
    use_case: UpdateEventUseCase = Depends(UpdateEventUseCase.depends),
) -> DataResponse[EventData]:
    updated = await use_case.execute(event_id=event.id, changes=request.to_changes())
    return DataResponse[EventData](
        data=EventData(event=EventResponse.from_entity(updated)),
        message='Event updated successfully',
    )


@router.delete('/{event_id}', response_model=SuccessResponse)
@Logger.io
async def delete_event(
    event: EventEntity = Depends(require_event_ownership),
    use_case: DeleteEventUseCase = Depends(DeleteEventUseCase.depends),
) -> SuccessResponse:
    await use_case.execute(event_id=event.id)
    return SuccessResponse(message='Event deleted successfully')


@router.get('/{event_id}/analytics', response_model=EventAnalyticsEnvelope)
@Logger.io
async def event_analytics(
    event: EventEntity = Depends(require_event_ownership),
    use_case: OrganizerEventsUseCase = Depends(OrganizerEventsUseCase.depends),
) -> EventAnalyticsEnvelope:
    analytics = await use_case.analytics(event_id=event.id)
    return EventAnalyticsEnvelope(analytics=EventAnalyticsResponse.from_dto(analytics))
