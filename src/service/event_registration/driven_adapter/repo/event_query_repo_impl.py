from typing import Any, List, Optional
from uuid import UUID

from sqlalchemy import Select, and_, func, or_, select

from src.platform.database.session_repo import SessionRepo
from src.platform.logging.loguru_io import Logger
from src.service.event_registration.app.dto.event_dto import EventFilter, EventWithStats
from src.service.event_registration.app.dto.page_dto import Page, PageRequest
from src.service.event_registration.app.interface.i_event_query_repo import IEventQueryRepo
from src.service.event_registration.domain.entity.event_entity import EventEntity
from src.service.event_registration.domain.enum.payment_status import PaymentStatus
from src.service.event_registration.driven_adapter.model.event_model import EventModel
from src.service.event_registration.driven_adapter.model.registration_model import (
    RegistrationModel,
)
from src.service.event_registration.driven_adapter.repo.model_mapper import event_to_entity


def _registration_stats():
    return (
        select(
            RegistrationModel.event_id.label('event_id'),
            func.count(RegistrationModel.id).label('registration_count'),
            func.count(RegistrationModel.id)
            .filter(RegistrationModel.payment_status == PaymentStatus.PAID.value)
            .label('paid_registrations'),
            func.count(RegistrationModel.id)
            .filter(RegistrationModel.payment_status == PaymentStatus.PENDING.value)
            .label('pending_registrations'),
        )
        .group_by(RegistrationModel.event_id)
        .subquery()
    )


def _select_with_stats() -> Select[Any]:
    stats = _registration_stats()
    return select(
        EventModel,
        func.coalesce(stats.c.registration_count, 0),
        func.coalesce(stats.c.paid_registrations, 0),
        func.coalesce(stats.c.pending_registrations, 0),
    ).outerjoin(stats, stats.c.event_id == EventModel.id)


def _to_event_with_stats(row: Any) -> EventWithStats:
    event_model, registration_count, paid, pending = row
    return EventWithStats(
        event=event_to_entity(event_model),
        registration_count=int(registration_count),
        paid_registrations=int(paid),
        pending_registrations=int(pending),
    )


def _filter_conditions(event_filter: EventFilter) -> list[Any]:
    conditions: list[Any] = []
    if event_filter.search:
        pattern = f'%{event_filter.search}%'
        conditions.append(
            or_(
                EventModel.name.ilike(pattern),
                EventModel.details.ilike(pattern),
                EventModel.venue.ilike(pattern),
            )
        )
    if event_filter.status:
        conditions.append(EventModel.status == event_filter.status.value)
    if event_filter.organizer:
        conditions.append(EventModel.organizer.ilike(f'%{event_filter.organizer}%'))
    if event_filter.date_from:
        conditions.append(EventModel.date >= event_filter.date_from)
    return conditions


class EventQueryRepoImpl(SessionRepo, IEventQueryRepo):
    @Logger.io
    async def get_by_id(self, *, event_id: UUID, for_update: bool = False) -> Optional[EventEntity]:
        query = select(EventModel).where(EventModel.id == event_id)
        if for_update:
            query = query.with_for_update()
        async with self._get_session() as session:
            result = await session.execute(query)
            event_model = result.scalar_one_or_none()
            return event_to_entity(event_model) if event_model else None

    @Logger.io
    async def get_with_stats(self, *, event_id: UUID) -> Optional[EventWithStats]:
        async with self._get_session() as session:
            result = await session.execute(_select_with_stats().where(EventModel.id == event_id))
            row = result.first()
            return _to_event_with_stats(row) if row else None

    @Logger.io
    async def list_events(
        self, *, event_filter: EventFilter, page: PageRequest
    ) -> Page[EventWithStats]:
        conditions = _filter_conditions(event_filter)
        async with self._get_session() as session:
            total = (
                await session.scalar(
                    select(func.count()).select_from(EventModel).where(*conditions)
                )
                or 0
            )
            result = await session.execute(
                _select_with_stats()
                .where(*conditions)
                .order_by(EventModel.date.asc())
                .limit(page.limit)
                .offset(page.offset)
            )
            return Page(
                items=[_to_event_with_stats(row) for row in result.all()],
                total=total,
                request=page,
            )

    @Logger.io
    async def list_by_organizer(
        self, *, organizer_id: UUID, organizer_names: List[str]
    ) -> List[EventWithStats]:
        ownership = [EventModel.organizer_id == organizer_id]
        names = [name for name in organizer_names if name]
        if names:
            ownership.append(
                and_(EventModel.organizer_id.is_(None), EventModel.organizer.in_(names))
            )
        async with self._get_session() as session:
            result = await session.execute(
                _select_with_stats().where(or_(*ownership)).order_by(EventModel.date.desc())
            )
            return [_to_event_with_stats(row) for row in result.all()]

    @Logger.io
    async def count(self) -> int:
        async with self._get_session() as session:
            return await session.scalar(select(func.count()).select_from(EventModel)) or 0
