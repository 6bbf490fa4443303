from decimal import Decimal
from typing import Any, List, Optional
from uuid import UUID

from sqlalchemy import Select, func, select

from src.platform.database.session_repo import SessionRepo
from src.platform.logging.loguru_io import Logger
from src.service.event_registration.app.dto.event_dto import RecentRegistration
from src.service.event_registration.app.dto.page_dto import Page, PageRequest
from src.service.event_registration.app.dto.registration_dto import (
    RegistrationDetail,
    RegistrationFilter,
    RegistrationStats,
)
from src.service.event_registration.app.interface.i_registration_query_repo import (
    IRegistrationQueryRepo,
)
from src.service.event_registration.domain.entity.registration_entity import RegistrationEntity
from src.service.event_registration.domain.enum.event_status import EventStatus
from src.service.event_registration.domain.enum.payment_status import PaymentStatus
from src.service.event_registration.driven_adapter.model.event_model import EventModel
from src.service.event_registration.driven_adapter.model.registration_model import (
    RegistrationModel,
)
from src.service.event_registration.driven_adapter.model.user_model import UserModel
from src.service.event_registration.driven_adapter.repo.model_mapper import (
    registration_to_entity,
)


def _select_detail() -> Select[Any]:
    return (
        select(
            RegistrationModel,
            UserModel.name,
            UserModel.email,
            EventModel.name,
            EventModel.date,
            EventModel.venue,
            EventModel.price,
            EventModel.organizer,
            EventModel.status,
        )
        .join(UserModel, UserModel.id == RegistrationModel.user_id)
        .join(EventModel, EventModel.id == RegistrationModel.event_id)
    )


def _to_detail(row: Any) -> RegistrationDetail:
    (
        registration_model,
        user_name,
        user_email,
        event_name,
        event_date,
        event_venue,
        event_price,
        event_organizer,
        event_status,
    ) = row
    return RegistrationDetail(
        registration=registration_to_entity(registration_model),
        user_name=user_name,
        user_email=user_email,
        event_name=event_name,
        event_date=event_date,
        event_venue=event_venue,
        event_price=event_price,
        event_organizer=event_organizer,
        event_status=EventStatus(event_status),
    )


def _filter_conditions(registration_filter: RegistrationFilter) -> list[Any]:
    conditions: list[Any] = []
    if registration_filter.event_id:
        conditions.append(RegistrationModel.event_id == registration_filter.event_id)
    if registration_filter.user_id:
        conditions.append(RegistrationModel.user_id == registration_filter.user_id)
    if registration_filter.payment_status:
        conditions.append(
            RegistrationModel.payment_status == registration_filter.payment_status.value
        )
    return conditions


def _count_status(status: PaymentStatus):
    return func.count(RegistrationModel.id).filter(RegistrationModel.payment_status == status.value)


class RegistrationQueryRepoImpl(SessionRepo, IRegistrationQueryRepo):
    @Logger.io
    async def get_by_id(
        self, *, registration_id: UUID, for_update: bool = False
    ) -> Optional[RegistrationEntity]:
        query = select(RegistrationModel).where(RegistrationModel.id == registration_id)
        if for_update:
            query = query.with_for_update()
        async with self._get_session() as session:
            result = await session.execute(query)
            model = result.scalar_one_or_none()
            return registration_to_entity(model) if model else None

    @Logger.io
    async def get_detail(self, *, registration_id: UUID) -> Optional[RegistrationDetail]:
        async with self._get_session() as session:
            result = await session.execute(
                _select_detail().where(RegistrationModel.id == registration_id)
            )
            row = result.first()
            return _to_detail(row) if row else None

    @Logger.io
    async def get_by_user_and_event(
        self, *, user_id: UUID, event_id: UUID
    ) -> Optional[RegistrationEntity]:
        async with self._get_session() as session:
            result = await session.execute(
                select(RegistrationModel)
                .where(RegistrationModel.user_id == user_id, RegistrationModel.event_id == event_id)
                .limit(1)
            )
            model = result.scalar_one_or_none()
            return registration_to_entity(model) if model else None

    @Logger.io
    async def count_by_event(self, *, event_id: UUID) -> int:
        async with self._get_session() as session:
            count = await session.scalar(
                select(func.count(RegistrationModel.id)).where(
                    RegistrationModel.event_id == event_id
                )
            )
            return int(count or 0)

    @Logger.io
    async def list_registrations(
        self, *, registration_filter: RegistrationFilter, page: PageRequest
    ) -> Page[RegistrationDetail]:
        conditions = _filter_conditions(registration_filter)
        async with self._get_session() as session:
            total = (
                await session.scalar(
                    select(func.count()).select_from(RegistrationModel).where(*conditions)
                )
                or 0
            )
            result = await session.execute(
                _select_detail()
                .where(*conditions)
                .order_by(RegistrationModel.registration_date.desc())
                .limit(page.limit)
                .offset(page.offset)
            )
            return Page(items=[_to_detail(row) for row in result.all()], total=total, request=page)

    @Logger.io
    async def list_for_event(self, *, event_id: UUID) -> List[RecentRegistration]:
        async with self._get_session() as session:
            result = await session.execute(
                select(RegistrationModel, UserModel.name, UserModel.email)
                .join(UserModel, UserModel.id == RegistrationModel.user_id)
                .where(RegistrationModel.event_id == event_id)
                .order_by(RegistrationModel.created_at.desc())
            )
            return [
                RecentRegistration(
                    id=model.id,
                    attendee_name=name or 'Unknown',
                    email=email,
                    status=PaymentStatus(model.payment_status),
                    ticket_quantity=model.ticket_quantity,
                    registered_at=model.created_at,
                )
                for model, name, email in result.all()
            ]

    @Logger.io
    async def get_stats(self) -> RegistrationStats:
        async with self._get_session() as session:
            result = await session.execute(
                select(
                    func.count(RegistrationModel.id),
                    func.coalesce(func.sum(RegistrationModel.ticket_quantity), 0),
                    _count_status(PaymentStatus.PAID),
                    _count_status(PaymentStatus.PENDING),
                    _count_status(PaymentStatus.FAILED),
                    _count_status(PaymentStatus.REFUNDED),
                    func.coalesce(
                        func.sum(RegistrationModel.payment_amount).filter(
                            RegistrationModel.payment_status == PaymentStatus.PAID.value
                        ),
                        0,
                    ),
                )
            )
            total, tickets, paid, pending, failed, refunded, revenue = result.one()
            return RegistrationStats(
                total_registrations=int(total),
                total_tickets=int(tickets),
                paid_registrations=int(paid),
                pending_registrations=int(pending),
                failed_registrations=int(failed),
                refunded_registrations=int(refunded),
                total_revenue=Decimal(revenue),
            )
