from decimal import Decimal
from typing import Any, Optional
from uuid import UUID

from sqlalchemy import Select, func, select

from src.platform.database.session_repo import SessionRepo
from src.platform.logging.loguru_io import Logger
from src.service.event_registration.app.dto.page_dto import Page, PageRequest
from src.service.event_registration.app.dto.payment_dto import (
    PaymentDetail,
    PaymentFilter,
    PaymentStats,
)
from src.service.event_registration.app.interface.i_payment_query_repo import IPaymentQueryRepo
from src.service.event_registration.domain.entity.payment_entity import (
    REFUND_METHOD,
    PaymentEntity,
)
from src.service.event_registration.driven_adapter.model.event_model import EventModel
from src.service.event_registration.driven_adapter.model.payment_model import PaymentModel
from src.service.event_registration.driven_adapter.model.registration_model import (
    RegistrationModel,
)
from src.service.event_registration.driven_adapter.model.user_model import UserModel
from src.service.event_registration.driven_adapter.repo.model_mapper import payment_to_entity


def _select_detail() -> Select[Any]:
    return (
        select(
            PaymentModel,
            UserModel.id,
            UserModel.name,
            UserModel.email,
            EventModel.id,
            EventModel.name,
        )
        .join(RegistrationModel, RegistrationModel.id == PaymentModel.registration_id)
        .join(UserModel, UserModel.id == RegistrationModel.user_id)
        .join(EventModel, EventModel.id == RegistrationModel.event_id)
    )


def _to_detail(row: Any) -> PaymentDetail:
    payment_model, user_id, user_name, user_email, event_id, event_name = row
    return PaymentDetail(
        payment=payment_to_entity(payment_model),
        user_id=user_id,
        user_name=user_name,
        user_email=user_email,
        event_id=event_id,
        event_name=event_name,
    )


def _filter_conditions(payment_filter: PaymentFilter) -> list[Any]:
    conditions: list[Any] = []
    if payment_filter.registration_id:
        conditions.append(PaymentModel.registration_id == payment_filter.registration_id)
    if payment_filter.user_id:
        conditions.append(RegistrationModel.user_id == payment_filter.user_id)
    if payment_filter.status:
        conditions.append(PaymentModel.status == payment_filter.status.value)
    if payment_filter.payment_method:
        conditions.append(PaymentModel.payment_method == payment_filter.payment_method)
    if payment_filter.start_date:
        conditions.append(PaymentModel.transaction_date >= payment_filter.start_date)
    if payment_filter.end_date:
        conditions.append(PaymentModel.transaction_date <= payment_filter.end_date)
    return conditions


class PaymentQueryRepoImpl(SessionRepo, IPaymentQueryRepo):
    @Logger.io
    async def get_by_id(
        self, *, payment_id: UUID, for_update: bool = False
    ) -> Optional[PaymentEntity]:
        query = select(PaymentModel).where(PaymentModel.id == payment_id)
        if for_update:
            query = query.with_for_update()
        async with self._get_session() as session:
            result = await session.execute(query)
            model = result.scalar_one_or_none()
            return payment_to_entity(model) if model else None

    @Logger.io
    async def get_detail(self, *, payment_id: UUID) -> Optional[PaymentDetail]:
        async with self._get_session() as session:
            result = await session.execute(_select_detail().where(PaymentModel.id == payment_id))
            row = result.first()
            return _to_detail(row) if row else None

    @Logger.io
    async def list_payments(
        self, *, payment_filter: PaymentFilter, page: PageRequest
    ) -> Page[PaymentDetail]:
        conditions = _filter_conditions(payment_filter)
        async with self._get_session() as session:
            total = (
                await session.scalar(
                    select(func.count())
                    .select_from(PaymentModel)
                    .join(RegistrationModel, RegistrationModel.id == PaymentModel.registration_id)
                    .where(*conditions)
                )
                or 0
            )
            result = await session.execute(
                _select_detail()
                .where(*conditions)
                .order_by(PaymentModel.created_at.desc())
                .limit(page.limit)
                .offset(page.offset)
            )
            return Page(items=[_to_detail(row) for row in result.all()], total=total, request=page)

    @Logger.io
    async def get_stats(self) -> PaymentStats:
        is_refund = PaymentModel.payment_method == REFUND_METHOD
        async with self._get_session() as session:
            totals = await session.execute(
                select(
                    func.count(PaymentModel.id).filter(~is_refund),
                    func.coalesce(func.sum(PaymentModel.amount).filter(~is_refund), 0),
                    func.count(PaymentModel.id).filter(is_refund),
                    func.coalesce(func.sum(PaymentModel.amount).filter(is_refund), 0),
                )
            )
            payments, amount, refunds, refunded_amount = totals.one()
            by_method = await session.execute(
                select(PaymentModel.payment_method, func.count(PaymentModel.id))
                .where(~is_refund)
                .group_by(PaymentModel.payment_method)
            )
            return PaymentStats(
                total_payments=int(payments),
                total_amount=Decimal(amount),
                total_refunds=int(refunds),
                refunded_amount=abs(Decimal(refunded_amount)),
                by_method={method or 'unknown': int(count) for method, count in by_method.all()},
            )
