from typing import Self
from uuid import UUID

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import ForbiddenError, NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.event_registration.app.dto.page_dto import Page, PageRequest
from src.service.event_registration.app.dto.payment_dto import (
    PaymentDetail,
    PaymentFilter,
    PaymentStats,
)
from src.service.event_registration.app.interface.i_payment_query_repo import (
    IPaymentQueryRepo,
)
from src.service.event_registration.domain.principal import Principal


class ListPaymentsUseCase:
    def __init__(self, *, payment_query_repo: IPaymentQueryRepo) -> None:
        self.payment_query_repo = payment_query_repo

    @classmethod
    @inject
    def depends(
        cls,
        payment_query_repo: IPaymentQueryRepo = Depends(Provide[Container.payment_query_repo]),
    ) -> Self:
        return cls(payment_query_repo=payment_query_repo)

    @Logger.io
    async def list_mine(self, *, principal: Principal, page: PageRequest) -> Page[PaymentDetail]:
        return await self.payment_query_repo.list_payments(
            payment_filter=PaymentFilter(user_id=principal.id), page=page
        )

    @Logger.io
    async def list_all(self, *, payment_filter: PaymentFilter, page: PageRequest) -> Page[PaymentDetail]:
        return await self.payment_query_repo.list_payments(payment_filter=payment_filter, page=page)

    @Logger.io
    async def get(self, *, payment_id: UUID, principal: Principal) -> PaymentDetail:
        detail = await self.payment_query_repo.get_detail(payment_id=payment_id)
        if detail is None:
            raise NotFoundError('Payment not found')
        if not principal.is_admin and detail.user_id != principal.id:
            raise ForbiddenError('Access denied')
        return detail

    @Logger.io
    async def stats(self) -> PaymentStats:
        return await self.payment_query_repo.get_stats()
