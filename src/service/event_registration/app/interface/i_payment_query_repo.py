from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from src.service.event_registration.app.dto.page_dto import Page, PageRequest
from src.service.event_registration.app.dto.payment_dto import (
    PaymentDetail,
    PaymentFilter,
    PaymentStats,
)
from src.service.event_registration.domain.entity.payment_entity import PaymentEntity


class IPaymentQueryRepo(ABC):
    @abstractmethod
    async def get_by_id(self, *, payment_id: UUID, for_update: bool = False) -> Optional[PaymentEntity]:
        pass

    @abstractmethod
    async def get_detail(self, *, payment_id: UUID) -> Optional[PaymentDetail]:
        pass

    @abstractmethod
    async def list_payments(
        self, *, payment_filter: PaymentFilter, page: PageRequest
    ) -> Page[PaymentDetail]:
        pass

    @abstractmethod
    async def get_stats(self) -> PaymentStats:
        pass
