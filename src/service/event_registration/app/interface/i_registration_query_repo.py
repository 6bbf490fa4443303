from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from src.service.event_registration.app.dto.event_dto import RecentRegistration
from src.service.event_registration.app.dto.page_dto import Page, PageRequest
from src.service.event_registration.app.dto.registration_dto import (
    RegistrationDetail,
    RegistrationFilter,
    RegistrationStats,
)
from src.service.event_registration.domain.entity.registration_entity import RegistrationEntity


class IRegistrationQueryRepo(ABC):
    @abstractmethod
    async def get_by_id(
        self, *, registration_id: UUID, for_update: bool = False
    ) -> Optional[RegistrationEntity]:
        pass

    @abstractmethod
    async def get_detail(self, *, registration_id: UUID) -> Optional[RegistrationDetail]:
        pass

    @abstractmethod
    async def get_by_user_and_event(
        self, *, user_id: UUID, event_id: UUID
    ) -> Optional[RegistrationEntity]:
        pass

    @abstractmethod
    async def count_by_event(self, *, event_id: UUID) -> int:
        """Number of registrations of the event, whatever their ticket quantity"""
        pass

    @abstractmethod
    async def list_registrations(
        self, *, registration_filter: RegistrationFilter, page: PageRequest
    ) -> Page[RegistrationDetail]:
        pass

    @abstractmethod
    async def list_for_event(self, *, event_id: UUID) -> List[RecentRegistration]:
        """Newest first"""
        pass

    @abstractmethod
    async def get_stats(self) -> RegistrationStats:
        pass
