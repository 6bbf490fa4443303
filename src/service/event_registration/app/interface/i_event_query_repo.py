from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from src.service.event_registration.app.dto.event_dto import EventFilter, EventWithStats
from src.service.event_registration.app.dto.page_dto import Page, PageRequest
from src.service.event_registration.domain.entity.event_entity import EventEntity


class IEventQueryRepo(ABC):
    @abstractmethod
    async def get_by_id(self, *, event_id: UUID, for_update: bool = False) -> Optional[EventEntity]:
        """`for_update` locks the event row until the surrounding transaction ends"""
        pass

    @abstractmethod
    async def get_with_stats(self, *, event_id: UUID) -> Optional[EventWithStats]:
        pass

    @abstractmethod
    async def list_events(
        self, *, event_filter: EventFilter, page: PageRequest
    ) -> Page[EventWithStats]:
        pass

    @abstractmethod
    async def list_by_organizer(
        self, *, organizer_id: UUID, organizer_names: List[str]
    ) -> List[EventWithStats]:
        """Events matched by organizer_id, or by the legacy organizer display string"""
        pass

    @abstractmethod
    async def count(self) -> int:
        pass
