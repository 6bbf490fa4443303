from abc import ABC, abstractmethod
from uuid import UUID

from src.service.event_registration.domain.entity.event_entity import EventEntity


class IEventCommandRepo(ABC):
    @abstractmethod
    async def create(self, *, event: EventEntity) -> EventEntity:
        pass

    @abstractmethod
    async def update(self, *, event: EventEntity) -> EventEntity:
        pass

    @abstractmethod
    async def delete(self, *, event_id: UUID) -> None:
        pass
