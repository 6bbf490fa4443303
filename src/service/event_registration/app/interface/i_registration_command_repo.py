from abc import ABC, abstractmethod
from uuid import UUID

from src.service.event_registration.domain.entity.registration_entity import RegistrationEntity


class IRegistrationCommandRepo(ABC):
    @abstractmethod
    async def create(self, *, registration: RegistrationEntity) -> RegistrationEntity:
        pass

    @abstractmethod
    async def update(self, *, registration: RegistrationEntity) -> RegistrationEntity:
        pass

    @abstractmethod
    async def delete(self, *, registration_id: UUID) -> None:
        pass
