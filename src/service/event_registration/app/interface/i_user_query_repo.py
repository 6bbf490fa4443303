from abc import ABC, abstractmethod

from src.service.event_registration.app.dto.page_dto import Page, PageRequest
from src.service.event_registration.domain.entity.user_entity import UserEntity


class IUserQueryRepo(ABC):
    @abstractmethod
    async def list_users(self, *, page: PageRequest) -> Page[UserEntity]:
        pass

    @abstractmethod
    async def count(self) -> int:
        pass
