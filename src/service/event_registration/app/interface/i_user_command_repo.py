from abc import ABC, abstractmethod

from src.service.event_registration.domain.entity.user_entity import UserEntity


class IUserCommandRepo(ABC):
    @abstractmethod
    async def create(self, *, user: UserEntity) -> UserEntity:
        pass

    @abstractmethod
    async def update(self, *, user: UserEntity) -> UserEntity:
        pass
