from abc import ABC, abstractmethod

from src.service.event_registration.domain.entity.admin_user_entity import AdminUserEntity


class IAdminUserCommandRepo(ABC):
    @abstractmethod
    async def create(self, *, admin: AdminUserEntity) -> AdminUserEntity:
        pass

    @abstractmethod
    async def update(self, *, admin: AdminUserEntity) -> AdminUserEntity:
        pass
