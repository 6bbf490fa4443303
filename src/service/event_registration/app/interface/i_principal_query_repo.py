from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from src.service.event_registration.domain.entity.admin_user_entity import AdminUserEntity
from src.service.event_registration.domain.principal import Principal


class IPrincipalQueryRepo(ABC):
    """Reads identities from the users and admin_users tables"""

    @abstractmethod
    async def get_by_id(self, *, principal_id: UUID, is_admin: bool) -> Optional[Principal]:
        """Reads exactly one table, chosen by the is_admin discriminator"""
        pass

    @abstractmethod
    async def get_by_email(self, *, email: str) -> Optional[Principal]:
        """Admin accounts take precedence over users holding the same email"""
        pass

    @abstractmethod
    async def get_admin_by_email(self, *, email: str) -> Optional[AdminUserEntity]:
        pass

    @abstractmethod
    async def email_exists(self, *, email: str) -> bool:
        """True when either table holds the email"""
        pass
