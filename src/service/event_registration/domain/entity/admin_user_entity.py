from datetime import datetime
from typing import ClassVar, Optional
from uuid import UUID

import attrs

from src.service.event_registration.domain.enum.user_role import UserRole


@attrs.define
class AdminUserEntity:
    email: str
    name: str
    password_hash: str = attrs.field(default='', repr=False)
    id: Optional[UUID] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    is_admin: ClassVar[bool] = True
    role: ClassVar[UserRole] = UserRole.ADMIN

    @property
    def is_organizer(self) -> bool:
        return False

    @property
    def display_name(self) -> str:
        return self.name or self.email
