from datetime import datetime
from typing import ClassVar, List, Optional
from uuid import UUID

import attrs

from src.platform.exception.exceptions import DomainError
from src.service.event_registration.domain.enum.user_role import UserRole


MIN_PASSWORD_LENGTH = 8


def validate_credentials(*, email: str, password: str) -> None:
    if not email or not password:
        raise DomainError('Email and password are required')
    if len(password) < MIN_PASSWORD_LENGTH:
        raise DomainError('Password must be at least 8 characters long')
    if '@' not in email:
        raise DomainError('Invalid email format')


@attrs.define
class UserEntity:
    email: str
    name: str
    password_hash: str = attrs.field(default='', repr=False)
    id: Optional[UUID] = None
    role: UserRole = UserRole.USER
    organization_name: Optional[str] = None
    organization_type: Optional[str] = None
    event_types: List[str] = attrs.field(factory=list)
    organization_description: Optional[str] = None
    organization_website: Optional[str] = None
    organizer_since: Optional[datetime] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    is_admin: ClassVar[bool] = False

    @property
    def is_organizer(self) -> bool:
        return self.role == UserRole.ORGANIZER

    @property
    def display_name(self) -> str:
        return self.name or self.email

    @classmethod
    def create(cls, *, id: UUID, email: str, name: Optional[str], password_hash: str) -> 'UserEntity':
        email = email.strip().lower()
        return cls(
            id=id,
            email=email,
            name=(name or '').strip() or email.split('@')[0],
            password_hash=password_hash,
            role=UserRole.USER,
        )

    def upgrade_to_organizer(
        self,
        *,
        organization_name: Optional[str],
        organization_type: Optional[str],
        event_types: Optional[List[str]],
        organization_description: Optional[str] = None,
        organization_website: Optional[str] = None,
        now: datetime,
    ) -> None:
        if not organization_name or not organization_type:
            raise DomainError('Organization name and type are required')
        if not event_types:
            raise DomainError('At least one event type is required')
        if self.is_organizer:
            raise DomainError('User is already an organizer')

        self.role = UserRole.ORGANIZER
        self.organization_name = organization_name
        self.organization_type = organization_type
        self.event_types = list(event_types)
        self.organization_description = organization_description
        self.organization_website = organization_website
        self.organizer_since = now
        self.updated_at = now
