"""
Auth API Schemas - Pydantic models for request/response

Credential rules (length, email format) are enforced by the domain so that
clients get the documented messages instead of generic validation errors.
"""

from datetime import datetime
from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, SecretStr

from src.service.event_registration.domain.entity.user_entity import UserEntity
from src.service.event_registration.domain.principal import Principal


class RegisterRequest(BaseModel):
    email: str = ''
    password: SecretStr = SecretStr('')
    name: Optional[str] = Field(None, max_length=100)

    model_config = ConfigDict(
        json_schema_extra={
            'example': {
                'email': 'ada@example.com',
                'password': 'P@ssw0rd123',
                'name': 'Ada Lovelace',
            }
        }
    )


class LoginRequest(BaseModel):
    email: str = ''
    password: SecretStr = Field(SecretStr(''), max_length=72)

    model_config = ConfigDict(
        json_schema_extra={'example': {'email': 'admin@gowra.com', 'password': 'admin123'}}
    )


class RefreshRequest(BaseModel):
    refresh_token: str = Field('', alias='refreshToken')

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={'example': {'refreshToken': 'eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9...'}},
    )


class UpgradeToOrganizerRequest(BaseModel):
    organization_name: Optional[str] = None
    organization_type: Optional[str] = None
    event_types: Optional[List[str]] = None
    organization_description: Optional[str] = None
    organization_website: Optional[str] = None

    model_config = ConfigDict(
        json_schema_extra={
            'example': {
                'organization_name': 'Gowra Arts Collective',
                'organization_type': 'non-profit',
                'event_types': ['concert', 'workshop'],
                'organization_description': 'Community music events',
                'organization_website': 'https://arts.example.com',
            }
        }
    )


class UpdateProfileRequest(BaseModel):
    name: str = Field(..., max_length=100)


class UserResponse(BaseModel):
    id: UUID
    email: str
    name: str
    role: str
    is_admin: bool = Field(alias='isAdmin')
    organization_name: Optional[str] = None
    organization_type: Optional[str] = None
    event_types: Optional[List[str]] = None
    organization_description: Optional[str] = None
    organization_website: Optional[str] = None
    organizer_since: Optional[datetime] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            'example': {
                'id': '01936d8f-5e73-7c4e-a9c5-123456789abc',
                'email': 'ada@example.com',
                'name': 'Ada Lovelace',
                'role': 'user',
                'isAdmin': False,
                'created_at': '2025-01-10T10:30:00Z',
            }
        },
    )

    @classmethod
    def from_principal(cls, principal: Principal) -> 'UserResponse':
        """Password hashes never leave the service"""
        response = cls(
            id=principal.id,
            email=principal.email,
            name=principal.name,
            role=principal.role.value,
            is_admin=principal.is_admin,
            created_at=principal.created_at,
            updated_at=principal.updated_at,
        )
        if isinstance(principal, UserEntity):
            response.organization_name = principal.organization_name
            response.organization_type = principal.organization_type
            response.event_types = principal.event_types or None
            response.organization_description = principal.organization_description
            response.organization_website = principal.organization_website
            response.organizer_since = principal.organizer_since
        return response


class AuthResponse(BaseModel):
    success: bool = True
    message: Optional[str] = None
    user: UserResponse
    token: Optional[str] = None
    refresh_token: Optional[str] = Field(None, alias='refreshToken')
    is_admin: Optional[bool] = Field(None, alias='isAdmin')

    model_config = ConfigDict(populate_by_name=True)
