"""
Principal: the authenticated identity behind a request.

Users and admins live in separate tables; a principal is always exactly one of
them and `is_admin` is the discriminator carried in tokens and used for every
re-fetch.
"""

from typing import Union

from src.service.event_registration.domain.entity.admin_user_entity import AdminUserEntity
from src.service.event_registration.domain.entity.user_entity import UserEntity


Principal = Union[AdminUserEntity, UserEntity]
