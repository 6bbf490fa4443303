from typing import Optional
from uuid import UUID

from sqlalchemy import func, select

from src.platform.database.session_repo import SessionRepo
from src.platform.logging.loguru_io import Logger
from src.service.event_registration.app.interface.i_principal_query_repo import (
    IPrincipalQueryRepo,
)
from src.service.event_registration.domain.entity.admin_user_entity import AdminUserEntity
from src.service.event_registration.domain.principal import Principal
from src.service.event_registration.driven_adapter.model.admin_user_model import AdminUserModel
from src.service.event_registration.driven_adapter.model.user_model import UserModel
from src.service.event_registration.driven_adapter.repo.model_mapper import (
    admin_to_entity,
    user_to_entity,
)


class PrincipalQueryRepoImpl(SessionRepo, IPrincipalQueryRepo):
    @Logger.io
    async def get_by_id(self, *, principal_id: UUID, is_admin: bool) -> Optional[Principal]:
        async with self._get_session() as session:
            if is_admin:
                admin_model = await session.get(AdminUserModel, principal_id)
                return admin_to_entity(admin_model) if admin_model else None
            user_model = await session.get(UserModel, principal_id)
            return user_to_entity(user_model) if user_model else None

    @Logger.io
    async def get_by_email(self, *, email: str) -> Optional[Principal]:
        admin = await self.get_admin_by_email(email=email)
        if admin:
            return admin
        async with self._get_session() as session:
            result = await session.execute(
                select(UserModel).where(func.lower(UserModel.email) == email.strip().lower())
            )
            user_model = result.scalar_one_or_none()
            return user_to_entity(user_model) if user_model else None

    @Logger.io
    async def get_admin_by_email(self, *, email: str) -> Optional[AdminUserEntity]:
        async with self._get_session() as session:
            result = await session.execute(
                select(AdminUserModel).where(
                    func.lower(AdminUserModel.email) == email.strip().lower()
                )
            )
            admin_model = result.scalar_one_or_none()
            return admin_to_entity(admin_model) if admin_model else None

    @Logger.io
    async def email_exists(self, *, email: str) -> bool:
        normalized = email.strip().lower()
        async with self._get_session() as session:
            admin_hit = select(AdminUserModel.id).where(func.lower(AdminUserModel.email) == normalized)
            user_hit = select(UserModel.id).where(func.lower(UserModel.email) == normalized)
            result = await session.execute(admin_hit.union_all(user_hit).limit(1))
            return result.first() is not None
