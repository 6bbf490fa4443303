from src.platform.database.session_repo import SessionRepo
from src.platform.logging.loguru_io import Logger
from src.service.event_registration.app.interface.i_admin_user_command_repo import (
    IAdminUserCommandRepo,
)
from src.service.event_registration.domain.entity.admin_user_entity import AdminUserEntity
from src.service.event_registration.driven_adapter.model.admin_user_model import AdminUserModel
from src.service.event_registration.driven_adapter.repo.model_mapper import admin_to_entity


class AdminUserCommandRepoImpl(SessionRepo, IAdminUserCommandRepo):
    @Logger.io
    async def create(self, *, admin: AdminUserEntity) -> AdminUserEntity:
        async with self._get_session() as session:
            admin_model = AdminUserModel(
                id=admin.id,
                email=admin.email,
                name=admin.name,
                password_hash=admin.password_hash,
            )
            session.add(admin_model)
            await session.flush()
            await session.refresh(admin_model)
            return admin_to_entity(admin_model)

    @Logger.io
    async def update(self, *, admin: AdminUserEntity) -> AdminUserEntity:
        async with self._get_session() as session:
            admin_model = await session.get(AdminUserModel, admin.id)
            if admin_model is None:
                raise LookupError(f'Admin {admin.id} vanished during update')
            admin_model.name = admin.name
            admin_model.password_hash = admin.password_hash
            await session.flush()
            await session.refresh(admin_model)
            return admin_to_entity(admin_model)
