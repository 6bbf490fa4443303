from src.platform.database.session_repo import SessionRepo
from src.platform.logging.loguru_io import Logger
from src.service.event_registration.app.interface.i_user_command_repo import IUserCommandRepo
from src.service.event_registration.domain.entity.user_entity import UserEntity
from src.service.event_registration.driven_adapter.model.user_model import UserModel
from src.service.event_registration.driven_adapter.repo.model_mapper import (
    apply_user,
    user_to_entity,
)


class UserCommandRepoImpl(SessionRepo, IUserCommandRepo):
    @Logger.io
    async def create(self, *, user: UserEntity) -> UserEntity:
        async with self._get_session() as session:
            user_model = apply_user(UserModel(id=user.id), user)
            session.add(user_model)
            await session.flush()
            await session.refresh(user_model)
            return user_to_entity(user_model)

    @Logger.io
    async def update(self, *, user: UserEntity) -> UserEntity:
        async with self._get_session() as session:
            user_model = await session.get(UserModel, user.id)
            if user_model is None:
                raise LookupError(f'User {user.id} vanished during update')
            apply_user(user_model, user)
            await session.flush()
            await session.refresh(user_model)
            return user_to_entity(user_model)
