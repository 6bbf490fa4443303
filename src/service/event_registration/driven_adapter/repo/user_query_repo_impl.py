from sqlalchemy import func, select

from src.platform.database.session_repo import SessionRepo
from src.platform.logging.loguru_io import Logger
from src.service.event_registration.app.dto.page_dto import Page, PageRequest
from src.service.event_registration.app.interface.i_user_query_repo import IUserQueryRepo
from src.service.event_registration.domain.entity.user_entity import UserEntity
from src.service.event_registration.driven_adapter.model.user_model import UserModel
from src.service.event_registration.driven_adapter.repo.model_mapper import user_to_entity


class UserQueryRepoImpl(SessionRepo, IUserQueryRepo):
    @Logger.io
    async def list_users(self, *, page: PageRequest) -> Page[UserEntity]:
        async with self._get_session() as session:
            total = await session.scalar(select(func.count()).select_from(UserModel)) or 0
            result = await session.execute(
                select(UserModel)
                .order_by(UserModel.created_at.desc())
                .limit(page.limit)
                .offset(page.offset)
            )
            return Page(
                items=[user_to_entity(m) for m in result.scalars().all()],
                total=total,
                request=page,
            )

    @Logger.io
    async def count(self) -> int:
        async with self._get_session() as session:
            return await session.scalar(select(func.count()).select_from(UserModel)) or 0
