from uuid import UUID

from sqlalchemy import delete

from src.platform.database.session_repo import SessionRepo
from src.platform.logging.loguru_io import Logger
from src.service.event_registration.app.interface.i_event_command_repo import IEventCommandRepo
from src.service.event_registration.domain.entity.event_entity import EventEntity
from src.service.event_registration.driven_adapter.model.event_model import EventModel
from src.service.event_registration.driven_adapter.repo.model_mapper import (
    apply_event,
    event_to_entity,
)


class EventCommandRepoImpl(SessionRepo, IEventCommandRepo):
    @Logger.io
    async def create(self, *, event: EventEntity) -> EventEntity:
        async with self._get_session() as session:
            event_model = apply_event(EventModel(id=event.id), event)
            session.add(event_model)
            await session.flush()
            await session.refresh(event_model)
            return event_to_entity(event_model)

    @Logger.io
    async def update(self, *, event: EventEntity) -> EventEntity:
        async with self._get_session() as session:
            event_model = await session.get(EventModel, event.id)
            if event_model is None:
                raise LookupError(f'Event {event.id} vanished during update')
            apply_event(event_model, event)
            await session.flush()
            await session.refresh(event_model)
            return event_to_entity(event_model)

    @Logger.io
    async def delete(self, *, event_id: UUID) -> None:
        async with self._get_session() as session:
            await session.execute(delete(EventModel).where(EventModel.id == event_id))
