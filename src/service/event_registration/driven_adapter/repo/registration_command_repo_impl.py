from uuid import UUID

from sqlalchemy import delete

from src.platform.database.session_repo import SessionRepo
from src.platform.logging.loguru_io import Logger
from src.service.event_registration.app.interface.i_registration_command_repo import (
    IRegistrationCommandRepo,
)
from src.service.event_registration.domain.entity.registration_entity import RegistrationEntity
from src.service.event_registration.driven_adapter.model.registration_model import (
    RegistrationModel,
)
from src.service.event_registration.driven_adapter.repo.model_mapper import (
    registration_to_entity,
)


class RegistrationCommandRepoImpl(SessionRepo, IRegistrationCommandRepo):
    @Logger.io
    async def create(self, *, registration: RegistrationEntity) -> RegistrationEntity:
        async with self._get_session() as session:
            model = RegistrationModel(
                id=registration.id,
                user_id=registration.user_id,
                event_id=registration.event_id,
                ticket_quantity=registration.ticket_quantity,
                payment_status=registration.payment_status.value,
                payment_reference=registration.payment_reference,
                payment_amount=registration.payment_amount,
                registration_date=registration.registration_date,
            )
            session.add(model)
            await session.flush()
            await session.refresh(model)
            return registration_to_entity(model)

    @Logger.io
    async def update(self, *, registration: RegistrationEntity) -> RegistrationEntity:
        async with self._get_session() as session:
            model = await session.get(RegistrationModel, registration.id)
            if model is None:
                raise LookupError(f'Registration {registration.id} vanished during update')
            model.payment_status = registration.payment_status.value
            model.payment_reference = registration.payment_reference
            model.payment_amount = registration.payment_amount
            await session.flush()
            await session.refresh(model)
            return registration_to_entity(model)

    @Logger.io
    async def delete(self, *, registration_id: UUID) -> None:
        async with self._get_session() as session:
            await session.execute(
                delete(RegistrationModel).where(RegistrationModel.id == registration_id)
            )
