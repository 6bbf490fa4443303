from src.platform.database.session_repo import SessionRepo
from src.platform.logging.loguru_io import Logger
from src.service.event_registration.app.interface.i_payment_command_repo import (
    IPaymentCommandRepo,
)
from src.service.event_registration.domain.entity.payment_entity import PaymentEntity
from src.service.event_registration.driven_adapter.model.payment_model import PaymentModel
from src.service.event_registration.driven_adapter.repo.model_mapper import payment_to_entity


class PaymentCommandRepoImpl(SessionRepo, IPaymentCommandRepo):
    @Logger.io
    async def create(self, *, payment: PaymentEntity) -> PaymentEntity:
        async with self._get_session() as session:
            model = PaymentModel(
                id=payment.id,
                registration_id=payment.registration_id,
                payment_reference=payment.payment_reference,
                amount=payment.amount,
                status=payment.status.value,
                payment_method=payment.payment_method,
                transaction_date=payment.transaction_date,
            )
            session.add(model)
            await session.flush()
            await session.refresh(model)
            return payment_to_entity(model)

    @Logger.io
    async def update(self, *, payment: PaymentEntity) -> PaymentEntity:
        async with self._get_session() as session:
            model = await session.get(PaymentModel, payment.id)
            if model is None:
                raise LookupError(f'Payment {payment.id} vanished during update')
            model.status = payment.status.value
            await session.flush()
            await session.refresh(model)
            return payment_to_entity(model)
