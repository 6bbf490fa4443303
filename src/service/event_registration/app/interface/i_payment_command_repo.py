from abc import ABC, abstractmethod

from src.service.event_registration.domain.entity.payment_entity import PaymentEntity


class IPaymentCommandRepo(ABC):
    @abstractmethod
    async def create(self, *, payment: PaymentEntity) -> PaymentEntity:
        pass

    @abstractmethod
    async def update(self, *, payment: PaymentEntity) -> PaymentEntity:
        pass
