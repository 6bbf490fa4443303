"""SQLAlchemy models; importing this package registers every table on Base.metadata"""

from src.service.event_registration.driven_adapter.model.admin_user_model import AdminUserModel
from src.service.event_registration.driven_adapter.model.event_model import EventModel
from src.service.event_registration.driven_adapter.model.payment_model import PaymentModel
from src.service.event_registration.driven_adapter.model.registration_model import (
    RegistrationModel,
)
from src.service.event_registration.driven_adapter.model.user_model import UserModel

__all__ = ['AdminUserModel', 'EventModel', 'PaymentModel', 'RegistrationModel', 'UserModel']
