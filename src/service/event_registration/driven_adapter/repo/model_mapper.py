"""Row <-> entity conversion shared by the SQLAlchemy repositories"""

from src.service.event_registration.domain.entity.admin_user_entity import AdminUserEntity
from src.service.event_registration.domain.entity.event_entity import EventEntity
from src.service.event_registration.domain.entity.payment_entity import PaymentEntity
from src.service.event_registration.domain.entity.registration_entity import RegistrationEntity
from src.service.event_registration.domain.entity.user_entity import UserEntity
from src.service.event_registration.domain.enum.event_status import EventStatus
from src.service.event_registration.domain.enum.payment_status import (
    PaymentRecordStatus,
    PaymentStatus,
)
from src.service.event_registration.domain.enum.user_role import UserRole
from src.service.event_registration.driven_adapter.model.admin_user_model import AdminUserModel
from src.service.event_registration.driven_adapter.model.event_model import EventModel
from src.service.event_registration.driven_adapter.model.payment_model import PaymentModel
from src.service.event_registration.driven_adapter.model.registration_model import (
    RegistrationModel,
)
from src.service.event_registration.driven_adapter.model.user_model import UserModel


USER_COLUMNS = (
    'email',
    'name',
    'password_hash',
    'organization_name',
    'organization_type',
    'organization_description',
    'organization_website',
    'organizer_since',
)
EVENT_COLUMNS = (
    'name',
    'organizer',
    'organizer_id',
    'details',
    'date',
    'image_url',
    'venue',
    'price',
    'capacity',
    'registration_deadline',
)


def user_to_entity(model: UserModel) -> UserEntity:
    return UserEntity(
        id=model.id,
        email=model.email,
        name=model.name,
        password_hash=model.password_hash,
        role=UserRole(model.role),
        organization_name=model.organization_name,
        organization_type=model.organization_type,
        event_types=list(model.event_types or []),
        organization_description=model.organization_description,
        organization_website=model.organization_website,
        organizer_since=model.organizer_since,
        created_at=model.created_at,
        updated_at=model.updated_at,
    )


def apply_user(model: UserModel, user: UserEntity) -> UserModel:
    for column in USER_COLUMNS:
        setattr(model, column, getattr(user, column))
    model.role = user.role.value
    model.event_types = list(user.event_types)
    return model


def admin_to_entity(model: AdminUserModel) -> AdminUserEntity:
    return AdminUserEntity(
        id=model.id,
        email=model.email,
        name=model.name,
        password_hash=model.password_hash,
        created_at=model.created_at,
        updated_at=model.updated_at,
    )


def event_to_entity(model: EventModel) -> EventEntity:
    return EventEntity(
        id=model.id,
        name=model.name,
        organizer=model.organizer,
        organizer_id=model.organizer_id,
        details=model.details,
        date=model.date,
        image_url=model.image_url,
        venue=model.venue,
        status=EventStatus(model.status),
        price=model.price,
        capacity=model.capacity,
        registration_deadline=model.registration_deadline,
        created_at=model.created_at,
        updated_at=model.updated_at,
    )


def apply_event(model: EventModel, event: EventEntity) -> EventModel:
    for column in EVENT_COLUMNS:
        setattr(model, column, getattr(event, column))
    model.status = event.status.value
    return model


def registration_to_entity(model: RegistrationModel) -> RegistrationEntity:
    return RegistrationEntity(
        id=model.id,
        user_id=model.user_id,
        event_id=model.event_id,
        ticket_quantity=model.ticket_quantity,
        payment_status=PaymentStatus(model.payment_status),
        payment_reference=model.payment_reference,
        payment_amount=model.payment_amount,
        registration_date=model.registration_date,
        created_at=model.created_at,
    )


def payment_to_entity(model: PaymentModel) -> PaymentEntity:
    return PaymentEntity(
        id=model.id,
        registration_id=model.registration_id,
        payment_reference=model.payment_reference,
        amount=model.amount,
        status=PaymentRecordStatus(model.status),
        payment_method=model.payment_method or '',
        transaction_date=model.transaction_date,
        created_at=model.created_at,
    )
