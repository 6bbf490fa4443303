"""Event Registration Domain Enums"""

from src.service.event_registration.domain.enum.event_status import EventStatus
from src.service.event_registration.domain.enum.payment_status import (
    PaymentRecordStatus,
    PaymentStatus,
)
from src.service.event_registration.domain.enum.user_role import UserRole

__all__ = ['EventStatus', 'PaymentRecordStatus', 'PaymentStatus', 'UserRole']
