from datetime import datetime
from decimal import Decimal
from typing import TYPE_CHECKING, Any, Optional
from uuid import UUID

import attrs

from src.platform.exception.exceptions import DomainError
from src.service.event_registration.domain.enum.event_status import EventStatus


if TYPE_CHECKING:
    from src.service.event_registration.domain.principal import Principal


def _validate_non_empty_string(instance: object, attribute: attrs.Attribute, value: str) -> None:
    if not value or not value.strip():
        raise DomainError(f'Event {attribute.name} is required')


@attrs.define
class EventEntity:
    name: str = attrs.field(validator=_validate_non_empty_string)
    venue: str = attrs.field(validator=_validate_non_empty_string)
    date: datetime
    organizer: str
    organizer_id: Optional[UUID] = None
    details: Optional[str] = None
    image_url: Optional[str] = None
    status: EventStatus = EventStatus.PUBLISHED
    price: Decimal = Decimal('0')
    capacity: Optional[int] = None
    registration_deadline: Optional[datetime] = None
    id: Optional[UUID] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @staticmethod
    def validate_schedule(*, date: datetime, now: datetime) -> None:
        if date <= now:
            raise DomainError('Event date must be in the future')

    @staticmethod
    def validate_pricing(*, price: Optional[Decimal], capacity: Optional[int]) -> None:
        if price is not None and price < 0:
            raise DomainError('Price must be a non-negative number')
        if capacity is not None and capacity <= 0:
            raise DomainError('Capacity must be a positive number')

    @classmethod
    def create(
        cls,
        *,
        id: UUID,
        name: str,
        venue: str,
        date: datetime,
        organizer: str,
        organizer_id: Optional[UUID],
        now: datetime,
        details: Optional[str] = None,
        image_url: Optional[str] = None,
        status: EventStatus = EventStatus.PUBLISHED,
        price: Optional[Decimal] = None,
        capacity: Optional[int] = None,
        registration_deadline: Optional[datetime] = None,
    ) -> 'EventEntity':
        cls.validate_schedule(date=date, now=now)
        cls.validate_pricing(price=price, capacity=capacity)
        return cls(
            id=id,
            name=name.strip(),
            venue=venue.strip(),
            date=date,
            organizer=organizer,
            organizer_id=organizer_id,
            details=details,
            image_url=image_url,
            status=status,
            price=price if price is not None else Decimal('0'),
            capacity=capacity,
            registration_deadline=registration_deadline,
            created_at=now,
            updated_at=now,
        )

    def apply_changes(self, *, changes: dict[str, Any], now: datetime) -> None:
        """Partial update; only keys present in `changes` are touched"""
        if not changes:
            raise DomainError('No fields to update')
        if 'date' in changes:
            if changes['date'] is None:
                raise DomainError('Event date is required')
            self.validate_schedule(date=changes['date'], now=now)
        self.validate_pricing(price=changes.get('price'), capacity=changes.get('capacity'))

        for field, value in changes.items():
            setattr(self, field, value)
        attrs.validate(self)
        self.updated_at = now

    def is_owned_by(self, principal: 'Principal') -> bool:
        if self.organizer_id is not None:
            return self.organizer_id == principal.id
        # Events created before organizer_id existed only carry the display string
        return bool(self.organizer) and self.organizer in (principal.name, principal.email)

    def has_passed(self, now: datetime) -> bool:
        return self.date <= now

    def registration_closed(self, now: datetime) -> bool:
        return self.registration_deadline is not None and self.registration_deadline <= now

    def is_full(self, *, registration_count: int, requested: int) -> bool:
        return self.capacity is not None and registration_count + requested > self.capacity
