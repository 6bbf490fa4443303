"""
Unit tests for CreateRegistrationUseCase

Tests:
- Event availability checks and their order
- One registration per user and event
- Capacity: existing registrations plus requested tickets
- Nothing is written when a check fails
- The unique index backstop maps to the same conflict
"""

from datetime import datetime, timedelta, timezone
from decimal import Decimal
from unittest.mock import AsyncMock
import uuid

import pytest
from sqlalchemy.exc import IntegrityError

from src.platform.exception.exceptions import ConflictError, DomainError, NotFoundError
from src.service.event_registration.app.command.create_registration_use_case import (
    CreateRegistrationUseCase,
)
from src.service.event_registration.domain.entity.event_entity import EventEntity
from src.service.event_registration.domain.entity.registration_entity import RegistrationEntity
from src.service.event_registration.domain.enum.event_status import EventStatus
from src.service.event_registration.domain.enum.payment_status import PaymentStatus


class _UniqueViolation(Exception):
    sqlstate = '23505'


def _put_event(store, **overrides) -> EventEntity:
    now = datetime.now(timezone.utc)
    fields = {
        'id': uuid.uuid4(),
        'name': 'Jazz Night',
        'venue': 'Gowra Hall',
        'date': now + timedelta(days=7),
        'organizer': 'Grace',
        'price': Decimal('20'),
        'capacity': None,
        'status': EventStatus.PUBLISHED,
    }
    fields.update(overrides)
    event = EventEntity(**fields)
    store.events[event.id] = event
    return event


def _put_registration(store, *, event_id, quantity: int = 1) -> RegistrationEntity:
    registration = RegistrationEntity(
        id=uuid.uuid4(), user_id=uuid.uuid4(), event_id=event_id, ticket_quantity=quantity
    )
    store.registrations[registration.id] = registration
    return registration


@pytest.mark.unit
class TestCreateRegistration:
    @pytest.fixture
    def use_case(self, fake_uow) -> CreateRegistrationUseCase:
        return CreateRegistrationUseCase(uow=fake_uow)

    @pytest.mark.asyncio
    async def test_creates_pending_registration(self, use_case, store, fake_uow):
        """
        Given: a published upcoming event priced 20
        When: a user registers for 3 tickets
        Then: a pending registration of 60 is committed
        """
        event = _put_event(store)
        user_id = uuid.uuid4()

        registration, returned_event = await use_case.execute(
            user_id=user_id, event_id=event.id, ticket_quantity=3
        )

        assert registration.payment_status == PaymentStatus.PENDING
        assert registration.payment_amount == Decimal('60')
        assert registration.payment_reference.startswith('REG_')
        assert returned_event.id == event.id
        assert registration.id in store.registrations
        assert fake_uow.commit_count == 1

    @pytest.mark.asyncio
    async def test_unknown_event(self, use_case):
        with pytest.raises(NotFoundError, match='Event not found'):
            await use_case.execute(user_id=uuid.uuid4(), event_id=uuid.uuid4())

    @pytest.mark.asyncio
    @pytest.mark.parametrize('status', [EventStatus.DRAFT, EventStatus.CANCELLED, EventStatus.COMPLETED])
    async def test_unpublished_event(self, use_case, store, status: EventStatus):
        event = _put_event(store, status=status)

        with pytest.raises(DomainError, match='Event not available'):
            await use_case.execute(user_id=uuid.uuid4(), event_id=event.id)

    @pytest.mark.asyncio
    async def test_past_event(self, use_case, store):
        event = _put_event(store, date=datetime.now(timezone.utc) - timedelta(hours=1))

        with pytest.raises(DomainError, match='Event has passed'):
            await use_case.execute(user_id=uuid.uuid4(), event_id=event.id)

    @pytest.mark.asyncio
    async def test_deadline_passed(self, use_case, store):
        event = _put_event(
            store, registration_deadline=datetime.now(timezone.utc) - timedelta(minutes=1)
        )

        with pytest.raises(DomainError, match='Registration deadline passed'):
            await use_case.execute(user_id=uuid.uuid4(), event_id=event.id)

    @pytest.mark.asyncio
    async def test_already_registered(self, use_case, store):
        event = _put_event(store)
        existing = _put_registration(store, event_id=event.id)

        with pytest.raises(ConflictError, match='Already registered'):
            await use_case.execute(user_id=existing.user_id, event_id=event.id)

    @pytest.mark.asyncio
    async def test_capacity_counts_registrations_plus_requested_tickets(self, use_case, store):
        """
        Given: capacity 3 with one registration holding 2 tickets
        When: another user asks for 2 tickets
        Then: 1 existing registration + 2 requested fits, so it is accepted
        """
        event = _put_event(store, capacity=3)
        _put_registration(store, event_id=event.id, quantity=2)

        registration, _ = await use_case.execute(
            user_id=uuid.uuid4(), event_id=event.id, ticket_quantity=2
        )

        assert registration.ticket_quantity == 2
        assert len(store.registrations) == 2

    @pytest.mark.asyncio
    async def test_full_event_is_refused(self, use_case, store):
        """
        Given: capacity 3 with two registrations
        When: another user asks for 2 tickets
        Then: 2 + 2 exceeds the capacity and nothing is written
        """
        event = _put_event(store, capacity=3)
        _put_registration(store, event_id=event.id)
        _put_registration(store, event_id=event.id)

        with pytest.raises(ConflictError, match='Event full'):
            await use_case.execute(user_id=uuid.uuid4(), event_id=event.id, ticket_quantity=2)

        assert len(store.registrations) == 2

    @pytest.mark.asyncio
    async def test_exact_fit_is_accepted(self, use_case, store):
        event = _put_event(store, capacity=2)
        _put_registration(store, event_id=event.id)

        registration, _ = await use_case.execute(user_id=uuid.uuid4(), event_id=event.id)

        assert registration.ticket_quantity == 1
        assert len(store.registrations) == 2

    @pytest.mark.asyncio
    async def test_unique_index_maps_to_already_registered(self, use_case, store, fake_uow):
        event = _put_event(store)
        fake_uow.registration_command_repo.create = AsyncMock(
            side_effect=IntegrityError('INSERT INTO registrations', {}, _UniqueViolation())
        )

        with pytest.raises(ConflictError, match='Already registered'):
            await use_case.execute(user_id=uuid.uuid4(), event_id=event.id)

        assert fake_uow.commit_count == 0
