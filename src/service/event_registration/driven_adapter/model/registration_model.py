from datetime import datetime
from decimal import Decimal
from typing import Optional
import uuid

from sqlalchemy import DateTime, ForeignKey, Integer, Numeric, String, UniqueConstraint, Uuid, func
from sqlalchemy.orm import Mapped, mapped_column

from src.platform.database.db_setting import Base


class RegistrationModel(Base):
    """One row per (user, event), checked under the event row lock and enforced by the index"""

    __tablename__ = 'registrations'
    __table_args__ = (UniqueConstraint('user_id', 'event_id', name='uq_registrations_user_event'),)

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True)
    user_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey('users.id', ondelete='CASCADE'), nullable=False, index=True
    )
    event_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey('events.id', ondelete='CASCADE'), nullable=False, index=True
    )
    ticket_quantity: Mapped[int] = mapped_column(Integer, default=1, nullable=False)
    payment_status: Mapped[str] = mapped_column(String(20), default='pending', nullable=False)
    payment_reference: Mapped[Optional[str]] = mapped_column(String(255))
    payment_amount: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)
    registration_date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )