"""init_event_registration_schema

Revision ID: 0001
Revises:
Create Date: 2025-12-06

Schema:
- users: regular accounts (role user/organizer) with organizer metadata
- admin_users: admin accounts, a separate identity space
- events: events owned by an organizer (organizer_id) or a legacy display name
- registrations: one per (user, event), tracks payment status and amount
- payment_history: append-only payment/refund ledger (refunds are negative rows)
"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '0001'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps(*, with_updated_at: bool = True) -> list[sa.Column]:
    columns = [
        sa.Column(
            'created_at',
            sa.DateTime(timezone=True),
            server_default=sa.text('now()'),
            nullable=False,
        )
    ]
    if with_updated_at:
        columns.append(
            sa.Column(
                'updated_at',
                sa.DateTime(timezone=True),
                server_default=sa.text('now()'),
                nullable=False,
            )
        )
    return columns


def upgrade() -> None:
    """Create all tables with final schema."""

    # ========== Identities ==========

    op.create_table(
        'users',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('email', sa.String(length=255), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('password_hash', sa.String(length=255), nullable=False),
        sa.Column('role', sa.String(length=20), server_default='user', nullable=False),
        sa.Column('organization_name', sa.String(length=255), nullable=True),
        sa.Column('organization_type', sa.String(length=100), nullable=True),
        sa.Column('event_types', sa.JSON(), server_default=sa.text("'[]'"), nullable=False),
        sa.Column('organization_description', sa.Text(), nullable=True),
        sa.Column('organization_website', sa.String(length=500), nullable=True),
        sa.Column('organizer_since', sa.DateTime(timezone=True), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id'),
        sa.CheckConstraint("role IN ('user', 'organizer')", name='ck_users_role'),
    )
    op.create_index(op.f('ix_users_email'), 'users', ['email'], unique=True)

    op.create_table(
        'admin_users',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('email', sa.String(length=255), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('password_hash', sa.String(length=255), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_admin_users_email'), 'admin_users', ['email'], unique=True)

    # ========== Events ==========

    op.create_table(
        'events',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('organizer', sa.String(length=255), nullable=False),
        sa.Column('organizer_id', sa.Uuid(), nullable=True),
        sa.Column('details', sa.Text(), nullable=True),
        sa.Column('date', sa.DateTime(timezone=True), nullable=False),
        sa.Column('image_url', sa.String(length=500), nullable=True),
        sa.Column('venue', sa.String(length=255), nullable=False),
        sa.Column('status', sa.String(length=20), server_default='draft', nullable=False),
        sa.Column('price', sa.Numeric(10, 2), server_default='0', nullable=False),
        sa.Column('capacity', sa.Integer(), nullable=True),
        sa.Column('registration_deadline', sa.DateTime(timezone=True), nullable=True),
        *_timestamps(),
        sa.ForeignKeyConstraint(['organizer_id'], ['users.id'], ondelete='SET NULL'),
        sa.PrimaryKeyConstraint('id'),
        sa.CheckConstraint(
            "status IN ('draft', 'published', 'cancelled', 'completed')",
            name='ck_events_status',
        ),
    )
    op.create_index(op.f('ix_events_organizer_id'), 'events', ['organizer_id'])
    op.create_index(op.f('ix_events_date'), 'events', ['date'])
    op.create_index(op.f('ix_events_status'), 'events', ['status'])

    # ========== Registrations & payments ==========

    op.create_table(
        'registrations',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('user_id', sa.Uuid(), nullable=False),
        sa.Column('event_id', sa.Uuid(), nullable=False),
        sa.Column('ticket_quantity', sa.Integer(), server_default='1', nullable=False),
        sa.Column(
            'payment_status', sa.String(length=20), server_default='pending', nullable=False
        ),
        sa.Column('payment_reference', sa.String(length=255), nullable=True),
        sa.Column('payment_amount', sa.Numeric(10, 2), nullable=False),
        sa.Column(
            'registration_date',
            sa.DateTime(timezone=True),
            server_default=sa.text('now()'),
            nullable=False,
        ),
        *_timestamps(with_updated_at=False),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['event_id'], ['events.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('user_id', 'event_id', name='uq_registrations_user_event'),
        sa.CheckConstraint(
            "payment_status IN ('pending', 'paid', 'failed', 'refunded')",
            name='ck_registrations_payment_status',
        ),
    )
    op.create_index(op.f('ix_registrations_user_id'), 'registrations', ['user_id'])
    op.create_index(op.f('ix_registrations_event_id'), 'registrations', ['event_id'])

    op.create_table(
        'payment_history',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('registration_id', sa.Uuid(), nullable=False),
        sa.Column('payment_reference', sa.String(length=255), nullable=False),
        sa.Column('amount', sa.Numeric(10, 2), nullable=False),
        sa.Column('status', sa.String(length=50), nullable=False),
        sa.Column('payment_method', sa.String(length=100), nullable=True),
        sa.Column('transaction_date', sa.DateTime(timezone=True), nullable=True),
        *_timestamps(with_updated_at=False),
        sa.ForeignKeyConstraint(['registration_id'], ['registrations.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(
        op.f('ix_payment_history_registration_id'), 'payment_history', ['registration_id']
    )


def downgrade() -> None:
    """Drop all tables."""
    op.drop_table('payment_history')
    op.drop_table('registrations')
    op.drop_table('events')
    op.drop_table('admin_users')
    op.drop_table('users')
