"""
Wire Modules Configuration

Defines the modules that need dependency injection wiring.
Shared between production and test environments.
"""

from types import ModuleType

from src.service.event_registration.app.command import (
    cancel_registration_use_case,
    create_event_use_case,
    create_registration_use_case,
    delete_event_use_case,
    login_use_case,
    process_payment_use_case,
    refresh_token_use_case,
    refund_payment_use_case,
    register_user_use_case,
    update_event_use_case,
    update_profile_use_case,
    update_registration_status_use_case,
    upgrade_to_organizer_use_case,
)
from src.service.event_registration.app.query import (
    admin_stats_use_case,
    get_current_principal_use_case,
    get_event_use_case,
    list_events_use_case,
    list_payments_use_case,
    list_registrations_use_case,
    organizer_events_use_case,
)


WIRE_MODULES: list[ModuleType] = [
    # Auth
    register_user_use_case,
    login_use_case,
    refresh_token_use_case,
    upgrade_to_organizer_use_case,
    update_profile_use_case,
    get_current_principal_use_case,
    # Events
    create_event_use_case,
    update_event_use_case,
    delete_event_use_case,
    list_events_use_case,
    get_event_use_case,
    organizer_events_use_case,
    # Registrations and payments
    create_registration_use_case,
    cancel_registration_use_case,
    update_registration_status_use_case,
    process_payment_use_case,
    refund_payment_use_case,
    list_registrations_use_case,
    list_payments_use_case,
    # Admin
    admin_stats_use_case,
]
