from decimal import Decimal

import attrs


@attrs.define(frozen=True)
class PlatformStats:
    total_users: int
    total_events: int
    total_registrations: int
    total_revenue: Decimal
