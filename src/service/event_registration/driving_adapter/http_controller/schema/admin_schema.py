from decimal import Decimal
from typing import List

from pydantic import BaseModel

from src.service.event_registration.app.dto.admin_dto import PlatformStats
from src.service.event_registration.driving_adapter.http_controller.schema.auth_schema import (
    UserResponse,
)
from src.service.event_registration.driving_adapter.http_controller.schema.common_schema import (
    CamelModel,
    PaginationResponse,
)


class PlatformStatsResponse(CamelModel):
    total_users: int
    total_events: int
    total_registrations: int
    total_revenue: Decimal

    @classmethod
    def from_dto(cls, stats: PlatformStats) -> 'PlatformStatsResponse':
        return cls(
            total_users=stats.total_users,
            total_events=stats.total_events,
            total_registrations=stats.total_registrations,
            total_revenue=stats.total_revenue,
        )


class AdminStatsResponse(BaseModel):
    success: bool = True
    stats: PlatformStatsResponse


class UserPageData(BaseModel):
    users: List[UserResponse]
    pagination: PaginationResponse
