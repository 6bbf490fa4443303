from datetime import datetime, timezone
from typing import Generic, Optional, TypeVar

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from src.service.event_registration.app.dto.page_dto import Page, PageRequest


T = TypeVar('T')


def ensure_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Naive datetimes from clients are taken as UTC"""
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class CamelModel(BaseModel):
    """Accepts and emits camelCase keys; snake_case is accepted on input too"""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class PaginationResponse(CamelModel):
    page: int
    limit: int
    total: int
    total_pages: int
    has_next: bool
    has_prev: bool

    @classmethod
    def from_page(cls, page: Page) -> 'PaginationResponse':
        return cls(
            page=page.request.page,
            limit=page.request.limit,
            total=page.total,
            total_pages=page.total_pages,
            has_next=page.has_next,
            has_prev=page.has_prev,
        )


class SuccessResponse(BaseModel):
    success: bool = True
    message: Optional[str] = None


class DataResponse(BaseModel, Generic[T]):
    success: bool = True
    data: T
    message: Optional[str] = None


def page_query(page: Optional[int] = None, limit: Optional[int] = None) -> PageRequest:
    """FastAPI dependency for `?page=&limit=`; out-of-range values are clamped"""
    return PageRequest.of(page=page, limit=limit)
