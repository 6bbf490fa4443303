"""Pagination DTO shared by list use cases."""

import math
from typing import Generic, List, TypeVar

import attrs


DEFAULT_PAGE_LIMIT = 10
MAX_PAGE_LIMIT = 100

T = TypeVar('T')


@attrs.define(frozen=True)
class PageRequest:
    page: int = 1
    limit: int = DEFAULT_PAGE_LIMIT

    @classmethod
    def of(cls, *, page: int | None, limit: int | None) -> 'PageRequest':
        page = max(page or 1, 1)
        limit = min(max(limit or DEFAULT_PAGE_LIMIT, 1), MAX_PAGE_LIMIT)
        return cls(page=page, limit=limit)

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit


@attrs.define(frozen=True)
class Page(Generic[T]):
    items: List[T]
    total: int
    request: PageRequest

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total / self.request.limit) if self.total else 0

    @property
    def has_next(self) -> bool:
        return self.request.page < self.total_pages

    @property
    def has_prev(self) -> bool:
        return self.request.page > 1
