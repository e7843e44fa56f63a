# school_admin/core/pagination.py
from __future__ import annotations

"""
Core pagination helpers.

Listing endpoints take a zero based `page` and a `limit`; the repository
layer works with `skip`/`limit`. `normalize_pagination` converts the former
into the latter with defaults and clamping.
"""

from dataclasses import dataclass

from school_admin.config.settings import settings
from school_admin.core.constants import DEFAULT_PAGE


@dataclass(frozen=True)
class PaginationParams:
    page: int
    limit: int

    @property
    def skip(self) -> int:
        return self.page * self.limit


def normalize_pagination(
    page: int | None,
    limit: int | None,
) -> PaginationParams:
    """
    Normalize raw page & limit inputs.

    Rules:
        - page < 0 or None -> DEFAULT_PAGE
        - limit < 1 or None -> settings.DEFAULT_PAGE_LIMIT
        - limit > settings.MAX_PAGE_LIMIT -> settings.MAX_PAGE_LIMIT
    """
    if page is None or page < 0:
        page = DEFAULT_PAGE

    if limit is None or limit < 1:
        limit = settings.DEFAULT_PAGE_LIMIT

    if limit > settings.MAX_PAGE_LIMIT:
        limit = settings.MAX_PAGE_LIMIT

    return PaginationParams(page=page, limit=limit)
