# pokedex/core/catalog/pagination.py
"""
Page arithmetic shared by the listing and group paths.
"""
from __future__ import annotations

import math
from dataclasses import dataclass

from pokedex.core.errors import InvalidPagination


@dataclass(frozen=True)
class PageBounds:
    offset: int
    total_pages: int
    has_next_page: bool
    has_prev_page: bool


def page_offset(page: int, limit: int) -> int:
    return (page - 1) * limit


def page_bounds(page: int, limit: int, total_count: int) -> PageBounds:
    offset = page_offset(page, limit)
    return PageBounds(
        offset=offset,
        total_pages=math.ceil(total_count / limit),
        has_next_page=offset + limit < total_count,
        has_prev_page=page > 1,
    )


def validate_page(page: int, limit: int, *, max_limit: int | None = None) -> None:
    """Reject pages below 1 and limits outside ``[1, max_limit]``."""
    if page < 1:
        raise InvalidPagination(f"page must be >= 1, got {page}")
    if limit < 1:
        raise InvalidPagination(f"limit must be >= 1, got {limit}")
    if max_limit is not None and limit > max_limit:
        raise InvalidPagination(f"limit must be <= {max_limit}, got {limit}")
