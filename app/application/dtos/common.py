"""Shared DTO envelopes (no dependency on ORM)."""

from __future__ import annotations

from dataclasses import dataclass, field

DEFAULT_PAGE_SIZE = 20
MAX_PAGE_SIZE = 100


def normalize_page(page: int | None) -> int:
    """Pages are 1-based; anything below 1 becomes 1."""
    return page if page and page > 0 else 1


def normalize_page_size(page_size: int | None) -> int:
    """Non-positive sizes fall back to the default; the result is capped at MAX_PAGE_SIZE."""
    if not page_size or page_size <= 0:
        return DEFAULT_PAGE_SIZE
    return min(page_size, MAX_PAGE_SIZE)


@dataclass(frozen=True)
class PagedResult[T]:
    """One page of items plus the total number of matches."""

    items: list[T] = field(default_factory=list)
    total_count: int = 0
    page: int = 1
    page_size: int = DEFAULT_PAGE_SIZE
