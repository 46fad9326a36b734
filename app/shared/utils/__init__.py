"""Shared utilities: datetime windows and id generators."""

from app.shared.utils.datetime import (
    DateWindow,
    ensure_utc,
    month_window,
    upcoming_window,
    utc_now,
    utc_today,
    week_window,
)
from app.shared.utils.generators import generate_cuid

__all__ = [
    "DateWindow",
    "ensure_utc",
    "generate_cuid",
    "month_window",
    "upcoming_window",
    "utc_now",
    "utc_today",
    "week_window",
]
