"""
UTC datetime utilities for consistent timezone handling.

All datetime values in the system should be timezone-aware UTC.
Use these helpers instead of datetime.now() or datetime.utcnow().
Calendar windows (today, week, month, upcoming) are computed on the UTC
calendar; weeks start on Sunday.
"""

import calendar
from dataclasses import dataclass
from datetime import UTC, date, datetime, timedelta

UPCOMING_DAYS = 30


@dataclass(frozen=True)
class DateWindow:
    """Inclusive range of calendar dates [start, end]."""

    start: date
    end: date


def utc_now() -> datetime:
    """
    Return the current UTC datetime with timezone info.

    Use this instead of:
        - datetime.now() - naive, uses local timezone
        - datetime.utcnow() - naive, deprecated in Python 3.12

    Returns:
        Timezone-aware datetime in UTC
    """
    return datetime.now(UTC)


def utc_today() -> date:
    """Return today's calendar date in UTC."""
    return utc_now().date()


def ensure_utc(dt: datetime | None) -> datetime | None:
    """
    Ensure a datetime is UTC-aware.

    - If None, returns None
    - If naive, assumes UTC and attaches timezone
    - If aware, converts to UTC

    Use at repository/persistence boundaries to normalize datetimes.
    """
    if dt is None:
        return None
    if dt.tzinfo is None:
        return dt.replace(tzinfo=UTC)
    return dt.astimezone(UTC)


def week_window(today: date) -> DateWindow:
    """Sunday-aligned 7-day window containing ``today``."""
    # date.weekday(): Monday == 0 ... Sunday == 6
    days_since_sunday = (today.weekday() + 1) % 7
    start = today - timedelta(days=days_since_sunday)
    return DateWindow(start, start + timedelta(days=6))


def month_window(today: date) -> DateWindow:
    """Calendar month containing ``today``."""
    last_day = calendar.monthrange(today.year, today.month)[1]
    return DateWindow(today.replace(day=1), today.replace(day=last_day))


def upcoming_window(today: date, days: int = UPCOMING_DAYS) -> DateWindow:
    """From tomorrow through ``today + days`` inclusive."""
    return DateWindow(today + timedelta(days=1), today + timedelta(days=days))
