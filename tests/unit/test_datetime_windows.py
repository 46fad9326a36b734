"""Calendar windows used by the dashboard (UTC calendar, Sunday-start weeks)."""

from datetime import UTC, date, datetime, timedelta, timezone

import pytest

from app.shared.utils.datetime import (
    DateWindow,
    ensure_utc,
    month_window,
    upcoming_window,
    week_window,
)


@pytest.mark.parametrize(
    "today",
    [date(2025, 1, 12), date(2025, 1, 15), date(2025, 1, 18)],
)
def test_week_window_runs_sunday_through_saturday(today: date) -> None:
    window = week_window(today)
    assert window.start == date(2025, 1, 12)
    assert window.end == date(2025, 1, 18)
    assert window.start <= today <= window.end


def test_week_window_can_cross_month_boundary() -> None:
    window = week_window(date(2025, 3, 1))
    assert window.start == date(2025, 2, 23)
    assert window.end == date(2025, 3, 1)


def test_month_window_handles_leap_february() -> None:
    window = month_window(date(2024, 2, 10))
    assert window == DateWindow(date(2024, 2, 1), date(2024, 2, 29))


def test_upcoming_window_starts_tomorrow_and_spans_thirty_days() -> None:
    window = upcoming_window(date(2025, 1, 31))
    assert window.start == date(2025, 2, 1)
    assert window.end == date(2025, 3, 2)


def test_ensure_utc_attaches_or_converts() -> None:
    naive = datetime(2025, 1, 1, 12, 0)
    assert ensure_utc(naive) == datetime(2025, 1, 1, 12, 0, tzinfo=UTC)
    plus_two = datetime(2025, 1, 1, 14, 0, tzinfo=timezone(timedelta(hours=2)))
    converted = ensure_utc(plus_two)
    assert converted is not None
    assert converted.hour == 12
    assert converted.tzinfo == UTC
    assert ensure_utc(None) is None
