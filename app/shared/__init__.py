"""Shared utilities: telemetry, logging and cross-cutting helpers.

Used by domain, application, and infrastructure. No business logic.
"""

from app.shared.utils import (
    ensure_utc,
    generate_cuid,
    utc_now,
    utc_today,
)

__all__ = [
    "generate_cuid",
    "utc_now",
    "utc_today",
    "ensure_utc",
]
