"""UTC time helpers.

SQLite hands back naive datetimes even for ``DateTime(timezone=True)`` columns,
so every comparison or subtraction goes through ``as_utc`` first.
"""

from __future__ import annotations

from datetime import date, datetime, timezone


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def as_utc(value: datetime | None) -> datetime | None:
    """Normalize to tz-aware UTC; naive values are assumed to already be UTC."""
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def utc_day(value: datetime) -> date:
    return as_utc(value).date()


def is_same_utc_day(a: datetime, b: datetime) -> bool:
    return utc_day(a) == utc_day(b)


def format_timestamp(value: datetime) -> str:
    """RFC-3339 in UTC with second precision, e.g. ``2023-10-05T15:00:00Z``."""
    return as_utc(value).strftime("%Y-%m-%dT%H:%M:%SZ")
