"""City-local calendar helpers.

The events window and the tonight/later buckets both derive "today" through
:func:`city_local_today`; keep every other caller going through here too.
"""
from __future__ import annotations

from datetime import date, datetime, time, timezone
from typing import Optional
from zoneinfo import ZoneInfo


def _ensure_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def city_local_today(tz: ZoneInfo, now: Optional[datetime] = None) -> date:
    """Calendar date it currently is in ``tz`` (not in the process timezone)."""
    now = _ensure_utc(now or datetime.now(timezone.utc))
    return now.astimezone(tz).date()


def local_date_key(instant: datetime, tz: ZoneInfo) -> str:
    """``YYYY-MM-DD`` of ``instant`` as seen from ``tz``. Naive values are UTC."""
    return _ensure_utc(instant).astimezone(tz).date().isoformat()


def utc_midnight(day: date) -> datetime:
    return datetime.combine(day, time(0, 0), tzinfo=timezone.utc)


def local_instant(day: date, hour: int, minute: int, tz: ZoneInfo) -> datetime:
    """Wall-clock ``hour:minute`` on ``day`` in ``tz``, returned in UTC."""
    return datetime.combine(day, time(hour, minute), tzinfo=tz).astimezone(timezone.utc)
