"""
Calendar-day helpers.

Every comparison in the dashboard happens at day granularity, so values coming
from storage (date, datetime, ISO string) are reduced to a ``datetime.date``
before anything looks at them.
"""
from __future__ import annotations

from datetime import date, datetime, time
from typing import Any, Optional


def to_day(value: Any) -> Optional[date]:
    """Returns the calendar day of ``value`` or None when it cannot be read."""
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        try:
            return datetime.fromisoformat(text).date()
        except ValueError:
            pass
        try:
            return datetime.strptime(text[:10], "%Y-%m-%d").date()
        except ValueError:
            return None
    return None


def start_of_day(value: Any) -> Optional[datetime]:
    day = to_day(value)
    if day is None:
        return None
    return datetime.combine(day, time.min)


def end_of_day(value: Any) -> Optional[datetime]:
    day = to_day(value)
    if day is None:
        return None
    return datetime.combine(day, time.max)


def nights_between(check_in: Any, check_out: Any) -> int:
    """Calendar-day difference between two values (0 when either is unreadable)."""
    d_in = to_day(check_in)
    d_out = to_day(check_out)
    if d_in is None or d_out is None:
        return 0
    return (d_out - d_in).days


def format_day(value: Any) -> Optional[str]:
    day = to_day(value)
    return day.isoformat() if day else None
