#!/usr/bin/env python3
"""
Shared time utilities for date-range filters.

Filter datetimes are timezone-aware. Naive datetimes handed in by callers
are interpreted as local time, the same way the relative ranges
(today, this week, ...) anchor on local midnight.
"""

from datetime import date, datetime, timedelta, timezone
from typing import Callable, Optional

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    """
    Get the current instant as a UTC-aware datetime.

    Returns:
        Timezone-aware datetime in UTC
    """
    return datetime.now(timezone.utc)


def to_aware(dt: datetime) -> datetime:
    """Attach the local timezone to a naive datetime; aware ones pass through."""
    if dt.tzinfo is None:
        return dt.astimezone()
    return dt


def local_midnight(day: date) -> datetime:
    """
    Get local midnight of a calendar day as an aware datetime.

    The offset is resolved for that day, so a DST switch between the day
    and "now" does not shift the result.

    Args:
        day: Calendar day in local time

    Returns:
        Aware datetime at 00:00 local time
    """
    return datetime(day.year, day.month, day.day).astimezone()


def local_date(now: datetime) -> date:
    """Calendar day of an instant in local time."""
    return to_aware(now).astimezone().date()


def start_of_week(day: date) -> date:
    """Monday of the week containing ``day`` (Sunday belongs to the week before)."""
    return day - timedelta(days=day.weekday())


def to_iso_string(dt: datetime) -> str:
    """
    Format an instant as an ISO-8601 UTC string with a ``Z`` suffix.

    Millisecond precision is used unless the value carries sub-millisecond
    detail, in which case microseconds are kept.

    Args:
        dt: Datetime (naive values are taken as local time)

    Returns:
        String like ``2025-01-15T10:30:00.000Z``
    """
    utc = to_aware(dt).astimezone(timezone.utc)
    timespec = 'milliseconds' if utc.microsecond % 1000 == 0 else 'microseconds'
    return utc.replace(tzinfo=None).isoformat(timespec=timespec) + 'Z'


def parse_iso_string(value: str) -> Optional[datetime]:
    """
    Parse an ISO-8601 string into an aware datetime.

    Date-only strings are read as UTC midnight, date-times without an
    offset as local time.

    Args:
        value: ISO-8601 string ("2025-01-15", "2025-01-15T10:30:00.000Z", ...)

    Returns:
        UTC datetime, or None if the string is not a valid, representable date
    """
    text = value.strip()
    if not text:
        return None

    try:
        if 'T' not in text and ' ' not in text:
            parsed_day = date.fromisoformat(text)
            return datetime(parsed_day.year, parsed_day.month, parsed_day.day, tzinfo=timezone.utc)

        if text.endswith(('Z', 'z')):
            text = text[:-1] + '+00:00'
        # Values outside the UTC-representable range are rejected
        return to_aware(datetime.fromisoformat(text)).astimezone(timezone.utc)
    except (ValueError, OverflowError):
        return None
