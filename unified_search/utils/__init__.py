"""
Utility helpers for the unified search filter model.
"""

from .time_utils import (
    Clock,
    utc_now,
    to_aware,
    local_midnight,
    local_date,
    start_of_week,
    to_iso_string,
    parse_iso_string,
)

__all__ = [
    'Clock',
    'utc_now',
    'to_aware',
    'local_midnight',
    'local_date',
    'start_of_week',
    'to_iso_string',
    'parse_iso_string',
]
