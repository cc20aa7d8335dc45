#!/usr/bin/env python3
"""
Fluent builder for constructing filter collections.

Example usage:
    from unified_search.filters import FilterBuilder

    filters = (
        FilterBuilder()
        .term('quarterly report')
        .this_year()
        .user('admin')
        .bool('title-only', True)
        .build()
    )
"""

# Method names shadow int/bool inside the class body
from __future__ import annotations

import math
from datetime import datetime, timedelta, timezone
from typing import Dict, Optional, Union

from ..models import DateRange, Filter, FilterType, FilterValue, PersonValue
from ..utils.time_utils import (
    Clock, local_date, local_midnight, start_of_week, to_aware, utc_now
)
from .collection import FilterCollection

_EARLIEST = datetime.min.replace(tzinfo=timezone.utc)
_LATEST = datetime.max.replace(tzinfo=timezone.utc)


class FilterBuilder:
    """
    Mutable accumulator that freezes into a FilterCollection.

    Every method returns the builder so calls can be chained. ``build()``
    snapshots the current state; the builder can keep accumulating
    afterwards.
    """

    def __init__(self, clock: Optional[Clock] = None):
        """
        Initialize an empty builder.

        Args:
            clock: Callable returning the current instant; defaults to UTC now.
                Relative ranges (last_days, today, ...) read it once per call.
        """
        self._clock = clock or utc_now
        self._filters: Dict[str, Filter] = {}

    def _set(self, name: str, filter_type: FilterType, value: FilterValue) -> FilterBuilder:
        self._filters[name] = Filter(name=name, type=filter_type, value=value)
        return self

    def _now(self):
        return to_aware(self._clock())

    def term(self, value: str) -> FilterBuilder:
        """
        Set the search term.

        The value is trimmed. A blank term is a no-op: it neither sets nor
        clears the term.
        """
        value = value.strip()
        if value:
            self._set('term', FilterType.STRING, value)
        return self

    def date_range(self, date_range: DateRange) -> FilterBuilder:
        """
        Set the since/until filters.

        Each bound is set only when present; a missing bound leaves any
        earlier value of that filter in place.
        """
        if date_range.since is not None:
            self._set('since', FilterType.DATETIME, date_range.since)
        if date_range.until is not None:
            self._set('until', FilterType.DATETIME, date_range.until)
        return self

    def last_days(self, days: Union[int, float]) -> FilterBuilder:
        """Filter results from the last N days (exact 24-hour days)."""
        now = self._now()
        try:
            since = now - timedelta(days=days)
        except (OverflowError, ValueError):
            # Beyond the datetime range: clamp; NaN leaves since unset
            since = None if math.isnan(days) else (_EARLIEST if days > 0 else _LATEST)
        return self.date_range(DateRange(since=since, until=now))

    def today(self) -> FilterBuilder:
        """Filter results since local midnight."""
        now = self._now()
        return self.date_range(DateRange(since=local_midnight(local_date(now)), until=now))

    def this_week(self) -> FilterBuilder:
        """Filter results since Monday, local midnight."""
        now = self._now()
        monday = start_of_week(local_date(now))
        return self.date_range(DateRange(since=local_midnight(monday), until=now))

    def this_month(self) -> FilterBuilder:
        """Filter results since the first of the month, local midnight."""
        now = self._now()
        first = local_date(now).replace(day=1)
        return self.date_range(DateRange(since=local_midnight(first), until=now))

    def this_year(self) -> FilterBuilder:
        """Filter results since January 1st, local midnight."""
        now = self._now()
        first = local_date(now).replace(month=1, day=1)
        return self.date_range(DateRange(since=local_midnight(first), until=now))

    def person(self, value: PersonValue) -> FilterBuilder:
        """Filter by person (user, group, or email)."""
        return self._set('person', FilterType.PERSON, value)

    def user(self, user_id: str) -> FilterBuilder:
        return self.person(PersonValue(id=user_id, type='user'))

    def string(self, name: str, value: str) -> FilterBuilder:
        return self._set(name, FilterType.STRING, value)

    def int(self, name: str, value: Union[int, float]) -> FilterBuilder:
        """Set an integer filter; finite fractional input is floored (-1.5 -> -2)."""
        return self._set(name, FilterType.INT, math.floor(value) if math.isfinite(value) else value)

    def bool(self, name: str, value: bool) -> FilterBuilder:
        return self._set(name, FilterType.BOOL, value)

    def custom(self, name: str, filter_type: Union[FilterType, str], value: FilterValue) -> FilterBuilder:
        """
        Set a filter with an explicit type.

        The caller is responsible for ``value`` matching ``filter_type``.

        Raises:
            ValueError: If ``filter_type`` is not a known filter type
        """
        return self._set(name, FilterType(filter_type), value)

    def remove(self, name: str) -> FilterBuilder:
        self._filters.pop(name, None)
        return self

    def clear(self) -> FilterBuilder:
        self._filters.clear()
        return self

    def build(self) -> FilterCollection:
        """Build an immutable snapshot of the current filters."""
        return FilterCollection(dict(self._filters))
