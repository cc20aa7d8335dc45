#!/usr/bin/env python3
"""
Type-directed conversion between filter values and their query-string form.

The string forms are the wire contract for URL query parameters:

    datetime  ISO-8601 instant in UTC ("2025-01-15T10:30:00.000Z")
    bool      "1" / "0"; parses "1" and "true" as True, anything else False
    person    "<type>:<id>"; the display name is not carried
    strings   comma-joined; empty tokens are dropped when parsing
    int       decimal; parsing reads the leading integer prefix
    float     decimal; parsing reads the leading number prefix
    string    as-is
"""

import math
import re
from typing import Union

from ..exceptions import InvalidFilterValueError
from ..models import FilterType, FilterValue, PersonValue
from ..utils.time_utils import parse_iso_string, to_iso_string

_INT_PREFIX = re.compile(r'\s*([+-]?\d+)', re.ASCII)
_FLOAT_PREFIX = re.compile(
    r'\s*([+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?))',
    re.ASCII
)


def serialize_value(value: FilterValue, filter_type: Union[FilterType, str]) -> str:
    """
    Serialize a filter value to its query-string form.

    Args:
        value: Filter value matching ``filter_type``
        filter_type: Declared type of the filter

    Returns:
        String representation
    """
    filter_type = _coerce_type(filter_type)

    if filter_type == FilterType.DATETIME:
        return to_iso_string(value)
    if filter_type == FilterType.BOOL:
        return '1' if value else '0'
    if filter_type == FilterType.PERSON:
        return f"{value.type}:{value.id}"
    if filter_type == FilterType.STRINGS:
        return ','.join(value)
    if filter_type in (FilterType.INT, FilterType.FLOAT):
        return _format_number(value)
    return str(value)


def parse_value(value: str, filter_type: Union[FilterType, str]) -> FilterValue:
    """
    Parse a query-string value according to its declared type.

    Args:
        value: Raw string from the query parameters
        filter_type: Declared type of the filter

    Returns:
        Typed filter value

    Raises:
        InvalidFilterValueError: If the string is not valid for the type
    """
    filter_type = _coerce_type(filter_type)

    if filter_type == FilterType.DATETIME:
        parsed = parse_iso_string(value)
        if parsed is None:
            raise InvalidFilterValueError(value, filter_type.value)
        return parsed

    if filter_type == FilterType.BOOL:
        return value in ('1', 'true')

    if filter_type == FilterType.INT:
        match = _INT_PREFIX.match(value)
        if not match:
            raise InvalidFilterValueError(value, filter_type.value)
        return int(match.group(1))

    if filter_type == FilterType.FLOAT:
        match = _FLOAT_PREFIX.match(value)
        if not match:
            raise InvalidFilterValueError(value, filter_type.value)
        number = match.group(1)
        if number.lstrip('+-') == 'Infinity':
            return -math.inf if number.startswith('-') else math.inf
        return float(number)

    if filter_type == FilterType.PERSON:
        person_type, _, person_id = value.partition(':')
        if not person_id:
            raise InvalidFilterValueError(value, filter_type.value)
        return PersonValue(id=person_id, type=person_type)

    if filter_type == FilterType.STRINGS:
        return [token for token in value.split(',') if token]

    return value


def _coerce_type(filter_type: Union[FilterType, str]) -> FilterType:
    """Map a type name to FilterType; unknown names fall back to string."""
    if isinstance(filter_type, FilterType):
        return filter_type
    try:
        return FilterType(filter_type)
    except ValueError:
        return FilterType.STRING


def _format_number(value: Union[int, float]) -> str:
    """Decimal form without a trailing '.0' for integral floats."""
    if isinstance(value, float):
        if math.isinf(value):
            return '-Infinity' if value < 0 else 'Infinity'
        if math.isnan(value):
            return 'NaN'
        if value.is_integer():
            return str(int(value))
    return str(value)
