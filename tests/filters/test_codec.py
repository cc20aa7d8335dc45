#!/usr/bin/env python3
"""
Tests for type-directed filter value conversion.
"""

import math
from datetime import datetime, timedelta, timezone

import pytest

from unified_search.exceptions import InvalidFilterValueError
from unified_search.filters.codec import parse_value, serialize_value
from unified_search.models import FilterType, PersonValue


class TestSerialize:
    """Test serialize_value()."""

    def test_datetime_utc(self):
        """Test UTC instant formatting."""
        value = datetime(2025, 1, 15, 10, 30, tzinfo=timezone.utc)
        assert serialize_value(value, FilterType.DATETIME) == '2025-01-15T10:30:00.000Z'

    def test_datetime_offset_is_normalized(self):
        """Test offsets are converted to UTC."""
        value = datetime(2025, 1, 15, 12, 30, tzinfo=timezone(timedelta(hours=2)))
        assert serialize_value(value, 'datetime') == '2025-01-15T10:30:00.000Z'

    def test_datetime_keeps_microseconds(self):
        """Test sub-millisecond precision is not truncated."""
        value = datetime(2025, 1, 15, 10, 30, 0, 123456, tzinfo=timezone.utc)
        assert serialize_value(value, 'datetime') == '2025-01-15T10:30:00.123456Z'

    def test_bool(self):
        """Test boolean encoding."""
        assert serialize_value(True, 'bool') == '1'
        assert serialize_value(False, 'bool') == '0'

    def test_person(self):
        """Test person encoding."""
        person = PersonValue(id='a@example.com', type='email', display_name='A')
        assert serialize_value(person, 'person') == 'email:a@example.com'

    def test_strings(self):
        """Test list encoding."""
        assert serialize_value(['a', 'b', 'c'], 'strings') == 'a,b,c'
        assert serialize_value([], 'strings') == ''

    def test_numbers(self):
        """Test decimal encoding."""
        assert serialize_value(-12, 'int') == '-12'
        assert serialize_value(1.5, 'float') == '1.5'
        assert serialize_value(2.0, 'float') == '2'
        assert serialize_value(math.inf, 'float') == 'Infinity'

    def test_string(self):
        """Test strings pass through."""
        assert serialize_value('a, b', 'string') == 'a, b'


class TestParse:
    """Test parse_value()."""

    def test_datetime_zulu(self):
        """Test ISO instant with Z suffix."""
        parsed = parse_value('2025-01-15T10:30:00.000Z', 'datetime')
        assert parsed == datetime(2025, 1, 15, 10, 30, tzinfo=timezone.utc)

    def test_datetime_date_only_is_utc(self):
        """Test date-only strings are UTC midnight."""
        assert parse_value('2025-01-01', 'datetime') == datetime(2025, 1, 1, tzinfo=timezone.utc)

    def test_datetime_naive_is_local(self):
        """Test date-times without offset are local time."""
        parsed = parse_value('2025-01-15T10:30:00', 'datetime')
        assert parsed == datetime(2025, 1, 15, 10, 30).astimezone()
        assert parsed.tzinfo is not None

    @pytest.mark.parametrize('value', [
        'not-a-date', '', '2025-13-01', 'Tuesday',
        '0000-01-01T00:00:00Z',
        '9999-12-31T23:00:00-05:00',
        '0001-01-01T00:30:00+01:00',
    ])
    def test_datetime_invalid(self, value):
        """Test dates that are unparseable or outside the UTC datetime range raise."""
        with pytest.raises(InvalidFilterValueError):
            parse_value(value, 'datetime')

    @pytest.mark.parametrize('value,expected', [
        ('1', True), ('true', True), ('0', False), ('false', False), ('yes', False), ('', False),
    ])
    def test_bool(self, value, expected):
        """Test only '1' and 'true' are truthy."""
        assert parse_value(value, 'bool') is expected

    @pytest.mark.parametrize('value,expected', [
        ('25', 25), ('-3', -3), ('  42', 42), ('12abc', 12), ('7.9', 7),
    ])
    def test_int(self, value, expected):
        """Test the leading integer prefix is read."""
        assert parse_value(value, 'int') == expected

    @pytest.mark.parametrize('value', ['abc', '', '-', '.5', '\u0661\u0662'])
    def test_int_invalid(self, value):
        """Test strings without a leading ASCII integer raise."""
        with pytest.raises(InvalidFilterValueError):
            parse_value(value, 'int')

    @pytest.mark.parametrize('value,expected', [
        ('1.5', 1.5), ('.5', 0.5), ('-2', -2.0), ('1e3', 1000.0), ('3.14abc', 3.14),
    ])
    def test_float(self, value, expected):
        """Test the leading number prefix is read."""
        assert parse_value(value, 'float') == expected

    def test_float_infinity(self):
        """Test infinity literals."""
        assert parse_value('Infinity', 'float') == math.inf
        assert parse_value('-Infinity', 'float') == -math.inf

    @pytest.mark.parametrize('value', ['abc', '', 'NaN', 'e5', '\u0661.5'])
    def test_float_invalid(self, value):
        """Test strings without a leading ASCII number raise."""
        with pytest.raises(InvalidFilterValueError):
            parse_value(value, 'float')

    def test_person(self):
        """Test person decoding."""
        assert parse_value('group:admins', 'person') == PersonValue(id='admins', type='group')

    def test_person_splits_on_first_colon(self):
        """Test ids may contain colons."""
        assert parse_value('user:a:b', 'person') == PersonValue(id='a:b', type='user')

    @pytest.mark.parametrize('value', ['admin', 'user:', ''])
    def test_person_invalid(self, value):
        """Test person values without an id raise."""
        with pytest.raises(InvalidFilterValueError):
            parse_value(value, 'person')

    def test_strings(self):
        """Test list decoding drops empty tokens."""
        assert parse_value(',a,,b,', 'strings') == ['a', 'b']
        assert parse_value('', 'strings') == []

    def test_string(self):
        """Test strings pass through."""
        assert parse_value('  as is ', FilterType.STRING) == '  as is '

    def test_error_carries_context(self):
        """Test the error reports value and type."""
        with pytest.raises(InvalidFilterValueError) as exc_info:
            parse_value('soon', 'datetime')

        assert exc_info.value.value == 'soon'
        assert exc_info.value.filter_type == 'datetime'
