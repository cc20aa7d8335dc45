"""
Typed search filters.

This module provides an immutable filter collection, a fluent builder for
it, and the built-in filter definitions used to recover typed values from
query parameters.

Example usage:
    from unified_search.filters import FilterBuilder, FilterCollection, BUILTIN_FILTERS

    filters = FilterBuilder().term('report').last_days(7).build()
    params = filters.to_query_params()

    restored = FilterCollection.from_query_params(params, BUILTIN_FILTERS)
"""

from .codec import serialize_value, parse_value
from .collection import FilterCollection
from .builder import FilterBuilder
from .definitions import (
    BUILTIN_FILTERS,
    get_builtin_filter,
    is_builtin_filter,
    merge_definitions,
    load_filter_definitions,
    parse_filter_definitions,
)

__all__ = [
    # Core classes
    'FilterCollection',
    'FilterBuilder',

    # Definitions
    'BUILTIN_FILTERS',
    'get_builtin_filter',
    'is_builtin_filter',
    'merge_definitions',
    'load_filter_definitions',
    'parse_filter_definitions',

    # Codec
    'serialize_value',
    'parse_value',
]
