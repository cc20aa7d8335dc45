#!/usr/bin/env python3
"""
Immutable collection of search filters with typed accessors.
"""

import logging
from types import MappingProxyType
from typing import (
    Any, Dict, Iterable, Iterator, List, Mapping, Optional, Tuple, Union
)

from ..exceptions import InvalidFilterValueError
from ..models import DateRange, Filter, FilterDefinition, FilterType, FilterValue, PersonValue
from .codec import parse_value, serialize_value
from .definitions import BUILTIN_FILTERS

logger = logging.getLogger(__name__)

FilterSource = Union[Mapping[str, Filter], Iterable[Tuple[str, Filter]]]
DefinitionSource = Mapping[str, Union[FilterDefinition, FilterType, str]]


class FilterCollection:
    """
    Immutable, ordered mapping from filter name to Filter.

    "Mutating" operations (``with_filter``, ``without``) return a new
    collection; the original is never altered. Iterating yields
    ``(name, Filter)`` pairs in insertion order.
    """

    __slots__ = ('_filters',)

    def __init__(self, filters: Optional[FilterSource] = None):
        """
        Initialize the collection.

        Args:
            filters: Mapping, FilterCollection or iterable of
                (name, Filter) pairs; copied
        """
        if isinstance(filters, FilterCollection):
            filters = filters._filters
        self._filters: Dict[str, Filter] = dict(filters or {})

    @property
    def size(self) -> int:
        return len(self._filters)

    def __len__(self) -> int:
        return len(self._filters)

    def __contains__(self, name: object) -> bool:
        return name in self._filters

    def __iter__(self) -> Iterator[Tuple[str, Filter]]:
        return iter(list(self._filters.items()))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FilterCollection):
            return NotImplemented
        return self._filters == other._filters

    def __repr__(self):
        return f"FilterCollection({list(self._filters.values())})"

    def has(self, name: str) -> bool:
        return name in self._filters

    def get(self, name: str, default: Any = None) -> Optional[FilterValue]:
        """Get a filter's value, or ``default`` if the filter is absent."""
        filter_ = self._filters.get(name)
        return default if filter_ is None else filter_.value

    def get_filter(self, name: str) -> Optional[Filter]:
        return self._filters.get(name)

    def get_term(self) -> str:
        """Search term, or an empty string when none is set."""
        return self.get('term', '')

    def get_date_range(self) -> Optional[DateRange]:
        """
        Get the since/until bounds.

        Returns:
            DateRange if either bound is set, None otherwise
        """
        date_range = DateRange(since=self.get('since'), until=self.get('until'))
        return None if date_range.is_empty() else date_range

    def get_person(self) -> Optional[PersonValue]:
        return self.get('person')

    def keys(self) -> List[str]:
        return list(self._filters.keys())

    def values(self) -> List[Filter]:
        return list(self._filters.values())

    def entries(self) -> List[Tuple[str, Filter]]:
        return list(self._filters.items())

    def as_mapping(self) -> Mapping[str, Filter]:
        """Read-only view of the underlying name -> Filter mapping."""
        return MappingProxyType(self._filters)

    def with_filter(self, name: str, filter_: Filter) -> 'FilterCollection':
        """
        Create a new collection with an additional (or replaced) filter.

        Args:
            name: Key to store the filter under
            filter_: Filter to add

        Returns:
            New FilterCollection
        """
        filters = dict(self._filters)
        filters[name] = filter_
        return FilterCollection(filters)

    def without(self, name: str) -> 'FilterCollection':
        """Create a new collection without the named filter."""
        filters = dict(self._filters)
        filters.pop(name, None)
        return FilterCollection(filters)

    def to_query_params(self) -> Dict[str, str]:
        """
        Serialize filters to URL query parameters.

        Returns:
            One string entry per filter
        """
        return {
            name: serialize_value(filter_.value, filter_.type)
            for name, filter_ in self._filters.items()
        }

    @classmethod
    def from_query_params(cls,
                          params: Mapping[str, str],
                          definitions: Optional[DefinitionSource] = None) -> 'FilterCollection':
        """
        Create a collection from query parameters.

        Unknown filter names and values that do not parse for their
        declared type are dropped; the remaining entries are kept.

        Args:
            params: Flat string mapping, e.g. parsed URL query parameters
            definitions: Filter name -> FilterDefinition (or bare type name).
                Defaults to the built-in filters.

        Returns:
            New FilterCollection with the successfully parsed entries
        """
        if definitions is None:
            definitions = BUILTIN_FILTERS

        filters: Dict[str, Filter] = {}
        for name, raw in params.items():
            definition = definitions.get(name)
            if definition is None:
                logger.debug(f"Ignoring unknown filter: {name}")
                continue

            filter_type = _definition_type(definition)
            if filter_type is None:
                logger.debug(f"Ignoring filter {name} with unknown type: {definition!r}")
                continue

            try:
                value = parse_value(raw, filter_type)
            except InvalidFilterValueError as e:
                logger.debug(f"Dropping filter {name}: {e}")
                continue

            filters[name] = Filter(name=name, type=filter_type, value=value)

        return cls(filters)


def _definition_type(definition: Union[FilterDefinition, FilterType, str]) -> Optional[FilterType]:
    """Resolve the declared type of a definition entry."""
    raw_type = getattr(definition, 'type', definition)
    try:
        return FilterType(raw_type)
    except ValueError:
        return None
