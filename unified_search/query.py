"""
Search query models.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Mapping, Optional, Protocol, Union

from .models import DateRange, Filter, FilterValue, PersonValue

DEFAULT_LIMIT = 25

Cursor = Union[str, int]


class SortOrder(str, Enum):
    """Result ordering requested from providers"""
    RELEVANCE = 'relevance'
    DATE = 'date'
    TITLE = 'title'


class ParsedFilters(Protocol):
    """Read-only filter access, as offered by FilterCollection."""

    def get_term(self) -> str: ...

    def get_date_range(self) -> Optional[DateRange]: ...

    def get_person(self) -> Optional[PersonValue]: ...

    def has(self, name: str) -> bool: ...

    def get(self, name: str, default=None) -> Optional[FilterValue]: ...

    def keys(self) -> List[str]: ...


@dataclass
class SearchQueryOptions:
    """Optional query settings; unset fields fall back to defaults"""
    limit: Optional[int] = None
    cursor: Optional[Cursor] = None
    providers: Optional[List[str]] = None
    sort_order: Optional[SortOrder] = None
    route: Optional[str] = None
    route_parameters: Optional[Dict[str, str]] = None


@dataclass
class SearchQuery:
    """
    A query as sent to one or more search providers.

    Attributes:
        term: Search term (may be empty for filter-only searches)
        filters: Applied filters, name -> Filter
        limit: Maximum entries per provider
        cursor: Pagination cursor returned by a previous result
        providers: Provider ids to query (None = all)
        sort_order: Requested ordering
        route: Current app route, for provider ordering
        route_parameters: Parameters of the current route
    """
    term: str
    filters: Mapping[str, Filter] = field(default_factory=dict)
    limit: int = DEFAULT_LIMIT
    cursor: Optional[Cursor] = None
    providers: Optional[List[str]] = None
    sort_order: Optional[SortOrder] = None
    route: Optional[str] = None
    route_parameters: Optional[Dict[str, str]] = None

    @classmethod
    def from_filters(cls,
                     filters,
                     options: Optional[SearchQueryOptions] = None,
                     default_limit: int = DEFAULT_LIMIT) -> 'SearchQuery':
        """
        Build a query from a FilterCollection.

        Args:
            filters: FilterCollection supplying the term and filters
            options: Pagination, provider selection and sorting
            default_limit: Limit used when options don't set one

        Returns:
            SearchQuery instance
        """
        options = options or SearchQueryOptions()
        return cls(
            term=filters.get_term(),
            filters=filters.as_mapping(),
            limit=options.limit if options.limit is not None else default_limit,
            cursor=options.cursor,
            providers=list(options.providers) if options.providers is not None else None,
            sort_order=options.sort_order,
            route=options.route,
            route_parameters=dict(options.route_parameters) if options.route_parameters else None
        )
