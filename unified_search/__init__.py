"""
Unified Search Filters
Typed filter model and shared contracts for unified search providers.
"""

from .models import (
    FilterType, Filter, FilterDefinition, FilterDefinitionOptions,
    DateRange, PersonValue, FilterValue
)
from .filters import (
    FilterCollection, FilterBuilder,
    BUILTIN_FILTERS, get_builtin_filter, is_builtin_filter,
    merge_definitions, load_filter_definitions
)
from .query import SortOrder, SearchQuery, SearchQueryOptions, ParsedFilters
from .results import (
    SearchHighlight, SearchResultEntry, ProviderSearchResult, AggregatedSearchResult
)
from .providers import RouteContext, SearchProvider, ProviderInfo, SearchClient
from .exceptions import (
    UnifiedSearchError, FilterError, InvalidFilterValueError,
    DefinitionError, ConfigurationError
)
from .config import Config

__version__ = "1.0.0"

__all__ = [
    # Types
    "FilterType",
    "FilterValue",
    "Filter",
    "FilterDefinition",
    "FilterDefinitionOptions",
    "DateRange",
    "PersonValue",
    "SearchHighlight",
    "SearchResultEntry",
    "ProviderSearchResult",
    "AggregatedSearchResult",
    "SortOrder",
    "SearchQuery",
    "SearchQueryOptions",
    "ParsedFilters",
    "RouteContext",
    "SearchProvider",
    "ProviderInfo",
    "SearchClient",

    # Filter classes
    "FilterCollection",
    "FilterBuilder",

    # Built-in filter definitions
    "BUILTIN_FILTERS",
    "get_builtin_filter",
    "is_builtin_filter",
    "merge_definitions",
    "load_filter_definitions",

    # Errors
    "UnifiedSearchError",
    "FilterError",
    "InvalidFilterValueError",
    "DefinitionError",
    "ConfigurationError",

    "Config",
]
