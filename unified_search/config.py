"""
Configuration helpers for unified search.
Supports environment variables for easy deployment configuration.
"""

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from .exceptions import ConfigurationError
from .filters.definitions import BUILTIN_FILTERS, load_filter_definitions, merge_definitions
from .models import FilterDefinition
from .query import DEFAULT_LIMIT, SearchQuery, SearchQueryOptions, SortOrder


@dataclass
class Config:
    """
    Configuration that can be read from environment variables.

    Environment variables:
        UNIFIED_SEARCH_LIMIT: Default result limit per provider (default: 25)
        UNIFIED_SEARCH_SORT: Default sort order (default: relevance)
        UNIFIED_SEARCH_FILTERS_PATH: YAML file with custom filter definitions

    Attributes:
        limit: Default result limit per provider
        sort_order: Default sort order
        filters_path: Optional path to custom filter definitions
    """
    limit: int = DEFAULT_LIMIT
    sort_order: SortOrder = SortOrder.RELEVANCE
    filters_path: Optional[str] = None

    @classmethod
    def from_env(cls) -> 'Config':
        """
        Create configuration from environment variables.

        Returns:
            Config instance

        Raises:
            ConfigurationError: If a variable holds an invalid value

        Example:
            from unified_search.config import Config

            config = Config.from_env()
            definitions = config.definitions()
        """
        raw_limit = os.getenv("UNIFIED_SEARCH_LIMIT", str(DEFAULT_LIMIT))
        try:
            limit = int(raw_limit)
        except ValueError as e:
            raise ConfigurationError(f"UNIFIED_SEARCH_LIMIT must be an integer, got {raw_limit!r}") from e
        if limit <= 0:
            raise ConfigurationError(f"UNIFIED_SEARCH_LIMIT must be positive, got {limit}")

        raw_sort = os.getenv("UNIFIED_SEARCH_SORT", SortOrder.RELEVANCE.value)
        try:
            sort_order = SortOrder(raw_sort.lower())
        except ValueError as e:
            raise ConfigurationError(f"Unknown UNIFIED_SEARCH_SORT: {raw_sort!r}") from e

        return cls(
            limit=limit,
            sort_order=sort_order,
            filters_path=os.getenv("UNIFIED_SEARCH_FILTERS_PATH") or None
        )

    def definitions(self) -> Mapping[str, FilterDefinition]:
        """
        Filter definitions for parsing query parameters.

        Returns:
            Built-in definitions, merged with the custom file when configured

        Raises:
            DefinitionError: If the configured file is invalid
        """
        if not self.filters_path:
            return BUILTIN_FILTERS
        return merge_definitions(load_filter_definitions(self.filters_path))

    def build_query(self, filters, options: Optional[SearchQueryOptions] = None) -> SearchQuery:
        """
        Build a SearchQuery from a FilterCollection using configured defaults.

        Args:
            filters: FilterCollection supplying term and filters
            options: Explicit settings; take precedence over configuration

        Returns:
            SearchQuery instance
        """
        query = SearchQuery.from_filters(filters, options, default_limit=self.limit)
        if query.sort_order is None:
            query.sort_order = self.sort_order
        return query
