#!/usr/bin/env python3
"""
Contracts between the filter model and search providers / clients.

Transport is out of scope here: concrete clients implement ``get_providers``
and ``search``; ``search_all`` fans a query out over them.
"""

import asyncio
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from .filters.definitions import merge_definitions
from .models import FilterDefinition
from .query import SearchQuery
from .results import ProviderSearchResult

logger = logging.getLogger(__name__)


@dataclass
class RouteContext:
    """The app route a search is started from"""
    route: str
    parameters: Dict[str, str] = field(default_factory=dict)


class SearchProvider(ABC):
    """
    Abstract base class for search providers.

    Subclasses set the identifying class attributes and implement ordering
    and the list of supported filter names.
    """

    id: str
    name: str
    icon: str
    app_id: str
    is_external: bool = False
    supports_in_app_search: bool = False

    @abstractmethod
    def get_order(self, context: RouteContext) -> Optional[int]:
        """
        Ordering weight for the given route.

        Args:
            context: Current route

        Returns:
            Lower values sort first; None hides the provider for this route
        """
        pass

    @abstractmethod
    def get_supported_filters(self) -> List[str]:
        """Names of the filters this provider honors."""
        pass

    def get_custom_filters(self) -> List[FilterDefinition]:
        """Filter definitions beyond the built-ins."""
        return []

    def get_alternate_ids(self) -> List[str]:
        return []


@dataclass
class ProviderInfo:
    """
    Provider description as exposed to clients.

    Attributes:
        id: Provider id
        app_id: Owning app
        name: Display name
        icon: Icon class or URL
        order: Ordering weight for the current route
        triggers: Ids that select this provider (own id plus alternates)
        filters: Supported filter name -> type name
        in_app_search: Provider can search within the current app view
        is_external: Results link outside the instance
    """
    id: str
    app_id: str
    name: str
    icon: str
    order: int
    triggers: List[str] = field(default_factory=list)
    filters: Dict[str, str] = field(default_factory=dict)
    in_app_search: bool = False
    is_external: bool = False

    @classmethod
    def from_provider(cls,
                      provider: SearchProvider,
                      context: RouteContext,
                      definitions=None) -> Optional['ProviderInfo']:
        """
        Describe a provider for a route.

        Args:
            provider: The provider
            context: Current route
            definitions: Name -> FilterDefinition used to type the supported
                filters; defaults to built-ins merged with the provider's
                custom filters

        Returns:
            ProviderInfo, or None if the provider is hidden for the route
        """
        order = provider.get_order(context)
        if order is None:
            return None

        if definitions is None:
            definitions = merge_definitions(provider.get_custom_filters())

        filters = {}
        for name in provider.get_supported_filters():
            definition = definitions.get(name)
            if definition is None:
                logger.warning(f"Provider {provider.id} supports undefined filter: {name}")
                continue
            filters[name] = definition.type.value

        return cls(
            id=provider.id,
            app_id=provider.app_id,
            name=provider.name,
            icon=provider.icon,
            order=order,
            triggers=[provider.id, *provider.get_alternate_ids()],
            filters=filters,
            in_app_search=provider.supports_in_app_search,
            is_external=provider.is_external
        )


class SearchClient(ABC):
    """
    Abstract base class for unified search clients.
    """

    @abstractmethod
    async def get_providers(self, route: Optional[str] = None) -> List[ProviderInfo]:
        """
        List providers available for a route.

        Args:
            route: Current app route

        Returns:
            ProviderInfo list, in display order
        """
        pass

    @abstractmethod
    async def search(self, provider_id: str, query: SearchQuery) -> ProviderSearchResult:
        """
        Run a query against a single provider.

        Args:
            provider_id: Provider to query
            query: The search query

        Returns:
            The provider's result set
        """
        pass

    async def search_all(self, query: SearchQuery) -> Dict[str, ProviderSearchResult]:
        """
        Run a query against several providers concurrently.

        Providers listed in ``query.providers`` are queried; when unset, every
        provider returned by ``get_providers(query.route)``. A provider whose
        search fails is logged and omitted from the result.

        Args:
            query: The search query

        Returns:
            Provider id -> result set, in provider order
        """
        if query.providers is not None:
            provider_ids = list(query.providers)
        else:
            provider_ids = [info.id for info in await self.get_providers(query.route)]

        results = await asyncio.gather(
            *(self.search(provider_id, query) for provider_id in provider_ids),
            return_exceptions=True
        )

        by_provider: Dict[str, ProviderSearchResult] = {}
        for provider_id, result in zip(provider_ids, results):
            if isinstance(result, BaseException):
                if not isinstance(result, Exception):
                    raise result
                logger.warning(f"Search failed for provider {provider_id}: {result}")
                continue
            by_provider[provider_id] = result

        return by_provider
