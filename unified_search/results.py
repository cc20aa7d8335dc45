"""
Search result models.
"""

from dataclasses import dataclass, field, asdict
from typing import Any, Dict, List, Mapping, Optional, Union


@dataclass
class SearchHighlight:
    """A highlighted fragment showing where a match occurred"""
    field: str
    fragments: List[str] = field(default_factory=list)


@dataclass
class SearchResultEntry:
    """
    A single search result entry.

    Attributes:
        id: Provider-scoped entry id
        provider_id: Provider that produced the entry
        score: Relevance score used to order aggregated results
        title: Main line
        subline: Secondary line
        resource_url: Link to the matched resource
        thumbnail_url: Optional preview image
        icon: Optional icon class or URL
        rounded: Render the thumbnail rounded (avatars)
        highlights: Matched fragments per field
        attributes: Provider-specific extra data
    """
    id: str
    provider_id: str
    score: float
    title: str
    subline: str
    resource_url: str
    thumbnail_url: Optional[str] = None
    icon: Optional[str] = None
    rounded: Optional[bool] = None
    highlights: Optional[List[SearchHighlight]] = None
    attributes: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """Export as dictionary."""
        return asdict(self)


@dataclass
class ProviderSearchResult:
    """Result set from a single provider"""
    name: str
    is_paginated: bool
    entries: List[SearchResultEntry] = field(default_factory=list)
    cursor: Optional[Union[str, int]] = None

    @property
    def has_more(self) -> bool:
        return self.is_paginated and self.cursor is not None


@dataclass
class AggregatedSearchResult:
    """
    Aggregated results from multiple providers.

    Attributes:
        entries: All entries, ordered by descending score
        by_provider: Per-provider result sets
        total_count: Number of merged entries
        has_more: Whether any provider can return another page
    """
    entries: List[SearchResultEntry]
    by_provider: Dict[str, ProviderSearchResult]
    total_count: int
    has_more: bool

    @classmethod
    def aggregate(cls, by_provider: Mapping[str, ProviderSearchResult]) -> 'AggregatedSearchResult':
        """
        Merge per-provider results.

        Entries keep provider order among equal scores.

        Args:
            by_provider: Provider id -> ProviderSearchResult

        Returns:
            AggregatedSearchResult instance
        """
        entries = [entry for result in by_provider.values() for entry in result.entries]
        entries.sort(key=lambda entry: entry.score, reverse=True)

        return cls(
            entries=entries,
            by_provider=dict(by_provider),
            total_count=len(entries),
            has_more=any(result.has_more for result in by_provider.values())
        )
