"""
Data models for unified search filters.
"""

from dataclasses import dataclass, asdict
from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Literal, Optional, Union


class FilterType(str, Enum):
    """Supported filter value types"""
    STRING = 'string'
    INT = 'int'
    FLOAT = 'float'
    BOOL = 'bool'
    DATETIME = 'datetime'
    PERSON = 'person'
    STRINGS = 'strings'

    def __str__(self) -> str:
        return self.value


PersonType = Literal['user', 'group', 'email']


@dataclass(frozen=True)
class PersonValue:
    """
    A person-like filter target.

    Attributes:
        id: User id, group id or email address
        type: One of 'user', 'group', 'email'
        display_name: Optional human-readable name (not serialized)
    """
    id: str
    type: PersonType
    display_name: Optional[str] = None


@dataclass(frozen=True)
class DateRange:
    """A date range with optional bounds"""
    since: Optional[datetime] = None
    until: Optional[datetime] = None

    def is_empty(self) -> bool:
        return self.since is None and self.until is None


FilterValue = Union[str, int, float, bool, datetime, PersonValue, List[str]]


@dataclass(frozen=True)
class Filter:
    """
    A single filter instance with name and value.

    The value's runtime shape matches ``type``; this is guaranteed by the
    construction path (builder helpers or the codec), not checked on read.
    """
    name: str
    type: FilterType
    value: FilterValue

    def __repr__(self):
        return f"Filter({self.name}: {self.type.value} = {self.value!r})"


@dataclass(frozen=True)
class FilterDefinitionOptions:
    """Options for creating a filter definition"""
    label: Optional[str] = None
    exclusive: bool = False


@dataclass(frozen=True)
class FilterDefinition:
    """
    Schema definition for a filter.

    Attributes:
        name: Filter name as it appears in query parameters
        type: Value type used to parse and serialize the filter
        label: Display label for filter pickers
        exclusive: Advisory flag for mutually exclusive filters
    """
    name: str
    type: FilterType
    label: Optional[str] = None
    exclusive: bool = False

    @classmethod
    def create(cls,
               name: str,
               type: Union[FilterType, str],
               options: Optional[FilterDefinitionOptions] = None) -> 'FilterDefinition':
        """
        Create a definition from a name, a type and optional display options.

        Args:
            name: Filter name
            type: FilterType or its string value
            options: Label and exclusivity

        Returns:
            FilterDefinition instance

        Raises:
            ValueError: If ``type`` is not a known filter type
        """
        options = options or FilterDefinitionOptions()
        return cls(
            name=name,
            type=FilterType(type),
            label=options.label,
            exclusive=options.exclusive
        )

    def to_dict(self) -> Dict[str, Any]:
        """Export as dictionary."""
        data = asdict(self)
        data["type"] = self.type.value
        return data
