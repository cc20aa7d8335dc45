#!/usr/bin/env python3
"""
Built-in filter definitions and helpers for provider-supplied ones.
"""

import logging
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, Iterable, Mapping, Optional, Union

import yaml

from ..exceptions import DefinitionError
from ..models import FilterDefinition, FilterType

logger = logging.getLogger(__name__)


def _builtin(name: str, filter_type: FilterType, label: str) -> FilterDefinition:
    return FilterDefinition(name=name, type=filter_type, label=label, exclusive=False)


BUILTIN_FILTERS: Mapping[str, FilterDefinition] = MappingProxyType({
    'term': _builtin('term', FilterType.STRING, 'Search term'),
    'since': _builtin('since', FilterType.DATETIME, 'From date'),
    'until': _builtin('until', FilterType.DATETIME, 'To date'),
    'person': _builtin('person', FilterType.PERSON, 'Person'),
    'title-only': _builtin('title-only', FilterType.BOOL, 'Title only'),
    'places': _builtin('places', FilterType.STRING, 'Location'),
    'provider': _builtin('provider', FilterType.STRING, 'Provider'),
})
"""Filters every unified search provider understands"""


def get_builtin_filter(name: str) -> Optional[FilterDefinition]:
    """Get a built-in filter definition by name."""
    return BUILTIN_FILTERS.get(name)


def is_builtin_filter(name: str) -> bool:
    return name in BUILTIN_FILTERS


DefinitionsInput = Union[Mapping[str, FilterDefinition], Iterable[FilterDefinition]]


def merge_definitions(*sources: DefinitionsInput,
                      include_builtins: bool = True) -> Mapping[str, FilterDefinition]:
    """
    Combine filter definitions into one read-only mapping.

    Later sources override earlier ones, so a provider can redefine a
    built-in filter's label or type.

    Args:
        *sources: Name-keyed mappings or iterables of FilterDefinition,
            e.g. the result of ``SearchProvider.get_custom_filters()``
        include_builtins: Start from BUILTIN_FILTERS

    Returns:
        Read-only name -> FilterDefinition mapping
    """
    merged: Dict[str, FilterDefinition] = dict(BUILTIN_FILTERS) if include_builtins else {}

    for source in sources:
        items = source.values() if isinstance(source, Mapping) else source
        for definition in items:
            if definition.name in merged and merged[definition.name] != definition:
                logger.debug(f"Overriding filter definition: {definition.name}")
            merged[definition.name] = definition

    return MappingProxyType(merged)


def load_filter_definitions(path: Union[str, Path]) -> Mapping[str, FilterDefinition]:
    """
    Load custom filter definitions from a YAML file.

    Two layouts are accepted:

        # list form
        - name: min-size
          type: int
          label: Minimum size

        # mapping form
        min-size:
          type: int
          label: Minimum size

    Args:
        path: Path to the YAML file

    Returns:
        Read-only name -> FilterDefinition mapping (built-ins not included)

    Raises:
        DefinitionError: If the file cannot be read or an entry is invalid
    """
    path = Path(path).expanduser()
    try:
        with open(path, 'r', encoding='utf-8') as f:
            document = yaml.safe_load(f)
    except OSError as e:
        raise DefinitionError(f"Cannot read filter definitions from {path}: {e}") from e
    except yaml.YAMLError as e:
        raise DefinitionError(f"Invalid YAML in {path}: {e}") from e

    definitions = parse_filter_definitions(document)
    logger.info(f"Loaded {len(definitions)} filter definitions from {path}")
    return definitions


def parse_filter_definitions(document: Any) -> Mapping[str, FilterDefinition]:
    """
    Build definitions from an already-decoded YAML/JSON document.

    Raises:
        DefinitionError: If the document or one of its entries is malformed
    """
    if document is None:
        return MappingProxyType({})

    if isinstance(document, Mapping):
        entries = []
        for name, spec in document.items():
            if not isinstance(spec, Mapping):
                raise DefinitionError(f"Definition for {name!r} must be a mapping")
            entries.append({'name': name, **spec})
    elif isinstance(document, list):
        entries = document
    else:
        raise DefinitionError("Filter definitions must be a list or a mapping")

    definitions: Dict[str, FilterDefinition] = {}
    for entry in entries:
        definition = _definition_from_dict(entry)
        definitions[definition.name] = definition

    return MappingProxyType(definitions)


def _definition_from_dict(entry: Any) -> FilterDefinition:
    if not isinstance(entry, Mapping):
        raise DefinitionError(f"Definition entries must be mappings, got {type(entry).__name__}")

    name = entry.get('name')
    if not isinstance(name, str) or not name:
        raise DefinitionError(f"Definition is missing a name: {entry!r}")

    try:
        filter_type = FilterType(entry.get('type', FilterType.STRING.value))
    except ValueError as e:
        raise DefinitionError(f"Unknown filter type for {name!r}: {entry.get('type')!r}") from e

    label = entry.get('label')
    return FilterDefinition(
        name=name,
        type=filter_type,
        label=str(label) if label is not None else None,
        exclusive=bool(entry.get('exclusive', False))
    )
