"""
Exception classes for the unified search filter model.
"""


class UnifiedSearchError(Exception):
    """Base exception for all unified search errors."""
    pass


class FilterError(UnifiedSearchError):
    """Base exception for filter-related errors."""
    pass


class InvalidFilterValueError(FilterError):
    """Raised when a serialized filter value cannot be parsed for its type."""
    def __init__(self, value: str, filter_type: str):
        super().__init__(f"Cannot parse {value!r} as {filter_type}")
        self.value = value
        self.filter_type = filter_type


class DefinitionError(FilterError):
    """Raised when a filter definition is malformed."""
    pass


class ConfigurationError(UnifiedSearchError):
    """Raised when configuration values are invalid."""
    pass
