#!/usr/bin/env python3
"""
Tests for environment-driven configuration.
"""

import pytest

from unified_search.config import Config
from unified_search.exceptions import ConfigurationError
from unified_search.filters import BUILTIN_FILTERS, FilterBuilder
from unified_search.models import FilterType
from unified_search.query import SearchQueryOptions, SortOrder


@pytest.fixture
def clean_env(monkeypatch):
    for name in ("UNIFIED_SEARCH_LIMIT", "UNIFIED_SEARCH_SORT", "UNIFIED_SEARCH_FILTERS_PATH"):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


class TestFromEnv:
    """Test Config.from_env()."""

    def test_defaults(self, clean_env):
        """Test defaults without environment variables."""
        config = Config.from_env()

        assert config.limit == 25
        assert config.sort_order == SortOrder.RELEVANCE
        assert config.filters_path is None

    def test_reads_variables(self, clean_env):
        """Test values are read from the environment."""
        clean_env.setenv("UNIFIED_SEARCH_LIMIT", "10")
        clean_env.setenv("UNIFIED_SEARCH_SORT", "Date")
        clean_env.setenv("UNIFIED_SEARCH_FILTERS_PATH", "/tmp/filters.yaml")

        config = Config.from_env()

        assert config.limit == 10
        assert config.sort_order == SortOrder.DATE
        assert config.filters_path == "/tmp/filters.yaml"

    @pytest.mark.parametrize("value", ["ten", "0", "-5"])
    def test_invalid_limit(self, clean_env, value):
        """Test invalid limits are rejected."""
        clean_env.setenv("UNIFIED_SEARCH_LIMIT", value)
        with pytest.raises(ConfigurationError):
            Config.from_env()

    def test_invalid_sort(self, clean_env):
        """Test unknown sort orders are rejected."""
        clean_env.setenv("UNIFIED_SEARCH_SORT", "random")
        with pytest.raises(ConfigurationError):
            Config.from_env()


class TestDefinitions:
    """Test Config.definitions()."""

    def test_builtins_without_file(self):
        """Test the built-ins are used when no file is configured."""
        assert Config().definitions() is BUILTIN_FILTERS

    def test_merges_file(self, definitions_file):
        """Test custom definitions are merged with the built-ins."""
        definitions = Config(filters_path=str(definitions_file)).definitions()

        assert definitions['min-size'].type == FilterType.INT
        assert definitions['term'].type == FilterType.STRING


class TestBuildQuery:
    """Test Config.build_query()."""

    def test_applies_defaults(self):
        """Test configured limit and sort order are applied."""
        config = Config(limit=10, sort_order=SortOrder.TITLE)
        query = config.build_query(FilterBuilder().term('report').build())

        assert query.term == 'report'
        assert query.limit == 10
        assert query.sort_order == SortOrder.TITLE

    def test_options_take_precedence(self):
        """Test explicit options override configuration."""
        config = Config(limit=10, sort_order=SortOrder.TITLE)
        options = SearchQueryOptions(limit=5, sort_order=SortOrder.DATE)

        query = config.build_query(FilterBuilder().build(), options)

        assert query.limit == 5
        assert query.sort_order == SortOrder.DATE
