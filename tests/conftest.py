"""
Shared pytest fixtures for unified search tests.
"""

import sys
from datetime import datetime, timezone
from pathlib import Path

import pytest

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

# Keep library debug logging out of test output
import logging
logging.basicConfig(level=logging.CRITICAL)

from unified_search.filters import FilterBuilder


# 2025-06-15 is a Sunday
FIXED_UTC_NOW = datetime(2025, 6, 15, 12, 0, 0, tzinfo=timezone.utc)


def fixed_clock(now: datetime):
    """Clock callable that always returns ``now``."""
    return lambda: now


@pytest.fixture
def utc_now():
    return FIXED_UTC_NOW


@pytest.fixture
def builder():
    """Provide a FilterBuilder whose clock is fixed at 2025-06-15T12:00:00Z."""
    return FilterBuilder(clock=fixed_clock(FIXED_UTC_NOW))


@pytest.fixture
def builder_at():
    """Factory for builders with a clock fixed at a given instant."""
    def make(now: datetime) -> FilterBuilder:
        return FilterBuilder(clock=fixed_clock(now))
    return make


@pytest.fixture
def definitions_file(tmp_path):
    """Write a YAML file of custom filter definitions and return its path."""
    path = tmp_path / "filters.yaml"
    path.write_text(
        "min-size:\n"
        "  type: int\n"
        "  label: Minimum size\n"
        "mime:\n"
        "  type: strings\n"
        "  label: File type\n"
        "  exclusive: true\n",
        encoding="utf-8"
    )
    return path
