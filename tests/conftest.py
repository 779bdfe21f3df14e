"""
Pytest Configuration and Fixtures

This module provides:
- Shared fixtures for all tests (catalogs, controllers)
- Test category markers
"""

import pytest
import sys
from pathlib import Path

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

# Import test configuration
from tests.test_config import (
    CONFIG, EXPECTED, TEST_DATA, MESSAGES,
    get_scenario_records, get_tie_records,
)


# =============================================================================
# SHARED FIXTURES
# =============================================================================

@pytest.fixture
def scenario_catalog():
    """The A/B/C scenario catalog as IdeaItems."""
    from src.catalog import parse_catalog
    return parse_catalog(get_scenario_records())


@pytest.fixture
def tie_catalog():
    """Records whose sort keys tie, as IdeaItems."""
    from src.catalog import parse_catalog
    return parse_catalog(get_tie_records())


@pytest.fixture
def builtin_catalog():
    """The catalog shipped with the package."""
    from src.catalog import BUILTIN_IDEAS
    return BUILTIN_IDEAS


@pytest.fixture
def suggestions():
    """Static suggestion list."""
    return tuple(TEST_DATA["suggestions"])


@pytest.fixture
def controller(scenario_catalog, suggestions):
    """A fresh controller over the scenario catalog, on the landing screen."""
    from src.navigation import NavigationController
    return NavigationController(catalog=scenario_catalog, suggestions=suggestions)


@pytest.fixture
def dashboard_controller(controller):
    """A controller already on Dashboard(Trending) with a guest session."""
    from src.navigation import ExploreTrending
    controller.dispatch(ExploreTrending())
    return controller


@pytest.fixture
def test_config():
    """Provide access to test configuration."""
    return CONFIG


@pytest.fixture
def expected_values():
    """Provide access to expected values."""
    return EXPECTED


@pytest.fixture
def test_data():
    """Provide access to test data."""
    return TEST_DATA


# =============================================================================
# MARKERS FOR TEST CATEGORIES
# =============================================================================

def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "config_validation: Configuration validation tests"
    )
    config.addinivalue_line(
        "markers", "idempotency: Deterministic ranking tests"
    )
    config.addinivalue_line(
        "markers", "navigation_flows: Screen transition scenario tests"
    )
    config.addinivalue_line(
        "markers", "cli_behavior: CLI interface tests"
    )
