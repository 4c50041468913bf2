"""
Test Configuration and Fixtures

Shared fixtures and markers for the resource-id test suite.
"""

import os

import pytest
import structlog

# Set test environment variables before importing settings.
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("LOG_LEVEL", "WARNING")


# =============================================================================
# PYTEST CONFIGURATION
# =============================================================================


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests (fast, isolated)")
    config.addinivalue_line("markers", "integration: Integration tests (may use real services)")


def pytest_collection_modifyitems(config, items):
    """
    Auto-assign tier markers so we can run:
    - pytest -m unit
    - pytest -m integration

    Convention:
    - tests/integration/** => integration
    - everything else      => unit
    """
    for item in items:
        path = str(getattr(item, "fspath", ""))
        if item.get_closest_marker("integration") or item.get_closest_marker("unit"):
            continue
        if "/tests/integration/" in path or path.endswith("\\tests\\integration\\"):
            item.add_marker(pytest.mark.integration)
        else:
            item.add_marker(pytest.mark.unit)


# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture(autouse=True)
def _reset_structlog():
    """Keep logging configuration from leaking between tests."""
    yield
    structlog.reset_defaults()


@pytest.fixture
def settings_cache():
    """Clear the cached settings before and after a test that changes env."""
    from resource_id.config import get_settings

    get_settings.cache_clear()
    yield get_settings
    get_settings.cache_clear()
