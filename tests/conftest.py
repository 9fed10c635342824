"""
Pytest configuration and shared fixtures for Science Report tests
"""

import pytest
from datetime import datetime, timezone
from unittest.mock import MagicMock
import azure.functions as func
from shared.config import Config, ScienceConfigSource


@pytest.fixture(autouse=True)
def reset_config_singleton():
    """
    Rebuild the Config singleton around each test.

    The singleton caches the YIELD_SCIENCE load result for the life of the
    process, so a value loaded in one test would leak into the next.
    """
    Config.reset()
    yield
    Config.reset()


@pytest.fixture
def mock_environment(monkeypatch):
    """
    Mock environment variables for testing.

    To override specific variables in a test:
        def test_something(mock_environment, monkeypatch):
            monkeypatch.setenv("YIELD_SCIENCE", "42")
    """
    env_vars = {
        "YIELD_SCIENCE": "10",
        "ENVIRONMENT": "test",
        "LOG_LEVEL": "DEBUG",
    }

    for key, value in env_vars.items():
        monkeypatch.setenv(key, value)

    return env_vars


@pytest.fixture
def mock_env_missing(monkeypatch):
    """Environment with YIELD_SCIENCE removed."""
    monkeypatch.delenv("YIELD_SCIENCE", raising=False)


@pytest.fixture
def counting_env():
    """
    Env mapping whose get() calls are counted.

    Usage:
        env = counting_env({"YIELD_SCIENCE": "10"})
        ...
        assert env.get.call_count == 1
    """

    def _build(values: dict) -> MagicMock:
        env = MagicMock()
        env.get.side_effect = values.get
        return env

    return _build


@pytest.fixture
def science_source():
    """Build a ScienceConfigSource over an explicit mapping."""

    def _build(values: dict) -> ScienceConfigSource:
        return ScienceConfigSource(env=values)

    return _build


@pytest.fixture
def fixed_clock():
    """Clock returning a fixed UTC time."""
    return lambda: datetime(2024, 11, 9, 14, 30, 0, tzinfo=timezone.utc)


@pytest.fixture
def sample_request() -> func.HttpRequest:
    """GET /api/sample with no parameters."""
    return func.HttpRequest(method="GET", body=b"", url="/api/sample")


@pytest.fixture
def health_request() -> func.HttpRequest:
    """GET /api/health with no parameters."""
    return func.HttpRequest(method="GET", body=b"", url="/api/health")


# Markers for test categorization
def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests that don't require external resources")
    config.addinivalue_line("markers", "integration: Integration tests that exercise the full function entry points")
    config.addinivalue_line("markers", "slow: Tests that take more than 1 second")
