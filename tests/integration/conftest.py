"""
Pytest configuration and fixtures for integration tests.

Runs the function entry points against the real process Config singleton
with the environment controlled through monkeypatch.
"""

import pytest
from shared.config import Config


@pytest.fixture
def live_config():
    """The process Config singleton, as bound in SampleTrigger and Health."""
    return Config()


@pytest.fixture
def host_context():
    """Minimal stand-in for azure.functions.Context."""

    class _Context:
        invocation_id = "00000000-0000-0000-0000-000000000001"
        function_name = "SampleTrigger"
        function_directory = "/home/site/wwwroot/SampleTrigger"

    return _Context()
