"""
Pytest configuration and fixtures for the test suite.

This file is automatically loaded by pytest before running tests.
It keeps developer credentials and deployment overrides from leaking into
test runs and resets the per-environment component registry between tests.
"""

import os

import pytest

os.environ["TESTING"] = "true"

_OVERRIDABLE_KEYS = (
    "AUTH_TOKEN",
    "DEPLOYMENT_TARGET",
    "LOG_LEVEL",
    "LOG_FORMAT",
    "API_BASE_URL_WEB",
    "API_BASE_URL_ANDROID",
    "API_BASE_URL_DESKTOP",
    "REACHABILITY_TIMEOUT",
    "READ_TIMEOUT",
    "SEND_TIMEOUT",
)


@pytest.fixture(autouse=True)
def _isolate_environment(monkeypatch: pytest.MonkeyPatch):
    for key in _OVERRIDABLE_KEYS:
        monkeypatch.delenv(key, raising=False)

    from mobile_chat.bootstrap.components import Components

    Components.reset()
    yield
    Components.reset()
