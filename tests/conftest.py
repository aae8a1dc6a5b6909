"""Shared pytest fixtures for UAA client tests.

mock_uaa and mock_uaa_client come from the uaa_client.testing.fixtures
plugin; this module adds fixtures used across several test modules.
"""

from __future__ import annotations

from typing import Iterator

import pytest

from uaa_client.client import Client
from uaa_client.observability import clear_context
from uaa_client.testing.mocks import MockUAA

pytest_plugins = ["uaa_client.testing.fixtures"]

HTTPS_BASE_URL = "https://uaa.test"


@pytest.fixture(autouse=True)
def _clear_log_context() -> Iterator[None]:
    """Drop structlog context bound by a test so it cannot leak into the next one."""
    yield
    clear_context()


@pytest.fixture
def https_client(mock_uaa: MockUAA) -> Client:
    """Create a Client for an https base URL served by mock_uaa."""
    return mock_uaa.client(HTTPS_BASE_URL)
