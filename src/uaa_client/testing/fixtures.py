"""Pytest fixtures and context managers for UAA client tests.

Load as a plugin with ``pytest_plugins = ["uaa_client.testing.fixtures"]``.

Fixtures:
    mock_uaa: Fresh MockUAA accepting myusername/mypassword.
    mock_uaa_client: Client wired to mock_uaa at DEFAULT_BASE_URL.

Context managers:
    mock_uaa_context(): Yields a MockUAA and clears it on exit.
"""

from contextlib import contextmanager
from typing import Any, Iterator

import pytest

from uaa_client.client import Client
from uaa_client.testing.mocks import DEFAULT_BASE_URL, MockUAA


@pytest.fixture
def mock_uaa() -> MockUAA:
    """Create a fresh MockUAA for the test."""
    return MockUAA()


@pytest.fixture
def mock_uaa_client(mock_uaa: MockUAA) -> Client:
    """Create a Client that talks to the mock_uaa fixture."""
    return mock_uaa.client(DEFAULT_BASE_URL)


@contextmanager
def mock_uaa_context(**kwargs: Any) -> Iterator[MockUAA]:
    """Context manager that provides a MockUAA for the scope.

    Keyword arguments are passed to MockUAA. On exit, recorded requests
    and queued responses are discarded.

    Example:
        >>> with mock_uaa_context() as uaa:
        ...     uaa.client().get_auth_token("myusername", "mypassword")
        'bearer good-token'
    """
    uaa = MockUAA(**kwargs)
    try:
        yield uaa
    finally:
        uaa.clear()


__all__ = [
    "DEFAULT_BASE_URL",
    "mock_uaa",
    "mock_uaa_client",
    "mock_uaa_context",
]
