"""Testing utilities for code that uses the UAA client.

Modules:
    mocks: MockUAA, a fake UAA served through httpx.MockTransport with
           request recording and pre-set responses.
    fixtures: Pytest fixtures (mock_uaa, mock_uaa_client) and the
              mock_uaa_context() context manager.

Example:
    >>> from uaa_client.testing import MockUAA
    >>> uaa = MockUAA()
    >>> uaa.client().get_auth_token("myusername", "mypassword")
    'bearer good-token'
"""

from uaa_client.testing.mocks import (
    DEFAULT_BASE_URL,
    GOOD_TOKEN_RESPONSE,
    MockUAA,
    RecordedRequest,
    basic_auth_header,
)

__all__ = [
    "DEFAULT_BASE_URL",
    "GOOD_TOKEN_RESPONSE",
    "MockUAA",
    "RecordedRequest",
    "basic_auth_header",
]
