"""Client library for a UAA (User Account and Authentication) OAuth2 server.

Public exports:
    Client: Synchronous UAA client (token acquisition, token checks)
    TokenResponse: Parsed token endpoint response
    UAAError: Base class of all client errors
    InvalidURLError: Base URL rejected at construction
    RequestFailedError: Token endpoint answered a non-2xx status
    UnauthorizedError: Token endpoint answered 401/403
    MalformedResponseError: Token endpoint body could not be parsed
"""

from uaa_client.client import Client
from uaa_client.errors import (
    InvalidURLError,
    MalformedResponseError,
    RequestFailedError,
    UAAError,
    UnauthorizedError,
)
from uaa_client.models.token import TokenResponse

__version__ = "0.1.0"

__all__ = [
    "Client",
    "InvalidURLError",
    "MalformedResponseError",
    "RequestFailedError",
    "TokenResponse",
    "UAAError",
    "UnauthorizedError",
    "__version__",
]
