"""Observability module for the UAA client.

Structured logging via structlog, delivered through standard library
logging so the host application decides where records go.

Example:
    >>> from uaa_client.observability import get_logger
    >>>
    >>> logger = get_logger(__name__)
    >>> logger.info("uaa.token.requested", token_endpoint="https://uaa.example.com/oauth/token")
"""

from uaa_client.observability.logging import (
    bind_context,
    clear_context,
    configure_logging,
    get_logger,
    reset_logging,
    sanitize_for_logging,
)

__all__ = [
    "bind_context",
    "clear_context",
    "configure_logging",
    "get_logger",
    "reset_logging",
    "sanitize_for_logging",
]
