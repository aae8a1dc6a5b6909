"""Structured logging for the UAA client.

Client modules log with structlog, but every event is handed to the standard
library as a LogRecord on a logger under the ``uaa_client`` namespace
(``msg`` is the event name, the key/value pairs become record attributes).
Importing the package configures nothing: records go to whatever handlers
the application installed, and are dropped like any other library's when
there are none.

Applications that want the client's own rendering opt in with
configure_logging(), which only touches the ``uaa_client`` logger.

Example:
    >>> from uaa_client.observability.logging import configure_logging, get_logger
    >>>
    >>> configure_logging(log_format="json", log_level="DEBUG")
    >>> logger = get_logger("uaa_client.client")
    >>> logger.info("uaa.token.acquired", token_type="bearer")
"""

import logging
import sys
from typing import Any, Optional, TextIO, Union

import structlog
from structlog.typing import Processor

LOGGER_NAMESPACE = "uaa_client"
DEFAULT_LOG_FORMAT = "console"
DEFAULT_LOG_LEVEL = "INFO"

# Placeholder for redacted sensitive values in logs
REDACTED_PLACEHOLDER = "***REDACTED***"

# Key substrings (case-insensitive) that indicate sensitive data to redact
_SENSITIVE_KEY_PATTERNS = frozenset({"password", "token", "secret", "authorization", "auth"})

# Run at emit time; the last one turns the event dict into msg/extra
_EMIT_PROCESSORS: list[Processor] = [
    structlog.contextvars.merge_contextvars,
    structlog.stdlib.render_to_log_kwargs,
]

# Handler installed by configure_logging, if any
_handler: Optional[logging.Handler] = None


def _is_sensitive_key(key: str) -> bool:
    lower = key.lower()
    return any(pattern in lower for pattern in _SENSITIVE_KEY_PATTERNS)


def sanitize_for_logging(data: dict[str, Any]) -> dict[str, Any]:
    """Return a copy of data with sensitive field values redacted.

    Keys containing (case-insensitive) password, token, secret,
    authorization or auth have their values replaced with
    REDACTED_PLACEHOLDER. Nested dicts and lists of dicts are handled
    recursively.

    Example:
        >>> sanitize_for_logging({"client_id": "cf", "refresh_token": "abc"})
        {'client_id': 'cf', 'refresh_token': '***REDACTED***'}
    """
    result: dict[str, Any] = {}
    for k, v in data.items():
        if _is_sensitive_key(k):
            result[k] = REDACTED_PLACEHOLDER
        elif isinstance(v, dict):
            result[k] = sanitize_for_logging(v)
        elif isinstance(v, list):
            result[k] = [
                sanitize_for_logging(item) if isinstance(item, dict) else item for item in v
            ]
        else:
            result[k] = v
    return result


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structured logger writing to the standard library logger ``name``.

    Does not configure logging. The wrapper carries its own processors, so
    structlog's global configuration (owned by the application) is not used.
    """
    return structlog.wrap_logger(
        logging.getLogger(name),
        processors=_EMIT_PROCESSORS,
        wrapper_class=structlog.stdlib.BoundLogger,
    )


def _get_renderer(log_format: str) -> Processor:
    if log_format == "json":
        return structlog.processors.JSONRenderer()
    if log_format == "console":
        return structlog.dev.ConsoleRenderer(
            colors=False,
            exception_formatter=structlog.dev.plain_traceback,
        )
    raise ValueError(f"Unknown log format {log_format!r}; expected 'json' or 'console'")


def configure_logging(
    log_format: str = DEFAULT_LOG_FORMAT,
    log_level: Union[int, str] = DEFAULT_LOG_LEVEL,
    stream: Optional[TextIO] = None,
) -> logging.Handler:
    """Render the client's log records to a stream.

    Attaches one handler to the ``uaa_client`` logger (replacing the one from
    an earlier call), sets that logger's level and stops propagation so
    records are not emitted twice. The root logger and structlog's global
    configuration are left alone.

    Args:
        log_format: "json" or "console".
        log_level: Minimum level, as a name ("DEBUG") or a logging constant.
        stream: Output stream. Defaults to stdout.

    Returns:
        The installed handler.

    Raises:
        ValueError: If log_format or log_level is unknown.
    """
    global _handler

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=[
            structlog.stdlib.ExtraAdder(),
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.TimeStamper(fmt="iso"),
        ],
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            _get_renderer(log_format),
        ],
    )
    handler = logging.StreamHandler(stream or sys.stdout)
    handler.setFormatter(formatter)

    namespace_logger = logging.getLogger(LOGGER_NAMESPACE)
    namespace_logger.setLevel(log_level.upper() if isinstance(log_level, str) else log_level)
    if _handler is not None:
        namespace_logger.removeHandler(_handler)
    namespace_logger.addHandler(handler)
    namespace_logger.propagate = False
    _handler = handler
    return handler


def reset_logging() -> None:
    """Undo configure_logging: records propagate to the application's handlers again."""
    global _handler

    namespace_logger = logging.getLogger(LOGGER_NAMESPACE)
    if _handler is not None:
        namespace_logger.removeHandler(_handler)
        _handler = None
    namespace_logger.setLevel(logging.NOTSET)
    namespace_logger.propagate = True


def bind_context(**kwargs: Any) -> None:
    """Bind context variables that will be included in all subsequent logs.

    Example:
        >>> bind_context(request_id="req_123")
        >>> logger.info("uaa.token.requested")  # includes request_id
    """
    structlog.contextvars.bind_contextvars(**kwargs)


def clear_context() -> None:
    """Clear all bound context variables."""
    structlog.contextvars.clear_contextvars()
