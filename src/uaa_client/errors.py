"""UAA client error taxonomy.

This module defines the error hierarchy raised by the UAA client,
providing structured error handling with specific error codes
and context information.

Transport failures (connection refused, TLS failure, timeout) are not
wrapped: they surface as the ``httpx.HTTPError`` raised by the transport.
"""

from typing import Any, Optional

from uaa_client.models.constants import EXPIRES_IN_PARSE_FAILURE


class UAAError(Exception):
    """Base exception for all UAA client errors.

    Attributes:
        code: Error code following the uaa:<area>/<kind> pattern
        message: Human-readable error message
        details: Optional additional error context
    """

    def __init__(self, code: str, message: str, details: Optional[dict[str, Any]] = None) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Serialize to ``{code, message, details}`` dict."""
        return {
            "code": self.code,
            "message": self.message,
            "details": self.details,
        }


class InvalidURLError(UAAError, ValueError):
    """Raised when the UAA base URL cannot be used.

    Only raised at construction time. The URL must be absolute, use the
    http or https scheme, name a host and carry no query or fragment.

    Attributes:
        url: The rejected URL.
        reason: Why the URL was rejected.
    """

    def __init__(self, url: str, reason: str, details: Optional[dict[str, Any]] = None) -> None:
        message = f"Invalid UAA URL {url!r}: {reason}"
        super().__init__(
            code="uaa:client/invalid_url",
            message=message,
            details={"url": url, "reason": reason, **(details or {})},
        )
        self.url = url
        self.reason = reason


class RequestFailedError(UAAError):
    """Raised when the token endpoint answers with a non-2xx status.

    Attributes:
        status_code: HTTP status returned by UAA
        url: Endpoint that was called
        error: OAuth2 ``error`` field from the response body, if any
    """

    error_code = "uaa:request/failed"

    def __init__(
        self,
        status_code: int,
        url: str,
        error: Optional[str] = None,
        error_description: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        message = f"UAA request to {url} failed with status {status_code}"
        if error:
            message = f"{message}: {error}"
            if error_description:
                message = f"{message} ({error_description})"

        details_dict: dict[str, Any] = {"status_code": status_code, "url": url}
        if error is not None:
            details_dict["error"] = error
        if error_description is not None:
            details_dict["error_description"] = error_description
        if details:
            details_dict.update(details)

        super().__init__(code=self.error_code, message=message, details=details_dict)
        self.status_code = status_code
        self.url = url
        self.error = error
        self.error_description = error_description


class UnauthorizedError(RequestFailedError):
    """Raised when UAA rejects the credentials (401 or 403).

    UAA also answers 401 when ``client_id`` or ``grant_type`` is missing
    from the token request.
    """

    error_code = "uaa:request/unauthorized"


class MalformedResponseError(UAAError):
    """Raised when a successful token response cannot be parsed.

    Covers bodies that are not a JSON object, missing or mistyped
    ``access_token``/``token_type`` fields, and an ``expires_in`` that is
    present but not a non-negative integer. A failure on any single field
    invalidates the whole response: ``token`` is always ``""`` and
    ``expires_in`` is always ``EXPIRES_IN_PARSE_FAILURE``.

    Attributes:
        reason: Short description of what was wrong
        fields: Names of the offending fields (empty when the body itself is bad)
    """

    token = ""
    expires_in = EXPIRES_IN_PARSE_FAILURE

    def __init__(
        self,
        reason: str,
        fields: Optional[list[str]] = None,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        message = f"Malformed UAA token response: {reason}"
        super().__init__(
            code="uaa:response/malformed",
            message=message,
            details={"reason": reason, "fields": list(fields or []), **(details or {})},
        )
        self.reason = reason
        self.fields = list(fields or [])


__all__ = [
    "InvalidURLError",
    "MalformedResponseError",
    "RequestFailedError",
    "UAAError",
    "UnauthorizedError",
]
