"""Synchronous client for a UAA OAuth2 server.

Provides token acquisition and token checks against UAA:
- get_auth_token: client_credentials grant, returns "<token_type> <access_token>"
- get_auth_token_with_expires_in: same, also returns the token lifetime
- get_refresh_token: refresh_token grant
- token_is_authorized: POST /check_token and compare the body with a client id

Each call performs one blocking HTTP request through a short-lived
httpx.Client. The Client itself holds no mutable state, so one instance
can be shared between threads.

Example:
    >>> client = Client("https://uaa.example.com")
    >>> client.get_auth_token("doppler", "secret")
    'bearer eyJhbGciOiJSUzI1NiJ9...'
"""

from typing import Any, Optional
from urllib.parse import urlparse

import httpx
from pydantic import ValidationError

from uaa_client.errors import (
    InvalidURLError,
    MalformedResponseError,
    RequestFailedError,
    UnauthorizedError,
)
from uaa_client.models.constants import (
    CHECK_TOKEN_PATH,
    DEFAULT_TIMEOUT,
    EXPIRES_IN_ABSENT,
    FORM_CONTENT_TYPE,
    GRANT_TYPE_CLIENT_CREDENTIALS,
    GRANT_TYPE_REFRESH_TOKEN,
    JSON_CONTENT_TYPE,
    TOKEN_PATH,
)
from uaa_client.models.token import TokenResponse
from uaa_client.observability import get_logger, sanitize_for_logging
from uaa_client.utils.sanitization import sanitize_token, sanitize_url

logger = get_logger(__name__)

_UNAUTHORIZED_STATUSES = frozenset({401, 403})


def _parse_base_url(base_url: str) -> str:
    """Validate the UAA base URL and return it without a trailing slash.

    Raises:
        InvalidURLError: If the URL is not an absolute http(s) URL with a host,
            or carries a query string or fragment.
    """
    if not isinstance(base_url, str) or not base_url.strip():
        raise InvalidURLError(str(base_url), "URL is empty")

    try:
        parsed = urlparse(base_url)
        # Accessing port validates it (raises ValueError when out of range)
        _ = parsed.port
    except ValueError as exc:
        raise InvalidURLError(base_url, str(exc)) from exc

    if not parsed.scheme or not parsed.netloc:
        raise InvalidURLError(
            base_url, "must be an absolute URL (e.g. https://uaa.example.com)"
        )
    if parsed.scheme.lower() not in ("http", "https"):
        raise InvalidURLError(
            base_url, f"unsupported scheme {parsed.scheme!r}; only http and https are allowed"
        )
    if not parsed.hostname:
        raise InvalidURLError(base_url, "URL has no host")
    if parsed.query or parsed.fragment:
        raise InvalidURLError(base_url, "URL must not contain a query string or fragment")

    return base_url.rstrip("/")


def _parse_token_response(response: httpx.Response) -> TokenResponse:
    """Parse a 2xx token endpoint response.

    Raises:
        MalformedResponseError: If the body is not a JSON object or any field
            has the wrong type. The whole response is rejected, even when
            access_token itself parsed.
    """
    try:
        return TokenResponse.model_validate_json(response.content)
    except ValidationError as exc:
        errors = exc.errors()
        fields = sorted({str(err["loc"][0]) for err in errors if err.get("loc")})
        if fields:
            reason = f"invalid field(s): {', '.join(fields)}"
        else:
            reason = errors[0]["msg"] if errors else "body is not a JSON object"
        raise MalformedResponseError(
            reason,
            fields=fields,
            details={"status_code": response.status_code},
        ) from exc


def _request_failed(response: httpx.Response, url: str) -> RequestFailedError:
    """Build the error for a non-2xx token endpoint response.

    UAA reports OAuth2 errors as ``{"error": ..., "error_description": ...}``;
    both are carried on the error when the body has them.
    """
    error: Optional[str] = None
    error_description: Optional[str] = None
    try:
        body = response.json()
    except ValueError:
        body = None
    if isinstance(body, dict):
        if isinstance(body.get("error"), str):
            error = body["error"]
        if isinstance(body.get("error_description"), str):
            error_description = body["error_description"]

    error_cls = (
        UnauthorizedError if response.status_code in _UNAUTHORIZED_STATUSES else RequestFailedError
    )
    return error_cls(
        status_code=response.status_code,
        url=sanitize_url(url),
        error=error,
        error_description=error_description,
    )


class Client:
    """Client for a single UAA server.

    Attributes:
        base_url: UAA base URL, without trailing slash. Endpoint paths
            (/oauth/token, /check_token) are appended to it.
        skip_verify_ssl: Default for calls that do not say otherwise; when
            True, the server's TLS certificate chain is not validated.
        timeout: Per-request timeout in seconds.
    """

    def __init__(
        self,
        base_url: str,
        *,
        skip_verify_ssl: bool = False,
        timeout: float = DEFAULT_TIMEOUT,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        """Initialize the client.

        Args:
            base_url: UAA base URL, e.g. "https://uaa.sys.example.com".
            skip_verify_ssl: Disable TLS certificate validation by default.
            timeout: Per-request timeout in seconds (default: 10).
            transport: Optional httpx transport (e.g. httpx.MockTransport for
                tests). When given, TLS settings are the transport's own.

        Raises:
            InvalidURLError: If base_url is not a usable http(s) URL.
        """
        self._base_url = _parse_base_url(base_url)
        self._skip_verify_ssl = skip_verify_ssl
        self._timeout = timeout
        self._transport = transport

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def skip_verify_ssl(self) -> bool:
        return self._skip_verify_ssl

    @property
    def timeout(self) -> float:
        return self._timeout

    def __repr__(self) -> str:
        return f"Client(base_url={sanitize_url(self._base_url)!r})"

    def get_auth_token(
        self, username: str, password: str, skip_verify_ssl: Optional[bool] = None
    ) -> str:
        """Obtain a token and return it as ``"<token_type> <access_token>"``.

        Args:
            username: OAuth client id; sent as Basic auth user and as client_id.
            password: OAuth client secret; sent as Basic auth password.
            skip_verify_ssl: Override the client's TLS verification default.

        Returns:
            Token string such as "bearer good-token".

        Raises:
            UnauthorizedError: UAA answered 401 or 403.
            RequestFailedError: UAA answered any other non-2xx status.
            MalformedResponseError: The response body could not be parsed.
            httpx.HTTPError: Network or transport error.
        """
        return self.fetch_token(username, password, skip_verify_ssl).authorization_value

    def get_auth_token_with_expires_in(
        self, username: str, password: str, skip_verify_ssl: Optional[bool] = None
    ) -> tuple[str, int]:
        """Obtain a token together with its lifetime.

        Returns:
            Tuple of (token string, expires_in seconds). expires_in is 0 when
            UAA omits the field.

        Raises:
            MalformedResponseError: expires_in is present but not a
                non-negative integer (error carries token="" and
                expires_in=-1), or the body is otherwise unparseable.
            UnauthorizedError, RequestFailedError, httpx.HTTPError: As for
                get_auth_token.
        """
        token = self.fetch_token(username, password, skip_verify_ssl)
        expires_in = token.expires_in if token.expires_in is not None else EXPIRES_IN_ABSENT
        return token.authorization_value, expires_in

    def fetch_token(
        self, username: str, password: str, skip_verify_ssl: Optional[bool] = None
    ) -> TokenResponse:
        """Obtain a token and return the parsed token response.

        Sends the client_credentials grant to /oauth/token with
        username:password as Basic credentials.
        """
        form = {
            "client_id": username,
            "grant_type": GRANT_TYPE_CLIENT_CREDENTIALS,
        }
        return self._request_token(form, (username, password), skip_verify_ssl)

    def get_refresh_token(
        self, client_id: str, refresh_token: str, skip_verify_ssl: Optional[bool] = None
    ) -> tuple[str, str]:
        """Exchange a refresh token for a new access token.

        The client authenticates as ``client_id`` with an empty secret, as
        UAA allows for public clients.

        Returns:
            Tuple of (refresh token, "<token_type> <access_token>"). The refresh
            token is the one UAA returned, or the supplied one when UAA did
            not issue a new one.

        Raises:
            UnauthorizedError, RequestFailedError, MalformedResponseError,
            httpx.HTTPError: As for get_auth_token.
        """
        form = {
            "client_id": client_id,
            "grant_type": GRANT_TYPE_REFRESH_TOKEN,
            "refresh_token": refresh_token,
        }
        token = self._request_token(form, (client_id, ""), skip_verify_ssl)
        return token.refresh_token or refresh_token, token.authorization_value

    def token_is_authorized(self, token: str, client_id: str) -> bool:
        """Check a token against UAA's /check_token endpoint.

        Returns True only if UAA answers 2xx with a body that is exactly
        ``client_id``. Transport errors, error statuses and any other body
        all yield False; this method never raises.
        """
        url = self._endpoint(CHECK_TOKEN_PATH)
        try:
            with self._http_client(None) as http:
                # Sent unencoded; UAA tokens are base64url and dots only
                response = http.post(
                    url,
                    content=f"token={token}".encode("utf-8"),
                    headers={"Content-Type": FORM_CONTENT_TYPE},
                )
        except httpx.HTTPError as exc:
            logger.debug(
                "uaa.check_token.transport_error",
                check_token_endpoint=sanitize_url(url),
                error=type(exc).__name__,
            )
            return False

        if not response.is_success:
            logger.debug(
                "uaa.check_token.rejected",
                check_token_endpoint=sanitize_url(url),
                status_code=response.status_code,
            )
            return False

        authorized = response.content == client_id.encode("utf-8")
        logger.debug(
            "uaa.check_token.completed",
            client_id=client_id,
            token_prefix=sanitize_token(token),
            authorized=authorized,
        )
        return authorized

    def _endpoint(self, path: str) -> str:
        return f"{self._base_url}{path}"

    def _http_client(self, skip_verify_ssl: Optional[bool]) -> httpx.Client:
        """Create the httpx client for a single call."""
        skip = self._skip_verify_ssl if skip_verify_ssl is None else skip_verify_ssl
        kwargs: dict[str, Any] = {
            "timeout": httpx.Timeout(self._timeout),
            "verify": not skip,
        }
        if self._transport is not None:
            kwargs["transport"] = self._transport
        return httpx.Client(**kwargs)

    def _request_token(
        self,
        form: dict[str, str],
        auth: tuple[str, str],
        skip_verify_ssl: Optional[bool],
    ) -> TokenResponse:
        """POST a grant to /oauth/token and parse the response."""
        url = self._endpoint(TOKEN_PATH)
        logger.debug(
            "uaa.token.requested",
            token_endpoint=sanitize_url(url),
            form=sanitize_for_logging(form),
        )

        with self._http_client(skip_verify_ssl) as http:
            response = http.post(
                url,
                data=form,
                auth=auth,
                headers={
                    "Content-Type": FORM_CONTENT_TYPE,
                    "Accept": JSON_CONTENT_TYPE,
                },
            )

        if not response.is_success:
            raise _request_failed(response, url)

        token = _parse_token_response(response)
        logger.info(
            "uaa.token.acquired",
            token_endpoint=sanitize_url(url),
            grant_type=form["grant_type"],
            token_type=token.token_type,
            expires_in=token.expires_in,
        )
        return token
