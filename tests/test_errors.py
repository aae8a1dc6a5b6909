"""Tests for the UAA client error taxonomy."""

from uaa_client.errors import (
    InvalidURLError,
    MalformedResponseError,
    RequestFailedError,
    UAAError,
    UnauthorizedError,
)


class TestUAAError:
    """Test UAAError base class."""

    def test_basic_error_creation(self) -> None:
        """Test creating a basic UAAError."""
        error = UAAError(code="uaa:test/error", message="Test error message")

        assert error.code == "uaa:test/error"
        assert error.message == "Test error message"
        assert error.details == {}
        assert str(error) == "Test error message"

    def test_to_dict(self) -> None:
        """to_dict() returns code, message and details."""
        error = UAAError("uaa:test/error", "msg", {"key": "value"})

        assert error.to_dict() == {
            "code": "uaa:test/error",
            "message": "msg",
            "details": {"key": "value"},
        }

    def test_error_details_not_shared(self) -> None:
        """Test that details dict is not shared between instances."""
        error1 = UAAError("code", "msg")
        error2 = UAAError("code", "msg")
        error1.details["key"] = "value"

        assert error2.details == {}


class TestInvalidURLError:
    """Test InvalidURLError class."""

    def test_fields(self) -> None:
        error = InvalidURLError("ftp://uaa.test", "unsupported scheme")

        assert error.code == "uaa:client/invalid_url"
        assert error.url == "ftp://uaa.test"
        assert error.reason == "unsupported scheme"
        assert error.details == {"url": "ftp://uaa.test", "reason": "unsupported scheme"}
        assert "ftp://uaa.test" in str(error)

    def test_inheritance(self) -> None:
        """InvalidURLError is both a UAAError and a ValueError."""
        error = InvalidURLError("x", "y")

        assert isinstance(error, UAAError)
        assert isinstance(error, ValueError)


class TestRequestFailedError:
    """Test RequestFailedError and UnauthorizedError."""

    def test_message_without_oauth_error(self) -> None:
        error = RequestFailedError(502, "http://uaa.test/oauth/token")

        assert error.code == "uaa:request/failed"
        assert error.status_code == 502
        assert error.message == "UAA request to http://uaa.test/oauth/token failed with status 502"
        assert error.details == {"status_code": 502, "url": "http://uaa.test/oauth/token"}

    def test_message_with_oauth_error(self) -> None:
        error = RequestFailedError(
            400,
            "http://uaa.test/oauth/token",
            error="invalid_grant",
            error_description="Invalid refresh token",
        )

        assert "invalid_grant (Invalid refresh token)" in error.message
        assert error.details["error"] == "invalid_grant"
        assert error.details["error_description"] == "Invalid refresh token"

    def test_unauthorized_code_and_inheritance(self) -> None:
        error = UnauthorizedError(401, "http://uaa.test/oauth/token", error="unauthorized")

        assert error.code == "uaa:request/unauthorized"
        assert isinstance(error, RequestFailedError)
        assert error.to_dict()["details"]["status_code"] == 401


class TestMalformedResponseError:
    """Test MalformedResponseError class."""

    def test_fields_and_sentinels(self) -> None:
        error = MalformedResponseError("invalid field(s): expires_in", fields=["expires_in"])

        assert error.code == "uaa:response/malformed"
        assert error.fields == ["expires_in"]
        assert error.details["fields"] == ["expires_in"]
        assert error.token == ""
        assert error.expires_in == -1

    def test_defaults(self) -> None:
        error = MalformedResponseError("Invalid JSON")

        assert error.fields == []
        assert str(error) == "Malformed UAA token response: Invalid JSON"
