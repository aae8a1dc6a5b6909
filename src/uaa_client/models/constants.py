"""Constants for the UAA client.

This module defines the endpoint paths, grant types and default values
used across the codebase.
"""

# UAA endpoint paths (appended to the client's base URL)
TOKEN_PATH = "/oauth/token"
CHECK_TOKEN_PATH = "/check_token"

# Request encoding
FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"
JSON_CONTENT_TYPE = "application/json"

# OAuth2 grant types
GRANT_TYPE_CLIENT_CREDENTIALS = "client_credentials"
"""Grant used by get_auth_token.

The username/password pair is sent as the client's Basic credentials and
the username doubles as the ``client_id`` form field, as UAA expects for
client credentials.
"""

GRANT_TYPE_REFRESH_TOKEN = "refresh_token"

# Default configuration values
DEFAULT_TIMEOUT = 10.0
"""Default per-request timeout in seconds for calls to UAA."""

# Sentinel values
EXPIRES_IN_ABSENT = 0
"""expires_in reported when the token response does not carry the field."""

EXPIRES_IN_PARSE_FAILURE = -1
"""expires_in reported alongside an error when the field cannot be parsed."""
