"""Token endpoint response model.

UAA answers ``POST /oauth/token`` with a JSON object such as::

    {
        "access_token": "good-token",
        "token_type": "bearer",
        "expires_in": 599,
        "scope": "cloud_controller.write doppler.firehose",
        "jti": "28edda5c-4e37-4a63-9ba3-b32f48530a51"
    }
"""

from typing import Optional

from pydantic import Field, NonNegativeInt

from uaa_client.models.base import UAABaseModel


class TokenResponse(UAABaseModel):
    """Parsed body of a successful token endpoint response.

    Attributes:
        access_token: The opaque access token string.
        token_type: Token type as reported by UAA, typically "bearer".
        expires_in: Lifetime in seconds; None when UAA omits the field.
        scope: Space-separated scopes granted to the token.
        jti: Unique identifier of the token.
        refresh_token: Refresh token, only present for grants that issue one.
    """

    access_token: str = Field(..., min_length=1, description="The opaque access token string")
    token_type: str = Field(..., min_length=1, description="Token type for Authorization header")
    expires_in: Optional[NonNegativeInt] = Field(
        default=None, description="Token lifetime in seconds"
    )
    scope: Optional[str] = Field(default=None, description="Space-separated granted scopes")
    jti: Optional[str] = Field(default=None, description="Unique token identifier")
    refresh_token: Optional[str] = Field(default=None, description="Refresh token, if issued")

    @property
    def authorization_value(self) -> str:
        """Return the token as an Authorization header value, e.g. ``bearer abc``."""
        return f"{self.token_type} {self.access_token}"

    @property
    def scopes(self) -> list[str]:
        """Return the granted scopes as a list (empty when none were reported)."""
        if not self.scope:
            return []
        return self.scope.split()
