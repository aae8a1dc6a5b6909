"""Wire models and constants for the UAA client.

Public exports:
    UAABaseModel: Frozen, strict base for UAA payload models
    TokenResponse: Parsed token endpoint response
"""

from uaa_client.models.base import UAABaseModel
from uaa_client.models.token import TokenResponse

__all__ = [
    "TokenResponse",
    "UAABaseModel",
]
