"""Base Pydantic model configuration for UAA wire models.

All UAA models inherit from UAABaseModel to ensure consistent behavior:
- Immutability (frozen=True) for thread-safety and predictability
- Strict validation (strict=True) so a JSON string never passes as a number
- Unknown fields ignored (extra="ignore"), since UAA adds fields freely
"""

from pydantic import BaseModel, ConfigDict


class UAABaseModel(BaseModel):
    """Base model for all payloads exchanged with UAA.

    This base class provides:
    - **Immutability**: Models are frozen after creation (thread-safe)
    - **Strict types**: No coercion between JSON strings and numbers
    - **Lenient shape**: Fields this client does not use are dropped

    Example:
        >>> class MyModel(UAABaseModel):
        ...     name: str
        >>>
        >>> MyModel.model_validate_json('{"name": "uaa", "other": 1}').name
        'uaa'
        >>> MyModel.model_validate_json('{"name": 1}')
        Traceback (most recent call last):
        ...
        pydantic_core._pydantic_core.ValidationError: ...
    """

    model_config = ConfigDict(
        frozen=True,
        strict=True,
        extra="ignore",
        populate_by_name=True,
        validate_default=True,
    )
