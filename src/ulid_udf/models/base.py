"""Base Pydantic model configuration for ULID function models.

All models inherit from UdfBaseModel to ensure consistent behavior:
- Immutability (frozen=True) so values can be shared across rows safely
- Strict validation (extra="forbid") to catch typos and invalid fields
"""

from pydantic import BaseModel, ConfigDict


class UdfBaseModel(BaseModel):
    """Base model for argument and instant values.

    Example:
        >>> class Sample(UdfBaseModel):
        ...     name: str
        >>> Sample(name="x").name
        'x'
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        populate_by_name=True,
        validate_default=True,
    )
