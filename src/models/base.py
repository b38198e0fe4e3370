"""Base model for all data models in the project catalog.

This module provides a base Pydantic model with the configuration shared by
projects, drafts and filter criteria.
"""

from pydantic import BaseModel, ConfigDict


class BaseDataModel(BaseModel):
    """Base class for all data models.

    Provides common configuration for:
    - Validation with type checking and coercion of raw values
    - Serialization to/from dictionaries
    - Rejection of unknown fields

    Example:
        >>> class Member(BaseDataModel):
        ...     name: str
        >>> Member(name="Neha Patel").model_dump()
        {'name': 'Neha Patel'}
    """

    model_config = ConfigDict(
        # Allow arbitrary types like Decimal and date
        arbitrary_types_allowed=True,
        # Validate on assignment to catch errors early
        validate_assignment=True,
        strict=False,
        # Unknown fields are a programming error, not user input
        extra="forbid",
        frozen=False,
    )
