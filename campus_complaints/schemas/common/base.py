"""
Base schema classes with common configuration.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

__all__ = [
    "BaseSchema",
    "BaseRecordSchema",
    "BaseCreateSchema",
    "BaseFilterSchema",
]


class BaseSchema(BaseModel):
    """
    Base schema with common Pydantic configuration.

    All application-facing schemas should inherit from this to ensure
    consistent behaviour (alias handling, whitespace stripping, etc.).
    """

    model_config = ConfigDict(
        from_attributes=True,
        populate_by_name=True,
        # Keep enums as Enum instances to retain full type information;
        # callers can still access `.value` if needed.
        use_enum_values=False,
        str_strip_whitespace=True,
        validate_assignment=True,
    )


class BaseRecordSchema(BaseSchema):
    """
    Base schema for records read back from the REST collaborator.

    Records are immutable values; changes produce a copy via
    ``model_copy(update=...)``. Unknown wire fields are ignored and
    stored text is kept exactly as the server returns it.
    """

    model_config = ConfigDict(frozen=True, extra="ignore", str_strip_whitespace=False)


class BaseCreateSchema(BaseSchema):
    """Base schema for create operations."""
    pass


class BaseFilterSchema(BaseSchema):
    """Base schema for filter parameters."""
    pass
