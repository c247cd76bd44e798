"""
Core complaint schemas.

This module provides the complaint record as read back from the REST
collaborator, the draft posted when a student files a complaint, and the
status update body sent when an admin moves a complaint along its
lifecycle.
"""

from datetime import date as Date, datetime
from typing import Any, Dict, Union

from pydantic import AliasChoices, Field, field_validator, model_validator

from campus_complaints.schemas.common.base import (
    BaseCreateSchema,
    BaseRecordSchema,
    BaseSchema,
)
from campus_complaints.schemas.common.enums import (
    ComplaintCategory,
    ComplaintStatus,
    Priority,
)

__all__ = [
    "ComplaintCreate",
    "Complaint",
    "ComplaintStatusUpdate",
]


def _coerce_date(v: Any) -> Any:
    """Accept ``YYYY-MM-DD`` as well as full ISO timestamps for dates."""
    if isinstance(v, datetime):
        return v.date()
    if isinstance(v, str):
        v = v.strip()
        if not v:
            return None
        if "T" in v:
            return v.split("T", 1)[0]
    return v


class ComplaintCreate(BaseCreateSchema):
    """
    Draft of a new complaint as submitted by a student.

    Only the structural rules live here; friendlier form validation is
    the presentation layer's concern.
    """

    title: str = Field(
        ...,
        min_length=1,
        max_length=255,
        description="Brief complaint title/summary",
    )
    description: str = Field(
        ...,
        min_length=1,
        max_length=5000,
        description="Detailed complaint description",
    )
    category: ComplaintCategory = Field(
        ...,
        description="Primary complaint category",
    )
    priority: Priority = Field(
        ...,
        description="Complaint priority level",
    )
    location: Union[str, None] = Field(
        default=None,
        max_length=255,
        description="Building, room, etc.",
    )
    deadline: Union[Date, None] = Field(
        default=None,
        description="Optional resolution deadline (display only)",
    )

    @field_validator("location")
    @classmethod
    def validate_location(cls, v: Union[str, None]) -> Union[str, None]:
        """Normalize location if provided."""
        if v is not None and not v.strip():
            return None
        return v

    @field_validator("deadline", mode="before")
    @classmethod
    def parse_deadline(cls, v: Any) -> Any:
        return _coerce_date(v)

    def to_payload(self, author_id: str) -> Dict[str, Any]:
        """Body for ``POST /complaints``."""
        payload = self.model_dump(mode="json", exclude_none=True)
        payload["userId"] = author_id
        return payload


class Complaint(BaseRecordSchema):
    """
    A tracked complaint.

    ``created_at`` is set once by the store. ``status`` only changes
    through the status state machine, which returns a new value.
    """

    id: str = Field(
        ...,
        validation_alias=AliasChoices("id", "_id"),
        description="Unique complaint identifier",
    )
    author_id: str = Field(
        ...,
        validation_alias=AliasChoices("author_id", "studentId", "userId"),
        description="Account id of the student who filed the complaint",
    )
    author_name: Union[str, None] = Field(
        default=None,
        description="Display name of the author when the store populates it",
    )
    title: str
    description: str
    category: ComplaintCategory
    priority: Priority
    status: ComplaintStatus = ComplaintStatus.PENDING
    location: Union[str, None] = None
    deadline: Union[Date, None] = None
    created_at: datetime = Field(
        ...,
        validation_alias=AliasChoices("created_at", "createdAt"),
    )

    @model_validator(mode="before")
    @classmethod
    def unpack_author(cls, data: Any) -> Any:
        """
        The store may populate the author reference with the account
        document (``studentId: {_id, name}``); flatten it.
        """
        if not isinstance(data, dict):
            return data
        for key in ("studentId", "userId"):
            author = data.get(key)
            if isinstance(author, dict):
                data = dict(data)
                data[key] = author.get("_id") or author.get("id")
                data.setdefault("author_name", author.get("name"))
                break
        return data

    @field_validator("id", "author_id", mode="before")
    @classmethod
    def coerce_identifier(cls, v: Any) -> Any:
        if v is None or isinstance(v, str):
            return v
        return str(v)

    @field_validator("deadline", mode="before")
    @classmethod
    def parse_deadline(cls, v: Any) -> Any:
        return _coerce_date(v)

    @field_validator("location")
    @classmethod
    def validate_location(cls, v: Union[str, None]) -> Union[str, None]:
        if v is not None and not v.strip():
            return None
        return v

    @property
    def is_resolved(self) -> bool:
        return self.status == ComplaintStatus.RESOLVED


class ComplaintStatusUpdate(BaseSchema):
    """Body for ``PUT /complaints/:id``."""

    status: ComplaintStatus = Field(
        ...,
        description="New complaint status",
    )

    def to_payload(self) -> Dict[str, Any]:
        return self.model_dump(mode="json")
