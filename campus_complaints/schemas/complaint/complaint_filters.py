"""
Complaint filtering schemas.

The dashboard search box and status dropdown map onto
``ComplaintFilterParams``; both fields are optional and ANDed.
"""
from typing import Union

from pydantic import ConfigDict, Field

from campus_complaints.schemas.common.base import BaseFilterSchema
from campus_complaints.schemas.common.enums import ComplaintStatus

__all__ = [
    "ComplaintFilterParams",
]


class ComplaintFilterParams(BaseFilterSchema):
    """Free-text and status filter over an already-fetched complaint set."""

    # Search text is matched verbatim, surrounding spaces included
    model_config = ConfigDict(str_strip_whitespace=False)

    text: Union[str, None] = Field(
        default=None,
        description="Case-insensitive search in title and description",
    )
    status: Union[ComplaintStatus, None] = Field(
        default=None,
        description="Filter by single status",
    )

    @property
    def search_term(self) -> Union[str, None]:
        """Case-folded search text, or None when the box is empty or blank."""
        if not self.text or not self.text.strip():
            return None
        return self.text.casefold()

    @property
    def is_empty(self) -> bool:
        return self.search_term is None and self.status is None
