"""
Complaint analytics schemas: deadline urgency and dashboard summary.
"""

from typing import Dict, Union

from pydantic import Field, computed_field

from campus_complaints.schemas.common.base import BaseRecordSchema
from campus_complaints.schemas.common.enums import (
    ComplaintStatus,
    Priority,
    UrgencyLevel,
)

__all__ = [
    "DeadlineUrgency",
    "DashboardSummary",
]


class DeadlineUrgency(BaseRecordSchema):
    """
    Urgency bucket derived from a complaint's deadline.

    ``days`` is the number of days past the deadline for ``OVERDUE``,
    the number of days left for the other dated levels, ``0`` for
    ``DUE_TODAY`` and ``None`` when no deadline is set.
    """

    level: UrgencyLevel
    days: Union[int, None] = Field(default=None, ge=0)

    @property
    def is_overdue(self) -> bool:
        return self.level == UrgencyLevel.OVERDUE

    @property
    def label(self) -> str:
        if self.level == UrgencyLevel.NONE:
            return "No deadline"
        if self.level == UrgencyLevel.DUE_TODAY:
            return "Due today"
        unit = "day" if self.days == 1 else "days"
        if self.level == UrgencyLevel.OVERDUE:
            return f"Overdue by {self.days} {unit}"
        return f"{self.days} {unit} left"


class DashboardSummary(BaseRecordSchema):
    """Counts shown on the student and admin dashboards."""

    total: int = Field(..., ge=0)
    status_counts: Dict[ComplaintStatus, int]
    priority_counts: Dict[Priority, int]
    overdue_count: int = Field(..., ge=0)
    resolution_rate: float = Field(..., ge=0.0, le=1.0)

    @computed_field
    @property
    def high_priority_count(self) -> int:
        return self.priority_counts.get(Priority.HIGH, 0)

    def count(self, status: ComplaintStatus) -> int:
        return self.status_counts.get(status, 0)
