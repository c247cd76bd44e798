"""
Complaint schemas package.
"""

from campus_complaints.schemas.complaint.complaint_base import (
    ComplaintCreate,
    Complaint,
    ComplaintStatusUpdate,
)
from campus_complaints.schemas.complaint.complaint_filters import ComplaintFilterParams
from campus_complaints.schemas.complaint.complaint_analytics import (
    DeadlineUrgency,
    DashboardSummary,
)

__all__ = [
    "ComplaintCreate",
    "Complaint",
    "ComplaintStatusUpdate",
    "ComplaintFilterParams",
    "DeadlineUrgency",
    "DashboardSummary",
]
