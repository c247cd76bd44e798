"""
Complaint repositories package.
"""

from campus_complaints.repositories.complaint.complaint_repository import (
    ComplaintRepository,
    InMemoryComplaintRepository,
)
from campus_complaints.repositories.complaint.http_complaint_repository import (
    HttpComplaintRepository,
    scope_params,
)

__all__ = [
    "ComplaintRepository",
    "InMemoryComplaintRepository",
    "HttpComplaintRepository",
    "scope_params",
]
