"""
Complaint filtering over an already-fetched complaint set.

Pure functions: no I/O, no state, safe to call on every keystroke.
"""

from typing import Iterable, List, Optional

from campus_complaints.schemas.common.enums import ComplaintStatus
from campus_complaints.schemas.complaint.complaint_base import Complaint
from campus_complaints.schemas.complaint.complaint_filters import ComplaintFilterParams


def matches_text(complaint: Complaint, term: Optional[str]) -> bool:
    """Case-insensitive substring match on title or description."""
    if not term:
        return True
    term = term.casefold()
    return term in complaint.title.casefold() or term in complaint.description.casefold()


def matches_status(complaint: Complaint, status: Optional[ComplaintStatus]) -> bool:
    return status is None or complaint.status == status


def apply(
    complaints: Iterable[Complaint],
    query: Optional[ComplaintFilterParams] = None,
) -> List[Complaint]:
    """
    Filter complaints by free text and status.

    Args:
        complaints: Complaint set, in display order
        query: Filter parameters; ``None`` or empty matches everything

    Returns:
        Order-preserving subsequence of ``complaints``
    """
    if query is None or query.is_empty:
        return list(complaints)

    term = query.search_term
    return [
        c for c in complaints
        if matches_status(c, query.status) and matches_text(c, term)
    ]

