"""
Dashboard aggregation: counts by status and priority, overdue count and
resolution rate, derived from a complaint set and an explicit ``now``.
"""

from datetime import date, datetime
from typing import Iterable, Union

from campus_complaints.schemas.common.enums import ComplaintStatus, Priority
from campus_complaints.schemas.complaint.complaint_analytics import DashboardSummary
from campus_complaints.schemas.complaint.complaint_base import Complaint
from campus_complaints.services.complaint.complaint_deadline_service import is_overdue


def summarize(
    complaints: Iterable[Complaint],
    now: Union[date, datetime],
) -> DashboardSummary:
    """
    Build the dashboard summary for a complaint set.

    A complaint counts as overdue when its deadline classifies as
    overdue and it is not yet resolved. ``resolution_rate`` is 0.0 for an
    empty set.
    """
    status_counts = {status: 0 for status in ComplaintStatus}
    priority_counts = {priority: 0 for priority in Priority}
    overdue_count = 0
    total = 0

    for complaint in complaints:
        total += 1
        status_counts[complaint.status] += 1
        priority_counts[complaint.priority] += 1
        if not complaint.is_resolved and is_overdue(complaint.deadline, now):
            overdue_count += 1

    resolved = status_counts[ComplaintStatus.RESOLVED]
    return DashboardSummary(
        total=total,
        status_counts=status_counts,
        priority_counts=priority_counts,
        overdue_count=overdue_count,
        resolution_rate=resolved / total if total else 0.0,
    )

