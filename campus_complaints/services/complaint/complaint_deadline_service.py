"""
Deadline urgency classification.

Turns a complaint's optional deadline into an urgency bucket relative to
an explicitly supplied ``now``. Nothing here reads the wall clock.
"""

from datetime import date, datetime, time, timedelta
from typing import Optional, Union
import math

from campus_complaints.schemas.common.enums import UrgencyLevel
from campus_complaints.schemas.complaint.complaint_analytics import DeadlineUrgency

URGENT_MAX_DAYS = 3
SOON_MAX_DAYS = 7

_ONE_DAY = timedelta(days=1)

NO_DEADLINE = DeadlineUrgency(level=UrgencyLevel.NONE)


def days_until(deadline: date, now: Union[date, datetime]) -> int:
    """
    ``ceil((deadline - now) / 1 day)``.

    The deadline counts from the start of its calendar day, in ``now``'s
    timezone when ``now`` is aware. Any partial day rounds up toward the
    deadline.
    """
    if isinstance(now, datetime):
        start_of_deadline = datetime.combine(deadline, time.min, tzinfo=now.tzinfo)
        return math.ceil((start_of_deadline - now) / _ONE_DAY)
    return (deadline - now).days


def classify(deadline: Optional[date], now: Union[date, datetime]) -> DeadlineUrgency:
    """Bucket a deadline: overdue, due today, urgent, soon or normal."""
    if deadline is None:
        return NO_DEADLINE

    days_diff = days_until(deadline, now)
    if days_diff < 0:
        return DeadlineUrgency(level=UrgencyLevel.OVERDUE, days=-days_diff)
    if days_diff == 0:
        return DeadlineUrgency(level=UrgencyLevel.DUE_TODAY, days=0)
    if days_diff <= URGENT_MAX_DAYS:
        return DeadlineUrgency(level=UrgencyLevel.URGENT, days=days_diff)
    if days_diff <= SOON_MAX_DAYS:
        return DeadlineUrgency(level=UrgencyLevel.SOON, days=days_diff)
    return DeadlineUrgency(level=UrgencyLevel.NORMAL, days=days_diff)


def is_overdue(deadline: Optional[date], now: Union[date, datetime]) -> bool:
    return classify(deadline, now).is_overdue
