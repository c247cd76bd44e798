from datetime import date, datetime, timedelta

import pytest

from campus_complaints.schemas.common.enums import UrgencyLevel
from campus_complaints.services.complaint.complaint_deadline_service import (
    classify,
    days_until,
    is_overdue,
)

from conftest import NOW, TODAY, days_from_today


def test_no_deadline_is_none_bucket():
    urgency = classify(None, NOW)
    assert urgency.level == UrgencyLevel.NONE
    assert urgency.days is None
    assert urgency.label == "No deadline"


def test_same_calendar_day_is_due_today():
    urgency = classify(TODAY, NOW)
    assert urgency.level == UrgencyLevel.DUE_TODAY
    assert urgency.days == 0
    assert urgency.label == "Due today"


def test_five_days_ago_is_overdue_by_five():
    urgency = classify(days_from_today(-5), NOW)
    assert urgency.level == UrgencyLevel.OVERDUE
    assert urgency.days == 5
    assert urgency.label == "Overdue by 5 days"


@pytest.mark.parametrize(
    "offset, level, days",
    [
        (-30, UrgencyLevel.OVERDUE, 30),
        (-1, UrgencyLevel.OVERDUE, 1),
        (0, UrgencyLevel.DUE_TODAY, 0),
        (1, UrgencyLevel.URGENT, 1),
        (3, UrgencyLevel.URGENT, 3),
        (4, UrgencyLevel.SOON, 4),
        (7, UrgencyLevel.SOON, 7),
        (8, UrgencyLevel.NORMAL, 8),
        (60, UrgencyLevel.NORMAL, 60),
    ],
)
def test_bucket_boundaries_are_inclusive(offset, level, days):
    urgency = classify(days_from_today(offset), NOW)
    assert urgency.level == level
    assert urgency.days == days


def test_classification_is_deterministic():
    deadline = days_from_today(2)
    assert classify(deadline, NOW) == classify(deadline, NOW)


def test_partial_day_rounds_toward_deadline():
    # 23:59 the evening before still leaves a (partial) day
    late_evening = datetime(2024, 5, 9, 23, 59)
    assert days_until(date(2024, 5, 10), late_evening) == 1
    assert classify(date(2024, 5, 10), late_evening).level == UrgencyLevel.URGENT


def test_midnight_now_is_due_today():
    midnight = datetime(2024, 5, 10, 0, 0)
    assert classify(date(2024, 5, 10), midnight).level == UrgencyLevel.DUE_TODAY
    assert classify(date(2024, 5, 11), midnight).days == 1


def test_plain_date_now_uses_calendar_days():
    today = date(2024, 5, 10)
    assert classify(today + timedelta(days=3), today).level == UrgencyLevel.URGENT
    assert classify(today - timedelta(days=2), today).days == 2


def test_labels_use_singular_day():
    assert classify(days_from_today(-1), NOW).label == "Overdue by 1 day"
    assert classify(days_from_today(1), NOW).label == "1 day left"
    assert classify(days_from_today(3), NOW).label == "3 days left"


def test_is_overdue():
    assert is_overdue(days_from_today(-1), NOW)
    assert not is_overdue(TODAY, NOW)
    assert not is_overdue(None, NOW)
