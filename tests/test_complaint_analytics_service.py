from campus_complaints.schemas.common.enums import ComplaintStatus, Priority
from campus_complaints.services.complaint.complaint_analytics_service import summarize

from conftest import NOW, TODAY, days_from_today


def test_empty_set_has_zero_counts_and_rate():
    summary = summarize([], NOW)

    assert summary.total == 0
    assert summary.resolution_rate == 0.0
    assert summary.overdue_count == 0
    assert all(summary.count(status) == 0 for status in ComplaintStatus)
    assert summary.priority_counts == {priority: 0 for priority in Priority}


def test_counts_by_status_and_priority(make_complaint):
    complaints = [
        make_complaint(priority=Priority.HIGH),
        make_complaint(priority=Priority.HIGH, status=ComplaintStatus.ASSIGNED),
        make_complaint(priority=Priority.LOW, status=ComplaintStatus.RESOLVED),
        make_complaint(priority=Priority.MEDIUM, status=ComplaintStatus.RESOLVED),
    ]

    summary = summarize(complaints, NOW)

    assert summary.total == 4
    assert summary.count(ComplaintStatus.PENDING) == 1
    assert summary.count(ComplaintStatus.ASSIGNED) == 1
    assert summary.count(ComplaintStatus.IN_PROGRESS) == 0
    assert summary.count(ComplaintStatus.RESOLVED) == 2
    assert summary.high_priority_count == 2
    assert summary.resolution_rate == 0.5


def test_overdue_excludes_resolved_and_undated(make_complaint):
    complaints = [
        make_complaint(deadline=days_from_today(-2), status=ComplaintStatus.IN_PROGRESS),
        make_complaint(deadline=days_from_today(-2), status=ComplaintStatus.RESOLVED),
        make_complaint(deadline=TODAY),
        make_complaint(deadline=None),
    ]

    assert summarize(complaints, NOW).overdue_count == 1


def test_resolving_an_overdue_complaint_drops_it_from_overdue(make_complaint):
    overdue = make_complaint(deadline=days_from_today(-3), status=ComplaintStatus.IN_PROGRESS)
    before = summarize([overdue], NOW)

    resolved = overdue.model_copy(update={"status": ComplaintStatus.RESOLVED})
    after = summarize([resolved], NOW)

    assert before.overdue_count == 1
    assert before.resolution_rate == 0.0
    assert after.overdue_count == 0
    assert after.resolution_rate == 1.0


def test_summary_accepts_a_generator(make_complaint):
    complaints = [make_complaint(), make_complaint()]

    assert summarize((c for c in complaints), NOW).total == 2
