import itertools

import pytest

from campus_complaints.schemas.common.enums import ComplaintStatus
from campus_complaints.services.base import RETRY_MESSAGE, ErrorCode
from campus_complaints.services.complaint.complaint_status_service import (
    ComplaintStatusService,
    INITIAL_STATUS,
    allowed_transitions,
    can_transition,
    is_terminal,
    reachable_statuses,
)

PENDING = ComplaintStatus.PENDING
ASSIGNED = ComplaintStatus.ASSIGNED
IN_PROGRESS = ComplaintStatus.IN_PROGRESS
RESOLVED = ComplaintStatus.RESOLVED

VALID_EDGES = {
    (PENDING, ASSIGNED),
    (PENDING, IN_PROGRESS),
    (ASSIGNED, IN_PROGRESS),
    (IN_PROGRESS, RESOLVED),
}


@pytest.fixture()
def service(repo):
    return ComplaintStatusService(repo)


def test_every_status_reachable_from_pending():
    assert INITIAL_STATUS == PENDING
    assert reachable_statuses() == frozenset(ComplaintStatus)


def test_resolved_is_the_only_terminal_status():
    assert [s for s in ComplaintStatus if is_terminal(s)] == [RESOLVED]
    assert allowed_transitions(RESOLVED) == ()
    assert reachable_statuses(RESOLVED) == frozenset({RESOLVED})


def test_pending_cannot_jump_to_resolved():
    assert not can_transition(PENDING, RESOLVED)


@pytest.mark.parametrize("current, target", list(itertools.product(ComplaintStatus, repeat=2)))
def test_admin_transition_follows_graph(service, repo, make_complaint, admin, current, target):
    complaint = repo.add(make_complaint(status=current))

    result = service.transition(complaint, target, admin)

    if (current, target) in VALID_EDGES:
        assert result.is_success
        assert result.data.status == target
        assert repo.complaints[complaint.id].status == target
    else:
        assert result.error_code == ErrorCode.INVALID_TRANSITION
        assert result.error.details["current_status"] == current.value
        assert result.error.details["allowed"] == [s.value for s in allowed_transitions(current)]
        assert repo.complaints[complaint.id].status == current


def test_successful_transition_changes_only_status(service, repo, make_complaint, admin):
    complaint = repo.add(make_complaint(location="Block C, room 4"))

    result = service.transition(complaint, IN_PROGRESS, admin)

    assert result.is_success
    assert result.data == complaint.model_copy(update={"status": IN_PROGRESS})
    assert complaint.status == PENDING
    assert result.metadata["previous_status"] == "pending"
    assert result.metadata["new_status"] == "in-progress"


def test_student_cannot_change_status(service, repo, make_complaint, student):
    complaint = repo.add(make_complaint(author_id=student.id))

    result = service.transition(complaint, IN_PROGRESS, student)

    assert result.error_code == ErrorCode.UNAUTHORIZED
    assert result.error.is_domain_error
    assert repo.complaints[complaint.id].status == PENDING


def test_role_is_checked_before_graph(service, repo, make_complaint, student):
    complaint = repo.add(make_complaint())

    result = service.transition(complaint, RESOLVED, student)

    assert result.error_code == ErrorCode.UNAUTHORIZED


def test_unknown_complaint_is_not_found(service, make_complaint, admin):
    ghost = make_complaint(id="missing")

    result = service.transition(ghost, ASSIGNED, admin)

    assert result.error_code == ErrorCode.NOT_FOUND


def test_store_outage_is_retryable_failure(service, repo, make_complaint, admin):
    complaint = repo.add(make_complaint())
    repo.set_available(False)

    result = service.transition(complaint, ASSIGNED, admin)

    assert result.error_code == ErrorCode.REPOSITORY_ERROR
    assert result.error.retryable
    assert result.message == RETRY_MESSAGE
    assert repo.complaints[complaint.id].status == PENDING


def test_validate_does_not_persist(service, repo, make_complaint, admin):
    complaint = repo.add(make_complaint())

    assert service.validate(complaint, ASSIGNED, admin).is_success
    assert repo.complaints[complaint.id].status == PENDING
