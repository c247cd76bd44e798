import pytest

from campus_complaints.schemas.common.enums import ComplaintStatus
from campus_complaints.services.base import RETRY_MESSAGE, ErrorCode, ServiceResult


def test_success_unwraps_and_is_truthy():
    result = ServiceResult.success([1, 2], message="done")

    assert result.unwrap() == [1, 2]
    assert bool(result)
    assert result.error_code is None
    assert result.metadata == {}


def test_failure_refuses_to_unwrap():
    result = ServiceResult.not_found("Complaint", "c1")

    assert not bool(result)
    assert result.error_code == ErrorCode.NOT_FOUND
    assert result.message == "Complaint not found (ID: c1)"
    with pytest.raises(ValueError):
        result.unwrap()


def test_invalid_transition_carries_wire_values():
    result = ServiceResult.invalid_transition(
        ComplaintStatus.ASSIGNED,
        ComplaintStatus.RESOLVED,
        allowed=[ComplaintStatus.IN_PROGRESS],
    )

    assert result.error.details == {
        "current_status": "assigned",
        "target_status": "resolved",
        "allowed": ["in-progress"],
    }
    assert result.error.is_domain_error
    assert not result.error.retryable


def test_only_repository_failures_are_retryable():
    result = ServiceResult.repository_failure({"error": "down"})

    assert result.error.retryable
    assert not result.error.is_domain_error
    assert result.message == RETRY_MESSAGE
    assert not ServiceResult.validation_failure("bad").error.retryable
