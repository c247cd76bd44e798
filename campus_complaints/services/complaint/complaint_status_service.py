"""
Complaint status state machine.

The lifecycle graph is fixed::

    pending     -> assigned, in-progress
    assigned    -> in-progress
    in-progress -> resolved
    resolved    -> (terminal)

Only admins may move a complaint along it; students only create.
"""

from typing import Dict, FrozenSet, Set, Tuple
import logging

from campus_complaints.repositories.complaint.complaint_repository import ComplaintRepository
from campus_complaints.schemas.auth.account import Account
from campus_complaints.schemas.common.enums import ComplaintStatus
from campus_complaints.schemas.complaint.complaint_base import Complaint
from campus_complaints.services.base import BaseService, ServiceResult

logger = logging.getLogger(__name__)


STATUS_TRANSITIONS: Dict[ComplaintStatus, Tuple[ComplaintStatus, ...]] = {
    ComplaintStatus.PENDING: (ComplaintStatus.ASSIGNED, ComplaintStatus.IN_PROGRESS),
    ComplaintStatus.ASSIGNED: (ComplaintStatus.IN_PROGRESS,),
    ComplaintStatus.IN_PROGRESS: (ComplaintStatus.RESOLVED,),
    ComplaintStatus.RESOLVED: (),
}

INITIAL_STATUS = ComplaintStatus.PENDING


def allowed_transitions(status: ComplaintStatus) -> Tuple[ComplaintStatus, ...]:
    """Direct successors of ``status``, in display order."""
    return STATUS_TRANSITIONS.get(status, ())


def can_transition(current: ComplaintStatus, target: ComplaintStatus) -> bool:
    return target in allowed_transitions(current)


def is_terminal(status: ComplaintStatus) -> bool:
    return not allowed_transitions(status)


def reachable_statuses(start: ComplaintStatus = INITIAL_STATUS) -> FrozenSet[ComplaintStatus]:
    """Every status reachable from ``start`` (including itself)."""
    seen: Set[ComplaintStatus] = {start}
    frontier = [start]
    while frontier:
        for nxt in allowed_transitions(frontier.pop()):
            if nxt not in seen:
                seen.add(nxt)
                frontier.append(nxt)
    return frozenset(seen)


class ComplaintStatusService(BaseService[ComplaintRepository]):
    """
    Validates and applies complaint status transitions.

    Checks run in order: actor role, then the transition graph, then
    persistence through the repository. Repository failures are
    surfaced once and never retried here.
    """

    def __init__(self, repository: ComplaintRepository):
        super().__init__(repository)

    def validate(
        self,
        complaint: Complaint,
        target_status: ComplaintStatus,
        actor: Account,
    ) -> ServiceResult[Complaint]:
        """
        Check a transition without persisting it.

        Returns:
            Success carrying the complaint unchanged, or the domain failure
        """
        if not actor.is_admin:
            logger.info(
                f"Rejected status change on {complaint.id} by non-admin {actor.id}"
            )
            return ServiceResult.unauthorized(
                action="change complaint status", resource=f"complaint {complaint.id}"
            )

        if not can_transition(complaint.status, target_status):
            logger.info(
                f"Rejected transition {complaint.status.value} -> {target_status.value} "
                f"on complaint {complaint.id}"
            )
            return ServiceResult.invalid_transition(
                complaint.status,
                target_status,
                allowed=list(allowed_transitions(complaint.status)),
            )

        return ServiceResult.success(complaint)

    def transition(
        self,
        complaint: Complaint,
        target_status: ComplaintStatus,
        actor: Account,
    ) -> ServiceResult[Complaint]:
        """
        Move a complaint to ``target_status`` and persist it.

        Args:
            complaint: Current complaint value
            target_status: Requested status
            actor: Account requesting the change

        Returns:
            ServiceResult with the new complaint value (only ``status``
            differs) or an UNAUTHORIZED / INVALID_TRANSITION / NOT_FOUND /
            REPOSITORY_ERROR failure
        """
        check = self.validate(complaint, target_status, actor)
        if not check.is_success:
            return check

        try:
            self.repository.update_status(complaint.id, target_status)
        except Exception as e:
            return self._handle_exception(
                e,
                "change complaint status",
                complaint.id,
                {"target_status": target_status.value},
            )

        updated = complaint.model_copy(update={"status": target_status})
        logger.info(
            f"Complaint {complaint.id} moved {complaint.status.value} -> "
            f"{target_status.value} by {actor.id}"
        )
        return ServiceResult.success(
            updated,
            message=f"Status updated to {target_status.value}",
            metadata={
                "complaint_id": complaint.id,
                "previous_status": complaint.status.value,
                "new_status": target_status.value,
            },
        )
