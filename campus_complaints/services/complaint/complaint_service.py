"""
Core complaint service: submission, role-scoped listing, status changes
and dashboard views for the current session.

This service is the entry point used by the presentation layer. It never
caches complaints: every view is derived from a fresh ``list_for`` call,
so a successful status change is visible in the next listing.
"""

from datetime import date, datetime
from typing import Any, Dict, List, Optional, Union
import logging

from campus_complaints.core.exceptions import AuthenticationError
from campus_complaints.repositories.complaint.complaint_repository import ComplaintRepository
from campus_complaints.schemas.auth.account import Account
from campus_complaints.schemas.common.enums import ComplaintStatus
from campus_complaints.schemas.complaint.complaint_analytics import (
    DashboardSummary,
    DeadlineUrgency,
)
from campus_complaints.schemas.complaint.complaint_base import Complaint, ComplaintCreate
from campus_complaints.schemas.complaint.complaint_filters import ComplaintFilterParams
from campus_complaints.services.auth.session_service import UserSession
from campus_complaints.services.base import BaseService, ServiceResult
from campus_complaints.services.complaint import (
    complaint_analytics_service,
    complaint_deadline_service,
    complaint_search_service,
)
from campus_complaints.services.complaint.complaint_status_service import (
    ComplaintStatusService,
    allowed_transitions,
)

logger = logging.getLogger(__name__)


class ComplaintService(BaseService[ComplaintRepository]):
    """
    High-level complaint operations for one session.

    Provides complaint submission, role-scoped listing and filtering,
    status transitions and dashboard summaries.
    """

    def __init__(
        self,
        repository: ComplaintRepository,
        session: UserSession,
        status_service: Optional[ComplaintStatusService] = None,
    ):
        """
        Initialize complaint service.

        Args:
            repository: Complaint repository instance
            session: Session holding the caller's identity
            status_service: State machine (built on the same repository if omitted)
        """
        super().__init__(repository)
        self.session = session
        self.status_service = status_service or ComplaintStatusService(repository)

    def _identity(self, action: str) -> Union[Account, ServiceResult]:
        try:
            return self.session.require_identity()
        except AuthenticationError:
            return ServiceResult.unauthorized(action=action)

    # -------------------------------------------------------------------------
    # Create
    # -------------------------------------------------------------------------

    def submit(
        self,
        draft: Union[ComplaintCreate, Dict[str, Any]],
    ) -> ServiceResult[Complaint]:
        """
        File a new complaint on behalf of the logged-in student.

        Args:
            draft: Complaint draft (schema or raw form data)

        Returns:
            ServiceResult containing the stored complaint (status pending)
        """
        author = self._identity("submit complaint")
        if isinstance(author, ServiceResult):
            return author
        if not author.is_student:
            return ServiceResult.unauthorized(action="submit complaint")

        try:
            if not isinstance(draft, ComplaintCreate):
                draft = ComplaintCreate.model_validate(draft)
            complaint = self.repository.create(draft, author)
        except Exception as e:
            return self._handle_exception(e, "submit complaint", author.id)

        logger.info(f"Complaint {complaint.id} submitted by {author.id}")
        return ServiceResult.success(
            complaint,
            message="Complaint submitted successfully",
            metadata={"complaint_id": complaint.id},
        )

    # -------------------------------------------------------------------------
    # Query Operations
    # -------------------------------------------------------------------------

    def list_complaints(
        self,
        query: Optional[ComplaintFilterParams] = None,
    ) -> ServiceResult[List[Complaint]]:
        """
        Fetch the role-scoped complaint set, optionally filtered.

        Args:
            query: Optional text/status filter

        Returns:
            ServiceResult containing the complaints visible to the caller
        """
        identity = self._identity("list complaints")
        if isinstance(identity, ServiceResult):
            return identity

        try:
            complaints = self.repository.list_for(identity)
        except Exception as e:
            return self._handle_exception(e, "list complaints", identity.id)

        visible = complaint_search_service.apply(complaints, query)
        return ServiceResult.success(
            visible,
            metadata={"total": len(complaints), "matched": len(visible)},
        )

    def dashboard(self, now: Union[date, datetime]) -> ServiceResult[DashboardSummary]:
        """
        Summary counts over the caller's complaint set.

        Args:
            now: Reference time for overdue classification
        """
        listing = self.list_complaints()
        if not listing.is_success:
            return listing
        return ServiceResult.success(
            complaint_analytics_service.summarize(listing.data, now),
            metadata={"generated_at": now.isoformat()},
        )

    @staticmethod
    def urgency(complaint: Complaint, now: Union[date, datetime]) -> DeadlineUrgency:
        return complaint_deadline_service.classify(complaint.deadline, now)

    @staticmethod
    def available_actions(complaint: Complaint) -> List[ComplaintStatus]:
        """Statuses an admin may move this complaint to next."""
        return list(allowed_transitions(complaint.status))

    # -------------------------------------------------------------------------
    # Status Management
    # -------------------------------------------------------------------------

    def change_status(
        self,
        complaint_id: str,
        target_status: Union[ComplaintStatus, str],
    ) -> ServiceResult[Complaint]:
        """
        Apply a status transition requested by the logged-in admin.

        The complaint is resolved through the repository first; an id that
        does not resolve fails with NOT_FOUND.

        Args:
            complaint_id: Complaint identifier
            target_status: Requested status (enum or wire value)

        Returns:
            ServiceResult with the updated complaint or a typed failure
        """
        actor = self._identity("change complaint status")
        if isinstance(actor, ServiceResult):
            return actor

        if not actor.is_admin:
            return ServiceResult.unauthorized(
                action="change complaint status", resource=f"complaint {complaint_id}"
            )

        try:
            target = ComplaintStatus(target_status)
        except ValueError:
            return ServiceResult.validation_failure(
                f"Unknown complaint status '{target_status}'",
                field="status",
            )

        try:
            complaints = self.repository.list_for(actor)
        except Exception as e:
            return self._handle_exception(e, "change complaint status", complaint_id)

        complaint = next((c for c in complaints if c.id == complaint_id), None)
        if complaint is None:
            return ServiceResult.not_found("Complaint", complaint_id)

        return self.status_service.transition(complaint, target, actor)
