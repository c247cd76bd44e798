"""
Complaint repository boundary.

``ComplaintRepository`` is the interface the core consumes from the
persistence collaborator. ``InMemoryComplaintRepository`` is a
process-local implementation used for tests and offline runs.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime, timezone
from threading import Lock
from typing import Callable, Dict, List, Optional
import logging

from campus_complaints.core.exceptions import ComplaintNotFoundError, RepositoryError
from campus_complaints.schemas.auth.account import Account
from campus_complaints.schemas.common.enums import ComplaintStatus
from campus_complaints.schemas.complaint.complaint_base import Complaint, ComplaintCreate

logger = logging.getLogger(__name__)


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class ComplaintRepository(ABC):
    """
    Boundary to persisted complaint records.

    Implementations raise ``RepositoryError`` when the store cannot be
    reached and ``ComplaintNotFoundError`` when an id does not resolve.
    """

    @abstractmethod
    def create(self, draft: ComplaintCreate, author: Account) -> Complaint:
        """Persist a new complaint in ``pending`` state."""

    @abstractmethod
    def list_for(self, identity: Account) -> List[Complaint]:
        """All complaints for admins, only their own for students."""

    @abstractmethod
    def update_status(self, complaint_id: str, status: ComplaintStatus) -> Complaint:
        """Write the new status and return the stored record."""


@dataclass
class _RepoState:
    complaint_seq: int = 0
    available: bool = True


class InMemoryComplaintRepository(ComplaintRepository):
    """
    Dictionary-backed store preserving insertion order.

    Writes are immediately visible to the next ``list_for`` call and the
    last writer wins on concurrent status updates.
    """

    def __init__(self, clock: Optional[Callable[[], datetime]] = None) -> None:
        self._lock = Lock()
        self._state = _RepoState()
        self._clock = clock or _utc_now
        self.complaints: Dict[str, Complaint] = {}

    def _next_complaint_id(self) -> str:
        self._state.complaint_seq += 1
        return f"c{self._state.complaint_seq:05d}"

    def set_available(self, available: bool) -> None:
        """Simulate an outage of the store."""
        self._state.available = available

    def _ensure_available(self) -> None:
        if not self._state.available:
            raise RepositoryError("Complaint store is unavailable")

    def add(self, complaint: Complaint) -> Complaint:
        """Seed an already-built record (keeps its id and timestamps)."""
        with self._lock:
            self.complaints[complaint.id] = complaint
        return complaint

    def create(self, draft: ComplaintCreate, author: Account) -> Complaint:
        with self._lock:
            self._ensure_available()
            complaint = Complaint(
                id=self._next_complaint_id(),
                author_id=author.id,
                author_name=author.name or None,
                title=draft.title,
                description=draft.description,
                category=draft.category,
                priority=draft.priority,
                status=ComplaintStatus.PENDING,
                location=draft.location,
                deadline=draft.deadline,
                created_at=self._clock(),
            )
            self.complaints[complaint.id] = complaint
        logger.debug(f"Stored complaint {complaint.id} for author {author.id}")
        return complaint

    def list_for(self, identity: Account) -> List[Complaint]:
        with self._lock:
            self._ensure_available()
            rows = list(self.complaints.values())
        if identity.is_admin:
            return rows
        return [row for row in rows if row.author_id == identity.id]

    def get(self, complaint_id: str) -> Complaint:
        with self._lock:
            self._ensure_available()
            complaint = self.complaints.get(complaint_id)
        if complaint is None:
            raise ComplaintNotFoundError(complaint_id)
        return complaint

    def update_status(self, complaint_id: str, status: ComplaintStatus) -> Complaint:
        with self._lock:
            self._ensure_available()
            existing = self.complaints.get(complaint_id)
            if existing is None:
                raise ComplaintNotFoundError(complaint_id)
            updated = existing.model_copy(update={"status": status})
            self.complaints[complaint_id] = updated
        return updated
