"""
REST-backed complaint repository.

Maps the repository boundary onto the collaborator's endpoints:

* ``GET /complaints?role=admin`` or ``?userId=<id>&role=student``
* ``POST /complaints``
* ``PUT /complaints/:id``
"""

from typing import Any, Dict, List
import logging

import httpx
from pydantic import ValidationError as PydanticValidationError

from campus_complaints.core.exceptions import (
    ComplaintNotFoundError,
    ErrorCode,
    RepositoryError,
)
from campus_complaints.repositories.base.base_repository import BaseHttpRepository
from campus_complaints.repositories.complaint.complaint_repository import ComplaintRepository
from campus_complaints.schemas.auth.account import Account
from campus_complaints.schemas.common.enums import ComplaintStatus
from campus_complaints.schemas.complaint.complaint_base import (
    Complaint,
    ComplaintCreate,
    ComplaintStatusUpdate,
)

logger = logging.getLogger(__name__)

COMPLAINTS_PATH = "/complaints"


def scope_params(identity: Account) -> Dict[str, str]:
    """Query parameters selecting the role-scoped complaint set."""
    if identity.is_admin:
        return {"role": identity.role.value}
    return {"userId": identity.id, "role": identity.role.value}


class HttpComplaintRepository(BaseHttpRepository, ComplaintRepository):
    """Complaint repository talking to the REST collaborator."""

    def __init__(self, client: httpx.Client):
        super().__init__(client)

    def _parse(self, payload: Any) -> Complaint:
        try:
            return Complaint.model_validate(payload)
        except PydanticValidationError as e:
            logger.error(f"Unparseable complaint record: {e}")
            raise RepositoryError(
                "Complaint service returned an invalid complaint record",
                error_code=ErrorCode.INVALID_RESPONSE,
                details={"errors": e.errors(include_url=False)},
            ) from e

    def create(self, draft: ComplaintCreate, author: Account) -> Complaint:
        response = self._send("POST", COMPLAINTS_PATH, json=draft.to_payload(author.id))
        self._raise_for_status(response)
        body = self._json(response)
        # Some deployments wrap the record as {"complaint": {...}}
        if isinstance(body, dict) and isinstance(body.get("complaint"), dict):
            body = body["complaint"]
        return self._parse(body)

    def list_for(self, identity: Account) -> List[Complaint]:
        response = self._send("GET", COMPLAINTS_PATH, params=scope_params(identity))
        self._raise_for_status(response)
        body = self._json(response)
        if not isinstance(body, list):
            raise RepositoryError(
                "Complaint service returned a non-list complaint set",
                error_code=ErrorCode.INVALID_RESPONSE,
            )
        complaints = [self._parse(row) for row in body]
        if identity.is_student:
            # Students only ever see their own complaints.
            complaints = [c for c in complaints if c.author_id == identity.id]
        return complaints

    def update_status(self, complaint_id: str, status: ComplaintStatus) -> Complaint:
        path = f"{COMPLAINTS_PATH}/{complaint_id}"
        response = self._send(
            "PUT", path, json=ComplaintStatusUpdate(status=status).to_payload()
        )
        if response.status_code == 404:
            raise ComplaintNotFoundError(complaint_id)
        self._raise_for_status(response)
        return self._parse(self._json(response))
