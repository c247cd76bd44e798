# campus_complaints/dependencies.py
"""
Wiring for the complaint core: one HTTP client, one session, and the
services bound to them.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import httpx

from campus_complaints.config.integrations import build_api_client
from campus_complaints.config.settings import Settings, get_settings
from campus_complaints.repositories.auth import HttpAuthRepository
from campus_complaints.repositories.complaint import HttpComplaintRepository
from campus_complaints.services.auth import SessionService, UserSession
from campus_complaints.services.complaint.complaint_service import ComplaintService


@dataclass
class ComplaintPortal:
    """Services sharing one session and one HTTP client."""

    client: httpx.Client
    session: UserSession
    auth: SessionService
    complaints: ComplaintService

    def close(self) -> None:
        self.client.close()

    def __enter__(self) -> "ComplaintPortal":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()


def build_portal(
    settings: Optional[Settings] = None,
    transport: Optional[httpx.BaseTransport] = None,
) -> ComplaintPortal:
    """
    Build the services for one user session against the REST collaborator.

    Args:
        settings: Settings override (defaults to environment settings)
        transport: Optional httpx transport (tests use ``httpx.MockTransport``)
    """
    settings = settings or get_settings()
    session = UserSession()
    client = build_api_client(settings, token_provider=lambda: session.token, transport=transport)
    return ComplaintPortal(
        client=client,
        session=session,
        auth=SessionService(HttpAuthRepository(client), session),
        complaints=ComplaintService(HttpComplaintRepository(client), session),
    )
