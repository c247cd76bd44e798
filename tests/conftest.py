from __future__ import annotations

import json
from datetime import date, datetime, timedelta, timezone
from typing import Callable, List

import httpx
import pytest

from campus_complaints.config.settings import Settings
from campus_complaints.repositories.complaint import InMemoryComplaintRepository
from campus_complaints.schemas.auth.account import Account
from campus_complaints.schemas.common.enums import (
    ComplaintCategory,
    ComplaintStatus,
    Priority,
    UserRole,
)
from campus_complaints.schemas.complaint.complaint_base import Complaint
from campus_complaints.services.auth.session_service import UserSession

NOW = datetime(2024, 5, 10, 14, 30, tzinfo=timezone.utc)
TODAY = NOW.date()


def days_from_today(n: int) -> date:
    return TODAY + timedelta(days=n)


@pytest.fixture()
def now() -> datetime:
    return NOW


@pytest.fixture()
def student() -> Account:
    return Account(id="s-1", name="Asha Rao", email="asha@campus.edu", student_id="CS2021", role=UserRole.STUDENT)


@pytest.fixture()
def other_student() -> Account:
    return Account(id="s-2", name="Ben Ola", email="ben@campus.edu", student_id="ME2022", role=UserRole.STUDENT)


@pytest.fixture()
def admin() -> Account:
    return Account(id="a-1", name="Registrar", email="admin@campus.edu", role=UserRole.ADMIN)


@pytest.fixture()
def make_complaint() -> Callable[..., Complaint]:
    counter = {"n": 0}

    def _make(**overrides) -> Complaint:
        counter["n"] += 1
        fields = {
            "id": f"c-{counter['n']}",
            "author_id": "s-1",
            "title": "Broken fan",
            "description": "The ceiling fan in room 12 stopped working.",
            "category": ComplaintCategory.HOSTEL,
            "priority": Priority.MEDIUM,
            "status": ComplaintStatus.PENDING,
            "created_at": NOW,
        }
        fields.update(overrides)
        return Complaint(**fields)

    return _make


@pytest.fixture()
def repo() -> InMemoryComplaintRepository:
    return InMemoryComplaintRepository(clock=lambda: NOW)


def session_for(account: Account) -> UserSession:
    session = UserSession()
    session.establish(f"token-{account.id}", account)
    return session


@pytest.fixture()
def api_settings() -> Settings:
    return Settings(API_BASE_URL="http://testserver/api/", API_TIMEOUT_SECONDS=2.0)


class RecordingHandler:
    """httpx.MockTransport handler that records requests and replays canned responses."""

    def __init__(self, responder: Callable[[httpx.Request], httpx.Response]):
        self.responder = responder
        self.requests: List[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.responder(request)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self) -> dict:
        return json.loads(self.last.content)
