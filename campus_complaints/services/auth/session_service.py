"""
Session management: the authenticated identity and its lifecycle.

``UserSession`` is the explicit context object handed to every component
that needs identity. ``SessionService`` drives the login / register /
logout lifecycle against the auth collaborator and populates it.
"""

from typing import Dict, Optional
import logging

from campus_complaints.core.exceptions import AuthenticationError
from campus_complaints.repositories.auth.auth_repository import HttpAuthRepository
from campus_complaints.repositories.complaint.http_complaint_repository import scope_params
from campus_complaints.schemas.auth.account import (
    Account,
    AuthResponse,
    LoginRequest,
    RegisterRequest,
)
from campus_complaints.services.base import BaseService, ServiceResult

logger = logging.getLogger(__name__)


class UserSession:
    """
    Holds the authenticated identity (id, name, role) and its opaque token.

    No complaint data is cached here; the session only answers who the
    caller is and which role-scoped view applies.
    """

    def __init__(self) -> None:
        self._account: Optional[Account] = None
        self._token: Optional[str] = None

    def establish(self, token: str, account: Account) -> None:
        """Bind a token and identity (e.g. after login or when restoring)."""
        self._token = token
        self._account = account

    def clear(self) -> None:
        self._token = None
        self._account = None

    @property
    def token(self) -> Optional[str]:
        return self._token

    @property
    def is_authenticated(self) -> bool:
        return self._account is not None

    def current_identity(self) -> Optional[Account]:
        return self._account

    def require_identity(self) -> Account:
        """
        Return the current account.

        Raises:
            AuthenticationError: If nobody is logged in
        """
        if self._account is None:
            raise AuthenticationError("No authenticated session")
        return self._account

    def scope(self) -> Dict[str, str]:
        """Role-scoped query for the current identity."""
        return scope_params(self.require_identity())

    def __repr__(self) -> str:
        if self._account is None:
            return "UserSession(anonymous)"
        return f"UserSession({self._account.id}, role={self._account.role.value})"


class SessionService(BaseService[HttpAuthRepository]):
    """
    Login, registration and logout against the auth collaborator.
    """

    def __init__(self, repository: HttpAuthRepository, session: Optional[UserSession] = None):
        """
        Initialize session service.

        Args:
            repository: Auth collaborator client
            session: Session to populate (a fresh one is created if omitted)
        """
        super().__init__(repository)
        self.session = session or UserSession()

    def current_identity(self) -> Optional[Account]:
        return self.session.current_identity()

    def login(self, email: str, password: str) -> ServiceResult[Account]:
        """
        Authenticate and establish the session.

        Args:
            email: Account email
            password: Plain password, forwarded to the auth collaborator only

        Returns:
            ServiceResult containing the Account or error
        """
        try:
            request = LoginRequest(email=email, password=password)
            response = self.repository.login(request)
            return self._establish(response, "Logged in")
        except Exception as e:
            return self._handle_exception(e, "log in", email)

    def register(self, request: RegisterRequest) -> ServiceResult[Account]:
        """
        Create an account and establish the session.

        Args:
            request: Registration form

        Returns:
            ServiceResult containing the new Account or error
        """
        try:
            response = self.repository.register(request)
            return self._establish(response, "Account created")
        except Exception as e:
            return self._handle_exception(e, "register account", request.email)

    def logout(self) -> ServiceResult[bool]:
        account = self.session.current_identity()
        self.session.clear()
        if account is not None:
            logger.info(f"User {account.id} logged out")
        return ServiceResult.success(True, message="Logged out")

    def _establish(self, response: AuthResponse, message: str) -> ServiceResult[Account]:
        self.session.establish(response.token, response.user)
        logger.info(f"Session established for user {response.user.id} ({response.user.role.value})")
        return ServiceResult.success(
            response.user,
            message=message,
            metadata={"user_id": response.user.id, "role": response.user.role.value},
        )
