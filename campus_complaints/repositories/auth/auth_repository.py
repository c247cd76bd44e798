"""
Auth collaborator client: ``POST /login`` and ``POST /register``.

Both endpoints answer ``{token, user}``. Credential storage and token
issuance stay on the server side.
"""

import logging

import httpx
from pydantic import ValidationError as PydanticValidationError

from campus_complaints.core.exceptions import (
    AuthenticationError,
    ErrorCode,
    RepositoryError,
)
from campus_complaints.repositories.base.base_repository import BaseHttpRepository
from campus_complaints.schemas.auth.account import (
    AuthResponse,
    LoginRequest,
    RegisterRequest,
)

logger = logging.getLogger(__name__)


class HttpAuthRepository(BaseHttpRepository):
    """Token provider reached over HTTP."""

    # Statuses the auth collaborator uses for rejected credentials or forms
    REJECTED_STATUSES = frozenset({400, 401, 403, 409})

    def login(self, request: LoginRequest) -> AuthResponse:
        return self._authenticate("/login", request.to_payload(), "Invalid email or password")

    def register(self, request: RegisterRequest) -> AuthResponse:
        return self._authenticate("/register", request.to_payload(), "Registration failed")

    def _authenticate(self, path: str, payload: dict, default_message: str) -> AuthResponse:
        response = self._send("POST", path, json=payload)
        if response.status_code in self.REJECTED_STATUSES:
            message = self._error_message(response, default_message)
            logger.info(f"Auth request to {path} rejected: {message}")
            raise AuthenticationError(
                message,
                details={"status_code": response.status_code},
            )
        self._raise_for_status(response)
        try:
            return AuthResponse.model_validate(self._json(response))
        except PydanticValidationError as e:
            raise RepositoryError(
                "Auth service returned an invalid session payload",
                error_code=ErrorCode.INVALID_RESPONSE,
                details={"errors": e.errors(include_url=False)},
            ) from e
