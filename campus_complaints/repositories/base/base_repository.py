"""
Base HTTP repository with standardized request handling and error mapping.

Provides the foundation for repositories backed by the REST
collaborator: one request per call, no retries, transport failures
surfaced as ``RepositoryError``.
"""

from typing import Any, Dict, Optional
import logging

import httpx

from campus_complaints.core.exceptions import (
    ErrorCode,
    RepositoryError,
)

logger = logging.getLogger(__name__)


class BaseHttpRepository:
    """
    Base repository issuing JSON requests through a shared ``httpx.Client``.

    Subclasses translate domain-specific status codes (404, 401, ...)
    before falling back to ``_raise_for_status``.
    """

    def __init__(self, client: httpx.Client):
        """
        Initialize repository.

        Args:
            client: HTTP client bound to the API base URL
        """
        self.client = client

    # ==================== Request Handling ====================

    def _send(
        self,
        method: str,
        path: str,
        *,
        params: Optional[Dict[str, Any]] = None,
        json: Optional[Dict[str, Any]] = None,
    ) -> httpx.Response:
        """Issue a single request; transport failures become RepositoryError."""
        try:
            response = self.client.request(method, path, params=params, json=json)
        except httpx.TimeoutException as e:
            logger.warning(f"{method} {path} timed out: {e}")
            raise RepositoryError(
                f"Request to {path} timed out",
                error_code=ErrorCode.CONNECTION_ERROR,
                details={"method": method, "path": path},
            ) from e
        except httpx.TransportError as e:
            logger.warning(f"{method} {path} failed: {e}")
            raise RepositoryError(
                f"Could not reach complaint service: {e}",
                error_code=ErrorCode.CONNECTION_ERROR,
                details={"method": method, "path": path},
            ) from e

        logger.debug(f"{method} {path} -> {response.status_code}")
        return response

    @staticmethod
    def _error_message(response: httpx.Response, default: str) -> str:
        """Prefer the server's ``message`` field when the body carries one."""
        try:
            body = response.json()
        except ValueError:
            return default
        if isinstance(body, dict) and body.get("message"):
            return str(body["message"])
        return default

    def _raise_for_status(self, response: httpx.Response) -> None:
        """Map any non-2xx response to RepositoryError."""
        if response.is_success:
            return
        message = self._error_message(
            response, f"Complaint service returned HTTP {response.status_code}"
        )
        raise RepositoryError(
            message,
            details={
                "status_code": response.status_code,
                "url": str(response.request.url),
            },
        )

    @staticmethod
    def _json(response: httpx.Response) -> Any:
        """Decode the response body; malformed JSON is a boundary failure."""
        try:
            return response.json()
        except ValueError as e:
            raise RepositoryError(
                "Complaint service returned a malformed response",
                error_code=ErrorCode.INVALID_RESPONSE,
                details={"status_code": response.status_code},
            ) from e
