"""
Base service class providing common functionality for all services.
"""

from typing import TypeVar, Generic, Optional, Dict, Any
from abc import ABC
import logging

from pydantic import ValidationError as PydanticValidationError

from campus_complaints.core.exceptions import (
    AuthenticationError,
    RepositoryError,
    ResourceNotFoundError,
)
from campus_complaints.services.base.service_result import (
    ServiceResult,
    ServiceError,
    ErrorCode,
    ErrorSeverity,
)


TRepo = TypeVar("TRepo")


class BaseService(ABC, Generic[TRepo]):
    """
    Base service with common behaviors:
    - Shared logger and repository
    - Consistent error handling via ServiceResult
    """

    def __init__(self, repository: TRepo):
        """
        Initialize base service.

        Args:
            repository: Repository instance for data access
        """
        self.repository: TRepo = repository
        self._logger = logging.getLogger(f"{self.__class__.__module__}.{self.__class__.__name__}")

    # -------------------------------------------------------------------------
    # Exception & Error Handling
    # -------------------------------------------------------------------------

    def _handle_exception(
        self,
        exception: Exception,
        operation: str,
        entity_ref: Optional[Any] = None,
        additional_context: Optional[Dict[str, Any]] = None,
    ) -> ServiceResult:
        """
        Convert exception to a ServiceResult failure with logging.

        Args:
            exception: The caught exception
            operation: Description of the operation that failed
            entity_ref: Reference to the entity involved (ID, name, etc.)
            additional_context: Extra context for logging/debugging

        Returns:
            ServiceResult with failure status and error details
        """
        context = {
            "operation": operation,
            "entity_ref": str(entity_ref) if entity_ref is not None else None,
            "exception_type": type(exception).__name__,
        }
        if additional_context:
            context.update(additional_context)

        if isinstance(exception, ResourceNotFoundError):
            self._logger.info(f"{operation}: {exception.message}", extra=context)
            return ServiceResult.failure(
                ServiceError(
                    code=ErrorCode.NOT_FOUND,
                    message=exception.message,
                    details=exception.details,
                    severity=ErrorSeverity.WARNING,
                )
            )

        if isinstance(exception, RepositoryError):
            self._logger.warning(f"Repository failure during {operation}: {exception}", extra=context)
            return ServiceResult.repository_failure(
                details={
                    "error": exception.message,
                    "error_code": exception.error_code.value,
                    "entity_ref": context["entity_ref"],
                    **exception.details,
                }
            )

        if isinstance(exception, AuthenticationError):
            self._logger.info(f"{operation}: {exception.message}", extra=context)
            return ServiceResult.failure(
                ServiceError(
                    code=ErrorCode.AUTHENTICATION_FAILED,
                    message=exception.message,
                    details=exception.details,
                    severity=ErrorSeverity.WARNING,
                )
            )

        if isinstance(exception, PydanticValidationError):
            return ServiceResult.validation_failure(
                message=f"Invalid data for {operation}",
                details={"errors": exception.errors(include_url=False)},
            )

        self._logger.error(
            f"Error during {operation}: {exception}",
            exc_info=True,
            extra=context,
        )
        return ServiceResult.failure(
            ServiceError(
                code=ErrorCode.INTERNAL_ERROR,
                message=f"Failed to {operation}",
                details={
                    "error": str(exception),
                    "entity_ref": context["entity_ref"],
                },
                severity=ErrorSeverity.CRITICAL,
            )
        )
