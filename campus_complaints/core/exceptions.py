"""
Custom Exceptions for the Campus Complaints core

This module defines the exceptions raised at the repository and auth
boundaries. Services catch them and convert them into ServiceResult
failures; they never escape to the caller of a service.
"""

from typing import Any, Dict, Optional
from enum import Enum


class ErrorCode(str, Enum):
    """Standard error codes for boundary exceptions"""
    INTERNAL_ERROR = "INTERNAL_ERROR"
    RESOURCE_NOT_FOUND = "RESOURCE_NOT_FOUND"
    COMPLAINT_NOT_FOUND = "COMPLAINT_NOT_FOUND"

    # Authentication & Authorization
    AUTHENTICATION_FAILED = "AUTHENTICATION_FAILED"

    # Boundary errors
    CONNECTION_ERROR = "CONNECTION_ERROR"
    EXTERNAL_SERVICE_ERROR = "EXTERNAL_SERVICE_ERROR"
    INVALID_RESPONSE = "INVALID_RESPONSE"


class BaseAppException(Exception):
    """
    Base exception class for all application exceptions.

    Provides consistent error handling across the application with
    structured error information.
    """

    def __init__(
        self,
        message: str,
        error_code: ErrorCode = ErrorCode.INTERNAL_ERROR,
        details: Optional[Dict[str, Any]] = None
    ):
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        super().__init__(self.message)

    def __str__(self) -> str:
        return f"{self.error_code.value}: {self.message}"

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(message='{self.message}', error_code='{self.error_code.value}')"


# ========================================
# Repository Exceptions
# ========================================

class RepositoryError(BaseAppException):
    """Raised when the persistence boundary is unreachable or fails"""

    def __init__(
        self,
        message: str = "Complaint store is unavailable",
        error_code: ErrorCode = ErrorCode.EXTERNAL_SERVICE_ERROR,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message, error_code, details)


class ResourceNotFoundError(BaseAppException):
    """Exception raised when a requested resource is not found"""

    def __init__(
        self,
        resource_type: str = "Resource",
        resource_id: Optional[str] = None,
        message: Optional[str] = None
    ):
        if not message:
            message = f"{resource_type} not found"
            if resource_id:
                message += f" (ID: {resource_id})"

        details = {
            "resource_type": resource_type,
            "resource_id": resource_id
        }
        super().__init__(message, ErrorCode.RESOURCE_NOT_FOUND, details)


class ComplaintNotFoundError(ResourceNotFoundError):
    """Exception raised when a complaint id does not resolve"""

    def __init__(
        self,
        complaint_id: Optional[str] = None,
        message: Optional[str] = None
    ):
        super().__init__("Complaint", complaint_id, message)
        self.error_code = ErrorCode.COMPLAINT_NOT_FOUND


# ========================================
# Authentication Exceptions
# ========================================

class AuthenticationError(BaseAppException):
    """Raised when credentials are rejected or no identity is established"""

    def __init__(
        self,
        message: str = "Authentication failed",
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message, ErrorCode.AUTHENTICATION_FAILED, details)
