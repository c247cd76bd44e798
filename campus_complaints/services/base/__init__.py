"""
Base service layer: result envelope and shared error handling.
"""

from campus_complaints.services.base.base_service import BaseService
from campus_complaints.services.base.service_result import (
    ErrorCode,
    ErrorSeverity,
    ServiceError,
    ServiceResult,
    RETRY_MESSAGE,
)

__all__ = [
    "BaseService",
    "ErrorCode",
    "ErrorSeverity",
    "ServiceError",
    "ServiceResult",
    "RETRY_MESSAGE",
]
