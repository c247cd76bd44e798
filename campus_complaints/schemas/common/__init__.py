from campus_complaints.schemas.common.base import (
    BaseSchema,
    BaseRecordSchema,
    BaseCreateSchema,
    BaseFilterSchema,
)
from campus_complaints.schemas.common.enums import (
    UserRole,
    ComplaintCategory,
    ComplaintStatus,
    Priority,
    UrgencyLevel,
)

__all__ = [
    "BaseSchema",
    "BaseRecordSchema",
    "BaseCreateSchema",
    "BaseFilterSchema",
    "UserRole",
    "ComplaintCategory",
    "ComplaintStatus",
    "Priority",
    "UrgencyLevel",
]
