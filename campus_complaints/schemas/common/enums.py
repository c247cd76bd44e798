"""
All enumeration types used across the application.

These enums represent the core domain concepts of the campus complaints
portal (accounts, complaints, urgency). Values match the wire format of
the REST collaborator.
"""

from enum import Enum

__all__ = [
    "UserRole",
    "ComplaintCategory",
    "ComplaintStatus",
    "Priority",
    "UrgencyLevel",
]


class UserRole(str, Enum):
    """Account role enumeration."""

    STUDENT = "student"
    ADMIN = "admin"


class ComplaintCategory(str, Enum):
    """Complaint category enumeration."""

    INFRASTRUCTURE = "infrastructure"
    ACADEMICS = "academics"
    FACILITIES = "facilities"
    HOSTEL = "hostel"
    OTHERS = "others"


class ComplaintStatus(str, Enum):
    """Complaint status enumeration."""

    PENDING = "pending"
    ASSIGNED = "assigned"
    IN_PROGRESS = "in-progress"
    RESOLVED = "resolved"


class Priority(str, Enum):
    """Priority level enumeration."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class UrgencyLevel(str, Enum):
    """Deadline urgency bucket."""

    NONE = "none"
    OVERDUE = "overdue"
    DUE_TODAY = "due_today"
    URGENT = "urgent"
    SOON = "soon"
    NORMAL = "normal"
