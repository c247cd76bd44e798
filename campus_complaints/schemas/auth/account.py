"""
Account and authentication schemas.

Accounts are owned by the auth collaborator; the core only reads the
identity fields it needs for role scoping. Credential hashes never
cross this boundary.
"""

from typing import Any, Dict, Union

from pydantic import AliasChoices, EmailStr, Field, field_validator

from campus_complaints.schemas.common.base import BaseCreateSchema, BaseRecordSchema
from campus_complaints.schemas.common.enums import UserRole

__all__ = [
    "Account",
    "LoginRequest",
    "RegisterRequest",
    "AuthResponse",
]


class Account(BaseRecordSchema):
    """Authenticated identity: id, display name and role."""

    id: str = Field(
        ...,
        validation_alias=AliasChoices("id", "_id"),
        description="Stable account identifier",
    )
    name: str = Field(default="", description="Display name")
    email: Union[str, None] = Field(default=None, description="Contact email")
    student_id: Union[str, None] = Field(
        default=None,
        validation_alias=AliasChoices("studentId", "student_id"),
        description="Institutional (student/employee) id",
    )
    role: UserRole = Field(..., description="Account role")

    @field_validator("id", "student_id", mode="before")
    @classmethod
    def coerce_identifier(cls, v: Any) -> Any:
        """Identifiers may arrive as numbers; keep them as strings."""
        if v is None or isinstance(v, str):
            return v
        return str(v)

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN

    @property
    def is_student(self) -> bool:
        return self.role == UserRole.STUDENT


class LoginRequest(BaseCreateSchema):
    """Credentials posted to ``/login``."""

    email: EmailStr
    password: str = Field(..., min_length=1)

    def to_payload(self) -> Dict[str, Any]:
        return self.model_dump(mode="json")


class RegisterRequest(BaseCreateSchema):
    """Registration form posted to ``/register``."""

    name: str = Field(..., min_length=1, max_length=120)
    email: EmailStr
    student_id: str = Field(..., min_length=1, alias="studentId")
    password: str = Field(..., min_length=1)
    role: UserRole = UserRole.STUDENT

    def to_payload(self) -> Dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True)


class AuthResponse(BaseRecordSchema):
    """``{token, user}`` envelope returned by login and register."""

    token: str = Field(..., min_length=1)
    user: Account
