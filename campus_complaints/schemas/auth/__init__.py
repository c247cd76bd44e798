from campus_complaints.schemas.auth.account import (
    Account,
    LoginRequest,
    RegisterRequest,
    AuthResponse,
)

__all__ = [
    "Account",
    "LoginRequest",
    "RegisterRequest",
    "AuthResponse",
]
