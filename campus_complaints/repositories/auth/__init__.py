from campus_complaints.repositories.auth.auth_repository import HttpAuthRepository

__all__ = ["HttpAuthRepository"]
