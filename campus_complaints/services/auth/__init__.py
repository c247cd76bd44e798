from campus_complaints.services.auth.session_service import SessionService, UserSession

__all__ = ["SessionService", "UserSession"]
