from campus_complaints.repositories.base.base_repository import BaseHttpRepository

__all__ = ["BaseHttpRepository"]
