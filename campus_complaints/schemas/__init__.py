"""Pydantic schemas for accounts and complaints."""
