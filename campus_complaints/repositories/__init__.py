"""Repositories reaching the persistence and auth collaborators."""
