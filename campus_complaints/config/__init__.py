"""
Configuration package for the campus complaints core.

This package contains environment settings, logging setup and the
HTTP client factory used to reach the REST collaborator.
"""

from campus_complaints.config.settings import Settings, settings, get_settings
from campus_complaints.config.logging import setup_logging, get_logger
from campus_complaints.config.integrations import build_api_client

__all__ = ['Settings', 'settings', 'get_settings', 'setup_logging', 'get_logger', 'build_api_client']
