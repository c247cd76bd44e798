"""
HTTP integration with the REST collaborator that persists complaints
and accounts.
"""

from typing import Callable, Dict, Optional
import logging

import httpx

from campus_complaints.config.settings import Settings, settings as default_settings

logger = logging.getLogger(__name__)

TokenProvider = Callable[[], Optional[str]]


class BearerTokenAuth(httpx.Auth):
    """Attach the session token, when one is held, to every request"""

    def __init__(self, token_provider: TokenProvider):
        self._token_provider = token_provider

    def auth_flow(self, request: httpx.Request):
        token = self._token_provider()
        if token:
            request.headers["Authorization"] = f"Bearer {token}"
        yield request


def build_api_client(
    config: Optional[Settings] = None,
    token_provider: Optional[TokenProvider] = None,
    transport: Optional[httpx.BaseTransport] = None,
) -> httpx.Client:
    """
    Create the shared HTTP client for the complaints API.

    Args:
        config: Settings to read base URL and timeout from
        token_provider: Callable returning the current session token
        transport: Optional transport override (used by tests)

    Returns:
        Configured httpx.Client
    """
    config = config or default_settings
    headers: Dict[str, str] = {"Accept": "application/json"}
    if config.API_USER_AGENT:
        headers["User-Agent"] = config.API_USER_AGENT

    logger.debug(f"Creating API client for {config.API_BASE_URL}")
    return httpx.Client(
        base_url=config.API_BASE_URL,
        timeout=config.API_TIMEOUT_SECONDS,
        headers=headers,
        auth=BearerTokenAuth(token_provider) if token_provider else None,
        transport=transport,
    )
