"""Shared HTTP client for the records API.

One connection pool per process, lazily created and closed on shutdown.
"""

import httpx

from src.workflow_sync.core.config import get_settings
from src.workflow_sync.core.logging import get_logger

logger = get_logger(__name__)

_client: httpx.AsyncClient | None = None


def get_http_client() -> httpx.AsyncClient:
    """Get or create the records API client."""
    global _client
    if _client is None:
        settings = get_settings()
        _client = httpx.AsyncClient(
            base_url=settings.records_api_url,
            timeout=httpx.Timeout(settings.gateway_timeout_seconds),
            headers={"Accept": "application/json"},
        )
        logger.info("Records API client created", base_url=settings.records_api_url)
    return _client


async def close_http_client() -> None:
    """Close the records API client. Call during shutdown."""
    global _client
    if _client is not None:
        await _client.aclose()
        logger.info("Records API client closed")
        _client = None


def set_http_client(client: httpx.AsyncClient | None) -> None:
    """Replace the shared client (for testing)."""
    global _client
    _client = client
