"""Per-request logging context and in-flight tracking."""

from asgi_correlation_id import correlation_id
from fastapi import Request, Response
from starlette.middleware.base import RequestResponseEndpoint

from src.workflow_sync.core.logging import bind_request_context, clear_request_context
from src.workflow_sync.core.shutdown import request_tracker

UNTRACKED_PATHS = frozenset({"/health", "/metrics"})


async def logging_context_middleware(
    request: Request, call_next: RequestResponseEndpoint
) -> Response:
    """Bind request_id for the request; endpoints add the source record."""
    clear_request_context()
    bind_request_context(correlation_id.get())
    try:
        return await call_next(request)
    finally:
        clear_request_context()


async def request_tracking_middleware(
    request: Request, call_next: RequestResponseEndpoint
) -> Response:
    """Count the request as in flight so shutdown waits for its fan-out."""
    if request.url.path in UNTRACKED_PATHS:
        return await call_next(request)

    async with request_tracker.track_request():
        return await call_next(request)
