"""Health check against the records API, with caching, and Prometheus metrics."""

import secrets
import time
from typing import Any

import httpx
from fastapi import Depends, FastAPI, HTTPException, status
from fastapi.responses import JSONResponse
from fastapi.security import APIKeyHeader
from prometheus_fastapi_instrumentator import Instrumentator

from src.workflow_sync.core.config import get_settings
from src.workflow_sync.core.http import get_http_client
from src.workflow_sync.core.shutdown import request_tracker

_health_cache: dict[str, Any] | None = None
_health_cache_time: float = 0
HEALTH_CACHE_TTL = 10  # seconds


def reset_health_cache() -> None:
    """Reset health cache (for testing)."""
    global _health_cache, _health_cache_time
    _health_cache = None
    _health_cache_time = 0


async def probe_records_api() -> str:
    """One round trip to the records API root; any HTTP answer means reachable."""
    try:
        response = await get_http_client().get("/")
    except httpx.HTTPError as e:
        return f"unhealthy: {e!s}"
    if response.status_code >= 500:
        return f"unhealthy: status {response.status_code}"
    return "healthy"


def setup_health_endpoint(app: FastAPI) -> None:
    """Configure the health check endpoint."""

    @app.get("/health", include_in_schema=False)
    async def health() -> JSONResponse:
        global _health_cache, _health_cache_time

        now = time.time()

        if request_tracker.is_shutting_down:
            return JSONResponse(
                content={
                    "status": "draining",
                    "in_flight_requests": request_tracker.in_flight_count,
                },
                status_code=503,
            )

        if _health_cache and (now - _health_cache_time) < HEALTH_CACHE_TTL:
            cached = _health_cache.copy()
            cached["cached"] = True
            cached["cache_age_seconds"] = round(now - _health_cache_time, 1)
            return JSONResponse(
                content=cached, status_code=200 if cached["status"] == "healthy" else 503
            )

        records_api = await probe_records_api()
        health_status: dict[str, Any] = {
            "status": "healthy" if records_api == "healthy" else "unhealthy",
            "records_api": records_api,
            "cached": False,
            "timestamp": now,
        }

        _health_cache = health_status
        _health_cache_time = now

        status_code = 200 if health_status["status"] == "healthy" else 503
        return JSONResponse(content=health_status, status_code=status_code)


def setup_metrics(app: FastAPI) -> None:
    """Configure Prometheus metrics with optional API key protection."""
    settings = get_settings()
    instrumentator = Instrumentator().instrument(app)

    if not settings.metrics_api_key:
        instrumentator.expose(app, endpoint="/metrics")
        return

    api_key_header = APIKeyHeader(name="X-Metrics-Key", auto_error=False)

    async def verify_metrics_key(api_key: str | None = Depends(api_key_header)) -> None:
        expected = settings.metrics_api_key
        if api_key is None or expected is None or not secrets.compare_digest(api_key, expected):
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail="Invalid or missing metrics API key",
            )

    instrumentator.expose(app, endpoint="/metrics", dependencies=[Depends(verify_metrics_key)])
