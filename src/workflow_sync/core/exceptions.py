"""Exception handlers with request_id in responses."""

from asgi_correlation_id import correlation_id
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from src.workflow_sync.core.logging import get_logger
from src.workflow_sync.gateways import GatewayError

logger = get_logger(__name__)


def _error(status_code: int, detail: object) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"detail": detail, "request_id": correlation_id.get()},
    )


def setup_exception_handlers(app: FastAPI) -> None:
    """Configure exception handlers that include request_id in responses."""

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(
        request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        return _error(exc.status_code, exc.detail)

    @app.exception_handler(GatewayError)
    async def gateway_exception_handler(request: Request, exc: GatewayError) -> JSONResponse:
        logger.warning(
            "Records API call failed",
            path=request.url.path,
            upstream_path=exc.path,
            upstream_status=exc.status_code,
            error=str(exc),
        )
        return _error(
            status.HTTP_502_BAD_GATEWAY,
            "The records service could not complete the request. Try again shortly.",
        )

    @app.exception_handler(Exception)
    async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception(
            "Unhandled exception",
            exc_info=exc,
            request_id=correlation_id.get(),
            path=request.url.path,
        )
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error")
