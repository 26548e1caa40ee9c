from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from src.workflow_sync.api.middlewares import setup_middlewares
from src.workflow_sync.api.v1.router import api_router
from src.workflow_sync.core.config import get_settings
from src.workflow_sync.core.exceptions import setup_exception_handlers
from src.workflow_sync.core.health import setup_health_endpoint, setup_metrics
from src.workflow_sync.core.http import close_http_client
from src.workflow_sync.core.logging import get_logger, setup_logging
from src.workflow_sync.core.shutdown import request_tracker

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
    """Application lifespan - startup and shutdown."""
    settings = get_settings()
    setup_logging(settings.debug)
    logger.info(
        "Starting service",
        app_name=settings.app_name,
        records_api_url=settings.records_api_url,
    )

    yield

    await request_tracker.start_shutdown()
    drained = await request_tracker.wait_for_drain(timeout=settings.shutdown_grace_period)
    if not drained:
        logger.warning("Shutting down with propagation requests still in flight")

    await close_http_client()
    logger.info("Shutdown complete")


OPENAPI_TAGS = [
    {"name": "chains", "description": "Workflow chain resolution"},
    {"name": "propagation", "description": "Checklist notes broadcast along the chain"},
    {"name": "attachments", "description": "Merged form-documents and uploaded files"},
    {"name": "documents", "description": "Form-document copy between records"},
    {"name": "checklists", "description": "Checklist lifecycle"},
]


def create_app() -> FastAPI:
    settings = get_settings()

    app = FastAPI(
        title=settings.app_name,
        description="Cross-record workflow propagation and document sync",
        version="0.1.0",
        openapi_tags=OPENAPI_TAGS,
        lifespan=lifespan,
        openapi_url="/openapi.json" if settings.enable_openapi else None,
        docs_url="/docs" if settings.enable_openapi else None,
        redoc_url="/redoc" if settings.enable_openapi else None,
    )

    setup_exception_handlers(app)
    setup_middlewares(app, settings)

    app.include_router(api_router)

    setup_metrics(app)
    setup_health_endpoint(app)

    return app


app = create_app()
