"""Root test fixtures shared across all test types.

Gateway doubles live here so unit and integration tests build the same
chain: Offer#1 <- Sale#2 <- ServiceOrder#3 <- Dispatch#4.
"""

import os

os.environ.setdefault("APP_ENV", "testing")
os.environ.setdefault("RECORDS_API_URL", "http://records.test")

# ruff: noqa: E402 - Imports must be after env var setup
from collections.abc import Generator
from unittest.mock import AsyncMock, MagicMock

import pytest
import structlog
from structlog.testing import CapturingLogger

from src.workflow_sync.core.config import get_settings
from src.workflow_sync.core.logging import clear_request_context
from src.workflow_sync.gateways import (
    DispatchGateway,
    FileGateway,
    FormDocumentGateway,
    OfferGateway,
    RecordGateway,
    RecordGatewayRegistry,
    SaleGateway,
    ServiceOrderGateway,
)
from src.workflow_sync.models import EntityType
from src.workflow_sync.schemas import RecordSummary

# Clear settings cache to ensure test environment variables are picked up
get_settings.cache_clear()


def make_record_gateway(
    gateway_cls: type[RecordGateway], records: dict[int, RecordSummary] | None = None
) -> MagicMock:
    """A record gateway double backed by an in-memory table."""
    records = records or {}
    gateway = MagicMock(spec=gateway_cls)
    gateway.entity_type = gateway_cls.entity_type

    async def _get_by_id(entity_id: int) -> RecordSummary | None:
        return records.get(entity_id)

    gateway.get_by_id = AsyncMock(side_effect=_get_by_id)
    gateway.notify = AsyncMock(return_value=None)
    return gateway


@pytest.fixture
def chain_records() -> dict[EntityType, dict[int, RecordSummary]]:
    """Offer#1 <- Sale#2 <- ServiceOrder#3 <- Dispatch#4."""
    return {
        EntityType.OFFER: {1: RecordSummary(id=1)},
        EntityType.SALE: {2: RecordSummary(id=2, offer_id=1)},
        EntityType.SERVICE_ORDER: {3: RecordSummary(id=3, sale_id=2)},
        EntityType.DISPATCH: {4: RecordSummary(id=4)},
    }


@pytest.fixture
def record_gateways(chain_records) -> dict[EntityType, MagicMock]:
    return {
        EntityType.OFFER: make_record_gateway(OfferGateway, chain_records[EntityType.OFFER]),
        EntityType.SALE: make_record_gateway(SaleGateway, chain_records[EntityType.SALE]),
        EntityType.SERVICE_ORDER: make_record_gateway(
            ServiceOrderGateway, chain_records[EntityType.SERVICE_ORDER]
        ),
        EntityType.DISPATCH: make_record_gateway(
            DispatchGateway, chain_records[EntityType.DISPATCH]
        ),
    }


@pytest.fixture
def registry(record_gateways) -> RecordGatewayRegistry:
    return RecordGatewayRegistry(record_gateways)


@pytest.fixture
def form_document_gateway() -> AsyncMock:
    gateway = AsyncMock(spec=FormDocumentGateway)
    gateway.get_by_entity.return_value = []
    return gateway


@pytest.fixture
def file_gateway() -> AsyncMock:
    gateway = AsyncMock(spec=FileGateway)
    gateway.list_files.return_value = []
    return gateway


@pytest.fixture
def capturing_logger() -> Generator[CapturingLogger]:
    """Route structlog output to an in-memory logger."""
    cap_logger = CapturingLogger()
    structlog.configure(
        processors=[structlog.contextvars.merge_contextvars],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=lambda *args: cap_logger,
        cache_logger_on_first_use=False,
    )
    clear_request_context()
    yield cap_logger
    clear_request_context()
    structlog.reset_defaults()
