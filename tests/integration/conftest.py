"""Integration test fixtures: the ASGI app with gateway doubles or a fake records API."""

import json
import re
from collections.abc import AsyncGenerator

import httpx
import pytest
from httpx import ASGITransport, AsyncClient

from src.workflow_sync.api.dependencies import (
    get_file_gateway,
    get_form_document_gateway,
    get_record_registry,
)
from src.workflow_sync.core.health import reset_health_cache
from src.workflow_sync.core.http import close_http_client, set_http_client
from src.workflow_sync.core.shutdown import request_tracker
from src.workflow_sync.main import create_app


@pytest.fixture(autouse=True)
def reset_app_state():
    reset_health_cache()
    request_tracker.reset()
    yield
    reset_health_cache()
    request_tracker.reset()


@pytest.fixture
async def client(registry, form_document_gateway, file_gateway) -> AsyncGenerator[AsyncClient]:
    """Client against the app with gateway doubles injected."""
    app = create_app()
    app.dependency_overrides[get_record_registry] = lambda: registry
    app.dependency_overrides[get_form_document_gateway] = lambda: form_document_gateway
    app.dependency_overrides[get_file_gateway] = lambda: file_gateway

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client


class FakeRecordsApi:
    """In-memory stand-in for the records API, served through httpx.MockTransport."""

    def __init__(self) -> None:
        self.records = {
            ("offers", 1): {"id": 1},
            ("sales", 2): {"id": 2, "offerId": 1},
            ("service-orders", 3): {"id": 3, "saleId": 2},
            ("dispatches", 4): {"id": 4},
        }
        self.notes: list[tuple[str, int, dict]] = []
        self.requests: list[httpx.Request] = []
        self.failing: set[str] = set()
        self.down = False

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.down:
            raise httpx.ConnectError("Connection refused", request=request)
        path = request.url.path
        if path == "/":
            return httpx.Response(200, json={"status": "ok"})

        match = re.fullmatch(r"/api/([a-z-]+)/(\d+)(?:/(notes|activities))?", path)
        if match is None:
            return httpx.Response(404)
        resource, entity_id, sub = match.group(1), int(match.group(2)), match.group(3)

        if resource in self.failing:
            return httpx.Response(500)
        if sub is not None and request.method == "POST":
            self.notes.append((resource, entity_id, json.loads(request.content)))
            return httpx.Response(201, json={"data": {"id": len(self.notes)}})
        record = self.records.get((resource, entity_id))
        if record is None:
            return httpx.Response(404)
        return httpx.Response(200, json={"data": record})


@pytest.fixture
def records_api() -> FakeRecordsApi:
    return FakeRecordsApi()


@pytest.fixture
async def wired_client(records_api) -> AsyncGenerator[AsyncClient]:
    """Client against the app with real gateways talking to the fake records API."""
    transport = httpx.MockTransport(records_api)
    set_http_client(httpx.AsyncClient(base_url="http://records.test", transport=transport))
    app = create_app()
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client
    await close_http_client()
