"""Gateway factory dependencies."""

from typing import Annotated

import httpx
from fastapi import Depends, Header

from src.workflow_sync.core.config import get_settings
from src.workflow_sync.core.http import get_http_client
from src.workflow_sync.gateways import FileGateway, FormDocumentGateway, RecordGatewayRegistry


def get_authorization(
    authorization: Annotated[str | None, Header()] = None,
) -> str | None:
    """Caller's Authorization header, or the configured service token."""
    if authorization:
        return authorization
    token = get_settings().records_api_token
    return f"Bearer {token}" if token else None


HttpClient = Annotated[httpx.AsyncClient, Depends(get_http_client)]
Authorization = Annotated[str | None, Depends(get_authorization)]


def get_record_registry(client: HttpClient, authorization: Authorization) -> RecordGatewayRegistry:
    """Get record gateways for offers, sales, service orders and dispatches."""
    return RecordGatewayRegistry.build(client, authorization)


def get_form_document_gateway(
    client: HttpClient, authorization: Authorization
) -> FormDocumentGateway:
    return FormDocumentGateway(client, authorization)


def get_file_gateway(client: HttpClient, authorization: Authorization) -> FileGateway:
    return FileGateway(client, authorization)


RecordRegistry = Annotated[RecordGatewayRegistry, Depends(get_record_registry)]
FormDocumentGw = Annotated[FormDocumentGateway, Depends(get_form_document_gateway)]
FileGw = Annotated[FileGateway, Depends(get_file_gateway)]
