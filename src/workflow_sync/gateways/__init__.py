"""Gateways to the remote records API - Lobby Pattern."""

from src.workflow_sync.gateways.base import BaseGateway, GatewayError, unwrap
from src.workflow_sync.gateways.documents import FileGateway, FileUpload, FormDocumentGateway
from src.workflow_sync.gateways.records import (
    ActivityRecordGateway,
    DispatchGateway,
    NotableEntity,
    NoteRecordGateway,
    OfferGateway,
    RecordGateway,
    RecordGatewayRegistry,
    SaleGateway,
    ServiceOrderGateway,
)

__all__ = [
    "ActivityRecordGateway",
    "BaseGateway",
    "DispatchGateway",
    "FileGateway",
    "FileUpload",
    "FormDocumentGateway",
    "GatewayError",
    "NotableEntity",
    "NoteRecordGateway",
    "OfferGateway",
    "RecordGateway",
    "RecordGatewayRegistry",
    "SaleGateway",
    "ServiceOrderGateway",
    "unwrap",
]
