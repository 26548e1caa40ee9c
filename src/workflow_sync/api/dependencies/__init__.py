"""FastAPI dependency injection definitions - Lobby Pattern."""

# Gateways
from src.workflow_sync.api.dependencies.gateways import (
    Authorization,
    FileGw,
    FormDocumentGw,
    HttpClient,
    RecordRegistry,
    get_authorization,
    get_file_gateway,
    get_form_document_gateway,
    get_record_registry,
)

# Services
from src.workflow_sync.api.dependencies.services import (
    AttachmentServiceDep,
    ChainResolverDep,
    ChecklistServiceDep,
    DocumentAggregatorDep,
    DocumentMigratorDep,
    PropagationServiceDep,
    get_attachment_service,
    get_chain_resolver,
    get_checklist_service,
    get_document_aggregator,
    get_document_migrator,
    get_propagation_service,
)

__all__ = [
    # Gateways
    "Authorization",
    "FileGw",
    "FormDocumentGw",
    "HttpClient",
    "RecordRegistry",
    "get_authorization",
    "get_file_gateway",
    "get_form_document_gateway",
    "get_record_registry",
    # Services
    "AttachmentServiceDep",
    "ChainResolverDep",
    "ChecklistServiceDep",
    "DocumentAggregatorDep",
    "DocumentMigratorDep",
    "PropagationServiceDep",
    "get_attachment_service",
    "get_chain_resolver",
    "get_checklist_service",
    "get_document_aggregator",
    "get_document_migrator",
    "get_propagation_service",
]
