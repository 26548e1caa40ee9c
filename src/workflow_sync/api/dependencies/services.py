"""Service factory dependencies."""

from typing import Annotated

from fastapi import Depends

from src.workflow_sync.api.dependencies.gateways import FileGw, FormDocumentGw, RecordRegistry
from src.workflow_sync.core.config import get_settings
from src.workflow_sync.services import (
    AttachmentService,
    ChainResolver,
    ChecklistService,
    DocumentAggregator,
    DocumentMigrator,
    PropagationService,
)


def get_chain_resolver(records: RecordRegistry) -> ChainResolver:
    return ChainResolver(records)


def get_propagation_service(
    records: RecordRegistry,
    resolver: Annotated[ChainResolver, Depends(get_chain_resolver)],
) -> PropagationService:
    """Get propagation service with the configured fan-out bound."""
    settings = get_settings()
    return PropagationService(
        records, resolver, max_concurrency=settings.propagation_max_concurrency
    )


def get_document_aggregator(form_documents: FormDocumentGw, files: FileGw) -> DocumentAggregator:
    return DocumentAggregator(form_documents, files)


def get_document_migrator(form_documents: FormDocumentGw) -> DocumentMigrator:
    return DocumentMigrator(form_documents)


def get_checklist_service(
    form_documents: FormDocumentGw,
    propagation: Annotated[PropagationService, Depends(get_propagation_service)],
) -> ChecklistService:
    return ChecklistService(form_documents, propagation)


def get_attachment_service(form_documents: FormDocumentGw, files: FileGw) -> AttachmentService:
    return AttachmentService(form_documents, files)


ChainResolverDep = Annotated[ChainResolver, Depends(get_chain_resolver)]
PropagationServiceDep = Annotated[PropagationService, Depends(get_propagation_service)]
DocumentAggregatorDep = Annotated[DocumentAggregator, Depends(get_document_aggregator)]
DocumentMigratorDep = Annotated[DocumentMigrator, Depends(get_document_migrator)]
ChecklistServiceDep = Annotated[ChecklistService, Depends(get_checklist_service)]
AttachmentServiceDep = Annotated[AttachmentService, Depends(get_attachment_service)]
