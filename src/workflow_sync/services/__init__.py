from src.workflow_sync.services.attachment_service import AttachmentService, BulkDeleteResult
from src.workflow_sync.services.chain_resolver import ChainResolver
from src.workflow_sync.services.checklist_service import ChecklistService
from src.workflow_sync.services.document_aggregator import DocumentAggregator
from src.workflow_sync.services.document_migrator import DocumentMigrator
from src.workflow_sync.services.propagation_service import (
    NotificationOutcome,
    PropagationResult,
    PropagationService,
)

__all__ = [
    "AttachmentService",
    "BulkDeleteResult",
    "ChainResolver",
    "ChecklistService",
    "DocumentAggregator",
    "DocumentMigrator",
    "NotificationOutcome",
    "PropagationResult",
    "PropagationService",
]
