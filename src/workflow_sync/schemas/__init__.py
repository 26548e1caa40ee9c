from src.workflow_sync.schemas.attachments import (
    AttachmentListResponse,
    AttachmentQuery,
    BulkDeleteRequest,
    BulkDeleteResponse,
    CopyFromChainRequest,
    CopyRequest,
    CopyResponse,
)
from src.workflow_sync.schemas.checklists import ChecklistCreate, ChecklistSave
from src.workflow_sync.schemas.documents import (
    AttachmentView,
    FormDocument,
    FormDocumentCreate,
    FormDocumentUpdate,
    UploadedFile,
    UploadProgress,
)
from src.workflow_sync.schemas.entity import EntityRefSchema, RelatedEntitySchema
from src.workflow_sync.schemas.propagation import (
    ChainResponse,
    NotificationOutcomeRead,
    PropagationRequest,
    PropagationResponse,
)
from src.workflow_sync.schemas.records import RecordSummary

__all__ = [
    "AttachmentListResponse",
    "AttachmentQuery",
    "AttachmentView",
    "BulkDeleteRequest",
    "BulkDeleteResponse",
    "ChainResponse",
    "ChecklistCreate",
    "ChecklistSave",
    "CopyFromChainRequest",
    "CopyRequest",
    "CopyResponse",
    "EntityRefSchema",
    "FormDocument",
    "FormDocumentCreate",
    "FormDocumentUpdate",
    "NotificationOutcomeRead",
    "PropagationRequest",
    "PropagationResponse",
    "RecordSummary",
    "RelatedEntitySchema",
    "UploadProgress",
    "UploadedFile",
]
