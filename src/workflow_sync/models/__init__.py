"""Domain models - Lobby Pattern.

Value types and enums shared by gateways, services and the API layer.
"""

from src.workflow_sync.models.entity_ref import (
    EntityRef,
    RelatedEntity,
    parse_entity_id,
    sort_by_workflow_order,
)
from src.workflow_sync.models.enums import (
    WORKFLOW_ORDER,
    AttachmentKind,
    DocumentStatus,
    EntityType,
    FileCategory,
    ModuleType,
    PropagationAction,
    UploadCategory,
    module_type_for,
    upload_category_for,
)

__all__ = [
    # Enums
    "AttachmentKind",
    "DocumentStatus",
    "EntityType",
    "FileCategory",
    "ModuleType",
    "PropagationAction",
    "UploadCategory",
    "WORKFLOW_ORDER",
    "module_type_for",
    "upload_category_for",
    # Value types
    "EntityRef",
    "RelatedEntity",
    "parse_entity_id",
    "sort_by_workflow_order",
]
