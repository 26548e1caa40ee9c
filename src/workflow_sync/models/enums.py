"""Shared enums for models."""

from enum import Enum


class EntityType(str, Enum):
    """Business record kinds along the workflow chain."""

    OFFER = "offer"
    SALE = "sale"
    SERVICE_ORDER = "service_order"
    DISPATCH = "dispatch"
    INSTALLATION = "installation"


# Display grouping only. Traversal follows saleId/offerId foreign keys.
WORKFLOW_ORDER: tuple[EntityType, ...] = (
    EntityType.OFFER,
    EntityType.SALE,
    EntityType.SERVICE_ORDER,
    EntityType.DISPATCH,
    EntityType.INSTALLATION,
)


class DocumentStatus(str, Enum):
    """Form-document status. Only draft -> completed is allowed."""

    DRAFT = "draft"
    COMPLETED = "completed"


class PropagationAction(str, Enum):
    """Checklist event broadcast along the chain."""

    ADDED = "added"
    COMPLETED = "completed"

    @property
    def note_kind(self) -> str:
        return f"checklist_{self.value}"


class ModuleType(str, Enum):
    """Addressing used by the uploaded-file service."""

    OFFERS = "offers"
    SALES = "sales"
    SERVICES = "services"
    FIELD = "field"


class UploadCategory(str, Enum):
    """Uploaded-file category."""

    CRM = "crm"
    FIELD = "field"


class FileCategory(str, Enum):
    """Coarse classification used to filter attachments."""

    PDF = "pdf"
    IMAGES = "images"
    DOCUMENTS = "documents"
    OTHER = "other"


class AttachmentKind(str, Enum):
    """Source of an aggregated attachment row."""

    FORM = "form"
    FILE = "file"


MODULE_TYPES: dict[EntityType, ModuleType] = {
    EntityType.OFFER: ModuleType.OFFERS,
    EntityType.SALE: ModuleType.SALES,
    EntityType.SERVICE_ORDER: ModuleType.SERVICES,
    EntityType.DISPATCH: ModuleType.FIELD,
}


def module_type_for(entity_type: EntityType) -> ModuleType | None:
    """Return the uploaded-file module for an entity type, if it has one."""
    return MODULE_TYPES.get(entity_type)


def upload_category_for(module_type: ModuleType) -> UploadCategory:
    if module_type in (ModuleType.OFFERS, ModuleType.SALES):
        return UploadCategory.CRM
    return UploadCategory.FIELD
