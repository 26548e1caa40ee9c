"""Attachment schemas: form-documents, uploaded files and the merged view."""

import re
from datetime import UTC, datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from src.workflow_sync.models import (
    AttachmentKind,
    DocumentStatus,
    EntityType,
    FileCategory,
    ModuleType,
)
from src.workflow_sync.schemas.entity import EntityRefSchema


class FormDocument(BaseModel):
    """A released form template attached to one owning record."""

    model_config = ConfigDict(extra="ignore")

    id: int
    entity_type: EntityType
    entity_id: int
    form_id: int
    form_version: int | None = None  # captured at attach time
    title: str | None = None
    status: DocumentStatus = DocumentStatus.DRAFT
    responses: dict[str, Any] = Field(default_factory=dict)
    created_by: str | None = None
    created_by_name: str | None = None
    created_at: datetime
    updated_at: datetime | None = None
    is_deleted: bool = False
    form_name_en: str | None = None
    form_name_fr: str | None = None

    @field_validator("entity_type", mode="before")
    @classmethod
    def normalize_entity_type(cls, v: Any) -> Any:
        # Some API versions send "ServiceOrder" or "SERVICE_ORDER" instead of "service_order"
        if not isinstance(v, str):
            return v
        v = v.strip()
        if v.isupper():
            return v.lower()
        return re.sub(r"(?<!^)(?<!_)([A-Z])", r"_\1", v).lower()

    @property
    def is_completed(self) -> bool:
        return self.status == DocumentStatus.COMPLETED

    def form_name(self, language: str = "en") -> str:
        """Form template name in the requested language, falling back to the other."""
        if language == "fr":
            return self.form_name_fr or self.form_name_en or f"Form {self.form_id}"
        return self.form_name_en or self.form_name_fr or f"Form {self.form_id}"


class FormDocumentCreate(BaseModel):
    """Payload for attaching a form to a record."""

    entity_type: EntityType
    entity_id: int = Field(gt=0)
    form_id: int = Field(gt=0)
    title: str | None = Field(default=None, max_length=500)
    status: DocumentStatus = DocumentStatus.DRAFT
    responses: dict[str, Any] = Field(default_factory=dict)


class FormDocumentUpdate(BaseModel):
    """Payload for saving responses / completing a form-document."""

    id: int
    responses: dict[str, Any]
    title: str | None = None
    status: DocumentStatus


class UploadedFile(BaseModel):
    """One binary attachment as listed by the document service."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        coerce_numbers_to_str=True,
        extra="ignore",
    )

    id: str
    module_type: str | None = None
    module_id: str | None = None
    file_type: str = ""
    file_name: str
    original_name: str | None = None
    file_size: int = 0
    uploaded_by: str | None = None
    uploaded_at: datetime
    category: str | None = None

    @field_validator("file_type")
    @classmethod
    def normalize_file_type(cls, v: str) -> str:
        return v.lower().lstrip(".")

    @property
    def display_name(self) -> str:
        return self.original_name or self.file_name


class AttachmentView(BaseModel):
    """One row of the merged attachment list."""

    kind: AttachmentKind
    id: str
    owner: EntityRefSchema
    name: str
    file_category: FileCategory
    timestamp: datetime
    origin: str | None = None
    status: DocumentStatus | None = None
    form_document: FormDocument | None = None
    file: UploadedFile | None = None

    @field_validator("timestamp")
    @classmethod
    def ensure_aware(cls, v: datetime) -> datetime:
        # Form and file services disagree on offsets; naive values are UTC
        if v.tzinfo is None:
            return v.replace(tzinfo=UTC)
        return v

    @property
    def read_only(self) -> bool:
        """Items fetched from a related record belong to that record."""
        return self.origin is not None

    def matches(self, search: str) -> bool:
        needle = search.lower()
        if needle in self.name.lower():
            return True
        if self.form_document is not None:
            names = (self.form_document.form_name_en, self.form_document.form_name_fr)
            return any(n and needle in n.lower() for n in names)
        if self.file is not None:
            return needle in self.file.file_name.lower()
        return False


class UploadProgress(BaseModel):
    """Progress reported during a multi-file upload."""

    uploaded_files: int
    total_files: int
    module_type: ModuleType

    @property
    def percent(self) -> int:
        if self.total_files == 0:
            return 100
        return round(self.uploaded_files * 100 / self.total_files)
