"""Attachment list, bulk delete and copy schemas for API request/response."""

from typing import Literal

from pydantic import BaseModel, Field

from src.workflow_sync.models import FileCategory
from src.workflow_sync.schemas.documents import AttachmentView
from src.workflow_sync.schemas.entity import EntityRefSchema, RelatedEntitySchema


class AttachmentQuery(BaseModel):
    """Schema for listing the merged attachments of a record."""

    owner: EntityRefSchema
    related: list[RelatedEntitySchema] = Field(default_factory=list, max_length=20)
    search: str | None = Field(default=None, max_length=200)
    file_type: FileCategory | Literal["all"] = "all"
    language: str | None = Field(default=None, max_length=10)


class AttachmentListResponse(BaseModel):
    items: list[AttachmentView]
    total: int
    selectable_count: int


class BulkDeleteRequest(BaseModel):
    """Schema for deleting selected attachments of a record."""

    owner: EntityRefSchema
    form_document_ids: list[int] = Field(default_factory=list, max_length=500)
    file_ids: list[str] = Field(default_factory=list, max_length=500)


class BulkDeleteResponse(BaseModel):
    deleted_form_documents: list[int]
    deleted_files: list[str]
    failed_files: list[str]
    ignored: list[str]
    deleted_count: int


class CopyRequest(BaseModel):
    """Schema for a single-hop form-document copy."""

    source: EntityRefSchema
    target: EntityRefSchema


class CopyFromChainRequest(BaseModel):
    """Schema for copying form-documents from several records into one."""

    target: EntityRefSchema
    sources: list[EntityRefSchema] = Field(min_length=1, max_length=20)


class CopyResponse(BaseModel):
    copied_count: int
    target: EntityRefSchema
