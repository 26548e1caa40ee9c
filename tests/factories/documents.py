"""Form-document and uploaded-file factories for test data generation."""

from datetime import UTC, datetime, timedelta
from itertools import count

from polyfactory import Use
from polyfactory.factories.pydantic_factory import ModelFactory

from src.workflow_sync.models import DocumentStatus, EntityRef, EntityType
from src.workflow_sync.schemas import FormDocument, UploadedFile

_ids = count(1000)


def utc_now() -> datetime:
    return datetime.now(UTC)


def next_id() -> int:
    return next(_ids)


class FormDocumentFactory(ModelFactory[FormDocument]):
    """Factory for form-documents as returned by the records API."""

    __model__ = FormDocument

    id = Use(next_id)
    entity_type = EntityType.SERVICE_ORDER
    entity_id = 5
    form_id = Use(next_id)
    form_version = 1
    title = None
    status = DocumentStatus.DRAFT
    responses = Use(dict)
    created_at = Use(utc_now)
    updated_at = None
    is_deleted = False
    form_name_en = "Safety inspection"
    form_name_fr = "Inspection de sécurité"

    @classmethod
    def for_owner(cls, ref: EntityRef, **kwargs) -> FormDocument:
        return cls.build(entity_type=ref.entity_type, entity_id=ref.entity_id, **kwargs)

    @classmethod
    def completed(cls, **kwargs) -> FormDocument:
        return cls.build(status=DocumentStatus.COMPLETED, **kwargs)


class UploadedFileFactory(ModelFactory[UploadedFile]):
    """Factory for uploaded files as listed by the document service."""

    __model__ = UploadedFile

    id = Use(lambda: str(next_id()))
    module_type = "services"
    module_id = "5"
    file_type = "pdf"
    file_name = Use(lambda: f"file_{next_id()}.pdf")
    original_name = None
    file_size = 2048
    uploaded_by = "tech@example.com"
    uploaded_at = Use(utc_now)
    category = "field"

    @classmethod
    def older(cls, days: int, **kwargs) -> UploadedFile:
        return cls.build(uploaded_at=utc_now() - timedelta(days=days), **kwargs)
