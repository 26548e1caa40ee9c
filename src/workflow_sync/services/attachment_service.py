"""Uploads and deletions on the attachment list of one record."""

from collections.abc import Callable, Sequence
from dataclasses import dataclass, field

from src.workflow_sync.core.logging import get_logger
from src.workflow_sync.gateways import FileGateway, FileUpload, FormDocumentGateway
from src.workflow_sync.models import EntityRef, module_type_for
from src.workflow_sync.schemas.documents import UploadedFile, UploadProgress

logger = get_logger(__name__)


@dataclass
class BulkDeleteResult:
    """What a bulk delete actually removed."""

    deleted_form_documents: list[int] = field(default_factory=list)
    deleted_files: list[str] = field(default_factory=list)
    failed_files: list[str] = field(default_factory=list)
    ignored: list[str] = field(default_factory=list)

    @property
    def deleted_count(self) -> int:
        return len(self.deleted_form_documents) + len(self.deleted_files)


class AttachmentService:
    """Owner-scoped attachment mutations.

    Items shown on a record but fetched from a related record are read-only
    there; a bulk delete never reaches them.
    """

    def __init__(self, form_documents: FormDocumentGateway, files: FileGateway):
        self.form_documents = form_documents
        self.files = files

    async def upload(
        self,
        owner: EntityRef,
        files: Sequence[FileUpload],
        module_name: str | None = None,
        on_progress: Callable[[UploadProgress], None] | None = None,
    ) -> list[UploadedFile]:
        """Upload files onto a record.

        Raises:
            ValueError: If the record type has no uploaded-file module
            GatewayError: If an upload fails
        """
        module_type = module_type_for(owner.entity_type)
        if module_type is None:
            raise ValueError(f"Files cannot be uploaded to {owner.entity_type.value} records")

        return await self.files.upload(
            files,
            module_type,
            str(owner.entity_id),
            module_name=module_name,
            on_progress=on_progress,
        )

    async def delete_file(self, file_id: str) -> None:
        await self.files.delete(file_id)
        logger.info("File deleted", file_id=file_id)

    async def bulk_delete(
        self,
        owner: EntityRef,
        form_document_ids: Sequence[int] = (),
        file_ids: Sequence[str] = (),
    ) -> BulkDeleteResult:
        """Delete selected attachments owned by the record.

        Ids not in the owner's own listings are ignored, so items shown from
        related records are never reached. A form-document that cannot be
        deleted aborts the batch; a file that cannot be deleted is logged and
        skipped.

        Raises:
            GatewayError: If the owner's listings cannot be read or a
                form-document deletion fails
        """
        owned_forms: set[int] = set()
        if form_document_ids:
            listed_forms = await self.form_documents.get_by_entity(
                owner.entity_type, owner.entity_id
            )
            owned_forms = {doc.id for doc in listed_forms}

        owned_files: set[str] = set()
        module_type = module_type_for(owner.entity_type)
        if module_type is not None and file_ids:
            listed_files = await self.files.list_files(module_type, str(owner.entity_id))
            owned_files = {f.id for f in listed_files}

        result = BulkDeleteResult()
        for document_id in form_document_ids:
            if document_id not in owned_forms:
                result.ignored.append(str(document_id))
                continue
            await self.form_documents.delete(document_id)
            result.deleted_form_documents.append(document_id)

        for file_id in file_ids:
            if file_id not in owned_files:
                result.ignored.append(file_id)
                continue
            try:
                await self.files.delete(file_id)
            except Exception as e:
                logger.warning("Failed to delete file", file_id=file_id, error=str(e))
                result.failed_files.append(file_id)
                continue
            result.deleted_files.append(file_id)

        logger.info(
            "Bulk delete finished",
            owner=str(owner),
            deleted=result.deleted_count,
            ignored=len(result.ignored),
            failed=len(result.failed_files),
        )
        return result
