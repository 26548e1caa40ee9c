"""Merged attachment view over a record and its related records."""

from collections.abc import Iterable, Sequence

from src.workflow_sync.core.logging import get_logger
from src.workflow_sync.core.messages import entity_label, resolve_language
from src.workflow_sync.gateways import FileGateway, FormDocumentGateway
from src.workflow_sync.models import (
    AttachmentKind,
    EntityRef,
    FileCategory,
    RelatedEntity,
    module_type_for,
)
from src.workflow_sync.schemas.documents import AttachmentView, FormDocument, UploadedFile
from src.workflow_sync.schemas.entity import EntityRefSchema

logger = get_logger(__name__)

IMAGE_TYPES = frozenset({"jpg", "jpeg", "png", "gif", "webp", "svg", "bmp"})
DOCUMENT_TYPES = frozenset(
    {"doc", "docx", "xls", "xlsx", "ppt", "pptx", "txt", "csv", "odt", "ods"}
)


def classify_file_type(file_type: str) -> FileCategory:
    """Map a file extension to its filter category."""
    ext = file_type.lower().lstrip(".")
    if ext == "pdf":
        return FileCategory.PDF
    if ext in IMAGE_TYPES:
        return FileCategory.IMAGES
    if ext in DOCUMENT_TYPES:
        return FileCategory.DOCUMENTS
    return FileCategory.OTHER


def form_document_view(
    doc: FormDocument, owner: EntityRef, origin: str | None, language: str = "en"
) -> AttachmentView:
    return AttachmentView(
        kind=AttachmentKind.FORM,
        id=str(doc.id),
        owner=EntityRefSchema.from_ref(owner),
        name=doc.title or doc.form_name(language),
        file_category=FileCategory.DOCUMENTS,
        timestamp=doc.created_at,
        origin=origin,
        status=doc.status,
        form_document=doc,
    )


def file_view(file: UploadedFile, owner: EntityRef, origin: str | None) -> AttachmentView:
    return AttachmentView(
        kind=AttachmentKind.FILE,
        id=file.id,
        owner=EntityRefSchema.from_ref(owner),
        name=file.display_name,
        file_category=classify_file_type(file.file_type),
        timestamp=file.uploaded_at,
        origin=origin,
        file=file,
    )


def filter_attachments(
    views: Iterable[AttachmentView],
    search: str | None = None,
    file_type: FileCategory | str | None = None,
) -> list[AttachmentView]:
    """Filter by free text and by file category ("all" or None keeps everything)."""
    search = (search or "").strip()
    category = None if file_type in (None, "", "all") else FileCategory(file_type)
    return [
        view
        for view in views
        if (not search or view.matches(search))
        and (category is None or view.file_category == category)
    ]


def sort_attachments(views: Iterable[AttachmentView]) -> list[AttachmentView]:
    """Newest first."""
    return sorted(views, key=lambda v: v.timestamp, reverse=True)


def selectable(views: Iterable[AttachmentView]) -> list[AttachmentView]:
    """Attachments a bulk action may touch: those owned by the record itself."""
    return [view for view in views if not view.read_only]


class DocumentAggregator:
    """Builds one attachment list from an owner and its related records.

    Every fetch is isolated: a record whose documents cannot be loaded
    simply contributes nothing.
    """

    def __init__(self, form_documents: FormDocumentGateway, files: FileGateway):
        self.form_documents = form_documents
        self.files = files

    async def aggregate(
        self,
        owner: EntityRef,
        related: Sequence[RelatedEntity | EntityRef] = (),
        language: str | None = None,
    ) -> list[AttachmentView]:
        """Merge form-documents and uploaded files.

        Args:
            owner: Record the attachment list is shown on
            related: Records whose attachments are shown as well, tagged
                with their label (or their type label when none is given)
            language: Language for type labels and form names

        Returns:
            Owner items (no origin) followed by related items (with origin)
        """
        lang = resolve_language(language)
        views = await self._collect(owner, origin=None, language=lang)

        seen = {owner}
        for item in related:
            rel = item if isinstance(item, RelatedEntity) else RelatedEntity(item)
            if rel.ref in seen:
                continue
            seen.add(rel.ref)
            origin = rel.label or entity_label(rel.ref.entity_type, lang)
            views.extend(await self._collect(rel.ref, origin=origin, language=lang))

        return views

    async def _collect(
        self, ref: EntityRef, origin: str | None, language: str
    ) -> list[AttachmentView]:
        views: list[AttachmentView] = []

        try:
            docs = await self.form_documents.get_by_entity(ref.entity_type, ref.entity_id)
            views.extend(form_document_view(doc, ref, origin, language) for doc in docs)
        except Exception as e:
            logger.warning(
                "Failed to fetch form documents",
                target_type=ref.entity_type.value,
                target_id=ref.entity_id,
                error=str(e),
            )

        module_type = module_type_for(ref.entity_type)
        if module_type is None:
            return views

        try:
            files = await self.files.list_files(module_type, str(ref.entity_id))
            views.extend(file_view(f, ref, origin) for f in files)
        except Exception as e:
            logger.warning(
                "Failed to fetch uploaded files",
                target_type=ref.entity_type.value,
                target_id=ref.entity_id,
                error=str(e),
            )

        return views
