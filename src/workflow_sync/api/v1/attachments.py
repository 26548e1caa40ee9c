"""Attachment endpoints - merged list and bulk actions on a record."""

from fastapi import APIRouter, status

from src.workflow_sync.api.dependencies import AttachmentServiceDep, DocumentAggregatorDep
from src.workflow_sync.core.logging import bind_entity_context
from src.workflow_sync.schemas import (
    AttachmentListResponse,
    AttachmentQuery,
    BulkDeleteRequest,
    BulkDeleteResponse,
)
from src.workflow_sync.services.document_aggregator import (
    filter_attachments,
    selectable,
    sort_attachments,
)

router = APIRouter(prefix="/attachments", tags=["attachments"])


@router.post(
    "/query",
    response_model=AttachmentListResponse,
    summary="List attachments",
    description=(
        "Merge the form-documents and uploaded files of a record with those of its "
        "related records. Related items carry an origin label and are read-only."
    ),
)
async def query_attachments(
    query: AttachmentQuery,
    aggregator: DocumentAggregatorDep,
) -> AttachmentListResponse:
    """List filtered attachments, newest first."""
    owner = query.owner.to_ref()
    bind_entity_context(owner.entity_type.value, owner.entity_id)

    views = await aggregator.aggregate(
        owner, [r.to_related() for r in query.related], language=query.language
    )
    items = sort_attachments(filter_attachments(views, query.search, query.file_type))
    return AttachmentListResponse(
        items=items,
        total=len(items),
        selectable_count=len(selectable(items)),
    )


@router.post(
    "/bulk-delete",
    response_model=BulkDeleteResponse,
    summary="Delete selected attachments",
    description="Delete selected attachments owned by the record. Related items are ignored.",
    responses={
        200: {"description": "What was deleted, failed or ignored"},
        502: {"description": "The owner's attachments could not be listed or deleted"},
    },
)
async def bulk_delete_attachments(
    request: BulkDeleteRequest,
    attachments: AttachmentServiceDep,
) -> BulkDeleteResponse:
    """Delete owned attachments in bulk."""
    owner = request.owner.to_ref()
    bind_entity_context(owner.entity_type.value, owner.entity_id)

    result = await attachments.bulk_delete(
        owner,
        form_document_ids=request.form_document_ids,
        file_ids=request.file_ids,
    )
    return BulkDeleteResponse(
        deleted_form_documents=result.deleted_form_documents,
        deleted_files=result.deleted_files,
        failed_files=result.failed_files,
        ignored=result.ignored,
        deleted_count=result.deleted_count,
    )


@router.delete(
    "/files/{file_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete uploaded file",
)
async def delete_file(file_id: str, attachments: AttachmentServiceDep) -> None:
    """Delete one uploaded file."""
    await attachments.delete_file(file_id)
