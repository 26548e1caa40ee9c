"""Document copy endpoints used on workflow transitions."""

from fastapi import APIRouter

from src.workflow_sync.api.dependencies import DocumentMigratorDep
from src.workflow_sync.core.logging import bind_entity_context
from src.workflow_sync.schemas import CopyFromChainRequest, CopyRequest, CopyResponse

router = APIRouter(prefix="/documents", tags=["documents"])


@router.post(
    "/copy",
    response_model=CopyResponse,
    summary="Copy form-documents",
    description="Copy the form-documents of one record onto another, e.g. Offer to Sale.",
    responses={
        200: {"description": "Number of form-documents copied"},
        502: {"description": "The copy failed; nothing is retried"},
    },
)
async def copy_documents(request: CopyRequest, migrator: DocumentMigratorDep) -> CopyResponse:
    """Single-hop copy."""
    source, target = request.source, request.target
    bind_entity_context(source.entity_type.value, source.entity_id)

    copied = await migrator.copy(
        source.entity_type, source.entity_id, target.entity_type, target.entity_id
    )
    return CopyResponse(copied_count=copied, target=target)


@router.post(
    "/copy-from-chain",
    response_model=CopyResponse,
    summary="Copy form-documents from several records",
    description=(
        "Copy form-documents from each source in order onto the target. A source that "
        "fails is skipped and the others are still copied."
    ),
)
async def copy_documents_from_chain(
    request: CopyFromChainRequest,
    migrator: DocumentMigratorDep,
) -> CopyResponse:
    """Multi-hop copy."""
    target = request.target
    bind_entity_context(target.entity_type.value, target.entity_id)

    copied = await migrator.copy_from_chain(
        target.entity_type, target.entity_id, [s.to_ref() for s in request.sources]
    )
    return CopyResponse(copied_count=copied, target=target)
