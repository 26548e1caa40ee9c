"""Chain endpoints - which records are linked to a given record."""

from typing import Annotated

from fastapi import APIRouter, HTTPException, Path, Query, status

from src.workflow_sync.api.dependencies import ChainResolverDep
from src.workflow_sync.core.logging import bind_entity_context
from src.workflow_sync.models import EntityRef, EntityType, sort_by_workflow_order
from src.workflow_sync.schemas import ChainResponse, EntityRefSchema

router = APIRouter(prefix="/chains", tags=["chains"])


@router.get(
    "/{entity_type}/{entity_id}",
    response_model=ChainResponse,
    summary="Resolve workflow chain",
    description=(
        "List the records linked to a record through the Offer, Sale, Service Order "
        "and Dispatch workflow, each at most once."
    ),
    responses={
        200: {"description": "Linked records in discovery order"},
        400: {"description": "Incomplete direct link"},
    },
)
async def resolve_chain(
    entity_type: EntityType,
    entity_id: Annotated[int, Path(gt=0)],
    resolver: ChainResolverDep,
    linked_type: Annotated[
        EntityType | None, Query(description="Type of a record known to be linked")
    ] = None,
    linked_id: Annotated[int | None, Query(gt=0, description="Id of that record")] = None,
) -> ChainResponse:
    """Resolve the chain of a record."""
    if (linked_type is None) != (linked_id is None):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="linked_type and linked_id must be given together",
        )

    bind_entity_context(entity_type.value, entity_id)
    direct_link = EntityRef(linked_type, linked_id) if linked_type and linked_id else None
    source = EntityRef(entity_type, entity_id)
    chain = await resolver.resolve(entity_type, entity_id, direct_link)
    members = [source, *(ref for ref in chain if ref != source)]
    return ChainResponse(
        source=EntityRefSchema.from_ref(source),
        chain=[EntityRefSchema.from_ref(ref) for ref in chain],
        workflow=[EntityRefSchema.from_ref(ref) for ref in sort_by_workflow_order(members)],
    )
