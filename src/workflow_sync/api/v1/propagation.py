"""Propagation endpoint - broadcast a checklist event along the chain."""

from fastapi import APIRouter, status

from src.workflow_sync.api.dependencies import PropagationServiceDep
from src.workflow_sync.core.logging import bind_entity_context
from src.workflow_sync.schemas import (
    EntityRefSchema,
    NotificationOutcomeRead,
    PropagationRequest,
    PropagationResponse,
)

router = APIRouter(prefix="/propagation", tags=["propagation"])


@router.post(
    "",
    response_model=PropagationResponse,
    status_code=status.HTTP_202_ACCEPTED,
    summary="Propagate checklist event",
    description=(
        "Write the checklist note on the source record, then on every linked record. "
        "Delivery failures are reported per record and never fail the request."
    ),
    responses={
        202: {"description": "Event broadcast, with per-record outcomes"},
    },
)
async def propagate(
    request: PropagationRequest,
    propagation: PropagationServiceDep,
) -> PropagationResponse:
    """Broadcast a checklist event."""
    source = request.source
    bind_entity_context(source.entity_type.value, source.entity_id)

    result = await propagation.propagate(
        request.subject,
        source.entity_type,
        source.entity_id,
        request.action,
        direct_link=request.direct_link.to_ref() if request.direct_link else None,
        language=request.language,
    )
    return PropagationResponse(
        source=EntityRefSchema.from_ref(result.source),
        action=result.action,
        outcomes=[
            NotificationOutcomeRead(
                target=EntityRefSchema.from_ref(o.target),
                ok=o.ok,
                derived=o.derived,
                error=o.error,
            )
            for o in result.outcomes
        ],
        delivered_count=len(result.delivered),
        failed_count=len(result.failed),
    )
