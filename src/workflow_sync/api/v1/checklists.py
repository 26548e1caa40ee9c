"""Checklist endpoints - attach, save/complete and delete form checklists.

Adding a checklist and completing one broadcast a note along the workflow
chain. Saving a checklist that is already completed changes nothing.
"""

from typing import Annotated

from fastapi import APIRouter, HTTPException, Path, status

from src.workflow_sync.api.dependencies import ChecklistServiceDep
from src.workflow_sync.core.logging import bind_entity_context
from src.workflow_sync.schemas import ChecklistCreate, ChecklistSave, FormDocument

router = APIRouter(prefix="/checklists", tags=["checklists"])


@router.post(
    "",
    response_model=FormDocument,
    status_code=status.HTTP_201_CREATED,
    summary="Add checklist",
    responses={
        201: {"description": "Checklist attached as a draft"},
        502: {"description": "The form-document could not be created"},
    },
)
async def add_checklist(
    request: ChecklistCreate,
    checklists: ChecklistServiceDep,
) -> FormDocument:
    """Attach a form to a record as a draft checklist."""
    owner = request.owner.to_ref()
    bind_entity_context(owner.entity_type.value, owner.entity_id)

    return await checklists.add_checklist(
        owner,
        request.form_id,
        request.form_name,
        title=request.title,
        direct_link=request.direct_link.to_ref() if request.direct_link else None,
        language=request.language,
    )


@router.put(
    "/{document_id}",
    response_model=FormDocument,
    summary="Save checklist",
    description="Save responses; set mark_complete to complete a draft checklist.",
    responses={
        200: {"description": "Checklist saved (unchanged if already completed)"},
        404: {"description": "Checklist not found on the record"},
    },
)
async def save_checklist(
    document_id: Annotated[int, Path(gt=0)],
    request: ChecklistSave,
    checklists: ChecklistServiceDep,
) -> FormDocument:
    """Save or complete a checklist."""
    owner = request.owner.to_ref()
    bind_entity_context(owner.entity_type.value, owner.entity_id)

    try:
        return await checklists.save_checklist(
            owner,
            document_id,
            request.responses,
            request.form_name,
            title=request.title,
            mark_complete=request.mark_complete,
            direct_link=request.direct_link.to_ref() if request.direct_link else None,
            language=request.language,
        )
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        ) from e


@router.delete(
    "/{document_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete checklist",
)
async def delete_checklist(
    document_id: Annotated[int, Path(gt=0)],
    checklists: ChecklistServiceDep,
) -> None:
    """Soft delete a checklist."""
    await checklists.delete_checklist(document_id)
