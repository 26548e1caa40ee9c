"""Checklist lifecycle - attaches forms and decides when to broadcast.

The propagation engine is stateless; this service owns the trigger rules:
"added" once when the checklist is attached, "completed" only on the
draft -> completed transition.
"""

from typing import Any

from src.workflow_sync.core.logging import get_logger
from src.workflow_sync.gateways import FormDocumentGateway
from src.workflow_sync.models import DocumentStatus, EntityRef, PropagationAction
from src.workflow_sync.schemas.documents import (
    FormDocument,
    FormDocumentCreate,
    FormDocumentUpdate,
)
from src.workflow_sync.services.propagation_service import PropagationService

logger = get_logger(__name__)


class ChecklistService:
    """Checklist operations on form-documents, with chain notes."""

    def __init__(self, form_documents: FormDocumentGateway, propagation: PropagationService):
        self.form_documents = form_documents
        self.propagation = propagation

    async def add_checklist(
        self,
        owner: EntityRef,
        form_id: int,
        form_name: str,
        title: str | None = None,
        direct_link: EntityRef | None = None,
        language: str | None = None,
    ) -> FormDocument:
        """Attach a released form as a draft checklist and announce it.

        Raises:
            GatewayError: If the form-document cannot be created
        """
        document = await self.form_documents.create(
            FormDocumentCreate(
                entity_type=owner.entity_type,
                entity_id=owner.entity_id,
                form_id=form_id,
                title=(title or "").strip() or None,
                status=DocumentStatus.DRAFT,
                responses={},
            )
        )
        await self.propagation.propagate(
            form_name,
            owner.entity_type,
            owner.entity_id,
            PropagationAction.ADDED,
            direct_link=direct_link,
            language=language,
        )
        return document

    async def get_checklist(self, owner: EntityRef, document_id: int) -> FormDocument:
        """Load a checklist of the owner.

        Raises:
            ValueError: If the owner has no such checklist
            GatewayError: If the form-documents cannot be listed
        """
        documents = await self.form_documents.get_by_entity(owner.entity_type, owner.entity_id)
        for document in documents:
            if document.id == document_id:
                return document
        raise ValueError(f"Checklist {document_id} not found on {owner}")

    async def save_checklist(
        self,
        owner: EntityRef,
        document_id: int,
        responses: dict[str, Any],
        form_name: str,
        title: str | None = None,
        mark_complete: bool = False,
        direct_link: EntityRef | None = None,
        language: str | None = None,
    ) -> FormDocument:
        """Save responses and optionally complete the checklist.

        A checklist that is already completed is read-only: it is returned
        unchanged and nothing is broadcast. Completing a draft broadcasts
        "completed" once, against the record that owns the document.

        Raises:
            ValueError: If the owner has no such checklist
            GatewayError: If loading or saving fails
        """
        current = await self.get_checklist(owner, document_id)
        if current.is_completed:
            logger.info(
                "Checklist already completed, ignoring save",
                document_id=document_id,
                owner=str(owner),
            )
            return current

        status = DocumentStatus.COMPLETED if mark_complete else DocumentStatus.DRAFT
        updated = await self.form_documents.update(
            FormDocumentUpdate(
                id=document_id,
                responses=responses,
                title=(title or "").strip() or None,
                status=status,
            )
        )

        if status == DocumentStatus.COMPLETED:
            await self.propagation.propagate(
                form_name,
                current.entity_type,
                current.entity_id,
                PropagationAction.COMPLETED,
                direct_link=direct_link,
                language=language,
            )
        return updated

    async def delete_checklist(self, document_id: int) -> None:
        """Soft delete a checklist.

        Raises:
            GatewayError: If the deletion fails
        """
        await self.form_documents.delete(document_id)
        logger.info("Checklist deleted", document_id=document_id)
