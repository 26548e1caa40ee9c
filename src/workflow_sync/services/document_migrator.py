"""Form-document copying between records during workflow transitions."""

from collections.abc import Iterable

from src.workflow_sync.core.logging import get_logger
from src.workflow_sync.gateways import FormDocumentGateway
from src.workflow_sync.models import EntityRef, EntityType

logger = get_logger(__name__)


class DocumentMigrator:
    """Copies form-documents from one record (or a chain of records) to another."""

    def __init__(self, form_documents: FormDocumentGateway):
        self.form_documents = form_documents

    async def copy(
        self,
        source_type: EntityType,
        source_id: int,
        target_type: EntityType,
        target_id: int,
    ) -> int:
        """Copy form-documents in a single hop, e.g. Offer -> Sale on conversion.

        Returns:
            Number of form-documents copied

        Raises:
            GatewayError: If the copy fails; the caller reports it to the user
        """
        copied = await self.form_documents.copy(source_type, source_id, target_type, target_id)
        logger.info(
            "Copied form documents",
            count=copied,
            source=f"{source_type.value}#{source_id}",
            target=f"{target_type.value}#{target_id}",
        )
        return copied

    async def copy_from_chain(
        self,
        target_type: EntityType,
        target_id: int,
        sources: Iterable[EntityRef],
    ) -> int:
        """Copy form-documents from several records into one.

        Sources are tried in the given order. A source that fails is logged
        and left out of the total; the others are still copied.

        Returns:
            Total number of form-documents copied
        """
        target = EntityRef(target_type, target_id)
        total = 0
        for source in sources:
            if source == target:
                continue
            try:
                total += await self.copy(
                    source.entity_type, source.entity_id, target_type, target_id
                )
            except Exception as e:
                logger.warning(
                    "Failed to copy form documents from chain member",
                    source_type=source.entity_type.value,
                    source_id=source.entity_id,
                    target=str(target),
                    error=str(e),
                )
        return total
