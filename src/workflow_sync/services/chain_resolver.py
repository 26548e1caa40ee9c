"""Workflow chain resolution.

Given a record, find the other records along Offer -> Sale -> ServiceOrder
-> Dispatch that should hear about what happened on it. The chain is
rebuilt from foreign keys on every call; nothing is cached, so a record
re-linked a second ago is already reflected.
"""

from src.workflow_sync.core.logging import get_logger
from src.workflow_sync.gateways import RecordGatewayRegistry
from src.workflow_sync.models import EntityRef, EntityType, parse_entity_id
from src.workflow_sync.schemas.records import RecordSummary

logger = get_logger(__name__)


class _Chain:
    """Ordered, deduplicated result of one resolve call."""

    def __init__(self) -> None:
        self.refs: list[EntityRef] = []
        self._seen: set[EntityRef] = set()

    def add(self, ref: EntityRef) -> bool:
        if ref in self._seen:
            return False
        self._seen.add(ref)
        self.refs.append(ref)
        return True


class ChainResolver:
    """Discovers ancestors of a record through saleId / offerId.

    Best effort: a lookup that fails or finds nothing stops its branch and
    the resolver returns whatever it discovered so far.
    """

    def __init__(self, records: RecordGatewayRegistry):
        self.records = records

    async def resolve(
        self,
        source_type: EntityType,
        source_id: int,
        direct_link: EntityRef | None = None,
    ) -> list[EntityRef]:
        """Resolve the records to notify besides the source.

        Args:
            source_type: Type of the record the event happened on
            source_id: Id of that record
            direct_link: A record the caller already knows is linked
                (e.g. the parent service order of a dispatch)

        Returns:
            Records in discovery order: the direct link first, then
            ancestors. Each record appears once. The source itself is not
            added, though it can come back through the direct link.
        """
        chain = _Chain()
        parsed_source_id = parse_entity_id(source_id)
        if parsed_source_id is None:
            logger.debug("Invalid source id, nothing to resolve", source_type=source_type.value)
            return chain.refs

        link_id = parse_entity_id(direct_link.entity_id) if direct_link is not None else None
        if link_id is not None:
            chain.add(EntityRef(direct_link.entity_type, link_id))

        linked_service_order = (
            link_id is not None and direct_link.entity_type == EntityType.SERVICE_ORDER
        )

        if linked_service_order:
            await self._follow_service_order(link_id, chain)
        elif source_type == EntityType.SERVICE_ORDER:
            await self._follow_service_order(parsed_source_id, chain)
        # Dispatches only reach their sale through a service order link.
        # Sales and offers: the direct link already is the adjacent record.
        # Installations have no known foreign keys yet.

        logger.debug(
            "Chain resolved",
            source_type=source_type.value,
            source_id=source_id,
            chain=[str(ref) for ref in chain.refs],
        )
        return chain.refs

    async def _follow_service_order(self, service_order_id: int, chain: _Chain) -> None:
        service_order = await self._fetch(EntityType.SERVICE_ORDER, service_order_id)
        if service_order is None or service_order.sale_id is None:
            return

        sale = EntityRef(EntityType.SALE, service_order.sale_id)
        if not chain.add(sale):
            return

        sale_record = await self._fetch(EntityType.SALE, sale.entity_id)
        if sale_record is None or sale_record.offer_id is None:
            return
        chain.add(EntityRef(EntityType.OFFER, sale_record.offer_id))

    async def _fetch(self, entity_type: EntityType, entity_id: int) -> RecordSummary | None:
        try:
            record = await self.records.get_record(entity_type, entity_id)
        except Exception as e:
            logger.warning(
                "Chain lookup failed, stopping branch",
                target_type=entity_type.value,
                target_id=entity_id,
                error=str(e),
            )
            return None
        if record is None:
            logger.debug(
                "Chain lookup found nothing",
                target_type=entity_type.value,
                target_id=entity_id,
            )
        return record
