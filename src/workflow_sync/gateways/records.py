"""Record gateways - one per business record kind with a backing store.

Offers and sales keep an activity log (type/description/details);
service orders and dispatches keep free-text notes. Both are exposed
through the same NotableEntity capability so callers never switch on
the entity type.
"""

from typing import Protocol, runtime_checkable

import httpx

from src.workflow_sync.gateways.base import BaseGateway
from src.workflow_sync.models import EntityType
from src.workflow_sync.schemas.records import RecordSummary


@runtime_checkable
class NotableEntity(Protocol):
    """A record kind that can receive audit notes."""

    entity_type: EntityType

    async def notify(self, entity_id: int, kind: str, description: str, details: str) -> None:
        """Attach one audit note to the record."""
        ...


class RecordGateway(BaseGateway):
    """Read access to one record kind."""

    entity_type: EntityType
    resource: str  # path segment under /api
    get_params: dict[str, str] = {}

    async def get_by_id(self, entity_id: int) -> RecordSummary | None:
        """Fetch a record, or None if it does not exist."""
        data = await self._request(
            "GET",
            f"/api/{self.resource}/{entity_id}",
            params=self.get_params or None,
            allow_not_found=True,
        )
        if not isinstance(data, dict):
            return None
        return RecordSummary.model_validate(data)


class ActivityRecordGateway(RecordGateway):
    """Records whose audit trail is an activity log."""

    async def add_activity(self, entity_id: int, kind: str, description: str, details: str) -> None:
        await self._request(
            "POST",
            f"/api/{self.resource}/{entity_id}/activities",
            json={"type": kind, "description": description, "details": details},
        )

    async def notify(self, entity_id: int, kind: str, description: str, details: str) -> None:
        await self.add_activity(entity_id, kind, description, details)


class NoteRecordGateway(RecordGateway):
    """Records whose audit trail is a list of notes."""

    # Field the notes endpoint reads the note kind from
    kind_field: str = "type"

    async def add_note(self, entity_id: int, content: str, kind: str) -> None:
        await self._request(
            "POST",
            f"/api/{self.resource}/{entity_id}/notes",
            json={"content": content, self.kind_field: kind},
        )

    async def notify(self, entity_id: int, kind: str, description: str, details: str) -> None:
        await self.add_note(entity_id, f"{description}\n{details}", kind)


class OfferGateway(ActivityRecordGateway):
    entity_type = EntityType.OFFER
    resource = "offers"


class SaleGateway(ActivityRecordGateway):
    entity_type = EntityType.SALE
    resource = "sales"


class ServiceOrderGateway(NoteRecordGateway):
    entity_type = EntityType.SERVICE_ORDER
    resource = "service-orders"
    get_params = {"includeJobs": "false"}


class DispatchGateway(NoteRecordGateway):
    entity_type = EntityType.DISPATCH
    resource = "dispatches"
    kind_field = "category"


RECORD_GATEWAY_TYPES: tuple[type[RecordGateway], ...] = (
    OfferGateway,
    SaleGateway,
    ServiceOrderGateway,
    DispatchGateway,
)


class RecordGatewayRegistry:
    """Typed lookup from entity type to its gateway.

    Entity types without a backing store (installation) are simply absent.
    """

    def __init__(self, gateways: dict[EntityType, RecordGateway]):
        self._gateways = dict(gateways)

    @classmethod
    def build(
        cls, client: httpx.AsyncClient, authorization: str | None = None
    ) -> "RecordGatewayRegistry":
        return cls({gw.entity_type: gw(client, authorization) for gw in RECORD_GATEWAY_TYPES})

    def get(self, entity_type: EntityType) -> RecordGateway | None:
        return self._gateways.get(entity_type)

    def notifier(self, entity_type: EntityType) -> NotableEntity | None:
        gateway = self._gateways.get(entity_type)
        if isinstance(gateway, NotableEntity):
            return gateway
        return None

    async def get_record(self, entity_type: EntityType, entity_id: int) -> RecordSummary | None:
        """Fetch a record by type. None when the type has no gateway or the id is unknown."""
        gateway = self._gateways.get(entity_type)
        if gateway is None:
            return None
        return await gateway.get_by_id(entity_id)

    def __contains__(self, entity_type: object) -> bool:
        return entity_type in self._gateways
