"""Checklist event propagation along the workflow chain.

Fire-and-forget design: a note that cannot be delivered is logged and the
remaining records still get theirs. Nothing raises to the caller.
"""

import asyncio
from dataclasses import dataclass, field

from src.workflow_sync.core.logging import get_logger
from src.workflow_sync.core.messages import NoteText, derived_note, self_note
from src.workflow_sync.gateways import RecordGatewayRegistry
from src.workflow_sync.models import EntityRef, EntityType, PropagationAction
from src.workflow_sync.services.chain_resolver import ChainResolver

logger = get_logger(__name__)


@dataclass(frozen=True)
class NotificationOutcome:
    """Delivery result for one record."""

    target: EntityRef
    ok: bool
    derived: bool
    error: str | None = None


@dataclass
class PropagationResult:
    """Outcomes of one propagate call, source first."""

    source: EntityRef
    action: PropagationAction
    outcomes: list[NotificationOutcome] = field(default_factory=list)

    @property
    def delivered(self) -> list[EntityRef]:
        return [o.target for o in self.outcomes if o.ok]

    @property
    def failed(self) -> list[EntityRef]:
        return [o.target for o in self.outcomes if not o.ok]


class PropagationService:
    """Writes checklist audit notes on a record and on its chain."""

    def __init__(
        self,
        records: RecordGatewayRegistry,
        resolver: ChainResolver | None = None,
        max_concurrency: int = 4,
    ):
        self.records = records
        self.resolver = resolver or ChainResolver(records)
        self.max_concurrency = max_concurrency

    async def propagate(
        self,
        subject: str,
        source_type: EntityType,
        source_id: int,
        action: PropagationAction,
        direct_link: EntityRef | None = None,
        language: str | None = None,
    ) -> PropagationResult:
        """Broadcast a checklist event.

        The source record gets the self note first. Then the chain is
        resolved and every other record gets the derived note naming the
        source type. Each record is attempted exactly once.

        Args:
            subject: Form name the note is about
            source_type: Type of the record the checklist belongs to
            source_id: Id of that record
            action: added or completed
            direct_link: A record the caller already knows is linked
            language: Note language, defaults to the configured one

        Returns:
            Per-record outcomes, for logging and inspection
        """
        source = EntityRef(source_type, source_id)
        result = PropagationResult(source=source, action=action)
        kind = action.note_kind

        own = self_note(action, subject, language)
        result.outcomes.append(await self._notify(source, kind, own, derived=False))

        try:
            others = await self.resolver.resolve(source_type, source_id, direct_link)
        except Exception as e:
            logger.warning("Chain resolution failed", error=str(e), source=str(source))
            others = []

        targets = [ref for ref in others if ref != source]
        if targets:
            linked = derived_note(action, subject, source_type, language)
            result.outcomes.extend(await self._fan_out(targets, kind, linked))

        logger.info(
            "Checklist note propagated",
            action=action.value,
            source=str(source),
            delivered=[str(r) for r in result.delivered],
            failed=[str(r) for r in result.failed],
        )
        return result

    async def _fan_out(
        self, targets: list[EntityRef], kind: str, text: NoteText
    ) -> list[NotificationOutcome]:
        semaphore = asyncio.Semaphore(self.max_concurrency)

        async def _bounded(target: EntityRef) -> NotificationOutcome:
            async with semaphore:
                return await self._notify(target, kind, text, derived=True)

        async with asyncio.TaskGroup() as tg:
            tasks = [tg.create_task(_bounded(target)) for target in targets]
        return [task.result() for task in tasks]

    async def _notify(
        self, target: EntityRef, kind: str, text: NoteText, derived: bool
    ) -> NotificationOutcome:
        notifier = self.records.notifier(target.entity_type)
        if notifier is None:
            logger.warning(
                "No note endpoint for entity type",
                target_type=target.entity_type.value,
                target_id=target.entity_id,
            )
            return NotificationOutcome(target, ok=False, derived=derived, error="unsupported")

        try:
            await notifier.notify(target.entity_id, kind, text.description, text.details)
        except Exception as e:
            logger.warning(
                "Failed to add checklist note",
                target_type=target.entity_type.value,
                target_id=target.entity_id,
                note_kind=kind,
                error=str(e),
            )
            return NotificationOutcome(target, ok=False, derived=derived, error=str(e))

        return NotificationOutcome(target, ok=True, derived=derived)
