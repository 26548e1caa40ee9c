"""Entity reference value type."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

from src.workflow_sync.models.enums import WORKFLOW_ORDER, EntityType


def parse_entity_id(value: Any) -> int | None:
    """Parse a record id, returning None when it cannot address a record.

    Accepts positive ints and digit-only strings. Booleans, zero, negatives,
    floats and anything non-numeric are rejected.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value if value > 0 else None
    if isinstance(value, str):
        stripped = value.strip()
        if stripped.isascii() and stripped.isdigit():
            parsed = int(stripped)
            return parsed if parsed > 0 else None
    return None


@dataclass(frozen=True)
class EntityRef:
    """Identity of a business record. Equality is type + id."""

    entity_type: EntityType
    entity_id: int

    @classmethod
    def parse(cls, entity_type: EntityType | str | None, entity_id: Any) -> EntityRef | None:
        """Build a reference from loosely-typed input, or None if invalid."""
        if entity_type is None:
            return None
        try:
            etype = EntityType(entity_type)
        except ValueError:
            return None
        eid = parse_entity_id(entity_id)
        if eid is None:
            return None
        return cls(etype, eid)

    def __str__(self) -> str:
        return f"{self.entity_type.value}#{self.entity_id}"


@dataclass(frozen=True)
class RelatedEntity:
    """A related record whose attachments are shown alongside the owner's."""

    ref: EntityRef
    label: str | None = None


def sort_by_workflow_order(refs: Iterable[EntityRef]) -> list[EntityRef]:
    """Order references for display: Offer first, Installation last."""
    return sorted(refs, key=lambda r: (WORKFLOW_ORDER.index(r.entity_type), r.entity_id))
