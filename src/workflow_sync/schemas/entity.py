"""Entity reference schemas for API request/response."""

from pydantic import BaseModel, Field, field_validator

from src.workflow_sync.models import EntityRef, EntityType, RelatedEntity


class EntityRefSchema(BaseModel):
    """Wire form of an entity reference."""

    entity_type: EntityType
    entity_id: int = Field(gt=0)

    def to_ref(self) -> EntityRef:
        return EntityRef(self.entity_type, self.entity_id)

    @classmethod
    def from_ref(cls, ref: EntityRef) -> "EntityRefSchema":
        return cls(entity_type=ref.entity_type, entity_id=ref.entity_id)


class RelatedEntitySchema(EntityRefSchema):
    """Related entity with an optional origin label for display."""

    label: str | None = Field(default=None, max_length=100)

    @field_validator("label")
    @classmethod
    def validate_label(cls, v: str | None) -> str | None:
        if v is not None:
            v = v.strip()
            if not v:
                return None
        return v

    def to_related(self) -> RelatedEntity:
        return RelatedEntity(self.to_ref(), self.label)
