"""Chain and propagation schemas for API request/response."""

from pydantic import BaseModel, Field, field_validator

from src.workflow_sync.models import PropagationAction
from src.workflow_sync.schemas.entity import EntityRefSchema


class ChainResponse(BaseModel):
    """Records linked to a source record, in discovery order."""

    source: EntityRefSchema
    chain: list[EntityRefSchema]
    # Source and chain from Offer to Installation, for display grouping
    workflow: list[EntityRefSchema]


class PropagationRequest(BaseModel):
    """Schema for broadcasting a checklist event."""

    subject: str = Field(min_length=1, max_length=500, description="Form name")
    source: EntityRefSchema
    action: PropagationAction
    direct_link: EntityRefSchema | None = None
    language: str | None = Field(default=None, max_length=10)

    @field_validator("subject")
    @classmethod
    def validate_subject(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Subject cannot be empty or whitespace only")
        return v


class NotificationOutcomeRead(BaseModel):
    target: EntityRefSchema
    ok: bool
    derived: bool
    error: str | None = None


class PropagationResponse(BaseModel):
    """Per-record delivery outcomes, source first."""

    source: EntityRefSchema
    action: PropagationAction
    outcomes: list[NotificationOutcomeRead]
    delivered_count: int
    failed_count: int
