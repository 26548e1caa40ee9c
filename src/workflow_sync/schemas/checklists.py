"""Checklist schemas for API request/response."""

from typing import Any

from pydantic import BaseModel, Field, field_validator

from src.workflow_sync.schemas.entity import EntityRefSchema


class ChecklistCreate(BaseModel):
    """Schema for attaching a form as a checklist."""

    owner: EntityRefSchema
    form_id: int = Field(gt=0)
    form_name: str = Field(min_length=1, max_length=500)
    title: str | None = Field(default=None, max_length=500)
    direct_link: EntityRefSchema | None = None
    language: str | None = Field(default=None, max_length=10)

    @field_validator("form_name")
    @classmethod
    def validate_form_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Form name cannot be empty or whitespace only")
        return v


class ChecklistSave(BaseModel):
    """Schema for saving responses and optionally completing a checklist."""

    owner: EntityRefSchema
    form_name: str = Field(min_length=1, max_length=500)
    responses: dict[str, Any] = Field(default_factory=dict)
    title: str | None = Field(default=None, max_length=500)
    mark_complete: bool = False
    direct_link: EntityRefSchema | None = None
    language: str | None = Field(default=None, max_length=10)
