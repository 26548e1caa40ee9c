"""Business record payloads returned by the record gateways."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from src.workflow_sync.models import parse_entity_id


class RecordSummary(BaseModel):
    """The part of a business record the chain resolver reads.

    Only the foreign keys are modelled; everything else the record API
    returns is ignored.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: int | None = None
    sale_id: int | None = Field(default=None, alias="saleId")
    offer_id: int | None = Field(default=None, alias="offerId")

    @field_validator("id", "sale_id", "offer_id", mode="before")
    @classmethod
    def coerce_reference(cls, v: Any) -> int | None:
        # Record APIs send ids as numbers or numeric strings
        return parse_entity_id(v)
