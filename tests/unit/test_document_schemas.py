"""Tests for form-document payload normalization."""

import pytest

from src.workflow_sync.models import EntityType
from src.workflow_sync.schemas import FormDocument

pytestmark = pytest.mark.unit


@pytest.mark.parametrize(
    "wire_type",
    ["service_order", "ServiceOrder", "serviceOrder", "SERVICE_ORDER", "Service_Order"],
)
def test_entity_type_wire_forms_normalized(wire_type: str):
    document = FormDocument.model_validate(
        {
            "id": 1,
            "entity_type": wire_type,
            "entity_id": 3,
            "form_id": 12,
            "created_at": "2024-05-01T10:00:00Z",
        }
    )
    assert document.entity_type == EntityType.SERVICE_ORDER


def test_single_word_type_unchanged():
    document = FormDocument.model_validate(
        {
            "id": 1,
            "entity_type": "Dispatch",
            "entity_id": 4,
            "form_id": 12,
            "created_at": "2024-05-01T10:00:00Z",
        }
    )
    assert document.entity_type == EntityType.DISPATCH
