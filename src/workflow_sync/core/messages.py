"""Localized labels and checklist note templates."""

from dataclasses import dataclass

from src.workflow_sync.core.config import SUPPORTED_LANGUAGES, get_settings
from src.workflow_sync.models.enums import EntityType, PropagationAction

ENTITY_LABELS: dict[str, dict[EntityType, str]] = {
    "en": {
        EntityType.OFFER: "Offer",
        EntityType.SALE: "Sale",
        EntityType.SERVICE_ORDER: "Service Order",
        EntityType.DISPATCH: "Dispatch",
        EntityType.INSTALLATION: "Installation",
    },
    "fr": {
        EntityType.OFFER: "Offre",
        EntityType.SALE: "Vente",
        EntityType.SERVICE_ORDER: "Ordre de Service",
        EntityType.DISPATCH: "Intervention",
        EntityType.INSTALLATION: "Installation",
    },
}

_TEMPLATES: dict[str, dict[str, str]] = {
    "en": {
        "added_note": "Checklist added: {form_name}",
        "added_details": 'A new checklist "{form_name}" has been added.',
        "added_from_note": "Checklist added from {source}: {form_name}",
        "added_from_details": 'A new checklist "{form_name}" has been added from {source}.',
        "completed_note": "Checklist completed: {form_name}",
        "completed_details": 'The checklist "{form_name}" has been completed.',
        "completed_from_note": "Checklist completed from {source}: {form_name}",
        "completed_from_details": 'The checklist "{form_name}" has been completed from {source}.',
    },
    "fr": {
        "added_note": "Checklist ajouté : {form_name}",
        "added_details": 'Un nouveau checklist "{form_name}" a été ajouté.',
        "added_from_note": "Checklist ajouté depuis {source} : {form_name}",
        "added_from_details": 'Un nouveau checklist "{form_name}" a été ajouté depuis {source}.',
        "completed_note": "Checklist complété : {form_name}",
        "completed_details": 'Le checklist "{form_name}" a été complété.',
        "completed_from_note": "Checklist complété depuis {source} : {form_name}",
        "completed_from_details": 'Le checklist "{form_name}" a été complété depuis {source}.',
    },
}


@dataclass(frozen=True)
class NoteText:
    """Short description plus longer details of one audit note."""

    description: str
    details: str


def resolve_language(language: str | None) -> str:
    """Normalize a language tag ("fr-CA" -> "fr"), falling back to the default."""
    if language:
        short = language.lower()[:2]
        if short in SUPPORTED_LANGUAGES:
            return short
    return get_settings().default_language


def entity_label(entity_type: EntityType, language: str | None = None) -> str:
    """Human-readable label for an entity type."""
    return ENTITY_LABELS[resolve_language(language)].get(entity_type, entity_type.value)


def self_note(action: PropagationAction, form_name: str, language: str | None = None) -> NoteText:
    """Note written on the record the checklist belongs to."""
    t = _TEMPLATES[resolve_language(language)]
    return NoteText(
        description=t[f"{action.value}_note"].format(form_name=form_name),
        details=t[f"{action.value}_details"].format(form_name=form_name),
    )


def derived_note(
    action: PropagationAction,
    form_name: str,
    source_type: EntityType,
    language: str | None = None,
) -> NoteText:
    """Note written on linked records, naming where the checklist lives."""
    lang = resolve_language(language)
    t = _TEMPLATES[lang]
    source = entity_label(source_type, lang)
    return NoteText(
        description=t[f"{action.value}_from_note"].format(form_name=form_name, source=source),
        details=t[f"{action.value}_from_details"].format(form_name=form_name, source=source),
    )
