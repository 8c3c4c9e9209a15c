"""
CinePrompt Prompt Assembly
Turns builder state into a single paragraph of prompt text: walks the section
schema, applies merge rules, then groups subject and camera gear phrases into
shared sentences.
"""

from typing import Any, List, Mapping, Union

from cineprompt.features.prompts.merge_rules import MERGE_RULES, MERGE_SKIP_FIELDS, apply_merge_rule
from cineprompt.features.prompts.prompt_text import as_text, ensure_quoted, join_sentences, nl_join
from cineprompt.features.prompts.schemas import PromptState, ResolvedValue
from cineprompt.features.prompts.sections import (
    CINEMATOGRAPHY_SECTION,
    DIALOGUE_FIELD,
    FRAMING_FIELD,
    GEAR_FIELDS,
    MEDIA_ABSORBED_FIELDS,
    MEDIA_SUBCATEGORY_FIELDS,
    MEDIA_TYPE_FIELD,
    SUBJECT_SECTION,
    iter_schema_fields,
)


__all__ = ["build_prompt_text", "compose_media_type", "resolve_field_values", "assemble_segments"]


def _extract_fields(state: Union[PromptState, Mapping[str, Any]]) -> Mapping[str, Any]:
    if isinstance(state, PromptState):
        return state.fields
    return state.get("fields") or {}


def compose_media_type(fields: Mapping[str, Any]) -> str:
    """
    Render media_type together with each selection's subcategory.

    e.g. media_type=["cinematic"], genre=["noir", "thriller"]
    -> "cinematic noir and thriller"
    """
    media_types = fields.get(MEDIA_TYPE_FIELD)
    if not media_types:
        return ""
    if not isinstance(media_types, (list, tuple)):
        media_types = [media_types]

    parts: List[str] = []
    for media_type in media_types:
        subcategory_field = MEDIA_SUBCATEGORY_FIELDS.get(media_type)
        subcategory = fields.get(subcategory_field) if subcategory_field else None
        if not subcategory:
            parts.append(media_type)
        elif media_type == "cinematic":
            genres = subcategory if isinstance(subcategory, (list, tuple)) else [subcategory]
            parts.append(f"cinematic {nl_join(genres)}")
        else:
            parts.append(as_text(subcategory))
    return " ".join(parts)


def _render_plain_value(field: str, value: Any) -> str:
    if field == DIALOGUE_FIELD:
        return f"Dialogue: {ensure_quoted(as_text(value))}"
    return as_text(value)


def resolve_field_values(fields: Mapping[str, Any]) -> List[ResolvedValue]:
    """Walk the schema in order and render every field that has content."""
    resolved: List[ResolvedValue] = []

    for section, field in iter_schema_fields():
        if field in MEDIA_ABSORBED_FIELDS:
            if field == MEDIA_TYPE_FIELD:
                media_text = compose_media_type(fields)
                if media_text:
                    resolved.append(ResolvedValue(media_text, section, field))
            continue

        if field in MERGE_SKIP_FIELDS:
            continue

        if field in MERGE_RULES:
            text = apply_merge_rule(field, fields)
        else:
            value = fields.get(field)
            text = _render_plain_value(field, value) if value else ""

        if text:
            resolved.append(ResolvedValue(text, section, field))

    return resolved


class _SegmentBuffer:
    """Collects segments, holding subject and gear phrases until a boundary."""

    def __init__(self) -> None:
        self.segments: List[str] = []
        self._subject: List[ResolvedValue] = []
        self._gear: List[ResolvedValue] = []

    def flush_subject(self) -> None:
        if not self._subject:
            return
        pieces = [self._subject[0].text]
        for value in self._subject[1:]:
            separator = "; " if value.field == FRAMING_FIELD else ", "
            pieces.append(separator + value.text)
        self.segments.append("".join(pieces))
        self._subject = []

    def flush_gear(self) -> None:
        if not self._gear:
            return
        self.segments.append(", ".join(value.text for value in self._gear))
        self._gear = []

    def flush(self) -> None:
        self.flush_subject()
        self.flush_gear()

    def add(self, value: ResolvedValue) -> None:
        if value.section == SUBJECT_SECTION:
            self.flush_gear()
            self._subject.append(value)
        elif value.section == CINEMATOGRAPHY_SECTION and value.field in GEAR_FIELDS:
            self.flush_subject()
            self._gear.append(value)
        else:
            self.flush()
            self.segments.append(value.text)


def assemble_segments(values: List[ResolvedValue]) -> List[str]:
    """Group resolved values into unformatted sentence segments."""
    buffer = _SegmentBuffer()
    for value in values:
        buffer.add(value)
    buffer.flush()
    return buffer.segments


def build_prompt_text(state: Union[PromptState, Mapping[str, Any]]) -> str:
    """
    Assemble prompt text from builder state.

    Args:
        state: PromptState or a plain mapping with a "fields" mapping

    Returns:
        Prompt paragraph, or "" when no field has content
    """
    fields = _extract_fields(state)
    values = resolve_field_values(fields)
    if not values:
        return ""
    return join_sentences(assemble_segments(values))
