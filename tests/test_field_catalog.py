"""Tests for the field catalog."""

import pytest

from cineprompt.core.errors import NotFoundError
from cineprompt.features.fields.catalog import (
    describe_field,
    get_field_values,
    is_free_text,
    list_field_names,
    load_field_catalog,
)
from cineprompt.features.prompts.sections import iter_schema_fields


def test_catalog_covers_every_schema_field():
    catalog = load_field_catalog()
    missing = [field for _, field in iter_schema_fields() if field not in catalog]
    assert missing == []


def test_enumerated_field():
    values = get_field_values("movement")
    assert "static" in values
    assert not is_free_text(values)
    assert describe_field("movement") == f"({len(values)} options)"


def test_free_text_field():
    entry = get_field_values("voiceover_text")
    assert is_free_text(entry)
    assert describe_field("voiceover_text") == "(free text)"


def test_unknown_field_raises():
    with pytest.raises(NotFoundError) as exc_info:
        get_field_values("not_a_field")
    assert exc_info.value.message == "Unknown field: not_a_field"
    assert exc_info.value.exit_code == 1


def test_field_names_keep_catalog_order():
    names = list_field_names()
    assert names[0] == "media_type"
    assert names.index("shot_type") < names.index("music")
