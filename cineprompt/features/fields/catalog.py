"""
Field catalog: allowed values for each builder field.
Read-only reference data used to list valid values; prompt assembly never consults it.
"""

from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, List, Union

import yaml

from cineprompt.core.errors import NotFoundError

FIELD_DATA_DIR = Path(__file__).resolve().parent / "field_data"
FREE_TEXT = "free_text"

CatalogEntry = Union[List[str], Dict[str, Any]]


@lru_cache(maxsize=None)
def load_field_catalog() -> Dict[str, CatalogEntry]:
    """Load the field catalog from disk and cache the result."""
    catalog_path = FIELD_DATA_DIR / "field_values.yaml"
    with catalog_path.open("r", encoding="utf-8") as fp:
        return yaml.safe_load(fp) or {}


def list_field_names() -> List[str]:
    return list(load_field_catalog().keys())


def is_free_text(entry: CatalogEntry) -> bool:
    return isinstance(entry, dict) and entry.get("type") == FREE_TEXT


def get_field_values(name: str) -> CatalogEntry:
    """
    Return the catalog entry for a field.

    Raises:
        NotFoundError: If the field is not in the catalog
    """
    catalog = load_field_catalog()
    if name not in catalog:
        raise NotFoundError(
            message=f"Unknown field: {name}",
            details={"hint": 'Run "cineprompt fields" to see all field names.'}
        )
    return catalog[name]


def describe_field(name: str) -> str:
    """Short summary, e.g. "(12 options)" or "(free text)"."""
    entry = get_field_values(name)
    if is_free_text(entry) or not isinstance(entry, list):
        return "(free text)"
    return f"({len(entry)} options)"
