"""
CinePrompt Credential Store
Local JSON record holding the user's API key (~/.cineprompt/config.json).
"""

import json
from pathlib import Path
from typing import Any, Dict, Optional

from cineprompt.core.config import get_settings
from cineprompt.core.logging import get_logger

logger = get_logger(__name__)

API_KEY_FIELD = "apiKey"


class CredentialStore:
    """Reads and writes the local credential record."""

    def __init__(self, path: Path):
        self.path = Path(path)

    def load(self) -> Dict[str, Any]:
        """Return the stored record, or {} if there is none."""
        try:
            with self.path.open("r", encoding="utf-8") as fh:
                record = json.load(fh)
        except FileNotFoundError:
            return {}
        except (OSError, json.JSONDecodeError) as e:
            logger.warning(
                "credential_record_unreadable",
                path=str(self.path),
                error=str(e)
            )
            return {}

        if not isinstance(record, dict):
            logger.warning("credential_record_not_object", path=str(self.path))
            return {}
        return record

    def save(self, record: Dict[str, Any]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with self.path.open("w", encoding="utf-8") as fh:
            json.dump(record, fh, indent=2)

    def get_api_key(self) -> Optional[str]:
        return self.load().get(API_KEY_FIELD) or None

    def save_api_key(self, api_key: str) -> None:
        """Store the API key, keeping any other keys in the record."""
        record = self.load()
        record[API_KEY_FIELD] = api_key
        self.save(record)
        logger.info("api_key_saved", path=str(self.path))


def get_credential_store() -> CredentialStore:
    """Credential store at the configured location."""
    return CredentialStore(get_settings().config_file)


def resolve_api_key(override: Optional[str] = None) -> Optional[str]:
    """
    Resolve the API key to use.

    Precedence: explicit override > CINEPROMPT_API_KEY > stored record.
    Returns None when no source provides one.
    """
    if override:
        return override

    settings = get_settings()
    if settings.api_key:
        return settings.api_key

    return get_credential_store().get_api_key()
