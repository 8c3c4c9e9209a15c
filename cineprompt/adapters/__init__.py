"""CinePrompt Adapters Module"""

from .credential_store import get_credential_store, resolve_api_key  # noqa: F401
from .supabase_client import get_supabase  # noqa: F401
