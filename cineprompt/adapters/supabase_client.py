"""
CinePrompt Supabase Adapter
Singleton client for the Supabase project backing share links.
"""

from typing import Any, Dict, Optional
from supabase import create_client, Client
from cineprompt.core.config import get_settings
from cineprompt.core.logging import get_logger

logger = get_logger(__name__)


class SupabaseAdapter:
    """Singleton adapter for Supabase client."""

    _instance: Optional["SupabaseAdapter"] = None
    _client: Optional[Client] = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self):
        """Initialize Supabase client if not already initialized."""
        if self._client is None:
            settings = get_settings()
            self._client = create_client(
                supabase_url=settings.supabase_url,
                supabase_key=settings.supabase_anon_key
            )
            logger.info(
                "supabase_client_initialized",
                url=settings.supabase_url
            )

    @property
    def client(self) -> Client:
        """Get Supabase client instance."""
        if self._client is None:
            raise RuntimeError("Supabase client not initialized")
        return self._client

    def call_rpc(self, function_name: str, params: Dict[str, Any]) -> Any:
        """
        Call a Postgres function exposed through PostgREST.
        Returns the decoded response payload.

        Raises:
            PostgrestAPIError: If the function reports an error
            httpx.HTTPError: If the backend cannot be reached
        """
        logger.debug(
            "supabase_rpc_request",
            function=function_name,
            params=sorted(params.keys())
        )
        response = self.client.rpc(function_name, params).execute()
        return response.data


def get_supabase() -> SupabaseAdapter:
    """Get Supabase adapter singleton."""
    return SupabaseAdapter()
