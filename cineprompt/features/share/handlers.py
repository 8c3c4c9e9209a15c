"""
CinePrompt Share Handlers
Creates share links for generated prompts through the Supabase RPC.
"""

import re
from typing import Any, Dict, Optional

import httpx
from pydantic import ValidationError as PydanticValidationError
from supabase import PostgrestAPIError

from cineprompt.adapters.supabase_client import get_supabase
from cineprompt.core.config import get_settings
from cineprompt.core.errors import AuthenticationError, ThirdPartyError
from cineprompt.core.logging import get_logger
from cineprompt.features.share.schemas import ShareLink, ShareLinkRequest


__all__ = ["create_share_link", "is_auth_failure"]

logger = get_logger(__name__)

AUTH_ERROR_CODES = {"28000", "42501", "PGRST301", "PGRST302", "401", "403"}
AUTH_ERROR_PATTERN = re.compile(
    r"unauthori[sz]ed|(invalid|unknown|revoked|expired) api[ _]key", re.IGNORECASE
)


def is_auth_failure(code: Optional[str], message: str) -> bool:
    """Decide whether a backend error means the API key was rejected."""
    if code and str(code) in AUTH_ERROR_CODES:
        return True
    return bool(AUTH_ERROR_PATTERN.search(message or ""))


def _error_text(exc: PostgrestAPIError) -> str:
    return getattr(exc, "message", None) or str(exc)


def _parse_share_link(data: Any) -> ShareLink:
    if isinstance(data, list):
        data = data[0] if data else None
    if not isinstance(data, dict):
        raise ThirdPartyError(
            message="CinePrompt API error: unexpected response from share service",
            details={"response": repr(data)[:200]}
        )
    try:
        return ShareLink.model_validate(data)
    except PydanticValidationError as e:
        raise ThirdPartyError(
            message="CinePrompt API error: share service response missing url",
            details={"response_keys": sorted(data.keys()), "error": str(e)}
        )


def create_share_link(
    api_key: str,
    state: Dict[str, Any],
    prompt_text: str,
    mode: Optional[str] = None,
    correlation_id: Optional[str] = None,
) -> ShareLink:
    """
    Publish prompt text and its builder state, returning the share link.

    Args:
        api_key: CinePrompt API key
        state: Full builder state, stored alongside the text
        prompt_text: Generated prompt text
        mode: Share mode tag (defaults to "single")
        correlation_id: Optional correlation ID for tracking

    Returns:
        ShareLink with url and short_code

    Raises:
        AuthenticationError: If the service rejects the API key
        ThirdPartyError: If the service fails or cannot be reached
    """
    request = ShareLinkRequest(
        api_key=api_key,
        prompt_text=prompt_text,
        state_json=state,
        share_mode=mode or "single",
    )
    settings = get_settings()

    logger.info(
        "share_link_request",
        correlation_id=correlation_id,
        share_mode=request.share_mode,
        prompt_length=len(prompt_text),
        field_count=len(state.get("fields") or {}),
    )

    try:
        data = get_supabase().call_rpc(settings.share_rpc_function, request.model_dump())
    except PostgrestAPIError as e:
        message = _error_text(e)
        code = getattr(e, "code", None)
        logger.error(
            "share_link_rejected",
            correlation_id=correlation_id,
            code=code,
            error=message
        )
        if is_auth_failure(code, message):
            raise AuthenticationError(
                message=f"CinePrompt API error: {message}",
                details={"code": code}
            )
        raise ThirdPartyError(
            message=f"CinePrompt API error: {message}",
            details={"code": code}
        )
    except httpx.HTTPError as e:
        logger.error(
            "share_service_unreachable",
            correlation_id=correlation_id,
            error=str(e)
        )
        raise ThirdPartyError(
            message=f"CinePrompt API unreachable: {e}",
            details={"url": settings.supabase_url}
        )

    share_link = _parse_share_link(data)
    logger.info(
        "share_link_created",
        correlation_id=correlation_id,
        short_code=share_link.short_code,
        url=share_link.url
    )
    return share_link
