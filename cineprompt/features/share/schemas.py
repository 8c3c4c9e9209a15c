"""
CinePrompt Share Schemas
Pydantic models for the create_share_link RPC.
"""

from typing import Any, Dict, Optional
from pydantic import BaseModel, Field


class ShareLinkRequest(BaseModel):
    """Parameters sent to the create_share_link RPC."""
    api_key: str = Field(..., min_length=1, description="CinePrompt API key")
    prompt_text: str = Field(..., min_length=1, description="Generated prompt text")
    state_json: Dict[str, Any] = Field(..., description="Full builder state")
    share_mode: str = Field(default="single", description="Share mode tag")


class ShareLink(BaseModel):
    """Share link returned by the service."""
    url: str = Field(..., min_length=1, description="Public share URL")
    short_code: Optional[str] = Field(default=None, description="Short code embedded in the URL")
