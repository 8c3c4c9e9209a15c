"""
CinePrompt Prompt Schemas
Pydantic model for the builder state and the intermediate resolved value.
"""

from typing import Any, Dict, NamedTuple

from pydantic import BaseModel, ConfigDict, Field, field_validator


DEFAULT_MODE = "single"
DEFAULT_COMPLEXITY = "simple"


class PromptState(BaseModel):
    """Builder state: mode/complexity tags plus the selected field values."""

    model_config = ConfigDict(extra="allow")

    mode: str = Field(default=DEFAULT_MODE, description="Share mode tag")
    complexity: str = Field(default=DEFAULT_COMPLEXITY, description="Builder complexity tag")
    fields: Dict[str, Any] = Field(..., description="Field name to scalar or multi-select value")

    @field_validator("mode", mode="before")
    @classmethod
    def default_mode(cls, v):
        return v or DEFAULT_MODE

    @field_validator("complexity", mode="before")
    @classmethod
    def default_complexity(cls, v):
        return v or DEFAULT_COMPLEXITY


class ResolvedValue(NamedTuple):
    """One field's rendered text, tagged with where it came from."""
    text: str
    section: str
    field: str
