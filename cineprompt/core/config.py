"""
CinePrompt Configuration Module
Loads and validates environment variables using Pydantic Settings.
"""

from pathlib import Path
from typing import Literal, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


DEFAULT_SUPABASE_URL = "https://jbeuvbsremektkwqmnps.supabase.co"
DEFAULT_SUPABASE_ANON_KEY = "sb_publishable_W-tmZXUJsPIwjMBQVeH2bw_VIIS5PWw"


class Settings(BaseSettings):
    """Application settings loaded from CINEPROMPT_* environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="CINEPROMPT_",
        case_sensitive=False,
        extra="ignore"
    )

    # Application
    environment: Literal["development", "staging", "production"] = "production"
    debug: bool = False
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "ERROR"

    # Credentials
    api_key: str = Field(default="", description="CinePrompt API key (Pro subscribers)")
    api_key_prefix: str = Field(default="cp_", description="Prefix every issued API key carries")
    config_dir: Path = Field(
        default_factory=lambda: Path.home() / ".cineprompt",
        description="Directory holding the local credential record"
    )

    # Supabase
    supabase_url: str = Field(default=DEFAULT_SUPABASE_URL, description="Supabase project URL")
    supabase_anon_key: str = Field(default=DEFAULT_SUPABASE_ANON_KEY, description="Supabase publishable key")
    share_rpc_function: str = Field(default="create_share_link", description="RPC creating share links")

    @field_validator("supabase_url")
    @classmethod
    def validate_supabase_url(cls, v):
        if not v.startswith("https://"):
            raise ValueError("Supabase URL must start with https://")
        return v.rstrip("/")

    @field_validator("config_dir")
    @classmethod
    def expand_config_dir(cls, v):
        return Path(v).expanduser()

    @property
    def config_file(self) -> Path:
        return self.config_dir / "config.json"


# Singleton instance
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get or create settings singleton."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings
