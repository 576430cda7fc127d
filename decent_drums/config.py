"""
Decent Sampler Drums Configuration

Environment-based configuration for the drum-kit tool server.
"""
import logging
import re
from functools import lru_cache
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path
from typing import Optional

from pydantic import field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def _app_version_from_package() -> str:
    """Read version from pyproject.toml, the single source of truth."""
    try:
        return version("decent-sampler-drums")
    except PackageNotFoundError:
        pass
    # Fallback: parse pyproject.toml directly (dev / non-installed mode)
    pyproject = Path(__file__).resolve().parent.parent / "pyproject.toml"
    try:
        match = re.search(r'^version\s*=\s*"([^"]+)"', pyproject.read_text(), re.MULTILINE)
    except OSError:
        match = None
    if match:
        return match.group(1)
    return "0.0.0-unknown"


# MIDI note used for round-robin groups that do not name one (middle C).
DEFAULT_ROOT_NOTE: int = 60

MCP_PROTOCOL_VERSION: str = "2024-11-05"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Service Info (app_version: single source is pyproject.toml when installed; else fallback)
    app_name: str = "Decent Sampler Drums"
    app_version: str = _app_version_from_package()
    debug: bool = False
    log_level: str = "INFO"

    # MCP server identity
    server_name: str = "decent-sampler-drums"
    protocol_version: str = MCP_PROTOCOL_VERSION

    # Kit construction
    default_root_note: int = DEFAULT_ROOT_NOTE
    # Base directory for round-robin sample lookups when a tool call omits one
    sample_root: Optional[str] = None

    @field_validator("default_root_note")
    @classmethod
    def _root_note_in_midi_range(cls, value: int) -> int:
        if not 0 <= value <= 127:
            raise ValueError(f"default_root_note must be a MIDI note (0-127), got {value}")
        return value

    @field_validator("log_level")
    @classmethod
    def _known_log_level(cls, value: str) -> str:
        name = value.upper()
        if not isinstance(logging.getLevelName(name), int):
            raise ValueError(f"Unknown log level: {value}")
        return name

    @model_validator(mode="after")
    def _debug_forces_debug_logging(self) -> "Settings":
        """Debug mode always logs at DEBUG regardless of DECENT_DRUMS_LOG_LEVEL."""
        if self.debug:
            self.log_level = "DEBUG"
        return self

    model_config = SettingsConfigDict(
        env_prefix="DECENT_DRUMS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


# Convenience access
settings = get_settings()
