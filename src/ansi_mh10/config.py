"""
MH10.8.2 Parser Configuration

Configuration settings using pydantic-settings for environment variable support.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ParserConfig(BaseSettings):
    """
    Configuration for the MH10.8.2 parser.

    Reads from environment variables with ANSI_MH10_ prefix.
    """

    model_config = SettingsConfigDict(
        env_prefix="ANSI_MH10_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Validation
    match_timeout_seconds: float = Field(
        default=1.0,
        description="Execution budget for one pattern match (<= 0 disables it)",
    )
    include_descriptors: bool = Field(
        default=True,
        description="Look identifiers up in the catalog and validate their values",
    )

    # Catalog
    catalog_path: Path | None = Field(
        default=None,
        description="JSON catalog file to use instead of the bundled one",
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Logging level",
    )


def load_config() -> ParserConfig:
    """Load configuration from environment."""
    return ParserConfig()
