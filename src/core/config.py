"""Core configuration.

Why here:
- Centralises environment variables (pydantic-settings) without polluting the CLI.
- Lets adapters (HTTP, renderer) read configuration consistently.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from core.domain.language import Language


def get_user_config_dir() -> Path:
    """Per-user configuration directory (cross-platform, no dependencies)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "eco-archive"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "eco-archive"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "eco-archive"
    return Path.home() / ".config" / "eco-archive"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


class AppSettings(BaseSettings):
    """Central application configuration.

    Why pydantic-settings:
    - Typed and validated at the edge (env vars) without leaking into the Core.
    - A single configuration contract for CLI and adapters.
    """

    model_config = SettingsConfigDict(
        env_prefix="ECO_ARCHIVE_",
        extra="ignore",
        case_sensitive=False,
        # Project first (dev), then the user's global config.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    http_timeout_seconds: float = Field(
        default=20.0,
        gt=0,
        description="Per-request timeout (seconds).",
    )
    user_agent: str = Field(
        default="eco-archive/0.1 (+https://local)",
        min_length=1,
        description="User-Agent sent to Wikidata (their policy requires a descriptive one).",
    )

    entity_data_url: str = Field(
        default="https://www.wikidata.org/wiki/Special:EntityData/",
        min_length=8,
        description="Base URL of the entity-by-id JSON endpoint.",
    )
    search_api_url: str = Field(
        default="https://www.wikidata.org/w/api.php",
        min_length=8,
        description="MediaWiki action API used for keyword search.",
    )
    entity_page_url: str = Field(
        default="https://www.wikidata.org/wiki/",
        min_length=8,
        description="Base URL for human-facing entity pages (the 'view on Wikidata' link).",
    )

    default_language: Language = Field(
        default=Language.ITALIAN,
        description="Language for search, labels and page texts (it/en).",
    )
    default_artist: str = Field(default="Giuseppe Penone", min_length=1)
    default_work: str = Field(default="Albero della Vita", min_length=1)
    default_year: str = Field(default="1962", min_length=1)

    site_name: str = Field(
        default="Biennale Eco Archive",
        min_length=1,
        description="Suffix of the document title.",
    )
    edition_year: str = Field(
        default="1962",
        min_length=1,
        description="Edition the error panel links back to (edition-<year>.html).",
    )

    log_level: str = Field(
        default="INFO",
        description="Root log level for the CLI (DEBUG, INFO, WARNING, ...).",
    )
