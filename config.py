"""Site-wide summary options, loaded from environment / .env file."""

from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict

WEEK_IN_SECONDS = 7 * 24 * 60 * 60


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # --- Site identity -------------------------------------------------
    site_name: str = ""
    home_tagline: str = ""

    # --- Overrides -----------------------------------------------------
    home_summary_override: str = ""

    # --- Generation ----------------------------------------------------
    auto_summary_enabled: bool = True
    summary_additions_enabled: bool = True
    include_site_name_in_additions: bool = True
    additions_connector: str = "on"  # Placement, e.g. Post Title "on" Site Name
    summary_separator: str = "|"
    separator_in_summary: bool = False

    # --- Shared cache --------------------------------------------------
    cache_summaries: bool = True
    summary_cache_ttl: int = WEEK_IN_SECONDS


settings = Settings()
