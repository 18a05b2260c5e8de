"""Process-level runtime settings (read from the environment)."""

from __future__ import annotations

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class PricingSettings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="MEMBERSHIP_PRICER_")

    # Alternative pricing YAML; the packaged default is used when unset
    pricing_file: Path | None = None

    log_level: str = "INFO"
