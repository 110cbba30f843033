"""
Runtime settings for the scout engine.

Values come from environment variables or a local ``.env`` file. The
search-provider credential is never stored in source.
"""

from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ScoutConfigError(ValueError):
    """Raised when the scout cannot run with the configuration it was given."""


class ScoutSettings(BaseSettings):
    """Settings for one scout run. Unset or empty variables keep their defaults."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        extra="ignore",
        populate_by_name=True,
    )

    brave_api_key: Optional[str] = Field(default=None, validation_alias="BRAVE_API_KEY")
    config_path: Path = Field(default=Path("mc-config.json"), validation_alias="MC_CONFIG_PATH")
    results_path: Path = Field(default=Path("scout-results.json"), validation_alias="SCOUT_RESULTS_PATH")
    scoring_profile_path: Path = Field(
        default=Path("config/scoring.yaml"), validation_alias="SCOUT_SCORING_PROFILE"
    )

    # Seconds between successive provider calls
    request_delay: float = Field(default=1.0, ge=0.0, validation_alias="SCOUT_REQUEST_DELAY")
    # Per-call HTTP timeout in seconds
    request_timeout: float = Field(default=15.0, gt=0.0, validation_alias="SCOUT_REQUEST_TIMEOUT")

    results_per_query: int = Field(default=5, ge=1, le=20)
    freshness: str = "pw"
    min_score: int = Field(default=35, ge=5, le=100, validation_alias="SCOUT_MIN_SCORE")
    max_total: int = Field(default=50, ge=1, validation_alias="SCOUT_MAX_TOTAL")
