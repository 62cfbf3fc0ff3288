from __future__ import annotations

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    """
    Global application-level configuration.

    Covers:
    - environment selection
    - logging behavior
    - limits applied by the HTTP surface
    """

    model_config = SettingsConfigDict(
        env_prefix="BFZIP_",
        env_file=".env",
        extra="ignore",
    )

    # ---- Environment -------------------------------------------------

    env: Literal["local", "staging", "prod"] = "local"

    # ---- Logging -----------------------------------------------------

    log_level: str = "INFO"

    # ---- Limits ------------------------------------------------------

    # Hard cap on combinations returned by a single /zip request
    max_combinations: int = Field(
        default=1000,
        gt=0,
        description="Maximum number of combinations returned per request",
    )


# Singleton settings object
settings = AppSettings()
