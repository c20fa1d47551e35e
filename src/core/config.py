"""Application configuration.

Why here:
- One typed contract (pydantic-settings) for the few constants the adapters
  and the CLI share, instead of literals scattered across modules.
- Every invocation is independent: only values passed explicitly (tests) are
  used. Environment variables, `.env` and secret files are not read.
"""

from __future__ import annotations

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource, SettingsConfigDict

__version__ = "1.0.0"

_LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


class AppSettings(BaseSettings):
    """Central settings with fixed defaults."""

    model_config = SettingsConfigDict(extra="ignore")

    user_agent: str = Field(
        default=f"naive-httpie/{__version__}",
        min_length=1,
        description="User-Agent sent with every request.",
    )
    log_level: str = Field(
        default="WARNING",
        description="Root log level when --verbose is not given (logs go to stderr).",
    )

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {sorted(_LOG_LEVELS)}")
        return level

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        # Init kwargs only: no configuration leaks in from the environment.
        return (init_settings,)
