"""Runtime settings read from ``CLIC_*`` environment variables."""

from __future__ import annotations

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

DEFAULT_ESCAPE_TIMEOUT = 0.05
DEFAULT_LOG_LEVEL = "WARNING"


class Settings(BaseSettings):
    """
    Library settings.

    Attributes:
        escape_timeout: Seconds to wait for each byte following ESC before
            treating it as a standalone Escape key press.
        log_level: Level name used by ``setup_logging`` when none is given.
    """

    model_config = {
        "env_prefix": "CLIC_",
        "env_ignore_empty": True,
        "extra": "ignore",
        "frozen": True,
    }

    escape_timeout: float = Field(default=DEFAULT_ESCAPE_TIMEOUT, ge=0)
    log_level: str = Field(default=DEFAULT_LOG_LEVEL)

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_level(cls, value: str) -> str:
        return str(value).strip().upper() or DEFAULT_LOG_LEVEL


def get_settings() -> Settings:
    """Current settings; the environment is re-read on every call."""
    return Settings()
