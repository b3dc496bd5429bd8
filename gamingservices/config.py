# gamingservices/config.py
from __future__ import annotations

import logging
from typing import Any, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)

_LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


class Settings(BaseSettings):
    log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")
    startup_payload: Optional[str] = Field(
        default=None,
        validation_alias="GAMING_STARTUP_PAYLOAD",
    )

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_log_level(cls, value: Any) -> str:
        if value is None or value == "":
            return "INFO"
        level = str(value).strip().upper()
        if level == "WARN":
            return "WARNING"
        if level not in _LOG_LEVELS:
            logger.warning("Unknown LOG_LEVEL %r, using INFO", value)
            return "INFO"
        return level

    @field_validator("startup_payload", mode="before")
    @classmethod
    def _blank_startup_payload(cls, value: Any) -> Optional[str]:
        if value is None:
            return None
        if isinstance(value, str) and not value.strip():
            return None
        return value


def load_settings() -> Settings:
    return Settings()
