from __future__ import annotations

import logging

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Logging
    LOG_LEVEL: str = "INFO"

    # EXPLOSION effect
    EXPLOSION_ENABLED: bool = True
    # Operator cap; can only lower the hard 20.0 ceiling.
    EXPLOSION_MAX_POWER: float = Field(default=20.0, ge=0.0, le=20.0)

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


def configure_logging(settings: Settings) -> None:
    level = getattr(logging, str(settings.LOG_LEVEL).strip().upper(), logging.INFO)
    logging.getLogger("triggerfx").setLevel(level)
