"""
Library configuration loaded from environment variables.

Only logging is configurable: RIF validation itself has no knobs.
Nothing here runs on import; applications opt in by calling
configure_logging().
"""

import logging
from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Library settings with validation.

    Loaded from environment variables prefixed with RIFVEN_,
    e.g. RIFVEN_LOG_LEVEL=DEBUG. A .env file is read when present.
    """

    model_config = SettingsConfigDict(
        env_prefix="RIFVEN_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="WARNING",
        description="Level applied to the rifven logger",
    )
    log_format: str = Field(
        default="%(asctime)s | %(name)s | %(levelname)s | %(message)s",
        description="Format string for the rifven log handler",
    )


class RifvenLogHandler(logging.StreamHandler):
    """Stream handler installed by configure_logging."""


@lru_cache
def get_settings() -> Settings:
    """Get cached library settings."""
    return Settings()


def configure_logging(settings: Settings | None = None) -> logging.Logger:
    """
    Attach a stream handler to the rifven logger.

    Safe to call repeatedly: the handler is installed once and later calls
    only update its level and format.

    Args:
        settings: Settings to apply, defaults to get_settings()

    Returns:
        The configured "rifven" logger
    """
    settings = settings or get_settings()
    logger = logging.getLogger("rifven")
    logger.setLevel(settings.log_level)

    handler = next(
        (h for h in logger.handlers if isinstance(h, RifvenLogHandler)),
        None,
    )
    if handler is None:
        handler = RifvenLogHandler()
        logger.addHandler(handler)

    handler.setFormatter(logging.Formatter(settings.log_format))
    return logger
