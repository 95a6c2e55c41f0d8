"""
Configuration and logging for the client.
"""

import logging
from typing import Optional

from pydantic import SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_BASE_URL = "https://bionic-reading1.p.rapidapi.com"

LOGGER_NAME = "bionic_reading"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_prefix="BIONIC_READING_")

    api_key: Optional[SecretStr] = None
    base_url: str = DEFAULT_BASE_URL
    log_level: str = "INFO"
    debug: bool = False

    @property
    def effective_log_level(self) -> str:
        """``DEBUG`` when debug is on, otherwise the configured level."""
        return "DEBUG" if self.debug else self.log_level


def get_settings() -> Settings:
    return Settings()


def setup_logging(level: Optional[str] = None) -> None:
    """
    Configure logging for the client package.

    Args:
        level: Log level name; read from ``BIONIC_READING_LOG_LEVEL`` and
            ``BIONIC_READING_DEBUG`` when omitted
    """
    if level is None:
        level = get_settings().effective_log_level

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given module name."""
    return logging.getLogger(f"{LOGGER_NAME}.{name}")
