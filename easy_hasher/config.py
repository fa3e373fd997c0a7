# SPDX-License-Identifier: Apache-2.0
# Copyright (C) 2024-2026 The Easy Hasher Authors

"""Configuration management for Easy Hasher."""

import logging
from typing import Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


class Settings(BaseSettings):
    """Library settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="EASY_HASHER_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # File loading
    large_file_warning_bytes: int = 512 * 1024 * 1024  # 512 MiB

    # Logging
    log_level: str = "WARNING"

    @field_validator("large_file_warning_bytes")
    @classmethod
    def _positive_threshold(cls, value: int) -> int:
        if value <= 0:
            raise ValueError(f"large_file_warning_bytes must be positive, got {value}")
        return value

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {value}")
        return level


# Global settings instance
settings = Settings()


def get_settings() -> Settings:
    """Return the process-wide settings instance."""
    return settings


def configure_logging(level: Optional[str] = None) -> logging.Logger:
    """
    Attach a stream handler to the package logger.

    Applications that already configure logging do not need this. The root
    logger is never touched.

    Args:
        level: Log level name (default: settings.log_level)

    Returns:
        The configured "easy_hasher" logger
    """
    logger = logging.getLogger("easy_hasher")
    logger.setLevel((level or settings.log_level).upper())

    if not any(getattr(h, "_easy_hasher", False) for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler._easy_hasher = True  # type: ignore[attr-defined]
        logger.addHandler(handler)

    return logger
