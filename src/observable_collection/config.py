# Copyright (c) 2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

import logging
from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

__all__ = (
    "CollectionSettings",
    "configure_logging",
    "settings",
)


class CollectionSettings(BaseSettings, frozen=True):
    """Package settings with environment variable support."""

    model_config = SettingsConfigDict(
        env_prefix="OBSERVABLE_COLLECTION_",
        env_file=(".env", ".env.local"),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    copy_initial: bool = Field(
        default=False,
        description="Copy the initial sequence handed to a new collection "
        "instead of adopting it as backing storage",
    )

    trace_emits: bool = Field(
        default=False,
        description="Log every event emission at DEBUG level",
    )

    log_level: str = Field(
        default="WARNING",
        description="Level applied to the package logger by configure_logging()",
    )

    @field_validator("log_level", mode="before")
    def _validate_log_level(cls, value: Any) -> str:
        level = str(value).strip().upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level: {value!r}")
        return level


def configure_logging(level: str | int | None = None) -> logging.Logger:
    """Apply ``level`` (or the configured ``log_level``) to the package logger."""
    logger = logging.getLogger("observable_collection")
    logger.setLevel(settings.log_level if level is None else level)
    return logger


# Create a singleton instance
settings = CollectionSettings()
