# Copyright (c) 2023-2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

import logging
from typing import Any, ClassVar

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

__all__ = ("AppSettings", "settings")


class AppSettings(BaseSettings, frozen=True):
    """Package settings with environment variable support."""

    model_config = SettingsConfigDict(
        env_prefix="MODELCOLLECTION_",
        env_file=(".env", ".env.local"),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    LOG_LEVEL: str = Field(
        default="INFO", description="Level of the `modelcollection` logger"
    )

    EMITTER_SUPPRESS_HANDLER_ERRORS: bool = Field(
        default=False,
        description="Log and swallow handler exceptions instead of raising",
    )

    EMITTER_WARN_LISTENERS: int = Field(
        default=0,
        ge=0,
        description="Warn when an event has more listeners than this (0 = off)",
    )

    _instance: ClassVar[Any] = None

    @field_validator("LOG_LEVEL", mode="before")
    def _validate_log_level(cls, value: Any) -> str:
        if isinstance(value, int):
            return logging.getLevelName(value)
        value = str(value).upper()
        if not isinstance(logging.getLevelName(value), int):
            raise ValueError(f"Unknown log level: {value}")
        return value

    @property
    def log_level(self) -> int:
        """The numeric logging level for `LOG_LEVEL`."""
        return logging.getLevelName(self.LOG_LEVEL)


settings = AppSettings()
AppSettings._instance = settings
