"""
Configuration — typed settings for chain instrumentation.

Uses pydantic-settings to load from CHAINING_* environment variables with a
.env fallback, validated on construction. Chain semantics take no
configuration; settings only decide whether dispatch is traced and how
loudly structlog reports it.

    CHAINING_TRACE_DISPATCH=true
    CHAINING_TRACE_OPERATION=import-job
    CHAINING_LOG_LEVEL=debug
"""

from __future__ import annotations

import logging

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class ChainingSettings(BaseSettings):
    """
    Root settings for the chaining library.

    Load order (highest priority first):
      1. Environment variables (CHAINING_ prefix)
      2. .env file in the working directory
      3. Default values
    """

    model_config = SettingsConfigDict(
        env_prefix="CHAINING_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    log_level: str = Field(default="INFO", description="structlog filtering level")
    trace_dispatch: bool = Field(
        default=False,
        description="Wrap the dispatcher in LoggingDispatcher",
    )
    trace_operation: str = Field(
        default="chain",
        min_length=1,
        description="Operation label attached to traced dispatch events",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        """Normalise to upper case and reject names the logging module doesn't know."""
        level = value.strip().upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level: {value!r}")
        return level
