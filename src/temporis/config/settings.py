"""Environment configuration and validation.

This module defines strongly-typed settings loaded from environment variables (optionally via a
local `.env` file). Command-line flags take precedence over these values.
"""

from __future__ import annotations

import logging
from datetime import date

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings for the `temporis` command line."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    reference_date: date | None = Field(default=None, alias="TEMPORIS_REFERENCE_DATE")
    output_format: str = Field(default="%Y-%m-%d", alias="TEMPORIS_OUTPUT_FORMAT")
    log_level: str = Field(default="WARNING", alias="LOG_LEVEL")

    @field_validator("output_format")
    @classmethod
    def validate_output_format(cls, value: str) -> str:
        """Validate that the output format contains at least one strftime directive."""

        if "%" not in value:
            raise ValueError("TEMPORIS_OUTPUT_FORMAT must contain a strftime directive")
        return value

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"unknown LOG_LEVEL {value!r}")
        return level

    def reference_or_today(self) -> date:
        """The configured reference date, or today's date when none is set."""

        return self.reference_date if self.reference_date is not None else date.today()


def load_settings() -> Settings:
    """Load and validate settings from environment variables.

    Raises:
        RuntimeError: If the environment configuration is invalid.
    """

    try:
        return Settings()
    except ValidationError as exc:
        raise RuntimeError(f"Invalid environment configuration: {exc}") from exc
