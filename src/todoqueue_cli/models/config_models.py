"""Configuration models for TodoQueue CLI."""

from __future__ import annotations

import logging

from pydantic import BaseModel, Field, field_validator


class StorageConfig(BaseModel):
    """Snapshot storage configuration."""

    data_file: str | None = Field(
        default=None, description="Snapshot path (defaults to the user data dir)"
    )

    @field_validator("data_file")
    @classmethod
    def validate_data_file(cls, v: str | None) -> str | None:
        if v is None:
            return None
        if not v.strip():
            raise ValueError("data_file cannot be empty")
        return v.strip()


class OutputConfig(BaseModel):
    """Output configuration."""

    color: bool = Field(default=True)


class LoggingConfig(BaseModel):
    """Log file configuration."""

    level: str = Field(default="INFO")

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        level = v.upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"unknown log level '{v}'")
        return level


class AppConfig(BaseModel):
    """Main TodoQueue configuration"""

    storage: StorageConfig = Field(default_factory=StorageConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
