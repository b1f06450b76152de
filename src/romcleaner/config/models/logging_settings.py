"""Logging configuration model."""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from romcleaner.shared.constants import Logging


class LoggingSettings(BaseModel):
    """Logging configuration.

    This class manages logging behavior including level, format
    and optional rotated file output.
    """

    level: str = Field(default=Logging.DEFAULT_LEVEL, description="Logging level")
    format_string: str = Field(
        default=Logging.FORMAT,
        description="Log format string",
        alias="format",
    )
    file: str | None = Field(default=None, description="Log file path, disabled when empty")
    max_bytes: int = Field(
        default=Logging.MAX_BYTES,
        ge=1,
        description="Maximum log file size in bytes",
    )
    backup_count: int = Field(
        default=Logging.BACKUP_COUNT,
        ge=0,
        description="Number of backup log files to keep",
    )

    model_config = {"populate_by_name": True}

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        """Validate and normalize the level name."""
        level = v.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            msg = f"Invalid log level: {v}"
            raise ValueError(msg)
        return level


__all__ = ["LoggingSettings"]
