"""romset-cleaner Settings Configuration Model.

Main Settings class that consolidates all configuration domains.
"""

from __future__ import annotations

from pathlib import Path

import toml
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from romcleaner.config.models.clean_settings import CleanSettings
from romcleaner.config.models.logging_settings import LoggingSettings


class Settings(BaseSettings):
    """Unified configuration access.

    Values come from keyword arguments (e.g. a TOML file), then from
    ``ROMCLEANER_`` environment variables, then from defaults.
    Nested fields use ``__``: ``ROMCLEANER_CLEAN__KEEP_ONE=true``.
    """

    model_config = SettingsConfigDict(
        env_prefix="ROMCLEANER_",
        env_nested_delimiter="__",
        env_ignore_empty=True,
        extra="ignore",
    )

    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    clean: CleanSettings = Field(default_factory=CleanSettings)

    @classmethod
    def from_toml_file(cls, file_path: str | Path) -> Settings:
        """Load settings from TOML file with environment variable fallback."""

        file_path = Path(file_path)
        if not file_path.exists():
            msg = f"Configuration file not found: {file_path}"
            raise FileNotFoundError(msg)

        raw_config = toml.load(file_path)
        return cls(**raw_config)


__all__ = ["Settings"]
