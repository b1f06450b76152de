"""Settings loader.

This module builds the Settings for one run: defaults and environment
variables, optionally overlaid with a TOML configuration file. Settings are
built once at startup and passed down explicitly.
"""

from __future__ import annotations

import logging
from pathlib import Path

import toml
from pydantic import ValidationError

from romcleaner.config.models.settings import Settings
from romcleaner.shared.errors import (
    create_config_error,
    create_file_not_found_error,
)

logger = logging.getLogger(__name__)


def load_settings(config_path: str | Path | None = None) -> Settings:
    """Load settings from a TOML file or from the environment only.

    Args:
        config_path: Optional TOML file. When None, defaults and
            ``ROMCLEANER_*`` environment variables are used.

    Returns:
        Validated Settings instance.

    Raises:
        InfrastructureError: If the configuration file does not exist.
        ApplicationError: If the file cannot be parsed or fails validation.
    """
    if config_path is None:
        try:
            return Settings()
        except ValidationError as e:
            raise create_config_error(
                f"Invalid environment configuration: {e.error_count()} error(s)",
                original_error=e,
            ) from e

    config_path = Path(config_path)
    try:
        settings = Settings.from_toml_file(config_path)
    except FileNotFoundError as e:
        raise create_file_not_found_error(config_path, "load_settings", e) from e
    except toml.TomlDecodeError as e:
        raise create_config_error(
            f"Invalid TOML in {config_path}: {e}",
            config_path,
            e,
        ) from e
    except ValidationError as e:
        raise create_config_error(
            f"Invalid configuration in {config_path}: {e.error_count()} error(s)",
            config_path,
            e,
        ) from e

    logger.debug("Loaded configuration from %s", config_path)
    return settings


__all__ = ["load_settings"]
