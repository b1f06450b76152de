"""Configuration models for romset-cleaner."""

from romcleaner.config.models.clean_settings import CleanSettings, parse_preferences
from romcleaner.config.models.logging_settings import LoggingSettings
from romcleaner.config.models.settings import Settings

__all__ = ["CleanSettings", "LoggingSettings", "Settings", "parse_preferences"]
