"""Configuration for romset-cleaner."""

from romcleaner.config.loader import load_settings
from romcleaner.config.models import CleanSettings, LoggingSettings, Settings, parse_preferences
from romcleaner.config.options import CleanOptions

__all__ = [
    "CleanOptions",
    "CleanSettings",
    "LoggingSettings",
    "Settings",
    "load_settings",
    "parse_preferences",
]
