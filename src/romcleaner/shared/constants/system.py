"""
System Configuration Constants

Application metadata and logging defaults shared across romset-cleaner.
"""


class Application:
    """Application metadata constants."""

    NAME = "romset-cleaner"
    VERSION = "0.1.0"


class Logging:
    """Logging configuration constants."""

    MAX_BYTES = 10485760  # 10MB
    BACKUP_COUNT = 5
    FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
    DEFAULT_LEVEL = "INFO"
