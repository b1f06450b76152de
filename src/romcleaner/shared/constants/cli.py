"""
CLI Configuration Constants

This module contains all constants related to command-line interface
configuration, default values, and user interaction settings.
"""

from typing import Literal

from .system import Application


class CLICommands:
    """CLI command names."""

    CLEAN = "clean"
    SCAN = "scan"


class CLIOptions:
    """CLI option names and flags."""

    # Common options
    VERBOSE = "--verbose"
    VERBOSE_SHORT = "-v"
    LOG_LEVEL = "--log-level"
    LOG_FILE = "--log-file"
    JSON = "--json"
    VERSION = "--version"
    VERSION_SHORT = "-V"
    CONFIG = "--config"
    CONFIG_SHORT = "-c"

    # Clean options
    DEST_DIR = "--dest-dir"
    DEST_DIR_SHORT = "-d"
    KEEPED = "--keeped"
    ATTRS = "--attrs"
    KEEPED_SHORT = "-k"
    DRY_RUN = "--dry-run/--no-dry-run"
    KEEP_ONE = "--keep-one/--no-keep-one"


class CLIHelp:
    """CLI help text and descriptions."""

    VERSION_HELP = "Print version information and exit."
    VERSION_TEXT = "romset-cleaner v{version}"

    APP_NAME = Application.NAME
    APP_DESCRIPTION = "romset-cleaner - keep one preferred ROM variant per title"
    APP_STYLE: Literal["rich"] = "rich"

    ROM_DIR_HELP = "Directory containing the ROM files to process"
    DEST_DIR_HELP = 'Destination directory for kept ROMs, "{rom_dir}/moved" if empty'
    KEEPED_HELP = "Attributes to keep, most preferred first, comma separated"
    DRY_RUN_HELP = "Only print what would be moved"
    KEEP_ONE_HELP = "Move a file when it is the only one of its title"
    CONFIG_HELP = "TOML configuration file"
    JSON_HELP = "Output results in JSON format"
    LOG_FILE_HELP = "Write logs to this file (rotated)"


class CLIDefaults:
    """CLI default values."""

    VERSION = Application.VERSION
    DEFAULT_JSON = False
    DEFAULT_VERBOSE = 0

    EXIT_SUCCESS = 0
    EXIT_ERROR = 1
    EXIT_INTERRUPTED = 130


class CLIMessages:
    """CLI message templates."""

    class Error:
        """Error message templates."""

        INTERRUPTED = "Command interrupted by user"

    class Info:
        """Info message templates."""

        COMMAND_STARTED = "Starting {command} command"
        COMMAND_COMPLETED = "Completed {command} command"
        NO_GROUPS = "[yellow]No ROM titles found.[/yellow]"
        SKIPPED_FILES = "[dim]{count} file(s) without tags were skipped[/dim]"

    class Output:
        """Output formatting templates."""

        SCAN_RESULTS_TITLE = "ROM Titles"
        TABLE_COLUMN_TITLE = "Title"
        TABLE_COLUMN_FILE = "File"
        TABLE_COLUMN_ATTRIBUTES = "Attributes"
        TABLE_COLUMN_SELECTED = "Kept"
