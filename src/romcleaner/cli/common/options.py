"""
Reusable Typer Options Module

This module provides reusable Typer option types shared by the main
callback, so option names and help texts stay consistent.

Usage:
    def main(verbose: VerboseOption = 0) -> None: ...
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated, Optional

import typer

from romcleaner.cli.common.context import LogLevel
from romcleaner.shared.constants import CLIHelp, CLIOptions

# Verbose option - count-based for multiple -v flags
VerboseOption = Annotated[
    int,
    typer.Option(
        CLIOptions.VERBOSE,
        CLIOptions.VERBOSE_SHORT,
        count=True,
        help="Enable verbose output (equivalent to --log-level DEBUG).",
    ),
]

# Log level option - enum-based with case-insensitive choices
LogLevelOption = Annotated[
    Optional[LogLevel],
    typer.Option(
        CLIOptions.LOG_LEVEL,
        case_sensitive=False,
        help="Set the logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL). Overrides the configured level.",
    ),
]

LogFileOption = Annotated[
    Optional[Path],
    typer.Option(
        CLIOptions.LOG_FILE,
        help=CLIHelp.LOG_FILE_HELP,
    ),
]

# JSON output option - flag-based
JsonOutputOption = Annotated[
    bool,
    typer.Option(
        CLIOptions.JSON,
        help="Enable machine-readable JSON output instead of human-readable format.",
    ),
]

# Version option - for main app only
VersionOption = Annotated[
    bool,
    typer.Option(
        CLIOptions.VERSION,
        CLIOptions.VERSION_SHORT,
        help=CLIHelp.VERSION_HELP,
        is_eager=True,
    ),
]
