"""
romset-cleaner Typer CLI Application

This is the main Typer-based CLI application for romset-cleaner.
It provides a type-safe command-line interface with automatic help
generation and shell completion.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from romcleaner.cli.clean_handler import clean_command
from romcleaner.cli.common.context import CliContext, LogLevel, cli_context_var, set_cli_context
from romcleaner.cli.common.options import (
    JsonOutputOption,
    LogFileOption,
    LogLevelOption,
    VerboseOption,
    VersionOption,
)
from romcleaner.cli.common.setup import configure_logging
from romcleaner.cli.scan_handler import scan_command
from romcleaner.shared.constants import (
    CLICommands,
    CLIDefaults,
    CLIHelp,
    CLIOptions,
    CleanDefaults,
)

# Version information
__version__ = CLIDefaults.VERSION


def version_callback(value: bool) -> None:
    """Print version information and exit."""
    if value:
        typer.echo(CLIHelp.VERSION_TEXT.format(version=__version__))
        raise typer.Exit


def main_callback(
    verbose: int,
    log_level: LogLevel | None,
    log_file: Path | None,
    json_output: bool,
    version: bool,
) -> None:
    """
    Main callback function for processing common options.

    This function is called before any command is executed and sets up
    the global CLI context with the parsed options.

    Args:
        verbose: Verbosity level (count-based)
        log_level: Logging level, the configured one when None
        log_file: Rotating log file, the configured one when None
        json_output: Whether to output in JSON format
        version: Whether to show version information
    """
    # Handle version option first
    if version:
        version_callback(value=True)

    context = CliContext(
        verbose=verbose,
        log_level=log_level,
        json_output=json_output,
        log_file=log_file,
    )
    set_cli_context(context)
    configure_logging()


# Create the main Typer app with callback
app = typer.Typer(
    name=CLIHelp.APP_NAME,
    help=CLIHelp.APP_DESCRIPTION,
    add_completion=True,
    rich_markup_mode=CLIHelp.APP_STYLE,
    no_args_is_help=True,
    invoke_without_command=True,
)


@app.callback()
def main(
    verbose: VerboseOption = CLIDefaults.DEFAULT_VERBOSE,
    log_level: LogLevelOption = None,
    log_file: LogFileOption = None,
    json_output: JsonOutputOption = CLIDefaults.DEFAULT_JSON,
    version: VersionOption = False,
) -> None:
    """Main CLI callback with error handling."""
    try:
        main_callback(verbose, log_level, log_file, json_output, version)
    except typer.Exit:
        raise
    except Exception as e:
        # Import here to avoid circular imports
        from romcleaner.cli.common.error_handler import handle_cli_error

        exit_code = handle_cli_error(e, "main-callback", json_output=json_output)
        raise typer.Exit(exit_code) from e


def _json_enabled(json_output: bool) -> bool:
    context = cli_context_var.get()
    return json_output or (context is not None and context.is_json_output_enabled())


@app.command(CLICommands.CLEAN)
def clean_command_typer(
    rom_dir: Path = typer.Argument(
        Path(CleanDefaults.ROM_DIR),
        help=CLIHelp.ROM_DIR_HELP,
    ),
    dest_dir: Optional[Path] = typer.Option(
        None,
        CLIOptions.DEST_DIR,
        CLIOptions.DEST_DIR_SHORT,
        help=CLIHelp.DEST_DIR_HELP,
    ),
    keeped: Optional[str] = typer.Option(
        None,
        CLIOptions.KEEPED,
        CLIOptions.ATTRS,
        CLIOptions.KEEPED_SHORT,
        help=CLIHelp.KEEPED_HELP,
    ),
    dry_run: Optional[bool] = typer.Option(
        None,
        CLIOptions.DRY_RUN,
        help=CLIHelp.DRY_RUN_HELP,
    ),
    keep_one: Optional[bool] = typer.Option(
        None,
        CLIOptions.KEEP_ONE,
        help=CLIHelp.KEEP_ONE_HELP,
    ),
    config: Optional[Path] = typer.Option(
        None,
        CLIOptions.CONFIG,
        CLIOptions.CONFIG_SHORT,
        help=CLIHelp.CONFIG_HELP,
    ),
    json_output: bool = typer.Option(
        CLIDefaults.DEFAULT_JSON,
        CLIOptions.JSON,
        help=CLIHelp.JSON_HELP,
    ),
) -> None:
    """
    Keep one preferred variant per ROM title.

    Files are grouped by the title before their first tag, e.g.
    "Game (Europe) (En,Fr).zip" belongs to "Game". For each title the file
    carrying the most preferred attribute is moved into the destination
    directory. Nothing is moved unless --no-dry-run is given.

    Examples:
        # Show what would be kept, with the default attributes
        romset-cleaner clean ~/roms

        # Keep French releases first, then European ones, and move them
        romset-cleaner clean ~/roms --keeped fr,eu --no-dry-run
    """
    clean_command(
        rom_dir=rom_dir,
        dest_dir=dest_dir,
        keeped=keeped,
        dry_run=dry_run,
        keep_one=keep_one,
        config=config,
        json_output=_json_enabled(json_output),
    )


@app.command(CLICommands.SCAN)
def scan_command_typer(
    rom_dir: Path = typer.Argument(
        Path(CleanDefaults.ROM_DIR),
        help=CLIHelp.ROM_DIR_HELP,
    ),
    keeped: Optional[str] = typer.Option(
        None,
        CLIOptions.KEEPED,
        CLIOptions.ATTRS,
        CLIOptions.KEEPED_SHORT,
        help=CLIHelp.KEEPED_HELP,
    ),
    keep_one: Optional[bool] = typer.Option(
        None,
        CLIOptions.KEEP_ONE,
        help=CLIHelp.KEEP_ONE_HELP,
    ),
    config: Optional[Path] = typer.Option(
        None,
        CLIOptions.CONFIG,
        CLIOptions.CONFIG_SHORT,
        help=CLIHelp.CONFIG_HELP,
    ),
    json_output: bool = typer.Option(
        CLIDefaults.DEFAULT_JSON,
        CLIOptions.JSON,
        help=CLIHelp.JSON_HELP,
    ),
) -> None:
    """
    List ROM titles, their files and attributes.

    Shows which file a clean run would keep for every title, without
    moving anything.

    Example:
        romset-cleaner scan ~/roms --keeped usa,eu
    """
    scan_command(
        rom_dir=rom_dir,
        keeped=keeped,
        keep_one=keep_one,
        config=config,
        json_output=_json_enabled(json_output),
    )


if __name__ == "__main__":
    app()
