"""Scan command handler for romset-cleaner CLI.

Lists every title of a ROM directory with its files, their attributes and
the variant a clean run would keep. Never touches the filesystem.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import typer
from rich.console import Console
from rich.table import Table
from rich.text import Text

from romcleaner.cli.common.error_handler import handle_cli_error
from romcleaner.cli.common.setup import configure_logging
from romcleaner.cli.json_formatter import format_json_output, write_json_output
from romcleaner.config import CleanOptions, load_settings
from romcleaner.core.models import CleanResult
from romcleaner.core.organizer import RomCleaner
from romcleaner.shared.constants import CLICommands, CLIDefaults, CLIMessages

logger = logging.getLogger(__name__)


def handle_scan_command(options: CleanOptions, console: Console | None = None) -> int:
    """Handle the scan command.

    Args:
        options: Validated run options, only rom_dir and the selection
            policy are used
        console: Rich console for the table, a new one when None

    Returns:
        Exit code (0 for success)
    """
    console = console or Console()
    logger.info(CLIMessages.Info.COMMAND_STARTED.format(command=CLICommands.SCAN))

    result = RomCleaner(options).select()

    if options.json_output:
        write_json_output(
            format_json_output(
                success=True,
                command=CLICommands.SCAN,
                data=collect_scan_data(result),
            ),
        )
    else:
        display_scan_results(result, console)

    logger.info(CLIMessages.Info.COMMAND_COMPLETED.format(command=CLICommands.SCAN))
    return CLIDefaults.EXIT_SUCCESS


def collect_scan_data(result: CleanResult) -> dict[str, Any]:
    """Collect the JSON payload of a scan."""
    return {
        "summary": result.summary(),
        "groups": [
            {
                "title": selection.title,
                "files": [
                    {"filename": rom.filename, "attributes": list(rom.attributes)}
                    for rom in selection.files
                ],
                "winner": selection.winner.filename if selection.winner else None,
            }
            for selection in result.selections
        ],
        "skipped": result.skipped_files,
    }


def display_scan_results(result: CleanResult, console: Console) -> None:
    """Display scan results in a formatted table.

    Args:
        result: Selections computed from the directory listing
        console: Rich console for output
    """
    if not result.selections:
        console.print(CLIMessages.Info.NO_GROUPS)
    else:
        table = Table(title=CLIMessages.Output.SCAN_RESULTS_TITLE)
        table.add_column(CLIMessages.Output.TABLE_COLUMN_TITLE, style="cyan")
        table.add_column(CLIMessages.Output.TABLE_COLUMN_FILE, style="green")
        table.add_column(CLIMessages.Output.TABLE_COLUMN_ATTRIBUTES, style="magenta")
        table.add_column(CLIMessages.Output.TABLE_COLUMN_SELECTED, justify="center")

        # Text cells are never parsed as markup, so "[b]" style tags survive
        for selection in result.selections:
            for index, rom in enumerate(selection.files):
                table.add_row(
                    Text(selection.title if index == 0 else ""),
                    Text(rom.filename),
                    Text(", ".join(rom.attributes)),
                    "*" if rom is selection.winner else "",
                    end_section=index == len(selection.files) - 1,
                )

        console.print(table)

    if result.skipped_files:
        console.print(CLIMessages.Info.SKIPPED_FILES.format(count=len(result.skipped_files)))


def scan_command(
    rom_dir: Path,
    keeped: str | None,
    keep_one: bool | None,
    config: Path | None,
    json_output: bool,
) -> None:
    """Run the scan command from parsed command-line values.

    Raises:
        typer.Exit: If the command fails
    """
    try:
        settings = load_settings(config)
        configure_logging(settings.logging)
        options = CleanOptions.from_settings(
            settings,
            rom_dir=rom_dir,
            preferences=keeped,
            keep_one=keep_one,
            json_output=json_output,
        )
        exit_code = handle_scan_command(options)
    except Exception as e:  # noqa: BLE001
        exit_code = handle_cli_error(e, CLICommands.SCAN, json_output=json_output)

    if exit_code != CLIDefaults.EXIT_SUCCESS:
        raise typer.Exit(exit_code)
