"""Clean command handler for romset-cleaner CLI.

Builds the run options from settings and command-line overrides, runs the
RomCleaner and prints the report lines as each title is processed.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import typer
from rich.console import Console

from romcleaner.cli.common.error_handler import handle_cli_error
from romcleaner.cli.common.setup import configure_logging
from romcleaner.cli.json_formatter import format_json_output, write_json_output
from romcleaner.config import CleanOptions, load_settings
from romcleaner.core.models import CleanResult, GroupSelection
from romcleaner.core.organizer import RomCleaner, format_selection
from romcleaner.shared.constants import CLICommands, CLIDefaults, CLIMessages, ReportMessages

logger = logging.getLogger(__name__)


def handle_clean_command(options: CleanOptions, console: Console | None = None) -> int:
    """Handle the clean command.

    Args:
        options: Validated run options
        console: Rich console for the report, a new one when None

    Returns:
        Exit code (0 for success)

    Raises:
        InfrastructureError: On the first filesystem failure
    """
    console = console or Console(highlight=False, emoji=False)
    logger.info(CLIMessages.Info.COMMAND_STARTED.format(command=CLICommands.CLEAN))

    if options.json_output:
        result = RomCleaner(options).run()
        write_json_output(
            format_json_output(
                success=True,
                command=CLICommands.CLEAN,
                data=collect_clean_data(options, result),
            ),
        )
    else:
        _print_line(
            console,
            ReportMessages.DIRECTORIES.format(
                rom_dir=options.rom_dir,
                dest_dir=options.effective_dest_dir,
            ),
        )
        _print_line(
            console,
            ReportMessages.KEEPED.format(attributes=",".join(options.preferences)),
        )

        def report(selection: GroupSelection) -> None:
            _print_line(console, format_selection(selection))

        result = RomCleaner(options, reporter=report).run()
        if options.dry_run:
            _print_line(console, ReportMessages.DRY_RUN_NOTICE)

    logger.info(ReportMessages.SUMMARY.format(**result.summary()))
    logger.info(CLIMessages.Info.COMMAND_COMPLETED.format(command=CLICommands.CLEAN))
    return CLIDefaults.EXIT_SUCCESS


def collect_clean_data(options: CleanOptions, result: CleanResult) -> dict[str, Any]:
    """Collect the JSON payload of a clean run."""
    return {
        "rom_dir": str(options.rom_dir),
        "dest_dir": str(options.effective_dest_dir),
        "preferences": list(options.preferences),
        "dry_run": result.dry_run,
        "summary": result.summary(),
        "selections": [
            {
                "title": selection.title,
                "files": [rom.filename for rom in selection.files],
                "winner": selection.winner.filename if selection.winner else None,
            }
            for selection in result.selections
        ],
        "moves": [
            {
                "source": str(operation.source_path),
                "destination": str(operation.destination_path),
            }
            for operation in result.operations
        ],
        "skipped": result.skipped_files,
    }


def clean_command(
    rom_dir: Path,
    dest_dir: Path | None,
    keeped: str | None,
    dry_run: bool | None,
    keep_one: bool | None,
    config: Path | None,
    json_output: bool,
) -> None:
    """Run the clean command from parsed command-line values.

    Values left as None fall back to the loaded settings.

    Raises:
        typer.Exit: If the command fails
    """
    try:
        settings = load_settings(config)
        configure_logging(settings.logging)
        options = CleanOptions.from_settings(
            settings,
            rom_dir=rom_dir,
            dest_dir=dest_dir,
            preferences=keeped,
            dry_run=dry_run,
            keep_one=keep_one,
            json_output=json_output,
        )
        exit_code = handle_clean_command(options)
    except Exception as e:  # noqa: BLE001
        exit_code = handle_cli_error(e, CLICommands.CLEAN, json_output=json_output)

    if exit_code != CLIDefaults.EXIT_SUCCESS:
        raise typer.Exit(exit_code)


def _print_line(console: Console, line: str) -> None:
    # filenames may contain brackets or :name: codes, print them verbatim
    console.print(line, markup=False, emoji=False, highlight=False, soft_wrap=True)
