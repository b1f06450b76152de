"""Core cleaning service - CLI agnostic business logic.

This module drives one deduplication run: list the ROM directory, group
files by base title, select a winner per title and move the winners into
the destination directory. Reporting goes through a callback so the CLI
decides how lines are printed.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from romcleaner.config.options import CleanOptions
from romcleaner.core.file_grouper import DuplicateResolver, FileGrouper, ResolutionConfig
from romcleaner.core.filesystem import FileSystem, LocalFileSystem
from romcleaner.core.models import CleanResult, FileOperation, GroupSelection, RomFile
from romcleaner.core.organizer.executor import FileOperationExecutor
from romcleaner.shared.constants import ReportMessages

logger = logging.getLogger(__name__)

Reporter = Callable[[GroupSelection], None]


def format_selection(selection: GroupSelection) -> str:
    """Format the report line of one title.

    Example:
        >>> format_selection(GroupSelection("Game", (), RomFile("Game (USA).bin")))
        'OK: Game - found: Game (USA).bin'
    """
    if selection.winner is not None:
        return ReportMessages.FOUND.format(
            title=selection.title,
            filename=selection.winner.filename,
        )
    return ReportMessages.NOT_FOUND.format(title=selection.title)


class RomCleaner:
    """Runs the scan, group, select and move workflow."""

    def __init__(
        self,
        options: CleanOptions,
        filesystem: FileSystem | None = None,
        reporter: Reporter | None = None,
    ) -> None:
        """Initialize the cleaner.

        Args:
            options: Immutable run options.
            filesystem: Filesystem access, LocalFileSystem when None.
            reporter: Called once per title, in first-seen order,
                before the title's file is moved.
        """
        self.options = options
        self.filesystem = filesystem or LocalFileSystem()
        self.reporter = reporter
        self.grouper = FileGrouper()
        self.resolver = DuplicateResolver(
            ResolutionConfig(preferences=options.preferences, keep_one=options.keep_one),
        )
        self.executor = FileOperationExecutor(self.filesystem)

    def select(self) -> CleanResult:
        """List, group and select without touching the filesystem.

        Raises:
            DirectoryReadError: If the ROM directory cannot be listed.
        """
        filenames = self.filesystem.list_files(self.options.rom_dir)
        grouping = self.grouper.group_files(filenames)

        result = CleanResult(dry_run=True, skipped_files=list(grouping.skipped))
        for title, files in grouping.groups.items():
            result.selections.append(self._select_group(title, files))
        return result

    def run(self) -> CleanResult:
        """Execute the whole run.

        Returns:
            CleanResult with selections and executed (or planned) moves.

        Raises:
            DirectoryReadError: If the ROM directory cannot be listed.
            DirectoryCreateError: If the destination cannot be created.
            RenameError: On the first move that fails.
        """
        options = self.options
        dest_dir = options.effective_dest_dir

        filenames = self.filesystem.list_files(options.rom_dir)
        self.executor.ensure_directory(dest_dir, dry_run=options.dry_run)

        grouping = self.grouper.group_files(filenames)
        logger.info(
            "Found %d title(s) in %s, %d file(s) skipped",
            len(grouping),
            options.rom_dir,
            len(grouping.skipped),
        )

        result = CleanResult(dry_run=options.dry_run, skipped_files=list(grouping.skipped))
        for title, files in grouping.groups.items():
            selection = self._select_group(title, files)
            result.selections.append(selection)
            if self.reporter is not None:
                self.reporter(selection)

            if selection.winner is None:
                continue

            operation = FileOperation(
                source_path=options.rom_dir / selection.winner.filename,
                destination_path=dest_dir / selection.winner.filename,
            )
            self.executor.execute(operation, dry_run=options.dry_run)
            result.operations.append(operation)

        return result

    def _select_group(self, title: str, files: list[RomFile]) -> GroupSelection:
        winner = self.resolver.select_winner(files)
        if winner is None:
            logger.debug("No acceptable variant for %s", title)
        return GroupSelection(title=title, files=tuple(files), winner=winner)


__all__ = ["RomCleaner", "format_selection"]
