"""File operation execution service.

This module provides the FileOperationExecutor class for executing the
moves of a cleaning run through an injected FileSystem.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from romcleaner.core.filesystem import FileSystem
from romcleaner.core.models import FileOperation

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class OperationResult:
    """Result of a file operation execution.

    Attributes:
        operation: Original FileOperation
        skipped: Whether the operation was skipped (dry-run)
    """

    operation: FileOperation
    skipped: bool = False


class FileOperationExecutor:
    """Executes file operations through a FileSystem.

    Failures are not caught here: the first failing rename propagates
    as RenameError and ends the run. Nothing already moved is rolled back.
    """

    def __init__(self, filesystem: FileSystem) -> None:
        self.filesystem = filesystem

    def ensure_directory(self, directory: Path, *, dry_run: bool = False) -> bool:
        """Create the destination directory when it does not exist.

        Args:
            directory: Destination directory.
            dry_run: If True, never create anything.

        Returns:
            True when the directory was created.

        Raises:
            DirectoryCreateError: If creation fails.
        """
        if dry_run or self.filesystem.exists(directory):
            return False

        self.filesystem.make_dir(directory)
        logger.info("Created destination directory: %s", directory)
        return True

    def execute(self, operation: FileOperation, *, dry_run: bool = False) -> OperationResult:
        """Execute a single move.

        Args:
            operation: FileOperation to execute
            dry_run: If True, skip execution

        Returns:
            OperationResult describing the outcome

        Raises:
            RenameError: If the move fails.
        """
        if dry_run:
            logger.debug("Dry-run, not moving: %s", operation)
            return OperationResult(operation=operation, skipped=True)

        self.filesystem.rename(operation.source_path, operation.destination_path)
        logger.info("Moved %s", operation)
        return OperationResult(operation=operation)


__all__ = ["FileOperationExecutor", "OperationResult"]
