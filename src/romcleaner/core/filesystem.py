"""Filesystem access for romset-cleaner.

The orchestration layer never touches the OS directly: it goes through a
FileSystem object offering the three operations a run needs (list, create
directory, rename). LocalFileSystem is the real implementation; tests pass
an in-memory one.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Protocol, runtime_checkable

from romcleaner.shared.constants import CleanDefaults
from romcleaner.shared.errors import (
    DirectoryCreateError,
    DirectoryReadError,
    RenameError,
)

logger = logging.getLogger(__name__)


@runtime_checkable
class FileSystem(Protocol):
    """Operations the cleaning workflow needs from the filesystem."""

    def list_files(self, directory: Path) -> list[str]:
        """Return the names of non-directory entries, sorted by name.

        Raises:
            DirectoryReadError: If the directory cannot be listed.
        """
        ...

    def exists(self, path: Path) -> bool:
        """Return True when the path exists."""
        ...

    def make_dir(self, path: Path) -> None:
        """Create one directory.

        Raises:
            DirectoryCreateError: If the directory cannot be created.
        """
        ...

    def rename(self, source: Path, destination: Path) -> None:
        """Move a file.

        Raises:
            RenameError: If the file cannot be moved.
        """
        ...


class LocalFileSystem:
    """FileSystem backed by the operating system."""

    def __init__(self, dir_mode: int = CleanDefaults.DEST_DIR_MODE) -> None:
        self.dir_mode = dir_mode

    def list_files(self, directory: Path) -> list[str]:
        try:
            with os.scandir(directory) as entries:
                names = [entry.name for entry in entries if not entry.is_dir()]
        except OSError as e:
            raise DirectoryReadError(directory, e) from e
        return sorted(names)

    def exists(self, path: Path) -> bool:
        return path.exists()

    def make_dir(self, path: Path) -> None:
        try:
            path.mkdir(mode=self.dir_mode)
        except OSError as e:
            raise DirectoryCreateError(path, e) from e
        logger.debug("Created directory %s", path)

    def rename(self, source: Path, destination: Path) -> None:
        try:
            os.rename(source, destination)
        except OSError as e:
            raise RenameError(source, destination, e) from e


__all__ = ["FileSystem", "LocalFileSystem"]
