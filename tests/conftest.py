"""
Pytest configuration and shared fixtures for romset-cleaner tests.

This module provides common fixtures used across all test modules:
temporary directories, a sample ROM directory and an in-memory
filesystem implementing the FileSystem protocol.
"""

from __future__ import annotations

import logging
import logging.handlers
import os
import tempfile
from collections.abc import Generator
from pathlib import Path

import pytest

from romcleaner.cli.common.context import clear_cli_context
from romcleaner.shared.errors import DirectoryCreateError, DirectoryReadError, RenameError

SAMPLE_ROMS = [
    "FooBar (foo).tst",
    "FooBar (bar) (oof,baz) (boof 1).tst",
    "FooBar Foo Edition.tst",
    "BarFoo (one).tst",
]


class InMemoryFileSystem:
    """FileSystem fake keeping directories and files in dictionaries.

    Failures are injected by setting ``fail_list``, ``fail_make_dir`` or
    ``fail_rename``; every call is recorded in ``calls``.
    """

    def __init__(self, files: dict[Path, list[str]] | None = None) -> None:
        self.directories: dict[Path, list[str]] = {
            Path(directory): list(names) for directory, names in (files or {}).items()
        }
        self.calls: list[tuple[str, ...]] = []
        self.fail_list = False
        self.fail_make_dir = False
        self.fail_rename: set[str] = set()

    def list_files(self, directory: Path) -> list[str]:
        self.calls.append(("list_files", str(directory)))
        if self.fail_list or directory not in self.directories:
            raise DirectoryReadError(directory, OSError("cannot read dir"))
        return sorted(self.directories[directory])

    def exists(self, path: Path) -> bool:
        return path in self.directories

    def make_dir(self, path: Path) -> None:
        self.calls.append(("make_dir", str(path)))
        if self.fail_make_dir:
            raise DirectoryCreateError(path, OSError("cannot create dir"))
        self.directories[path] = []

    def rename(self, source: Path, destination: Path) -> None:
        self.calls.append(("rename", str(source), str(destination)))
        if source.name in self.fail_rename:
            raise RenameError(source, destination, OSError("cannot rename"))
        self.directories[source.parent].remove(source.name)
        self.directories[destination.parent].append(destination.name)

    def files_in(self, directory: Path) -> list[str]:
        return sorted(self.directories.get(directory, []))


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for test files.

    Yields:
        Path to the temporary directory.
    """
    with tempfile.TemporaryDirectory() as temp_path:
        yield Path(temp_path)


@pytest.fixture
def rom_dir(temp_dir: Path) -> Path:
    """Create a ROM directory holding the sample files and two subdirectories.

    Returns:
        Path to the ROM directory.
    """
    for name in SAMPLE_ROMS:
        (temp_dir / name).write_bytes(b"foofoo")
    (temp_dir / "roms").mkdir(mode=0o750)
    (temp_dir / "barbaz").mkdir(mode=0o750)
    return temp_dir


@pytest.fixture
def sample_roms() -> list[str]:
    """Names of the files created by the rom_dir fixture."""
    return list(SAMPLE_ROMS)


@pytest.fixture
def memory_fs() -> InMemoryFileSystem:
    """In-memory filesystem holding the sample files under /roms."""
    return InMemoryFileSystem({Path("/roms"): SAMPLE_ROMS})


@pytest.fixture(autouse=True)
def reset_cli_state() -> Generator[None, None, None]:
    """Reset the CLI context and drop handlers installed by setup_logging."""
    root_logger = logging.getLogger()
    level = root_logger.level
    yield
    clear_cli_context()
    for handler in list(root_logger.handlers):
        if type(handler) in (logging.StreamHandler, logging.handlers.RotatingFileHandler):
            root_logger.removeHandler(handler)
            handler.close()
    root_logger.setLevel(level)


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove romset-cleaner environment variables from the test process."""
    for key in list(os.environ):
        if key.startswith("ROMCLEANER_"):
            monkeypatch.delenv(key)
