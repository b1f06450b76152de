"""
Data models for romset-cleaner core operations.

This module defines the fundamental data structures used throughout
the deduplication workflow: scanned ROM files, per-title selections
and the file operations derived from them.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path


@dataclass(frozen=True)
class RomFile:
    """
    A ROM file and the attribute tokens parsed from its tags.

    Instances are created once during the scan and never mutated;
    selection only designates one of them as the winner of its group.
    """

    filename: str
    attributes: tuple[str, ...] = ()

    def has_attribute(self, attribute: str) -> bool:
        """Return True when the file carries the given attribute token."""
        return attribute in self.attributes

    def __str__(self) -> str:
        """Return a human-readable string representation."""
        return f"RomFile: {self.filename}"


@dataclass(frozen=True)
class GroupSelection:
    """Outcome of the selection for one base title."""

    title: str
    files: tuple[RomFile, ...]
    winner: RomFile | None = None

    @property
    def matched(self) -> bool:
        """Whether an acceptable variant was found."""
        return self.winner is not None


@dataclass(frozen=True)
class FileOperation:
    """
    A single move to be performed.

    The winner of a group is moved from the ROM directory
    into the destination directory under the same name.
    """

    source_path: Path
    destination_path: Path

    def __str__(self) -> str:
        """Return a human-readable string representation."""
        return f"move: {self.source_path} -> {self.destination_path}"


@dataclass
class CleanResult:
    """Aggregated result of a cleaning run."""

    dry_run: bool
    selections: list[GroupSelection] = field(default_factory=list)
    operations: list[FileOperation] = field(default_factory=list)
    skipped_files: list[str] = field(default_factory=list)

    @property
    def matched(self) -> int:
        """Number of titles with a winner."""
        return sum(1 for selection in self.selections if selection.matched)

    @property
    def unmatched(self) -> int:
        """Number of titles without an acceptable variant."""
        return len(self.selections) - self.matched

    def summary(self) -> dict[str, int]:
        """Return the run counters."""
        return {
            "groups": len(self.selections),
            "matched": self.matched,
            "unmatched": self.unmatched,
            "skipped": len(self.skipped_files),
            "moves": len(self.operations),
        }


__all__ = ["CleanResult", "FileOperation", "GroupSelection", "RomFile"]
