"""File grouping module for romset-cleaner.

This module groups ROM filenames by base title. Files whose name has no
usable tag region are skipped: they never join a group and are never moved.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field

from romcleaner.core.attributes import extract_attributes
from romcleaner.core.models import RomFile
from romcleaner.core.normalization import normalize_filename
from romcleaner.shared.errors import MalformedFilenameError

logger = logging.getLogger(__name__)


@dataclass
class GroupingResult:
    """Files grouped by base title.

    Attributes:
        groups: Base title -> files in scan order. Titles keep the order
                in which they were first seen.
        skipped: Filenames excluded because they have no tag region.
    """

    groups: dict[str, list[RomFile]] = field(default_factory=dict)
    skipped: list[str] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.groups)


def parse_rom_file(filename: str) -> tuple[str, RomFile]:
    """Parse one filename into its base title and RomFile.

    Raises:
        MalformedFilenameError: If the filename has no valid tag region.
    """
    normalized, base_title = normalize_filename(filename)
    return base_title, RomFile(filename, tuple(extract_attributes(normalized)))


class FileGrouper:
    """Groups ROM files by their normalized base title."""

    def group_files(self, filenames: Iterable[str]) -> GroupingResult:
        """Group filenames by base title.

        Args:
            filenames: Filenames in scan order.

        Returns:
            GroupingResult holding the groups and the skipped filenames.
        """
        result = GroupingResult()

        for filename in filenames:
            try:
                base_title, rom = parse_rom_file(filename)
            except MalformedFilenameError as e:
                logger.debug("Skipping %s: %s", filename, e.message)
                result.skipped.append(filename)
                continue

            result.groups.setdefault(base_title, []).append(rom)

        logger.debug(
            "Grouped %d file(s) into %d title(s), skipped %d",
            sum(len(files) for files in result.groups.values()),
            len(result.groups),
            len(result.skipped),
        )
        return result


def group_roms(filenames: Iterable[str]) -> GroupingResult:
    """Convenience function to group filenames by base title.

    Example:
        >>> result = group_roms(["Game (USA).bin", "Game (Europe).bin", "readme.txt"])
        >>> list(result.groups), result.skipped
        (['Game'], ['readme.txt'])
    """
    return FileGrouper().group_files(filenames)
