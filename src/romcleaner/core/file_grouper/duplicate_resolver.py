"""Duplicate file resolution module for romset-cleaner.

This module selects the single ROM to keep among the variants of one
title, using an ordered list of preferred attributes.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from romcleaner.core.models import RomFile

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ResolutionConfig:
    """Configuration for duplicate resolution.

    Attributes:
        preferences: Attribute tokens to keep, most preferred first.
                     Example: ("europe", "usa")
        keep_one: If True, a title with a single file always keeps it,
                  even when none of its attributes is preferred.
    """

    preferences: tuple[str, ...] = ()
    keep_one: bool = False


class DuplicateResolver:
    """Selects the preferred variant among files sharing a base title.

    The search runs over two nested orderings:
    1. Preferences in the given order (higher priority first)
    2. Files in reverse scan order

    The first file carrying the current preference wins. Walking the files
    backwards favours later-scanned variants among equal matches, e.g.
    "Game (USA) (Rev 1)" is preferred over "Game (USA)" when it was listed
    after it.

    Example:
        >>> resolver = DuplicateResolver(ResolutionConfig(preferences=("usa",)))
        >>> files = [RomFile("Game (USA).bin", ("usa",)),
        ...          RomFile("Game (USA) (Rev 1).bin", ("usa", "rev1"))]
        >>> resolver.select_winner(files).filename
        'Game (USA) (Rev 1).bin'
    """

    def __init__(self, config: ResolutionConfig | None = None) -> None:
        """Initialize the duplicate resolver.

        Args:
            config: Configuration for resolution. If None, uses an empty
                    preference list, so nothing matches unless keep_one applies.
        """
        self.config = config or ResolutionConfig()

    def select_winner(self, files: Sequence[RomFile]) -> RomFile | None:
        """Select the file to keep for one title.

        Args:
            files: Files of one group, in scan order.

        Returns:
            The selected file, or None when no file carries any preferred
            attribute. An empty group gives None.
        """
        if self.config.keep_one and len(files) == 1:
            logger.debug("Keeping single file %s", files[0].filename)
            return files[0]

        return self._find_matching_rom(files)

    def _find_matching_rom(self, files: Sequence[RomFile]) -> RomFile | None:
        for attribute in self.config.preferences:
            for rom in reversed(files):
                if rom.has_attribute(attribute):
                    logger.debug(
                        "Matched attribute %r with %s",
                        attribute,
                        rom.filename,
                    )
                    return rom
        return None


def select_winner(
    files: Sequence[RomFile],
    preferences: Sequence[str],
    *,
    keep_one: bool = False,
) -> RomFile | None:
    """Convenience function to select the preferred file of a group.

    Args:
        files: Files of one group, in scan order.
        preferences: Attribute tokens, most preferred first.
        keep_one: Always keep the file of a single-file group.

    Returns:
        The selected file or None when nothing matches.

    Example:
        >>> a, b = RomFile("X (foo)", ("foo",)), RomFile("X (bar)", ("bar",))
        >>> select_winner([a, b], ["foz", "foo"]) is a
        True
    """
    config = ResolutionConfig(preferences=tuple(preferences), keep_one=keep_one)
    return DuplicateResolver(config=config).select_winner(files)
