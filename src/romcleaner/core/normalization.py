"""Filename normalization for ROM titles.

Square brackets and parentheses are equivalent tag delimiters in ROM set
naming conventions ("Game [EUR] (Rev 1).bin"). Normalization rewrites every
bracket to a parenthesis and splits off the base title used for grouping.
"""

from __future__ import annotations

import logging

from romcleaner.shared.constants import TagPatterns
from romcleaner.shared.errors import MalformedFilenameError

logger = logging.getLogger(__name__)

_BRACKET_TABLE = str.maketrans(TagPatterns.BRACKET_REPLACEMENTS)


def normalize_brackets(filename: str) -> str:
    """Replace every ``[`` with ``(`` and every ``]`` with ``)``."""
    return filename.translate(_BRACKET_TABLE)


def normalize_filename(filename: str) -> tuple[str, str]:
    """Normalize a ROM filename and extract its base title.

    Args:
        filename: Raw filename as listed in the ROM directory.

    Returns:
        Tuple of (normalized_filename, base_title). The normalized filename
        is the full name with brackets rewritten, since attribute extraction
        scans every parenthesized group, not only the first one.

    Raises:
        MalformedFilenameError: If the filename has no parenthesized region,
            or the region is empty or inverted.

    Example:
        >>> normalize_filename("Game [EUR] (Rev 1).bin")
        ('Game (EUR) (Rev 1).bin', 'Game')
    """
    cleaned = normalize_brackets(filename)

    separator_pos = cleaned.find("(")
    if separator_pos == -1:
        raise MalformedFilenameError(cleaned, "No tag region found")

    # rfind returns -1 when missing, which also fails this check
    if cleaned.rfind(")") <= separator_pos + 1:
        raise MalformedFilenameError(cleaned, "Empty or inverted tag region")

    base_title = cleaned[:separator_pos].strip()
    return cleaned, base_title


__all__ = ["normalize_brackets", "normalize_filename"]
