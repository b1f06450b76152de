"""File grouper module for romset-cleaner.

Groups ROM files by base title and selects the variant to keep.

Public API:
    - FileGrouper, group_roms: Group filenames by base title
    - DuplicateResolver, select_winner: Pick the preferred file of a group
    - GroupingResult, ResolutionConfig: Data models
"""

from __future__ import annotations

from romcleaner.core.file_grouper.duplicate_resolver import (
    DuplicateResolver,
    ResolutionConfig,
    select_winner,
)
from romcleaner.core.file_grouper.grouper import (
    FileGrouper,
    GroupingResult,
    group_roms,
    parse_rom_file,
)

__all__ = [
    "DuplicateResolver",
    "FileGrouper",
    "GroupingResult",
    "ResolutionConfig",
    "group_roms",
    "parse_rom_file",
    "select_winner",
]
