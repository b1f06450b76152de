"""
ROM Cleaning Constants

Defaults and message templates for the deduplication workflow.
"""

from typing import ClassVar, Final


class CleanDefaults:
    """Default values for a cleaning run."""

    KEEPED_ATTRIBUTES: Final[tuple[str, ...]] = (
        "french",
        "france",
        "fr",
        "europe",
        "eur",
        "eu",
        "english",
        "en",
        "eng",
        "uk",
        "word",
        "usa",
        "us",
    )
    ROM_DIR = "."
    MOVED_DIR_NAME = "moved"
    DRY_RUN = True
    KEEP_ONE = False
    DEST_DIR_MODE = 0o750


class TagPatterns:
    """Bracket characters and tag-group pattern used by the parser."""

    BRACKET_REPLACEMENTS: ClassVar[dict[str, str]] = {"[": "(", "]": ")"}
    # one pair of parentheses around comma-separated word runs
    ATTRIBUTE_GROUP = r"\((\w+,)*\w+\)"
    WHITESPACE = r"\s+"
    ATTRIBUTE_SEPARATOR = ","


class ReportMessages:
    """Per-group report lines and run header templates."""

    FOUND = "OK: {title} - found: {filename}"
    NOT_FOUND = "KO: {title}"
    DIRECTORIES = "ROM DIR: {rom_dir}, DEST DIR: {dest_dir}"
    KEEPED = "KEEPED ATTRIBUTES: {attributes}"
    DRY_RUN_NOTICE = "Dry run complete. No files were moved."
    SUMMARY = "{groups} titles, {matched} kept, {unmatched} without match, {skipped} skipped"
