"""Cleaning configuration models.

This module contains the configuration model for the deduplication run:
preferred attributes, dry-run default and the single-file policy.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, field_validator

from romcleaner.shared.constants import CleanDefaults


def parse_preferences(value: str | list[str] | tuple[str, ...]) -> tuple[str, ...]:
    """Parse a comma-separated preference list.

    Whitespace is removed, tokens are lowercased, empty items are dropped
    and the order is preserved.

    Example:
        >>> parse_preferences("USA, eur ,, jp")
        ('usa', 'eur', 'jp')
    """
    items = value.split(",") if isinstance(value, str) else value
    tokens = ("".join(item.split()).lower() for item in items)
    return tuple(token for token in tokens if token)


class CleanSettings(BaseModel):
    """Configuration for the deduplication run.

    Attributes:
        keeped: Attributes to keep, most preferred first, comma separated.
        dry_run: Only report what would be moved. Default: True
        keep_one: Keep a title's file when it is the only one. Default: False
        moved_dir_name: Name of the destination directory created inside
                        the ROM directory when no destination is given.
    """

    keeped: str = Field(
        default=",".join(CleanDefaults.KEEPED_ATTRIBUTES),
        description="Attributes to keep, in comma separated format",
    )
    dry_run: bool = Field(default=CleanDefaults.DRY_RUN, description="Print what will be moved")
    keep_one: bool = Field(
        default=CleanDefaults.KEEP_ONE,
        description="Move the file if it's the only one of its kind",
    )
    moved_dir_name: str = Field(
        default=CleanDefaults.MOVED_DIR_NAME,
        min_length=1,
        description="Default destination directory name inside the ROM directory",
    )

    @field_validator("keeped", mode="before")
    @classmethod
    def join_keeped_list(cls, v: Any) -> Any:
        """Accept a TOML array as well as a comma-separated string."""
        if isinstance(v, (list, tuple)):
            return ",".join(str(item) for item in v)
        return v

    @field_validator("keeped")
    @classmethod
    def validate_keeped(cls, v: str) -> str:
        """Validate that at least one attribute is given."""
        if not parse_preferences(v):
            msg = "keeped must contain at least one attribute"
            raise ValueError(msg)
        return v

    @field_validator("moved_dir_name")
    @classmethod
    def validate_moved_dir_name(cls, v: str) -> str:
        """Validate that the directory name is a single path component."""
        if "/" in v or "\\" in v or v in {".", ".."}:
            msg = "moved_dir_name must be a plain directory name"
            raise ValueError(msg)
        return v

    @property
    def preferences(self) -> tuple[str, ...]:
        """Parsed preference list."""
        return parse_preferences(self.keeped)


__all__ = ["CleanSettings", "parse_preferences"]
