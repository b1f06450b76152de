"""Run options for a cleaning run.

CleanOptions is the immutable configuration value built once at startup,
from Settings plus command-line overrides, and passed to the orchestration.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from romcleaner.config.models.clean_settings import parse_preferences
from romcleaner.config.models.settings import Settings
from romcleaner.shared.constants import CleanDefaults


class CleanOptions(BaseModel):
    """Options for a single cleaning run.

    Attributes:
        rom_dir: Directory containing the ROM files.
        dest_dir: Destination directory, ``{rom_dir}/moved`` when None.
        preferences: Attribute tokens to keep, most preferred first.
        dry_run: Report only, never touch the filesystem.
        keep_one: Keep a title's file when it is the only one.
        moved_dir_name: Directory name used when dest_dir is None.
        json_output: Report as a JSON document.
    """

    model_config = ConfigDict(frozen=True)

    rom_dir: Path = Field(default=Path(CleanDefaults.ROM_DIR))
    dest_dir: Path | None = None
    preferences: tuple[str, ...] = Field(default=CleanDefaults.KEEPED_ATTRIBUTES, min_length=1)
    dry_run: bool = CleanDefaults.DRY_RUN
    keep_one: bool = CleanDefaults.KEEP_ONE
    moved_dir_name: str = CleanDefaults.MOVED_DIR_NAME
    json_output: bool = False

    @field_validator("preferences", mode="before")
    @classmethod
    def parse_preference_list(cls, v: Any) -> Any:
        """Accept a comma-separated string or a sequence of tokens."""
        if isinstance(v, (str, list, tuple)):
            return parse_preferences(v)
        return v

    @property
    def effective_dest_dir(self) -> Path:
        """Destination directory for kept files."""
        if self.dest_dir is not None:
            return self.dest_dir
        return self.rom_dir / self.moved_dir_name

    @classmethod
    def from_settings(cls, settings: Settings, **overrides: Any) -> CleanOptions:
        """Build options from settings, applying non-None overrides.

        Example:
            >>> options = CleanOptions.from_settings(Settings(), rom_dir=Path("roms"), dry_run=None)
            >>> options.dry_run, options.effective_dest_dir
            (True, PosixPath('roms/moved'))
        """
        values: dict[str, Any] = {
            "preferences": settings.clean.preferences,
            "dry_run": settings.clean.dry_run,
            "keep_one": settings.clean.keep_one,
            "moved_dir_name": settings.clean.moved_dir_name,
        }
        values.update({key: value for key, value in overrides.items() if value is not None})
        return cls(**values)


__all__ = ["CleanOptions"]
