"""Tests for core data models."""

from __future__ import annotations

from dataclasses import FrozenInstanceError
from pathlib import Path

import pytest

from romcleaner.core.models import CleanResult, FileOperation, GroupSelection, RomFile


class TestRomFile:
    """Test RomFile."""

    def test_has_attribute(self) -> None:
        """Test attribute lookup."""
        rom = RomFile("Game (USA).bin", ("usa", "rev1"))
        assert rom.has_attribute("rev1")
        assert not rom.has_attribute("eur")

    def test_is_frozen(self) -> None:
        """Test records cannot be modified."""
        rom = RomFile("Game (USA).bin", ("usa",))
        with pytest.raises(FrozenInstanceError):
            rom.filename = "other"  # type: ignore[misc]


class TestFileOperation:
    """Test FileOperation."""

    def test_str(self) -> None:
        """Test human-readable representation."""
        operation = FileOperation(Path("roms/a.bin"), Path("roms/moved/a.bin"))
        assert str(operation) == f"move: {Path('roms/a.bin')} -> {Path('roms/moved/a.bin')}"


class TestCleanResult:
    """Test CleanResult counters."""

    def test_summary(self) -> None:
        """Test counters reflect selections, skipped files and moves."""
        winner = RomFile("A (usa)", ("usa",))
        result = CleanResult(
            dry_run=True,
            selections=[
                GroupSelection("A", (winner,), winner),
                GroupSelection("B", (RomFile("B (jp)", ("jp",)),)),
            ],
            operations=[FileOperation(Path("A (usa)"), Path("moved/A (usa)"))],
            skipped_files=["readme.txt"],
        )

        assert result.matched == 1
        assert result.unmatched == 1
        assert result.summary() == {
            "groups": 2,
            "matched": 1,
            "unmatched": 1,
            "skipped": 1,
            "moves": 1,
        }

    def test_empty_result(self) -> None:
        """Test an empty run."""
        assert CleanResult(dry_run=False).summary()["groups"] == 0
