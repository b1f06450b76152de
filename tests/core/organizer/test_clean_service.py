"""Tests for the RomCleaner workflow."""

from __future__ import annotations

from pathlib import Path

import pytest

from romcleaner.config import CleanOptions
from romcleaner.core.models import GroupSelection, RomFile
from romcleaner.core.organizer import RomCleaner, format_selection
from romcleaner.shared.errors import DirectoryCreateError, DirectoryReadError, RenameError

WINNER = "FooBar (bar) (oof,baz) (boof 1).tst"


def make_options(rom_dir: Path, **overrides) -> CleanOptions:
    """Build options for the sample directory, preferring "baz"."""
    values = {"rom_dir": rom_dir, "preferences": "baz"}
    values.update(overrides)
    return CleanOptions(**values)


class TestFormatSelection:
    """Test report lines."""

    def test_found(self) -> None:
        """Test the line of a title with a winner."""
        rom = RomFile("Game (USA).bin", ("usa",))
        assert format_selection(GroupSelection("Game", (rom,), rom)) == "OK: Game - found: Game (USA).bin"

    def test_not_found(self) -> None:
        """Test the line of a title without a winner."""
        assert format_selection(GroupSelection("Game", ())) == "KO: Game"


class TestRomCleanerInMemory:
    """Test the workflow against the in-memory filesystem."""

    def test_dry_run_touches_nothing(self, memory_fs) -> None:
        """Test dry-run reports but never creates or moves."""
        reported: list[str] = []
        cleaner = RomCleaner(
            make_options(Path("/roms")),
            filesystem=memory_fs,
            reporter=lambda selection: reported.append(format_selection(selection)),
        )

        result = cleaner.run()

        assert reported == ["KO: BarFoo", f"OK: FooBar - found: {WINNER}"]
        assert memory_fs.calls == [("list_files", str(Path("/roms")))]
        assert result.dry_run is True
        assert [str(op.destination_path) for op in result.operations] == [
            str(Path("/roms/moved") / WINNER),
        ]
        assert result.skipped_files == ["FooBar Foo Edition.tst"]

    def test_moves_winner(self, memory_fs) -> None:
        """Test the winner is moved into the destination directory."""
        result = RomCleaner(make_options(Path("/roms"), dry_run=False), filesystem=memory_fs).run()

        assert memory_fs.files_in(Path("/roms/moved")) == [WINNER]
        assert WINNER not in memory_fs.files_in(Path("/roms"))
        assert result.summary()["moves"] == 1

    def test_explicit_dest_dir(self, memory_fs) -> None:
        """Test an explicit destination is used as given."""
        RomCleaner(
            make_options(Path("/roms"), dry_run=False, dest_dir=Path("/kept")),
            filesystem=memory_fs,
        ).run()

        assert memory_fs.files_in(Path("/kept")) == [WINNER]

    def test_existing_dest_dir_is_not_created(self, memory_fs) -> None:
        """Test an existing destination is reused."""
        memory_fs.directories[Path("/roms/moved")] = []

        RomCleaner(make_options(Path("/roms"), dry_run=False), filesystem=memory_fs).run()

        assert not [call for call in memory_fs.calls if call[0] == "make_dir"]

    def test_keep_one(self, memory_fs) -> None:
        """Test a lone file is moved when keep_one is enabled."""
        RomCleaner(
            make_options(Path("/roms"), dry_run=False, keep_one=True),
            filesystem=memory_fs,
        ).run()

        assert memory_fs.files_in(Path("/roms/moved")) == ["BarFoo (one).tst", WINNER]

    def test_no_match(self, memory_fs) -> None:
        """Test nothing is moved when no file matches."""
        result = RomCleaner(
            make_options(Path("/roms"), dry_run=False, preferences="zab"),
            filesystem=memory_fs,
        ).run()

        assert memory_fs.files_in(Path("/roms/moved")) == []
        assert result.matched == 0
        assert result.unmatched == 2

    def test_directory_read_failure(self, memory_fs) -> None:
        """Test an unreadable ROM directory aborts the run."""
        memory_fs.fail_list = True

        with pytest.raises(DirectoryReadError):
            RomCleaner(make_options(Path("/roms")), filesystem=memory_fs).run()

    def test_directory_create_failure(self, memory_fs) -> None:
        """Test an uncreatable destination aborts before any move."""
        memory_fs.fail_make_dir = True

        with pytest.raises(DirectoryCreateError):
            RomCleaner(make_options(Path("/roms"), dry_run=False), filesystem=memory_fs).run()

        assert not [call for call in memory_fs.calls if call[0] == "rename"]

    def test_rename_failure_stops_the_run(self, memory_fs) -> None:
        """Test the first failing move aborts and earlier moves stay."""
        memory_fs.fail_rename.add(WINNER)
        reported: list[GroupSelection] = []

        with pytest.raises(RenameError):
            RomCleaner(
                make_options(Path("/roms"), dry_run=False, keep_one=True),
                filesystem=memory_fs,
                reporter=reported.append,
            ).run()

        assert memory_fs.files_in(Path("/roms/moved")) == ["BarFoo (one).tst"]
        assert [selection.title for selection in reported] == ["BarFoo", "FooBar"]

    def test_select_never_mutates(self, memory_fs) -> None:
        """Test select lists and selects only."""
        result = RomCleaner(make_options(Path("/roms"), dry_run=False), filesystem=memory_fs).select()

        assert [selection.title for selection in result.selections] == ["BarFoo", "FooBar"]
        assert result.selections[1].winner is not None
        assert result.operations == []
        assert memory_fs.calls == [("list_files", str(Path("/roms")))]


class TestRomCleanerOnDisk:
    """Test the workflow on a real directory."""

    def test_default_is_dry_run(self, rom_dir: Path, sample_roms: list[str]) -> None:
        """Test no file moves and no directory is created by default."""
        RomCleaner(make_options(rom_dir)).run()

        for name in sample_roms:
            assert (rom_dir / name).exists()
        assert not (rom_dir / "moved").exists()

    def test_not_dry_run(self, rom_dir: Path, sample_roms: list[str]) -> None:
        """Test the winner lands in {rom_dir}/moved and the others stay."""
        RomCleaner(make_options(rom_dir, dry_run=False)).run()

        assert (rom_dir / "moved" / WINNER).exists()
        assert not (rom_dir / WINNER).exists()
        assert (rom_dir / sample_roms[0]).exists()
        assert (rom_dir / "FooBar Foo Edition.tst").exists()

    def test_not_matched(self, rom_dir: Path, sample_roms: list[str]) -> None:
        """Test nothing moves when no preference matches."""
        RomCleaner(make_options(rom_dir, dry_run=False, preferences="zab")).run()

        for name in sample_roms:
            assert (rom_dir / name).exists()
        assert list((rom_dir / "moved").iterdir()) == []

    def test_keep_one_on_disk(self, rom_dir: Path) -> None:
        """Test the singleton title is moved with keep_one."""
        RomCleaner(make_options(rom_dir, dry_run=False, keep_one=True)).run()

        assert sorted(path.name for path in (rom_dir / "moved").iterdir()) == [
            "BarFoo (one).tst",
            WINNER,
        ]

    def test_cannot_read_rom_dir(self, temp_dir: Path) -> None:
        """Test a missing ROM directory is fatal."""
        with pytest.raises(DirectoryReadError):
            RomCleaner(make_options(temp_dir / "missing")).run()

    def test_cannot_create_dest_dir(self, rom_dir: Path) -> None:
        """Test a destination whose parent is missing is fatal."""
        options = make_options(rom_dir, dry_run=False, dest_dir=rom_dir / "missing" / "moved")

        with pytest.raises(DirectoryCreateError):
            RomCleaner(options).run()

        assert (rom_dir / WINNER).exists()

    def test_second_run_is_stable(self, rom_dir: Path) -> None:
        """Test a second run no longer finds the moved winner."""
        RomCleaner(make_options(rom_dir, dry_run=False)).run()
        result = RomCleaner(make_options(rom_dir, dry_run=False)).run()

        assert [format_selection(selection) for selection in result.selections] == [
            "KO: BarFoo",
            "KO: FooBar",
        ]
        assert (rom_dir / "moved" / WINNER).exists()

    def test_rename_failure_on_disk(self, rom_dir: Path, mocker) -> None:
        """Test an OS rename failure surfaces as RenameError."""
        mocker.patch("romcleaner.core.filesystem.os.rename", side_effect=PermissionError("denied"))

        with pytest.raises(RenameError) as exc_info:
            RomCleaner(make_options(rom_dir, dry_run=False)).run()

        assert isinstance(exc_info.value.original_error, PermissionError)
        assert (rom_dir / WINNER).exists()
