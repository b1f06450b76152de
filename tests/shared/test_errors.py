"""Tests for the error hierarchy."""

from __future__ import annotations

from enum import Enum
from pathlib import Path

import pytest

from romcleaner.shared.errors import (
    ApplicationError,
    CliError,
    DirectoryCreateError,
    DirectoryReadError,
    DomainError,
    ErrorCode,
    ErrorContext,
    InfrastructureError,
    MalformedFilenameError,
    RenameError,
    RomCleanerError,
    create_cli_error,
    create_config_error,
    create_file_not_found_error,
)


class Color(Enum):
    RED = "red"


class TestErrorContext:
    """Test ErrorContext."""

    def test_coerces_paths_and_enums(self) -> None:
        """Test Path and Enum values become primitives."""
        context = ErrorContext(additional_data={"path": Path("a/b"), "color": Color.RED, "n": 1})
        assert context.additional_data == {"path": str(Path("a/b")), "color": "red", "n": 1}

    def test_rejects_complex_values(self) -> None:
        """Test non-primitive values are refused."""
        with pytest.raises(TypeError):
            ErrorContext(additional_data={"items": [1, 2]})

    def test_safe_dict(self) -> None:
        """Test only set fields are exported."""
        assert ErrorContext(operation="rename").safe_dict() == {
            "operation": "rename",
            "additional_data": {},
        }


class TestHierarchy:
    """Test the error classes."""

    def test_malformed_filename(self) -> None:
        """Test MalformedFilenameError is a recoverable domain error."""
        error = MalformedFilenameError("FooBar.tst", "No tag region found")

        assert isinstance(error, DomainError)
        assert error.code == ErrorCode.FILENAME_PARSE_FAILED
        assert error.filename == "FooBar.tst"
        assert str(error) == "FILENAME_PARSE_FAILED: No tag region found: FooBar.tst"

    @pytest.mark.parametrize(
        ("error", "code"),
        [
            (DirectoryReadError(Path("/roms")), ErrorCode.DIRECTORY_READ_FAILED),
            (DirectoryCreateError(Path("/roms/moved")), ErrorCode.DIRECTORY_CREATION_FAILED),
            (RenameError(Path("/roms/a"), Path("/roms/moved/a")), ErrorCode.FILE_MOVE_FAILED),
        ],
    )
    def test_filesystem_errors(self, error: RomCleanerError, code: ErrorCode) -> None:
        """Test filesystem errors are infrastructure errors."""
        assert isinstance(error, InfrastructureError)
        assert error.code == code

    def test_to_dict(self) -> None:
        """Test the serializable form keeps the cause."""
        cause = OSError("denied")
        data = DirectoryReadError(Path("/roms"), cause).to_dict()

        assert data["code"] == "DIRECTORY_READ_FAILED"
        assert data["context"]["file_path"] == str(Path("/roms"))
        assert data["original_error"] == "denied"


class TestFactories:
    """Test error factory helpers."""

    def test_config_error(self) -> None:
        """Test create_config_error."""
        error = create_config_error("bad", config_path=Path("c.toml"))

        assert isinstance(error, ApplicationError)
        assert error.code == ErrorCode.CONFIG_INVALID
        assert error.context.file_path == "c.toml"

    def test_file_not_found_error(self) -> None:
        """Test create_file_not_found_error."""
        error = create_file_not_found_error("c.toml", "load_settings")

        assert isinstance(error, InfrastructureError)
        assert error.code == ErrorCode.FILE_NOT_FOUND

    def test_cli_error(self) -> None:
        """Test create_cli_error."""
        error = create_cli_error("failed", "clean")

        assert isinstance(error, CliError)
        assert error.exit_code == 1
        assert error.code == ErrorCode.CLI_UNEXPECTED_ERROR
        assert error.context.additional_data == {"command": "clean"}
