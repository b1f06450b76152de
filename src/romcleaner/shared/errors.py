"""romset-cleaner Error Handling Module

This module defines the error handling system for romset-cleaner, providing
structured error classes with context information and user-friendly messages.

The error hierarchy follows these principles:
- One Source of Truth: All error codes are defined in ErrorCode enum
- Structured Context: ErrorContext provides additional information
- Proper Exception Chaining: Original exceptions are preserved

Two families matter at runtime:
- DomainError: local and recoverable (a malformed filename is skipped)
- InfrastructureError: filesystem failures, fatal for the whole run
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Union

# Type alias for primitive context values (str, int, float, bool only)
PrimitiveContextValue = Union[str, int, float, bool]


class ErrorCode(str, Enum):
    """Error codes for romset-cleaner.

    This enum serves as the single source of truth for all error codes
    used throughout the application.
    """

    # File System Errors
    FILE_NOT_FOUND = "FILE_NOT_FOUND"
    DIRECTORY_READ_FAILED = "DIRECTORY_READ_FAILED"
    DIRECTORY_CREATION_FAILED = "DIRECTORY_CREATION_FAILED"
    FILE_MOVE_FAILED = "FILE_MOVE_FAILED"

    # Parsing Errors
    FILENAME_PARSE_FAILED = "FILENAME_PARSE_FAILED"

    # Configuration Errors
    CONFIG_INVALID = "CONFIG_INVALID"
    VALIDATION_ERROR = "VALIDATION_ERROR"

    # CLI Errors
    CLI_UNEXPECTED_ERROR = "CLI_UNEXPECTED_ERROR"
    CLI_COMMAND_INTERRUPTED = "CLI_COMMAND_INTERRUPTED"


def _coerce_primitives(value: Any | None) -> dict[str, PrimitiveContextValue] | None:
    """Coerce additional_data values to primitives.

    Args:
        value: Input dictionary or None

    Returns:
        Dictionary with primitive values only, or None

    Raises:
        TypeError: If value is not a dict or contains unconvertible types
    """
    if value is None:
        return None

    if not isinstance(value, dict):
        error_msg = f"additional_data must be dict, got {type(value).__name__}"
        raise TypeError(error_msg)

    coerced: dict[str, PrimitiveContextValue] = {}
    for key, val in value.items():
        if isinstance(val, (str, int, float, bool)):
            coerced[key] = val
        elif isinstance(val, Path):
            coerced[key] = str(val)
        elif isinstance(val, Enum):
            coerced[key] = val.value
        else:
            error_msg = (
                f"Cannot coerce {type(val).__name__} to primitive type. "
                f"Only str, int, float, bool, Path, Enum are allowed."
            )
            raise TypeError(error_msg)

    return coerced


@dataclass(frozen=True)
class ErrorContext:
    """Context information for errors.

    Only primitive types (str, int, float, bool) are allowed in
    additional_data so the context can always be serialized for logs.

    Attributes:
        file_path: Optional file path associated with the error
        operation: Optional operation name that caused the error
        additional_data: Optional dict with primitive values only
    """

    file_path: str | None = None
    operation: str | None = None
    additional_data: dict[str, PrimitiveContextValue] | None = None

    def __post_init__(self) -> None:
        """Post-initialization coercion of additional_data."""
        if self.additional_data is not None:
            coerced = _coerce_primitives(self.additional_data)
            object.__setattr__(self, "additional_data", coerced)

    def safe_dict(self) -> dict[str, Any]:
        """Export context as dict for logging.

        Returns:
            Dictionary with set fields and a guaranteed additional_data key.
        """
        data: dict[str, Any] = {}
        if self.file_path is not None:
            data["file_path"] = self.file_path
        if self.operation is not None:
            data["operation"] = self.operation
        data["additional_data"] = self.additional_data or {}
        return data


class RomCleanerError(Exception):
    """Base exception class for all romset-cleaner errors."""

    def __init__(
        self,
        code: ErrorCode,
        message: str,
        context: ErrorContext | None = None,
        original_error: Exception | None = None,
    ) -> None:
        """Initialize RomCleanerError.

        Args:
            code: Error code from ErrorCode enum
            message: Human-readable error message
            context: Additional context information
            original_error: Original exception that caused this error
        """
        self.code = code
        self.message = message
        self.context = context or ErrorContext()
        self.original_error = original_error
        super().__init__(f"{code.value}: {message}")

    def __str__(self) -> str:
        """Return string representation of the error."""
        return f"{self.code.value}: {self.message}"

    def to_dict(self) -> dict[str, Any]:
        """Convert error to dictionary for logging and JSON output."""
        return {
            "code": self.code.value,
            "message": self.message,
            "context": self.context.safe_dict(),
            "original_error": str(self.original_error) if self.original_error else None,
        }


class DomainError(RomCleanerError):
    """Domain-specific errors.

    These errors occur when input does not satisfy domain rules,
    e.g. a filename without a parenthesized tag region.
    """


class InfrastructureError(RomCleanerError):
    """Infrastructure-related errors.

    These errors occur when interacting with the file system.
    They are fatal: the run stops at the first one.
    """


class ApplicationError(RomCleanerError):
    """Application-level errors (configuration, validation)."""


class MalformedFilenameError(DomainError):
    """Filename lacks a valid parenthesized tag region."""

    def __init__(self, filename: str, reason: str) -> None:
        super().__init__(
            ErrorCode.FILENAME_PARSE_FAILED,
            f"{reason}: {filename}",
            ErrorContext(file_path=filename, operation="normalize_filename"),
        )
        self.filename = filename


class DirectoryReadError(InfrastructureError):
    """Source directory could not be listed."""

    def __init__(self, directory: Path, original_error: Exception | None = None) -> None:
        super().__init__(
            ErrorCode.DIRECTORY_READ_FAILED,
            f"Cannot read directory {directory}: {original_error}",
            ErrorContext(file_path=str(directory), operation="list_files"),
            original_error=original_error,
        )


class DirectoryCreateError(InfrastructureError):
    """Destination directory could not be created."""

    def __init__(self, directory: Path, original_error: Exception | None = None) -> None:
        super().__init__(
            ErrorCode.DIRECTORY_CREATION_FAILED,
            f"Cannot create directory {directory}: {original_error}",
            ErrorContext(file_path=str(directory), operation="make_dir"),
            original_error=original_error,
        )


class RenameError(InfrastructureError):
    """A file could not be moved to the destination directory."""

    def __init__(
        self,
        source: Path,
        destination: Path,
        original_error: Exception | None = None,
    ) -> None:
        super().__init__(
            ErrorCode.FILE_MOVE_FAILED,
            f"Cannot move {source} to {destination}: {original_error}",
            ErrorContext(
                file_path=str(source),
                operation="rename",
                additional_data={"destination": str(destination)},
            ),
            original_error=original_error,
        )


class CliError(ApplicationError):
    """CLI-specific error carrying the process exit code."""

    def __init__(
        self,
        code: ErrorCode,
        message: str,
        context: ErrorContext | None = None,
        original_error: Exception | None = None,
        exit_code: int = 1,
    ) -> None:
        super().__init__(code, message, context, original_error)
        self.exit_code = exit_code


def create_config_error(
    message: str,
    config_path: str | Path | None = None,
    original_error: Exception | None = None,
) -> ApplicationError:
    """Create a configuration error."""
    return ApplicationError(
        ErrorCode.CONFIG_INVALID,
        message,
        ErrorContext(
            file_path=str(config_path) if config_path is not None else None,
            operation="load_settings",
        ),
        original_error=original_error,
    )


def create_file_not_found_error(
    file_path: str | Path,
    operation: str,
    original_error: Exception | None = None,
) -> InfrastructureError:
    """Create a file-not-found error."""
    return InfrastructureError(
        ErrorCode.FILE_NOT_FOUND,
        f"File not found: {file_path}",
        ErrorContext(file_path=str(file_path), operation=operation),
        original_error=original_error,
    )


def create_cli_error(
    message: str,
    command: str,
    code: ErrorCode = ErrorCode.CLI_UNEXPECTED_ERROR,
    exit_code: int = 1,
    original_error: Exception | None = None,
) -> CliError:
    """Create a CLI error for a failed command."""
    return CliError(
        code,
        message,
        ErrorContext(
            operation=command,
            additional_data={"command": command},
        ),
        original_error=original_error,
        exit_code=exit_code,
    )
