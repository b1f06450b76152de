"""
CLI Error Handling Utilities

This module provides utilities for consistent error handling across CLI commands,
including standardized error output formatting and exception mapping.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

from pydantic import ValidationError

from romcleaner.cli.json_formatter import format_json_output, write_json_output
from romcleaner.shared.constants import CLIDefaults, CLIMessages
from romcleaner.shared.errors import (
    ApplicationError,
    CliError,
    ErrorCode,
    InfrastructureError,
    create_cli_error,
)

logger = logging.getLogger(__name__)


def handle_cli_error(
    error: BaseException,
    command: str,
    *,
    json_output: bool = False,
) -> int:
    """Handle CLI errors with consistent formatting and logging.

    Args:
        error: The exception that occurred
        command: The CLI command being executed
        json_output: Whether to output JSON format

    Returns:
        Exit code for the CLI command
    """
    error_context = {
        "command": command,
        "error_type": type(error).__name__,
        "json_output": json_output,
    }
    cli_error = _map_error_to_cli_error(error, command, error_context)
    _log_error(error, command, cli_error, error_context)
    _output_error(cli_error, error, command, error_context, json_output=json_output)

    return cli_error.exit_code


def _map_error_to_cli_error(
    error: BaseException,
    command: str,
    error_context: dict[str, Any],
) -> CliError:
    """Map specific exception types to CLI errors."""
    if isinstance(error, CliError):
        error_context["error_code"] = error.code.value
        return error

    if isinstance(error, ApplicationError):
        error_context["error_code"] = error.code.value
        error_context["details"] = error.to_dict()
        return create_cli_error(
            message=f"Application error: {error.message}",
            command=command,
            code=error.code,
            original_error=error,
        )

    if isinstance(error, InfrastructureError):
        error_context["error_code"] = error.code.value
        error_context["details"] = error.to_dict()
        return create_cli_error(
            message=f"Infrastructure error: {error.message}",
            command=command,
            code=error.code,
            original_error=error,
        )

    if isinstance(error, ValidationError):
        error_context["error_category"] = "validation"
        return create_cli_error(
            message=f"Invalid options: {error.error_count()} error(s)",
            command=command,
            code=ErrorCode.VALIDATION_ERROR,
            original_error=error,
        )

    if isinstance(error, OSError):
        error_context["error_category"] = "file_system"
        return create_cli_error(
            message=f"File system error: {error}",
            command=command,
            original_error=error,
        )

    if isinstance(error, KeyboardInterrupt):
        error_context["interrupt_type"] = "user_interrupt"
        return create_cli_error(
            message=CLIMessages.Error.INTERRUPTED,
            command=command,
            code=ErrorCode.CLI_COMMAND_INTERRUPTED,
            exit_code=CLIDefaults.EXIT_INTERRUPTED,
        )

    error_context["error_category"] = "unexpected"
    return create_cli_error(
        message=f"Unexpected error: {error}",
        command=command,
        original_error=error if isinstance(error, Exception) else None,
    )


def _log_error(
    error: BaseException,
    command: str,
    cli_error: CliError,
    error_context: dict[str, Any],
) -> None:
    """Log the error with structured context."""
    if isinstance(error, KeyboardInterrupt):
        logger.warning(
            "Command interrupted: %s",
            cli_error.message,
            extra={"context": error_context},
        )
    else:
        logger.error(
            "CLI error in %s: %s",
            command,
            cli_error.message,
            exc_info=error,
            extra={"context": error_context},
        )


def _output_error(
    cli_error: CliError,
    error: BaseException,
    command: str,
    error_context: dict[str, Any],
    *,
    json_output: bool,
) -> None:
    """Output error message in appropriate format."""
    if json_output:
        error_output = format_json_output(
            success=False,
            command=command,
            errors=[cli_error.message],
            data={
                "error_code": cli_error.code.value,
                "error_type": type(error).__name__,
                "exit_code": cli_error.exit_code,
                "context": error_context,
            },
        )
        write_json_output(error_output)
    else:
        sys.stderr.write(f"Error: {cli_error.message}\n")


__all__ = ["handle_cli_error"]
