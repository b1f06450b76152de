"""
JSON Output Formatter for romset-cleaner CLI

This module provides a centralized JSON formatter used by all CLI commands
to produce machine-readable output when the --json flag is used.
"""

from __future__ import annotations

import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

import orjson


def _default(obj: Any) -> Any:
    """Serialize types orjson does not know natively."""
    if isinstance(obj, Path):
        return str(obj)
    if isinstance(obj, (set, frozenset)):
        return sorted(obj)
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


def format_json_output(
    success: bool,
    command: str,
    data: Any | None = None,
    errors: list[str] | None = None,
    warnings: list[str] | None = None,
) -> bytes:
    """
    Format command output as JSON.

    Args:
        success: Whether the command executed successfully
        command: The command name (e.g., "clean", "scan")
        data: The command's output data
        errors: List of error messages
        warnings: List of warning messages

    Returns:
        JSON-encoded bytes ready for output

    Example:
        >>> output = format_json_output(
        ...     success=True,
        ...     command="clean",
        ...     data={"groups": 10, "matched": 8}
        ... )
    """
    if errors is None:
        errors = []
    if warnings is None:
        warnings = []

    # If there are errors, success should be False
    if errors:
        success = False

    json_data = {
        "success": success,
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "command": command,
        "data": data,
        "errors": errors,
        "warnings": warnings,
    }

    return orjson.dumps(
        json_data,
        default=_default,
        option=orjson.OPT_SORT_KEYS | orjson.OPT_INDENT_2,
    )


def write_json_output(output: bytes) -> None:
    """Write a formatted JSON document to stdout."""
    sys.stdout.buffer.write(output)
    sys.stdout.buffer.write(b"\n")
    sys.stdout.buffer.flush()
