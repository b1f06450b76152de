"""Global options shared by the romset-cleaner commands.

The main callback parses ``--verbose``, ``--log-level``, ``--log-file`` and
``--json`` once and stores them here. The ``clean`` and ``scan`` handlers
read them back when they configure logging and pick an output format.
Options left out on the command line stay None so that the loaded settings
can fill them in.
"""

from __future__ import annotations

import contextvars
from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field


class LogLevel(str, Enum):
    """Values accepted by ``--log-level``."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class CliContext(BaseModel):
    """Options given before the command name.

    Attributes:
        verbose: Number of ``-v`` flags
        log_level: ``--log-level`` value, None to use the configured level
        json_output: ``--json`` given before the command
        log_file: ``--log-file`` value, None to use the configured file
    """

    verbose: int = Field(default=0, ge=0, description="Number of -v flags")
    log_level: LogLevel | None = Field(
        default=None,
        description="Level from --log-level, the configured level when None",
    )
    json_output: bool = Field(default=False, description="Print JSON documents")
    log_file: Path | None = Field(
        default=None,
        description="Rotating log file from --log-file",
    )

    def is_verbose(self) -> bool:
        return self.verbose > 0

    def get_effective_log_level(self, default: str = LogLevel.INFO.value) -> str:
        """Return the root logger level for this run.

        Any ``-v`` means DEBUG. Otherwise ``--log-level`` is used, and
        ``default`` (normally the ``[logging] level`` setting) when it was
        not given.
        """
        if self.is_verbose():
            return LogLevel.DEBUG.value
        if self.log_level is None:
            return default
        return self.log_level.value

    def get_effective_log_file(self, configured: str | Path | None = None) -> Path | None:
        """Return ``--log-file`` if given, else the configured log file."""
        if self.log_file is not None:
            return self.log_file
        return Path(configured) if configured else None

    def is_json_output_enabled(self) -> bool:
        return self.json_output


cli_context_var: contextvars.ContextVar[CliContext | None] = contextvars.ContextVar(
    "cli_context",
    default=None,
)


def get_cli_context() -> CliContext:
    """Return the options stored by the main callback.

    Raises:
        RuntimeError: If no command has set the options yet
    """
    context = cli_context_var.get()
    if context is None:
        raise RuntimeError("Global options are not set; the main callback has not run.")
    return context


def set_cli_context(context: CliContext) -> None:
    cli_context_var.set(context)


def clear_cli_context() -> None:
    cli_context_var.set(None)
