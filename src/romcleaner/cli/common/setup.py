"""CLI logging setup.

Combines the global command-line options held in the CLI context with the
logging section of the loaded settings, then configures the root logger.
Command-line values win over configured ones.
"""

from __future__ import annotations

import logging

from romcleaner.cli.common.context import CliContext, cli_context_var
from romcleaner.config.models import LoggingSettings
from romcleaner.core.logging import setup_logging

logger = logging.getLogger(__name__)


def configure_logging(logging_settings: LoggingSettings | None = None) -> None:
    """Configure logging for the running command.

    Args:
        logging_settings: Logging section of the settings, defaults when None
    """
    logging_settings = logging_settings or LoggingSettings()
    context = cli_context_var.get() or CliContext()

    log_file = context.get_effective_log_file(logging_settings.file)
    setup_logging(
        log_file=log_file,
        log_level=context.get_effective_log_level(default=logging_settings.level),
        log_max_bytes=logging_settings.max_bytes,
        log_backup_count=logging_settings.backup_count,
        fmt=logging_settings.format_string,
    )
    logger.debug("Logging configured (file=%s)", log_file)
