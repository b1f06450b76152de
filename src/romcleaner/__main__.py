"""
romset-cleaner Package Main Entry Point

This module serves as the main entry point when the package is run as a module
using `python -m romcleaner`. It delegates to the Typer application.
"""

import logging
import sys

from romcleaner.cli.common.error_handler import handle_cli_error
from romcleaner.cli.typer_app import app
from romcleaner.shared.constants import CLIDefaults, CLIMessages

logger = logging.getLogger(__name__)


def main() -> None:
    """Run the CLI, turning stray exceptions into exit codes."""
    try:
        app()
    except KeyboardInterrupt:
        logger.info(CLIMessages.Error.INTERRUPTED)
        sys.exit(CLIDefaults.EXIT_INTERRUPTED)
    except SystemExit:
        raise
    except Exception as e:  # noqa: BLE001
        exit_code = handle_cli_error(e, "romset-cleaner-main")
        sys.exit(exit_code)


if __name__ == "__main__":
    main()
