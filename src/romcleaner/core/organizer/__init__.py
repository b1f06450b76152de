"""Organizer package: executes the moves of a cleaning run."""

from romcleaner.core.organizer.clean_service import RomCleaner, format_selection
from romcleaner.core.organizer.executor import FileOperationExecutor, OperationResult

__all__ = ["FileOperationExecutor", "OperationResult", "RomCleaner", "format_selection"]
