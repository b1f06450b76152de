"""
romset-cleaner Constants Module

Centralized constants so magic values live in one place.
"""

from .clean import CleanDefaults, ReportMessages, TagPatterns
from .cli import CLICommands, CLIDefaults, CLIHelp, CLIMessages, CLIOptions
from .system import Application, Logging

__all__ = [
    "Application",
    "CLICommands",
    "CLIDefaults",
    "CLIHelp",
    "CLIMessages",
    "CLIOptions",
    "CleanDefaults",
    "Logging",
    "ReportMessages",
    "TagPatterns",
]
