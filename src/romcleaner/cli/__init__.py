"""Command-line interface for romset-cleaner."""
