"""Shared error types and constants for romset-cleaner."""
