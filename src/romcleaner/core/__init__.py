"""Core deduplication logic for romset-cleaner.

Filename normalization, attribute extraction, grouping by base title,
winner selection and the move workflow.
"""
