"""
romset-cleaner - ROM set deduplication

Groups ROM files by title and keeps one preferred variant per title,
chosen from the region and language tags in the filenames.
"""

__version__ = "0.1.0"
__author__ = "romset-cleaner Team"

from .core.attributes import extract_attributes
from .core.file_grouper import group_roms, select_winner
from .core.normalization import normalize_filename
from .core.organizer import RomCleaner

__all__ = [
    "RomCleaner",
    "extract_attributes",
    "group_roms",
    "normalize_filename",
    "select_winner",
]
