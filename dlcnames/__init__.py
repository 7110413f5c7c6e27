"""Top-level package for dlcnames.

This package provides deterministic normalization and validation rules for
canonical artist, title, album, key, and file names used when packaging
song content. The rules live in `dlcnames.text`; the most common entry
points are re-exported here.
"""

from loguru import logger

from .text import (
    acronym,
    build_short_filename,
    fold_diacritics,
    move_short_word,
    to_display_name,
    to_key,
    to_sortable_name,
    valid_tempo,
    valid_version,
    valid_year,
)

logger.disable("dlcnames")

__all__ = [
    "__version__",
    "acronym",
    "build_short_filename",
    "fold_diacritics",
    "move_short_word",
    "to_display_name",
    "to_key",
    "to_sortable_name",
    "valid_tempo",
    "valid_version",
    "valid_year",
]

__version__ = "0.1.0"
