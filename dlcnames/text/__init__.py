"""Name normalization and validation components.

This package provides deterministic, stateless text rules used to build
canonical artist, title, album, key, and file names.
"""

from .cleaners import (
    FunctionRule,
    NameRulePipeline,
    capitalize,
    expand_abbreviations,
    replace_space_with,
    strip_excess_whitespace,
    strip_leading_numbers,
    strip_leading_special_characters,
    strip_non_alphanumeric,
    to_display_name,
    to_file_path,
    to_filename,
    to_path,
    to_sortable_fragment,
)
from .diacritics import fold_diacritics, fold_diacritics_fast, strip_diacritics
from .encoding import to_null_terminated_ascii, to_null_terminated_utf8
from .names import (
    acronym,
    build_short_filename,
    to_inlay_name,
    to_key,
    to_sortable_name,
)
from .short_words import move_short_word
from .validators import is_six_digit_app_id, valid_tempo, valid_version, valid_year

__all__ = [
    "FunctionRule",
    "NameRulePipeline",
    "acronym",
    "build_short_filename",
    "capitalize",
    "expand_abbreviations",
    "fold_diacritics",
    "fold_diacritics_fast",
    "is_six_digit_app_id",
    "move_short_word",
    "replace_space_with",
    "strip_diacritics",
    "strip_excess_whitespace",
    "strip_leading_numbers",
    "strip_leading_special_characters",
    "strip_non_alphanumeric",
    "to_display_name",
    "to_file_path",
    "to_filename",
    "to_inlay_name",
    "to_key",
    "to_null_terminated_ascii",
    "to_null_terminated_utf8",
    "to_path",
    "to_sortable_fragment",
    "to_sortable_name",
    "valid_tempo",
    "valid_version",
    "valid_year",
]
