"""Composite name builders.

Responsibilities:
- Build sortable artist/title/album names through a fixed rule order.
- Build machine keys, artist acronyms, short file names, and inlay names.

Key public functions:
- `to_sortable_name`, `acronym`, `to_key`, `build_short_filename`,
  `to_inlay_name`.
"""

from __future__ import annotations

import re

from ..platforms import WINDOWS, FilesystemCharset
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
    to_filename,
    to_sortable_fragment,
)
from .diacritics import fold_diacritics
from .short_words import move_short_word
from .tables import (
    ASCII_ALPHANUMERIC,
    INLAY_NAME_PUNCTUATION,
    KEY_COLLISION_SUFFIX,
    KEY_MAX_LENGTH,
)

_ACRONYM_SPLIT_RE = re.compile(r"[\W\s]+")
_FRETS24_TOKENS: tuple[tuple[str, str], ...] = (
    ("_24_", "_"),
    ("_24", ""),
    ("24_", ""),
    (" 24 ", " "),
    ("24 ", " "),
    (" 24", " "),
    ("24", ""),
)


def _collapse_and_trim(text: str) -> str:
    """Collapse space runs and trim both ends."""

    return strip_excess_whitespace(text).strip()


# Abbreviations must see the original punctuation before it is stripped,
# the short word moves after punctuation cleanup so its comma survives,
# and capitalization runs after the move.
SORTABLE_NAME_PIPELINE = NameRulePipeline(
    [
        FunctionRule("expand_abbreviations", expand_abbreviations),
        FunctionRule("fold_diacritics", fold_diacritics),
        FunctionRule("to_sortable_fragment", to_sortable_fragment),
        FunctionRule("move_short_word", move_short_word),
        FunctionRule("capitalize", capitalize),
        FunctionRule("collapse_whitespace", _collapse_and_trim),
    ]
)


def to_sortable_name(text: str | None) -> str:
    """Return the sortable form of an artist, title, or album name.

    Examples:
        ``"The Beatles"`` -> ``"Beatles, The"``
        ``"blink-182"`` -> ``"Blink 182"``
    """

    return SORTABLE_NAME_PIPELINE.apply(text)


def acronym(text: str | None) -> str:
    """Return the upper-cased initials of a multi-word name.

    Single-word names fall back to a folded, alphanumeric-only form that
    keeps its original casing, e.g. ``"Tool"`` stays ``"Tool"``.
    """

    if not text:
        return ""
    tokens = [token for token in _ACRONYM_SPLIT_RE.split(text) if token]
    if len(tokens) > 1:
        return "".join(token[0] for token in tokens).upper()

    return strip_non_alphanumeric(fold_diacritics(text))


def to_key(text: str | None, reference_title: str | None = "") -> str:
    """Return an ASCII-alphanumeric key of at most 30 characters.

    When the key equals ``reference_title`` with its spaces removed, the
    suffix ``"Song"`` is appended so a song key never collides with its
    title. Empty input with an empty reference therefore yields ``"Song"``.
    """

    key = strip_non_alphanumeric(text)
    if key == (reference_title or "").replace(" ", ""):
        key = f"{key}{KEY_COLLISION_SUFFIX}"
    return key[:KEY_MAX_LENGTH]


def build_short_filename(
    artist: str | None,
    title: str | None,
    version: str | None,
    use_acronym: bool,
    charset: FilesystemCharset = WINDOWS,
) -> str:
    """Format the standard ``{artist}_{title}_{version}`` short file name."""

    artist_part = acronym(artist) if use_acronym else to_display_name(artist)
    result = f"{artist_part}_{to_display_name(title)}_{version or ''}".replace(" ", "-")
    return strip_excess_whitespace(to_filename(result, charset))


def to_inlay_name(text: str | None, frets24: bool = False) -> str:
    """Return an underscore-separated inlay asset name.

    With ``frets24`` any existing ``24`` token is removed and a single
    trailing ``24`` is appended, so the fret marker always sits at the end.

    Only ASCII letters, digits, underscore and space survive the initial
    filter, one character at a time. Earlier toolkits used the literal
    pattern `[^a-zA-Z0-9]_ `, which matched almost nothing and let accents
    and punctuation leak into inlay names.
    """

    value = "".join(
        character
        for character in (text or "")
        if character in ASCII_ALPHANUMERIC or character in INLAY_NAME_PUNCTUATION
    )
    value = strip_leading_numbers(value)
    value = strip_leading_special_characters(value)

    if frets24:
        for old, new in _FRETS24_TOKENS:
            value = value.replace(old, new)
        value = f"{value.strip()} 24"

    return replace_space_with(value, "_")
