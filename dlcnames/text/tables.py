"""Immutable rule tables for name normalization.

Responsibilities:
- Hold the diacritic fold table, abbreviation table, and short-word table.
- Keep every table ordered and frozen so rule application is deterministic.

Key constants:
- `DIACRITIC_FOLD_TABLE`: `str.translate` mapping of accented code points.
- `ABBREVIATIONS`: ordered literal substring replacements.
- `SHORT_WORDS` / `SHORT_WORD_ENDINGS`: parallel leading/trailing forms.
"""

from __future__ import annotations

import string
from types import MappingProxyType
from typing import Mapping


# Each group of accented characters folds to one ASCII replacement.
_DIACRITIC_GROUPS: tuple[tuple[str, str], ...] = (
    ("ÀÁÂÃÅÄĀĂĄǍǺ", "A"),
    ("ǻǎàáâãäåąāă", "a"),
    ("ÇĆĈĊČ", "C"),
    ("çčćĉċ", "c"),
    ("ĎĐ", "D"),
    ("ďđ", "d"),
    ("ÈÉÊËĒĔĖĘĚ", "E"),
    ("ěèéêëēĕėę", "e"),
    ("ĜĞĠĢ", "G"),
    ("ģĝğġ", "g"),
    ("Ĥ", "H"),
    ("ĥ", "h"),
    ("ÌÍÎÏĨĪĬĮİǏ", "I"),
    ("ǐıįĭīĩìíîï", "i"),
    ("Ĵ", "J"),
    ("ĵ", "j"),
    ("Ķ", "K"),
    ("ķĸ", "k"),
    ("ĹĻĽĿŁ", "L"),
    ("ŀľļĺł", "l"),
    ("ÑŃŅŇŊ", "N"),
    ("ñńņňŉŋ", "n"),
    ("ÒÓÔÖÕŌŎŐƠǑǾ", "O"),
    ("ǿǒơòóôõöøōŏő", "o"),
    ("ŔŖŘ", "R"),
    ("ŗŕř", "r"),
    ("ŚŜŞŠ", "S"),
    ("şŝśš", "s"),
    ("ŢŤ", "T"),
    ("ťţ", "t"),
    ("ÙÚÛÜŨŪŬŮŰŲƯǓǕǗǙǛ", "U"),
    ("ǜǚǘǖǔưũùüúûūŭůűų", "u"),
    ("Ŵ", "W"),
    ("ŵ", "w"),
    ("ÝŶŸ", "Y"),
    ("ýÿŷ", "y"),
    ("ŹŻŽ", "Z"),
    ("žźż", "z"),
    ("œ", "oe"),
    ("Œ", "Oe"),
    ("°", "o"),
    ("¡", "!"),
    ("¿", "?"),
    ("«»“”„‟″‶", '"'),
    ("…", "..."),
)


def _build_fold_table(groups: tuple[tuple[str, str], ...]) -> Mapping[int, str]:
    """Flatten character groups into a read-only `str.translate` table."""

    table: dict[int, str] = {}
    for characters, replacement in groups:
        for character in characters:
            table[ord(character)] = replacement
    return MappingProxyType(table)


DIACRITIC_FOLD_TABLE: Mapping[int, str] = _build_fold_table(_DIACRITIC_GROUPS)

# Order matters: spaced forms come before bare forms so isolated tokens keep
# single spacing, and later rules see the output of earlier ones.
ABBREVIATIONS: tuple[tuple[str, str], ...] = (
    (" & ", " and "),
    ("&", " and "),
    ("/", " "),
    ("-", " "),
    (" + ", " plus "),
    ("+", " plus "),
    (" @ ", " at "),
    ("@", " at "),
    ("Mr.", "Mister"),
    ("Mrs.", "Misses"),
    ("Ms.", "Miss"),
    ("Jr.", "Junior"),
)

SHORT_WORDS: tuple[str, ...] = ("The ", "THE ", "the ", "A ", "a ")
SHORT_WORD_ENDINGS: tuple[str, ...] = (", The", ", THE", ", the", ", A", ", a")
SHORT_WORD_RESTORED = SHORT_WORDS[0]

ASCII_ALPHANUMERIC = frozenset(string.ascii_letters + string.digits)
ASCII_LETTERS_AND_SPACE = frozenset(string.ascii_letters + " ")
DISPLAY_NAME_PUNCTUATION = frozenset("-_/&',!.?()\"# ")
SORTABLE_NAME_PUNCTUATION = frozenset(" _#'.")
INLAY_NAME_PUNCTUATION = frozenset("_ ")

KEY_MAX_LENGTH = 30
KEY_COLLISION_SUFFIX = "Song"
