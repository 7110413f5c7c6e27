"""Diacritic folding helpers.

Responsibilities:
- Fold accented characters to ASCII approximations from a fixed table.
- Offer a strict decomposing stripper and a fast, lossy codec-based variant.

The fast variant NFKD-decomposes the input and transcodes through
ISO-8859-8, so it only covers characters that decompose to something the
codec can represent. Letters without a decomposition (``ø``, ``ł``, ``œ``,
``đ``) are dropped rather than folded, and typographic quotes are not
mapped to ``"``. Use `fold_diacritics` whenever exact table coverage
matters.
"""

from __future__ import annotations

import unicodedata

from .tables import ASCII_LETTERS_AND_SPACE, DIACRITIC_FOLD_TABLE

_FAST_FOLD_CODEC = "iso8859_8"


def fold_diacritics(text: str | None) -> str:
    """Replace every table-listed accented character with its ASCII mapping."""

    if not text:
        return ""
    return text.translate(DIACRITIC_FOLD_TABLE)


def strip_diacritics(text: str | None) -> str:
    """Decompose to NFD and keep only ASCII letters and spaces.

    Digits and punctuation are removed as well, e.g. ``"áéíóúç 2"``
    becomes ``"aeiouc "``.
    """

    if not text:
        return ""
    decomposed = unicodedata.normalize("NFD", text)
    return "".join(
        character for character in decomposed if character in ASCII_LETTERS_AND_SPACE
    )


def fold_diacritics_fast(text: str | None) -> str:
    """Approximate folding by transcoding through a single-byte codec."""

    if not text:
        return ""
    decomposed = unicodedata.normalize("NFKD", text)
    encoded = decomposed.encode(_FAST_FOLD_CODEC, errors="ignore")
    return encoded.decode(_FAST_FOLD_CODEC)
