"""Field-specific validators for song metadata.

Each validator returns a usable value instead of raising: malformed input
falls back to a documented default.
"""

from __future__ import annotations

import math
import re

DEFAULT_TEMPO = "120"
DEFAULT_VERSION = "1"
MAX_TEMPO_EXCLUSIVE = 300

_DECIMAL_RE = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")
# Prefix match covering 1900-2019; later years are rejected.
_YEAR_RE = re.compile(r"(?:19[0-9][0-9]|20[0-1][0-9])")
_VERSION_RE = re.compile(r"[0-9.]*")
_APP_ID_RE = re.compile(r"2[0-9]{5}")


def _parse_invariant_float(text: str) -> float:
    """Parse a dot-decimal number, returning 0.0 for anything unparsable."""

    candidate = text.strip()
    if not _DECIMAL_RE.fullmatch(candidate):
        return 0.0
    value = float(candidate)
    if not math.isfinite(value):
        return 0.0
    return value


def valid_tempo(text: str | None) -> str:
    """Return the rounded tempo in BPM, or ``"120"`` when out of range.

    Rounding is half-to-even and both bounds are exclusive, so ``"299.6"``
    rounds to 300 and falls back to the default. Only dot-decimal numbers
    parse: thousands separators are not accepted, so ``"1,5"`` yields
    ``"120"`` rather than the 15 a culture-invariant .NET parse would give.
    """

    bpm = round(_parse_invariant_float(text or ""))
    if 0 < bpm < MAX_TEMPO_EXCLUSIVE:
        return str(bpm)
    return DEFAULT_TEMPO


def valid_year(text: str | None) -> str:
    """Return the input when it starts with a year in 1900-2019, else ``""``."""

    if not text or _YEAR_RE.match(text) is None:
        return ""
    return text


def valid_version(text: str | None) -> str:
    """Return the leading digits-and-dots run of a version, default ``"1"``."""

    if not text:
        return DEFAULT_VERSION
    version = _VERSION_RE.match(text).group(0).strip()
    return version or DEFAULT_VERSION


def is_six_digit_app_id(text: str | None) -> bool:
    """Return whether the text is a six-digit app id starting with ``2``."""

    return bool(text) and _APP_ID_RE.fullmatch(text) is not None
