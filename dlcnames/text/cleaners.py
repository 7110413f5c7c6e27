"""Deterministic name cleaning rules.

Responsibilities:
- Provide character filters for display, sortable, key, and filesystem contexts.
- Provide composable rule objects applied in a fixed, documented order.

Every filter keeps or drops code points; none of them substitutes.
"""

from __future__ import annotations

import re
from typing import Callable, Protocol

from ..platforms import WINDOWS, FilesystemCharset
from .tables import (
    ABBREVIATIONS,
    ASCII_ALPHANUMERIC,
    DISPLAY_NAME_PUNCTUATION,
    SORTABLE_NAME_PUNCTUATION,
)

_EXCESS_SPACES_RE = re.compile(r"[ ]{2,}")
_WHITESPACE_RE = re.compile(r"\s")
_LEADING_NUMBERS_RE = re.compile(r"^\d*\s*")
_LEADING_SPECIAL_RE = re.compile(r"^[^A-Za-z0-9(]*")


class NameRule(Protocol):
    """Protocol for one name transformation step."""

    def apply(self, text: str) -> str:
        """Apply a single name transformation."""


def expand_abbreviations(text: str | None) -> str:
    """Replace symbols and abbreviations with words, in table order."""

    if not text:
        return ""
    for old, new in ABBREVIATIONS:
        text = text.replace(old, new)
    return text


def to_display_name(text: str | None) -> str:
    """Keep ASCII alphanumerics, Unicode letters, and display punctuation."""

    if not text:
        return ""
    return "".join(
        character
        for character in text
        if character in ASCII_ALPHANUMERIC
        or character in DISPLAY_NAME_PUNCTUATION
        or character.isalpha()
    )


def to_sortable_fragment(text: str | None) -> str:
    """Keep ASCII alphanumerics, space, and ``_ # ' .`` only."""

    if not text:
        return ""
    return "".join(
        character
        for character in text
        if character in ASCII_ALPHANUMERIC or character in SORTABLE_NAME_PUNCTUATION
    )


def strip_non_alphanumeric(text: str | None) -> str:
    """Remove everything that is not an ASCII letter or digit, spaces included."""

    if not text:
        return ""
    return "".join(character for character in text if character in ASCII_ALPHANUMERIC)


def to_filename(text: str | None, charset: FilesystemCharset = WINDOWS) -> str:
    """Remove characters reserved in file names on the target platform."""

    if not text:
        return ""
    invalid = charset.invalid_file_name_chars
    return "".join(character for character in text if character not in invalid)


def to_path(text: str | None, charset: FilesystemCharset = WINDOWS) -> str:
    """Remove characters reserved in directory paths on the target platform."""

    if not text:
        return ""
    invalid = charset.invalid_path_chars
    return "".join(character for character in text if character not in invalid)


def to_file_path(text: str | None, charset: FilesystemCharset = WINDOWS) -> str:
    """Clean the directory part and the file name of a path separately.

    The split happens at the last primary or alternate separator of the
    charset, and that separator is kept as written.
    """

    if not text:
        return ""
    index = charset.last_separator_index(text)
    if index < 0:
        return to_filename(text, charset)
    directory, separator, file_name = text[:index], text[index], text[index + 1:]
    return f"{to_path(directory, charset)}{separator}{to_filename(file_name, charset)}"


def capitalize(text: str | None) -> str:
    """Upper-case the first character without touching the rest.

    A first character whose upper case spans several characters (`ß`, `ŉ`)
    is left as it is, so the result always has the input's length.
    """

    if not text:
        return ""
    first = text[0].upper()
    if len(first) != 1:
        first = text[0]
    return first + text[1:]


def strip_excess_whitespace(text: str | None) -> str:
    """Collapse runs of two or more spaces into one space."""

    if not text:
        return ""
    return _EXCESS_SPACES_RE.sub(" ", text)


def replace_space_with(text: str | None, replacement: str = "_") -> str:
    """Trim, then replace every remaining whitespace character."""

    if not text:
        return ""
    return _WHITESPACE_RE.sub(replacement, text.strip())


def strip_leading_numbers(text: str | None) -> str:
    """Remove leading digits and the whitespace that follows them."""

    if not text:
        return ""
    return _LEADING_NUMBERS_RE.sub("", text, count=1)


def strip_leading_special_characters(text: str | None) -> str:
    """Remove leading characters other than ASCII alphanumerics and ``(``."""

    if not text:
        return ""
    return _LEADING_SPECIAL_RE.sub("", text, count=1)


class FunctionRule:
    """Adapt a plain ``str -> str`` function to the `NameRule` protocol."""

    def __init__(self, name: str, transform: Callable[[str], str]) -> None:
        """Initialize with a rule name used in diagnostics."""

        self.name = name
        self._transform = transform

    def apply(self, text: str) -> str:
        """Apply the wrapped transform."""

        return self._transform(text)

    def __repr__(self) -> str:
        return f"FunctionRule({self.name!r})"


class NameRulePipeline:
    """Apply a sequence of name rules strictly in order."""

    def __init__(self, rules: list[NameRule]) -> None:
        """Initialize with an ordered rule sequence."""

        self.rules = list(rules)

    def apply(self, text: str | None) -> str:
        """Feed the output of each rule into the next one."""

        current = text or ""
        for rule in self.rules:
            current = rule.apply(current)
        return current
