"""Unit tests for sortable names, keys, acronyms, and composite file names."""

from __future__ import annotations

import string

import pytest

from dlcnames.platforms import POSIX, WINDOWS
from dlcnames.text.names import (
    SORTABLE_NAME_PIPELINE,
    acronym,
    build_short_filename,
    to_inlay_name,
    to_key,
    to_sortable_name,
)


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("blink-182", "Blink 182"),
        ("The Beatles", "Beatles, The"),
        ("Simon & Garfunkel", "Simon and Garfunkel"),
        ("Mötley Crüe", "Motley Crue"),
        ("AC/DC", "AC DC"),
        ("Guns N' Roses", "Guns N' Roses"),
        ("Jay-Z & Linkin Park", "Jay Z and Linkin Park"),
        ("The Rolling Stones (Live)", "Rolling Stones Live, The"),
        ("the  white   stripes", "White stripes, the"),
        ("Mr. Big", "Mister Big"),
        ("", ""),
    ],
)
def test_to_sortable_name(raw: str, expected: str) -> None:
    """Sortable names follow the fixed expansion/fold/strip/move/capitalize order."""

    assert to_sortable_name(raw) == expected


def test_sortable_name_pipeline_order_is_fixed() -> None:
    """The sortable pipeline should list its rules in the documented order."""

    names = [rule.name for rule in SORTABLE_NAME_PIPELINE.rules]

    assert names == [
        "expand_abbreviations",
        "fold_diacritics",
        "to_sortable_fragment",
        "move_short_word",
        "capitalize",
        "collapse_whitespace",
    ]


def test_to_sortable_name_treats_none_as_empty() -> None:
    """Missing text should produce an empty sortable name."""

    assert to_sortable_name(None) == ""


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("Guns N' Roses", "GNR"),
        ("red hot chili peppers", "RHCP"),
        ("AC/DC", "AD"),
        ("Tool", "Tool"),
        ("tool", "tool"),
        ("Motörhead", "Motorhead"),
        ("", ""),
        ("  ", ""),
    ],
)
def test_acronym(raw: str, expected: str) -> None:
    """Multi-word names give upper-cased initials; single words keep their case."""

    assert acronym(raw) == expected


def test_to_key_appends_suffix_when_key_matches_title() -> None:
    """A key equal to the space-less title gets the `Song` suffix."""

    assert to_key("Song Title", "Song Title") == "SongTitleSong"
    assert to_key("My Song!", "") == "MySong"
    assert to_key("AC/DC", "AC/DC") == "ACDC"


def test_to_key_empty_input_never_raises() -> None:
    """Empty input compares equal to an empty title and gets the suffix."""

    assert to_key("", "") == "Song"
    assert to_key(None) == "Song"
    assert to_key("", "Title") == ""


def test_to_key_truncates_to_thirty_characters() -> None:
    """Keys are capped at thirty characters."""

    key = to_key("Supercalifragilisticexpialidocious Extended Mix")

    assert len(key) == 30
    assert key.startswith("Supercalifragilistic")


@pytest.mark.parametrize(
    ("raw", "title"),
    [
        ("Mötley Crüe — Dr. Feelgood (Remastered 2011)", ""),
        ("Über-Long Title With Plenty Of Words And Symbols!!!", "x"),
        ("Song Title Song Title Song Title", "Song Title Song Title Song Title"),
        ("\t\n", ""),
    ],
)
def test_to_key_output_is_short_ascii_alphanumeric(raw: str, title: str) -> None:
    """Every key is at most thirty ASCII letters and digits."""

    key = to_key(raw, title)

    assert len(key) <= 30
    assert all(character in string.ascii_letters + string.digits for character in key)


def test_build_short_filename_with_acronym() -> None:
    """Acronym mode uses artist initials and hyphenated display names."""

    assert (
        build_short_filename("Guns N' Roses", "Sweet Child O' Mine", "1.0", True)
        == "GNR_Sweet-Child-O'-Mine_1.0"
    )


def test_build_short_filename_with_display_artist() -> None:
    """Display mode keeps the full artist name with hyphens for spaces."""

    assert (
        build_short_filename("Guns N' Roses", "Sweet Child O' Mine", "1.0", False)
        == "Guns-N'-Roses_Sweet-Child-O'-Mine_1.0"
    )


def test_build_short_filename_respects_platform_charset() -> None:
    """Reserved characters are removed according to the target platform."""

    assert build_short_filename("4 Non Blondes", "What's Up?", "2", False, WINDOWS) == (
        "4-Non-Blondes_What's-Up_2"
    )
    assert build_short_filename("4 Non Blondes", "What's Up?", "2", False, POSIX) == (
        "4-Non-Blondes_What's-Up?_2"
    )


def test_build_short_filename_tolerates_missing_parts() -> None:
    """Missing parts leave empty segments instead of failing."""

    assert build_short_filename(None, None, None, False) == "__"


@pytest.mark.parametrize(
    ("raw", "frets24", "expected"),
    [
        ("Blue Flame", False, "Blue_Flame"),
        ("01 Dragon Scales", False, "Dragon_Scales"),
        ("Blue-Flame#", False, "BlueFlame"),
        ("Flamé Rouge", False, "Flam_Rouge"),
        ("Dragon 24 Scales", True, "Dragon_Scales_24"),
        ("Star!", True, "Star_24"),
        ("", False, ""),
    ],
)
def test_to_inlay_name(raw: str, frets24: bool, expected: str) -> None:
    """Inlay names are underscored, stripped of leading numbers, and fret-marked."""

    assert to_inlay_name(raw, frets24=frets24) == expected
