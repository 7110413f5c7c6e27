"""Unit tests for leading short-word relocation."""

from __future__ import annotations

import pytest

from dlcnames.text.short_words import move_short_word


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("The Beatles", "Beatles, The"),
        ("THE WHO", "WHO, THE"),
        ("the national", "national, the"),
        ("A Perfect Circle", "Perfect Circle, A"),
        ("a ha", "ha, a"),
        ("Theory of a Deadman", "Theory of a Deadman"),
        ("Them Crooked Vultures", "Them Crooked Vultures"),
        ("An Horse", "An Horse"),
    ],
)
def test_move_short_word_moves_leading_word_to_end(raw: str, expected: str) -> None:
    """Exact leading short words should move behind a comma."""

    assert move_short_word(raw) == expected


def test_move_short_word_moves_only_first_match() -> None:
    """Only one short word is moved even when the remainder starts with another."""

    assert move_short_word("The A Team") == "A Team, The"


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("Beatles, The", "The Beatles"),
        ("WHO, THE", "The WHO"),
        ("national, the", "The national"),
        ("Perfect Circle, A", "The Perfect Circle"),
        ("Beatles", "Beatles"),
    ],
)
def test_move_short_word_undo_always_restores_the(raw: str, expected: str) -> None:
    """Undo should strip any known ending and restore the `The ` form."""

    assert move_short_word(raw, undo=True) == expected


def test_move_short_word_undo_handles_text_shorter_than_ending_slice() -> None:
    """Text consisting of only an ending should not break slicing."""

    assert move_short_word(", A", undo=True) == "The"
    assert move_short_word("x, a", undo=True) == "The x"


def test_move_short_word_round_trips_the_form() -> None:
    """Moving and undoing a `The ` name should restore the original."""

    assert move_short_word(move_short_word("The Beatles"), undo=True) == "The Beatles"


def test_move_short_word_treats_none_as_empty() -> None:
    """Missing text should produce an empty string in both directions."""

    assert move_short_word(None) == ""
    assert move_short_word("", undo=True) == ""
