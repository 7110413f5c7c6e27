"""Leading short-word relocation for sortable names.

"The Beatles" becomes "Beatles, The" and back again. Matching is exact and
case-sensitive; the first table entry that matches wins.
"""

from __future__ import annotations

from .tables import SHORT_WORD_ENDINGS, SHORT_WORD_RESTORED, SHORT_WORDS


def move_short_word(text: str | None, undo: bool = False) -> str:
    """Move a leading short word to the end, or restore it with ``undo``.

    Undo always restores the ``"The "`` form, whichever ending matched, so
    ``"Perfect Circle, A"`` becomes ``"The Perfect Circle"``.
    """

    if not text:
        return ""

    if undo:
        for ending in SHORT_WORD_ENDINGS:
            if text.endswith(ending):
                return f"{SHORT_WORD_RESTORED}{text[: len(text) - len(ending)]}".strip()
        return text

    for word, ending in zip(SHORT_WORDS, SHORT_WORD_ENDINGS):
        if text.startswith(word):
            return f"{text[len(word):]}{ending}".strip()
    return text
