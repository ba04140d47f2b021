"""Vietnamese collation for ordering province names.

Letters compare in Vietnamese alphabet order, so ``ă`` and ``â`` are letters of
their own after ``a`` and ``đ`` follows ``d``. Tone marks only break ties
between otherwise equal strings, and case breaks ties after that.
"""

from __future__ import annotations

import unicodedata
from typing import Callable, Iterable, TypeVar

T = TypeVar("T")

ALPHABET = (
    "a", "ă", "â", "b", "c", "d", "đ", "e", "ê", "f", "g", "h", "i", "j", "k", "l", "m",
    "n", "o", "ô", "ơ", "p", "q", "r", "s", "t", "u", "ư", "v", "w", "x", "y", "z",
)
_LETTER_WEIGHT = {letter: 100 + idx for idx, letter in enumerate(ALPHABET)}

# Combining marks that form a distinct letter together with their base.
_LETTER_MARKS = {
    ("a", "\u0306"): "ă",
    ("a", "\u0302"): "â",
    ("e", "\u0302"): "ê",
    ("o", "\u0302"): "ô",
    ("o", "\u031b"): "ơ",
    ("u", "\u031b"): "ư",
}

# Tone marks in secondary order: grave, hook above, tilde, acute, dot below.
_TONE_WEIGHT = {"\u0300": 1, "\u0309": 2, "\u0303": 3, "\u0301": 4, "\u0323": 5}

SortKey = tuple[tuple[int, ...], tuple[int, ...], tuple[int, ...]]


def _clusters(value: str) -> Iterable[tuple[str, list[str]]]:
    base: str | None = None
    marks: list[str] = []
    for ch in unicodedata.normalize("NFD", value):
        if unicodedata.combining(ch) and base is not None:
            marks.append(ch)
            continue
        if base is not None:
            yield base, marks
        base, marks = ch, []
    if base is not None:
        yield base, marks


def _primary(letter: str) -> int:
    if letter in _LETTER_WEIGHT:
        return _LETTER_WEIGHT[letter]
    if letter.isspace():
        return 1
    if letter.isdigit():
        return 10 + int(unicodedata.digit(letter, 0))
    if letter.isalpha():
        return 1000 + ord(letter)
    return 2


def vietnamese_sort_key(value: str) -> SortKey:
    primary: list[int] = []
    secondary: list[int] = []
    tertiary: list[int] = []
    for base, marks in _clusters(value):
        letter = base.lower()
        tone = 0
        extra = 0
        for mark in marks:
            combined = _LETTER_MARKS.get((letter, mark))
            if combined is not None:
                letter = combined
            elif mark in _TONE_WEIGHT:
                tone = _TONE_WEIGHT[mark]
            else:
                extra += 1
        primary.append(_primary(letter))
        secondary.append(tone * 1000 + extra)
        tertiary.append(0 if base == base.lower() else 1)
    return tuple(primary), tuple(secondary), tuple(tertiary)


def sorted_vietnamese(items: Iterable[T], key: Callable[[T], str]) -> list[T]:
    return sorted(items, key=lambda item: vietnamese_sort_key(key(item)))
