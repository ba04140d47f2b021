"""Vietnamese name folding and display-prefix helpers."""

from __future__ import annotations

import re
import unicodedata

# Stroke letters have no canonical decomposition.
STROKE_LETTERS = {"đ": "d", "Đ": "D"}

_NON_LETTER_RE = re.compile(r"[^A-Za-z\s]")
_WHITESPACE_RE = re.compile(r"\s+")


def strip_diacritics(value: str) -> str:
    decomposed = unicodedata.normalize("NFD", value)
    stripped = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return "".join(STROKE_LETTERS.get(ch, ch) for ch in stripped)


def normalise_words(value: str) -> list[str]:
    """Fold ``value`` to uppercase ASCII words.

    ``"Đồng Tháp"`` becomes ``["DONG", "THAP"]``. Digits and punctuation are
    dropped; a value with no letters yields an empty list.
    """
    cleaned = _NON_LETTER_RE.sub("", strip_diacritics(value)).strip().upper()
    if not cleaned:
        return []
    return _WHITESPACE_RE.split(cleaned)


def extract_prefix(full_name: str | None, name: str | None) -> str:
    """Return what is left of ``full_name`` once ``name`` is removed.

    Only the first occurrence is removed, wherever it sits:
    ``extract_prefix("Xã A Dơi", "A Dơi") == "Xã"``.
    """
    if not full_name or not name:
        return ""
    return full_name.replace(name, "", 1).strip()
