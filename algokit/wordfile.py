"""Plain word splitting of text files: runs of ASCII letters, lowercased."""

from __future__ import annotations

import os
import re

_WORD = re.compile(r"[A-Za-z]+")


def _is_letter(ch: str) -> bool:
    return ch.isascii() and ch.isalpha()


def first_character_index(text: str, start: int) -> int:
    """Return the index of the first letter at or after start, or len(text)."""
    for i in range(max(start, 0), len(text)):
        if _is_letter(text[i]):
            return i
    return len(text)


def split_words(text: str) -> list[str]:
    """Return every maximal run of letters in text, lowercased, in order."""
    return [word.lower() for word in _WORD.findall(text)]


def read_words(filename: str | os.PathLike[str]) -> list[str]:
    """Read filename and return its words; OSError if it cannot be opened."""
    with open(filename, encoding="utf-8", errors="replace") as handle:
        contents = "".join(line.rstrip("\n") + "\n" for line in handle)
    return split_words(contents)