"""String length, copy, concatenation and comparison done character by character."""

from __future__ import annotations


def string_length(text: str) -> int:
    """Count the characters of ``text``."""
    return sum(1 for _ in text)


def string_copy(text: str) -> str:
    """Return a character-by-character copy of ``text``."""
    return "".join(ch for ch in text)


def string_concatenate(first: str, second: str) -> str:
    """Return ``second`` appended to ``first``."""
    characters = [ch for ch in first]
    characters.extend(ch for ch in second)
    return "".join(characters)


def string_compare(first: str, second: str) -> int:
    """Compare two strings by code point.

    Returns zero when equal, otherwise the code-point difference at the first
    mismatch; a missing character counts as code point zero.
    """
    for a, b in zip(first, second):
        if a != b:
            return ord(a) - ord(b)
    common = min(len(first), len(second))
    if len(first) > common:
        return ord(first[common])
    if len(second) > common:
        return -ord(second[common])
    return 0