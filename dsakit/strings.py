"""String algorithms: searching, removing, reversing and palindromes."""

from __future__ import annotations

import string

_ALPHANUMERIC = frozenset(string.ascii_letters + string.digits)


def first_occurrence(haystack: str, needle: str) -> int:
    """Return the index where ``needle`` first appears in ``haystack``, or -1."""
    span = len(needle)
    return next(
        (i for i in range(len(haystack) - span + 1) if haystack[i : i + span] == needle),
        -1,
    )


def is_subsequence(s: str, t: str) -> bool:
    """Tell whether ``s`` can be obtained from ``t`` by deleting characters."""
    remaining = iter(t)
    return all(ch in remaining for ch in s)


def remove_all_occurrences(text: str, part: str) -> str:
    """Repeatedly remove the leftmost occurrence of ``part`` until none is left."""
    if not part:
        raise ValueError("part must not be empty")
    while (index := text.find(part)) != -1:
        text = text[:index] + text[index + len(part) :]
    return text


def reverse_string(text: str) -> str:
    """Return the characters of ``text`` in reverse order."""
    return text[::-1]


def reverse_words(text: str) -> str:
    """Return the space-separated words in reverse order, joined by single spaces."""
    return " ".join(reversed([word for word in text.split(" ") if word]))


def is_alphanumeric(ch: str) -> bool:
    """Tell whether ``ch`` is an ASCII letter or digit."""
    return ch in _ALPHANUMERIC


def is_valid_palindrome(text: str) -> bool:
    """Tell whether the ASCII letters and digits of ``text`` read the same both ways, ignoring case."""
    kept = [ch.lower() for ch in text if is_alphanumeric(ch)]
    return kept == kept[::-1]