"""Small string routines: palindromes, anagrams, counting and cleaning."""

from __future__ import annotations

import string
from collections import Counter

__all__ = [
    "concatenate",
    "unique_letters",
    "is_palindrome",
    "is_pangram",
    "first_non_repeating",
    "reverse",
    "remove_spaces",
    "mirrored_match",
    "count_vowels",
    "word_count",
    "is_anagram",
]

_VOWELS = frozenset("aeiouAEIOU")


def _first_line(text: str) -> str:
    return text.split("\n", 1)[0]


def concatenate(first: str, second: str, limit: int = 24) -> str:
    """Join the first lines of both strings, keeping at most ``limit`` characters."""
    if limit < 0:
        raise ValueError("limit must not be negative")
    return (_first_line(first) + _first_line(second))[:limit]


def unique_letters(text: str) -> str:
    """Each character of ``text`` once, in order of first appearance."""
    return "".join(dict.fromkeys(text))


def is_palindrome(text: str) -> bool:
    """True if ``text`` reads the same backwards."""
    return text == text[::-1]


def is_pangram(text: str) -> bool:
    """True if every English letter appears, in either case."""
    return set(string.ascii_lowercase) <= set(text.lower())


def first_non_repeating(text: str) -> str | None:
    """The first character that occurs exactly once, or None."""
    counts = Counter(text)
    return next((ch for ch in text if counts[ch] == 1), None)


def reverse(text: str) -> str:
    """``text`` backwards."""
    return text[::-1]


def remove_spaces(text: str) -> str:
    """``text`` with every space character taken out."""
    return text.replace(" ", "")


def mirrored_match(text: str) -> bool:
    """True if any character equals its mirror from the other end.

    Only the pairs before the middle are compared.
    """
    half = len(text) // 2
    return any(a == b for a, b in zip(text[:half], reversed(text)))


def count_vowels(text: str) -> int:
    """The number of English vowels, upper or lower case."""
    return sum(1 for ch in text if ch in _VOWELS)


def word_count(text: str) -> int:
    """The number of space-separated words."""
    return sum(1 for word in text.split(" ") if word)


def is_anagram(first: str, second: str) -> bool:
    """True if the two strings hold the same characters the same number of times."""
    return Counter(first) == Counter(second)