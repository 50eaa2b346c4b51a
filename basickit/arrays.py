"""Everyday operations on lists of integers and small matrices."""

from __future__ import annotations

import statistics
from collections.abc import Iterable, Sequence

__all__ = [
    "binary_search",
    "count_occurrences",
    "kth_largest",
    "largest",
    "median",
    "missing_number",
    "has_pair_with_sum",
    "remove_duplicates",
    "second_largest",
    "smallest",
    "sort_ascending",
    "sort_descending",
    "array_sum",
    "has_odd",
    "diagonal_sum",
    "matrix_multiply",
]


def binary_search(items: Sequence[int], target: int) -> int | None:
    """Index of ``target`` in the ascending ``items``, or None if it is absent."""
    low, high = 0, len(items) - 1
    while low <= high:
        mid = low + (high - low) // 2
        value = items[mid]
        if value == target:
            return mid
        if value < target:
            low = mid + 1
        else:
            high = mid - 1
    return None


def count_occurrences(items: Iterable[int], value: int) -> int:
    """How many times ``value`` appears in ``items``."""
    return sum(1 for item in items if item == value)


def kth_largest(items: Iterable[int], k: int) -> int:
    """The ``k``-th largest element, counting duplicates, with ``k`` from 1."""
    ordered = sort_descending(items)
    if not 1 <= k <= len(ordered):
        raise ValueError(f"k must be between 1 and {len(ordered)}, got {k}")
    return ordered[k - 1]


def largest(items: Iterable[int]) -> int:
    """The largest element; raises ValueError when ``items`` is empty."""
    return max(items)


def smallest(items: Iterable[int]) -> int:
    """The smallest element; raises ValueError when ``items`` is empty."""
    return min(items)


def median(items: Iterable[int]) -> float:
    """The median as a float; raises ValueError when ``items`` is empty."""
    return float(statistics.median(items))


def missing_number(items: Iterable[int], n: int) -> int:
    """The one number from 1..``n`` that ``items`` lacks."""
    return n * (n + 1) // 2 - sum(items)


def has_pair_with_sum(items: Iterable[int], target: int) -> bool:
    """True if two distinct elements add up to ``target``."""
    ordered = sort_ascending(items)
    low, high = 0, len(ordered) - 1
    while low < high:
        total = ordered[low] + ordered[high]
        if total == target:
            return True
        if total < target:
            low += 1
        else:
            high -= 1
    return False


def remove_duplicates(items: Iterable[int]) -> list[int]:
    """The elements in order of first appearance, each kept once."""
    return list(dict.fromkeys(items))


def second_largest(items: Iterable[int]) -> int:
    """The largest value below the maximum.

    Raises ValueError when there are fewer than two distinct values.
    """
    distinct = sorted(set(items), reverse=True)
    if len(distinct) < 2:
        raise ValueError("need at least two distinct values")
    return distinct[1]


def sort_ascending(items: Iterable[int]) -> list[int]:
    """A new list with the elements in ascending order."""
    return sorted(items)


def sort_descending(items: Iterable[int]) -> list[int]:
    """A new list with the elements in descending order."""
    return sorted(items, reverse=True)


def array_sum(items: Iterable[int]) -> int:
    """The sum of the elements."""
    return sum(items)


def has_odd(items: Iterable[int]) -> bool:
    """True if any element is odd."""
    return any(item % 2 != 0 for item in items)


def diagonal_sum(matrix: Sequence[Sequence[int]]) -> int:
    """Sum of the main and the anti-diagonal of a square matrix.

    A centre cell shared by both diagonals is counted twice.
    """
    size = len(matrix)
    if any(len(row) != size for row in matrix):
        raise ValueError("matrix must be square")
    return sum(row[i] + row[size - 1 - i] for i, row in enumerate(matrix))


def matrix_multiply(
    a: Sequence[Sequence[int]], b: Sequence[Sequence[int]]
) -> list[list[int]]:
    """The matrix product ``a`` times ``b``."""
    inner = len(b)
    if any(len(row) != inner for row in a):
        raise ValueError("columns of a must match rows of b")
    width = len(b[0]) if b else 0
    if any(len(row) != width for row in b):
        raise ValueError("rows of b must all have the same length")
    columns = list(zip(*b))
    return [
        [sum(x * y for x, y in zip(row, column)) for column in columns]
        for row in a
    ]