"""Text patterns built from stars, letters and digits.

Every function returns the pattern as a list of lines, each line exactly
as it would be printed, trailing spaces included.
"""

from __future__ import annotations

import string

__all__ = [
    "box",
    "character_triangle",
    "diamond",
    "equilateral",
    "full_pyramid",
    "hollow_diamond",
    "hollow_left_triangle",
    "hollow_rhombus",
    "hollow_right_triangle",
    "inverted_left_half",
    "inverted_pyramid",
    "inverted_right_half",
    "number_pattern",
    "numbered_triangle",
    "perfect_triangle",
    "right_alpha_pattern",
    "left_triangle",
]

_STAR = "* "
_GAP = "  "


def box(rows: int = 5) -> list[str]:
    """A square outline of stars, ``rows`` cells on a side."""
    lines = []
    for i in range(rows):
        inner_row = 0 < i < rows - 1
        lines.append(
            "".join(
                _GAP if inner_row and 0 < j < rows - 1 else _STAR
                for j in range(rows)
            )
        )
    return lines


def character_triangle(rows: int = 5) -> list[str]:
    """Row ``i`` repeats the ``i``-th capital letter ``i`` times."""
    letters = string.ascii_uppercase
    return [f"{letters[i - 1]} " * i for i in range(1, rows + 1)]


def diamond(rows: int = 5) -> list[str]:
    """A solid diamond of ``2 * rows - 1`` lines."""
    widths = list(range(1, rows + 1)) + list(range(rows - 1, 0, -1))
    return [" " * (rows - i) + "*" * (2 * i - 1) for i in widths]


def equilateral(rows: int = 5) -> list[str]:
    """A solid triangle pointing up, one star wider by two on each line."""
    return [" " * (rows - i - 1) + "*" * (2 * i + 1) for i in range(rows)]


def full_pyramid(rows: int = 5) -> list[str]:
    """A pyramid of spaced stars."""
    return [
        " " * (2 * (rows - i) - 1) + _STAR * (2 * i + 1) for i in range(rows)
    ]


def hollow_diamond(n: int = 5) -> list[str]:
    """The outline of a diamond of ``2 * n - 1`` lines."""
    lines = []
    for i in range(2 * n - 1):
        indent = 2 * (n - i) - 1 if i < n else 2 * (i - n + 1) + 1
        width = 2 * n - indent
        cells = "".join(
            _STAR if k in (0, width - 1) else _GAP for k in range(width)
        )
        lines.append(" " * indent + cells)
    return lines


def hollow_left_triangle(n: int = 9) -> list[str]:
    """The outline of a right-angled triangle with its right angle at the bottom left."""
    lines = []
    for i in range(n):
        lines.append(
            "".join(
                _STAR if j in (0, i) or i == n - 1 else _GAP
                for j in range(i + 1)
            )
        )
    return lines


def hollow_rhombus(n: int = 5) -> list[str]:
    """The outline of a rhombus leaning right, ``n`` stars on a side."""
    lines = []
    for i in range(1, n + 1):
        edge_row = i in (1, n)
        cells = "".join(
            "*" if edge_row or j in (1, n) else " " for j in range(1, n + 1)
        )
        lines.append(" " * (n - i) + cells)
    return lines


def hollow_right_triangle(n: int = 9) -> list[str]:
    """The outline of a right-angled triangle with its right angle at the bottom right."""
    lines = []
    for i in range(1, n + 1):
        lines.append(
            "".join(
                _STAR if n == i + j - 1 or i == n or j == n else _GAP
                for j in range(1, n + 1)
            )
        )
    return lines


def inverted_left_half(rows: int = 5) -> list[str]:
    """A half pyramid upside down, its right edge straight."""
    return [" " * (2 * i) + _STAR * (rows - i) for i in range(rows)]


def inverted_pyramid(rows: int = 5) -> list[str]:
    """A pyramid of spaced stars upside down."""
    return [
        " " * (2 * i) + _STAR * (2 * (rows - i) - 1) for i in range(rows)
    ]


def inverted_right_half(rows: int = 5) -> list[str]:
    """A half pyramid upside down, its left edge straight."""
    return [_STAR * (rows - i) for i in range(rows)]


def number_pattern(rows: int = 5) -> list[str]:
    """Row ``i`` repeats the number ``i`` a total of ``i`` times."""
    return [f"{i} " * i for i in range(1, rows + 1)]


def numbered_triangle(rows: int = 5) -> list[str]:
    """Row ``i`` counts from 1 up to ``i``."""
    return [
        "".join(f"{j} " for j in range(1, i + 1)) for i in range(1, rows + 1)
    ]


def perfect_triangle(rows: int = 10) -> list[str]:
    """A centred triangle of spaced stars."""
    return [" " * (rows - i) + _STAR * i for i in range(1, rows + 1)]


def right_alpha_pattern(rows: int = 5) -> list[str]:
    """Letters from A onwards, each row shorter and shifted right."""
    letters = string.ascii_uppercase
    return [
        _GAP * i + f"{letters[i]} " * (rows - i) for i in range(rows)
    ]


def left_triangle(size: int = 10) -> list[str]:
    """Rows of 0 up to ``size - 2`` spaced stars, ``size - 1`` rows in all."""
    return [_STAR * (i - 1) for i in range(1, size)]