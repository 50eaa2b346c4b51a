"""Small number routines: digit tricks, sequences and C integer sizes."""

from __future__ import annotations

import math
import struct

__all__ = [
    "is_armstrong",
    "is_evil",
    "factorial",
    "fibonacci",
    "fibonacci_series",
    "is_palindrome_number",
    "reverse_number",
    "sum_of_naturals",
    "digit_count",
    "power",
    "to_signed_char",
    "to_unsigned_char",
    "type_sizes",
]


def _digits(n: int) -> list[int]:
    return [int(ch) for ch in str(n)] if n > 0 else []


def is_armstrong(n: int) -> bool:
    """True if ``n`` equals the sum of the cubes of its digits."""
    return n == sum(d ** 3 for d in _digits(n))


def is_evil(n: int) -> bool:
    """True if the binary form of ``n`` has an even number of ones."""
    ones = bin(n).count("1") if n > 0 else 0
    return ones % 2 == 0


def factorial(n: int) -> int:
    """``n!``; raises ValueError for a negative ``n``."""
    if n < 0:
        raise ValueError("factorial is not defined for negative numbers")
    return math.factorial(n)


def fibonacci(n: int) -> int:
    """The ``n``-th Fibonacci number, 0 for any ``n`` below 1."""
    if n <= 0:
        return 0
    previous, current = 0, 1
    for _ in range(n - 1):
        previous, current = current, previous + current
    return current


def fibonacci_series(count: int) -> list[int]:
    """The first ``count`` Fibonacci numbers, starting from 0."""
    series = []
    a, b = 0, 1
    for _ in range(count):
        series.append(a)
        a, b = b, a + b
    return series


def reverse_number(n: int) -> int:
    """The digits of ``n`` in reverse order, keeping its sign."""
    sign = -1 if n < 0 else 1
    return sign * int(str(abs(n))[::-1])


def is_palindrome_number(n: int) -> bool:
    """True if ``n`` reads the same backwards; negative numbers never do."""
    if n < 0:
        return False
    return reverse_number(n) == n


def sum_of_naturals(n: int) -> int:
    """1 + 2 + ... + n; raises ValueError for a negative ``n``."""
    if n < 0:
        raise ValueError("n must not be negative")
    return n * (n + 1) // 2


def digit_count(n: int) -> int:
    """The number of decimal digits of ``n``, ignoring its sign."""
    return len(str(abs(n)))


def power(base, exponent):
    """``base`` raised to ``exponent``."""
    return base ** exponent


def to_unsigned_char(value: int) -> int:
    """What ``value`` becomes when stored in an 8-bit unsigned char."""
    return value % 256


def to_signed_char(value: int) -> int:
    """What ``value`` becomes when stored in an 8-bit signed char."""
    return (value + 128) % 256 - 128


_TYPE_FORMATS = {
    "int": "i",
    "float": "f",
    "double": "d",
    "char": "c",
    "short": "h",
    "long": "l",
    "long long": "q",
}


def type_sizes() -> dict[str, int]:
    """Byte sizes of the basic C types on this platform."""
    return {name: struct.calcsize(fmt) for name, fmt in _TYPE_FORMATS.items()}