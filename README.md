# basickit

A small library of classic programming exercises written as plain,
reusable functions. It uses only the standard library and supports
Python 3.10 and later.

## Modules

### `basickit.patterns`

Builders for text shapes. Each returns the pattern as a list of lines,
exactly as they would be printed, trailing spaces included:
`box`, `character_triangle`, `diamond`, `equilateral`, `full_pyramid`,
`hollow_diamond`, `hollow_left_triangle`, `hollow_rhombus`,
`hollow_right_triangle`, `inverted_left_half`, `inverted_pyramid`,
`inverted_right_half`, `number_pattern`, `numbered_triangle`,
`perfect_triangle`, `right_alpha_pattern` and `left_triangle`.
Every builder takes the size of the shape as its one argument and has a
default for it.

### `basickit.numeric`

- `is_armstrong(n)`: whether `n` equals the sum of the cubes of its digits.
- `is_evil(n)`: whether the binary form of `n` has an even number of ones.
- `factorial(n)`: `n!`; `ValueError` for negative `n`.
- `fibonacci(n)` and `fibonacci_series(count)`.
- `reverse_number(n)` (keeps the sign) and `is_palindrome_number(n)`.
- `sum_of_naturals(n)`: `1 + ... + n`; `ValueError` for negative `n`.
- `digit_count(n)` and `power(base, exponent)`.
- `to_signed_char(value)` and `to_unsigned_char(value)`: the value an
  8-bit signed or unsigned char would hold.
- `type_sizes()`: byte sizes of the basic C types on the running platform.

### `basickit.arrays`

- `binary_search(items, target)`: index in an ascending sequence, or `None`.
- `count_occurrences`, `largest`, `smallest`, `array_sum`, `has_odd`.
- `kth_largest(items, k)`: `k` counts from 1; `ValueError` when out of range.
- `second_largest(items)`: `ValueError` with fewer than two distinct values.
- `median(items)`: always a float.
- `missing_number(items, n)`: the one number from `1..n` that is absent.
- `has_pair_with_sum(items, target)`, `remove_duplicates(items)`.
- `sort_ascending`, `sort_descending`: new lists, input untouched.
- `diagonal_sum(matrix)`: both diagonals of a square matrix, a shared
  centre cell counted twice.
- `matrix_multiply(a, b)`: `ValueError` when the shapes do not fit.

### `basickit.text`

- `concatenate(first, second, limit=24)`: joins the first lines of both
  strings, cut to `limit` characters.
- `unique_letters`, `reverse`, `remove_spaces`, `count_vowels`, `word_count`.
- `is_palindrome`, `is_pangram`, `is_anagram`.
- `first_non_repeating(text)`: the first character that occurs once, or `None`.
- `mirrored_match(text)`: whether any character before the middle equals
  its mirror from the other end.

## Example

```python
from basickit import arrays, numeric, patterns, text

print("\n".join(patterns.diamond(5)))

numeric.is_armstrong(153)          # True
numeric.factorial(10)              # 3628800
arrays.kth_largest([55, 66, 44, 33, 22, 7, 88, 34, 56, 23], 3)  # 56
arrays.missing_number([1, 2, 3, 4, 6, 7, 8, 9], 9)              # 5
text.is_anagram("listen", "silent")  # True
text.word_count("i love coding")     # 3
```

## What it does not do

basickit is a library only. It has no command-line program, reads no
input and prints nothing; the pattern builders return lines and leave
printing to the caller.

## Tests

The tests are written for pytest, which the `test` extra installs.