import string

import pytest

from basickit import patterns


def _stars(line):
    return line.count("*")


def _indent(line):
    return len(line) - len(line.lstrip(" "))


def test_box_edges_and_hollow_inside():
    lines = patterns.box(5)
    assert len(lines) == 5
    assert lines[0] == "* " * 5
    assert lines[-1] == lines[0]
    for line in lines[1:-1]:
        assert line.startswith("* ")
        assert line.endswith("* ")
        assert _stars(line) == 2


def test_character_triangle_letters():
    lines = patterns.character_triangle(5)
    assert len(lines) == 5
    for number, line in enumerate(lines, start=1):
        assert line.split() == [string.ascii_uppercase[number - 1]] * number


@pytest.mark.parametrize("rows", [1, 3, 5, 7])
def test_diamond_is_symmetric_and_centred(rows):
    lines = patterns.diamond(rows)
    assert len(lines) == 2 * rows - 1
    assert lines == lines[::-1]
    for line in lines:
        assert _stars(line) % 2 == 1
        assert _indent(line) + _stars(line) // 2 == rows - 1
    assert _stars(lines[rows - 1]) == 2 * rows - 1


def test_equilateral_is_upper_half_of_diamond():
    assert patterns.equilateral(5) == patterns.diamond(5)[:5]


def test_full_pyramid_growth():
    lines = patterns.full_pyramid(5)
    assert [_stars(line) for line in lines] == [1, 3, 5, 7, 9]
    indents = [_indent(line) for line in lines]
    assert all(a - b == 2 for a, b in zip(indents, indents[1:]))


def test_inverted_pyramid_mirrors_full_pyramid_counts():
    full = [_stars(line) for line in patterns.full_pyramid(6)]
    inverted = [_stars(line) for line in patterns.inverted_pyramid(6)]
    assert inverted == full[::-1]
    assert [_indent(line) for line in patterns.inverted_pyramid(6)] == list(
        range(0, 12, 2)
    )


@pytest.mark.parametrize("n", [2, 5, 8])
def test_hollow_diamond_outline(n):
    lines = patterns.hollow_diamond(n)
    assert len(lines) == 2 * n - 1
    assert lines == lines[::-1]
    assert _stars(lines[0]) == 1
    assert all(_stars(line) == 2 for line in lines[1:-1])


def test_hollow_left_triangle_outline():
    lines = patterns.hollow_left_triangle(9)
    assert len(lines) == 9
    assert _stars(lines[0]) == 1
    assert all(_stars(line) == 2 for line in lines[1:-1])
    assert lines[-1] == "* " * 9
    assert all(line.startswith("*") for line in lines)


def test_hollow_rhombus_source_example():
    assert patterns.hollow_rhombus(5) == [
        "    *****",
        "   *   *",
        "  *   *",
        " *   *",
        "*****",
    ]


@pytest.mark.parametrize("n", [3, 6])
def test_hollow_rhombus_shape(n):
    lines = patterns.hollow_rhombus(n)
    assert [_indent(line) for line in lines] == list(range(n - 1, -1, -1))
    assert lines[0].strip() == "*" * n
    assert lines[-1].strip() == "*" * n


def test_hollow_right_triangle_outline():
    lines = patterns.hollow_right_triangle(9)
    assert len(lines) == 9
    assert lines[-1] == "* " * 9
    assert all(line.endswith("* ") for line in lines)
    assert _stars(lines[0]) == 1
    assert all(_stars(line) == 2 for line in lines[1:-1])


def test_inverted_left_half_shape():
    lines = patterns.inverted_left_half(5)
    assert [_stars(line) for line in lines] == [5, 4, 3, 2, 1]
    assert len({len(line) for line in lines}) == 1


def test_inverted_right_half_shape():
    lines = patterns.inverted_right_half(5)
    assert [_stars(line) for line in lines] == [5, 4, 3, 2, 1]
    assert all(line.startswith("*") for line in lines)


def test_number_pattern_rows():
    for number, line in enumerate(patterns.number_pattern(5), start=1):
        assert line.split() == [str(number)] * number


def test_numbered_triangle_rows():
    for number, line in enumerate(patterns.numbered_triangle(5), start=1):
        assert [int(token) for token in line.split()] == list(
            range(1, number + 1)
        )


def test_perfect_triangle_shape():
    lines = patterns.perfect_triangle(10)
    assert len(lines) == 10
    assert lines[-1] == "* " * 10
    assert [_stars(line) for line in lines] == list(range(1, 11))


def test_right_alpha_pattern_shape():
    lines = patterns.right_alpha_pattern(5)
    for index, line in enumerate(lines):
        assert _indent(line) == 2 * index
        assert set(line.split()) == {string.ascii_uppercase[index]}
        assert len(line.split()) == 5 - index


def test_left_triangle_starts_empty():
    lines = patterns.left_triangle(10)
    assert len(lines) == 9
    assert lines[0] == ""
    assert [_stars(line) for line in lines] == list(range(9))


def test_zero_rows_give_nothing():
    assert patterns.box(0) == []
    assert patterns.diamond(0) == []
    assert patterns.hollow_diamond(0) == []