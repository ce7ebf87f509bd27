"""Text patterns drawn row by row: triangles, pyramids, diamonds and friends.

Every function takes a row count and returns the rows as a list of strings,
without line terminators. A row count below one yields no rows.
"""

from __future__ import annotations

from math import comb

__all__ = [
    "alphabet_pattern",
    "complex_pattern",
    "dabangg_pattern",
    "diamond_star",
    "number_diamond",
    "number_triangle",
    "binomial",
    "pascal_triangle",
    "floyd_pyramid",
    "counting_rows",
    "shifted_number_pattern",
    "star_triangle",
]


def _digits(values) -> str:
    return "".join(str(v) for v in values)


def alphabet_pattern(rows: int) -> list[str]:
    """Letters ending in 'D', each row one letter longer: 'D', 'C D', 'B C D', ...

    Each letter is followed by a single space. Rows past the fourth step below
    'A' through the character table, one byte at a time.
    """
    lines = []
    for row in range(1, rows + 1):
        start = ord("D") - row + 1
        lines.append("".join(f"{chr((start + offset) % 256)} " for offset in range(row)))
    return lines


def complex_pattern(rows: int) -> list[str]:
    """A block of stars ``rows + 2`` wide with a hollow band in rows two and three."""
    width = rows + 2
    lines = []
    for row in range(1, rows + 1):
        hollow_row = row in (2, 3)
        lines.append(
            "".join(" " if hollow_row and 1 < col < 6 else "*" for col in range(1, width + 1))
        )
    return lines


def dabangg_pattern(rows: int) -> list[str]:
    """Counting up and back down with a widening band of stars in the middle."""
    lines = []
    for row in range(1, rows + 1):
        count = rows - row + 1
        stars = "*" * (2 * (row - 1))
        lines.append(_digits(range(1, count + 1)) + stars + _digits(range(count, 0, -1)))
    return lines


def diamond_star(rows: int) -> list[str]:
    """A diamond of stars, widest in the middle row."""
    middle = rows // 2 + 1
    spaces = rows // 2
    stars = 1
    lines = []
    for row in range(1, rows + 1):
        lines.append(" " * spaces + "*" * stars)
        if row < middle:
            spaces -= 1
            stars += 2
        else:
            spaces += 1
            stars -= 2
    return lines


def number_diamond(rows: int) -> list[str]:
    """A centred pyramid whose rows count up to the row number and back down."""
    lines = []
    for row in range(1, rows + 1):
        pad = " " * (rows - row)
        lines.append(pad + _digits(range(1, row + 1)) + _digits(range(row - 1, 0, -1)) + pad)
    return lines


def number_triangle(rows: int) -> list[str]:
    """A right-aligned triangle where row *i* repeats the number *i*, *i* times."""
    return [" " * (rows - row) + str(row) * row for row in range(1, rows + 1)]


def binomial(n: int, k: int) -> int:
    """The binomial coefficient "n choose k"."""
    return comb(n, k)


def pascal_triangle(rows: int) -> list[str]:
    """Pascal's triangle, each entry followed by a space and each row indented."""
    lines = []
    for row in range(rows):
        indent = " " * (rows - row - 1)
        lines.append(indent + "".join(f"{binomial(row, k)} " for k in range(row + 1)))
    return lines


def floyd_pyramid(rows: int) -> list[str]:
    """A right-aligned pyramid of consecutive numbers carried on from row to row."""
    lines = []
    value = 1
    for row in range(1, rows + 1):
        lines.append(" " * (rows - row) + _digits(range(value, value + row)))
        value += row
    return lines


def counting_rows(rows: int) -> list[str]:
    """Rows that count from one up to the row number."""
    return [_digits(range(1, row + 1)) for row in range(1, rows + 1)]


def shifted_number_pattern(rows: int) -> list[str]:
    """Row *i* counts from *i* up to ``rows``, indented by half the row number."""
    return [
        " " * (row // 2) + _digits(range(row, rows + 1)) for row in range(1, rows + 1)
    ]


def star_triangle(rows: int) -> list[str]:
    """A right-aligned triangle of stars."""
    return [" " * (rows - row) + "*" * row for row in range(1, rows + 1)]