"""Basic vector and matrix operations."""

from __future__ import annotations

import itertools
from collections.abc import Iterable, Sequence


def dot_product(first: Iterable, second: Iterable, num: int):
    """Return the sum of products of the first ``num`` values of each input."""
    if num < 0:
        raise ValueError("num must not be negative")
    left = list(itertools.islice(first, num))
    right = list(itertools.islice(second, num))
    if len(left) < num or len(right) < num:
        raise ValueError(f"both sequences need at least {num} values")
    return sum(a * b for a, b in zip(left, right))


def _width(rows: list[list]) -> int:
    if not rows:
        return 0
    width = len(rows[0])
    if any(len(row) != width for row in rows):
        raise ValueError("matrix rows differ in length")
    return width


def matrix_mult(first: Sequence[Sequence], second: Sequence[Sequence]) -> list[list]:
    """Multiply two matrices given as lists of rows.

    The number of columns of ``first`` must equal the number of rows of
    ``second``.
    """
    a = [list(row) for row in first]
    b = [list(row) for row in second]
    inner = _width(a)
    _width(b)
    if inner != len(b):
        raise ValueError(
            f"cannot multiply: {inner} columns against {len(b)} rows"
        )
    columns = [list(col) for col in zip(*b)]
    return [[dot_product(row, col, inner) for col in columns] for row in a]