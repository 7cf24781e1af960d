"""Matrix addition, multiplication and transposition on nested lists."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

Matrix = Sequence[Sequence[Any]]


def _shape(matrix: Matrix, name: str) -> tuple[int, int]:
    rows = len(matrix)
    cols = len(matrix[0]) if rows else 0
    if any(len(row) != cols for row in matrix):
        raise ValueError(f"{name} is not rectangular")
    return rows, cols


def add(a: Matrix, b: Matrix) -> list[list[Any]]:
    """Return the element-wise sum of two matrices of the same shape."""
    if _shape(a, "a") != _shape(b, "b"):
        raise ValueError("matrices must have the same shape")
    return [[x + y for x, y in zip(row_a, row_b)] for row_a, row_b in zip(a, b)]


def multiply(a: Matrix, b: Matrix) -> list[list[Any]]:
    """Return the matrix product ``a`` times ``b``."""
    _, inner = _shape(a, "a")
    rows_b, _ = _shape(b, "b")
    if inner != rows_b:
        raise ValueError("columns of a must match rows of b")
    columns = list(zip(*b))
    return [[sum(x * y for x, y in zip(row, col)) for col in columns] for row in a]


def transpose(a: Matrix) -> list[list[Any]]:
    """Return the transpose of ``a``."""
    _shape(a, "a")
    return [list(column) for column in zip(*a)]