"""Dynamic programming: longest common subsequence and matrix chain order."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any


def lcs_length(a: Sequence[Any], b: Sequence[Any]) -> int:
    """Return the length of the longest common subsequence of ``a`` and ``b``."""
    previous = [0] * (len(b) + 1)
    for x in a:
        current = [0]
        for j, y in enumerate(b, start=1):
            if x == y:
                current.append(previous[j - 1] + 1)
            else:
                current.append(max(previous[j], current[j - 1]))
        previous = current
    return previous[-1]


def matrix_chain_cost(dims: Iterable[int]) -> int:
    """Return the fewest scalar multiplications needed for a matrix chain.

    Matrix ``i`` of the chain has ``dims[i]`` rows and ``dims[i + 1]`` columns.
    """
    p = list(dims)
    n = len(p) - 1
    if n < 1:
        raise ValueError("need at least two dimensions")
    if any(d <= 0 for d in p):
        raise ValueError("dimensions must be positive")
    cost = [[0] * n for _ in range(n)]
    for length in range(2, n + 1):
        for i in range(n - length + 1):
            j = i + length - 1
            cost[i][j] = min(
                cost[i][k] + cost[k + 1][j] + p[i] * p[k + 1] * p[j + 1]
                for k in range(i, j)
            )
    return cost[0][n - 1]