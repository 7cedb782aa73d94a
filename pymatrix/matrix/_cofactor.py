"""
Cofactor (Laplace) expansion kernels over raw 2D arrays.

These operate on validated float64 ndarrays and perform no shape checks
of their own; Matrix is responsible for validation. Cost is O(n!) so the
intended range is n <= ~8.

Do not substitute an LU factorization here: LU rounds differently, and
fixture tolerances assume this summation order.
"""

from __future__ import annotations

from typing import Any

import numpy as np
from numpy.typing import NDArray


def minor(a: NDArray[np.floating[Any]], row: int, column: int) -> NDArray[np.floating[Any]]:
    """Return `a` with one row and one column deleted."""
    return np.delete(np.delete(a, row, axis=0), column, axis=1)


def determinant(a: NDArray[np.floating[Any]]) -> float:
    """
    Determinant by recursive expansion along the first row.

        det(A) = sum_j (-1)^j * a[0, j] * det(minor(A, 0, j))
    """
    n = a.shape[0]
    if n == 1:
        return float(a[0, 0])
    if n == 2:
        return float(a[0, 0] * a[1, 1] - a[0, 1] * a[1, 0])

    total = 0.0
    for j in range(n):
        if a[0, j] == 0.0:
            continue
        sign = 1.0 if j % 2 == 0 else -1.0
        total += sign * float(a[0, j]) * determinant(minor(a, 0, j))
    return total


def adjugate(a: NDArray[np.floating[Any]]) -> NDArray[np.floating[Any]]:
    """
    Transpose of the cofactor matrix.

        adj[i, j] = (-1)^(i+j) * det(minor(A, j, i))

    The 1x1 adjugate is [[1]] by convention, so that adj / det is the
    inverse for every n >= 1.
    """
    n = a.shape[0]
    if n == 1:
        return np.ones((1, 1), dtype=np.float64)

    adj = np.empty((n, n), dtype=np.float64)
    for i in range(n):
        for j in range(n):
            sign = 1.0 if (i + j) % 2 == 0 else -1.0
            adj[i, j] = sign * determinant(minor(a, j, i))
    return adj
