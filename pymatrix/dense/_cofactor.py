"""
Cofactor (Laplace) expansion kernels.

Plain functions over square float64 ndarrays. Callers (Matrix methods)
validate squareness, order and indices first; these kernels assume
valid input.

The determinant is the textbook recursive expansion along the first row:

    det(A) = sum_i A[0, i] * (-1)^(0+i) * det(A without row 0, column i)

with det of a 1x1 matrix being its sole element. Cost is O(n!) with no
memoisation and no pivoting, so it is only practical for small orders.
Results must stay those of the expansion itself: a decomposition (LU, QR)
rounds differently and changes which matrices come out exactly singular.
"""

from __future__ import annotations

import warnings
from typing import Any

import numpy as np
from numpy.typing import NDArray

# Orders above this emit a RuntimeWarning before expanding (11! terms and up)
LAPLACE_WARNING_ORDER = 10


def warn_if_expensive(order: int, operation: str) -> None:
    """Warn when a cofactor expansion of this order will be slow."""
    if order > LAPLACE_WARNING_ORDER:
        warnings.warn(
            f"{operation}: cofactor expansion of a {order}x{order} matrix "
            f"takes factorial time ({order}! terms) and may be very slow",
            RuntimeWarning,
            stacklevel=3,
        )


def sign(row: int, col: int) -> float:
    """(-1)^(row + col), by parity."""
    return -1.0 if (row + col) % 2 else 1.0


def submatrix(a: NDArray[np.floating[Any]], row: int, col: int) -> NDArray[np.float64]:
    """Fresh copy of `a` without `row` and `col`, relative order preserved."""
    return np.delete(np.delete(a, row, axis=0), col, axis=1)


def laplace_determinant(a: NDArray[np.floating[Any]]) -> float:
    """Determinant by recursive first-row cofactor expansion."""
    n = a.shape[0]
    if n == 1:
        return float(a[0, 0])

    total = 0.0
    for i in range(n):
        total += float(a[0, i]) * cofactor(a, 0, i)
    return total


def minor(a: NDArray[np.floating[Any]], row: int, col: int) -> float:
    """Determinant of the submatrix without `row` and `col`. Requires order >= 2."""
    return laplace_determinant(submatrix(a, row, col))


def cofactor(a: NDArray[np.floating[Any]], row: int, col: int) -> float:
    """Signed minor."""
    return sign(row, col) * minor(a, row, col)


def cofactor_matrix(a: NDArray[np.floating[Any]]) -> NDArray[np.float64]:
    """
    Matrix of cofactors of `a`.

    Every entry is computed from the untouched source `a` into a fresh
    buffer, so no already-replaced entry feeds a later minor.
    """
    n = a.shape[0]
    result = np.empty((n, n), dtype=np.float64)
    for i in range(n):
        for j in range(n):
            result[i, j] = cofactor(a, i, j)
    return result
