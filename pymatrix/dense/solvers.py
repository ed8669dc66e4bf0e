"""
Functional interface to the dense Matrix operations.

Each function accepts a Matrix or any 2D array-like (converted with
Matrix.from_array) and returns a new Matrix or a float. Inputs are
never modified.
"""

from __future__ import annotations

from numpy.typing import ArrayLike

from pymatrix.dense.matrix import Matrix


def _ensure_matrix(data: ArrayLike | Matrix) -> Matrix:
    """Convert raw array to Matrix if needed."""
    if isinstance(data, Matrix):
        return data
    return Matrix.from_array(data)


def identity(size: int) -> Matrix:
    """
    size x size identity matrix.

    Raises
    ------
    InvalidDimensionsError
        If size <= 0.
    """
    return Matrix.identity(size)


def transpose(data: ArrayLike | Matrix) -> Matrix:
    """Transpose of `data`."""
    return _ensure_matrix(data).transpose()


def is_square(data: ArrayLike | Matrix) -> bool:
    return _ensure_matrix(data).square()


def is_singular(data: ArrayLike | Matrix) -> bool:
    """True iff `data` is square with a determinant of exactly 0.0."""
    return _ensure_matrix(data).singular()


def determinant(data: ArrayLike | Matrix) -> float:
    """
    Determinant by recursive cofactor (Laplace) expansion.

    Parameters
    ----------
    data : array-like or Matrix
        Square matrix.

    Returns
    -------
    float

    Raises
    ------
    InvalidDimensionsError
        If `data` is not square.

    Notes
    -----
    Factorial time in the order of the matrix; a RuntimeWarning is
    issued above order 10.
    """
    return _ensure_matrix(data).determinant()


def minor(data: ArrayLike | Matrix, row: int, col: int) -> float:
    """Determinant of `data` without `row` and `col`."""
    return _ensure_matrix(data).minor(row, col)


def cofactor(data: ArrayLike | Matrix, row: int, col: int) -> float:
    """Signed minor (-1)^(row+col) * minor(data, row, col)."""
    return _ensure_matrix(data).cofactor(row, col)


def cofactor_matrix(data: ArrayLike | Matrix) -> Matrix:
    """Matrix of all cofactors of `data`."""
    return _ensure_matrix(data).cofactor_matrix()


def adjoint(data: ArrayLike | Matrix) -> Matrix:
    """Adjugate (transposed cofactor matrix) of `data`."""
    return _ensure_matrix(data).adjoint()


def inverse(data: ArrayLike | Matrix) -> Matrix:
    """
    Inverse of a square, non-singular matrix.

    Parameters
    ----------
    data : array-like or Matrix
        Square matrix of order >= 2.

    Returns
    -------
    Matrix
        adjoint(data) scaled by 1 / determinant(data).

    Raises
    ------
    InvalidDimensionsError
        If `data` is not square, or is 1x1 (no cofactors exist).
    SingularMatrixError
        If the determinant is exactly 0.0.
    """
    return _ensure_matrix(data).inverse()
