"""
Matrix: dense, arbitrary-size float64 matrix.

Storage is a single C-contiguous (row-major) numpy buffer of shape
(rows, cols), owned exclusively by its Matrix. Every way of building a
Matrix from other data copies that data, and nothing hands the buffer
out: to_numpy() and to_list() return copies.

Construction:
    Matrix()                  1x1 zero
    Matrix(scalar)            1x1 holding scalar
    Matrix(rows, cols)        rows x cols zeros
    Matrix(rows, cols, data)  rows x cols copied from an array-like
    Matrix(other)             deep copy
    Matrix.from_array(data)   shape taken from a 2D array-like
    Matrix.identity(size)
"""

from __future__ import annotations

from numbers import Real
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pymatrix.core.exceptions import (
    InvalidDimensionsError,
    OutOfBoundsError,
    SingularMatrixError,
    ValidationError,
)
from pymatrix.core.precision import DEFAULT_ATOL, DEFAULT_RTOL, is_close
from pymatrix.core.validation import (
    check_2d,
    check_array,
    check_bounds,
    check_index,
    check_inner_dims,
    check_same_shape,
    check_scalar,
    check_size,
    check_square,
)
from pymatrix.dense import _cofactor


def _is_scalar(value: Any) -> bool:
    return isinstance(value, Real) and not isinstance(value, (bool, np.bool_))


class Matrix:
    """
    Dense rows x cols matrix of float64 values.

    rows and cols are always >= 1. Arithmetic requires exact dimension
    agreement (no broadcasting); equality is exact element-wise float
    comparison. Determinant, cofactors and inverse use cofactor
    expansion and are only practical for small square matrices.

    Element access:
        m.get(r, c)       read
        m[r, c]           read
        m[r, c] = value   write

    Negative indices are out of bounds, they never wrap around.
    """

    __slots__ = ('_values',)

    # Mutable: not hashable. Not a sequence: m[r, c] only.
    __hash__ = None  # type: ignore[assignment]
    __iter__ = None  # type: ignore[assignment]

    # numpy defers binary operators to Matrix (np.float64(2) * m -> __rmul__)
    __array_ufunc__ = None

    _values: NDArray[np.float64]

    def __init__(self, *args: Any) -> None:
        if len(args) == 0:
            values = np.zeros((1, 1), dtype=np.float64)
        elif len(args) == 1:
            (arg,) = args
            if isinstance(arg, Matrix):
                values = arg._values.copy()
            else:
                values = np.full((1, 1), check_scalar(arg, 'scalar'), dtype=np.float64)
        elif len(args) == 2:
            rows = check_size(args[0], 'rows')
            cols = check_size(args[1], 'cols')
            values = np.zeros((rows, cols), dtype=np.float64)
        elif len(args) == 3:
            rows = check_size(args[0], 'rows')
            cols = check_size(args[1], 'cols')
            values = self._copy_source(args[2], rows, cols)
        else:
            raise TypeError(
                f"Matrix() takes 0 to 3 positional arguments but {len(args)} were given"
            )
        self._values = values

    @staticmethod
    def _copy_source(source: ArrayLike, rows: int, cols: int) -> NDArray[np.float64]:
        data = check_array(source, 'source')
        if data.shape != (rows, cols):
            raise InvalidDimensionsError(
                f"source: expected shape ({rows}, {cols}), got {data.shape}",
                operation='construct',
                expected=(rows, cols),
                actual=data.shape,
            )
        return np.array(data, dtype=np.float64, order='C', copy=True)

    @classmethod
    def _wrap(cls, values: NDArray[np.float64]) -> Matrix:
        """Adopt a freshly computed buffer that nothing else references."""
        result = cls.__new__(cls)
        result._values = values
        return result

    @classmethod
    def from_array(cls, data: ArrayLike) -> Matrix:
        """
        Build a Matrix from array-like data, taking its shape.

        Parameters
        ----------
        data : array-like
            2D nested sequence or ndarray. 1D input becomes a single row.
            Copied; the caller's object is not retained.
        """
        values = check_array(data, 'data')
        if values.ndim == 1:
            values = values.reshape(1, -1)
        check_2d(values, 'data')
        if values.size == 0:
            raise InvalidDimensionsError(
                f"data: matrix must have at least one row and one column, got shape {values.shape}",
                operation='construct',
                expected='rows >= 1 and cols >= 1',
                actual=values.shape,
            )
        return cls._wrap(np.array(values, dtype=np.float64, order='C', copy=True))

    @classmethod
    def zeros(cls, rows: int, cols: int) -> Matrix:
        """rows x cols matrix of zeros."""
        return cls(rows, cols)

    @classmethod
    def identity(cls, size: int) -> Matrix:
        """size x size identity matrix. size <= 0 raises InvalidDimensionsError."""
        result = cls(size, size)
        np.fill_diagonal(result._values, 1.0)
        return result

    # ------------------------------------------------------------------
    # Copying and assignment
    # ------------------------------------------------------------------

    def copy(self) -> Matrix:
        """Deep copy."""
        return self._wrap(self._values.copy())

    def __copy__(self) -> Matrix:
        return self.copy()

    def __deepcopy__(self, memo: dict) -> Matrix:
        return self.copy()

    def assign(self, other: Matrix) -> Matrix:
        """
        Replace this matrix's contents with a deep copy of `other`.

        Dimensions follow `other`. Assigning a matrix to itself is a no-op
        and keeps the current buffer.

        Returns:
            self
        """
        if other is self:
            return self
        if not isinstance(other, Matrix):
            raise ValidationError(
                f"assign: expected a Matrix, got {type(other).__name__}"
            )
        self._values = other._values.copy()
        return self

    # ------------------------------------------------------------------
    # Dimensions and element access
    # ------------------------------------------------------------------

    @property
    def rows(self) -> int:
        """Number of rows."""
        return self._values.shape[0]

    @property
    def cols(self) -> int:
        """Number of columns."""
        return self._values.shape[1]

    @property
    def shape(self) -> tuple[int, int]:
        """(rows, cols)."""
        return (self._values.shape[0], self._values.shape[1])

    def _locate(self, row: Any, col: Any) -> tuple[int, int]:
        r = check_index(row, 'row')
        c = check_index(col, 'col')
        check_bounds(r, c, self.shape)
        return r, c

    @staticmethod
    def _split_key(key: Any) -> tuple[Any, Any]:
        if not isinstance(key, tuple) or len(key) != 2:
            raise ValidationError(
                f"Matrix indices must be a (row, col) pair, got {key!r}"
            )
        return key

    def get(self, row: int, col: int) -> float:
        """
        Element at (row, col).

        Raises:
            OutOfBoundsError: If row or col is outside the matrix
        """
        r, c = self._locate(row, col)
        return float(self._values[r, c])

    def __getitem__(self, key: tuple[int, int]) -> float:
        r, c = self._locate(*self._split_key(key))
        return float(self._values[r, c])

    def __setitem__(self, key: tuple[int, int], value: float) -> None:
        r, c = self._locate(*self._split_key(key))
        self._values[r, c] = check_scalar(value, 'value')

    def to_numpy(self) -> NDArray[np.float64]:
        """Copy of the values as a (rows, cols) float64 array."""
        return self._values.copy()

    def to_list(self) -> list[list[float]]:
        """Values as nested lists, one list per row."""
        return self._values.tolist()

    # ------------------------------------------------------------------
    # Arithmetic
    # ------------------------------------------------------------------

    def __add__(self, other: Any) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        check_same_shape(self.shape, other.shape, 'add')
        return self._wrap(self._values + other._values)

    def __sub__(self, other: Any) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        check_same_shape(self.shape, other.shape, 'subtract')
        return self + other * -1

    def __mul__(self, other: Any) -> Matrix:
        if isinstance(other, Matrix):
            return self._matmul(other)
        if _is_scalar(other):
            return self._scale(other)
        return NotImplemented

    def __rmul__(self, other: Any) -> Matrix:
        if _is_scalar(other):
            return self._scale(other)
        return NotImplemented

    def __matmul__(self, other: Any) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self._matmul(other)

    def __neg__(self) -> Matrix:
        return self * -1

    def _matmul(self, other: Matrix) -> Matrix:
        check_inner_dims(self.shape, other.shape, 'multiply')
        left = self._values
        right = other._values
        # Accumulate one rank-1 term per k so every entry sums its
        # products in increasing k, starting from 0.0
        result = np.zeros((left.shape[0], right.shape[1]), dtype=np.float64)
        for k in range(left.shape[1]):
            result += np.outer(left[:, k], right[k, :])
        return self._wrap(result)

    def _scale(self, scalar: float) -> Matrix:
        return self._wrap(self._values * float(scalar))

    def __iadd__(self, other: Any) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.assign(self + other)

    def __isub__(self, other: Any) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.assign(self - other)

    def __imul__(self, other: Any) -> Matrix:
        result = self.__mul__(other)
        if result is NotImplemented:
            return NotImplemented
        return self.assign(result)

    def __imatmul__(self, other: Any) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.assign(self._matmul(other))

    # ------------------------------------------------------------------
    # Comparison
    # ------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if other is self:
            return True
        if not isinstance(other, Matrix):
            return NotImplemented
        if self.shape != other.shape:
            return False
        return bool(np.array_equal(self._values, other._values))

    def allclose(
        self,
        other: Matrix,
        rtol: float = DEFAULT_RTOL,
        atol: float = DEFAULT_ATOL,
    ) -> bool:
        """
        Element-wise |self - other| <= atol + rtol * |other|.

        Differently shaped matrices are never close.
        """
        if not isinstance(other, Matrix):
            raise ValidationError(
                f"allclose: expected a Matrix, got {type(other).__name__}"
            )
        if self.shape != other.shape:
            return False
        return bool(np.all(is_close(self._values, other._values, rtol=rtol, atol=atol)))

    # ------------------------------------------------------------------
    # Structure
    # ------------------------------------------------------------------

    def transpose(self) -> Matrix:
        """New cols x rows matrix with result[j, i] == self[i, j]."""
        return self._wrap(self._values.T.copy(order='C'))

    @property
    def T(self) -> Matrix:
        return self.transpose()

    def square(self) -> bool:
        """True iff rows == cols."""
        rows, cols = self.shape
        if rows < 0 or cols < 0:
            raise OutOfBoundsError(
                f"corrupt dimensions {rows}x{cols}", shape=(rows, cols)
            )
        return rows == cols

    def singular(self) -> bool:
        """True iff square with a determinant of exactly 0.0."""
        return self.square() and self.determinant() == 0.0

    # ------------------------------------------------------------------
    # Cofactor expansion
    # ------------------------------------------------------------------

    def _check_expansion_target(self, row: Any, col: Any, operation: str) -> tuple[int, int]:
        """Validate (row, col) for removal from this (square) matrix."""
        if self.rows == 1:
            raise InvalidDimensionsError(
                f"{operation}: a 1x1 matrix has no submatrix to expand",
                operation=operation,
                expected='order >= 2',
                actual=self.shape,
            )
        return self._locate(row, col)

    def determinant(self) -> float:
        """
        Determinant by recursive cofactor expansion along the first row.

        Raises:
            InvalidDimensionsError: If the matrix is not square
        """
        check_square(self.shape, 'determinant')
        _cofactor.warn_if_expensive(self.rows, 'determinant')
        return _cofactor.laplace_determinant(self._values)

    def minor(self, row: int, col: int) -> float:
        """
        Determinant of the submatrix without `row` and `col`.

        Raises:
            InvalidDimensionsError: If the matrix is not square or is 1x1
            OutOfBoundsError: If row or col is outside the matrix
        """
        check_square(self.shape, 'minor')
        r, c = self._check_expansion_target(row, col, 'minor')
        return _cofactor.minor(self._values, r, c)

    def cofactor(self, row: int | None = None, col: int | None = None) -> float | Matrix:
        """
        Signed minor (-1)^(row+col) * minor(row, col).

        Called without arguments, returns the whole cofactor matrix
        (see cofactor_matrix).
        """
        if row is None and col is None:
            return self.cofactor_matrix()
        if row is None or col is None:
            raise ValidationError("cofactor: pass both row and col, or neither")
        check_square(self.shape, 'cofactor')
        r, c = self._check_expansion_target(row, col, 'cofactor')
        return _cofactor.cofactor(self._values, r, c)

    def cofactor_matrix(self) -> Matrix:
        """Same-shape matrix whose (i, j) entry is cofactor(i, j)."""
        check_square(self.shape, 'cofactor')
        if self.rows == 1:
            raise InvalidDimensionsError(
                "cofactor: a 1x1 matrix has no submatrix to expand",
                operation='cofactor',
                expected='order >= 2',
                actual=self.shape,
            )
        _cofactor.warn_if_expensive(self.rows, 'cofactor')
        return self._wrap(_cofactor.cofactor_matrix(self._values))

    def adjoint(self) -> Matrix:
        """Adjugate: transpose of the cofactor matrix."""
        return self.cofactor_matrix().transpose()

    def inverse(self) -> Matrix:
        """
        Inverse as adjoint() scaled by 1 / determinant().

        Raises:
            InvalidDimensionsError: If the matrix is not square
            SingularMatrixError: If the determinant is exactly 0.0
                (an InvalidDimensionsError subclass)
        """
        check_square(self.shape, 'inverse')
        det = self.determinant()
        if det == 0.0:
            raise SingularMatrixError(
                f"inverse: {self.rows}x{self.cols} matrix is singular (determinant is 0)",
                matrix_name='self',
                determinant=det,
            )
        return self.adjoint() * (1 / det)

    def __repr__(self) -> str:
        return f"Matrix(rows={self.rows}, cols={self.cols})"
