"""
Input validation utilities for pymatrix.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion (except np.asarray on array-likes)
    - No clamping or wraparound of indices
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

import operator
from numbers import Real
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pymatrix.core.exceptions import (
    InvalidDimensionsError,
    OutOfBoundsError,
    ValidationError,
)


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[np.float64]:
    """
    Validate and convert input to a float64 numpy array.

    Accepts any array-like and converts to numpy array. Rejects inputs
    that result in object dtype (indicating mixed types or ragged rows)
    and non-numeric dtypes.

    Args:
        array: Input to validate
        name: Parameter name for error messages

    Returns:
        numpy.ndarray with float64 dtype (may share memory with the input)

    Raises:
        InvalidDimensionsError: If nested sequences are ragged
        ValidationError: If input cannot be converted to numeric array
    """
    try:
        result = np.asarray(array)
    except ValueError as e:
        # numpy refuses inhomogeneous nested sequences outright
        raise InvalidDimensionsError(
            f"{name}: rows have inconsistent lengths: {e}",
            operation='construct',
        ) from e
    except TypeError as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
        )

    # Reject non-numeric dtypes (strings, bytes, datetime, etc.)
    if not np.issubdtype(result.dtype, np.number) and result.dtype != np.bool_:
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected numeric data"
        )

    if np.issubdtype(result.dtype, np.complexfloating):
        raise ValidationError(
            f"{name}: complex dtype {result.dtype}, expected real data"
        )

    if result.dtype != np.float64:
        result = result.astype(np.float64)

    return result


def check_2d(array: NDArray[np.float64], name: str) -> None:
    """
    Verify array is 2-dimensional.

    Args:
        array: Array to check
        name: Parameter name for error messages

    Raises:
        InvalidDimensionsError: If array is not 2D
    """
    if array.ndim != 2:
        raise InvalidDimensionsError(
            f"{name}: expected 2D array, got {array.ndim}D with shape {array.shape}",
            operation='construct',
            expected=2,
            actual=array.ndim,
        )


def check_size(value: Any, name: str) -> int:
    """
    Convert a row/column count to int and verify it is positive.

    Args:
        value: Requested count
        name: Parameter name for error messages

    Returns:
        The count as a Python int

    Raises:
        ValidationError: If value is not an integer
        InvalidDimensionsError: If value <= 0
    """
    size = check_index(value, name)
    if size <= 0:
        raise InvalidDimensionsError(
            f"{name}: must be positive, got {size}",
            operation='allocate',
            expected='> 0',
            actual=size,
        )
    return size


def check_index(value: Any, name: str) -> int:
    """
    Convert an index-like value to a Python int.

    Accepts anything implementing __index__ (int, numpy integers) but
    rejects bool and floats so that 1.0 or True never address an element.

    Raises:
        ValidationError: If value is not an integer
    """
    if isinstance(value, (bool, np.bool_)):
        raise ValidationError(f"{name}: expected an integer, got bool")
    try:
        return operator.index(value)
    except TypeError as e:
        raise ValidationError(
            f"{name}: expected an integer, got {type(value).__name__}"
        ) from e


def check_scalar(value: Any, name: str) -> float:
    """
    Verify value is a real number and return it as float.

    Raises:
        ValidationError: If value is not a real number
    """
    if isinstance(value, (bool, np.bool_)) or not isinstance(value, Real):
        raise ValidationError(
            f"{name}: expected a real number, got {type(value).__name__}"
        )
    return float(value)


def check_bounds(row: int, col: int, shape: tuple[int, int]) -> None:
    """
    Verify (row, col) addresses an element of a matrix with the given shape.

    Raises:
        OutOfBoundsError: If row or col is negative or past the last element
    """
    rows, cols = shape
    if row < 0 or col < 0 or row >= rows or col >= cols:
        raise OutOfBoundsError(
            f"index ({row}, {col}) out of bounds for {rows}x{cols} matrix",
            row=row,
            col=col,
            shape=shape,
        )


def check_same_shape(
    left: tuple[int, int],
    right: tuple[int, int],
    operation: str,
) -> None:
    """
    Verify two operands have identical shapes.

    Raises:
        InvalidDimensionsError: If shapes differ
    """
    if left != right:
        raise InvalidDimensionsError(
            f"{operation}: operands must have identical shapes, "
            f"got {left[0]}x{left[1]} and {right[0]}x{right[1]}",
            operation=operation,
            expected=left,
            actual=right,
        )


def check_inner_dims(
    left: tuple[int, int],
    right: tuple[int, int],
    operation: str,
) -> None:
    """
    Verify left.cols == right.rows for a matrix product.

    Raises:
        InvalidDimensionsError: If the shared dimension disagrees
    """
    if left[1] != right[0]:
        raise InvalidDimensionsError(
            f"{operation}: inner dimensions disagree, "
            f"got {left[0]}x{left[1]} and {right[0]}x{right[1]}",
            operation=operation,
            expected=left[1],
            actual=right[0],
        )


def check_square(shape: tuple[int, int], operation: str) -> None:
    """
    Verify a shape is square.

    Raises:
        InvalidDimensionsError: If rows != cols
    """
    rows, cols = shape
    if rows != cols:
        raise InvalidDimensionsError(
            f"{operation}: requires a square matrix, got {rows}x{cols}",
            operation=operation,
            expected='square',
            actual=shape,
        )
