"""
Exception hierarchy for pymatrix.

All exceptions inherit from PyMatrixError to allow catching any
library-specific error. Two failure kinds matter to callers of Matrix:

    OutOfBoundsError:       an element index falls outside the matrix
    InvalidDimensionsError: an operation's shape precondition fails

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class PyMatrixError(Exception):
    """Base exception for all pymatrix errors."""
    pass


class ValidationError(PyMatrixError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks
    (non-numeric data, non-integer sizes or indices).
    """
    pass


class OutOfBoundsError(ValidationError, IndexError):
    """
    Element index outside the matrix.

    Raised by element access (read or write) when either index falls
    outside [0, rows) / [0, cols). Negative indices never wrap around.
    Also an IndexError, so generic index handling keeps working.

    Attributes:
        row: Requested row index
        col: Requested column index
        shape: (rows, cols) of the matrix that was accessed
    """

    def __init__(
        self,
        message: str,
        row: int | None = None,
        col: int | None = None,
        shape: tuple[int, int] | None = None,
    ):
        super().__init__(message)
        self.row = row
        self.col = col
        self.shape = shape


class DimensionError(ValidationError):
    """
    Array dimensions are incorrect or inconsistent.

    Raised when array shapes don't match expected dimensions or
    when multiple arrays have inconsistent shapes.
    """
    pass


class InvalidDimensionsError(DimensionError):
    """
    Shape precondition of a matrix operation failed.

    Raised for allocation with non-positive rows/cols, addition or
    subtraction of mismatched shapes, multiplication with incompatible
    inner dimensions, determinant/minor/cofactor of a non-square matrix,
    and inversion of a singular matrix.

    Attributes:
        operation: Name of the operation that rejected its operands
        expected: Shape (or shape rule) the operation required
        actual: Shape(s) it was given
    """

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        expected: object = None,
        actual: object = None,
    ):
        super().__init__(message)
        self.operation = operation
        self.expected = expected
        self.actual = actual


class NumericalError(PyMatrixError):
    """
    Numerical computation failed.

    Base class for errors arising from numerical issues during computation.
    """
    pass


class SingularMatrixError(InvalidDimensionsError, NumericalError):
    """
    Matrix is singular.

    Raised when inversion is requested for a square matrix whose
    determinant is exactly zero. Subclasses InvalidDimensionsError so
    callers handling that kind also catch singular inversions.

    Attributes:
        matrix_name: Name/description of the problematic matrix
        determinant: The determinant that was found (0.0)
    """

    def __init__(
        self,
        message: str,
        matrix_name: str | None = None,
        determinant: float | None = None,
    ):
        super().__init__(message, operation='inverse')
        self.matrix_name = matrix_name
        self.determinant = determinant
