"""
pymatrix: dense matrices with cofactor-expansion determinant and inverse.

Submodules:
    core: Exceptions, input validation, precision constants
    dense: The Matrix type and its functional interface
"""

__version__ = "0.1.0"

from pymatrix.core.exceptions import (
    PyMatrixError,
    ValidationError,
    OutOfBoundsError,
    DimensionError,
    InvalidDimensionsError,
    NumericalError,
    SingularMatrixError,
)
from pymatrix.dense import (
    Matrix,
    identity,
    transpose,
    determinant,
    minor,
    cofactor,
    cofactor_matrix,
    adjoint,
    inverse,
    is_square,
    is_singular,
)

__all__ = [
    "__version__",
    # Matrix
    "Matrix",
    "identity",
    "transpose",
    "determinant",
    "minor",
    "cofactor",
    "cofactor_matrix",
    "adjoint",
    "inverse",
    "is_square",
    "is_singular",
    # Exceptions
    "PyMatrixError",
    "ValidationError",
    "OutOfBoundsError",
    "DimensionError",
    "InvalidDimensionsError",
    "NumericalError",
    "SingularMatrixError",
]
