"""
Core infrastructure for pymatrix.

Shared abstractions used by the dense matrix module.

Key components:
    exceptions: Exception hierarchy (OutOfBounds / InvalidDimensions kinds)
    validation: Input validators
    precision: float64 constants and tolerance comparison
"""

from pymatrix.core.exceptions import (
    PyMatrixError,
    ValidationError,
    OutOfBoundsError,
    DimensionError,
    InvalidDimensionsError,
    NumericalError,
    SingularMatrixError,
)

__all__ = [
    # Exceptions
    "PyMatrixError",
    "ValidationError",
    "OutOfBoundsError",
    "DimensionError",
    "InvalidDimensionsError",
    "NumericalError",
    "SingularMatrixError",
]
