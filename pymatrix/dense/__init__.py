"""
Dense matrix module.

Public API:
    Matrix              - Dense float64 matrix with exact-shape arithmetic
    identity(n)         - n x n identity
    transpose(m)        - Transpose
    determinant(m)      - Determinant by cofactor expansion
    minor(m, r, c)      - Minor
    cofactor(m, r, c)   - Signed minor
    cofactor_matrix(m)  - Matrix of cofactors
    adjoint(m)          - Adjugate
    inverse(m)          - Inverse via the adjugate
    is_square(m), is_singular(m)
"""

from pymatrix.dense.matrix import Matrix
from pymatrix.dense.solvers import (
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
]
