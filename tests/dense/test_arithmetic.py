"""
Tests for Matrix arithmetic, comparison and transpose.

Validates:
    - +, -, matrix *, @, scalar * (both sides), unary -
    - Exact-shape rules and that failing operations leave operands untouched
    - Compound operators update the left operand in place
    - Exact equality, shape-mismatch inequality, allclose
    - Algebraic properties on random integer matrices (exact in float64)
"""

import numpy as np
import pytest

from pymatrix import InvalidDimensionsError, Matrix, ValidationError


# ═══════════════════════════════════════════════════════════════════════
# Addition and subtraction
# ═══════════════════════════════════════════════════════════════════════


class TestAddSubtract:

    def test_add(self, m2):
        result = m2 + Matrix.from_array([[10, 20], [30, 40]])
        assert result.to_list() == [[11.0, 22.0], [33.0, 44.0]]

    def test_subtract(self, m2):
        result = m2 - Matrix.from_array([[1, 1], [1, 1]])
        assert result.to_list() == [[0.0, 1.0], [2.0, 3.0]]

    def test_subtract_self_is_zero(self, m3):
        assert m3 - m3 == Matrix(3, 3)

    def test_add_returns_new_matrix(self, m2):
        other = Matrix(2, 2)
        result = m2 + other
        assert result is not m2
        assert result is not other

    @pytest.mark.parametrize("op", ["add", "sub"])
    def test_mismatched_shapes_rejected(self, m2, op):
        other = Matrix(2, 3)
        with pytest.raises(InvalidDimensionsError, match="identical shapes"):
            if op == "add":
                m2 + other
            else:
                m2 - other
        assert m2.to_list() == [[1.0, 2.0], [3.0, 4.0]]
        assert other == Matrix(2, 3)

    def test_transposed_shape_rejected(self):
        with pytest.raises(InvalidDimensionsError):
            Matrix(2, 3) + Matrix(3, 2)

    def test_add_non_matrix_unsupported(self, m2):
        with pytest.raises(TypeError):
            m2 + 1.0

    def test_commutative(self, integer_matrix):
        a, b = integer_matrix(3, 4), integer_matrix(3, 4)
        assert a + b == b + a

    def test_associative(self, integer_matrix):
        a, b, c = integer_matrix(2, 5), integer_matrix(2, 5), integer_matrix(2, 5)
        assert (a + b) + c == a + (b + c)

    def test_negation(self, m2):
        assert -m2 == m2 * -1
        assert m2 + (-m2) == Matrix(2, 2)


# ═══════════════════════════════════════════════════════════════════════
# Multiplication
# ═══════════════════════════════════════════════════════════════════════


class TestMultiply:

    def test_matrix_product(self):
        a = Matrix.from_array([[1, 2, 3], [4, 5, 6]])
        b = Matrix.from_array([[7, 8], [9, 10], [11, 12]])
        result = a * b
        assert result.shape == (2, 2)
        assert result.to_list() == [[58.0, 64.0], [139.0, 154.0]]

    def test_matmul_operator_matches(self, integer_matrix):
        a, b = integer_matrix(3, 2), integer_matrix(2, 4)
        assert a @ b == a * b

    def test_outer_product_shape(self):
        col = Matrix.from_array([[1], [2], [3]])
        row = Matrix.from_array([[4, 5]])
        assert (col * row).shape == (3, 2)

    def test_inner_dimension_mismatch_rejected(self):
        a = Matrix(2, 3)
        b = Matrix(2, 2)
        with pytest.raises(InvalidDimensionsError, match="inner dimensions disagree") as exc_info:
            a * b
        assert exc_info.value.operation == "multiply"

    def test_matches_numpy_for_integers(self, integer_matrix):
        a, b = integer_matrix(4, 3), integer_matrix(3, 5)
        np.testing.assert_array_equal((a * b).to_numpy(), a.to_numpy() @ b.to_numpy())

    @pytest.mark.parametrize("n", [1, 2, 4])
    def test_identity_is_neutral(self, integer_matrix, n):
        m = integer_matrix(n, n)
        eye = Matrix.identity(n)
        assert eye * m == m
        assert m * eye == m

    def test_accumulates_in_k_order(self):
        """Each entry is ((0 + a0*b0) + a1*b1) + a2*b2, summed left to right."""
        values = [0.1, 0.2, 0.3]
        a = Matrix.from_array([values])
        b = Matrix.from_array([[1.0], [1.0], [1.0]])
        expected = 0.0
        for v in values:
            expected += v * 1.0
        assert (a * b).get(0, 0) == expected

    def test_scalar_right(self, m2):
        assert (m2 * 2).to_list() == [[2.0, 4.0], [6.0, 8.0]]

    def test_scalar_left(self, m2):
        assert 0.5 * m2 == m2 * 0.5

    def test_numpy_scalar_left(self, m2):
        result = np.float64(3.0) * m2
        assert isinstance(result, Matrix)
        assert result == m2 * 3

    def test_scalar_does_not_mutate(self, m2):
        m2 * 10
        assert m2.to_list() == [[1.0, 2.0], [3.0, 4.0]]

    def test_unsupported_operand(self, m2):
        with pytest.raises(TypeError):
            m2 * "2"
        with pytest.raises(TypeError):
            m2 * True


# ═══════════════════════════════════════════════════════════════════════
# Compound assignment
# ═══════════════════════════════════════════════════════════════════════


class TestCompoundOperators:
    """a op= b equals assigning a op b back into a, in place."""

    def test_iadd(self, m2):
        alias = m2
        expected = m2 + m2
        m2 += Matrix(m2)
        assert m2 is alias
        assert m2 == expected

    def test_isub(self, m2):
        alias = m2
        m2 -= Matrix.from_array([[1, 2], [3, 4]])
        assert alias is m2
        assert m2 == Matrix(2, 2)

    def test_imul_matrix_changes_shape(self):
        m = Matrix.from_array([[1, 2, 3]])
        alias = m
        m *= Matrix.from_array([[1], [1], [1]])
        assert alias is m
        assert m.shape == (1, 1)
        assert m.get(0, 0) == 6.0

    def test_imul_scalar(self, m3):
        expected = m3 * -2
        m3 *= -2
        assert m3 == expected

    def test_imatmul(self, m2):
        expected = m2 * m2
        m2 @= Matrix(m2)
        assert m2 == expected

    def test_iadd_with_self(self, m2):
        m2 += m2
        assert m2.to_list() == [[2.0, 4.0], [6.0, 8.0]]

    def test_failed_compound_leaves_operand(self, m2):
        with pytest.raises(InvalidDimensionsError):
            m2 += Matrix(3, 3)
        with pytest.raises(InvalidDimensionsError):
            m2 *= Matrix(3, 1)
        assert m2.to_list() == [[1.0, 2.0], [3.0, 4.0]]

    def test_result_does_not_alias_operand(self, m2):
        other = Matrix.identity(2)
        m2 *= other
        other[0, 0] = 100.0
        assert m2.get(0, 0) == 1.0


# ═══════════════════════════════════════════════════════════════════════
# Equality
# ═══════════════════════════════════════════════════════════════════════


class TestEquality:

    def test_equal_values(self, m2):
        assert m2 == Matrix.from_array([[1.0, 2.0], [3.0, 4.0]])
        assert not (m2 != Matrix.from_array([[1.0, 2.0], [3.0, 4.0]]))

    def test_exact_comparison(self, m2):
        nudged = Matrix(m2)
        nudged[1, 1] = 4.0 + 1e-15
        assert m2 != nudged

    def test_different_shapes_unequal(self):
        assert Matrix(2, 3) != Matrix(3, 2)
        assert Matrix(1, 1) != Matrix(2, 2)

    def test_self_comparison_short_circuits(self):
        m = Matrix(float("nan"))
        assert m == m
        assert m != Matrix(float("nan"))

    def test_negative_zero_equals_zero(self):
        assert Matrix(2, 2) * -1 == Matrix(2, 2)

    def test_non_matrix_unequal(self, m2):
        assert m2 != [[1, 2], [3, 4]]
        assert not (m2 == 1.0)

    def test_allclose(self, m2):
        nudged = Matrix(m2)
        nudged[1, 1] = 4.0 + 1e-15
        assert m2.allclose(nudged)
        assert not m2.allclose(m2 * 1.1)
        assert not m2.allclose(Matrix(2, 3))

    def test_allclose_rejects_non_matrix(self, m2):
        with pytest.raises(ValidationError):
            m2.allclose([[1, 2], [3, 4]])


# ═══════════════════════════════════════════════════════════════════════
# Transpose
# ═══════════════════════════════════════════════════════════════════════


class TestTranspose:

    def test_shape_and_values(self):
        m = Matrix.from_array([[1, 2, 3], [4, 5, 6]])
        t = m.transpose()
        assert t.shape == (3, 2)
        for i in range(2):
            for j in range(3):
                assert t.get(j, i) == m.get(i, j)

    def test_t_property(self, m3):
        assert m3.T == m3.transpose()

    @pytest.mark.parametrize("rows, cols", [(1, 1), (1, 4), (3, 2), (5, 5)])
    def test_double_transpose_is_identity(self, integer_matrix, rows, cols):
        m = integer_matrix(rows, cols)
        assert m.transpose().transpose() == m

    def test_product_rule(self, integer_matrix):
        a, b = integer_matrix(2, 3), integer_matrix(3, 4)
        assert (a * b).transpose() == b.transpose() * a.transpose()
