"""
Tests for accessors, elementwise and scalar arithmetic, and operators.
"""

import numpy as np
import pytest

from pymatrix import Matrix
from pymatrix.core.exceptions import (
    ColumnOutOfRangeError,
    DivisionByZeroError,
    IndexOutOfRangeError,
    NumericalError,
    ShapeMismatchError,
    ValidationError,
)


class TestAccessors:

    def test_column_values(self):
        m = Matrix([[1, 2, 3], [4, 5, 6]])
        np.testing.assert_array_equal(m.get_column_values(1), [2, 5])

    def test_column_out_of_range(self):
        m = Matrix([[1, 2, 3], [4, 5, 6]])
        with pytest.raises(ColumnOutOfRangeError):
            m.get_column_values(4)

    def test_column_equal_to_count_out_of_range(self):
        m = Matrix([[1, 2, 3], [4, 5, 6]])
        with pytest.raises(IndexOutOfRangeError):
            m.get_column_values(3)

    def test_negative_column_rejected(self):
        m = Matrix([[1, 2, 3]])
        with pytest.raises(ColumnOutOfRangeError):
            m.get_column_values(-1)

    def test_to_scalar_any_shape(self):
        m = Matrix([[1, 2, 3], [3, 2, 3]])
        assert m.to_scalar() == 1
        assert isinstance(m.to_scalar(), float)

    def test_is_square(self, square3):
        assert square3.is_square()
        assert not Matrix([[1, 2]]).is_square()

    def test_shape_invariant(self, rng):
        for rows, columns in [(1, 1), (1, 5), (5, 1), (3, 4)]:
            m = Matrix(rng.standard_normal((rows, columns)))
            arr = m.to_array()
            assert len(arr) == m.rows
            assert all(len(row) == m.columns for row in arr)

    def test_repr(self):
        assert repr(Matrix([[1, 2]])) == "Matrix([[1.0, 2.0]])"


class TestElementwise:
    """add/subtract require identical shapes."""

    def test_add_rows(self):
        m1 = Matrix([1, 1, 1])
        m2 = Matrix([2, 2, 2])
        np.testing.assert_array_equal(m1.add(m2).to_array()[0], [3, 3, 3])

    def test_subtract_rows(self):
        m1 = Matrix([1, 1, 1])
        m2 = Matrix([2, 2, 2])
        np.testing.assert_array_equal(m1.subtract(m2).to_array()[0], [-1, -1, -1])

    def test_add_matrices(self):
        m = Matrix([[1, 2], [3, 4]])
        np.testing.assert_array_equal(m.add(m).to_array(), [[2, 4], [6, 8]])

    def test_add_shape_mismatch(self):
        with pytest.raises(ShapeMismatchError) as exc_info:
            Matrix([[1, 2, 3]]).add(Matrix([[1, 2]]))
        assert exc_info.value.operation == "add"
        assert exc_info.value.left_shape == (1, 3)
        assert exc_info.value.right_shape == (1, 2)

    def test_subtract_transposed_shape_mismatch(self):
        m = Matrix([[1, 2, 3], [4, 5, 6]])
        with pytest.raises(ShapeMismatchError, match="subtract"):
            m.subtract(m.transpose())

    def test_add_requires_matrix(self):
        with pytest.raises(TypeError):
            Matrix([[1]]).add([[1]])


class TestScalar:

    def test_multiply_by_scalar(self):
        m = Matrix([[4, 6, 8], [2, 10, 20]])
        np.testing.assert_array_equal(
            m.multiply_by_scalar(-2).to_array(),
            [[-8, -12, -16], [-4, -20, -40]],
        )

    def test_divide_by_scalar(self):
        m = Matrix([[4, 6, 8], [2, 10, 20]])
        np.testing.assert_array_equal(
            m.divide_by_scalar(2).to_array(),
            [[2, 3, 4], [1, 5, 10]],
        )

    @pytest.mark.parametrize("zero", [0, 0.0, -0.0, np.float64(0)])
    def test_divide_by_zero(self, zero):
        with pytest.raises(DivisionByZeroError):
            Matrix([[1, 2]]).divide_by_scalar(zero)

    def test_non_numeric_scalar(self):
        with pytest.raises(ValidationError):
            Matrix([[1, 2]]).multiply_by_scalar("2")

    def test_nan_scalar(self):
        with pytest.raises(ValidationError):
            Matrix([[1, 2]]).divide_by_scalar(float('nan'))


class TestOverflow:
    """Finite operands whose result leaves float64 range are rejected."""

    def test_multiply_by_scalar(self):
        with pytest.raises(NumericalError, match="multiply_by_scalar"):
            Matrix([[1e308]]).multiply_by_scalar(10)

    def test_scalar_operator(self):
        with pytest.raises(NumericalError):
            Matrix([[1.0, 1e308]]) * 1e10

    def test_add(self):
        m = Matrix([[1e308, 1.0]])
        with pytest.raises(NumericalError, match="add"):
            m.add(m)

    def test_subtract(self):
        with pytest.raises(NumericalError, match="subtract"):
            Matrix([[-1e308]]) - Matrix([[1e308]])

    def test_divide_by_tiny_scalar(self):
        with pytest.raises(NumericalError, match="divide_by_scalar"):
            Matrix([[1e308]]).divide_by_scalar(1e-308)

    def test_multiply(self):
        with pytest.raises(NumericalError, match="multiply"):
            Matrix([[1e200]]).multiply(Matrix([[1e200]]))

    def test_determinant(self):
        with pytest.raises(NumericalError, match="get_determinant"):
            Matrix([[1e200, 0], [0, 1e200]]).get_determinant()

    def test_inverse_of_subnormal(self):
        with pytest.raises(NumericalError, match="inverse"):
            Matrix([[1e-320]]).inverse()

    def test_large_but_finite_results_pass(self):
        m = Matrix([[1e300]])
        assert m.multiply_by_scalar(10).to_scalar() == pytest.approx(1e301)
        assert m.add(m).to_scalar() == 2e300


class TestOperators:
    """Operators delegate to the named methods."""

    def test_add_sub(self):
        a = Matrix([[1, 2], [3, 4]])
        b = Matrix([[1, 1], [1, 1]])
        assert a + b == a.add(b)
        assert a - b == a.subtract(b)

    def test_matmul(self):
        a = Matrix([[1, 2], [3, 4]])
        assert a @ a == a.multiply(a)

    def test_scalar_mul_both_sides(self):
        a = Matrix([[1, 2], [3, 4]])
        assert a * 2 == a.multiply_by_scalar(2)
        assert 2 * a == a.multiply_by_scalar(2)

    def test_numpy_scalar_mul_returns_matrix(self):
        a = Matrix([[1, 2]])
        assert isinstance(np.float64(2.0) * a, Matrix)

    def test_truediv(self):
        a = Matrix([[2, 4]])
        assert a / 2 == Matrix([[1, 2]])

    def test_neg(self):
        assert -Matrix([[1, -2]]) == Matrix([[-1, 2]])

    def test_matrix_times_matrix_is_ambiguous(self):
        a = Matrix([[1, 2], [3, 4]])
        with pytest.raises(TypeError, match="@"):
            a * a

    def test_add_scalar_unsupported(self):
        with pytest.raises(TypeError):
            Matrix([[1]]) + 1


class TestEquality:

    def test_equal_matrices(self):
        assert Matrix([[1, 2]]) == Matrix([[1.0, 2.0]])

    def test_shape_differs(self):
        assert Matrix([[1, 2]]) != Matrix.from_flat_array([1, 2])

    def test_hash_consistent_with_eq(self):
        a = Matrix([[0.0, 1.0]])
        b = Matrix([[-0.0, 1.0]])
        assert a == b
        assert hash(a) == hash(b)
        assert len({a, b}) == 1

    def test_not_equal_to_list(self):
        assert Matrix([[1, 2]]) != [[1, 2]]

    def test_allclose(self):
        a = Matrix([[1.0, 2.0]])
        b = Matrix([[1.00001, 2.0]])
        assert a.allclose(b)
        assert not a.allclose(b, rtol=0.0, atol=1e-8)
        assert not a.allclose(Matrix([[1.0], [2.0]]))
