"""
Matrix: immutable dense matrix of finite float64 values.

Every operation returns a new Matrix; no instance is ever modified after
construction, so instances may be shared freely across threads.
"""

from __future__ import annotations

import numbers
import warnings
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pymatrix.core.compute.tolerances import COFACTOR_FP64, COFACTOR_WARN_SIZE, SINGULAR_TOL
from pymatrix.core.exceptions import (
    ColumnOutOfRangeError,
    DivisionByZeroError,
    InvalidShapeError,
    SingularMatrixError,
    ValidationError,
)
from pymatrix.core.validation import (
    check_1d,
    check_array,
    check_finite,
    check_finite_result,
    check_index,
    check_inner_dimensions,
    check_not_empty,
    check_same_shape,
    check_scalar,
    check_square,
)
from pymatrix.matrix import _cofactor, _products
from pymatrix.matrix.inputs import MatrixInput, TaggedInput, VectorInput, as_input


def _warn_if_expensive(n: int, operation: str) -> None:
    if n > COFACTOR_WARN_SIZE:
        warnings.warn(
            f"{operation} on a {n}x{n} matrix uses cofactor expansion, whose cost "
            f"grows factorially; sizes above {COFACTOR_WARN_SIZE} may be very slow.",
            RuntimeWarning,
            stacklevel=3,
        )


class Matrix:
    """
    Immutable dense matrix.

    Construction:
        Matrix([[1, 2], [3, 4]])       nested rows -> 2x2
        Matrix([1, 2, 3])              flat vector -> 1x3 row
        Matrix.from_flat_array([1, 2, 3])   -> 3x1 column
        Matrix.identity(3)

    Raw input is classified once into VectorInput/MatrixInput (see
    pymatrix.matrix.inputs); pass a tagged input to skip the inspection.

    Raises (on construction):
        InvalidShapeError: Ragged or empty rows
        ValidationError: Non-numeric or non-finite values
    """

    __slots__ = ('_data', '_rows', '_columns')

    # numpy defers to our reflected operators (np.float64(2) * m -> Matrix)
    __array_ufunc__ = None

    def __init__(self, data: ArrayLike | TaggedInput | Matrix):
        if isinstance(data, Matrix):
            array = data._data
        else:
            tagged = as_input(data, "data")
            if isinstance(tagged, VectorInput):
                array = tagged.values.reshape(1, -1)
            else:
                array = tagged.rows
        self._assign(array)

    @classmethod
    def _wrap_result(cls, compute: Any, operation: str) -> Matrix:
        """Run an arithmetic kernel and reject results that overflowed float64."""
        with np.errstate(over='ignore', invalid='ignore'):
            array = compute()
        check_finite_result(array, operation)
        return cls._wrap(array)

    def _assign(self, array: NDArray[np.floating[Any]]) -> None:
        # Callers hand over arrays nobody else references
        array.flags.writeable = False
        object.__setattr__(self, '_data', array)
        object.__setattr__(self, '_rows', int(array.shape[0]))
        object.__setattr__(self, '_columns', int(array.shape[1]))

    @classmethod
    def _wrap(cls, array: NDArray[np.floating[Any]]) -> Matrix:
        """Build from an already-validated 2D float64 array, skipping input checks."""
        matrix = object.__new__(cls)
        matrix._assign(array)
        return matrix

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"Matrix is immutable; cannot set {name!r}")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"Matrix is immutable; cannot delete {name!r}")

    # --- Alternative constructors ---

    @classmethod
    def from_flat_array(cls, values: ArrayLike) -> Matrix:
        """
        Build an Nx1 column matrix, one element per row.

        Unlike Matrix(values), which reads a flat sequence as a single row,
        this always produces a column.
        """
        array = check_array(values, "values")
        check_1d(array, "values")
        check_not_empty(array, "values")
        check_finite(array, "values")
        return cls._wrap(array.reshape(-1, 1))

    @classmethod
    def identity(cls, n: int) -> Matrix:
        """n x n identity matrix."""
        if isinstance(n, (bool, np.bool_)) or not isinstance(n, numbers.Integral) or n < 1:
            raise ValidationError(f"n: expected a positive integer, got {n!r}")
        return cls._wrap(np.eye(int(n), dtype=np.float64))

    # --- Shape & accessors ---

    @property
    def rows(self) -> int:
        """Number of rows."""
        return self._rows

    @property
    def columns(self) -> int:
        """Number of columns."""
        return self._columns

    @property
    def shape(self) -> tuple[int, int]:
        """(rows, columns)."""
        return self._rows, self._columns

    def get_rows(self) -> int:
        return self._rows

    def get_columns(self) -> int:
        return self._columns

    def to_array(self) -> NDArray[np.floating[Any]]:
        """
        Underlying row-major data as a read-only (rows, columns) array.

        The result is a view that does not own its memory, so its
        writeable flag cannot be switched back on.
        """
        return self._data.view()

    def to_list(self) -> list[list[float]]:
        """Fresh nested list of Python floats."""
        return self._data.tolist()

    def to_scalar(self) -> float:
        """
        Entry (0, 0).

        Defined for any shape; callers decide when a 1x1 reading is meaningful.
        """
        return float(self._data[0, 0])

    def get_column_values(self, index: int) -> NDArray[np.floating[Any]]:
        """
        Values of one column in row order, shape (rows,).

        Raises:
            ColumnOutOfRangeError: If index is outside [0, columns)
        """
        idx = check_index(index, self._columns, 'column', "index",
                          error_cls=ColumnOutOfRangeError)
        return self._data[:, idx].copy()

    def is_square(self) -> bool:
        return self._rows == self._columns

    # --- Elementwise & scalar operations ---

    def add(self, other: Matrix) -> Matrix:
        """
        Elementwise sum.

        Raises:
            ShapeMismatchError: If shapes differ
        """
        other = _coerce(other, "other")
        check_same_shape(self.shape, other.shape, "add")
        return Matrix._wrap_result(lambda: self._data + other._data, "add")

    def subtract(self, other: Matrix) -> Matrix:
        """
        Elementwise difference.

        Raises:
            ShapeMismatchError: If shapes differ
        """
        other = _coerce(other, "other")
        check_same_shape(self.shape, other.shape, "subtract")
        return Matrix._wrap_result(lambda: self._data - other._data, "subtract")

    def multiply_by_scalar(self, value: float) -> Matrix:
        k = check_scalar(value, "value")
        return Matrix._wrap_result(lambda: self._data * k, "multiply_by_scalar")

    def divide_by_scalar(self, value: float) -> Matrix:
        """
        Divide every entry by a scalar.

        Raises:
            DivisionByZeroError: If value == 0
            NumericalError: If a quotient overflows float64 (tiny divisor)
        """
        k = check_scalar(value, "value")
        if k == 0.0:
            raise DivisionByZeroError("divide_by_scalar: division by zero")
        return Matrix._wrap_result(lambda: self._data / k, "divide_by_scalar")

    # --- Products ---

    def transpose(self) -> Matrix:
        return Matrix._wrap(self._data.T.copy())

    def multiply(self, other: Matrix) -> Matrix:
        """
        Matrix product self @ other.

        Raises:
            ShapeMismatchError: If self.columns != other.rows
        """
        other = _coerce(other, "other")
        check_inner_dimensions(self.shape, other.shape, "multiply")
        return Matrix._wrap_result(lambda: self._data @ other._data, "multiply")

    transpose_array = staticmethod(_products.transpose_array)
    dot = staticmethod(_products.dot)

    # --- Minors, determinant, inverse ---

    def cross_out(self, row: int, column: int) -> Matrix:
        """
        Minor matrix with `row` and `column` removed (zero-based).

        Raises:
            IndexOutOfRangeError: If either index is out of bounds
            InvalidShapeError: If the matrix has a single row or column
        """
        r = check_index(row, self._rows, 'row', "row")
        c = check_index(column, self._columns, 'column', "column")
        if self._rows < 2 or self._columns < 2:
            raise InvalidShapeError(
                f"cross_out: {self._rows}x{self._columns} matrix has no non-empty minor"
            )
        return Matrix._wrap(_cofactor.minor(self._data, r, c))

    def get_determinant(self) -> float:
        """
        Determinant by recursive Laplace expansion along the first row.

        Raises:
            NotSquareError: If rows != columns
            NumericalError: If the determinant overflows float64
        """
        check_square(self.shape, "get_determinant")
        _warn_if_expensive(self._rows, "get_determinant")
        return self._checked_determinant("get_determinant")

    def _checked_determinant(self, operation: str) -> float:
        with np.errstate(over='ignore', invalid='ignore'):
            det = _cofactor.determinant(self._data)
        check_finite_result(np.asarray(det), operation)
        return det

    def is_singular(self, tol: float = SINGULAR_TOL) -> bool:
        """
        Whether |det| <= tol.

        Raises:
            NotSquareError: If rows != columns
        """
        return abs(self.get_determinant()) <= tol

    def inverse(self, *, tol: float = SINGULAR_TOL) -> Matrix:
        """
        Inverse via the adjugate: adj(A) / det(A).

        Args:
            tol: Matrices with |det| <= tol are rejected as singular. The
                default only rejects an exact zero determinant.

        Raises:
            NotSquareError: If rows != columns
            SingularMatrixError: If |det| <= tol
            NumericalError: If the determinant or any entry overflows float64
        """
        check_square(self.shape, "inverse")
        _warn_if_expensive(self._rows, "inverse")
        det = self._checked_determinant("inverse")
        if abs(det) <= tol:
            raise SingularMatrixError(
                f"inverse: matrix is singular (det={det}, tol={tol})",
                matrix_name='A', determinant=det, tolerance=tol,
            )
        return Matrix._wrap_result(lambda: _cofactor.adjugate(self._data) / det, "inverse")

    # --- Comparison ---

    def allclose(self, other: Matrix, *, rtol: float = COFACTOR_FP64.rtol,
                 atol: float = COFACTOR_FP64.atol) -> bool:
        """Same shape and all entries within tolerance (numpy.allclose semantics)."""
        other = _coerce(other, "other")
        if self.shape != other.shape:
            return False
        return bool(np.allclose(self._data, other._data, rtol=rtol, atol=atol))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.shape == other.shape and bool(np.array_equal(self._data, other._data))

    def __hash__(self) -> int:
        # -0.0 + 0.0 == +0.0, so equal matrices hash equal
        return hash((self.shape, (self._data + 0.0).tobytes()))

    # --- Operators ---

    def __add__(self, other: Any) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: Any) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.subtract(other)

    def __matmul__(self, other: Any) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.multiply(other)

    def __mul__(self, other: Any) -> Matrix:
        if isinstance(other, Matrix):
            raise TypeError("Matrix * Matrix is ambiguous; use @ or multiply()")
        if not isinstance(other, numbers.Real):
            return NotImplemented
        return self.multiply_by_scalar(other)

    __rmul__ = __mul__

    def __truediv__(self, other: Any) -> Matrix:
        if not isinstance(other, numbers.Real):
            return NotImplemented
        return self.divide_by_scalar(other)

    def __neg__(self) -> Matrix:
        return self.multiply_by_scalar(-1)

    # --- Interop ---

    def __array__(self, dtype: Any = None, copy: Any = None) -> NDArray[Any]:
        if copy is False:
            raise ValueError("Matrix data is read-only; it can only be exported as a copy")
        return np.array(self._data, dtype=dtype)

    def __repr__(self) -> str:
        return f"Matrix({self.to_list()!r})"


def _coerce(other: Any, name: str) -> Matrix:
    if isinstance(other, Matrix):
        return other
    if isinstance(other, (MatrixInput, VectorInput)):
        return Matrix(other)
    raise TypeError(f"{name}: expected Matrix, got {type(other).__name__}")


def determinant(data: ArrayLike | TaggedInput | Matrix) -> float:
    """Determinant of a Matrix or raw square data. See Matrix.get_determinant."""
    return Matrix(data).get_determinant()


def inverse(data: ArrayLike | TaggedInput | Matrix, *, tol: float = SINGULAR_TOL) -> Matrix:
    """Inverse of a Matrix or raw square data. See Matrix.inverse."""
    return Matrix(data).inverse(tol=tol)
