"""
Exception hierarchy for PyMatrix.

All exceptions inherit from PyMatrixError to allow catching any
library-specific error. Shape and index problems are ValidationErrors
(the caller supplied something unusable); singularity and division by
zero are NumericalErrors (the inputs were well-formed but the arithmetic
has no answer).

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class PyMatrixError(Exception):
    """Base exception for all PyMatrix errors."""
    pass


class ValidationError(PyMatrixError):
    """
    Input validation failed.

    Raised when user-provided data or scalars fail validation checks
    (non-numeric, non-finite, wrong nesting).
    """
    pass


class DimensionError(ValidationError):
    """
    Matrix dimensions are incorrect or inconsistent.

    Base class for every shape-related failure.
    """
    pass


class InvalidShapeError(DimensionError):
    """
    Data is not a non-empty rectangular grid.

    Attributes:
        row_index: Index of the first offending row, if known
        expected_length: Row length established by the first row
        actual_length: Length of the offending row
    """

    def __init__(
        self,
        message: str,
        row_index: int | None = None,
        expected_length: int | None = None,
        actual_length: int | None = None
    ):
        super().__init__(message)
        self.row_index = row_index
        self.expected_length = expected_length
        self.actual_length = actual_length


class ShapeMismatchError(DimensionError):
    """
    Operands have incompatible dimensions for the requested operation.

    Attributes:
        operation: Name of the operation ('add', 'multiply', 'dot', ...)
        left_shape: Shape of the left operand
        right_shape: Shape of the right operand
    """

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        left_shape: tuple[int, ...] | None = None,
        right_shape: tuple[int, ...] | None = None
    ):
        super().__init__(message)
        self.operation = operation
        self.left_shape = left_shape
        self.right_shape = right_shape


class NotSquareError(DimensionError):
    """
    A square matrix was required.

    Attributes:
        shape: The (rows, columns) shape that was supplied
    """

    def __init__(self, message: str, shape: tuple[int, int] | None = None):
        super().__init__(message)
        self.shape = shape


class IndexOutOfRangeError(ValidationError):
    """
    A row or column index lies outside the matrix.

    Attributes:
        index: The offending index
        bound: Exclusive upper bound for valid indices
        axis: 'row' or 'column'
    """

    def __init__(
        self,
        message: str,
        index: int | None = None,
        bound: int | None = None,
        axis: str | None = None
    ):
        super().__init__(message)
        self.index = index
        self.bound = bound
        self.axis = axis


class ColumnOutOfRangeError(IndexOutOfRangeError):
    """A column accessor received an index outside [0, columns)."""
    pass


class NumericalError(PyMatrixError):
    """
    Numerical computation failed.

    Base class for errors arising from the arithmetic itself rather than
    from malformed inputs.
    """
    pass


class SingularMatrixError(NumericalError):
    """
    Matrix is singular.

    Raised when an inverse is requested but the determinant is zero
    (or within the caller's tolerance of zero).

    Attributes:
        matrix_name: Name/description of the problematic matrix
        determinant: The determinant that was computed
        tolerance: The singularity threshold that was applied
    """

    def __init__(
        self,
        message: str,
        matrix_name: str | None = None,
        determinant: float | None = None,
        tolerance: float | None = None
    ):
        super().__init__(message)
        self.matrix_name = matrix_name
        self.determinant = determinant
        self.tolerance = tolerance


class DivisionByZeroError(NumericalError):
    """Scalar division by zero was requested."""
    pass
